"""Collaboration invite email content."""

from html import escape

from pydantic import BaseModel

from eventflow.domain.model import Invite
from eventflow.domain.value import role_summary, role_title

BRAND_COLOR = "#5b5bd6"


class InviteEmail(BaseModel):
    """Rendered invite email."""

    subject: str
    html: str


def render_invite_email(invite: Invite, accept_url: str) -> InviteEmail:
    """Render the invite email for one invite.

    Args:
        invite: Invite with its event joined
        accept_url: Public accept-URL for the invite's token

    Returns:
        Subject and HTML body
    """
    event_name = invite.event.name if invite.event else ""
    event_date = invite.event.long_date() if invite.event else ""
    heading = escape(event_name) + (f" · {escape(event_date)}" if event_date else "")
    url = escape(accept_url, quote=True)

    html = f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><meta name="viewport" content="width=device-width,initial-scale=1"></head>
<body style="margin:0;padding:0;background:#f5f5f7;font-family:'Helvetica Neue',Arial,sans-serif;">
  <table width="100%" cellpadding="0" cellspacing="0" style="background:#f5f5f7;">
    <tr><td align="center" style="padding:48px 16px;">
      <table width="100%" cellpadding="0" cellspacing="0" style="max-width:520px;background:#ffffff;border:1.5px solid #e5e5ea;border-radius:18px;">
        <tr><td align="center" style="padding:32px 36px 20px;">
          <h1 style="font-size:24px;font-weight:800;color:#1d1d1f;margin:0 0 8px;">You've been invited to collaborate</h1>
          <div style="font-size:16px;font-weight:700;color:{BRAND_COLOR};">{heading}</div>
        </td></tr>
        <tr><td style="padding:0 36px 24px;">
          <div style="background:#f5f5f7;border:1.5px solid #e5e5ea;border-radius:12px;padding:16px 18px;">
            <div style="font-size:11px;color:#8e8e93;text-transform:uppercase;margin-bottom:6px;">Your role</div>
            <div style="font-size:15px;font-weight:700;color:#1d1d1f;">{escape(role_title(invite.role))}</div>
            <div style="font-size:12px;color:#6e6e73;margin-top:3px;">{escape(role_summary(invite.role))}</div>
          </div>
        </td></tr>
        <tr><td align="center" style="padding:8px 36px 20px;">
          <a href="{url}" style="display:inline-block;background:{BRAND_COLOR};color:#ffffff;font-size:15px;font-weight:700;padding:14px 36px;border-radius:12px;text-decoration:none;">Accept Invitation &rarr;</a>
        </td></tr>
        <tr><td align="center" style="padding:4px 36px 32px;">
          <p style="font-size:12px;color:#8e8e93;margin:0;line-height:1.6;">
            Or copy this link:<br>
            <a href="{url}" style="color:{BRAND_COLOR};word-break:break-all;">{url}</a>
          </p>
        </td></tr>
      </table>
      <p style="font-size:11px;color:#8e8e93;margin:24px 0 0;">
        Powered by <span style="color:{BRAND_COLOR};font-weight:600;">EventFlow</span>&nbsp;&middot;&nbsp;You can decline from within the app after signing in.
      </p>
    </td></tr>
  </table>
</body>
</html>"""

    return InviteEmail(subject=f"Collaboration invite — {event_name}", html=html)
