"""RFC-822 message construction for the Gmail API.

The send endpoint takes the whole message base64url-encoded without
padding in a ``raw`` field.
"""

from base64 import urlsafe_b64encode
from email.charset import BASE64, Charset
from email.header import Header
from email.mime.text import MIMEText
from email.policy import compat32
from email.utils import formataddr

# UTF-8 with base64 encoded-words in headers (``=?utf-8?b?...?=``)
_HEADER_CHARSET = Charset("utf-8")
_HEADER_CHARSET.header_encoding = BASE64

_CRLF = compat32.clone(linesep="\r\n")


def build_raw_message(
    sender: str, sender_name: str, to: str, subject: str, html: str
) -> bytes:
    """Build an HTML email as RFC-822 bytes.

    The subject is always a UTF-8 base64 encoded-word so any unicode
    survives transport.

    Args:
        sender: Sender address
        sender_name: Sender display name
        to: Recipient address
        subject: Subject line
        html: HTML body

    Returns:
        Message bytes with CRLF line endings
    """
    message = MIMEText(html, "html", "utf-8")
    message["From"] = formataddr((sender_name, sender))
    message["To"] = to
    message["Subject"] = Header(subject, _HEADER_CHARSET)
    return message.as_bytes(policy=_CRLF)


def encode_raw_message(message: bytes) -> str:
    """Encode message bytes for the Gmail ``raw`` field.

    Standard base64 made URL-safe (``+`` -> ``-``, ``/`` -> ``_``) with the
    trailing ``=`` padding stripped.
    """
    return urlsafe_b64encode(message).decode("ascii").rstrip("=")
