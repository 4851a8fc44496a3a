"""Observability configuration using Logfire.

Application code logs and traces through logfire directly:

    import logfire

    logfire.info("Invite accepted", invite_id=str(invite.id))

    with logfire.span("send_invite.execute", invite_id=invite_id):
        ...

Invite tokens are bearer credentials. Code logs them through
``InviteToken.redacted()``; the scrubbing patterns below catch anything
that slips through under a token-like attribute name, and request spans
record the route template rather than the raw accept path.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from eventflow.config import Settings

SERVICE_NAME = "eventflow-backend"

# Attribute names scrubbed on top of logfire's defaults (which already
# cover cookies, sessions, secrets and authorization headers). Plain
# ``token`` attributes carry the redacted prefix and stay readable.
SCRUB_PATTERNS = ["invite_token", "refresh_token", "access_token"]


def should_send(settings: Settings) -> bool:
    """Whether to ship telemetry to Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise send when a token is set.
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending. Without it
    everything goes to the console only.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    """Route template instead of the concrete path, so tokens stay out."""
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method

    route = request.scope.get("route") if hasattr(request, "scope") else None
    result["route"] = getattr(route, "path", None) or "unmatched"
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with its route, method and duration."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the engine, tagging them with span context."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls to the Gmail token and send endpoints."""
    logfire.instrument_httpx()
