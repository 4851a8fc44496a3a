"""Collaboration invite routes.

The accept-URL ``/collab/accept/{token}`` is embedded in sent emails and
must stay stable. The signed-in identity comes from the session cookie;
the pending-invite handoff travels in its own session cookie.

Navigation targets are client routes; ``_frontend_url`` makes them
absolute only for the ``Location`` header of a redirect.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from eventflow.adapter.browser import (
    CookiePendingInviteHandoff,
    LocalIdentityProvider,
    RecordingNavigator,
)
from eventflow.adapter.error import ProviderError
from eventflow.application.usecase.collab import (
    AcceptanceView,
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    InviteAcceptanceFlow,
    ListPendingInvitesRequest,
    ListPendingInvitesResponse,
    ListPendingInvitesUseCase,
    PendingInviteCompleter,
    SendInviteRequest,
    SendInviteResponse,
    SendInviteUseCase,
    render_acceptance,
)
from eventflow.config import Settings
from eventflow.domain.error import (
    DuplicateInviteError,
    InviteNotFoundError,
    NotFoundError,
    ValidationError,
)
from eventflow.domain.service import InviteService, JWTService
from eventflow.domain.value import AcceptanceStep, IdentitySession, InviteToken

router = APIRouter(prefix="/collab", tags=["collab"], route_class=DishkaRoute)


class CreateInviteAPIRequest(BaseModel):
    """API request for inviting a collaborator."""

    event_id: str
    email: str
    role: str


def _session(
    request: Request, settings: Settings, jwt_service: JWTService
) -> IdentitySession | None:
    return jwt_service.get_session(request.cookies.get(settings.auth.session_cookie))


def _require_session(
    request: Request, settings: Settings, jwt_service: JWTService
) -> IdentitySession:
    session = _session(request, settings, jwt_service)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return session


def _handoff(request: Request, settings: Settings) -> CookiePendingInviteHandoff:
    cookie = settings.collab.pending_cookie
    return CookiePendingInviteHandoff(cookie, request.cookies.get(cookie))


def _parse_token(token: str) -> InviteToken | None:
    try:
        return InviteToken(root=token)
    except ValueError:
        return None


def _frontend_url(settings: Settings, location: str) -> str:
    """Absolute frontend URL for a client route."""
    return f"{settings.app.base_url.rstrip('/')}{location}"


@router.get("/accept/{token}", response_model=AcceptanceView)
async def open_invite(
    token: str,
    request: Request,
    response: Response,
    invite_service: FromDishka[InviteService],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> AcceptanceView:
    """Resolve an accept-URL.

    Accepts immediately when signed in; otherwise shows the preview and
    remembers the token for after sign-in.

    Returns:
        The acceptance view. Sets the pending-invite cookie on preview.
    """
    invite_token = _parse_token(token)
    if invite_token is None:
        return render_acceptance(AcceptanceStep.INVALID, None)

    handoff = _handoff(request, settings)
    flow = InviteAcceptanceFlow(
        token=invite_token,
        invite_service=invite_service,
        identity=LocalIdentityProvider(_session(request, settings, jwt_service)),
        handoff=handoff,
        navigator=RecordingNavigator(),
        settings=settings,
    )
    async with flow:
        view = flow.view()

    handoff.apply(response)
    return view


@router.post("/accept/{token}/decline", response_model=AcceptanceView)
async def decline_invite(
    token: str,
    request: Request,
    response: Response,
    invite_service: FromDishka[InviteService],
    settings: FromDishka[Settings],
) -> AcceptanceView:
    """Decline an invite. No sign-in needed."""
    invite_token = _parse_token(token)
    if invite_token is None:
        return render_acceptance(AcceptanceStep.INVALID, None)

    handoff = _handoff(request, settings)
    flow = InviteAcceptanceFlow(
        token=invite_token,
        invite_service=invite_service,
        identity=LocalIdentityProvider(),
        handoff=handoff,
        navigator=RecordingNavigator(),
        settings=settings,
    )
    view = await flow.decline()

    handoff.apply(response)
    return view


@router.post("/accept/{token}/accept")
async def accept_invite(
    token: str,
    request: Request,
    invite_service: FromDishka[InviteService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Start accepting: remember the token and send the invitee to sign in.

    Completion happens in ``/collab/session`` once a session exists.
    """
    invite_token = _parse_token(token)
    if invite_token is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invite not found"
        )

    handoff = _handoff(request, settings)
    flow = InviteAcceptanceFlow(
        token=invite_token,
        invite_service=invite_service,
        identity=LocalIdentityProvider(),
        handoff=handoff,
        navigator=RecordingNavigator(),
        settings=settings,
    )
    location = flow.accept()

    redirect = RedirectResponse(
        url=_frontend_url(settings, location), status_code=status.HTTP_303_SEE_OTHER
    )
    handoff.apply(redirect)
    return redirect


@router.get("/session")
async def complete_pending_invite(
    request: Request,
    invite_service: FromDishka[InviteService],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Sign-in completion callback.

    Accepts the invite remembered in the pending-invite cookie for the
    signed-in identity, then redirects to its dashboard (or the event
    listing when that fails). Without a session, redirects to sign in and
    keeps the cookie.
    """
    session = _session(request, settings, jwt_service)
    if session is None:
        return RedirectResponse(
            url=_frontend_url(settings, settings.app.sign_in_path),
            status_code=status.HTTP_303_SEE_OTHER,
        )

    handoff = _handoff(request, settings)
    navigator = RecordingNavigator()
    identity = LocalIdentityProvider()
    completer = PendingInviteCompleter(invite_service, handoff, navigator, settings)

    subscription = identity.subscribe(completer.on_session_change)
    try:
        await identity.sign_in(session)
    finally:
        subscription.unsubscribe()

    location = navigator.location or settings.app.listing_path
    redirect = RedirectResponse(
        url=_frontend_url(settings, location), status_code=status.HTTP_303_SEE_OTHER
    )
    handoff.apply(redirect)
    return redirect


@router.get("/invites/pending", response_model=ListPendingInvitesResponse)
async def list_pending_invites(
    request: Request,
    list_pending_invites_use_case: FromDishka[ListPendingInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> ListPendingInvitesResponse:
    """Pending invites for the signed-in user."""
    session = _require_session(request, settings, jwt_service)
    return await list_pending_invites_use_case.execute(
        ListPendingInvitesRequest(session=session)
    )


@router.post(
    "/invites",
    response_model=CreateInviteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invite(
    body: CreateInviteAPIRequest,
    request: Request,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> CreateInviteResponse:
    """Invite a collaborator onto an event and email them.

    Raises:
        HTTPException: 401 if not signed in, 400 for bad input, 404 if the
            event does not exist, 409 for a duplicate pending invite
    """
    _require_session(request, settings, jwt_service)

    try:
        return await create_invite_use_case.execute(
            CreateInviteRequest(
                event_id=body.event_id, email=body.email, role=body.role
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateInviteError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/invites/{invite_id}/send", response_model=SendInviteResponse)
async def send_invite(
    invite_id: str,
    request: Request,
    send_invite_use_case: FromDishka[SendInviteUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> SendInviteResponse:
    """Send (or resend) the invite email.

    Raises:
        HTTPException: 401 if not signed in, 404 if the invite does not
            exist, 502 if the mail relay fails
    """
    _require_session(request, settings, jwt_service)

    try:
        return await send_invite_use_case.execute(
            SendInviteRequest(invite_id=invite_id)
        )
    except InviteNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ProviderError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
