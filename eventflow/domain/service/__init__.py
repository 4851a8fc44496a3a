"""Domain services."""

from .base import Service
from .event_service import EventService
from .invite_service import InviteService
from .jwt_service import JWTService
from .mail_client import MailClient

__all__ = [
    "EventService",
    "InviteService",
    "JWTService",
    "MailClient",
    "Service",
]
