"""Gmail API mail relay adapter."""

from eventflow.adapter.gmail.client import (
    GmailClient,
    GmailError,
    MailNotConfiguredError,
    MockGmailClient,
    RealGmailClient,
    SendFailedError,
    TokenExchangeFailedError,
)
from eventflow.adapter.gmail.message import build_raw_message, encode_raw_message

__all__ = [
    "GmailClient",
    "GmailError",
    "MailNotConfiguredError",
    "MockGmailClient",
    "RealGmailClient",
    "SendFailedError",
    "TokenExchangeFailedError",
    "build_raw_message",
    "encode_raw_message",
]
