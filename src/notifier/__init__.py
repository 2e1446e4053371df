"""Codex notify - posts completed agent turns to a chat webhook as cards."""

__version__ = "0.1.0"

from notifier.config import NotifierConfig, load_config
from notifier.errors import (
    NotifierError,
    ConfigError,
    ParseError,
    SignError,
    TransportError,
    ProtocolError,
)
from notifier.models import Notification, CardMessage, WebhookResponse, parse_notification
from notifier.card import build_card, truncate
from notifier.client import deliver

__all__ = [
    "NotifierConfig",
    "load_config",
    "NotifierError",
    "ConfigError",
    "ParseError",
    "SignError",
    "TransportError",
    "ProtocolError",
    "Notification",
    "CardMessage",
    "WebhookResponse",
    "parse_notification",
    "build_card",
    "truncate",
    "deliver",
]
