"""Configuration and constants for the notifier."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from notifier.errors import ConfigError

WEBHOOK_URL_ENV = "WEBHOOK_URL"
WEBHOOK_SECRET_ENV = "WEBHOOK_SECRET"
# Names used by earlier releases, still honoured as fallbacks
LEGACY_WEBHOOK_URL_ENV = "FEISHU_WEBHOOK_URL"
LEGACY_WEBHOOK_SECRET_ENV = "FEISHU_SECRET"

TURN_COMPLETE_EVENT = "agent-turn-complete"

DEFAULT_TIMEOUT = 10.0
TITLE_MAX_LENGTH = 30
RESULT_MAX_LENGTH = 500
CARD_TEMPLATE = "indigo"


class NotifierConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    webhook_url: str
    secret: str = ""
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @property
    def signing_enabled(self) -> bool:
        return bool(self.secret)


def _lookup(environ: Mapping[str, str], *names: str) -> str:
    for name in names:
        value = environ.get(name, "").strip()
        if value:
            return value
    return ""


def load_config(environ: Mapping[str, str] | None = None) -> NotifierConfig:
    """Build the configuration from environment variables.

    Raises ConfigError when no webhook URL is set.
    """
    if environ is None:
        environ = os.environ

    url = _lookup(environ, WEBHOOK_URL_ENV, LEGACY_WEBHOOK_URL_ENV)
    if not url:
        raise ConfigError(f"{WEBHOOK_URL_ENV} is not set")

    secret = _lookup(environ, WEBHOOK_SECRET_ENV, LEGACY_WEBHOOK_SECRET_ENV)
    return NotifierConfig(webhook_url=url, secret=secret)
