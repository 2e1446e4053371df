"""Exception hierarchy for the notifier."""

from __future__ import annotations


class NotifierError(Exception):
    """Base class for every terminal failure of a notify run."""


class ConfigError(NotifierError):
    pass


class ParseError(NotifierError):
    pass


class SignError(NotifierError):
    pass


class TransportError(NotifierError):
    """The request never produced an HTTP response."""


class ProtocolError(NotifierError):
    """The webhook answered, but not with a success."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        body: str = "",
        response: object | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
        self.response = response
