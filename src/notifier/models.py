"""Data models for notifications, card messages and webhook responses."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from notifier.config import TURN_COMPLETE_EVENT
from notifier.errors import ParseError


def describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


class Notification(BaseModel):
    """A single agent event as passed on the command line."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: str = ""
    thread_id: str = Field(default="", alias="thread-id")
    turn_id: str = Field(default="", alias="turn-id")
    cwd: str = ""
    input_messages: tuple[str, ...] = Field(default=(), alias="input-messages")
    last_assistant_message: str = Field(default="", alias="last-assistant-message")

    @field_validator("type", "thread_id", "turn_id", "cwd", "last_assistant_message", mode="before")
    @classmethod
    def null_as_empty_string(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("input_messages", mode="before")
    @classmethod
    def null_as_empty_list(cls, v: Any) -> Any:
        return () if v is None else v

    @property
    def is_turn_complete(self) -> bool:
        return self.type == TURN_COMPLETE_EVENT


def parse_notification(raw: str) -> Notification:
    """Parse the command-line payload.

    Bytes that were not valid UTF-8 reach us as lone surrogates; they are
    replaced with U+FFFD rather than rejected.
    """
    try:
        raw = raw.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")
    except UnicodeEncodeError as e:
        raise ParseError(f"payload is not valid text: {e}") from e
    try:
        return Notification.model_validate_json(raw)
    except ValidationError as e:
        raise ParseError(describe_validation_error(e)) from e


class CardText(BaseModel):
    tag: Literal["plain_text", "lark_md"]
    content: str

    @classmethod
    def plain(cls, content: str) -> CardText:
        return cls(tag="plain_text", content=content)

    @classmethod
    def markdown(cls, content: str) -> CardText:
        return cls(tag="lark_md", content=content)


class CardField(BaseModel):
    is_short: bool = True
    text: CardText


class TextBlock(BaseModel):
    tag: Literal["div"] = "div"
    text: CardText


class Divider(BaseModel):
    tag: Literal["hr"] = "hr"


class FieldBlock(BaseModel):
    tag: Literal["div"] = "div"
    fields: list[CardField]


class Note(BaseModel):
    tag: Literal["note"] = "note"
    elements: list[CardText]


CardElement = TextBlock | Divider | FieldBlock | Note


class CardConfig(BaseModel):
    wide_screen_mode: bool = True


class CardHeader(BaseModel):
    title: CardText
    template: str


class Card(BaseModel):
    config: CardConfig = Field(default_factory=CardConfig)
    header: CardHeader
    elements: list[CardElement] = Field(default_factory=list)


class CardMessage(BaseModel):
    """Outbound webhook body. timestamp and sign are set only when signing."""

    timestamp: str | None = None
    sign: str | None = None
    msg_type: Literal["interactive"] = "interactive"
    card: Card

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class WebhookResponse(BaseModel):
    """Webhook reply. Either status pair may report a failure on its own."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: int = 0
    msg: str = ""
    status_code: int = Field(default=0, alias="StatusCode")
    status_message: str = Field(default="", alias="StatusMessage")

    @field_validator("code", "status_code", mode="before")
    @classmethod
    def null_as_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("msg", "status_message", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def ok(self) -> bool:
        return self.code == 0 and self.status_code == 0

    def describe(self) -> str:
        return (
            f"code={self.code} statusCode={self.status_code} "
            f"msg={self.msg} statusMessage={self.status_message}"
        )
