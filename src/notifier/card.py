"""Card formatting for completed agent turns."""

from __future__ import annotations

import logging
from datetime import datetime

from notifier import signer
from notifier.config import CARD_TEMPLATE, RESULT_MAX_LENGTH, TITLE_MAX_LENGTH, NotifierConfig
from notifier.models import (
    Card,
    CardElement,
    CardField,
    CardHeader,
    CardMessage,
    CardText,
    Divider,
    FieldBlock,
    Note,
    Notification,
    TextBlock,
)

logger = logging.getLogger(__name__)

ELLIPSIS = "..."
UNKNOWN_TASK = "Unknown Task"
NO_RESULT = "(no result)"


def truncate(s: str, limit: int) -> str:
    """Cut ``s`` to at most ``limit`` code points, marking the cut with an ellipsis."""
    if limit <= 0:
        return ""
    if len(s) <= limit:
        return s
    if limit <= len(ELLIPSIS):
        return s[:limit]
    return s[: limit - len(ELLIPSIS)] + ELLIPSIS


def build_elements(notification: Notification, now: datetime) -> list[CardElement]:
    inputs = "\n".join(notification.input_messages)

    result = notification.last_assistant_message.strip() or NO_RESULT
    result = truncate(result, RESULT_MAX_LENGTH)

    return [
        TextBlock(text=CardText.markdown(f"**📝 Input:**\n{inputs}")),
        Divider(),
        TextBlock(text=CardText.markdown(f"**✅ Result:**\n{result}")),
        Divider(),
        FieldBlock(
            fields=[
                CardField(text=CardText.markdown(f"**📂 Working directory:**\n`{notification.cwd}`")),
                CardField(text=CardText.markdown(f"**🆔 Thread ID:**\n`{notification.thread_id}`")),
            ]
        ),
        Note(elements=[CardText.plain(f"Generated by Codex at {now.strftime('%H:%M:%S')}")]),
    ]


def build_card(
    notification: Notification,
    config: NotifierConfig,
    now: datetime | None = None,
) -> CardMessage:
    """Assemble the outbound card message, signed when a secret is configured."""
    if now is None:
        now = datetime.now()

    intent = notification.input_messages[0] if notification.input_messages else UNKNOWN_TASK
    title = truncate(intent, TITLE_MAX_LENGTH)

    message = CardMessage(
        card=Card(
            header=CardHeader(
                title=CardText.plain(f"🤖 Codex task complete: {title}"),
                template=CARD_TEMPLATE,
            ),
            elements=build_elements(notification, now),
        )
    )

    signature = signer.sign(config.secret, int(now.timestamp()))
    if signature is not None:
        message.timestamp, message.sign = signature
        logger.debug(f"Signed card with timestamp {message.timestamp}")

    return message
