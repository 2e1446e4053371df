"""Webhook delivery - posts a card message and checks the reply."""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request

from pydantic import ValidationError

from notifier.config import NotifierConfig
from notifier.errors import ProtocolError, TransportError
from notifier.models import CardMessage, WebhookResponse, describe_validation_error

logger = logging.getLogger(__name__)


def _decode(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")


def post_json(url: str, payload: dict, timeout: float) -> tuple[int, str]:
    """POST ``payload`` once and return ``(status, body)``."""
    data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    headers = {"Content-Type": "application/json"}
    req = urllib.request.Request(url, data=data, headers=headers, method="POST")

    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            return response.status, _decode(response.read())
    except urllib.error.HTTPError as e:
        # Non-2xx replies still carry a body worth reporting
        try:
            body = e.read() or b""
        except (http.client.HTTPException, OSError) as read_error:
            raise TransportError(f"reading webhook error reply failed: {read_error}") from read_error
        return e.code, _decode(body)
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
        raise TransportError(f"request to webhook failed: {e}") from e


def deliver(message: CardMessage, config: NotifierConfig) -> WebhookResponse:
    """Send ``message`` to the configured webhook. One attempt, no retries."""
    logger.debug(f"Posting card to {config.webhook_url}")
    status, body = post_json(config.webhook_url, message.to_payload(), config.timeout)

    if status != 200:
        raise ProtocolError(f"status: {status}, resp: {body}", status=status, body=body)

    try:
        result = WebhookResponse.model_validate_json(body)
    except ValidationError as e:
        raise ProtocolError(
            f"decode webhook response: {describe_validation_error(e)} (payload: {body})",
            status=status,
            body=body,
        ) from e

    if not result.ok:
        raise ProtocolError(
            f"webhook error {result.describe()}",
            status=status,
            body=body,
            response=result,
        )

    logger.info("Notification delivered")
    return result
