"""Tests for notifier models."""

import json

import pytest

from notifier.errors import ParseError
from notifier.models import (
    Card,
    CardHeader,
    CardMessage,
    CardText,
    Divider,
    FieldBlock,
    CardField,
    Note,
    Notification,
    TextBlock,
    WebhookResponse,
    parse_notification,
)


class TestNotification:
    def test_parse_full_payload(self):
        raw = json.dumps({
            "type": "agent-turn-complete",
            "thread-id": "t-1",
            "turn-id": "12",
            "cwd": "/home/user/project",
            "input-messages": ["demo task", "second line"],
            "last-assistant-message": "all done",
        })

        n = parse_notification(raw)

        assert n.type == "agent-turn-complete"
        assert n.thread_id == "t-1"
        assert n.turn_id == "12"
        assert n.cwd == "/home/user/project"
        assert n.input_messages == ("demo task", "second line")
        assert n.last_assistant_message == "all done"
        assert n.is_turn_complete is True

    def test_missing_fields_default_to_zero_values(self):
        n = parse_notification('{"type": "agent-turn-complete"}')

        assert n.thread_id == ""
        assert n.cwd == ""
        assert n.input_messages == ()
        assert n.last_assistant_message == ""

    def test_null_fields_default_to_zero_values(self):
        n = parse_notification('{"type": null, "input-messages": null, "cwd": null}')

        assert n.type == ""
        assert n.input_messages == ()
        assert n.cwd == ""
        assert n.is_turn_complete is False

    def test_unknown_fields_ignored(self):
        n = parse_notification('{"type": "other", "extra": {"nested": 1}}')
        assert n.type == "other"
        assert n.is_turn_complete is False

    def test_malformed_json(self):
        with pytest.raises(ParseError):
            parse_notification("{not json")

    def test_non_object_json(self):
        with pytest.raises(ParseError):
            parse_notification('["agent-turn-complete"]')

    def test_wrong_field_type(self):
        with pytest.raises(ParseError):
            parse_notification('{"input-messages": "not a list"}')

    def test_frozen(self):
        n = parse_notification('{"type": "agent-turn-complete"}')
        with pytest.raises(ValueError):
            n.type = "other"


class TestCardMessage:
    def _card(self):
        return Card(
            header=CardHeader(title=CardText.plain("title"), template="indigo"),
            elements=[
                TextBlock(text=CardText.markdown("body")),
                Divider(),
                FieldBlock(fields=[CardField(text=CardText.markdown("a"))]),
                Note(elements=[CardText.plain("footer")]),
            ],
        )

    def test_unsigned_payload_omits_auth_fields(self):
        payload = CardMessage(card=self._card()).to_payload()

        assert "timestamp" not in payload
        assert "sign" not in payload
        assert payload["msg_type"] == "interactive"
        assert payload["card"]["config"] == {"wide_screen_mode": True}
        assert payload["card"]["header"] == {
            "title": {"tag": "plain_text", "content": "title"},
            "template": "indigo",
        }

    def test_element_shapes(self):
        elements = CardMessage(card=self._card()).to_payload()["card"]["elements"]

        assert elements == [
            {"tag": "div", "text": {"tag": "lark_md", "content": "body"}},
            {"tag": "hr"},
            {"tag": "div", "fields": [{"is_short": True, "text": {"tag": "lark_md", "content": "a"}}]},
            {"tag": "note", "elements": [{"tag": "plain_text", "content": "footer"}]},
        ]

    def test_signed_payload(self):
        message = CardMessage(timestamp="1700000000", sign="abc=", card=self._card())
        payload = message.to_payload()

        assert payload["timestamp"] == "1700000000"
        assert payload["sign"] == "abc="


class TestWebhookResponse:
    def test_success(self):
        resp = WebhookResponse.model_validate_json('{"code": 0, "StatusCode": 0}')
        assert resp.ok is True

    def test_empty_object_is_success(self):
        assert WebhookResponse.model_validate_json("{}").ok is True

    def test_primary_code_failure(self):
        resp = WebhookResponse.model_validate_json('{"code": 19021, "msg": "sign match fail"}')

        assert resp.ok is False
        assert "19021" in resp.describe()
        assert "sign match fail" in resp.describe()

    def test_status_code_failure(self):
        resp = WebhookResponse.model_validate_json(
            '{"StatusCode": 9499, "StatusMessage": "Bad Request", "extra": true}'
        )

        assert resp.code == 0
        assert resp.status_code == 9499
        assert resp.status_message == "Bad Request"
        assert resp.ok is False


class TestNotificationEncoding:
    def test_invalid_utf8_replaced(self):
        # argv bytes that are not UTF-8 arrive as lone surrogates
        raw = b'{"type": "agent-turn-complete", "input-messages": ["bad \xff byte"]}'.decode(
            "utf-8", errors="surrogateescape"
        )

        n = parse_notification(raw)

        assert n.input_messages == ("bad � byte",)
        assert n.is_turn_complete is True
