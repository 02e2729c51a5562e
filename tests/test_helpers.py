"""Unit tests for factory and validation helpers."""

import json

import pytest
from pydantic import ValidationError

from spawnproof import (
    Command,
    CommandAction,
    Envelope,
    MessageType,
    Preview,
    TaskCompleted,
    Topics,
    create_message,
    format_validation_error,
    parse_message,
    parse_payload,
    validate_message,
)

# --- Factory ---


class TestCreateMessage:
    def test_infers_type_from_model(self):
        env = create_message(
            from_agent="steve",
            topic=Topics.COMMANDS,
            payload=Command(player_id="steve", action=CommandAction.CONFIRM, radius=16),
            tick=7,
        )
        assert env.type == MessageType.COMMAND
        assert env.tick == 7
        assert env.payload == {
            "player_id": "steve",
            "action": "confirm",
            "radius": 16,
            "fast": False,
        }

    def test_dict_payload_needs_type(self):
        with pytest.raises(ValueError):
            create_message(from_agent="steve", topic=Topics.COMMANDS, payload={"x": 1})

    def test_dict_payload_with_type(self):
        env = create_message(
            from_agent="steve",
            topic=Topics.COMMANDS,
            payload={"player_id": "steve"},
            msg_type=MessageType.COMMAND,
        )
        assert env.tick == 0
        assert env.payload == {"player_id": "steve"}


class TestParseMessage:
    def test_from_json_bytes(self):
        env = create_message(
            from_agent="server",
            topic=Topics.player_inbox("steve"),
            payload=TaskCompleted(player_id="steve", placed=3, elapsed_seconds=0.5),
        )
        raw = env.model_dump_json(by_alias=True).encode()
        parsed = parse_message(raw)
        assert parsed.id == env.id
        assert parsed.from_agent == "server"

    def test_from_dict(self):
        parsed = parse_message(
            {"from": "steve", "topic": "/t", "type": "tick", "payload": {}}
        )
        assert parsed.type == MessageType.TICK

    def test_bad_json(self):
        with pytest.raises(json.JSONDecodeError):
            parse_message("{not json")

    def test_missing_fields(self):
        with pytest.raises(ValidationError):
            parse_message({"topic": "/t"})


class TestParsePayload:
    def test_typed_payload(self):
        env = create_message(
            from_agent="server",
            topic=Topics.player_inbox("steve"),
            payload=Preview(
                radius=8, unlimited=True, needed=197, safe_seconds=19, fast_seconds=0
            ),
        )
        payload = parse_payload(env)
        assert isinstance(payload, Preview)
        assert payload.needed == 197


# --- Validation ---


class TestValidateMessage:
    def _env(self, **overrides) -> Envelope:
        fields = {
            "from": "steve",
            "topic": Topics.COMMANDS,
            "type": MessageType.COMMAND,
            "payload": {"player_id": "steve", "radius": 32},
        }
        fields.update(overrides)
        return Envelope(**fields)

    def test_valid(self):
        assert validate_message(self._env()) == []

    def test_empty_sender(self):
        errors = validate_message(self._env(**{"from": "  "}))
        assert "'from' field must not be empty" in errors

    def test_bad_payload(self):
        errors = validate_message(self._env(payload={"player_id": "steve", "radius": 500}))
        assert len(errors) == 1
        assert errors[0].startswith("payload.radius:")


class TestFormatValidationError:
    def test_prefix(self):
        with pytest.raises(ValidationError) as info:
            Command(player_id="steve", radius=1)
        lines = format_validation_error(info.value, prefix="command")
        assert len(lines) == 1
        assert lines[0].startswith("command.radius:")
