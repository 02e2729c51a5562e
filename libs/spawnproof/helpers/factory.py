"""Factory functions for creating and parsing messages."""

import json
from typing import Any

from pydantic import BaseModel

from spawnproof.models.envelope import Envelope
from spawnproof.models.messages import MESSAGE_TYPE_FOR, PAYLOAD_REGISTRY, MessageType


def create_message(
    *,
    from_agent: str,
    topic: str,
    payload: BaseModel | dict[str, Any],
    msg_type: MessageType | None = None,
    tick: int = 0,
) -> Envelope:
    """Create an Envelope with a typed or dict payload.

    Args:
        from_agent: The sender ID (a player ID or "server").
        topic: The topic path (e.g., `/spawnproof/commands`).
        payload: A Pydantic model instance or a plain dict.
        msg_type: The message type. May be omitted for registered payload models.
        tick: The current tick number.

    Returns:
        A fully constructed Envelope.

    Raises:
        ValueError: If msg_type is omitted and cannot be inferred.
    """
    if isinstance(payload, BaseModel):
        if msg_type is None:
            msg_type = MESSAGE_TYPE_FOR.get(type(payload))
        payload_dict = payload.model_dump(mode="json")
    else:
        payload_dict = payload

    if msg_type is None:
        raise ValueError("msg_type is required for untyped payloads")

    return Envelope(
        **{"from": from_agent},
        topic=topic,
        tick=tick,
        type=msg_type,
        payload=payload_dict,
    )


def parse_message(data: str | bytes | dict[str, Any]) -> Envelope:
    """Parse raw data into an Envelope.

    Raises:
        ValueError: If the data cannot be parsed.
        ValidationError: If the data doesn't match the Envelope schema.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if isinstance(data, str):
        data = json.loads(data)
    return Envelope.model_validate(data)


def parse_payload(envelope: Envelope) -> BaseModel:
    """Parse an envelope's payload dict into its typed Pydantic model.

    Raises:
        ValueError: If the message type is unknown.
    """
    msg_type = MessageType(envelope.type)
    model_class = PAYLOAD_REGISTRY.get(msg_type)
    if model_class is None:
        raise ValueError(f"Unknown message type: {msg_type}")
    return model_class.model_validate(envelope.payload)
