"""Message validation utilities."""

from pydantic import ValidationError

from spawnproof.models.envelope import Envelope
from spawnproof.models.messages import PAYLOAD_REGISTRY, MessageType


def format_validation_error(error: ValidationError, prefix: str = "payload") -> list[str]:
    """Flatten a pydantic ValidationError into `prefix.field: message` strings."""
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        messages.append(f"{prefix}.{loc}: {err['msg']}" if loc else f"{prefix}: {err['msg']}")
    return messages


def validate_message(envelope: Envelope) -> list[str]:
    """Validate an envelope for correctness.

    Returns a list of error strings. Empty list means valid.
    """
    errors: list[str] = []

    if not envelope.from_agent or not envelope.from_agent.strip():
        errors.append("'from' field must not be empty")

    if not envelope.topic or not envelope.topic.strip():
        errors.append("'topic' field must not be empty")

    try:
        msg_type = MessageType(envelope.type)
    except ValueError:
        errors.append(f"Unknown message type: {envelope.type}")
        return errors

    model_class = PAYLOAD_REGISTRY.get(msg_type)
    if model_class is None:
        errors.append(f"No payload schema registered for type: {msg_type}")
        return errors

    try:
        model_class.model_validate(envelope.payload)
    except ValidationError as e:
        errors.extend(format_validation_error(e))

    return errors
