from spawnproof.models.envelope import Envelope
from spawnproof.models.geometry import Position
from spawnproof.models.messages import (
    PAYLOAD_REGISTRY,
    Command,
    CommandAction,
    CommandResult,
    Join,
    MessageType,
    Preview,
    TaskCancelled,
    TaskCompleted,
    TaskExhausted,
    TaskProgress,
    TaskStarted,
    Tick,
)
from spawnproof.models.topics import Topics, from_nats_subject, to_nats_subject

__all__ = [
    "Command",
    "CommandAction",
    "CommandResult",
    "Envelope",
    "Join",
    "MessageType",
    "PAYLOAD_REGISTRY",
    "Position",
    "Preview",
    "TaskCancelled",
    "TaskCompleted",
    "TaskExhausted",
    "TaskProgress",
    "TaskStarted",
    "Tick",
    "Topics",
    "from_nats_subject",
    "to_nats_subject",
]
