"""SpawnProof — incremental, rate-limited button placement for voxel worlds."""

from spawnproof.client.nats_client import SpawnProofBusClient
from spawnproof.helpers.factory import create_message, parse_message, parse_payload
from spawnproof.helpers.text import HELP_LINES, format_stacks, format_time, render_lines
from spawnproof.helpers.validation import format_validation_error, validate_message
from spawnproof.models.catalogue import (
    BLOCKS,
    BUTTON_KINDS,
    BUTTONS_PER_STACK,
    CANONICAL_BUTTON,
    BlockInfo,
    block_info,
    is_button,
    is_valid_block,
)
from spawnproof.models.envelope import Envelope
from spawnproof.models.geometry import Position
from spawnproof.models.messages import (
    DEFAULT_RADIUS,
    MAX_RADIUS,
    MIN_RADIUS,
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
    # Client
    "SpawnProofBusClient",
    # Models
    "BLOCKS",
    "BUTTON_KINDS",
    "BUTTONS_PER_STACK",
    "BlockInfo",
    "CANONICAL_BUTTON",
    "Command",
    "CommandAction",
    "CommandResult",
    "DEFAULT_RADIUS",
    "Envelope",
    "Join",
    "MAX_RADIUS",
    "MIN_RADIUS",
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
    # Helpers
    "HELP_LINES",
    "block_info",
    "create_message",
    "format_stacks",
    "format_time",
    "format_validation_error",
    "from_nats_subject",
    "is_button",
    "is_valid_block",
    "parse_message",
    "parse_payload",
    "render_lines",
    "to_nats_subject",
    "validate_message",
]
