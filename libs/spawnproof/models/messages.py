"""Message types and payload models for the SpawnProof protocol."""

from enum import StrEnum

from pydantic import BaseModel, Field

DEFAULT_RADIUS = 128
MIN_RADIUS = 8
MAX_RADIUS = 128


class MessageType(StrEnum):
    """All message types in the protocol."""

    JOIN = "join"
    COMMAND = "command"
    COMMAND_RESULT = "command_result"
    PREVIEW = "preview"
    TASK_STARTED = "task_started"
    TASK_PROGRESS = "task_progress"
    TASK_COMPLETED = "task_completed"
    TASK_EXHAUSTED = "task_exhausted"
    TASK_CANCELLED = "task_cancelled"
    TICK = "tick"


class CommandAction(StrEnum):
    """Sub-commands of /spawnproof."""

    PREVIEW = "preview"
    CONFIRM = "confirm"
    STOP = "stop"
    HELP = "help"


class Join(BaseModel):
    """Player announces itself to the server."""

    player_id: str = Field(min_length=1)
    name: str
    position: list[int] = Field(min_length=3, max_length=3)
    operator: bool = False
    inventory: dict[str, int] = Field(default_factory=dict)


class Command(BaseModel):
    """A /spawnproof command issued by a player."""

    player_id: str
    action: CommandAction = CommandAction.PREVIEW
    radius: int = Field(default=DEFAULT_RADIUS, ge=MIN_RADIUS, le=MAX_RADIUS)
    fast: bool = False


class CommandResult(BaseModel):
    """Server reply to a Command. code is 1 on success, 0 on failure."""

    reference_msg_id: str
    player_id: str
    action: str
    code: int = Field(ge=0, le=1)
    reason: str | None = None
    lines: list[str] = Field(default_factory=list)


class Preview(BaseModel):
    """Scan summary produced by the preview command."""

    radius: int
    unlimited: bool
    needed: int = Field(ge=0)
    available: int | None = None
    shortfall: int = Field(ge=0, default=0)
    safe_seconds: int = Field(ge=0)
    fast_seconds: int = Field(ge=0)


class TaskStarted(BaseModel):
    """A placement task was accepted and registered."""

    player_id: str
    radius: int
    positions: int = Field(gt=0)
    unlimited: bool
    fast: bool


class TaskProgress(BaseModel):
    """Periodic progress report for a running task."""

    player_id: str
    placed: int = Field(ge=0)
    remaining: int = Field(ge=0)


class TaskCompleted(BaseModel):
    """Every planned position was visited."""

    player_id: str
    placed: int = Field(ge=0)
    elapsed_seconds: float = Field(ge=0)


class TaskExhausted(BaseModel):
    """The player ran out of buttons before the plan was finished."""

    player_id: str
    placed: int = Field(ge=0)
    remaining: int = Field(ge=0)


class TaskCancelled(BaseModel):
    """The player stopped the task."""

    player_id: str
    placed: int = Field(ge=0)


class Tick(BaseModel):
    """System tick broadcast."""

    tick_number: int = Field(gt=0)
    timestamp: float


# Registry mapping message types to their payload models
PAYLOAD_REGISTRY: dict[MessageType, type[BaseModel]] = {
    MessageType.JOIN: Join,
    MessageType.COMMAND: Command,
    MessageType.COMMAND_RESULT: CommandResult,
    MessageType.PREVIEW: Preview,
    MessageType.TASK_STARTED: TaskStarted,
    MessageType.TASK_PROGRESS: TaskProgress,
    MessageType.TASK_COMPLETED: TaskCompleted,
    MessageType.TASK_EXHAUSTED: TaskExhausted,
    MessageType.TASK_CANCELLED: TaskCancelled,
    MessageType.TICK: Tick,
}

# Reverse lookup used when publishing typed payloads
MESSAGE_TYPE_FOR: dict[type[BaseModel], MessageType] = {
    model: msg_type for msg_type, model in PAYLOAD_REGISTRY.items()
}
