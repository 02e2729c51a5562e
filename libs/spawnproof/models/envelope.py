"""Envelope model — wraps every join, command, reply and task event."""

import time
import uuid
from typing import Any

from pydantic import BaseModel, Field

from spawnproof.models.messages import MessageType


class Envelope(BaseModel):
    """A SpawnProof bus message.

    Players send with their player ID as the sender; the server sends as
    `"server"`. Commands are only honoured when the sender matches the
    command's `player_id`, so `from_agent` doubles as the caller identity.
    `tick` is the server tick at which the message was produced (0 for
    player messages). `id` is echoed back as `CommandResult.reference_msg_id`.

    `from_agent` is `"from"` on the wire; serialize with `by_alias=True`.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    from_agent: str = Field(alias="from", min_length=1)
    topic: str
    timestamp: float = Field(default_factory=time.time)
    tick: int = Field(default=0, ge=0)
    type: MessageType
    payload: dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    def is_from(self, sender: str) -> bool:
        """True if this envelope was sent by `sender` (case-sensitive)."""
        return bool(sender) and self.from_agent == sender
