"""Topic path constants and NATS subject conversion.

Topics use `/` separators (e.g., `/spawnproof/commands`),
while NATS uses `.` separators (e.g., `spawnproof.commands`).
This module handles the conversion transparently.
"""


class Topics:
    """Topic path constants for the SpawnProof bus."""

    # Server
    COMMANDS = "/spawnproof/commands"
    SQUARE = "/spawnproof/square"

    # System
    TICK = "/system/tick"

    @classmethod
    def player_inbox(cls, player_id: str) -> str:
        """Return the inbox topic for a specific player."""
        return f"/player/{player_id}/inbox"

    @classmethod
    def all_topics(cls) -> list[str]:
        """Return all static topic paths."""
        return [cls.COMMANDS, cls.SQUARE, cls.TICK]


def to_nats_subject(topic: str) -> str:
    """Convert a topic path to a NATS subject.

    `/player/steve/inbox` → `player.steve.inbox`
    """
    return topic.lstrip("/").replace("/", ".")


def from_nats_subject(subject: str) -> str:
    """Convert a NATS subject back to a topic path.

    `spawnproof.commands` → `/spawnproof/commands`
    """
    return "/" + subject.replace(".", "/")
