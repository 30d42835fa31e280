"""
Player and history records as read back from the store.
"""
from dataclasses import dataclass
from typing import Optional

DEFAULT_HEALTH = 100


@dataclass(frozen=True)
class Player:
    """Singleton player record: where the player stands and their health."""
    location: str
    health: int = DEFAULT_HEALTH
    id: Optional[int] = None


@dataclass(frozen=True)
class LogEntry:
    """One submitted command, as stored in the command log."""
    command_text: str
    created_at: str
