"""
Game State Module
Value objects passed between the web layer and the command handlers.
"""
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from game.models.player import Player, LogEntry
from game.models.room import Room

if TYPE_CHECKING:
    from core.state_manager import GameStateStore
    from game.world.manager import WorldManager


@dataclass
class CommandContext:
    """What a handler may read and write while running one command."""
    store: "GameStateStore"
    world: "WorldManager"
    location: str

    @property
    def room(self) -> Optional[Room]:
        return self.world.get_room(self.location)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command: the message and where the player ends up."""
    message: str
    location: str
    won: bool = False


@dataclass(frozen=True)
class GameState:
    """Snapshot of everything the page shows, read back after a command."""
    player: Player
    room: Optional[Room]
    inventory: List[str] = field(default_factory=list)
    recent_log: List[LogEntry] = field(default_factory=list)

    @property
    def location(self) -> str:
        return self.player.location

    @property
    def room_title(self) -> str:
        return self.room.name if self.room else "Unknown"

    @property
    def room_description(self) -> str:
        return self.room.description if self.room else "This place doesn't exist."
