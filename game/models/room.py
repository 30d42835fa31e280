"""
Room Model
"""
from typing import Dict, Iterable, List, Optional
from game.models.base import GameObject


class Room(GameObject):
    def __init__(
        self,
        oid: str,
        name: str,
        description: str,
        exits: Optional[Dict[str, str]] = None,
        items: Optional[Iterable[str]] = None,
    ):
        super().__init__(oid, name, description)
        self.exits: Dict[str, str] = dict(exits or {})  # direction -> room_oid
        # Items that can be picked up here, as long as the player doesn't own them yet
        self.items: List[str] = list(items or [])

    def get_exit(self, direction: str) -> Optional[str]:
        return self.exits.get(direction)

    def has_item(self, item_name: str) -> bool:
        """True if the item is one of this room's pickup items."""
        return item_name in self.items
