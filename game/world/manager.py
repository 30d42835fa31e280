"""
World Manager
Read-only access to the static world map.
"""
import logging
from typing import Dict, List, Optional
from game.models.room import Room
from game.world.data import WORLD, START_ROOM, WIN_ROOM, GATES

logger = logging.getLogger(__name__)


class WorldManager:
    _instance = None

    def __init__(self, rooms: Optional[Dict[str, Room]] = None):
        self.rooms: Dict[str, Room] = rooms if rooms is not None else WORLD
        self.start_room = START_ROOM
        self.win_room = WIN_ROOM
        self.gates: Dict[str, str] = dict(GATES)

    @classmethod
    def get_instance(cls):
        if not cls._instance:
            cls._instance = cls()
            cls._instance.validate()
        return cls._instance

    def get_room(self, room_id: str) -> Optional[Room]:
        """Get a Room by id, or None if the id is not on the map."""
        return self.rooms.get(room_id)

    def required_item(self, room_id: str) -> Optional[str]:
        """Item needed to enter room_id, if its door is gated."""
        return self.gates.get(room_id)

    def validate(self) -> None:
        """
        Check that the map is closed: every exit, gate and special room
        points at a room that exists.

        Raises:
            ValueError: listing every dangling reference found
        """
        problems: List[str] = []
        for room_id, room in self.rooms.items():
            for direction, target in room.exits.items():
                if target not in self.rooms:
                    problems.append(f"{room_id} --{direction}--> {target}")
        for room_id in (self.start_room, self.win_room, *self.gates):
            if room_id not in self.rooms:
                problems.append(f"unknown room '{room_id}'")
        if problems:
            logger.error(f"World map has dangling references: {problems}")
            raise ValueError("Invalid world map: " + ", ".join(problems))
