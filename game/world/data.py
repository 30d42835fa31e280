"""
World Data Module
Provides the static world definition: rooms, exits and pickup items.
"""
from game.models.room import Room

START_ROOM = "start"
WIN_ROOM = "treasure_room"

# Conditional exits: entering the room requires owning the item
GATES = {
    "treasure_room": "key",
}

DIRECTIONS = ("north", "south", "east", "west")

WORLD = {
    "start": Room(
        oid="start",
        name="Start Room",
        description="You wake up in a small room. There is a door to the NORTH.",
        exits={"north": "hallway"},
        items=["key"],
    ),
    "hallway": Room(
        oid="hallway",
        name="Hallway",
        description="A long hallway. Doors lead SOUTH and EAST. A heavy door to the NORTH.",
        exits={"south": "start", "east": "armory", "north": "treasure_room"},
    ),
    "armory": Room(
        oid="armory",
        name="Armory",
        description="Old shelves. Something shiny catches your eye.",
        exits={"west": "hallway"},
        items=["coin"],
    ),
    "treasure_room": Room(
        oid="treasure_room",
        name="Treasure Room",
        description="The treasure room glows. You made it.",
        exits={"south": "hallway"},
    ),
}
