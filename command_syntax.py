"""
Command syntax helpers - usage hints shown by 'help' and on the page.
"""

# Command syntax definitions, in the order they are listed to the player
COMMAND_SYNTAX = {
    "help": {
        "description": "List the available commands",
        "usage": "help",
        "hint": "help",
    },
    "look": {
        "description": "Look at your surroundings",
        "usage": "look",
        "hint": "look",
    },
    "go": {
        "description": "Move in a direction",
        "usage": "go <north|south|east|west>",
        "hint": "go north/south/east/west",
    },
    "take": {
        "description": "Pick up an item from the room",
        "usage": "take <item>",
        "hint": "take key/coin",
    },
    "drop": {
        "description": "Drop an item from your inventory",
        "usage": "drop <item>",
        "hint": "drop key/coin",
    },
    "inventory": {
        "description": "View your inventory",
        "usage": "inventory",
        "hint": "inventory",
    },
    "reset": {
        "description": "Start over: empty inventory and history, back to the start room",
        "usage": "reset",
        "hint": "reset",
    },
}


def command_hints():
    """Short hints for every command, e.g. 'go north/south/east/west'."""
    return [syntax["hint"] for syntax in COMMAND_SYNTAX.values()]


def format_help_text():
    """The message shown for 'help'."""
    hints = [syntax["hint"] for name, syntax in COMMAND_SYNTAX.items() if name != "help"]
    return "Try: " + ", ".join(hints)
