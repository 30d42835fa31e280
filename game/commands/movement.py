"""
Movement Commands

- go <direction>: Follow an exit of the current room
"""

import logging
from typing import Tuple

from game.state import CommandContext, CommandResult

logger = logging.getLogger(__name__)

GO_PATTERN = r"^go\s+(north|south|east|west)$"


def handle_go_command(args: Tuple[str, ...], ctx: CommandContext) -> CommandResult:
    """
    Handle 'go' command.
    Usage: go <north|south|east|west>

    A gated destination is only entered while the player owns its
    required item. Reaching the win room adds the victory message; play
    goes on afterwards.
    """
    direction = args[0]
    room = ctx.room
    target = room.get_exit(direction) if room else None
    if target is None:
        return CommandResult(f"You can't go {direction} from here.", ctx.location)

    required = ctx.world.required_item(target)
    if required and not ctx.store.has_item(required):
        return CommandResult(f"The door is locked. You need a {required}.", ctx.location)

    if not ctx.store.set_location(target):
        return CommandResult(f"Couldn't go {direction}.", ctx.location)

    logger.info(f"Player moved {ctx.location} -> {target}")
    if target == ctx.world.win_room:
        return CommandResult(
            f"You go {direction}. The treasure is yours. You win!", target, won=True
        )
    return CommandResult(f"You go {direction}.", target)
