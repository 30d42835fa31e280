"""
Player Commands

Handles commands that don't touch the inventory directly:
- help: List available commands
- look: Describe the current room
- reset: Start the game over
"""

import logging
from typing import Tuple

from command_syntax import format_help_text
from game.state import CommandContext, CommandResult

logger = logging.getLogger(__name__)


def handle_help_command(args: Tuple[str, ...], ctx: CommandContext) -> CommandResult:
    """Handle 'help' command."""
    return CommandResult(format_help_text(), ctx.location)


def handle_look_command(args: Tuple[str, ...], ctx: CommandContext) -> CommandResult:
    """Handle 'look' command."""
    room = ctx.room
    if room is None:
        return CommandResult("You see nothing interesting.", ctx.location)
    return CommandResult(room.look(), ctx.location)


def handle_reset_command(args: Tuple[str, ...], ctx: CommandContext) -> CommandResult:
    """
    Handle 'reset' command.
    Empties the inventory and the command log and moves the player back to
    the start room.
    """
    start = ctx.world.start_room
    cleared = ctx.store.clear_inventory()
    cleared = ctx.store.clear_log() and cleared
    moved = ctx.store.set_location(start)
    location = start if moved else ctx.location
    if not (cleared and moved):
        logger.warning(f"Reset incomplete (cleared={cleared}, moved={moved})")
        return CommandResult("Couldn't reset the game.", location)
    logger.info("Game reset")
    return CommandResult("Game reset. Back to the start room.", start)
