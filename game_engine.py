"""
Game engine: turns a submitted command into a state change and a message.
"""

import logging
from typing import Optional

from command_registry import register_command, resolve_command
from core.state_manager import GameStateStore
from game.commands.inventory import (
    DROP_PATTERN,
    TAKE_PATTERN,
    handle_drop_command,
    handle_inventory_command,
    handle_take_command,
)
from game.commands.movement import GO_PATTERN, handle_go_command
from game.commands.player import (
    handle_help_command,
    handle_look_command,
    handle_reset_command,
)
from game.state import CommandContext, CommandResult, GameState
from game.world.manager import WorldManager

logger = logging.getLogger(__name__)

EMPTY_COMMAND_MESSAGE = "Type a command (try 'help')."
UNKNOWN_COMMAND_MESSAGE = "Unknown command. Try 'help'."

register_command("help", handle_help_command)
register_command("look", handle_look_command)
register_command("inventory", handle_inventory_command)
register_command("reset", handle_reset_command)
register_command("go", handle_go_command, pattern=GO_PATTERN)
register_command("take", handle_take_command, pattern=TAKE_PATTERN)
register_command("drop", handle_drop_command, pattern=DROP_PATTERN)


def normalize_command(raw: Optional[str]) -> str:
    """Trim and lowercase a submitted command."""
    return (raw or "").strip().lower()


def handle_command(
    raw_command: Optional[str],
    store: GameStateStore,
    world: Optional[WorldManager] = None,
) -> CommandResult:
    """
    Run one submitted command against the stored game.

    Every non-empty command is written to the command log before it is
    interpreted, recognized or not.

    Args:
        raw_command: Text as typed by the player
        store: Persistent game state
        world: Room map (defaults to the shared WorldManager)

    Returns:
        CommandResult with the message to show and the player's location
    """
    world = world or WorldManager.get_instance()
    location = store.get_player().location
    command = normalize_command(raw_command)

    if not command:
        return CommandResult(EMPTY_COMMAND_MESSAGE, location)

    if not store.log_command(command):
        logger.warning(f"Command {command!r} was not written to the history")
    logger.info(f"Command at {location}: {command!r}")

    resolved = resolve_command(command)
    if resolved is None:
        return CommandResult(UNKNOWN_COMMAND_MESSAGE, location)

    handler, args = resolved
    ctx = CommandContext(store=store, world=world, location=location)
    return handler(args, ctx)


def load_game_state(
    store: GameStateStore,
    world: Optional[WorldManager] = None,
    log_limit: Optional[int] = None,
) -> GameState:
    """Read back everything the page shows."""
    world = world or WorldManager.get_instance()
    player = store.get_player()
    return GameState(
        player=player,
        room=world.get_room(player.location),
        inventory=store.list_inventory(),
        recent_log=store.get_recent_log(log_limit),
    )
