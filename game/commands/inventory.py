"""
Inventory Commands

Handles commands related to inventory management:
- inventory: List items
- take: Pick up items
- drop: Drop items
"""

from typing import Tuple

from game.state import CommandContext, CommandResult

# Item names: letters, digits, underscore, hyphen and space
TAKE_PATTERN = r"^take\s+([a-z0-9_ -]+)$"
DROP_PATTERN = r"^drop\s+([a-z0-9_ -]+)$"


def handle_inventory_command(args: Tuple[str, ...], ctx: CommandContext) -> CommandResult:
    """Handle 'inventory' command."""
    items = ctx.store.list_inventory()
    if not items:
        return CommandResult("Your inventory is empty.", ctx.location)
    return CommandResult("Inventory: " + ", ".join(items), ctx.location)


def handle_take_command(args: Tuple[str, ...], ctx: CommandContext) -> CommandResult:
    """
    Handle 'take' command.
    Only items listed in the current room can be taken, and only once.
    """
    item = args[0]
    room = ctx.room

    if room is None or not room.has_item(item):
        return CommandResult(f"You don't see '{item}' here.", ctx.location)
    if ctx.store.has_item(item):
        return CommandResult(f"You already have '{item}'.", ctx.location)
    if not ctx.store.add_item(item):
        return CommandResult(f"Couldn't take '{item}' (maybe it already exists).", ctx.location)
    return CommandResult(f"You pick up the {item}.", ctx.location)


def handle_drop_command(args: Tuple[str, ...], ctx: CommandContext) -> CommandResult:
    """Handle 'drop' command."""
    item = args[0]
    if not ctx.store.has_item(item):
        return CommandResult(f"You don't have '{item}'.", ctx.location)
    if not ctx.store.remove_item(item):
        return CommandResult(f"Couldn't drop '{item}'.", ctx.location)
    return CommandResult(f"You drop the {item}.", ctx.location)
