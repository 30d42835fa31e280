"""
command_registry.py

Command registry and dispatcher system.

Maps normalized command text to handler functions. Bare verbs ("look",
"reset") are matched exactly; verbs taking an argument ("go north",
"take key") are matched with a regular expression whose groups become the
handler's arguments.
"""

import re
from typing import Callable, Dict, List, Optional, Pattern, Tuple

from game.state import CommandContext, CommandResult

# Handlers receive: (args, context) where args are the regex groups (empty for bare verbs)
# Return: CommandResult
CommandHandler = Callable[[Tuple[str, ...], CommandContext], CommandResult]

COMMAND_HANDLERS: Dict[str, CommandHandler] = {}
COMMAND_PATTERNS: List[Tuple[str, Pattern, CommandHandler]] = []


def register_command(
    verb: str,
    handler: CommandHandler,
    pattern: Optional[str] = None,
):
    """
    Register a command verb to a handler.

    Args:
        verb: The command verb (e.g., "help", "go")
        handler: The handler function that processes this command
        pattern: Optional regex the whole command must match; without it
            the command must equal the verb exactly
    """
    if pattern is None:
        COMMAND_HANDLERS[verb] = handler
    else:
        COMMAND_PATTERNS.append((verb, re.compile(pattern), handler))


def resolve_command(command: str) -> Optional[Tuple[CommandHandler, Tuple[str, ...]]]:
    """
    Find the handler for a normalized command.

    Args:
        command: Trimmed, lowercased command text

    Returns:
        (handler, args) or None if nothing matches
    """
    handler = COMMAND_HANDLERS.get(command)
    if handler is not None:
        return handler, ()
    for _verb, pattern, handler in COMMAND_PATTERNS:
        match = pattern.match(command)
        if match:
            return handler, tuple(group.strip() for group in match.groups())
    return None
