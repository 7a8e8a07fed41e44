"""
Commands — One module per Command variant, with self-registration

Each command module:
1. Defines XxxCommand class (handler implementation)
2. Exports COMMAND, the core.resolver.Command it serves
3. Exports handle(cli, tree) to run it against the parsed ArgTree

Dispatch is a lookup on the closed Command enum; register_all() checks
that every variant has exactly one handler.
"""

import importlib
import logging
from typing import Dict, Callable, Any

from .base import BaseCommand
from ..core.argtree import ArgTree
from ..core.resolver import Command

logger = logging.getLogger(__name__)

# Command modules that participate in auto-registration
COMMAND_MODULES = [
    'jump_cmd',
    'list_cmd',
    'add_cmd',
    'rm_cmd',
    'editor_cmd',
    'help_cmd',
]

# Handler registry: Command -> handle function
_handlers: Dict[Command, Callable] = {}


def register_all() -> None:
    """
    Import every module in COMMAND_MODULES and register its handle().

    Raises:
        RuntimeError: a Command has no handler or more than one
    """
    _handlers.clear()

    for module_name in COMMAND_MODULES:
        module = importlib.import_module(f'.{module_name}', __package__)
        command = module.COMMAND
        if command in _handlers:
            raise RuntimeError(f"Command {command.name} registered twice ({module_name})")
        _handlers[command] = module.handle

    missing = [command.name for command in Command if command not in _handlers]
    if missing:
        raise RuntimeError(f"No handler for command(s): {', '.join(missing)}")


def dispatch(command: Command, cli: Any, tree: ArgTree) -> Any:
    """
    Run the handler registered for `command`.

    Args:
        command: Resolved Command
        cli: JumpEditCLI instance
        tree: Parsed arguments

    Returns:
        Result from handler (if any)
    """
    if not _handlers:
        register_all()

    logger.debug("dispatching %s", command.name)
    return _handlers[command](cli, tree)


__all__ = ['BaseCommand', 'register_all', 'dispatch']
