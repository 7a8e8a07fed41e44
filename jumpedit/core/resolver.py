"""
Command Resolver — Maps the first positional argument to a Command

`je <word>` is either a subcommand or a label to jump to. Subcommand words
always win, so a label named like a subcommand can never be reached
directly; Add rejects such names (see RESERVED_WORDS).
"""

from enum import Enum
from typing import Dict

from .argtree import ArgTree
from ..errors import UsageError


class Command(Enum):
    """Closed set of things one invocation can do."""
    RESOLVE_OR_RUN = "resolve"
    LIST = "list"
    ADD = "add"
    REMOVE = "rm"
    SET_EDITOR = "default-editor"
    HELP = "help"


# Argument vectors cannot contain NUL, so nobody can type this
HELP_SENTINEL = "\x00help"

HELP_FLAGS = ("-h", "--help")

COMMAND_WORDS: Dict[str, Command] = {
    "list": Command.LIST,
    "add": Command.ADD,
    "rm": Command.REMOVE,
    "default-editor": Command.SET_EDITOR,
    HELP_SENTINEL: Command.HELP,
}

RESERVED_WORDS = frozenset(word for word in COMMAND_WORDS if word != HELP_SENTINEL)


def resolve_token(token: str) -> Command:
    """
    Exact, case-sensitive lookup of a subcommand word.

    Anything that is not a subcommand word is a label to resolve.
    """
    return COMMAND_WORDS.get(token, Command.RESOLVE_OR_RUN)


def resolve_command(tree: ArgTree) -> Command:
    """
    Derive the Command for an invocation.

    Args:
        tree: Parsed argument tree (node 0 = program name)

    Returns:
        Command for node 1, or HELP when only -h/--help was given

    Raises:
        UsageError: no positional argument, with unknown or no flags
    """
    first = tree.get(1)
    if first is not None:
        return resolve_token(first.value)

    program = tree.program
    if program is not None and program.has_flag(*HELP_FLAGS):
        return resolve_token(HELP_SENTINEL)
    if program is not None and program.has_flag():
        raise UsageError("je option(s) not found")
    raise UsageError("no sub command or option(s) provided")


def is_reserved(name: str) -> bool:
    """True if `name` is a subcommand word and would shadow a label."""
    return name in RESERVED_WORDS
