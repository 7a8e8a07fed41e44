"""
HelpCommand — `je -h | --help`
"""

from ..core.argtree import ArgTree
from ..core.resolver import Command
from ..content import HELP_TEXT

COMMAND = Command.HELP


def handle(cli, tree: ArgTree):
    """Print static usage text. Never touches the store."""
    print(HELP_TEXT, end="")
    return HELP_TEXT
