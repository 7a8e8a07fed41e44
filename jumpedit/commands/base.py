"""
BaseCommand — Shared foundation for all je commands

Commands receive the CLI instance and access its resources through
properties instead of opening their own.
"""

from typing import TYPE_CHECKING

from ..core.argtree import ArgTree
from ..errors import UsageError

if TYPE_CHECKING:
    from ..cli import JumpEditCLI


class BaseCommand:
    """
    Base class for commands with access to shared resources.

    Design principle: Composition over inheritance.
    """

    # Most nodes (program + subcommand + arguments) a command accepts
    MAX_ARGS = 2

    def __init__(self, cli: 'JumpEditCLI'):
        """
        Initialize command with CLI instance.

        Args:
            cli: The JumpEditCLI instance holding all resources
        """
        self._cli = cli

    @property
    def store(self):
        """Label store (opened by the CLI for this invocation)."""
        return self._cli.store

    @property
    def codec(self):
        """Label codec."""
        return self._cli.codec

    @property
    def symbols(self):
        """Symbol set for display (Unicode/ASCII)."""
        return self._cli.symbols

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    def check_arg_count(self, tree: ArgTree):
        """Reject invocations with more positional arguments than MAX_ARGS."""
        if len(tree) > self.MAX_ARGS:
            raise UsageError("too many arguments")

    def check_flags(self, tree: ArgTree, *own):
        """
        Reject flags on every node except the indexes in `own`.

        Commands pass the nodes whose flags they interpret themselves.
        """
        unknown = [
            flag
            for index, node in enumerate(tree)
            if index not in own
            for flag in node.flags
        ]
        if unknown:
            raise UsageError(f"option(s) not found: {' '.join(unknown)}")
