"""
RemoveCommand — `je rm <label>`
"""

from ..commands.base import BaseCommand
from ..core.argtree import ArgTree
from ..core.resolver import Command
from ..errors import NotFoundError, UsageError
from ..presentation.codec import DEFAULT_EDITOR_KEY
from ..presentation.symbols import safe_print

COMMAND = Command.REMOVE


class RemoveCommand(BaseCommand):
    """Deletes a label."""

    MAX_ARGS = 3

    def remove(self, name: str):
        """
        Delete a label by name.

        Raises:
            NotFoundError: no such label (store left unchanged)
        """
        if name == DEFAULT_EDITOR_KEY or not self.store.delete(name):
            raise NotFoundError(
                f"could not remove label '{name}', not found in database",
                hint="See 'je list' for a list of user jumps",
            )

    def run(self, tree: ArgTree):
        """Validate arguments for `je rm` and remove the label."""
        self.check_arg_count(tree)
        self.check_flags(tree)

        label_node = tree.get(2)
        if label_node is None:
            raise UsageError("could not remove je label, no label provided")

        self.remove(label_node.value)
        safe_print(f"{self.symbols.check_pass} Success: jump label '{label_node.value}' removed")


def handle(cli, tree: ArgTree):
    """Handle `je rm`."""
    return RemoveCommand(cli).run(tree)
