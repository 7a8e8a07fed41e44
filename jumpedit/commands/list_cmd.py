"""
ListCommand — `je list [-l|--label | -j|--jump | -d|--directory]`

Full scan of the store; the default-editor record is shown in the header,
never as a label.
"""

from typing import List, Optional, Tuple

from ..commands.base import BaseCommand
from ..core.argtree import ArgTree
from ..core.resolver import Command
from ..errors import UsageError
from ..presentation.codec import DEFAULT_EDITOR_KEY, Label
from ..presentation.formatters import format_listing, listing_mode
from ..presentation.symbols import safe_print

COMMAND = Command.LIST


class ListCommand(BaseCommand):
    """Lists every label in the store."""

    MAX_ARGS = 2

    def collect(self) -> Tuple[Optional[str], List[Label]]:
        """
        Read every record.

        Returns:
            (default editor or None, decoded labels in store order)

        Raises:
            UsageError: the store holds no records at all
            DecodeError: a stored label is corrupted
        """
        if self.store.is_empty():
            raise UsageError("No default editor or jump labels in database.")

        editor = None
        labels = []
        for key, value in self.store.scan_all():
            if key == DEFAULT_EDITOR_KEY:
                editor = value
            else:
                labels.append(self.codec.decode_label(key, value))
        return editor, labels

    def list_labels(self, tree: ArgTree) -> str:
        """Render the listing for `je list [flag]`."""
        self.check_arg_count(tree)
        self.check_flags(tree, 1)
        mode = listing_mode(tree.get(1))

        editor, labels = self.collect()
        return format_listing(mode, labels, editor, self.symbols)


def handle(cli, tree: ArgTree):
    """Handle `je list`."""
    output = ListCommand(cli).list_labels(tree)
    safe_print(output)
    return output
