"""
AddCommand — `je add <label> <path> [shell dir]`

Insert-only: an existing label is never overwritten. Without an explicit
shell directory one is inferred from the path (see infer_shell_dir).
"""

from ..commands.base import BaseCommand
from ..core.argtree import ArgTree
from ..core.resolver import Command, is_reserved
from ..core.store import PutMode
from ..errors import AlreadyExistsError, UsageError
from ..presentation.codec import DEFAULT_EDITOR_KEY, Label, infer_shell_dir
from ..presentation.symbols import safe_print

COMMAND = Command.ADD


class AddCommand(BaseCommand):
    """Stores a new label."""

    MAX_ARGS = 5

    def validate_name(self, name: str):
        """
        Reject names that could never be resolved.

        Raises:
            UsageError: empty name, subcommand word, or the editor key
        """
        if not name:
            raise UsageError("could not add je label, the label is empty")
        if name == DEFAULT_EDITOR_KEY or is_reserved(name):
            raise UsageError(
                f"could not add je label '{name}', it is a je sub command",
                hint="Labels can not share a name with list, add, rm or default-editor",
            )

    def add(self, name: str, jump_path: str, shell_dir: str = None) -> Label:
        """
        Infer, encode and insert a label.

        Args:
            name: Label name
            jump_path: File or directory to open
            shell_dir: Directory to cd into (inferred if None)

        Returns:
            The stored Label

        Raises:
            UsageError: invalid name
            AlreadyExistsError: label exists (record left unchanged)
            FilesystemError: path is not a file or directory
            EncodingError: pair cannot be stored
        """
        self.validate_name(name)
        if not jump_path:
            raise UsageError("could not add je label, the path is empty")
        if self.store.get(name) is not None:
            raise AlreadyExistsError(name)

        shell_dir = infer_shell_dir(jump_path, shell_dir)
        value = self.codec.encode(jump_path, shell_dir)

        if not self.store.put(name, value, PutMode.INSERT):
            raise AlreadyExistsError(name)
        return Label(name=name, jump_path=jump_path, shell_dir=shell_dir)

    def run(self, tree: ArgTree) -> Label:
        """Validate arguments for `je add` and add the label."""
        self.check_arg_count(tree)
        self.check_flags(tree)

        label_node = tree.get(2)
        if label_node is None:
            raise UsageError("could not add je label, no label provided")
        path_node = tree.get(3)
        if path_node is None:
            raise UsageError("could not add je label, no path provided")
        dir_node = tree.get(4)

        label = self.add(
            label_node.value,
            path_node.value,
            dir_node.value if dir_node is not None else None,
        )

        symbols = self.symbols
        safe_print(f"{symbols.check_pass} Success")
        safe_print(f" New Label: '{label.name}'")
        safe_print(f" Jump Path: '{label.jump_path}'")
        safe_print(f" Shell Dir: '{label.shell_dir}'")
        return label


def handle(cli, tree: ArgTree):
    """Handle `je add`."""
    return AddCommand(cli).run(tree)
