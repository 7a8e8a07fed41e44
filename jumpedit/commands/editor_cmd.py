"""
EditorCommand — `je default-editor <editor command>`

Replace semantics: setting the editor always overwrites the previous one.
The editor's own flags (`je default-editor code --wait`) are kept, since
the argument tree groups them under the editor node.
"""

from ..commands.base import BaseCommand
from ..core.argtree import ArgTree
from ..core.resolver import Command
from ..core.store import PutMode
from ..errors import UsageError
from ..presentation.codec import DEFAULT_EDITOR_KEY
from ..presentation.symbols import safe_print

COMMAND = Command.SET_EDITOR


class EditorCommand(BaseCommand):
    """Sets the default editor."""

    MAX_ARGS = 3

    def set_editor(self, editor: str) -> str:
        """Store `editor` under the reserved key, replacing any previous value."""
        if not editor.strip():
            raise UsageError("could not set default editor, the editor command is empty")
        self.store.put(DEFAULT_EDITOR_KEY, editor, PutMode.REPLACE)
        return editor

    def run(self, tree: ArgTree) -> str:
        """Validate arguments for `je default-editor` and store the editor."""
        self.check_arg_count(tree)
        self.check_flags(tree, 2)

        editor_node = tree.get(2)
        if editor_node is None:
            raise UsageError("could not set default editor, no editor provided")

        editor = self.set_editor(" ".join(editor_node.tokens()))
        safe_print(f"{self.symbols.check_pass} Success: saving '{editor}' as default editor")
        return editor


def handle(cli, tree: ArgTree):
    """Handle `je default-editor`."""
    return EditorCommand(cli).run(tree)
