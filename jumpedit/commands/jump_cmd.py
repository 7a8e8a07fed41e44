"""
JumpCommand — `je [-j|-e] <label>`

Looks a label up and prints the shell command for the wrapping shell
function to eval. stdout carries nothing but that command.
"""

from typing import List

from rapidfuzz import fuzz, process

from ..commands.base import BaseCommand
from ..core.argtree import ArgTree
from ..core.resolver import Command, HELP_FLAGS
from ..errors import NotFoundError, UsageError, SEE_HELP
from ..presentation.codec import DEFAULT_EDITOR_KEY, Label
from ..presentation.formatters import format_resolution, resolution_mode
from ..presentation.symbols import safe_print

COMMAND = Command.RESOLVE_OR_RUN

# Minimum rapidfuzz ratio for a label to be offered as a suggestion
SUGGESTION_CUTOFF = 60
SUGGESTION_LIMIT = 3


class JumpCommand(BaseCommand):
    """Resolves a label into a cd / editor command line."""

    MAX_ARGS = 2

    def lookup(self, name: str) -> Label:
        """
        Fetch and decode a label.

        Raises:
            NotFoundError: no label by that name
            DecodeError: the stored record is corrupted
        """
        value = self.store.get(name) if name != DEFAULT_EDITOR_KEY else None
        if value is None:
            hint = f"See 'je list' for a list of user jumps\n{SEE_HELP}"
            suggestions = self.suggest(name)
            if suggestions:
                hint = f"Did you mean: {', '.join(suggestions)}?\n{hint}"
            raise NotFoundError(f"'{name}' is not a je label.", hint=hint)
        return self.codec.decode_label(name, value)

    def default_editor(self) -> str:
        """
        Fetch the configured editor command line.

        Raises:
            NotFoundError: no default editor has been set
        """
        editor = self.store.get(DEFAULT_EDITOR_KEY)
        if editor is None:
            raise NotFoundError(
                "Could not run command because a default editor has not been set.",
                hint="Use 'je default-editor <editor command>' to set one",
            )
        return editor

    def suggest(self, name: str) -> List[str]:
        """Existing labels that look like `name`."""
        labels = [key for key, _ in self.store.scan_all() if key != DEFAULT_EDITOR_KEY]
        matches = process.extract(
            name, labels,
            scorer=fuzz.ratio,
            limit=SUGGESTION_LIMIT,
            score_cutoff=SUGGESTION_CUTOFF,
        )
        return [match[0] for match in matches]

    def resolve(self, tree: ArgTree) -> str:
        """
        Build the shell command for `je [flags] <label>`.

        Flags are read from the program node (before the label).
        """
        self.check_arg_count(tree)
        mode = resolution_mode(tree.program, allowed_extra=HELP_FLAGS)

        node = tree.get(1)
        if node.has_flag():
            raise UsageError(
                f"option(s) after the label are not supported: {' '.join(node.flags)}",
                hint=f"Put them first, e.g. 'je {node.flags[0]} {node.value}'\n{SEE_HELP}",
            )

        label = self.lookup(node.value)
        editor = self.default_editor()
        return format_resolution(mode, label, editor)


def handle(cli, tree: ArgTree):
    """Handle `je <label>`: print the resolved shell command."""
    output = JumpCommand(cli).resolve(tree)
    safe_print(output)
    return output
