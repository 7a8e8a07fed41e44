"""
Formatters — Shell-facing and listing output for labels

Resolution output is a shell command line that a wrapping shell function
evals; it is never executed here. Every substituted path is wrapped in
double quotes, whether or not it contains whitespace.
"""

from enum import Enum
from typing import Iterable, Optional

from .codec import Label
from .symbols import SymbolSet, UNICODE
from ..core.argtree import ArgNode
from ..errors import UsageError


class FormatMode(Enum):
    """How a label (or the label table) is rendered."""
    JUMP_ONLY = "jump"
    EDIT_ONLY = "edit"
    BOTH = "both"
    LIST_PLAIN = "list"
    LIST_LABELS_ONLY = "list-labels"
    LIST_JUMP_ONLY = "list-jump"
    LIST_DIR_ONLY = "list-dir"


JUMP_FLAGS = ("-j", "--jump")
EDIT_FLAGS = ("-e", "--edit")
LABEL_FLAGS = ("-l", "--label")
DIRECTORY_FLAGS = ("-d", "--directory")

LEGEND = "(L = Label), (JP = Jump Path), (SD = Shell Directory)"
NO_LABELS_MESSAGE = (
    "No jump labels in database yet.\n"
    " Add one with 'je add <label> <path> [dir]'"
)


def quote(path: str) -> str:
    """Wrap a path in double quotes."""
    return f'"{path}"'


def resolution_mode(node: ArgNode, allowed_extra: Iterable[str] = ()) -> FormatMode:
    """
    Pick the resolution mode from the program node's flags.

    -j/--jump wins over -e/--edit when both are given.

    Raises:
        UsageError: a flag other than jump/edit (or `allowed_extra`) is present
    """
    unknown = node.unknown_flags(*JUMP_FLAGS, *EDIT_FLAGS, *allowed_extra)
    if unknown:
        raise UsageError(f"je option(s) not found: {' '.join(unknown)}")

    if node.has_flag(*JUMP_FLAGS):
        return FormatMode.JUMP_ONLY
    if node.has_flag(*EDIT_FLAGS):
        return FormatMode.EDIT_ONLY
    return FormatMode.BOTH


def listing_mode(node: ArgNode) -> FormatMode:
    """
    Pick the listing mode from the `list` node's flags.

    Precedence: --label, then --jump, then --directory.

    Raises:
        UsageError: an unrecognized flag is present
    """
    unknown = node.unknown_flags(*LABEL_FLAGS, *JUMP_FLAGS, *DIRECTORY_FLAGS)
    if unknown:
        raise UsageError(f"option(s) for list not found: {' '.join(unknown)}")

    if node.has_flag(*LABEL_FLAGS):
        return FormatMode.LIST_LABELS_ONLY
    if node.has_flag(*JUMP_FLAGS):
        return FormatMode.LIST_JUMP_ONLY
    if node.has_flag(*DIRECTORY_FLAGS):
        return FormatMode.LIST_DIR_ONLY
    return FormatMode.LIST_PLAIN


def format_resolution(mode: FormatMode, label: Label, editor: str) -> str:
    """
    Render the shell command for a resolved label.

    Args:
        mode: JUMP_ONLY, EDIT_ONLY or BOTH
        label: Decoded label
        editor: Default editor command line (inserted as-is)

    Returns:
        e.g. 'cd "/tmp/" && vim "/tmp/foo.txt"'
    """
    jump = f"cd {quote(label.shell_dir)}"
    edit = f"{editor} {quote(label.jump_path)}"

    if mode is FormatMode.JUMP_ONLY:
        return jump
    if mode is FormatMode.EDIT_ONLY:
        return edit
    if mode is FormatMode.BOTH:
        return f"{jump} && {edit}"
    raise ValueError(f"not a resolution mode: {mode}")


def format_label(mode: FormatMode, label: Label, symbols: SymbolSet = UNICODE) -> str:
    """Render one label for the per-label listing modes."""
    if mode is FormatMode.LIST_JUMP_ONLY:
        return f"L: {label.name} | JP: {label.jump_path}"
    if mode is FormatMode.LIST_DIR_ONLY:
        return f"L: {label.name} | SD: {label.shell_dir}"
    if mode is FormatMode.LIST_PLAIN:
        return (
            f"L: {label.name}\n"
            f"{symbols.tree_branch}JP: {label.jump_path}\n"
            f"{symbols.tree_end}SD: {label.shell_dir}\n"
        )
    raise ValueError(f"not a per-label listing mode: {mode}")


def format_listing(
    mode: FormatMode,
    labels: Iterable[Label],
    editor: Optional[str],
    symbols: SymbolSet = UNICODE,
) -> str:
    """
    Render the label table.

    Args:
        mode: One of the LIST_* modes
        labels: Decoded labels (the default-editor record excluded)
        editor: Default editor, or None when not configured
        symbols: Symbol set for the plain tree layout

    Returns:
        Full listing text, header included
    """
    labels = list(labels)
    lines = []

    if mode is not FormatMode.LIST_LABELS_ONLY:
        lines.append(LEGEND)
    if editor is not None:
        lines.append(f"Default Editor: {editor}")
    else:
        lines.append("Default Editor: (not set, use 'je default-editor <editor>')")
    lines.append("")

    if not labels:
        lines.append(NO_LABELS_MESSAGE)
        return "\n".join(lines)

    if mode is FormatMode.LIST_LABELS_ONLY:
        lines.append(", ".join(label.name for label in labels))
    else:
        lines.extend(format_label(mode, label, symbols) for label in labels)

    return "\n".join(lines)
