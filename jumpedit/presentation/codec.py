"""
LabelCodec — Stored-value format for jump labels

A label's jump path and shell directory are stored as one value:

    "<jump path>:::<shell dir>"

Three colons instead of whitespace because paths may contain spaces.

Key properties:
- LOSSLESS: decode(encode(p, d)) == (p, d) for every pair encode accepts
- GREEDY-LEFT: decode splits at the LAST separator that still leaves a
  non-empty shell directory, so "a::::b" decodes to ("a:", "b")
- STRICT: empty components never encode and never decode

Usage:
    codec = LabelCodec()

    value = codec.encode("/tmp/foo.txt", "/tmp/")   # "/tmp/foo.txt:::/tmp/"
    path, shell_dir = codec.decode(value)           # ("/tmp/foo.txt", "/tmp/")

    shell_dir = infer_shell_dir("/tmp/foo.txt")     # "/tmp/"
"""

import re
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from ..errors import DecodeError, EncodingError, FilesystemError


SEPARATOR = ":::"

# Reserved store key for the editor command line (never a label)
DEFAULT_EDITOR_KEY = "default-editor"

# Group 1 is greedy, so it swallows any earlier separator occurrences
VALUE_PATTERN = re.compile(r'(.+):::(.+)', re.DOTALL)

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class Label:
    """A decoded label."""
    name: str
    jump_path: str
    shell_dir: str


class LabelCodec:
    """Encodes and decodes the stored (jump path, shell directory) value."""

    def encode(self, jump_path: str, shell_dir: str) -> str:
        """
        Join a jump path and shell directory into one stored value.

        Raises:
            EncodingError: a component is empty, or the pair would not
                decode back to itself (shell directory starting with ':')
        """
        if not jump_path:
            raise EncodingError("cannot store a label with an empty jump path")
        if not shell_dir:
            raise EncodingError("cannot store a label with an empty shell directory")

        value = f"{jump_path}{SEPARATOR}{shell_dir}"
        if self.decode(value) != (jump_path, shell_dir):
            raise EncodingError(
                f"cannot store jump path '{jump_path}' with shell directory "
                f"'{shell_dir}': the pair is ambiguous around '{SEPARATOR}'"
            )
        return value

    def decode(self, value: str) -> Tuple[str, str]:
        """
        Split a stored value into (jump path, shell directory).

        Raises:
            DecodeError: no separator with a non-empty component on each side
        """
        match = VALUE_PATTERN.fullmatch(value or "")
        if match is None:
            raise DecodeError(value)
        return match.group(1), match.group(2)

    def decode_label(self, name: str, value: str) -> Label:
        """Decode a stored record into a Label, naming it in any error."""
        try:
            jump_path, shell_dir = self.decode(value)
        except DecodeError:
            raise DecodeError(value, name=name) from None
        return Label(name=name, jump_path=jump_path, shell_dir=shell_dir)


def containing_directory(path: str) -> Optional[str]:
    """
    Directory part of a file path, trailing separator included.

    "/tmp/foo.txt" -> "/tmp/", "src/main.c" -> "src/", "foo.txt" -> None
    """
    index = path.rfind(PATH_SEPARATOR)
    if index < 0:
        return None
    return path[:index + 1]


def infer_shell_dir(jump_path: str, explicit_dir: Optional[str] = None) -> str:
    """
    Decide which directory the shell should land in for a jump path.

    Args:
        jump_path: Path the label points at (file or directory)
        explicit_dir: Directory given on the command line, used verbatim

    Returns:
        explicit_dir if given; the containing directory of a regular file;
        the jump path itself for a directory

    Raises:
        FilesystemError: the path cannot be stat'ed, is neither a regular
            file nor a directory, or is a bare file name with no directory
    """
    if explicit_dir is not None:
        return explicit_dir

    try:
        mode = Path(jump_path).stat().st_mode
    except OSError as e:
        raise FilesystemError(jump_path, f"could not be read: {e.strerror or e}") from e

    if stat.S_ISREG(mode):
        directory = containing_directory(jump_path)
        if directory is None:
            raise FilesystemError(
                jump_path,
                "has no containing directory",
                hint=f"Pass one explicitly, e.g. 'je add <label> ./{jump_path}' "
                     f"or 'je add <label> {jump_path} <dir>'",
            )
        return directory

    if stat.S_ISDIR(mode):
        return jump_path

    raise FilesystemError(jump_path, "is not a valid file or directory")
