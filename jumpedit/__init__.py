"""
je — Jump Edit

Bind a short label to a file or directory plus a shell directory, then
resolve the label into a shell command that changes directory, opens the
default editor, or both.

Usage:
    je default-editor vim
    je add bash ~/.bashrc
    je bash              # cd "/home/me/" && vim "/home/me/.bashrc"
    je -j bash           # cd "/home/me/"
    je -e bash           # vim "/home/me/.bashrc"
    je list
    je rm bash
"""

__version__ = "0.1.0"

# Core layer
from .core.argtree import ArgNode, ArgTree, parse
from .core.resolver import Command, resolve_command
from .core.store import LabelStore, PutMode

# Presentation layer
from .presentation.codec import LabelCodec, Label, infer_shell_dir
from .presentation.formatters import FormatMode, format_resolution, format_listing

# Errors
from .errors import (
    JumpEditError, UsageError, ParseError, ConfigError, NotFoundError,
    AlreadyExistsError, FilesystemError, StoreError, EncodingError, DecodeError,
)

__all__ = [
    # Core
    'ArgNode', 'ArgTree', 'parse',
    'Command', 'resolve_command',
    'LabelStore', 'PutMode',
    # Presentation
    'LabelCodec', 'Label', 'infer_shell_dir',
    'FormatMode', 'format_resolution', 'format_listing',
    # Errors
    'JumpEditError', 'UsageError', 'ParseError', 'ConfigError', 'NotFoundError',
    'AlreadyExistsError', 'FilesystemError', 'StoreError', 'EncodingError', 'DecodeError',
]
