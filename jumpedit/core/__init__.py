"""
Core — Argument tree, command resolution and the label store
"""

from .argtree import ArgNode, ArgTree, MAX_FLAGS, parse
from .resolver import Command, resolve_command, resolve_token, is_reserved, RESERVED_WORDS
from .store import LabelStore, PutMode

__all__ = [
    'ArgNode', 'ArgTree', 'MAX_FLAGS', 'parse',
    'Command', 'resolve_command', 'resolve_token', 'is_reserved', 'RESERVED_WORDS',
    'LabelStore', 'PutMode',
]
