"""
Presentation — Label codec, output formatting and display symbols
"""

from .codec import (
    LabelCodec, Label, SEPARATOR, DEFAULT_EDITOR_KEY,
    containing_directory, infer_shell_dir,
)
from .formatters import (
    FormatMode, quote, resolution_mode, listing_mode,
    format_resolution, format_label, format_listing,
)
from .symbols import SymbolSet, UNICODE, ASCII, get_symbols, safe_print

__all__ = [
    # Codec
    'LabelCodec', 'Label', 'SEPARATOR', 'DEFAULT_EDITOR_KEY',
    'containing_directory', 'infer_shell_dir',
    # Formatters
    'FormatMode', 'quote', 'resolution_mode', 'listing_mode',
    'format_resolution', 'format_label', 'format_listing',
    # Symbols
    'SymbolSet', 'UNICODE', 'ASCII', 'get_symbols', 'safe_print',
]
