"""
Symbols — Tree and status marks for je output

Unicode marks where the terminal can show them, plain ASCII otherwise.
Chosen by display.symbols (or JE_SYMBOLS); "auto" inspects the stdout
encoding and the locale.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional


# Substitutions used when a stream rejects a mark
ASCII_FALLBACKS = {
    '├': '|',
    '└': '`',
    '✓': 'OK',
}

UTF_LOCALE_MARKERS = ('utf-8', 'utf8')


def _write_raw(text: str, stream) -> bool:
    """
    Write surrogate-escaped text as the bytes it came from.

    Paths from argv that are not valid in the locale encoding arrive as
    lone surrogates; the shell has to get the original bytes back.
    """
    buffer = getattr(stream, 'buffer', None)
    if buffer is None:
        return False
    encoding = getattr(stream, 'encoding', None) or 'utf-8'
    try:
        data = text.encode(encoding, 'surrogateescape')
    except UnicodeEncodeError:
        return False
    stream.flush()
    buffer.write(data)
    buffer.flush()
    return True


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    print() that never fails on encoding.

    Labels and paths are user input, so the stream may reject them.
    Surrogate escapes are written back as raw bytes; otherwise the marks
    are swapped for ASCII first and anything still unencodable becomes
    '?'.
    """
    stream = sys.stdout if file is None else file

    try:
        print(text, end=end, file=stream)
        return
    except UnicodeEncodeError:
        pass

    if _write_raw(text + end, stream):
        return

    for mark, fallback in ASCII_FALLBACKS.items():
        text = text.replace(mark, fallback)
    try:
        print(text, end=end, file=stream)
    except UnicodeEncodeError:
        encoding = getattr(stream, 'encoding', None) or 'utf-8'
        print(text.encode(encoding, 'replace').decode(encoding), end=end, file=stream)


@dataclass(frozen=True)
class SymbolSet:
    """Marks drawn by the plain listing and the success lines."""
    tree_branch: str
    tree_end: str
    check_pass: str


UNICODE = SymbolSet('├', '└', '✓')
ASCII = SymbolSet('|', '`', 'OK')


def supports_unicode() -> bool:
    """Best guess at whether stdout accepts Unicode; ASCII when unsure."""
    encoding = (getattr(sys.stdout, 'encoding', None) or '').lower()
    normalized = encoding.replace('-', '').replace('_', '')
    if normalized.startswith('utf'):
        return True
    if normalized.startswith('cp') or normalized in ('ascii', 'latin1', 'iso88591'):
        return False

    locale = ' '.join(os.environ.get(name, '') for name in ('LANG', 'LC_ALL')).lower()
    return any(marker in locale for marker in UTF_LOCALE_MARKERS)


def get_symbols(preference: Optional[str] = None) -> SymbolSet:
    """Symbol set for "unicode", "ascii" or "auto" (None)."""
    if preference in ('unicode', 'ascii'):
        return UNICODE if preference == 'unicode' else ASCII
    return UNICODE if supports_unicode() else ASCII
