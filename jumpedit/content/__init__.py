"""
Content — Static text content for CLI display

Text is data, not code embedded in methods.
"""

from .help_text import HELP_TEXT

__all__ = ['HELP_TEXT']
