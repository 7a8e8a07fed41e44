"""
CLI -- je (jump edit) command interface

Save a file or directory under a short label, then turn the label back
into a shell command:

    je add myproj ~/src/myproj/main.c ~/src/myproj/
    je myproj        ->  cd "/home/me/src/myproj/" && vim "/home/me/src/myproj/main.c"

One invocation = one command: parse -> resolve -> execute -> exit. The
store is opened lazily and always closed before main() returns, i.e.
before the calling shell evals the output and launches an editor.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigManager
from .core.argtree import ArgTree, parse
from .core.resolver import Command, resolve_command
from .core.store import LabelStore
from .errors import JumpEditError
from .logging_utils import setup_logger
from .presentation.codec import LabelCodec
from .presentation.symbols import get_symbols, safe_print

logger = logging.getLogger(__name__)


class JumpEditCLI:
    """Holds the resources one invocation needs."""

    def __init__(self, data_dir: Optional[Path] = None, config_manager: Optional[ConfigManager] = None):
        self.config_manager = config_manager or ConfigManager(data_dir)
        self.config = self.config_manager.load()
        self.data_dir = self.config_manager.data_dir

        self.symbols = get_symbols(self.config.display.symbols)
        self.codec = LabelCodec()

        # Opened on first access, so help never touches the database
        self._store: Optional[LabelStore] = None

    @property
    def store(self) -> LabelStore:
        """Label store for this invocation (lazy)."""
        if self._store is None:
            self._store = LabelStore(self.config_manager.store_path)
        return self._store

    def close(self):
        """Release the store handle."""
        if self._store is not None:
            self._store.close()
            self._store = None

    def __enter__(self) -> 'JumpEditCLI':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def run(self, tree: ArgTree, command: Optional[Command] = None):
        """Resolve (unless given) and dispatch one command."""
        from .commands import dispatch

        if command is None:
            command = resolve_command(tree)
        return dispatch(command, self, tree)


def report_error(error: JumpEditError, file=None) -> None:
    """Print an error and its hint as human-readable diagnostics."""
    file = file if file is not None else sys.stderr
    safe_print(f"Error: {error.message}", file=file)
    if error.hint:
        safe_print(error.hint, file=file)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for je.

    Args:
        argv: Full argument vector, program name first (default: sys.argv)

    Returns:
        Process exit code (0 on success)
    """
    argv = sys.argv if argv is None else argv

    try:
        tree = parse(argv)
        command = resolve_command(tree)

        with JumpEditCLI() as cli:
            setup_logger(level=cli.config.logging.level)
            logger.debug("data dir %s, command %s", cli.data_dir, command.name)
            cli.run(tree, command)
    except JumpEditError as e:
        logger.debug("%s: %s", type(e).__name__, e.message)
        report_error(e)
        return e.exit_code

    return 0


if __name__ == '__main__':
    sys.exit(main())
