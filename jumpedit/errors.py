"""
Errors — Exception kinds for je

Every failure is terminal for the current invocation: cli.main() catches
JumpEditError once, prints it to stderr and exits non-zero.
"""

from typing import Optional


SEE_HELP = "See 'je -h' or 'je --help' for more information"


class JumpEditError(Exception):
    """Base exception for all je errors."""

    exit_code = 1

    def __init__(self, message: str, hint: Optional[str] = None):
        """
        Initialize the exception.

        Args:
            message: What went wrong
            hint: Optional remediation printed after the message
        """
        self.message = message
        self.hint = hint
        super().__init__(message)


class UsageError(JumpEditError):
    """Bad or missing arguments, unknown flags."""

    def __init__(self, message: str, hint: Optional[str] = SEE_HELP):
        super().__init__(message, hint)


class ParseError(UsageError):
    """Token list could not be grouped into an argument tree."""


class ConfigError(JumpEditError):
    """Environment or configuration prevents startup."""


class NotFoundError(JumpEditError):
    """A label or the default editor does not exist."""


class AlreadyExistsError(JumpEditError):
    """Add was asked to overwrite an existing label."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"could not add jump label '{name}' because it already exists",
            hint=f"Use 'je rm {name}' first if you want to replace it",
        )


class FilesystemError(JumpEditError):
    """A path is neither a regular file nor a directory, or stat failed."""

    def __init__(self, path: str, reason: str, hint: Optional[str] = None):
        self.path = path
        self.reason = reason
        super().__init__(f"path '{path}' {reason}", hint)


class StoreError(JumpEditError):
    """Open/fetch/store/delete failure reported by the label store."""


class EncodingError(JumpEditError):
    """A (jump path, shell directory) pair cannot be stored."""


class DecodeError(JumpEditError):
    """A stored value is not a valid encoded label (corrupted record)."""

    def __init__(self, value: str, name: Optional[str] = None):
        self.value = value
        self.name = name
        where = f" for label '{name}'" if name else ""
        super().__init__(
            f"corrupted record{where}: {value!r} is not '<jump path>:::<shell dir>'",
            hint=f"Remove it with 'je rm {name}' and add it again" if name else None,
        )
