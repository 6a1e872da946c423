"""Error classes raised by argsmith."""

from __future__ import annotations


class EscapeError(ValueError):
    """Base for escaper failures with a machine-readable code."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code


class NullByteError(EscapeError):
    """Raised when a value holds a null byte and the policy is ``error``."""

    def __init__(self) -> None:
        super().__init__("Input contains null-bytes", code="NULL_BYTE")


class NewlineError(EscapeError):
    """Raised when a value holds a newline and the policy is ``error``."""

    def __init__(self) -> None:
        super().__init__("Input contains newlines", code="NEWLINE")


class ConfigFileError(ValueError):
    """Raised when a config file cannot be parsed or validated."""

    def __init__(self, path: str, cause: Exception) -> None:
        super().__init__(f"Invalid config file {path}: {cause}")
        self.path = path
        self.__cause__ = cause
