"""Escape values for literal inclusion in a POSIX shell command line."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from argsmith.config import EscapeConfig, resolve_config
from argsmith.constants import PATH_PREFIX
from argsmith.errors import NewlineError, NullByteError

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)

NULL_BYTE = "\0"
NEWLINE_RUN = re.compile(r"(?:\r?\n)+")
_NEWLINE = re.compile(r"\r?\n")


def _escape_chars(text: str, escaped: frozenset[str], null_policy: str) -> str:
    out: list[str] = []
    for char in text:
        if char == NULL_BYTE:
            if null_policy == "escape":
                out.append("\\")
        elif char in escaped:
            out.append("\\")
        out.append(char)
    return "".join(out)


def _rewrite_newlines(run: str, policy: str) -> str:
    match policy:
        case "strip":
            return ""
        case "escape":
            return "".join("\\" + char for char in run)
        case "quote":
            return f"'{run}'"
        case "collapse":
            return " "
        case _:
            return run


def _starts_with_dash(value: str, config: EscapeConfig) -> bool:
    """Check whether the value the shell will see begins with a dash."""
    if config.newlines == "strip":
        value = _NEWLINE.sub("", value)
    return value.startswith("-")


def escape(value: str, config: EscapeConfig | None = None, **overrides: Any) -> str:
    """Escape ``value`` so a POSIX shell reads it back as one literal word.

    In unquoted mode every shell metacharacter gets a backslash. With
    ``quoted=True`` the caller wraps the result in quotes itself, so only the
    characters that stay special inside quotes are escaped.

    Null bytes and newlines are handled by their own policies. Stripped null
    bytes go first, so newline runs they interrupted merge. Newlines are
    rewritten after metacharacter escaping, so the spaces, quotes and
    backslashes that policy inserts are emitted as-is.

    Args:
        value: The raw argument.
        config: Escaping policy; defaults to :class:`EscapeConfig` with
            keyword ``overrides`` applied on top.

    Returns:
        The escaped argument.

    Raises:
        NullByteError: ``null_bytes="error"`` and ``value`` holds a null byte.
        NewlineError: ``newlines="error"`` and ``value`` holds a newline.

    Example:
        >>> escape("; rm -rf *")
        '\\\\;\\\\ rm\\\\ -rf\\\\ \\\\*'
    """
    config = resolve_config(EscapeConfig, config, overrides)

    if config.null_bytes == "error" and NULL_BYTE in value:
        raise NullByteError()
    if config.newlines == "error" and "\n" in value:
        raise NewlineError()
    if config.null_bytes == "strip":
        value = value.replace(NULL_BYTE, "")

    escaped = config.escaped_chars()
    pieces: list[str] = []
    position = 0
    for match in NEWLINE_RUN.finditer(value):
        pieces.append(_escape_chars(value[position : match.start()], escaped, config.null_bytes))
        pieces.append(_rewrite_newlines(match.group(), config.newlines))
        position = match.end()
    pieces.append(_escape_chars(value[position:], escaped, config.null_bytes))

    result = "".join(pieces)
    if config.is_path and _starts_with_dash(value, config):
        result = PATH_PREFIX + result
    return result


def join(argv: Iterable[str], config: EscapeConfig | None = None, **overrides: Any) -> str:
    """Escape each argument and join them into one command line.

    Empty arguments become ``''`` in unquoted mode so they survive splitting.
    """
    config = resolve_config(EscapeConfig, config, overrides)
    words = []
    for arg in argv:
        word = escape(arg, config)
        if not word and not config.quoted:
            word = "''"
        words.append(word)
    log.debug("Joined %d arguments", len(words))
    return " ".join(words)
