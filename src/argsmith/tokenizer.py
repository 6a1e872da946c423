"""Shell-style word splitting.

Splits a raw string into words separated by delimiter runs, honouring quoted
regions and escape characters. Unlike :func:`shlex.split`, splitting never
fails: unterminated quotes run to the end of input and a trailing escape
character is dropped.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from argsmith.config import SplitConfig, resolve_config

if TYPE_CHECKING:
    from collections.abc import Iterator

log = logging.getLogger(__name__)


class ScanState(Enum):
    """Position of the scanner relative to the markup it has consumed."""

    SCANNING = auto()
    IN_QUOTE = auto()
    ESCAPED = auto()


class _Word:
    """Buffer for the word being assembled."""

    __slots__ = ("chars", "started")

    def __init__(self) -> None:
        self.chars: list[str] = []
        self.started = False

    def add(self, char: str) -> None:
        self.chars.append(char)
        self.started = True

    def keep(self, marker: str) -> None:
        """Keep a quote or escape marker without starting the word."""
        self.chars.append(marker)

    def drop_last(self) -> None:
        self.chars.pop()

    def start(self) -> None:
        self.started = True

    def flush(self) -> str:
        word = "".join(self.chars)
        self.chars.clear()
        self.started = False
        return word


def iter_words(text: str, config: SplitConfig) -> Iterator[str]:
    """Yield the words of ``text`` in left-to-right order."""
    delimiters = frozenset(config.delimiters)
    quotes = frozenset(config.quote_chars)
    escapes = frozenset(config.escape_chars)

    word = _Word()
    state = ScanState.SCANNING
    # State to return to once an escaped character is consumed.
    resume = ScanState.SCANNING
    quote: str | None = None

    for char in text:
        if state is ScanState.ESCAPED:
            word.add(char)
            state = resume
            continue

        if char in escapes:
            if config.keep_escapes:
                word.keep(char)
            resume = state
            state = ScanState.ESCAPED
            continue

        if state is ScanState.IN_QUOTE:
            if char == quote:
                quote = None
                state = ScanState.SCANNING
                if config.keep_quotes:
                    word.keep(char)
            else:
                word.add(char)
        elif char in quotes:
            quote = char
            state = ScanState.IN_QUOTE
            word.start()
            if config.keep_quotes:
                word.keep(char)
        elif char in delimiters:
            if word.started:
                yield word.flush()
        else:
            word.add(char)

    if state is ScanState.ESCAPED and config.keep_escapes:
        # A dangling escape has nothing to escape; drop its marker.
        word.drop_last()
    if word.started:
        yield word.flush()


def split(text: str, config: SplitConfig | None = None, **overrides: Any) -> list[str]:
    """Split ``text`` into shell-style words.

    Args:
        text: Raw input, e.g. a command line.
        config: Character classes and output policy; defaults to
            :class:`SplitConfig` with keyword ``overrides`` applied on top.

    Returns:
        The decoded words, in input order. Empty quoted pairs yield ``""``.

    Example:
        >>> split("foo 'bar baz' qux")
        ['foo', 'bar baz', 'qux']
    """
    config = resolve_config(SplitConfig, config, overrides)
    if not text:
        return []
    words = list(iter_words(text, config))
    log.debug("Split %d characters into %d words", len(text), len(words))
    return words
