"""Default character classes shared by the tokenizer and the escaper."""

from __future__ import annotations

DEFAULT_DELIMITERS = " \t\n"
DEFAULT_QUOTE_CHARS = "'\"`"
DEFAULT_ESCAPE_CHARS = "\\"

# Characters a POSIX shell treats specially outside quotes.
SHELL_METACHARACTERS = frozenset(" \t!\"#$&'()*+:;<=>?@[\\]`{|}~")

# Characters that stay special inside the caller's surrounding quotes.
QUOTED_METACHARACTERS = frozenset("$`\\!\"")

LONG_NAME_SEPARATOR = "|"
PATH_PREFIX = "./"
