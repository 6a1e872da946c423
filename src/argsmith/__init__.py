"""argsmith: shell-style splitting, escaping and argv normalization."""

from argsmith.config import ArgsmithConfig, EscapeConfig, OptionSpec, SplitConfig
from argsmith.errors import ConfigFileError, EscapeError, NewlineError, NullByteError
from argsmith.escaper import escape, join
from argsmith.options import normalize, normalize_with
from argsmith.tokenizer import split

__version__ = "0.1.0"

__all__ = [
    "ArgsmithConfig",
    "ConfigFileError",
    "EscapeConfig",
    "EscapeError",
    "NewlineError",
    "NullByteError",
    "OptionSpec",
    "SplitConfig",
    "escape",
    "join",
    "normalize",
    "normalize_with",
    "split",
]
