"""Configuration records for argsmith operations."""

from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Literal

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from argsmith.atomic import atomic_write
from argsmith.constants import (
    DEFAULT_DELIMITERS,
    DEFAULT_ESCAPE_CHARS,
    DEFAULT_QUOTE_CHARS,
    LONG_NAME_SEPARATOR,
    QUOTED_METACHARACTERS,
    SHELL_METACHARACTERS,
)
from argsmith.errors import ConfigFileError
from argsmith.paths import get_config_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path


log = logging.getLogger(__name__)

type NullBytePolicy = Literal["keep", "strip", "escape", "error"]
type NewlinePolicy = Literal["keep", "ignore", "strip", "escape", "quote", "collapse", "error"]


def _coerce_alphabet(value: object) -> object:
    """Accept a string or an iterable of strings as a character alphabet."""
    if value is None:
        return ""
    if isinstance(value, (set, frozenset)):
        return "".join(sorted(value))
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return "".join(value)
    return value


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SplitConfig(_Record):
    """Character classes and output policy for the tokenizer."""

    delimiters: str = Field(
        default=DEFAULT_DELIMITERS, description="Characters separating tokens"
    )
    quote_chars: str = Field(
        default=DEFAULT_QUOTE_CHARS, description="Characters opening and closing quoted regions"
    )
    escape_chars: str = Field(
        default=DEFAULT_ESCAPE_CHARS, description="Characters escaping the next character"
    )
    keep_quotes: bool = Field(default=False, description="Keep quote marks in emitted tokens")
    keep_escapes: bool = Field(default=False, description="Keep escape marks in emitted tokens")

    @field_validator("delimiters", "quote_chars", "escape_chars", mode="before")
    @classmethod
    def coerce_alphabet(cls, value: object) -> object:
        return _coerce_alphabet(value)


class EscapeConfig(_Record):
    """Escaping policy for a single shell argument."""

    quoted: bool = Field(
        default=False, description="Value will be wrapped in quotes by the caller"
    )
    is_path: bool = Field(
        default=False, description="Prefix ./ when the value starts with a dash"
    )
    null_bytes: NullBytePolicy = Field(default="keep", description="Null byte handling")
    newlines: NewlinePolicy = Field(default="keep", description="Newline handling")
    include: str = Field(default="", description="Extra characters to escape")
    exclude: str = Field(default="", description="Characters to leave unescaped")

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def coerce_alphabet(cls, value: object) -> object:
        return _coerce_alphabet(value)

    def escaped_chars(self) -> frozenset[str]:
        """Return the characters that receive a backslash under this policy.

        An explicit ``include`` always wins over ``exclude``.
        """
        base = QUOTED_METACHARACTERS if self.quoted else SHELL_METACHARACTERS
        return (base - frozenset(self.exclude)) | frozenset(self.include)


class OptionSpec(_Record):
    """Short and long options recognised by the normalizer."""

    niladic: str = Field(default="", description="Short flags that never take a value")
    monadic: str = Field(default="", description="Short flags that always take a value")
    long_names: tuple[str, ...] = Field(
        default=(), description="Value-taking long options, as pipe-delimited alias groups"
    )

    @field_validator("niladic", "monadic", mode="before")
    @classmethod
    def coerce_alphabet(cls, value: object) -> object:
        return _coerce_alphabet(value)

    @field_validator("long_names", mode="before")
    @classmethod
    def coerce_long_names(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,) if value else ()
        if isinstance(value, (set, frozenset)):
            return tuple(sorted(value))
        return value

    @property
    def names(self) -> frozenset[str]:
        """Every long-option name across all alias groups."""
        return long_option_names(self.long_names)


def long_option_names(groups: Iterable[str]) -> frozenset[str]:
    """Flatten pipe-delimited alias groups into a set of option names."""
    return frozenset(
        name for group in groups for name in group.split(LONG_NAME_SEPARATOR) if name
    )


def resolve_config[T: BaseModel](
    model: type[T], config: T | None, overrides: Mapping[str, object]
) -> T:
    """Return ``config`` (or the defaults) with keyword overrides applied and validated."""
    if config is None:
        return model.model_validate(dict(overrides))
    if not overrides:
        return config
    return model.model_validate({**config.model_dump(), **overrides})


class ArgsmithConfig(BaseModel):
    """Root configuration: defaults for each operation, loaded from TOML."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    split: SplitConfig = Field(default_factory=SplitConfig)
    escape: EscapeConfig = Field(default_factory=EscapeConfig)
    options: OptionSpec = Field(default_factory=OptionSpec)

    @classmethod
    def load(cls, config_path: Path | None = None) -> ArgsmithConfig:
        """Load configuration from a TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            log.debug("No config file at %s, using defaults", config_path)
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            config = cls.model_validate(data)
        except (tomllib.TOMLDecodeError, ValidationError) as e:
            raise ConfigFileError(str(config_path), e) from e

        log.debug("Loaded config from %s", config_path)
        return config

    def save(self, path: Path) -> None:
        """Serialize the configuration to a TOML file.

        Args:
            path: Path to write config file (created if missing)
        """
        doc = tomlkit.document()
        for section in ("split", "escape", "options"):
            table = tomlkit.table()
            for key, value in getattr(self, section).model_dump().items():
                table[key] = list(value) if isinstance(value, tuple) else value
            doc[section] = table

        atomic_write(path, tomlkit.dumps(doc))
        log.debug("Saved config to %s", path)
