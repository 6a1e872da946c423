"""One-shot commands wrapping the split, escape, normalize and join operations."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from argsmith.config import ArgsmithConfig, OptionSpec, resolve_config
from argsmith.errors import EscapeError
from argsmith.escaper import escape, join
from argsmith.options import normalize_with
from argsmith.tokenizer import split

if TYPE_CHECKING:
    from collections.abc import Callable

NULL_BYTE_CHOICES = ("keep", "strip", "escape", "error")
NEWLINE_CHOICES = ("keep", "ignore", "strip", "escape", "quote", "collapse", "error")

# Let "-abc" style arguments through to the command instead of click.
PASSTHROUGH = {"ignore_unknown_options": True}


def _overrides(**values: object) -> dict[str, object]:
    """Drop options the user did not pass so config-file values apply."""
    return {key: value for key, value in values.items() if value is not None}


def _escape_options[F: Callable[..., None]](func: F) -> F:
    func = click.option(
        "--exclude", default=None, help="Characters to leave unescaped"
    )(func)
    func = click.option("--include", default=None, help="Extra characters to escape")(func)
    func = click.option(
        "--newlines",
        type=click.Choice(NEWLINE_CHOICES),
        default=None,
        help="Newline policy",
    )(func)
    func = click.option(
        "--null-bytes",
        type=click.Choice(NULL_BYTE_CHOICES),
        default=None,
        help="Null byte policy",
    )(func)
    func = click.option(
        "--path/--no-path", "is_path", default=None, help="Prefix ./ to values starting with -"
    )(func)
    func = click.option(
        "--quoted/--no-quoted", default=None, help="Escape for use inside quotes"
    )(func)
    return func


@click.command("split")
@click.argument("text", required=False, default=None)
@click.option("--delimiters", default=None, help="Characters separating words")
@click.option("--quotes", "quote_chars", default=None, help="Quote characters")
@click.option("--escapes", "escape_chars", default=None, help="Escape characters")
@click.option("--keep-quotes/--no-keep-quotes", default=None, help="Keep quote marks")
@click.option("--keep-escapes/--no-keep-escapes", default=None, help="Keep escape marks")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array")
@click.pass_obj
def split_cmd(
    config: ArgsmithConfig,
    text: str | None,
    delimiters: str | None,
    quote_chars: str | None,
    escape_chars: str | None,
    keep_quotes: bool | None,
    keep_escapes: bool | None,
    as_json: bool,
) -> None:
    """Split TEXT (or stdin) into shell-style words.

    \b
    Examples:
        argsmith split "foo 'bar baz' qux"
        echo 'a|b|c' | argsmith split --delimiters '|' --json
    """
    if text is None or text == "-":
        text = click.get_text_stream("stdin").read()

    words = split(
        text,
        config.split,
        **_overrides(
            delimiters=delimiters,
            quote_chars=quote_chars,
            escape_chars=escape_chars,
            keep_quotes=keep_quotes,
            keep_escapes=keep_escapes,
        ),
    )
    if as_json:
        click.echo(json.dumps(words))
    else:
        for word in words:
            click.echo(word)


@click.command("escape")
@click.argument("value")
@_escape_options
@click.pass_obj
def escape_cmd(config: ArgsmithConfig, value: str, **options: object) -> None:
    """Escape VALUE for literal use in a shell command line."""
    try:
        click.echo(escape(value, config.escape, **_overrides(**options)))
    except EscapeError as e:
        raise click.ClickException(f"{e} [{e.code}]") from e


@click.command("normalize", context_settings=PASSTHROUGH)
@click.option("-n", "--niladic", default=None, help="Short flags that take no value")
@click.option("-m", "--monadic", default=None, help="Short flags that take one value")
@click.option(
    "-l",
    "--long",
    "long_names",
    multiple=True,
    help="Value-taking long option, aliases separated by | (repeatable)",
)
@click.option(
    "--no-long",
    "clear_long",
    is_flag=True,
    help="Ignore long options from the config file",
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def normalize_cmd(
    config: ArgsmithConfig,
    niladic: str | None,
    monadic: str | None,
    long_names: tuple[str, ...],
    clear_long: bool,
    argv: tuple[str, ...],
) -> None:
    """Unbundle short options in ARGV and split --name=value pairs.

    Put -- before ARGV so its options are not read as this command's own.
    -l replaces the config file's long options and --no-long clears them.

    \b
    Examples:
        argsmith normalize -n ab -m c -- -abc1
        argsmith normalize -l 'foo|bar' -- --foo=1
    """
    if long_names or clear_long:
        long_override: tuple[str, ...] | None = long_names
    else:
        long_override = None
    try:
        spec = resolve_config(
            OptionSpec,
            config.options,
            _overrides(niladic=niladic, monadic=monadic, long_names=long_override),
        )
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e
    click.echo(json.dumps(normalize_with(list(argv), spec)))


@click.command("join", context_settings=PASSTHROUGH)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
@_escape_options
@click.pass_obj
def join_cmd(config: ArgsmithConfig, argv: tuple[str, ...], **options: object) -> None:
    """Escape every ARGV element and print them as one command line.

    Put -- before ARGV when an element starts with a dash, otherwise
    elements such as --quoted are taken as options of this command.

    \b
    Examples:
        argsmith join -- echo 'a b' --quoted
    """
    try:
        click.echo(join(argv, config.escape, **_overrides(**options)))
    except EscapeError as e:
        raise click.ClickException(f"{e} [{e.code}]") from e
