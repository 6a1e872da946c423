"""CLI entry point for argsmith."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from argsmith import __version__
from argsmith.cli.commands import escape_cmd, join_cmd, normalize_cmd, split_cmd
from argsmith.config import ArgsmithConfig
from argsmith.debug_log import debug_requested, setup_logging
from argsmith.errors import ConfigFileError


@click.group()
@click.version_option(version=__version__, prog_name="argsmith")
@click.option("--debug", is_flag=True, help="Log debug output to stderr")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: argsmith/config.toml in the user config dir)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Path | None) -> None:
    """Shell-style splitting, escaping and argv normalization."""
    setup_logging(logging.DEBUG if debug or debug_requested() else logging.WARNING)
    try:
        ctx.obj = ArgsmithConfig.load(config_path)
    except ConfigFileError as e:
        raise click.ClickException(str(e)) from e


cli.add_command(split_cmd)
cli.add_command(escape_cmd)
cli.add_command(normalize_cmd)
cli.add_command(join_cmd)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
