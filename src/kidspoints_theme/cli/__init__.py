"""Command-line interface package for the Kids Points theme engine."""

import logging
from pathlib import Path

import click

from ..config import get_config, load_config
from .theme_cmds import theme

__all__ = ["main"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option("--config", type=click.Path(), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config, verbose):
    """Kids Points theme tools - inspect and validate the theme system."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    # Load configuration
    if config:
        settings = load_config(Path(config))
    else:
        settings = get_config()

    level = logging.DEBUG if verbose else getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


main.add_command(theme)
