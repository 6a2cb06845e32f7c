#!/usr/bin/env python3
"""Main CLI entry point for thumbswap."""
import os

import click

from .config_cmd import config
from .swap_cmd import swap


@click.group()
@click.option('--log-level', default=None, type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              help='Set logging level')
@click.version_option(package_name='thumbswap')
def cli(log_level):
    """Jump to text in the active tmux pane and copy or paste it."""
    if log_level:
        os.environ['THUMBSWAP_LOG_LEVEL'] = log_level


cli.add_command(swap)
cli.add_command(config)


if __name__ == "__main__":
    cli()
