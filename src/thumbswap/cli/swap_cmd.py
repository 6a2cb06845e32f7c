"""The swap command, run by the tmux key binding."""
import logging

import click

from ..config import load_config, set_config
from ..errors import ThumbswapError
from ..swapper import Swapper
from ..utils import setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option('--dir', 'dir_', default='', help='Directory where to execute thumbs')
@click.option('--command', default=None, help='Pick command, {} is replaced by the selection')
@click.option('--upcase-command', default=None, help='Upcase command, {} is replaced by the selection')
@click.option('-o', '--osc52', is_flag=True, default=False,
              help='Print OSC52 copy escape sequence in addition to running the pick command')
@click.option('--timeout', type=float, default=None,
              help='Stop waiting for the picker after this many seconds')
@click.option('-c', '--config', 'config_path', default=None, help='Path to a thumbswap config file')
def swap(dir_, command, upcase_command, osc52, timeout, config_path):
    """Swap the picker into the active pane and act on its selection."""
    cfg = load_config(config_path)
    set_config(cfg)
    setup_logging(cfg.log.level, cfg.log.file)

    try:
        swapper = Swapper(
            dir_,
            command or cfg.picker.command,
            upcase_command or cfg.picker.upcase_command,
            osc52=osc52 or cfg.picker.osc52,
            config=cfg,
            wait_timeout=timeout,
        )
        executed = swapper.run()
    except ThumbswapError as e:
        logger.debug(f"thumbswap failed: {e!r}")
        click.echo(f"error: {e}", err=True)
        raise click.Abort()

    if executed is None:
        logger.info("No selection, nothing to do")
