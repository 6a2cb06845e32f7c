"""Configuration management commands."""
import click

from ..config import Config, dump_config_env, dump_config_toml, get_config

FORMATS = click.Choice(['toml', 'env'])


def _render(cfg: Config, output_format: str) -> str:
    if output_format == 'env':
        return dump_config_env(cfg)
    return dump_config_toml(cfg).rstrip("\n")


@click.group()
def config():
    """Configuration management commands."""
    pass


@config.command("show")
@click.option('--format', 'output_format', default='toml', type=FORMATS, help='Output format')
def show(output_format):
    """Show current effective configuration."""
    click.echo(_render(get_config(), output_format))


@config.command("defaults")
@click.option('--format', 'output_format', default='toml', type=FORMATS, help='Output format')
def defaults(output_format):
    """Show default configuration values."""
    click.echo(_render(Config(), output_format))
