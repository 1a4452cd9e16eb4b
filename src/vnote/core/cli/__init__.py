"""vnote CLI — entry point for add, find and topics commands."""

import click

from vnote import __version__

from .common import CONFIG_PATH, load_config


@click.group()
@click.version_option(version=__version__, package_name="vnote")
@click.option(
    "--config",
    "config_path",
    envvar="VNOTE_CONFIG",
    default=str(CONFIG_PATH),
    show_default=True,
    help="Path to the YAML config file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool) -> None:
    """VNote — a command-line tool for taking micro notes."""
    ctx.obj = load_config(config_path, verbose=verbose)


# Register subcommands
from .add_cmd import add
from .find_cmd import find
from .topics_cmd import topics

main.add_command(add)
main.add_command(find)
main.add_command(topics)
