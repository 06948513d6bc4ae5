"""Message Catalog CLI — keep emails, SMS, letters and electronic messages in one JSON file."""

import logging

import click
from rich.logging import RichHandler

from message_catalog.cli.catalog_cmd import add, find, init, list_cmd, remove, set_path
from message_catalog.cli.demo_cmd import demo


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Message Catalog — add, find and remove messages in a JSON catalog."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


cli.add_command(init)
cli.add_command(add)
cli.add_command(find)
cli.add_command(remove)
cli.add_command(list_cmd)
cli.add_command(set_path)
cli.add_command(demo)


if __name__ == "__main__":
    cli()
