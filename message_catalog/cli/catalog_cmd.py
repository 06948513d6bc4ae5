"""CLI commands for reading and changing the message catalog."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from message_catalog.catalog.config import load_config, resolve_catalog_path, save_config
from message_catalog.catalog.errors import CatalogInitError
from message_catalog.catalog.store import (
    add_message,
    find_message,
    initialize_catalog,
    list_messages,
    remove_messages,
)
from message_catalog.messages.base import (
    SMS,
    ElectronicMessage,
    Email,
    Letter,
    Message,
    identity_text,
    message_tag,
    protocol,
)
from message_catalog.messages.format import print_details

console = Console()
logger = logging.getLogger(__name__)

path_option = click.option(
    "--path", "catalog_path", default=None,
    help="Catalog file (default: $MESSAGE_CATALOG_PATH, config, or ./messages.json)",
)


def report_load_error(error: Optional[str]):
    if error:
        console.print(f"[red]Failed to load catalog:[/red] {escape(error)}")


def report_save_error(error: Optional[str]):
    if error:
        console.print(f"[red]Failed to save catalog:[/red] {escape(error)}")


def run_add(catalog_path, message: Message):
    result = add_message(catalog_path, message)
    report_load_error(result.load_error)
    if result.added:
        console.print(f"[green]✓[/green] Added {result.tag} message")
    else:
        report_save_error(result.save_error)


def run_find(catalog_path, text: str):
    result = find_message(catalog_path, text)
    report_load_error(result.load_error)
    if result.found:
        console.print("[bold]Found message:[/bold]")
        print_details(result.message, console)
        console.print()
    else:
        console.print(f"[yellow]No message containing '{escape(text)}' found[/yellow]")
        console.print()


def run_remove(catalog_path, text: str):
    result = remove_messages(catalog_path, text)
    report_load_error(result.load_error)
    if result.removed == 0:
        console.print("[yellow]Message not found[/yellow]")
    elif result.save_error:
        report_save_error(result.save_error)
    else:
        console.print(
            f"[green]✓[/green] Removed {result.removed} message(s) with content '{escape(text)}'"
        )


@click.command("init")
@path_option
def init(catalog_path: Optional[str]):
    """Start a fresh catalog, deleting any existing document."""
    path = resolve_catalog_path(catalog_path)
    try:
        initialize_catalog(path)
    except CatalogInitError as exc:
        console.print(f"[red]Initialization failed:[/red] {escape(str(exc))}")
        sys.exit(1)
    console.print(f"[green]✓[/green] Catalog ready at {escape(str(path.resolve()))}")


@click.group("add")
def add():
    """Append a message to the catalog."""
    pass


@add.command("email")
@click.option("--sender", default=None)
@click.option("--recipient", default=None)
@click.option("--subject", default=None)
@path_option
def add_email(sender, recipient, subject, catalog_path):
    """Add an email.

    \b
    Example:
        message-catalog add email --sender a@x --recipient b@x --subject "Hello!"
    """
    run_add(resolve_catalog_path(catalog_path), Email(sender, recipient, subject))


@add.command("sms")
@click.option("--phone", "phone_number", default=None)
@click.option("--text", default=None)
@path_option
def add_sms(phone_number, text, catalog_path):
    """Add an SMS."""
    run_add(resolve_catalog_path(catalog_path), SMS(phone_number, text))


@add.command("letter")
@click.option("--sender-address", default=None)
@click.option("--recipient-address", default=None)
@click.option("--content", default=None)
@path_option
def add_letter(sender_address, recipient_address, content, catalog_path):
    """Add a paper letter."""
    run_add(
        resolve_catalog_path(catalog_path),
        Letter(sender_address, recipient_address, content),
    )


@add.command("electronic")
@click.option("--content", default=None)
@path_option
def add_electronic(content, catalog_path):
    """Add a generic electronic message."""
    run_add(resolve_catalog_path(catalog_path), ElectronicMessage(content))


@click.command("find")
@click.argument("text")
@path_option
def find(text: str, catalog_path: Optional[str]):
    """Show the first message whose subject, text or content contains TEXT.

    Matching is case-sensitive.
    """
    run_find(resolve_catalog_path(catalog_path), text)


@click.command("remove")
@click.argument("text")
@path_option
def remove(text: str, catalog_path: Optional[str]):
    """Remove SMS and electronic messages whose text is exactly TEXT.

    Emails and letters are never removed by this command.
    """
    run_remove(resolve_catalog_path(catalog_path), text)


@click.command("list")
@path_option
def list_cmd(catalog_path: Optional[str]):
    """List every message in stored order."""
    path = resolve_catalog_path(catalog_path)
    result = list_messages(path)
    report_load_error(result.error)

    if not result.messages:
        console.print("[yellow]Catalog is empty.[/yellow]")
        return

    table = Table(title=f"Messages ({len(result.messages)})")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Protocol")
    table.add_column("Text")
    for i, msg in enumerate(result.messages, start=1):
        table.add_row(
            str(i),
            message_tag(msg),
            protocol(msg),
            escape(identity_text(msg) or ""),
        )
    console.print(table)


@click.command("set-path")
@click.argument("catalog_path")
def set_path(catalog_path: str):
    """Save the default catalog path to the config file."""
    config = load_config()
    config["catalog_path"] = catalog_path
    save_config(config)
    console.print(f"[green]✓[/green] Default catalog path set to {escape(catalog_path)}")
