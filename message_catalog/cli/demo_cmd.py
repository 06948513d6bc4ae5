"""CLI command that runs the fixed add / find / remove walkthrough."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from rich.markup import escape

from message_catalog.catalog.config import resolve_catalog_path
from message_catalog.catalog.store import initialize_catalog
from message_catalog.cli.catalog_cmd import console, path_option, run_add, run_find, run_remove
from message_catalog.messages.base import sample_messages

logger = logging.getLogger(__name__)


@click.command("demo")
@path_option
def demo(catalog_path: Optional[str]):
    """Run the sample scenario against a fresh catalog.

    \b
    Steps:
        1. delete any existing catalog document
        2. add one email, SMS, letter and electronic message
        3. find "Hello!", remove "Hi!", find "Hi!" again
    """
    path = resolve_catalog_path(catalog_path)
    try:
        initialize_catalog(path)

        for msg in sample_messages():
            run_add(path, msg)

        run_find(path, "Hello!")
        run_remove(path, "Hi!")
        run_find(path, "Hi!")

        console.print(f"Catalog saved to: {escape(str(path.resolve()))}")
    except Exception as exc:
        logger.debug("Demo aborted", exc_info=True)
        console.print(f"[red]An error occurred:[/red] {escape(str(exc))}")
        sys.exit(1)
