"""Render catalog messages as human-readable text for the console."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from message_catalog.messages.base import (
    SMS,
    ElectronicMessage,
    Email,
    Letter,
    Message,
    protocol,
)


def _value(value: Optional[str]) -> str:
    return "" if value is None else value


def format_details(msg: Message) -> str:
    """Format all fields of a message in its variant-specific layout."""
    if isinstance(msg, Email):
        lines = [
            f"From: {_value(msg.sender)}",
            f"To: {_value(msg.recipient)}",
            f"Subject: {_value(msg.subject)}",
        ]
    elif isinstance(msg, SMS):
        lines = [
            f"Number: {_value(msg.phone_number)}",
            f"Text: {_value(msg.text)}",
        ]
    elif isinstance(msg, Letter):
        lines = [
            f"Sender address: {_value(msg.sender_address)}",
            f"Recipient address: {_value(msg.recipient_address)}",
            f"Content: {_value(msg.content)}",
        ]
    elif isinstance(msg, ElectronicMessage):
        lines = [f"Content: {_value(msg.content)}"]
    else:
        raise TypeError(f"Not a catalog message: {type(msg).__name__}")
    return "\n".join(lines)


def print_details(msg: Message, console: Optional[Console] = None) -> None:
    """Print a message's details followed by its protocol label."""
    console = console or Console()
    console.print(escape(format_details(msg)))
    console.print(f"Protocol: {escape(protocol(msg))}")
