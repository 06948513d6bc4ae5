"""Message variants stored in the catalog.

The set of variants is closed: Email, SMS, Letter and ElectronicMessage.
Behaviour that differs per variant (protocol label, searchable text) is
dispatched on the concrete type by plain functions rather than methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Union


@dataclass
class Email:
    sender: Optional[str] = None
    recipient: Optional[str] = None
    subject: Optional[str] = None


@dataclass
class SMS:
    phone_number: Optional[str] = None
    text: Optional[str] = None


@dataclass
class Letter:
    sender_address: Optional[str] = None
    recipient_address: Optional[str] = None
    content: Optional[str] = None


@dataclass
class ElectronicMessage:
    content: Optional[str] = None


Message = Union[Email, SMS, Letter, ElectronicMessage]

# Tag persisted as "$type"; consulted for both encode and decode.
MESSAGE_TYPES: Dict[str, type] = {
    "Email": Email,
    "SMS": SMS,
    "Letter": Letter,
    "ElectronicMessage": ElectronicMessage,
}

_TAG_FOR_TYPE: Dict[type, str] = {cls: tag for tag, cls in MESSAGE_TYPES.items()}


def message_tag(msg: Message) -> str:
    """Return the discriminator tag for a message variant."""
    try:
        return _TAG_FOR_TYPE[type(msg)]
    except KeyError:
        raise TypeError(f"Not a catalog message: {type(msg).__name__}") from None


def protocol(msg: Message) -> str:
    """Return the fixed protocol label of a message variant."""
    if isinstance(msg, Email):
        return "Email Protocol"
    if isinstance(msg, SMS):
        return "SMS Protocol"
    if isinstance(msg, Letter):
        return "Letter Protocol"
    if isinstance(msg, ElectronicMessage):
        return "Electronic Message Protocol"
    raise TypeError(f"Not a catalog message: {type(msg).__name__}")


def identity_text(msg: Message) -> Optional[str]:
    """The field used to search for a message (subject, text or content)."""
    if isinstance(msg, Email):
        return msg.subject
    if isinstance(msg, SMS):
        return msg.text
    if isinstance(msg, (Letter, ElectronicMessage)):
        return msg.content
    raise TypeError(f"Not a catalog message: {type(msg).__name__}")


def is_removable(msg: Message, text: str) -> bool:
    """Whether ``remove`` deletes this message for the given text.

    Only SMS and ElectronicMessage records are eligible; Email and Letter
    records are kept even when their text matches.
    """
    if isinstance(msg, SMS):
        return msg.text == text
    if isinstance(msg, ElectronicMessage):
        return msg.content == text
    return False


def sample_messages() -> List[Message]:
    """The four records added by the demo scenario, one per variant."""
    return [
        Email("bobr@mail.ru", "crocodil@mail.ru", "Hello!"),
        SMS("+7900-800-10-10", "Hi!"),
        Letter("Staropupunski 12", "Pushkina 120", "This is a letter."),
        ElectronicMessage("This is an electronic message."),
    ]
