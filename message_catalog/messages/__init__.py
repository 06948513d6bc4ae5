from message_catalog.messages.base import (
    MESSAGE_TYPES,
    SMS,
    ElectronicMessage,
    Email,
    Letter,
    Message,
    identity_text,
    is_removable,
    message_tag,
    protocol,
    sample_messages,
)
from message_catalog.messages.format import format_details, print_details

__all__ = [
    "MESSAGE_TYPES",
    "Email",
    "SMS",
    "Letter",
    "ElectronicMessage",
    "Message",
    "identity_text",
    "is_removable",
    "message_tag",
    "protocol",
    "sample_messages",
    "format_details",
    "print_details",
]
