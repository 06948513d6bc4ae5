"""Encode and decode the catalog document.

The document is a JSON object with a single ``messages`` list. Each record
carries a ``$type`` discriminator followed by the variant's fields under
lowerCamelCase keys:

    {
      "messages": [
        {"$type": "SMS", "phoneNumber": "+7900-800-10-10", "text": "Hi!"}
      ]
    }

Unset fields are omitted. A record with a missing or unknown ``$type``
fails the whole document; there is no per-record skipping.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from message_catalog.catalog.errors import CatalogDecodeError
from message_catalog.messages.base import MESSAGE_TYPES, Message, message_tag

logger = logging.getLogger(__name__)

TYPE_KEY = "$type"


class MessageRecord(BaseModel):
    """One persisted record; variant fields are kept as extra keys."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(alias=TYPE_KEY)

    @property
    def payload(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class CatalogDocument(BaseModel):
    """Top-level envelope of the catalog file."""

    messages: Optional[List[MessageRecord]] = None


def camel_case(name: str) -> str:
    """Convert a snake_case field name to lowerCamelCase."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def encode_message(msg: Message) -> Dict[str, Any]:
    """Encode a message as a tagged record, skipping unset fields."""
    record: Dict[str, Any] = {TYPE_KEY: message_tag(msg)}
    for f in fields(msg):
        value = getattr(msg, f.name)
        if value is not None:
            record[camel_case(f.name)] = value
    return record


def decode_message(record: MessageRecord) -> Message:
    """Rebuild the message variant named by the record's tag."""
    cls = MESSAGE_TYPES.get(record.type)
    if cls is None:
        raise CatalogDecodeError(f"Unrecognized message type {record.type!r}")

    payload = record.payload
    msg = cls()
    for f in fields(cls):
        key = camel_case(f.name)
        value = payload.get(key)
        if value is not None and not isinstance(value, str):
            raise CatalogDecodeError(
                f"Field {key!r} of {record.type} must be a string, got {type(value).__name__}"
            )
        setattr(msg, f.name, value)
    return msg


def encode_catalog(messages: List[Message]) -> str:
    """Serialize the full catalog as indented JSON text."""
    doc = {"messages": [encode_message(m) for m in messages]}
    return json.dumps(doc, ensure_ascii=False, indent=2)


def decode_catalog(text: str) -> List[Message]:
    """Parse catalog JSON text into messages, preserving order.

    Raises:
        CatalogDecodeError: malformed or too deeply nested JSON, a record
            without a valid ``$type``, or a field holding a non-string value.
    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise CatalogDecodeError(f"Malformed catalog document: {exc}") from exc

    if raw is None:
        return []

    try:
        doc = CatalogDocument.model_validate(raw)
    except ValidationError as exc:
        raise CatalogDecodeError(f"Invalid catalog document: {exc}") from exc

    messages = [decode_message(record) for record in doc.messages or []]
    logger.debug("Decoded %d messages", len(messages))
    return messages
