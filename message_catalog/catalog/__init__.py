from message_catalog.catalog.codec import decode_catalog, encode_catalog
from message_catalog.catalog.errors import CatalogDecodeError, CatalogError, CatalogInitError
from message_catalog.catalog.store import (
    CatalogStore,
    add_message,
    find_message,
    initialize_catalog,
    list_messages,
    load_catalog,
    remove_messages,
    save_catalog,
)

__all__ = [
    "CatalogStore",
    "CatalogError",
    "CatalogDecodeError",
    "CatalogInitError",
    "decode_catalog",
    "encode_catalog",
    "initialize_catalog",
    "load_catalog",
    "save_catalog",
    "add_message",
    "remove_messages",
    "find_message",
    "list_messages",
]
