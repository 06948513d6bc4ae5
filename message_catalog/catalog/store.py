"""Catalog store: load, mutate and rewrite the whole catalog document.

Every operation reads the full document into memory, applies one change
and writes the full document back. Read and decode failures degrade to an
empty catalog; write failures drop the change. Both are returned to the
caller on the result object instead of being raised. Only
``initialize_catalog`` raises.
"""

from __future__ import annotations

import contextlib
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from message_catalog.catalog.codec import decode_catalog, encode_catalog
from message_catalog.catalog.errors import CatalogDecodeError, CatalogInitError
from message_catalog.messages.base import Message, identity_text, is_removable, message_tag

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class LoadResult:
    messages: List[Message] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class SaveResult:
    ok: bool
    error: Optional[str] = None


@dataclass
class AddResult:
    tag: str
    load_error: Optional[str] = None
    save_error: Optional[str] = None

    @property
    def added(self) -> bool:
        return self.save_error is None


@dataclass
class RemoveResult:
    removed: int = 0
    load_error: Optional[str] = None
    save_error: Optional[str] = None


@dataclass
class FindResult:
    message: Optional[Message] = None
    load_error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.message is not None


def initialize_catalog(path: PathLike) -> None:
    """Prepare a clean start: create the parent directory, delete a stale document.

    Raises:
        CatalogInitError: the directory cannot be created or the old
            document cannot be deleted.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists():
            path.unlink()
            logger.info("Deleted stale catalog %s", path)
    except OSError as exc:
        raise CatalogInitError(f"Cannot initialize catalog {path}: {exc}") from exc


def load_catalog(path: PathLike) -> LoadResult:
    """Load every message from the document; a missing file is an empty catalog."""
    path = Path(path)
    if not path.exists():
        logger.debug("Catalog %s does not exist, starting empty", path)
        return LoadResult()

    try:
        text = path.read_text(encoding="utf-8")
        messages = decode_catalog(text)
    except (OSError, UnicodeDecodeError, CatalogDecodeError) as exc:
        logger.warning("Failed to load catalog %s: %s", path, exc)
        return LoadResult(error=str(exc))

    logger.debug("Loaded %d messages from %s", len(messages), path)
    return LoadResult(messages=messages)


def save_catalog(path: PathLike, messages: List[Message]) -> SaveResult:
    """Rewrite the whole document through a temporary file and an atomic rename."""
    path = Path(path)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        data = encode_catalog(messages).encode("utf-8")
        tmp_path.write_bytes(data)
        os.replace(tmp_path, path)
    except (OSError, UnicodeEncodeError) as exc:
        logger.warning("Failed to save catalog %s: %s", path, exc)
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        return SaveResult(ok=False, error=str(exc))

    logger.debug("Saved %d messages to %s", len(messages), path)
    return SaveResult(ok=True)


def add_message(path: PathLike, message: Message) -> AddResult:
    """Append a message to the end of the catalog."""
    tag = message_tag(message)
    loaded = load_catalog(path)
    loaded.messages.append(message)
    saved = save_catalog(path, loaded.messages)
    if saved.ok:
        logger.info("Added %s message to %s", tag, path)
    return AddResult(tag=tag, load_error=loaded.error, save_error=saved.error)


def remove_messages(path: PathLike, text: str) -> RemoveResult:
    """Remove every SMS / ElectronicMessage whose text equals ``text`` exactly.

    Email and Letter records are never removed. Nothing is written when no
    record matched.
    """
    loaded = load_catalog(path)
    kept = [m for m in loaded.messages if not is_removable(m, text)]
    removed = len(loaded.messages) - len(kept)
    if removed == 0:
        return RemoveResult(load_error=loaded.error)

    saved = save_catalog(path, kept)
    if saved.ok:
        logger.info("Removed %d message(s) matching %r from %s", removed, text, path)
    return RemoveResult(removed=removed, load_error=loaded.error, save_error=saved.error)


def find_message(path: PathLike, text: str) -> FindResult:
    """Return the first message whose searchable field contains ``text``."""
    loaded = load_catalog(path)
    for msg in loaded.messages:
        value = identity_text(msg)
        if value is not None and text in value:
            return FindResult(message=msg, load_error=loaded.error)
    return FindResult(load_error=loaded.error)


def list_messages(path: PathLike) -> LoadResult:
    """Return the whole catalog in stored order."""
    return load_catalog(path)


class CatalogStore:
    """A catalog document bound to a path.

    Thin wrapper over the module-level operations for callers that keep a
    handle to one catalog.
    """

    def __init__(self, path: PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def initialize(self) -> None:
        initialize_catalog(self._path)

    def load(self) -> LoadResult:
        return load_catalog(self._path)

    def save(self, messages: List[Message]) -> SaveResult:
        return save_catalog(self._path, messages)

    def add(self, message: Message) -> AddResult:
        return add_message(self._path, message)

    def remove(self, text: str) -> RemoveResult:
        return remove_messages(self._path, text)

    def find(self, text: str) -> FindResult:
        return find_message(self._path, text)
