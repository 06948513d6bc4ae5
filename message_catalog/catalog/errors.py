"""Exceptions raised inside the catalog layer."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for catalog failures."""


class CatalogDecodeError(CatalogError):
    """Raised when a catalog document cannot be decoded as a whole."""


class CatalogInitError(CatalogError):
    """Raised when the catalog location cannot be prepared for a fresh run."""
