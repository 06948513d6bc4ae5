"""Message Catalog: a flat JSON catalog of heterogeneous messages."""

__version__ = "0.1.0"
