"""Exceptions raised by the hub's library layer.

CLI commands decide how each one maps to an exit code.
"""

from __future__ import annotations


class HubError(Exception):
    """Base class for all hub errors."""


class CatalogError(HubError, ValueError):
    """A catalog data file is malformed."""


class DuplicateCatalogKey(CatalogError):
    """A catalog data file declares the same key twice."""

    def __init__(self, key: str, source: str):
        self.key = key
        self.source = source
        super().__init__(f"Duplicate key '{key}' in {source}")


class UnknownCatalogKey(HubError, KeyError):
    """A lookup named a key that is not in the catalog."""

    def __init__(self, kind: str, key: str, valid_keys: list[str]):
        self.kind = kind
        self.key = key
        self.valid_keys = list(valid_keys)
        super().__init__(key)

    def __str__(self) -> str:
        return f"{self.kind}: '{self.key}' (valid: {', '.join(self.valid_keys)})"
