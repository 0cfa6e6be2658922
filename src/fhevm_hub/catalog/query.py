"""Lookups on the packaged catalogs.

The two lookups fail differently on purpose: ``get_example`` raises
``UnknownCatalogKey`` so the scaffold command can exit non-zero, while
``find_category`` returns None and leaves reporting to its caller.
"""

from __future__ import annotations

from fhevm_hub.catalog.loader import load_categories, load_examples
from fhevm_hub.catalog.models import CategoryEntry, ExampleEntry
from fhevm_hub.errors import UnknownCatalogKey

EXAMPLES = load_examples()
CATEGORIES = load_categories()


def example_keys() -> list[str]:
    return list(EXAMPLES)


def category_keys() -> list[str]:
    return list(CATEGORIES)


def get_example(key: str) -> ExampleEntry:
    """Return the example entry for ``key``.

    Raises:
        UnknownCatalogKey: With kind ``UnknownExample`` if absent.
    """
    entry = EXAMPLES.get(key)
    if entry is None:
        raise UnknownCatalogKey("UnknownExample", key, example_keys())
    return entry


def find_category(key: str) -> CategoryEntry | None:
    """Return the category entry for ``key`` or None."""
    return CATEGORIES.get(key)
