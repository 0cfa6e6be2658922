"""Load catalog YAML files into read-only tables."""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeVar

import yaml

from fhevm_hub.catalog import CATEGORIES_FILE, EXAMPLES_FILE
from fhevm_hub.catalog.models import CategoryEntry, ExampleEntry
from fhevm_hub.errors import CatalogError, DuplicateCatalogKey

CATALOG_DIR = Path(__file__).parent

T = TypeVar("T")


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects repeated mapping keys.

    Plain safe_load keeps the last value for a repeated key.
    """

    source = "<catalog>"

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in seen:
                    raise DuplicateCatalogKey(str(key), self.source)
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def parse_catalog(text: str, source: str = "<catalog>") -> dict[str, dict[str, Any]]:
    """Parse catalog YAML text into a key -> raw-entry dict.

    Raises:
        DuplicateCatalogKey: If any mapping repeats a key.
        CatalogError: If the document is not a mapping of mappings.
    """
    loader = _UniqueKeyLoader(text)
    loader.source = source
    try:
        data = loader.get_single_data()
    finally:
        loader.dispose()

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {source} is not a YAML mapping")
    for key, entry in data.items():
        if not isinstance(entry, dict):
            raise CatalogError(f"Catalog {source}: entry '{key}' is not a mapping")
    return data


def _load_table(
    path: Path,
    build: Callable[[str, dict[str, Any]], T],
) -> Mapping[str, T]:
    raw = parse_catalog(path.read_text(encoding="utf-8"), source=str(path))
    return MappingProxyType({str(k): build(str(k), v) for k, v in raw.items()})


def load_examples(path: Path | str | None = None) -> Mapping[str, ExampleEntry]:
    """Load the example catalog. Defaults to the packaged examples.yaml."""
    return _load_table(Path(path) if path else CATALOG_DIR / EXAMPLES_FILE, ExampleEntry.from_mapping)


def load_categories(path: Path | str | None = None) -> Mapping[str, CategoryEntry]:
    """Load the category catalog. Defaults to the packaged categories.yaml."""
    return _load_table(
        Path(path) if path else CATALOG_DIR / CATEGORIES_FILE,
        CategoryEntry.from_mapping,
    )
