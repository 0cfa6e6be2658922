"""Catalog entry types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fhevm_hub.errors import CatalogError


def _require(key: str, data: dict[str, Any], field_name: str) -> Any:
    if field_name not in data:
        raise CatalogError(f"Catalog entry '{key}' is missing '{field_name}'")
    return data[field_name]


def _string_list(key: str, data: dict[str, Any], field_name: str) -> tuple[str, ...]:
    value = data.get(field_name) or []
    if not isinstance(value, list):
        raise CatalogError(f"Catalog entry '{key}': '{field_name}' must be a list")
    return tuple(str(v) for v in value)


@dataclass(frozen=True)
class ExampleEntry:
    """One scaffoldable example project."""

    key: str
    display_name: str
    description: str
    category: str
    features: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, key: str, data: dict[str, Any]) -> ExampleEntry:
        return cls(
            key=key,
            display_name=str(_require(key, data, "name")),
            description=str(_require(key, data, "description")),
            category=str(_require(key, data, "category")),
            features=_string_list(key, data, "features"),
        )


@dataclass(frozen=True)
class CategoryEntry:
    """One learning category and the examples it groups."""

    key: str
    display_name: str
    description: str
    example_keys: tuple[str, ...] = ()
    concepts: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, key: str, data: dict[str, Any]) -> CategoryEntry:
        return cls(
            key=key,
            display_name=str(_require(key, data, "name")),
            description=str(_require(key, data, "description")),
            example_keys=_string_list(key, data, "examples"),
            concepts=_string_list(key, data, "concepts"),
        )
