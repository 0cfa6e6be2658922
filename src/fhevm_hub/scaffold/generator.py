"""Example project generator.

Writes, in order: directory skeleton, contract, test, hardhat.config.ts,
tsconfig.json, package.json, README.md. Each file overwrites whatever
is already at its path. Nothing is rolled back if a later write fails.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from fhevm_hub import WriteCallback
from fhevm_hub.catalog.models import ExampleEntry
from fhevm_hub.catalog.query import EXAMPLES, get_example
from fhevm_hub.scaffold import PROJECT_DIRS
from fhevm_hub.scaffold.templates import (
    CONTRACT_TEMPLATE,
    HARDHAT_CONFIG,
    README_TEMPLATE,
    TEST_TEMPLATE,
    TSCONFIG,
    format_feature,
    package_manifest,
)


def list_catalog() -> list[ExampleEntry]:
    """Return every example entry in catalog order."""
    return list(EXAMPLES.values())


def to_display_identifier(key: str) -> str:
    """Convert a kebab-case key to the project/contract identifier.

    Every segment, the first one included, gets its first character
    upper-cased; the rest of each segment is left as is:
        encrypted-counter -> EncryptedCounter
        erc20-wrapper -> Erc20Wrapper
    """
    return "".join(word[:1].upper() + word[1:] for word in key.split("-"))


def render_contract(entry: ExampleEntry) -> str:
    return CONTRACT_TEMPLATE.format(
        display_name=entry.display_name,
        category=entry.category,
        contract_name=to_display_identifier(entry.key),
    )


def render_test(contract_name: str) -> str:
    return TEST_TEMPLATE.format(contract_name=contract_name)


def render_readme(entry: ExampleEntry) -> str:
    return README_TEMPLATE.format(
        display_name=entry.display_name,
        description=entry.description,
        features_block="\n".join(format_feature(f) for f in entry.features),
    )


def _dump_json(data: dict) -> str:
    return json.dumps(data, indent=2)


def create_project_structure(project_path: Path) -> list[Path]:
    """Create the fixed directory skeleton under ``project_path``."""
    created = []
    for rel in PROJECT_DIRS:
        full = project_path / rel
        full.mkdir(parents=True, exist_ok=True)
        created.append(full)
    return created


def generate_example(
    key: str,
    output_dir: Path | str = ".",
    on_write: WriteCallback | None = None,
) -> dict[str, Any]:
    """Scaffold the example project for ``key`` under ``output_dir``.

    Args:
        key: Example catalog key (kebab-case).
        output_dir: Parent directory of the generated project.
        on_write: Called with (label, path) after each file is written.

    Returns:
        Dict with ``key``, ``name`` (display name), ``path`` (project
        directory) and ``files`` (paths in write order).

    Raises:
        UnknownCatalogKey: If ``key`` is not in the catalog. Raised
            before anything is created on disk.
        OSError: On any filesystem failure; earlier writes stay.
    """
    entry = get_example(key)
    project_name = to_display_identifier(key)
    project_path = Path(output_dir) / project_name

    create_project_structure(project_path)

    outputs: list[tuple[str, Path, str]] = [
        ("Contract", project_path / "contracts" / f"{project_name}.sol", render_contract(entry)),
        ("Test file", project_path / "test" / f"{project_name}.test.ts", render_test(project_name)),
        ("Hardhat config", project_path / "hardhat.config.ts", HARDHAT_CONFIG),
        ("TypeScript config", project_path / "tsconfig.json", _dump_json(TSCONFIG)),
        ("Package.json", project_path / "package.json", _dump_json(package_manifest(key, entry.description))),
        ("README", project_path / "README.md", render_readme(entry)),
    ]

    files: list[Path] = []
    for label, path, content in outputs:
        path.write_text(content, encoding="utf-8")
        files.append(path)
        if on_write:
            on_write(label, path)

    return {
        "key": key,
        "name": entry.display_name,
        "path": project_path,
        "files": files,
    }
