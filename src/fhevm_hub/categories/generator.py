"""Write category pages and the aggregate category index.

An unknown category key is reported back in the result dict instead
of being raised: ``create_category_structure`` never fails for a bad
key, it just writes nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fhevm_hub import WriteCallback
from fhevm_hub.catalog.models import CategoryEntry
from fhevm_hub.catalog.query import CATEGORIES, category_keys, find_category
from fhevm_hub.categories import CATEGORIES_INDEX_FILE, CATEGORY_FILE, INDEX_FILE

LEARNING_PATH = (
    "Start with the first example and work through each one to build "
    "your understanding of these concepts.\n"
)


def list_categories() -> list[CategoryEntry]:
    """Return every category in catalog order."""
    return list(CATEGORIES.values())


def render_category_page(category: CategoryEntry) -> str:
    lines = [f"# {category.display_name}", "", category.description, ""]

    lines += ["## Concepts Covered", ""]
    lines += [f"- {concept}" for concept in category.concepts]
    lines.append("")

    lines += ["## Examples", ""]
    lines += [f"- [{ex}](../examples/{ex}/README.md)" for ex in category.example_keys]
    lines.append("")

    lines += ["## Learning Path", ""]
    return "\n".join(lines) + "\n" + LEARNING_PATH


def render_category_index(category: CategoryEntry) -> str:
    lines = [f"# {category.display_name}", "", category.description, "", "## Contents", ""]
    lines += [f"- [{ex}]({ex}/)" for ex in category.example_keys]
    return "\n".join(lines) + "\n"


def render_categories_index(categories: list[CategoryEntry]) -> str:
    parts = [
        "# FHEVM Example Categories\n\n",
        "This section organizes examples by learning category.\n\n",
    ]
    for category in categories:
        parts.append(f"## [{category.display_name}](./{category.key}/README.md)\n\n")
        parts.append(f"{category.description}\n\n")
    return "".join(parts)


def create_category_structure(
    key: str,
    output_dir: Path | str,
    on_write: WriteCallback | None = None,
) -> dict[str, Any]:
    """Write ``<output_dir>/<key>/CATEGORY.md`` and ``README.md``.

    Returns:
        ``{"action": "created", "key", "path", "files"}`` on success, or
        ``{"action": "error", "kind": "UnknownCategory", "key", "error"}``
        when ``key`` is not in the catalog. Nothing is written then.
    """
    category = find_category(key)
    if category is None:
        return {
            "action": "error",
            "kind": "UnknownCategory",
            "key": key,
            "error": f"Unknown category: {key}",
            "valid_keys": category_keys(),
        }

    category_path = Path(output_dir) / key
    category_path.mkdir(parents=True, exist_ok=True)

    files = []
    for label, name, content in (
        ("Category docs", CATEGORY_FILE, render_category_page(category)),
        ("Category index", INDEX_FILE, render_category_index(category)),
    ):
        path = category_path / name
        path.write_text(content, encoding="utf-8")
        files.append(path)
        if on_write:
            on_write(label, path)

    return {"action": "created", "key": key, "path": category_path, "files": files}


def generate_all_categories(
    output_dir: Path | str,
    on_write: WriteCallback | None = None,
) -> dict[str, Any]:
    """Write every category, in catalog order, then ``CATEGORIES.md``."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    results = [create_category_structure(key, out, on_write) for key in CATEGORIES]

    index_path = out / CATEGORIES_INDEX_FILE
    index_path.write_text(render_categories_index(list_categories()), encoding="utf-8")
    if on_write:
        on_write("Categories index", index_path)

    return {"categories": results, "index": index_path}
