"""Render extracted records and contract signatures as markdown."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from fhevm_hub import WriteCallback
from fhevm_hub.docgen import API_REFERENCE_FILE
from fhevm_hub.docgen.parser import DocRecord

_CONTRACT_NAME_RE = re.compile(r"contract\s+(\w+)")
_FUNCTION_NAME_RE = re.compile(r"function\s+(\w+)\s*\(")


def chapter_filename(chapter: str) -> str:
    """Lower-case the chapter and collapse whitespace runs into ``-``."""
    return re.sub(r"\s+", "-", chapter.lower()) + ".md"


def _group(records: Iterable[DocRecord], attr: str) -> dict[str, list[DocRecord]]:
    groups: dict[str, list[DocRecord]] = {}
    for record in records:
        groups.setdefault(getattr(record, attr), []).append(record)
    return groups


def render_chapter(chapter: str, records: list[DocRecord]) -> str:
    """Render one chapter page, sectioned by category."""
    parts = [f"# {chapter} Examples\n\n"]
    for category, items in _group(records, "category").items():
        parts.append(f"## {category}\n\n")
        for item in items:
            parts.append(f"### {item.title}\n\n")
            if item.description:
                parts.append(f"{item.description}\n\n")
            parts.append("---\n\n")
    return "".join(parts)


def generate_markdown_tree(
    records: list[DocRecord],
    output_dir: Path | str,
    on_write: WriteCallback | None = None,
) -> list[Path]:
    """Write one markdown file per distinct chapter.

    Chapters and the categories inside them appear in first-seen
    order. An empty record list writes nothing.

    Chapters are grouped by their exact text but named by
    ``chapter_filename``, so two spellings that normalize alike
    (``Access Control`` and ``access   control``) land on the same file
    and the later one overwrites the earlier.

    Returns:
        Paths written, in write order.
    """
    out = Path(output_dir)
    written = []
    for chapter, items in _group(records, "chapter").items():
        path = out / chapter_filename(chapter)
        path.write_text(render_chapter(chapter, items), encoding="utf-8")
        written.append(path)
        if on_write:
            on_write("Chapter", path)
    return written


def contract_name(source_text: str) -> str:
    match = _CONTRACT_NAME_RE.search(source_text)
    return match.group(1) if match else "Contract"


def function_names(source_text: str) -> list[str]:
    """Distinct function names in declaration order."""
    names: list[str] = []
    for match in _FUNCTION_NAME_RE.finditer(source_text):
        if match.group(1) not in names:
            names.append(match.group(1))
    return names


def render_api_reference(source_text: str) -> str:
    parts = ["# API Reference\n\n", f"## {contract_name(source_text)}\n\n"]
    functions = function_names(source_text)
    if functions:
        parts.append("### Functions\n\n")
        parts.extend(f"- `{fn}()`\n" for fn in functions)
        parts.append("\n")
    return "".join(parts)


def generate_api_reference(
    source_text: str,
    output_dir: Path | str,
    on_write: WriteCallback | None = None,
) -> Path:
    """Write ``api-reference.md`` for one contract source.

    The file name is fixed, so with several contracts the last call
    wins.
    """
    path = Path(output_dir) / API_REFERENCE_FILE
    path.write_text(render_api_reference(source_text), encoding="utf-8")
    if on_write:
        on_write("API reference", path)
    return path
