"""Documentation run over a project's test/ and contracts/ directories."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fhevm_hub import WriteCallback, paths
from fhevm_hub.docgen.generator import generate_api_reference, generate_markdown_tree
from fhevm_hub.docgen.parser import DocRecord, extract_from_contract_text, extract_test_docs


def _source_files(directory: Path, suffixes: tuple[str, ...]) -> list[Path]:
    if not directory.is_dir():
        return []
    return [
        p for p in sorted(directory.iterdir())
        if p.is_file() and p.name.endswith(suffixes)
    ]


def generate_documentation(
    root: Path | str | None = None,
    on_write: WriteCallback | None = None,
) -> dict[str, Any]:
    """Generate docs for the project at ``root``.

    Reads ``<root>/test/*.test.ts|*.spec.ts`` and ``<root>/contracts/*.sol``
    and writes into ``<root>/docs``. Missing source directories are
    skipped; an unreadable file aborts the run.

    Args:
        root: Project root. Defaults to ``paths.project_root()``.
        on_write: Called with (label, path) right after each write.

    Returns:
        Dict with ``docs_dir``, ``records`` and ``files`` (paths written).
    """
    base = Path(root) if root else paths.project_root()
    docs_dir = paths.docs_dir(base)
    docs_dir.mkdir(parents=True, exist_ok=True)

    records: list[DocRecord] = []
    files: list[Path] = []

    for test_file in _source_files(paths.test_dir(base), paths.TEST_SUFFIXES):
        records.extend(extract_test_docs(test_file))

    for contract_file in _source_files(paths.contracts_dir(base), (paths.CONTRACT_SUFFIX,)):
        source = contract_file.read_text(encoding="utf-8")
        records.extend(extract_from_contract_text(source))
        files.append(generate_api_reference(source, docs_dir, on_write))

    if records:
        files.extend(generate_markdown_tree(records, docs_dir, on_write))

    return {
        "docs_dir": docs_dir,
        "records": records,
        "files": files,
    }
