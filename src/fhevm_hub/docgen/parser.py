"""Extract documentation records from contract and test sources.

Both scanners are adjacency heuristics, not parsers. A tagged comment
that is not immediately followed by the expected declaration produces
nothing, and that is the intended behavior.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from fhevm_hub.docgen import DEFAULT_GROUP

# The body is matched lazily up to the first "*/" that is followed by a
# declaration keyword, so it can swallow undeclared comments before it.
_CONTRACT_DOC_RE = re.compile(r"/\*\*\n([\s\S]*?)\*/\s*(contract|function)")
_TEST_TITLE_RE = re.compile(r'it\("([^"]+)"')

_COMMENT_OPEN = "/**"
_COMMENT_CLOSE = "*/"
_TEST_CALL = 'it("'


@dataclass
class DocRecord:
    """One documented item: a contract, a function or a test case."""

    title: str
    category: str = DEFAULT_GROUP
    chapter: str = DEFAULT_GROUP
    description: str = ""


def _tag(block: str, name: str) -> str | None:
    match = re.search(rf"@{name}\s+(.+)", block)
    return match.group(1).strip() if match else None


def _record(title: str, block: str, description_tag: str) -> DocRecord:
    return DocRecord(
        title=title,
        category=_tag(block, "category") or DEFAULT_GROUP,
        chapter=_tag(block, "chapter") or DEFAULT_GROUP,
        description=_tag(block, description_tag) or "",
    )


def extract_from_contract_text(text: str) -> list[DocRecord]:
    """Collect records from doc comments on contracts and functions.

    Only blocks carrying ``@title`` yield a record; ``@notice`` becomes
    the description.
    """
    records = []
    for match in _CONTRACT_DOC_RE.finditer(text):
        block = match.group(1)
        title = _tag(block, "title")
        if title:
            records.append(_record(title, block, "notice"))
    return records


def extract_from_test_text(text: str) -> list[DocRecord]:
    """Collect records from comment blocks placed right above ``it("...")``.

    The test title is taken verbatim from the quoted first argument;
    ``@description`` becomes the description.
    """
    records = []
    lines = text.split("\n")
    i = 0
    while i < len(lines):
        if _COMMENT_OPEN not in lines[i]:
            i += 1
            continue

        j = i
        while j < len(lines) and _COMMENT_CLOSE not in lines[j]:
            j += 1
        if j >= len(lines):
            # Unterminated block runs to end of text
            break

        block = "\n".join(lines[i:j + 1])
        next_line = lines[j + 1] if j + 1 < len(lines) else ""
        if _TEST_CALL in next_line:
            title_match = _TEST_TITLE_RE.search(next_line)
            if title_match:
                records.append(_record(title_match.group(1), block, "description"))

        i = j + 1
    return records


def extract_contract_docs(path: Path | str) -> list[DocRecord]:
    """Read a Solidity file and extract its records."""
    return extract_from_contract_text(Path(path).read_text(encoding="utf-8"))


def extract_test_docs(path: Path | str) -> list[DocRecord]:
    """Read a TypeScript test file and extract its records."""
    return extract_from_test_text(Path(path).read_text(encoding="utf-8"))
