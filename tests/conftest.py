"""Shared test fixtures for fhevm-hub."""

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def project(tmp_path):
    """A project root holding the fixture test/ and contracts/ dirs."""
    root = tmp_path / "project"
    shutil.copytree(FIXTURES / "test", root / "test")
    shutil.copytree(FIXTURES / "contracts", root / "contracts")
    return root


@pytest.fixture
def snapshot():
    """Return a function mapping every file under a root to its bytes."""

    def _snapshot(root: Path) -> dict[str, bytes]:
        return {
            p.relative_to(root).as_posix(): p.read_bytes()
            for p in sorted(root.rglob("*"))
            if p.is_file()
        }

    return _snapshot
