"""Default path resolution.

Uses environment variables when available, falls back to conventional
defaults relative to the current working directory.

Environment variables:
    FHEVM_HUB_ROOT: project root scanned for docs (default: cwd)
    FHEVM_CATEGORIES_DIR: category output dir (default: ./docs/categories)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_CATEGORIES_SUBPATH = Path("docs") / "categories"

TEST_SUFFIXES = (".test.ts", ".spec.ts")
CONTRACT_SUFFIX = ".sol"


def project_root() -> Path:
    """Return the project root the doc extractor works in."""
    env = os.environ.get("FHEVM_HUB_ROOT")
    if env:
        return Path(env)
    return Path.cwd()


def docs_dir(root: Path | None = None) -> Path:
    return (root or project_root()) / "docs"


def test_dir(root: Path | None = None) -> Path:
    return (root or project_root()) / "test"


def contracts_dir(root: Path | None = None) -> Path:
    return (root or project_root()) / "contracts"


def categories_dir() -> Path:
    """Return the default output directory for category pages."""
    env = os.environ.get("FHEVM_CATEGORIES_DIR")
    if env:
        return Path(env)
    return Path(".") / _DEFAULT_CATEGORIES_SUBPATH
