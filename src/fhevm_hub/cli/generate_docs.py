"""Documentation generator CLI.

Usage:
    fhevm-generate-docs

Scans ./test and ./contracts (or $FHEVM_HUB_ROOT/...) and writes into
./docs.
"""

import argparse
import sys
from pathlib import Path

from fhevm_hub.cli import HubArgumentParser


def build_parser() -> argparse.ArgumentParser:
    return HubArgumentParser(
        prog="fhevm-generate-docs",
        description=(
            "Generate markdown documentation from @title/@category/@chapter "
            "annotations in test/ and contracts/"
        ),
    )


def cmd_generate(args: argparse.Namespace) -> int:
    from fhevm_hub.docgen.pipeline import generate_documentation

    def report(label: str, path: Path) -> None:
        print(f"Generated: {path}")

    result = generate_documentation(on_write=report)
    print(f"Documentation generated in: {result['docs_dir']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return cmd_generate(args)


if __name__ == "__main__":
    sys.exit(main())
