"""Example generator CLI.

Usage:
    fhevm-create-example list
    fhevm-create-example create <example> [dir]
"""

import argparse
import sys
from pathlib import Path

from fhevm_hub.cli import HubArgumentParser, eprint, report_unknown_command, unknown_command

PROG = "fhevm-create-example"

EPILOG = f"""\
examples:
  {PROG} list
  {PROG} create encrypted-counter
  {PROG} create access-control ./examples
"""


def build_parser() -> argparse.ArgumentParser:
    parser = HubArgumentParser(
        prog=PROG,
        description="FHEVM Example Generator",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", parser_class=HubArgumentParser)

    sub.add_parser("list", help="List all available examples")

    create = sub.add_parser("create", help="Create a new example")
    create.add_argument("example", nargs="?", default=None, help="Example key")
    create.add_argument("dir", nargs="?", default=".", help="Output directory (default: .)")

    return parser


def cmd_list(args: argparse.Namespace) -> int:
    from fhevm_hub.scaffold.generator import list_catalog

    print("Available FHEVM Examples:\n")
    for entry in list_catalog():
        print(f"  {entry.key}")
        print(f"     Name:        {entry.display_name}")
        print(f"     Description: {entry.description}")
        print(f"     Category:    {entry.category}")
        print(f"     Features:    {', '.join(entry.features)}")
        print()
    return 0


def cmd_create(args: argparse.Namespace) -> int:
    from fhevm_hub.catalog.query import get_example
    from fhevm_hub.errors import UnknownCatalogKey
    from fhevm_hub.scaffold.generator import generate_example, to_display_identifier

    if args.example is None:
        eprint("Error: Please specify an example name")
        eprint(f"Usage: {PROG} create <example> [dir]")
        return 1

    try:
        entry = get_example(args.example)
    except UnknownCatalogKey as exc:
        eprint(f"Unknown example: {exc.key}")
        eprint(f"Available examples: {', '.join(exc.valid_keys)}")
        return 1

    project_name = to_display_identifier(args.example)
    print(f"Creating {entry.display_name} example...")
    print(f"Location: {Path(args.dir) / project_name}")

    def report(label: str, path: Path) -> None:
        print(f"  ✓ {label} created: {path}")

    generate_example(args.example, args.dir, on_write=report)

    print("\nExample project created successfully!")
    print("\nNext steps:")
    print(f"1. cd {project_name}")
    print("2. npm install")
    print("3. npm run test")
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    dispatch = {
        "list": cmd_list,
        "create": cmd_create,
    }

    command = unknown_command(argv, dispatch)
    if command is not None:
        return report_unknown_command(command)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
