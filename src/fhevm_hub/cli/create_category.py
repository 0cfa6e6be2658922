"""Category generator CLI.

Usage:
    fhevm-create-category list
    fhevm-create-category create <category> [dir]
    fhevm-create-category create-all [dir]

An unknown category in ``create`` is reported but still exits 0,
unlike ``fhevm-create-example`` which exits 1 for an unknown example.
"""

import argparse
import sys
from pathlib import Path

from fhevm_hub.cli import HubArgumentParser, eprint, report_unknown_command, unknown_command

PROG = "fhevm-create-category"


def build_parser() -> argparse.ArgumentParser:
    parser = HubArgumentParser(prog=PROG, description="FHEVM Category Generator")
    sub = parser.add_subparsers(dest="command", parser_class=HubArgumentParser)

    sub.add_parser("list", help="List all available categories")

    create = sub.add_parser("create", help="Create a single category")
    create.add_argument("category", nargs="?", default=None, help="Category key")
    create.add_argument(
        "dir", nargs="?", default=None,
        help="Output directory (default: ./docs/categories)",
    )

    create_all = sub.add_parser("create-all", help="Create all categories")
    create_all.add_argument(
        "dir", nargs="?", default=None,
        help="Output directory (default: ./docs/categories)",
    )

    return parser


def _output_dir(args: argparse.Namespace) -> Path:
    from fhevm_hub.paths import categories_dir

    return Path(args.dir) if args.dir else categories_dir()


def _report(label: str, path: Path) -> None:
    print(f"  {label}: {path}")


def cmd_list(args: argparse.Namespace) -> int:
    from fhevm_hub.categories.generator import list_categories

    print("Available Categories:\n")
    for category in list_categories():
        print(f"  {category.display_name} ({category.key})")
        print(f"     {category.description}")
        print(f"     Examples: {', '.join(category.example_keys)}")
        print(f"     Concepts: {', '.join(category.concepts)}")
        print()
    return 0


def _print_result(result: dict) -> None:
    if result["action"] == "error":
        eprint(f"ERROR: {result['error']}")
        eprint(f"Available categories: {', '.join(result['valid_keys'])}")
    else:
        print(f"Created category structure: {result['path']}")


def cmd_create(args: argparse.Namespace) -> int:
    from fhevm_hub.categories.generator import create_category_structure

    if args.category is None:
        eprint("Error: Please specify a category name")
        eprint("Use 'list' command to see available categories")
        return 1

    result = create_category_structure(args.category, _output_dir(args), on_write=_report)
    _print_result(result)
    # Unknown category is not an error exit
    return 0


def cmd_create_all(args: argparse.Namespace) -> int:
    from fhevm_hub.categories.generator import generate_all_categories

    print("Generating all categories...\n")
    result = generate_all_categories(_output_dir(args), on_write=_report)
    for category_result in result["categories"]:
        _print_result(category_result)
    print(f"Generated categories index: {result['index']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    dispatch = {
        "list": cmd_list,
        "create": cmd_create,
        "create-all": cmd_create_all,
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
