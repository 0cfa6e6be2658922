"""Command-line entry points.

Each tool is its own executable with its own ``main()``:

    fhevm-create-example   -> fhevm_hub.cli.create_example
    fhevm-generate-docs    -> fhevm_hub.cli.generate_docs
    fhevm-create-category  -> fhevm_hub.cli.create_category
"""

import argparse
import sys


class HubArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors.

    argparse uses 2; the hub tools report every usage error as 1.
    """

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def eprint(*args) -> None:
    print(*args, file=sys.stderr)


def unknown_command(argv: list[str], commands) -> str | None:
    """Return the leading argument if it is neither an option nor a known command."""
    if argv and not argv[0].startswith("-") and argv[0] not in commands:
        return argv[0]
    return None


def report_unknown_command(command: str) -> int:
    eprint(f"Unknown command: {command}")
    eprint("Use --help for usage information")
    return 1
