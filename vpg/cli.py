"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from vpg.config import FormatError, load_config
from vpg.generator import GeneratorError, generate


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the command."""
    parser = _Parser(prog="vpg", usage="%(prog)s [options] <TOML file>")
    parser.add_argument("-n", "--name", metavar="NAME", help="set project name")
    parser.add_argument("-q", "--qemu", action="store_true", help="support QEMU execution")
    parser.add_argument("files", nargs="*", metavar="TOML file", help=argparse.SUPPRESS)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.name is None:
        print("Error: Project name is required.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if len(args.files) != 1:
        print("Error: TOML file is required.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        system = load_config(args.files[0])
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except FormatError as exc:
        if exc.__cause__ is not None:
            print(exc.__cause__, file=sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        generate(args.name, system)
    except GeneratorError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())