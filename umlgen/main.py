"""Command line entry point for umlgen."""

from __future__ import annotations

import argparse
import sys

from .codegen import __version__
from .codegen.cli_integration import add_codegen_args, handle_codegen_command
from .logging_config import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="umlgen",
        description="Generate cloud-function model classes from a UML model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  umlgen model.mdj -o build
  umlgen model.mdj --package Shop --prefix LC --indent-spaces 2
  umlgen model.mdj --dry-run --no-docs
  umlgen --url https://example.com/model.mdj --list-packages
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    add_codegen_args(parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run code generation."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)
    return handle_codegen_command(args)


if __name__ == "__main__":
    sys.exit(main())
