"""Command-line interface for cabinet."""

import argparse
import sys
from pathlib import Path

from app import CabinetApp
from model import Layout, LayoutValidationError, demo_layout, load_layout

CABINET_VERSION = "0.1.0"


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the cabinet CLI."""
    parser = argparse.ArgumentParser(
        prog="cabinet",
        description="Browse a layout of drawers and knobs in the terminal.",
    )
    parser.add_argument(
        "layout",
        nargs="?",
        type=Path,
        help="JSON layout file (the built-in demo is used when omitted)",
    )
    parser.add_argument(
        "--fragment",
        metavar="NAME",
        help="Start with this URL fragment, overriding the layout's",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cabinet {CABINET_VERSION}",
    )
    return parser


def resolve_layout(path: Path | None) -> Layout:
    """Load the layout at `path`, or the demo layout.

    Exits with status 1 if the file can't be used.
    """
    if path is None:
        return demo_layout()
    try:
        return load_layout(path)
    except LayoutValidationError as e:
        print_error_box("Invalid layout", str(e))
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = create_parser().parse_args(argv)
    layout = resolve_layout(args.layout)
    app = CabinetApp(layout, fragment=args.fragment)
    app.run()


if __name__ == "__main__":
    main()
