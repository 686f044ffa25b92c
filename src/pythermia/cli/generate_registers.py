#!/usr/bin/env python3
"""Generate the register catalog module from the tabular register description.

Usage:
    thermia-registers-codegen thermia_registers.csv
    thermia-registers-codegen thermia_registers.csv src/pythermia/registers/thermia.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pythermia.exceptions import CatalogError
from pythermia.registers.catalog import RegisterCatalog
from pythermia.registers.csv_source import parse_register_csv, render_catalog_module

DEFAULT_OUTPUT = "thermia.py"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="thermia-registers-codegen",
        description="Compile the CSV register description into a Python catalog module.",
    )
    parser.add_argument("input", type=Path, help="Register description CSV file")
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_OUTPUT),
        help="Generated module path (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    if not args.input.exists():
        print(f"Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        definitions = parse_register_csv(args.input.read_text(encoding="utf-8"))
        # Rejects duplicate names before anything is written
        RegisterCatalog(definitions)
    except CatalogError as err:
        print(f"{args.input}: {err}", file=sys.stderr)
        return 1

    source = render_catalog_module(definitions, source=args.input.name)
    args.output.write_text(source, encoding="utf-8")
    print(f"Generated {args.output} with {len(definitions)} register definitions")
    return 0


if __name__ == "__main__":
    sys.exit(main())
