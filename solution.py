"""Sum the part numbers and gear ratios of an engine schematic.

Three-stage pipeline:
  1. tokenize          – each row becomes Number spans and Symbol points,
                         keyed by column index
  2. classify_row      – for every row, compare its tokens with the rows
                         immediately above and below:
       a) a number touching any symbol (including diagonally) is a part number,
          counted once however many symbols it touches
       b) a '*' touching exactly two numbers is a gear; its ratio is their product
  3. aggregate         – fold part numbers and gear ratios into two totals

Input is a text file of schematic rows, or a PDF with the grid set in a
monospace font.
"""

from __future__ import annotations

import argparse
import logging

from schematic_pipeline import summarize_schematic


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sum the part numbers and gear ratios of an engine schematic.",
    )
    parser.add_argument(
        "path",
        nargs="?", default="input",
        help="Schematic text file or PDF (default: ./input)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="List every part number and gear with its position",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    summarize_schematic(args.path, verbose=args.verbose)


if __name__ == "__main__":
    main()
