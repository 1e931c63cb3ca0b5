from __future__ import annotations

import codecs
import logging
import sys
import warnings
from collections.abc import Iterable, Iterator
from pathlib import Path

import pdfplumber

from schematic_context import classify_schematic
from schematic_extract import build_schematic, chars_to_lines
from schematic_models import ClassifiedResult, Gear, PartNumber, Schematic, Totals

logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", module="pdfminer")

logger = logging.getLogger(__name__)


def read_text_lines(path: Path) -> Iterator[str]:
    """Yield decoded lines of *path*, dropping any line that is not valid UTF-8."""
    raw = path.read_bytes().removeprefix(codecs.BOM_UTF8)
    for lineno, chunk in enumerate(raw.splitlines(), 1):
        try:
            yield chunk.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("%s:%d: skipping undecodable line (%s)", path, lineno, exc.reason)


def read_pdf_lines(path: Path) -> Iterator[str]:
    """Yield schematic rows from every page of a PDF, in page order."""
    with pdfplumber.open(path) as pdf:
        for page in pdf.pages:
            yield from chars_to_lines(page.chars)


def load_schematic(path: str | Path) -> Schematic:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(str(path))

    lines = read_pdf_lines(path) if path.suffix.lower() == ".pdf" else read_text_lines(path)
    schematic = build_schematic(lines)
    logger.info("Loaded %d rows from %s", len(schematic), path)
    return schematic


def aggregate(results: Iterable[ClassifiedResult]) -> Totals:
    part_sum = 0
    gear_sum = 0
    for result in results:
        if isinstance(result, PartNumber):
            part_sum += result.value
        elif isinstance(result, Gear):
            gear_sum += result.ratio
    return Totals(part_sum=part_sum, gear_sum=gear_sum)


def analyze(schematic: Schematic) -> tuple[list[ClassifiedResult], Totals]:
    results = list(classify_schematic(schematic))
    return results, aggregate(results)


def _print_evidence(results: list[ClassifiedResult]) -> None:
    parts = [r for r in results if isinstance(r, PartNumber)]
    gears = [r for r in results if isinstance(r, Gear)]

    print(f"\nPart numbers ({len(parts)}):\n")
    for p in parts:
        print(f"  row {p.row:>4}  cols {p.min_index}-{p.max_index}  {p.value:>8}")

    print(f"\nGears ({len(gears)}):\n")
    for g in gears:
        a, b = g.factors
        print(f"  row {g.row:>4}  col {g.index:<4}  {a} x {b} = {g.ratio}")


def summarize_schematic(path: str, verbose: bool = False) -> Totals:
    try:
        schematic = load_schematic(path)
    except FileNotFoundError:
        print(f"Error: file not found: {path}", file=sys.stderr)
        sys.exit(1)

    results, totals = analyze(schematic)

    print("=" * 64)
    print("RESULTS")
    print("=" * 64)
    print(f"Part Sum: {totals.part_sum}")
    print(f"Gear Ratio Sum: {totals.gear_sum}")

    if verbose:
        _print_evidence(results)
        print()

    return totals
