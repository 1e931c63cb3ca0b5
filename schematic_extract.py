from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from schematic_models import NumberToken, Row, Schematic, SymbolToken, Token

_DIGITS = frozenset("0123456789")
_EMPTY = "."


def tokenize(line: str, number: int = 0) -> Row:
    """Split one schematic line into Number and Symbol tokens.

    Only ASCII digits start or extend a number, so the accumulated run
    always parses. A run still open at the end of the line closes on the
    line's last column.
    """
    tokens: list[Token] = []
    digits = ""
    min_index = 0

    for index, ch in enumerate(line):
        if ch in _DIGITS:
            if not digits:
                min_index = index
            digits += ch
            continue

        if digits:
            tokens.append(NumberToken(min_index, index - 1, int(digits)))
            digits = ""
        if ch != _EMPTY:
            tokens.append(SymbolToken(index, ch))

    if digits:
        tokens.append(NumberToken(min_index, len(line) - 1, int(digits)))

    return Row(number=number, tokens=tuple(tokens))


def build_schematic(lines: Iterable[str]) -> Schematic:
    """Tokenize *lines* in order into an immutable Schematic."""
    return Schematic(rows=tuple(tokenize(line, i) for i, line in enumerate(lines)))


def chars_to_lines(chars: list[dict]) -> list[str]:
    """Rebuild schematic rows from pdfplumber page.chars.

    The schematic is assumed to be set in a monospace font: characters are
    grouped into rows by rounded 'top', and each character's column is its
    x0 offset divided by the narrowest glyph width on the page. Unfilled
    cells become '.', and visual rows with no glyphs at all come back as
    empty strings so vertical adjacency is preserved.
    """
    glyphs = [c for c in chars if c["text"].strip() and c["x1"] > c["x0"]]
    if not glyphs:
        return []

    cell_width = min(c["x1"] - c["x0"] for c in glyphs)
    origin = min(c["x0"] for c in glyphs)

    by_y: dict[int, dict[int, str]] = defaultdict(dict)
    tops: dict[int, float] = {}
    for c in glyphs:
        y_key = round(c["top"])
        column = round((c["x0"] - origin) / cell_width)
        by_y[y_key][column] = c["text"]
        tops[y_key] = min(tops.get(y_key, c["top"]), c["top"])

    # Gaps are measured on raw tops, not on the rounded row keys.
    ys = sorted(by_y.keys())
    gaps = [tops[b] - tops[a] for a, b in zip(ys, ys[1:])]
    pitch = min(gaps, default=0)

    lines: list[str] = []
    for n, y_key in enumerate(ys):
        if n:
            lines.extend([""] * (round(gaps[n - 1] / pitch) - 1))
        cells = by_y[y_key]
        lines.append("".join(cells.get(i, _EMPTY) for i in range(max(cells) + 1)))

    return lines
