from __future__ import annotations

from collections.abc import Iterator

from schematic_models import ClassifiedResult, Gear, NumberToken, PartNumber, Row, Schematic, SymbolToken

_GEAR_NEIGHBOURS = 2


def is_adjacent(number: NumberToken, symbol: SymbolToken) -> bool:
    return number.touches(symbol.index)


def _neighbourhood(previous: Row | None, current: Row, following: Row | None) -> list[Row]:
    return [row for row in (previous, current, following) if row is not None]


def classify_row(
    previous: Row | None,
    current: Row,
    following: Row | None,
) -> list[ClassifiedResult]:
    """Classify the tokens of *current* against its immediate neighbour rows.

    Rows are compared by column index alone, so the same halo test covers
    horizontal, vertical and diagonal contact. An absent neighbour behaves
    like an all-'.' row.
    """
    rows = _neighbourhood(previous, current, following)
    symbols = [s for row in rows for s in row.symbols]
    numbers = [n for row in rows for n in row.numbers]

    results: list[ClassifiedResult] = []
    for token in current.tokens:
        if isinstance(token, NumberToken):
            if any(is_adjacent(token, s) for s in symbols):
                results.append(
                    PartNumber(
                        value=token.value,
                        row=current.number,
                        min_index=token.min_index,
                        max_index=token.max_index,
                    )
                )
        elif token.is_gear_candidate:
            touching = [n.value for n in numbers if is_adjacent(n, token)]
            if len(touching) == _GEAR_NEIGHBOURS:
                a, b = touching
                results.append(Gear(ratio=a * b, row=current.number, index=token.index, factors=(a, b)))

    return results


def classify_schematic(schematic: Schematic) -> Iterator[ClassifiedResult]:
    """Slide the three-row window over every row of *schematic*."""
    for i in range(len(schematic)):
        yield from classify_row(*schematic.window(i))
