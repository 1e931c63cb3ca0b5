from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class NumberToken:
    """A contiguous run of digits on a schematic row."""

    min_index: int
    max_index: int
    value: int

    def touches(self, index: int) -> bool:
        """True if a column *index* lies inside the one-column halo around this run."""
        return self.min_index - 1 <= index <= self.max_index + 1


@dataclass(frozen=True)
class SymbolToken:
    """A single non-digit, non-'.' character on a schematic row."""

    index: int
    char: str

    @property
    def is_gear_candidate(self) -> bool:
        return self.char == "*"


Token = Union[NumberToken, SymbolToken]


@dataclass(frozen=True)
class Row:
    """One tokenized line of the schematic, tokens in left-to-right order."""

    number: int
    tokens: tuple[Token, ...] = ()

    @property
    def numbers(self) -> list[NumberToken]:
        return [t for t in self.tokens if isinstance(t, NumberToken)]

    @property
    def symbols(self) -> list[SymbolToken]:
        return [t for t in self.tokens if isinstance(t, SymbolToken)]


@dataclass(frozen=True)
class Schematic:
    """The fully loaded grid: tokenized rows in top-to-bottom order."""

    rows: tuple[Row, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.rows)

    def window(self, i: int) -> tuple[Row | None, Row, Row | None]:
        """Return the rows immediately above, at and below row *i*."""
        previous = self.rows[i - 1] if i > 0 else None
        following = self.rows[i + 1] if i + 1 < len(self.rows) else None
        return previous, self.rows[i], following


@dataclass(frozen=True)
class PartNumber:
    """A number adjacent to at least one symbol."""

    value: int
    row: int
    min_index: int
    max_index: int


@dataclass(frozen=True)
class Gear:
    """A '*' symbol with exactly two adjacent numbers."""

    ratio: int
    row: int
    index: int
    factors: tuple[int, int]


ClassifiedResult = Union[PartNumber, Gear]


@dataclass(frozen=True)
class Totals:
    part_sum: int = 0
    gear_sum: int = 0
