"""Immutable multi-line nucleotide sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from .position import Position
from .validation import ensure_position

DEFAULT_RULER_STEP = 10


@dataclass(frozen=True, slots=True)
class SequenceModel:
    """Raw sequence text plus its line tokenization.

    Lines are split on ``\\n`` only and kept verbatim: no trimming, no case
    folding, empty lines included. Replacing the sequence means building a
    new model; nothing here mutates.
    """

    text: str = ""
    _lines: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_lines", tuple(self.text.split("\n")))

    @classmethod
    def from_text(cls, text: str) -> "SequenceModel":
        return cls(text=text)

    def lines(self) -> Sequence[str]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def linear_offset(self, position: Tuple[int, int]) -> int:
        """Offset of ``position`` with all lines concatenated, breaks excluded."""

        ensure_position(self, position)
        line, column = position
        return sum(len(self._lines[i]) for i in range(line)) + column

    def contains_position(self, position: Tuple[int, int]) -> bool:
        """True when ``position`` addresses an existing base."""

        line, column = position
        if line < 0 or line >= self.line_count:
            return False
        return 0 <= column < len(self._lines[line])

    def iter_bases(self) -> Iterator[Tuple[Position, str]]:
        for line_index, line in enumerate(self._lines):
            for column, base in enumerate(line):
                yield Position(line_index, column), base

    def base_count(self) -> int:
        return sum(len(line) for line in self._lines)

    def max_line_length(self) -> int:
        return max(len(line) for line in self._lines)

    def ruler_marks(self, step: int = DEFAULT_RULER_STEP) -> List[int]:
        """Ruler positions from 0 through the longest line, every ``step`` bases."""

        if step <= 0:
            raise ValueError("Ruler step must be positive")
        return list(range(0, self.max_line_length() + 1, step))
