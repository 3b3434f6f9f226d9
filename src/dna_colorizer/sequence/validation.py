"""Bounds checks for positions handed to the sequence model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .model import SequenceModel


class PositionError(ValueError):
    """Raised when a caller passes a position outside the sequence."""

    def __init__(
        self, message: str, *, position: Optional[Tuple[int, int]] = None
    ) -> None:
        super().__init__(message)
        self.position = position


def ensure_position(model: "SequenceModel", position: Tuple[int, int]) -> None:
    """Reject positions whose line or column falls outside ``model``.

    A column equal to the line length is accepted: it is the offset just past
    the last base of the line.
    """

    line, column = position
    if line < 0 or line >= model.line_count:
        raise PositionError(
            f"Line {line} out of range (0..{model.line_count - 1})",
            position=(line, column),
        )
    length = len(model.get_line(line))
    if column < 0 or column > length:
        raise PositionError(
            f"Column {column} out of range for line {line} (0..{length})",
            position=(line, column),
        )
