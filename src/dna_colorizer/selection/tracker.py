"""Hover + drag-selection state over a SequenceModel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from dna_colorizer.sequence import Position, SequenceModel


@dataclass(slots=True)
class SelectionTracker:
    """Mutable interaction state fed by pointer events.

    ``anchor`` and ``extent`` are the two ends of a drag and are compared by
    linear offset, so a selection may run across line boundaries in either
    direction. Releasing the pointer only clears ``dragging``; the range
    stays queryable until the next ``begin_selection``.
    """

    cursor: Optional[Position] = None
    anchor: Optional[Position] = None
    extent: Optional[Position] = None
    dragging: bool = False

    @property
    def has_selection(self) -> bool:
        return self.anchor is not None and self.extent is not None

    def hover(self, position: Position) -> None:
        self.cursor = position

    def clear_hover(self) -> None:
        # The last hovered base stays lit for the rest of a drag.
        if self.dragging:
            return
        self.cursor = None

    def begin_selection(self, position: Position) -> None:
        self.anchor = position
        self.extent = position
        self.dragging = True

    def extend_selection(self, position: Position) -> None:
        if self.dragging:
            self.extent = position

    def end_selection(self) -> None:
        self.dragging = False

    def selected_range(self, model: SequenceModel) -> Optional[Tuple[int, int]]:
        """Ordered ``(start, end)`` linear offsets, both inclusive."""

        if self.anchor is None or self.extent is None:
            return None
        first = model.linear_offset(self.anchor)
        second = model.linear_offset(self.extent)
        return min(first, second), max(first, second)

    def contains(self, model: SequenceModel, position: Position) -> bool:
        bounds = self.selected_range(model)
        if bounds is None:
            return False
        start, end = bounds
        return start <= model.linear_offset(position) <= end

    def selected_count(self, model: SequenceModel) -> int:
        bounds = self.selected_range(model)
        if bounds is None:
            return 0
        start, end = bounds
        return end - start + 1

    def prune(self, model: SequenceModel) -> None:
        """Forget positions that no longer address a base of ``model``."""

        if self.cursor is not None and not model.contains_position(self.cursor):
            self.cursor = None
        if self.has_selection and not (
            model.contains_position(self.anchor)  # type: ignore[arg-type]
            and model.contains_position(self.extent)  # type: ignore[arg-type]
        ):
            self.anchor = None
            self.extent = None
            self.dragging = False
