"""Rich renderables built from a SessionView."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from dna_colorizer.palette import legend_entries
from dna_colorizer.session import BaseCell, SessionView

SELECTED_BACKGROUND = "#BFDBFE"
HOVER_BACKGROUND = "#FDE68A"
RULER_STYLE = Style(color="#9CA3AF")
# Stand-in for tabs, control and zero-width characters so each takes one cell.
CONTROL_GLYPH = "·"


def display_glyph(base: str) -> str:
    if not base.isprintable() or cell_len(base) == 0:
        return CONTROL_GLYPH
    return base


def column_map(line: Sequence[BaseCell]) -> List[int]:
    """Base column drawn under each screen cell of a rendered line."""

    columns: List[int] = []
    for column, cell in enumerate(line):
        columns.extend([column] * cell_len(display_glyph(cell.base)))
    return columns


def cell_style(cell: BaseCell) -> Style:
    if cell.hovered:
        return Style(color=cell.color, bgcolor=HOVER_BACKGROUND, bold=True)
    if cell.selected:
        return Style(color=cell.color, bgcolor=SELECTED_BACKGROUND)
    return Style(color=cell.color)


def ruler_rows(marks: Sequence[int], width: int) -> Tuple[str, str]:
    """Tick row and label row for ruler ``marks`` over ``width`` columns.

    The label for mark ``i`` starts at column ``i``; a label that would
    overlap the previous one is dropped.
    """

    span = max(width, (marks[-1] + 1) if marks else 0)
    ticks = ["─"] * span
    labels = [" "] * span
    next_free = 0
    for mark in marks:
        if mark < span:
            ticks[mark] = "┴" if mark else "└"
        label = str(mark)
        if mark < next_free:
            continue
        end = mark + len(label)
        if end > len(labels):
            labels.extend(" " * (end - len(labels)))
        labels[mark:end] = list(label)
        next_free = end + 1
    return "".join(ticks), "".join(labels).rstrip()


def sequence_text(view: SessionView) -> Text:
    text = Text(no_wrap=True, end="")
    for index, line in enumerate(view.lines):
        if index:
            text.append("\n")
        for cell in line:
            text.append(display_glyph(cell.base), style=cell_style(cell))
    width = max(
        [view.max_line_length] + [len(column_map(line)) for line in view.lines]
    )
    ticks, labels = ruler_rows(view.ruler, width)
    text.append("\n")
    text.append(ticks, style=RULER_STYLE)
    text.append("\n")
    text.append(labels, style=RULER_STYLE)
    return text


def legend_text() -> Text:
    parts: List[Text] = []
    for base, color, name in legend_entries():
        entry = Text()
        entry.append(base, style=Style(color=color, bold=True))
        entry.append(f" ({name})", style="dim")
        parts.append(entry)
    return Text("   ").join(parts)


def status_text(view: SessionView, message: str = "") -> str:
    pieces = [piece for piece in (view.cursor_label, view.selection_label) if piece]
    if message:
        pieces.append(message)
    return "  |  ".join(pieces)


__all__ = [
    "cell_style",
    "column_map",
    "display_glyph",
    "legend_text",
    "ruler_rows",
    "sequence_text",
    "status_text",
]
