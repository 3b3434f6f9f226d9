from __future__ import annotations

from io import StringIO
from typing import List, Tuple

from rich.color import Color
from rich.console import Console

from dna_colorizer.adapters.textual import TextualColorizerAdapter, TextualUIHooks
from dna_colorizer.adapters.textual.rendering import (
    CONTROL_GLYPH,
    HOVER_BACKGROUND,
    SELECTED_BACKGROUND,
    cell_style,
    column_map,
    display_glyph,
    legend_text,
    ruler_rows,
    sequence_text,
    status_text,
)
from dna_colorizer.session import BaseCell, ColorizerSession, SessionView
from dna_colorizer.sequence import Position


def make_adapter(
    text: str = "ACGT\nNNAA", *, clipboard=None
) -> Tuple[TextualColorizerAdapter, List[SessionView], List[str], List[str]]:
    views: List[SessionView] = []
    statuses: List[str] = []
    logs: List[str] = []
    hooks = TextualUIHooks(
        update_view=views.append,
        update_status=statuses.append,
        log=logs.append,
    )
    session = ColorizerSession(text, clipboard=clipboard)
    return TextualColorizerAdapter(session, hooks), views, statuses, logs


def test_adapter_pushes_initial_view() -> None:
    _, views, _, _ = make_adapter()

    assert len(views) == 1
    assert views[0].text == "ACGT\nNNAA"


def test_adapter_drives_drag_selection() -> None:
    adapter, views, _, _ = make_adapter()

    adapter.handle_pointer_down((0, 1))
    adapter.handle_pointer_move((1, 0))
    adapter.handle_pointer_move(None)
    adapter.handle_pointer_up()

    assert views[-1].selected_count == 4
    assert adapter.session.tracker.dragging is False
    assert views[-1].cursor_label == "Line 2, Position 1"


def test_adapter_applies_transform_and_refreshes() -> None:
    adapter, views, _, _ = make_adapter()

    adapter.handle_transform("reverse_complement")

    assert views[-1].text == "ACGT\nTTNN"


def test_adapter_text_edit() -> None:
    adapter, views, _, _ = make_adapter()

    adapter.handle_text_changed("GATTACA")

    assert [cell.base for cell in views[-1].lines[0]] == list("GATTACA")
    assert views[-1].version == 1


def test_adapter_surfaces_copy_failure() -> None:
    def broken(_: str) -> None:
        raise RuntimeError("denied")

    adapter, views, statuses, _ = make_adapter(clipboard=broken)

    result = adapter.handle_transform("copy")

    assert result.status == "copy_failed"
    assert statuses[-1] == "Copy failed: denied"
    assert views[-1].text == "ACGT\nNNAA"


def test_adapter_relays_bus_events() -> None:
    events: List[Tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_view=lambda view: None,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualColorizerAdapter(ColorizerSession("AC"), hooks)

    adapter.handle_pointer_down((0, 0))

    names = [name for name, _ in events]
    assert names == ["cursor.changed", "selection.changed"]


def test_adapter_emits_log_lines() -> None:
    adapter, _, _, logs = make_adapter()

    adapter.handle_pointer_move((0, 0))

    assert any(line.startswith("move ->") for line in logs)
    assert any("status='hover'" in line for line in logs)


def test_ruler_rows_place_labels_at_marks() -> None:
    ticks, labels = ruler_rows([0, 10, 20], 21)

    assert ticks[0] == "└"
    assert ticks[10] == ticks[20] == "┴"
    assert labels.index("10") == 10
    assert labels.index("20") == 20


def test_ruler_rows_drop_overlapping_labels() -> None:
    _, labels = ruler_rows([0, 2, 4], 5)

    assert labels == "0 2 4"
    _, crowded = ruler_rows([0, 10, 11], 12)
    assert crowded.split() == ["0", "10"]


def test_sequence_text_has_lines_and_ruler() -> None:
    session = ColorizerSession("ACGT\nNN")
    text = sequence_text(session.snapshot())

    rows = text.plain.split("\n")
    assert rows[:2] == ["ACGT", "NN"]
    assert len(rows) == 4


def test_cell_style_prefers_hover_over_selection() -> None:
    cell = BaseCell(base="A", position=Position(0, 0), color="#32CD32")

    assert cell_style(cell).bgcolor is None
    cell.selected = True
    assert cell_style(cell).bgcolor == Color.parse(SELECTED_BACKGROUND)
    cell.hovered = True
    assert cell_style(cell).bgcolor == Color.parse(HOVER_BACKGROUND)


def test_legend_and_status_text() -> None:
    assert "A (Adenine)" in legend_text().plain
    assert "N (Unknown)" in legend_text().plain

    session = ColorizerSession("ACGT")
    session.on_base_hover_enter((0, 1))
    session.on_pointer_down_on_base((0, 1))

    assert status_text(session.snapshot(), "Copied") == (
        "Line 1, Position 2  |  1 base selected  |  Copied"
    )


def test_tabs_render_as_one_cell_glyph() -> None:
    view = ColorizerSession("A\tC").snapshot()
    output = StringIO()
    console = Console(file=output, width=40, color_system=None)

    console.print(sequence_text(view))
    first_row = output.getvalue().splitlines()[0]

    assert first_row.rstrip() == f"A{CONTROL_GLYPH}C"
    assert first_row.index("C") == view.lines[0][2].position.column


def test_display_glyph_keeps_printable_bases() -> None:
    assert display_glyph("A") == "A"
    assert display_glyph(" ") == " "
    assert display_glyph("\t") == CONTROL_GLYPH
    assert display_glyph("\x1b") == CONTROL_GLYPH
    assert display_glyph("\u200b") == CONTROL_GLYPH


def test_column_map_follows_cell_widths() -> None:
    tabbed = ColorizerSession("A\tC").snapshot()
    wide = ColorizerSession("A界C").snapshot()

    assert column_map(tabbed.lines[0]) == [0, 1, 2]
    assert column_map(wide.lines[0]) == [0, 1, 1, 2]
    assert column_map([]) == []
