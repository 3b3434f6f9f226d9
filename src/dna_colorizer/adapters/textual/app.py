"""Executable Textual app that hosts the colorizer engine."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, ScrollableContainer
    from textual.message import Message
    from textual.widget import Widget
    from textual.widgets import Button, Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use dna_colorizer.adapters.textual.app"
    ) from exc

from rich.text import Text

from dna_colorizer.runtime import telemetry
from dna_colorizer.sequence import Position
from dna_colorizer.session import ColorizerSession, SessionView

from .controller import TextualColorizerAdapter, TextualUIHooks
from .rendering import column_map, legend_text, sequence_text, status_text

DEFAULT_SEQUENCE = (
    "TCCGTTACCTTGTTGCTGAGCNGGNCNTTTT\n"
    "TCCGTTACCATGTTGCTGAGCNGGNCNTA\n"
    "ACCNTTACCATGTTGCTGAGCNGGNCNTTTT"
)

TRANSFORM_BUTTONS = (
    ("reverse", "Reverse"),
    ("reverse_complement", "Reverse Complement"),
    ("replicate", "Replicate"),
    ("clear", "Clear"),
    ("copy", "Copy"),
)


class SequenceView(Widget):
    """Colored bases plus ruler; reports pointer activity as messages."""

    DEFAULT_CSS = """
	SequenceView {
		width: auto;
		height: auto;
	}
	"""

    class BaseHovered(Message):
        def __init__(self, position: Optional[Position]) -> None:
            super().__init__()
            self.position = position

    class BasePressed(Message):
        def __init__(self, position: Position) -> None:
            super().__init__()
            self.position = position

    class PointerReleased(Message):
        pass

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._columns: List[List[int]] = []
        self._renderable = Text()

    def show(self, view: SessionView) -> None:
        self._columns = [column_map(line) for line in view.lines]
        self._renderable = sequence_text(view)
        self.refresh(layout=True)

    def render(self) -> Text:
        return self._renderable

    def _position_at(self, event: events.MouseEvent) -> Optional[Position]:
        offset = event.get_content_offset(self)
        if offset is None:
            return None
        line, x = offset.y, offset.x
        if line < 0 or line >= len(self._columns):
            return None
        columns = self._columns[line]
        if x < 0 or x >= len(columns):
            return None
        return Position(line, columns[x])

    def on_mouse_move(self, event: events.MouseMove) -> None:
        self.post_message(self.BaseHovered(self._position_at(event)))

    def on_leave(self, event: events.Leave) -> None:
        del event
        self.post_message(self.BaseHovered(None))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        position = self._position_at(event)
        if position is None:
            return
        # Capture so the release arrives even when it happens off-widget.
        self.capture_mouse()
        self.post_message(self.BasePressed(position))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        del event
        self.capture_mouse(False)
        self.post_message(self.PointerReleased())

    def on_unmount(self) -> None:
        if self.app.mouse_captured is self:
            self.capture_mouse(False)


class ColorizerApp(App[None]):
    """Textual UI embedding the colorizer engine."""

    TITLE = "DNA Colorizer"

    CSS = """
	Screen {
		layout: vertical;
	}

	#legend {
		height: 1;
		padding: 0 1;
	}

	#sequence-input {
		height: 8;
	}

	#sequence-area {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		background: $surface;
	}

	#transforms {
		height: 3;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, sequence: str = DEFAULT_SEQUENCE) -> None:
        super().__init__()
        self._initial_sequence = sequence
        self._message = ""
        self.session: ColorizerSession | None = None
        self.adapter: TextualColorizerAdapter | None = None
        self._input: TextArea | None = None
        self._sequence_view: SequenceView | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("dna_colorizer.app")

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(legend_text(), id="legend")
        self._input = TextArea(self._initial_sequence, id="sequence-input")
        yield self._input
        with ScrollableContainer(id="sequence-area"):
            self._sequence_view = SequenceView(id="sequence-view")
            yield self._sequence_view
        with Horizontal(id="transforms"):
            for kind, label in TRANSFORM_BUTTONS:
                yield Button(label, id=kind)
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.session = ColorizerSession(
            self._initial_sequence, clipboard=self.copy_to_clipboard, name="app"
        )
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualColorizerAdapter(self.session, hooks)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter:
            self.adapter.handle_text_changed(event.text_area.text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if self.adapter and event.button.id:
            self.adapter.handle_transform(event.button.id)

    def on_sequence_view_base_hovered(self, event: SequenceView.BaseHovered) -> None:
        if self.adapter:
            self.adapter.handle_pointer_move(event.position)

    def on_sequence_view_base_pressed(self, event: SequenceView.BasePressed) -> None:
        if self.adapter:
            self.adapter.handle_pointer_down(event.position)

    def on_sequence_view_pointer_released(
        self, event: SequenceView.PointerReleased
    ) -> None:
        del event
        if self.adapter:
            self.adapter.handle_pointer_up()

    def _update_view(self, view: SessionView) -> None:
        if self._input is not None and self._input.text != view.text:
            self._input.load_text(view.text)
        if self._sequence_view is not None:
            self._sequence_view.show(view)
        if self._status_widget is not None:
            self._status_widget.update(status_text(view, self._message))
        self._message = ""

    def _update_status(self, message: str) -> None:
        self._message = message

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _read_sequence(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.sequence is not None:
        return args.sequence
    return DEFAULT_SEQUENCE


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the DNA colorizer.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--sequence", help="Initial sequence text")
    source.add_argument("--file", help="Read the initial sequence from a file")
    parser.add_argument(
        "--log-preset",
        default=os.environ.get("DNA_COLORIZER_LOG_PRESET"),
        choices=("development", "production", "performance"),
        help="Named telemetry preset (default: environment driven)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    app = ColorizerApp(sequence=_read_sequence(args))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
