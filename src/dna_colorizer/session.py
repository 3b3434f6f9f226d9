"""Engine façade combining the sequence model, selection, and transforms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from dna_colorizer.palette import color_for
from dna_colorizer.runtime import telemetry
from dna_colorizer.selection import SelectionTracker
from dna_colorizer.sequence import Position, SequenceModel, apply_transform

ClipboardWriter = Callable[[str], None]

COPY = "copy"
TRANSFORM_KINDS = ("reverse", "reverse_complement", "replicate", "clear", COPY)


@dataclass(slots=True)
class BaseCell:
    """Render data for a single base."""

    base: str
    position: Position
    color: str
    hovered: bool = False
    selected: bool = False


@dataclass(slots=True)
class SessionView:
    """Host-friendly snapshot of everything a renderer needs."""

    version: int
    text: str
    lines: List[List[BaseCell]]
    ruler: List[int]
    max_line_length: int
    selected_count: int
    cursor_label: Optional[str] = None
    selection_label: Optional[str] = None


@dataclass(slots=True)
class SessionResult:
    """Outcome of one input event."""

    status: str = "ok"
    message: Optional[str] = None


class SessionBus:
    """Minimal event bus so hosts can observe session changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


def cursor_label(position: Optional[Position]) -> Optional[str]:
    if position is None:
        return None
    return f"Line {position.line + 1}, Position {position.column + 1}"


def _as_position(position: Tuple[int, int]) -> Position:
    return position if isinstance(position, Position) else Position(*position)


def selection_label(count: int) -> Optional[str]:
    if count <= 0:
        return None
    noun = "base" if count == 1 else "bases"
    return f"{count} {noun} selected"


class ColorizerSession:
    """Holds one SequenceModel and one SelectionTracker and feeds them events.

    Every ``on_*`` handler is synchronous and completes before the next
    event. Text replacement swaps the model wholesale; interaction state that
    no longer points at a base is dropped at the same time.
    """

    def __init__(
        self,
        text: str = "",
        *,
        clipboard: Optional[ClipboardWriter] = None,
        tracker: Optional[SelectionTracker] = None,
        bus: Optional[SessionBus] = None,
        name: str = "default",
        logger_name: Optional[str] = None,
    ) -> None:
        self.name = name
        self.model = SequenceModel.from_text(text)
        self.tracker = tracker or SelectionTracker()
        self.bus = bus or SessionBus()
        self.clipboard = clipboard
        self.version = 0
        self._logger_name = logger_name

    @property
    def text(self) -> str:
        return self.model.text

    # -- text ---------------------------------------------------------------

    def on_text_edited(self, text: str) -> SessionResult:
        if text == self.model.text:
            return SessionResult(status="unchanged")
        self._replace(text, label="edit")
        return SessionResult(status="edited")

    def on_transform_requested(self, kind: str) -> SessionResult:
        if kind == COPY:
            return self.copy_to_clipboard()
        with telemetry.span(
            f"session::transform::{kind}",
            logger_name=self._logger_name,
            component="session",
            metadata={"session": self.name, "kind": kind},
        ):
            new_text = apply_transform(kind, self.model.text)
            self._replace(new_text, label=kind)
        return SessionResult(status=kind)

    def _replace(self, text: str, *, label: str) -> None:
        with telemetry.span(
            f"session::{label}",
            logger_name=self._logger_name,
            component=True,
            metadata={"session": self.name},
        ) as handle:
            self.model = SequenceModel.from_text(text)
            self.version += 1
            self.tracker.prune(self.model)
            handle.add_metadata("version", self.version)
            handle.add_metadata("bases", self.model.base_count())
        self.bus.emit(
            "sequence.replaced",
            {"label": label, "version": self.version, "lines": self.model.line_count},
        )

    # -- clipboard ----------------------------------------------------------

    def copy_to_clipboard(self) -> SessionResult:
        """Write the full text to the clipboard; failures never escape."""

        text = self.model.text
        try:
            if self.clipboard is None:
                raise RuntimeError("no clipboard available")
            self.clipboard(text)
        except Exception as exc:
            telemetry.record_event(
                "clipboard.copy_failed",
                level="error",
                data={"session": self.name, "error": repr(exc)},
                logger_name=self._logger_name,
            )
            self.bus.emit("clipboard.failed", str(exc))
            return SessionResult(status="copy_failed", message=f"Copy failed: {exc}")

        telemetry.record_event(
            "clipboard.copied",
            data={"session": self.name, "length": len(text)},
            logger_name=self._logger_name,
        )
        self.bus.emit("clipboard.copied", len(text))
        return SessionResult(status="copied", message=f"Copied {len(text)} characters")

    # -- pointer ------------------------------------------------------------

    def on_base_hover_enter(self, position: Tuple[int, int]) -> SessionResult:
        position = _as_position(position)
        self._set_cursor(position)
        return SessionResult(status="hover")

    def on_base_hover_leave(self) -> SessionResult:
        before = self.tracker.cursor
        self.tracker.clear_hover()
        if self.tracker.cursor != before:
            self.bus.emit("cursor.changed", None)
        return SessionResult(status="hover_leave")

    def on_pointer_down_on_base(self, position: Tuple[int, int]) -> SessionResult:
        position = _as_position(position)
        self._set_cursor(position)
        self.tracker.begin_selection(position)
        self._emit_selection()
        return SessionResult(status="selection_start")

    def on_pointer_move_over_base(self, position: Tuple[int, int]) -> SessionResult:
        position = _as_position(position)
        self._set_cursor(position)
        if not self.tracker.dragging:
            return SessionResult(status="hover")
        if self.tracker.extent != position:
            self.tracker.extend_selection(position)
            self._emit_selection()
        return SessionResult(status="selection_extend")

    def on_pointer_up_anywhere(self) -> SessionResult:
        was_dragging = self.tracker.dragging
        self.tracker.end_selection()
        if was_dragging:
            self._emit_selection()
            return SessionResult(status="selection_end")
        return SessionResult(status="ok")

    def _set_cursor(self, position: Position) -> None:
        if self.tracker.cursor == position:
            return
        self.tracker.hover(position)
        self.bus.emit("cursor.changed", position)

    def _emit_selection(self) -> None:
        tracker = self.tracker
        self.bus.emit(
            "selection.changed",
            {
                "anchor": tracker.anchor,
                "extent": tracker.extent,
                "dragging": tracker.dragging,
                "count": tracker.selected_count(self.model),
            },
        )

    # -- rendering ----------------------------------------------------------

    def snapshot(self) -> SessionView:
        model = self.model
        tracker = self.tracker
        bounds = tracker.selected_range(model)
        lines: List[List[BaseCell]] = [[] for _ in range(model.line_count)]
        offset = 0
        for position, base in model.iter_bases():
            selected = bounds is not None and bounds[0] <= offset <= bounds[1]
            lines[position.line].append(
                BaseCell(
                    base=base,
                    position=position,
                    color=color_for(base),
                    hovered=position == tracker.cursor,
                    selected=selected,
                )
            )
            offset += 1
        count = tracker.selected_count(model)
        return SessionView(
            version=self.version,
            text=model.text,
            lines=lines,
            ruler=model.ruler_marks(),
            max_line_length=model.max_line_length(),
            selected_count=count,
            cursor_label=cursor_label(tracker.cursor),
            selection_label=selection_label(count),
        )


__all__ = [
    "BaseCell",
    "ClipboardWriter",
    "ColorizerSession",
    "SessionBus",
    "SessionResult",
    "SessionView",
    "TRANSFORM_KINDS",
    "cursor_label",
    "selection_label",
]
