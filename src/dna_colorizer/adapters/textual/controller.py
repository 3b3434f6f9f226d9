"""Textual-free controller wiring widget events into a ColorizerSession."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from dna_colorizer.session import ColorizerSession, SessionResult, SessionView


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update Textual widgets."""

    update_view: Callable[[SessionView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback for debug lines
    log: Callable[[str], None] = _noop


class TextualColorizerAdapter:
    """Bridges pointer, text, and button events to a session + bus events."""

    def __init__(self, session: ColorizerSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_view()

    def handle_text_changed(self, text: str) -> SessionResult:
        return self._dispatch("text", self.session.on_text_edited, text)

    def handle_pointer_move(
        self, position: Optional[Tuple[int, int]]
    ) -> SessionResult:
        """Pointer moved; ``None`` means it is no longer over any base."""

        if position is None:
            return self._dispatch("leave", self.session.on_base_hover_leave)
        return self._dispatch(
            "move", self.session.on_pointer_move_over_base, position
        )

    def handle_pointer_down(self, position: Tuple[int, int]) -> SessionResult:
        return self._dispatch("down", self.session.on_pointer_down_on_base, position)

    def handle_pointer_up(self) -> SessionResult:
        return self._dispatch("up", self.session.on_pointer_up_anywhere)

    def handle_transform(self, kind: str) -> SessionResult:
        return self._dispatch(
            "transform", self.session.on_transform_requested, kind
        )

    def _dispatch(
        self, label: str, handler: Callable[..., SessionResult], *args: object
    ) -> SessionResult:
        self._log_state(f"{label} ->", args=args or None)
        result = handler(*args)
        if result.message:
            self.hooks.update_status(result.message)
        self._refresh_view()
        self._log_state(f"{label} <-", status=result.status, message=result.message)
        return result

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in (
            "sequence.replaced",
            "cursor.changed",
            "selection.changed",
            "clipboard.copied",
            "clipboard.failed",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.session.snapshot())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        tracker = self.session.tracker
        return {
            "cursor": tracker.cursor,
            "anchor": tracker.anchor,
            "extent": tracker.extent,
            "dragging": tracker.dragging,
            "session": self.session.name,
            "version": self.session.version,
        }


__all__ = ["TextualColorizerAdapter", "TextualUIHooks"]
