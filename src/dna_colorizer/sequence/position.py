"""Positions addressing single bases inside a multi-line sequence."""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    """Zero-based ``(line, column)`` of one base."""

    line: int
    column: int
