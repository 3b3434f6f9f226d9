"""Pointer-driven hover and range selection state."""

from .tracker import SelectionTracker

__all__ = ["SelectionTracker"]
