"""Base-to-color table used by renderers."""

from __future__ import annotations

from typing import List, Mapping, Tuple

BASE_COLORS: Mapping[str, str] = {
    "A": "#32CD32",  # lime green
    "T": "#FF6B6B",  # red
    "G": "#FFD700",  # gold
    "C": "#4169E1",  # royal blue
    "N": "#808080",  # gray
}

BASE_NAMES: Mapping[str, str] = {
    "A": "Adenine",
    "T": "Thymine",
    "G": "Guanine",
    "C": "Cytosine",
    "N": "Unknown",
}

FALLBACK_COLOR = "#000000"


def color_for(base: str) -> str:
    return BASE_COLORS.get(base.upper(), FALLBACK_COLOR)


def legend_entries() -> List[Tuple[str, str, str]]:
    """``(base, color, name)`` for every colored base, in table order."""

    return [(base, color, BASE_NAMES[base]) for base, color in BASE_COLORS.items()]


__all__ = ["BASE_COLORS", "BASE_NAMES", "FALLBACK_COLOR", "color_for", "legend_entries"]
