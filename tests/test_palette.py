from __future__ import annotations

import pytest

from dna_colorizer.palette import BASE_COLORS, FALLBACK_COLOR, color_for, legend_entries


@pytest.mark.parametrize("base", ["A", "t", "G", "c", "n"])
def test_color_lookup_is_case_insensitive(base: str) -> None:
    assert color_for(base) == BASE_COLORS[base.upper()]


@pytest.mark.parametrize("base", ["U", "x", "-", " "])
def test_unknown_bases_use_fallback(base: str) -> None:
    assert color_for(base) == FALLBACK_COLOR


def test_legend_lists_every_colored_base() -> None:
    entries = legend_entries()

    assert [base for base, _, _ in entries] == ["A", "T", "G", "C", "N"]
    assert entries[-1] == ("N", "#808080", "Unknown")
