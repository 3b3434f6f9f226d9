from __future__ import annotations

import pytest

from dna_colorizer.sequence import (
    TRANSFORMS,
    UnknownTransformError,
    apply_transform,
    complement,
    complement_text,
    replicate,
    reverse,
    reverse_complement,
)

SAMPLES = [
    "ACGT\nNNAA",
    "",
    "acgtn\n\nTTGa",
    "TCCGTTACCTTGTTGCTGAGCNGGNCNTTTT\nTCCGTTACCATGTTGCTGAGCNGGNCNTA\n",
    "xyz-ACG 123",
]


def test_scenario_acgt_nnaa() -> None:
    text = "ACGT\nNNAA"

    assert reverse(text) == "TGCA\nAANN"
    assert complement_text(text) == "TGCA\nNNTT"
    assert reverse_complement(text) == "ACGT\nTTNN"


def test_complement_pairs_are_case_preserving() -> None:
    pairs = {"A": "T", "T": "A", "G": "C", "C": "G", "N": "N"}
    for base, paired in pairs.items():
        assert complement(base) == paired
        assert complement(base.lower()) == paired.lower()
        assert complement(complement(base)) == base
        assert complement(complement(base.lower())) == base.lower()


@pytest.mark.parametrize("base", ["U", "x", "-", " ", "R", "1"])
def test_complement_leaves_unknown_characters(base: str) -> None:
    assert complement(base) == base


@pytest.mark.parametrize("text", SAMPLES)
def test_reverse_and_reverse_complement_are_involutions(text: str) -> None:
    assert reverse(reverse(text)) == text
    assert reverse_complement(reverse_complement(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_transforms_preserve_line_break_positions(text: str) -> None:
    lengths = [len(line) for line in text.split("\n")]

    for transformed in (reverse(text), reverse_complement(text)):
        assert [len(line) for line in transformed.split("\n")] == lengths


@pytest.mark.parametrize("text", SAMPLES)
def test_replicate_doubles_lines(text: str) -> None:
    lines = text.split("\n")
    doubled = replicate(text).split("\n")

    assert len(doubled) == 2 * len(lines)
    for index, line in enumerate(doubled):
        assert line == lines[index % len(lines)]


def test_replicate_example() -> None:
    assert replicate("AC\nGT") == "AC\nGT\nAC\nGT"


def test_apply_transform_dispatches_by_kind() -> None:
    assert apply_transform("reverse", "AC\nGT") == "CA\nTG"
    assert apply_transform("clear", "AC\nGT") == ""
    assert set(TRANSFORMS) == {"reverse", "reverse_complement", "replicate", "clear"}


def test_apply_transform_unknown_kind() -> None:
    with pytest.raises(UnknownTransformError) as excinfo:
        apply_transform("translate", "ACGT")

    assert excinfo.value.kind == "translate"
    assert "translate" in str(excinfo.value)
