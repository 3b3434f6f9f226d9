"""Pure text transforms applied line by line to a multi-line sequence."""

from __future__ import annotations

from typing import Callable, Dict, Iterable

# Case-preserving base pairing; anything else maps to itself.
COMPLEMENT_TABLE = str.maketrans(
    {
        "A": "T",
        "T": "A",
        "G": "C",
        "C": "G",
        "N": "N",
        "a": "t",
        "t": "a",
        "g": "c",
        "c": "g",
        "n": "n",
    }
)

Transform = Callable[[str], str]


class UnknownTransformError(KeyError):
    """Raised when a transform kind is not registered."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown transform '{self.kind}' (expected one of {sorted(TRANSFORMS)})"


def _split(text: str) -> list[str]:
    return text.split("\n")


def _join(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def complement(base: str) -> str:
    return base.translate(COMPLEMENT_TABLE)


def complement_text(text: str) -> str:
    """Complement every base, leaving order and line breaks alone."""

    return text.translate(COMPLEMENT_TABLE)


def reverse(text: str) -> str:
    """Reverse each line independently; line order is unchanged."""

    return _join(line[::-1] for line in _split(text))


def reverse_complement(text: str) -> str:
    """Reverse each line, then complement its bases."""

    return _join(line[::-1].translate(COMPLEMENT_TABLE) for line in _split(text))


def replicate(text: str) -> str:
    """Append a copy of every line after the original lines."""

    lines = _split(text)
    return _join(lines + lines)


def clear(text: str) -> str:
    del text
    return ""


TRANSFORMS: Dict[str, Transform] = {
    "reverse": reverse,
    "reverse_complement": reverse_complement,
    "replicate": replicate,
    "clear": clear,
}


def apply_transform(kind: str, text: str) -> str:
    try:
        transform = TRANSFORMS[kind]
    except KeyError:
        raise UnknownTransformError(kind) from None
    return transform(text)


__all__ = [
    "COMPLEMENT_TABLE",
    "TRANSFORMS",
    "Transform",
    "UnknownTransformError",
    "apply_transform",
    "clear",
    "complement",
    "complement_text",
    "replicate",
    "reverse",
    "reverse_complement",
]
