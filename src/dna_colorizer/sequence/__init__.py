"""Sequence text model, position checks, and text transforms."""

from .model import SequenceModel
from .position import Position
from .transforms import (
    TRANSFORMS,
    UnknownTransformError,
    apply_transform,
    complement,
    complement_text,
    replicate,
    reverse,
    reverse_complement,
)
from .validation import PositionError, ensure_position

__all__ = [
    "SequenceModel",
    "Position",
    "PositionError",
    "ensure_position",
    "TRANSFORMS",
    "UnknownTransformError",
    "apply_transform",
    "complement",
    "complement_text",
    "replicate",
    "reverse",
    "reverse_complement",
]
