"""UI-agnostic engine behind the DNA colorizer widget."""

__all__ = [
    "adapters",
    "palette",
    "runtime",
    "selection",
    "sequence",
    "session",
]

__version__ = "0.1.0"
