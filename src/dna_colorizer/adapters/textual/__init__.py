"""Textual host for the colorizer engine."""

from .controller import TextualColorizerAdapter, TextualUIHooks

__all__ = ["TextualColorizerAdapter", "TextualUIHooks"]
