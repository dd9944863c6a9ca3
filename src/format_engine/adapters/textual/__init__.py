"""Textual host for the formatting engine."""

from .controller import TextualFormatAdapter, TextualUIHooks, describe_toolbar

__all__ = ["TextualFormatAdapter", "TextualUIHooks", "describe_toolbar"]
