"""Formatting sessions: buffer + resolver + orchestrator behind an event bus."""

from .bus import EventBus
from .session import FormattingSession, apply_outcome

__all__ = ["EventBus", "FormattingSession", "apply_outcome"]
