"""Game module driving an interactive editing session."""

from .session import EditorSession, SessionStats

__all__ = ["EditorSession", "SessionStats"]
