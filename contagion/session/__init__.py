"""
Session Module - Manages in-memory game sessions.

A session represents one play-through of a game:
- Created when a group starts a game
- Holds the running Game and its event log
- Destroyed when the caller ends it
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
