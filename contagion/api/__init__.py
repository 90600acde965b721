"""
API Module - HTTP interface for game clients.

Clients:
1. Create a session with the player list
2. Submit actions in turn
3. Read the event log to render what happened

All state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    ActionRequest,
    # Responses
    SessionResponse,
    ActionResponse,
    EventsResponse,
    BoardResponse,
    ErrorResponse,
    # Shared
    TurnStateInfo,
    PlayerInfo,
    EventInfo,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "ActionRequest",
    # Responses
    "SessionResponse",
    "ActionResponse",
    "EventsResponse",
    "BoardResponse",
    "ErrorResponse",
    # Shared
    "TurnStateInfo",
    "PlayerInfo",
    "EventInfo",
    # Service
    "APIService",
    "create_app",
]
