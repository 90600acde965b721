"""
Pydantic Schemas for API - Request/response models for OpenAPI.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- INVALID_PLAYERS: Player list does not fit the board
- WRONG_STATE / WRONG_PLAYER: Action rejected by the engine
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    LOST = "lost"
    ENDED = "ended"


class ActionName(str, Enum):
    """Player action vocabulary."""
    ACTION_PASS = "action_pass"
    DRAW_PLAYER_CARD = "draw_player_card"
    INCREASE_INFECTION_INTENSITY = "increase_infection_intensity"
    DRAW_INFECTION_CARD = "draw_infection_card"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_PLAYERS = "INVALID_PLAYERS"
    NOT_SET_UP = "NOT_SET_UP"
    WRONG_STATE = "WRONG_STATE"
    WRONG_PLAYER = "WRONG_PLAYER"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class TurnStateInfo(BaseModel):
    """The active sub-state."""
    name: str
    player: Optional[str] = None
    actions_remaining: Optional[int] = None
    draws_remaining: Optional[int] = None
    disease: Optional[str] = None
    parent: Optional["TurnStateInfo"] = None
    terminal: bool = False


class PlayerInfo(BaseModel):
    """Player information for display."""
    player_id: str
    role: Optional[str] = None
    location: str
    hand: list[dict[str, Any]] = Field(default_factory=list)
    is_current_turn: bool = False


class DiseaseInfo(BaseModel):
    name: str
    cubes_remaining: int
    cubes_on_board: int


class EventInfo(BaseModel):
    """One event log entry; fields depend on event_type."""
    index: int
    event_type: str
    data: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Requests
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start a game."""
    player_ids: list[str] = Field(min_length=1, description="Players in turn order")
    number_of_epidemics: int = Field(4, ge=0, le=10)
    max_outbreaks: Optional[int] = Field(None, ge=0)
    seed: Optional[int] = Field(None, description="Seed for deterministic replay")


class ActionRequest(BaseModel):
    """A player action."""
    player_id: str
    name: ActionName


# =============================================================================
# Responses
# =============================================================================

class SessionResponse(BaseModel):
    """Session status and game overview."""
    session_id: str
    status: SessionStatus
    game_name: str
    state: TurnStateInfo
    players: list[PlayerInfo] = Field(default_factory=list)
    diseases: list[DiseaseInfo] = Field(default_factory=list)
    outbreak_count: int = 0
    max_outbreaks: int = 0
    infection_rate: int = 0
    player_cards_remaining: int = 0
    event_count: int = 0


class ActionResponse(BaseModel):
    """Result of submitting an action."""
    accepted: bool
    status: SessionStatus
    state: Optional[TurnStateInfo] = None
    defeat: bool = False
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    new_events: list[EventInfo] = Field(default_factory=list)


class EventsResponse(BaseModel):
    session_id: str
    events: list[EventInfo] = Field(default_factory=list)
    next_index: int = 0


class BoardLocationInfo(BaseModel):
    name: str
    disease: str
    adjacent: list[str] = Field(default_factory=list)


class BoardResponse(BaseModel):
    """Summary of the loaded board definition."""
    game_id: str
    game_name: str
    starting_location: str
    min_players: int
    max_players: int
    diseases: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)
    player_card_count: int = 0
    locations: list[BoardLocationInfo] = Field(default_factory=list)


class EndSessionResponse(BaseModel):
    success: bool
    session_id: str


class ErrorResponse(BaseModel):
    """Error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    environment: str
    active_sessions: int = 0
