"""
Engine Core - Deterministic game state management.

The engine is the runtime that:
1. Builds the starting Situation from a GameDefinition
2. Validates and applies player actions
3. Resolves infections, outbreaks and epidemics
4. Reports every change to an event sink
"""

from .state import Situation, TurnState, StateName, PlayerState, LocationState, DiseaseState
from .action import Action, ActionType, ActionResult, ErrorCode
from .events import Event, EventType, EventSink, EventLog
from .randomness import Randomness, SeededRandomness
from .infection import InfectionEngine
from .errors import EngineConsistencyError
from .game import Game

__all__ = [
    "Situation",
    "TurnState",
    "StateName",
    "PlayerState",
    "LocationState",
    "DiseaseState",
    "Action",
    "ActionType",
    "ActionResult",
    "ErrorCode",
    "Event",
    "EventType",
    "EventSink",
    "EventLog",
    "Randomness",
    "SeededRandomness",
    "InfectionEngine",
    "EngineConsistencyError",
    "Game",
]
