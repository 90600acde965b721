"""
Action System - Actions and results.

The action vocabulary is fixed. Each action is legal in exactly one
sub-state; the engine rejects everything else without side effects.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .state import StateName, TurnState


class ActionType(Enum):
    """Types of player actions."""
    ACTION_PASS = "action_pass"
    DRAW_PLAYER_CARD = "draw_player_card"
    INCREASE_INFECTION_INTENSITY = "increase_infection_intensity"
    DRAW_INFECTION_CARD = "draw_infection_card"

    @property
    def required_state(self) -> StateName:
        """The only sub-state in which this action is legal."""
        return _REQUIRED_STATES[self]


_REQUIRED_STATES = {
    ActionType.ACTION_PASS: StateName.PLAYER_ACTIONS,
    ActionType.DRAW_PLAYER_CARD: StateName.DRAW_PLAYER_CARDS,
    ActionType.INCREASE_INFECTION_INTENSITY: StateName.EPIDEMIC,
    ActionType.DRAW_INFECTION_CARD: StateName.DRAW_INFECTION_CARDS,
}


class ErrorCode(str, Enum):
    """Rejection codes."""
    NOT_SET_UP = "NOT_SET_UP"
    WRONG_STATE = "WRONG_STATE"
    WRONG_PLAYER = "WRONG_PLAYER"


@dataclass
class Action:
    """
    An action submitted by a player.

    params carries any extra fields from the submitted `{name, ...}` object;
    none of the current actions use them.
    """
    action_type: ActionType
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.action_type.value

    @classmethod
    def action_pass(cls) -> Action:
        return cls(action_type=ActionType.ACTION_PASS)

    @classmethod
    def draw_player_card(cls) -> Action:
        return cls(action_type=ActionType.DRAW_PLAYER_CARD)

    @classmethod
    def increase_infection_intensity(cls) -> Action:
        return cls(action_type=ActionType.INCREASE_INFECTION_INTENSITY)

    @classmethod
    def draw_infection_card(cls) -> Action:
        return cls(action_type=ActionType.DRAW_INFECTION_CARD)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Action:
        """
        Build from `{"name": ..., **fields}`.

        Raises ValueError for names outside the vocabulary.
        """
        params = dict(data)
        name = params.pop("name")
        return cls(action_type=ActionType(name), params=params)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    On success, `state` is a deep copy of the resulting sub-state and
    `defeat` tells whether the action ended the game.
    """
    success: bool
    state: TurnState | None = None
    defeat: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def failure(cls, error: str, error_code: ErrorCode | None = None) -> ActionResult:
        """Create a rejection result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def accepted(cls, state: TurnState) -> ActionResult:
        """Create a success result for the resulting sub-state."""
        return cls(success=True, state=state, defeat=state.terminal)
