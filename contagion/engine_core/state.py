"""
Game State - The Situation and the turn sub-state.

Design principles:
- One mutable Situation per game, owned by the engine
- Observers only ever see deep copies (via events)
- Sub-state is a tagged variant: exactly one is active
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy
from enum import Enum

from ..spec_schema.game_definition import InfectionCard, PlayerCard

MAX_CUBES_PER_LOCATION = 3
ACTIONS_PER_TURN = 4
PLAYER_DRAWS_PER_TURN = 2
EPIDEMIC_INFECTION_CUBES = 3


class StateName(Enum):
    """Names of the turn sub-states."""
    SETUP = "setup"
    PLAYER_ACTIONS = "player_actions"
    DRAW_PLAYER_CARDS = "draw_player_cards"
    DRAW_INFECTION_CARDS = "draw_infection_cards"
    EPIDEMIC = "epidemic"
    DEFEAT_TOO_MANY_OUTBREAKS = "defeat_too_many_outbreaks"
    DEFEAT_TOO_MANY_INFECTIONS = "defeat_too_many_infections"
    DEFEAT_OUT_OF_PLAYER_CARDS = "defeat_out_of_player_cards"


TERMINAL_STATES = frozenset({
    StateName.DEFEAT_TOO_MANY_OUTBREAKS,
    StateName.DEFEAT_TOO_MANY_INFECTIONS,
    StateName.DEFEAT_OUT_OF_PLAYER_CARDS,
})


@dataclass
class TurnState:
    """
    The active sub-state.

    Only the fields relevant to `name` are set:
    - player_actions: player, actions_remaining
    - draw_player_cards / draw_infection_cards: player, draws_remaining
    - epidemic: parent (the interrupted state)
    - defeat_too_many_infections: disease
    - defeat_out_of_player_cards: player
    """
    name: StateName
    player: str | None = None
    actions_remaining: int | None = None
    draws_remaining: int | None = None
    disease: str | None = None
    parent: TurnState | None = None

    @property
    def terminal(self) -> bool:
        return self.name in TERMINAL_STATES

    @classmethod
    def setup(cls) -> TurnState:
        return cls(name=StateName.SETUP)

    @classmethod
    def player_actions(cls, player: str) -> TurnState:
        return cls(
            name=StateName.PLAYER_ACTIONS,
            player=player,
            actions_remaining=ACTIONS_PER_TURN,
        )

    @classmethod
    def draw_player_cards(cls, player: str) -> TurnState:
        return cls(
            name=StateName.DRAW_PLAYER_CARDS,
            player=player,
            draws_remaining=PLAYER_DRAWS_PER_TURN,
        )

    @classmethod
    def draw_infection_cards(cls, player: str, rate: int) -> TurnState:
        return cls(
            name=StateName.DRAW_INFECTION_CARDS,
            player=player,
            draws_remaining=rate,
        )

    @classmethod
    def epidemic(cls, parent: TurnState) -> TurnState:
        return cls(name=StateName.EPIDEMIC, parent=parent)

    @classmethod
    def defeat_too_many_outbreaks(cls) -> TurnState:
        return cls(name=StateName.DEFEAT_TOO_MANY_OUTBREAKS)

    @classmethod
    def defeat_too_many_infections(cls, disease: str) -> TurnState:
        return cls(name=StateName.DEFEAT_TOO_MANY_INFECTIONS, disease=disease)

    @classmethod
    def defeat_out_of_player_cards(cls, player: str | None) -> TurnState:
        return cls(name=StateName.DEFEAT_OUT_OF_PLAYER_CARDS, player=player)

    def acting_player(self) -> str | None:
        """The player allowed to act; an epidemic belongs to its parent's player."""
        if self.name == StateName.EPIDEMIC and self.parent is not None:
            return self.parent.player
        return self.player


@dataclass
class LocationState:
    """A location on the board with its per-disease cube counts."""
    name: str
    disease: str
    adjacent: list[str] = field(default_factory=list)
    infections: dict[str, int] = field(default_factory=dict)

    def cubes(self, disease: str) -> int:
        return self.infections.get(disease, 0)


@dataclass
class DiseaseState:
    """A disease and its remaining cube supply."""
    name: str
    cubes: int


@dataclass
class PlayerState:
    """A player: role, location, and hand (an unordered multiset)."""
    player_id: str
    role: str | None
    location: str
    hand: list[PlayerCard] = field(default_factory=list)


@dataclass
class ResearchCenter:
    location: str


@dataclass
class Situation:
    """
    Complete game state at a point in time.

    Created once by setup, then mutated in place by the engine.
    Pile order: index 0 is the top (front) of every pile.
    """
    game_id: str
    state: TurnState
    players: list[PlayerState] = field(default_factory=list)
    locations: list[LocationState] = field(default_factory=list)
    diseases: list[DiseaseState] = field(default_factory=list)

    player_cards_draw: list[PlayerCard] = field(default_factory=list)
    player_cards_discard: list[PlayerCard] = field(default_factory=list)
    infection_cards_draw: list[InfectionCard] = field(default_factory=list)
    infection_cards_discard: list[InfectionCard] = field(default_factory=list)

    outbreak_count: int = 0
    max_outbreaks: int = 7
    research_centers: list[ResearchCenter] = field(default_factory=list)
    research_centers_available: int = 0
    infection_rate_levels: list[int] = field(default_factory=list)
    infection_rate_index: int = 0

    # Merged definition scalars
    starting_location: str = ""
    number_of_epidemics: int = 0
    initial_infections: list[int] = field(default_factory=list)
    initial_player_cards: dict[int, int] = field(default_factory=dict)

    @property
    def infection_rate(self) -> int:
        """Current infection rate from the rate track."""
        return self.infection_rate_levels[self.infection_rate_index]

    def find_location(self, name: str) -> LocationState | None:
        for location in self.locations:
            if location.name == name:
                return location
        return None

    def find_disease(self, name: str) -> DiseaseState | None:
        for disease in self.diseases:
            if disease.name == name:
                return disease
        return None

    def find_player(self, player_id: str) -> PlayerState | None:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def next_player(self, player_id: str) -> PlayerState:
        """The player after player_id in join order, wrapping to the first."""
        ids = [p.player_id for p in self.players]
        index = ids.index(player_id)
        return self.players[(index + 1) % len(self.players)]

    def total_cubes_on_board(self, disease: str) -> int:
        return sum(location.cubes(disease) for location in self.locations)

    def clone(self) -> Situation:
        """Deep copy the situation."""
        return deepcopy(self)
