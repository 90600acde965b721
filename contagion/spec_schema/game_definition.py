"""
Game Definition - Static description of a board.

The definition is immutable: the engine deep-copies what it needs into the
Situation at setup and never writes back. Settings are a small overlay that
the caller supplies per game (e.g. difficulty via epidemic count).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class CardType(Enum):
    """Kinds of player cards."""
    CITY = "city"
    EVENT = "event"
    EPIDEMIC = "epidemic"


@dataclass(frozen=True)
class LocationDefinition:
    """A city on the board and the disease native to it."""
    name: str
    disease: str
    adjacent: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiseaseDefinition:
    """A disease and the size of its cube supply."""
    name: str
    cubes: int = 24


@dataclass(frozen=True)
class RoleDefinition:
    name: str
    description: str = ""


@dataclass(frozen=True)
class PlayerCard:
    """
    A card in the player deck.

    City cards reference a location, event cards carry a name.
    Epidemic cards are never part of a definition: the deck manager
    splices them in at setup.
    """
    card_type: CardType
    location: str | None = None
    name: str | None = None

    @classmethod
    def city(cls, location: str) -> PlayerCard:
        return cls(card_type=CardType.CITY, location=location)

    @classmethod
    def event(cls, name: str) -> PlayerCard:
        return cls(card_type=CardType.EVENT, name=name)

    @classmethod
    def epidemic(cls) -> PlayerCard:
        return cls(card_type=CardType.EPIDEMIC)

    @property
    def is_epidemic(self) -> bool:
        return self.card_type == CardType.EPIDEMIC


@dataclass(frozen=True)
class InfectionCard:
    """A card in the infection deck; infects the named location."""
    location: str


@dataclass(frozen=True)
class GameSettings:
    """
    Per-game overlay merged onto the definition.

    max_outbreaks overrides the definition's value when set.
    """
    number_of_epidemics: int = 4
    max_outbreaks: int | None = None


@dataclass(frozen=True)
class GameDefinition:
    """
    Complete static definition of a board.

    initial_infections lists the cube count placed from each initial
    infection card, in draw order (e.g. three rings of 3, 2 and 1).
    initial_player_cards maps player count to initial hand size.
    infection_rate_levels lists the infection rate per track position.
    """
    game_id: str
    game_name: str
    locations: tuple[LocationDefinition, ...]
    diseases: tuple[DiseaseDefinition, ...]
    roles: tuple[RoleDefinition, ...]
    player_cards: tuple[PlayerCard, ...]
    infection_cards: tuple[InfectionCard, ...]
    starting_location: str
    initial_infections: tuple[int, ...] = (3, 3, 3, 2, 2, 2, 1, 1, 1)
    initial_player_cards: dict[int, int] = field(
        default_factory=lambda: {2: 4, 3: 3, 4: 2}
    )
    infection_rate_levels: tuple[int, ...] = (2, 2, 2, 3, 3, 4, 4)
    max_outbreaks: int = 7
    research_centers_available: int = 6
    min_players: int = 2
    max_players: int = 4

    def get_location(self, name: str) -> LocationDefinition | None:
        for location in self.locations:
            if location.name == name:
                return location
        return None

    def hand_size(self, num_players: int) -> int:
        """Initial hand size for a player count."""
        return self.initial_player_cards[num_players]
