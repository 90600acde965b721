"""
Pytest fixtures for Contagion tests.

Most engine tests run on a six-city board with scripted randomness so that
deck order is known in advance:
- shuffle() keeps the given order
- sample() takes the first k
- rand_int() returns queued cut points, else the low bound

    Alpha - Bravo - Delta - Echo - Foxtrot
       \\    /
       Charlie

Alpha, Bravo and Charlie are blue; Delta, Echo and Foxtrot are red.
"""

import pytest
from dataclasses import replace

from ..engine_core import EventLog, Game
from ..spec_schema import (
    DiseaseDefinition,
    GameDefinition,
    GameSettings,
    InfectionCard,
    LocationDefinition,
    PlayerCard,
    RoleDefinition,
)
from ..games.world import create_world_definition


class ScriptedRandomness:
    """Randomness with a predictable outcome."""

    def __init__(self, cuts=None):
        self.cuts = list(cuts or [])

    def sample(self, population, k):
        return list(population)[:k]

    def shuffle(self, sequence):
        return list(sequence)

    def rand_int(self, low, high):
        if self.cuts:
            return self.cuts.pop(0)
        return low


@pytest.fixture
def small_definition() -> GameDefinition:
    """Six-city board with two diseases."""
    locations = (
        LocationDefinition("Alpha", "blue", ("Bravo", "Charlie")),
        LocationDefinition("Bravo", "blue", ("Alpha", "Charlie", "Delta")),
        LocationDefinition("Charlie", "blue", ("Alpha", "Bravo")),
        LocationDefinition("Delta", "red", ("Bravo", "Echo")),
        LocationDefinition("Echo", "red", ("Delta", "Foxtrot")),
        LocationDefinition("Foxtrot", "red", ("Echo",)),
    )
    return GameDefinition(
        game_id="small",
        game_name="Small Board",
        locations=locations,
        diseases=(DiseaseDefinition("blue", 24), DiseaseDefinition("red", 24)),
        roles=(RoleDefinition("Medic"), RoleDefinition("Scientist"), RoleDefinition("Dispatcher")),
        player_cards=tuple(
            [PlayerCard.city(loc.name) for loc in locations]
            + [PlayerCard.event("Airlift"), PlayerCard.event("Forecast")]
        ),
        infection_cards=tuple(InfectionCard(loc.name) for loc in locations),
        starting_location="Alpha",
        initial_infections=(),
        initial_player_cards={2: 2, 3: 1},
        infection_rate_levels=(2, 2, 3),
        max_outbreaks=3,
        research_centers_available=6,
        min_players=2,
        max_players=3,
    )


@pytest.fixture
def world_definition() -> GameDefinition:
    return create_world_definition()


@pytest.fixture
def log() -> EventLog:
    return EventLog()


@pytest.fixture
def make_game(small_definition, log):
    """
    Factory for a set-up game on the small board.

    Keyword arguments other than players/epidemics/cuts/rng replace fields
    of the small definition.
    """
    def _make(players=("p1", "p2"), epidemics=0, cuts=None, rng=None, **overrides):
        definition = replace(small_definition, **overrides) if overrides else small_definition
        game = Game(
            definition=definition,
            settings=GameSettings(number_of_epidemics=epidemics),
            players=list(players),
            sink=log,
            rng=rng or ScriptedRandomness(cuts),
        )
        game.setup()
        return game

    return _make


@pytest.fixture
def scripted_rng():
    """The ScriptedRandomness class, for tests that build their own."""
    return ScriptedRandomness
