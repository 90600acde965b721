"""
Game Setup - Creates the initial Situation.

This module handles:
- Merging the definition with the settings overlay
- Assigning roles
- Placing players and the first research center
- Shuffling the infection deck and building the player deck
- Initial infections and the initial deal

The steps that emit events (infections, deal) are driven by Game.setup(),
which owns the event sink.
"""

from __future__ import annotations
from copy import deepcopy
from typing import Callable

from ..spec_schema.game_definition import GameDefinition, GameSettings
from .decks import build_player_deck
from .infection import InfectionEngine
from .randomness import Randomness
from .state import (
    DiseaseState,
    LocationState,
    PlayerState,
    ResearchCenter,
    Situation,
    TurnState,
)


def create_situation(
    definition: GameDefinition,
    settings: GameSettings,
    player_ids: list[str],
    rng: Randomness,
) -> Situation:
    """
    Build the starting Situation, before any infection or deal.

    Randomness is consumed in a fixed order: roles, infection deck,
    player deck shuffle, epidemic positions.
    """
    definition = deepcopy(definition)
    num_players = len(player_ids)

    roles = [role.name for role in definition.roles]
    assigned = rng.sample(roles, min(len(roles), num_players))
    assigned += [None] * (num_players - len(assigned))
    players = [
        PlayerState(
            player_id=player_id,
            role=role,
            location=definition.starting_location,
            hand=[],
        )
        for player_id, role in zip(player_ids, assigned)
    ]

    disease_names = [d.name for d in definition.diseases]
    locations = [
        LocationState(
            name=loc.name,
            disease=loc.disease,
            adjacent=list(loc.adjacent),
            infections={name: 0 for name in disease_names},
        )
        for loc in definition.locations
    ]
    diseases = [DiseaseState(name=d.name, cubes=d.cubes) for d in definition.diseases]

    infection_cards = rng.shuffle(definition.infection_cards)

    n_reserved = definition.hand_size(num_players) * num_players
    player_cards = build_player_deck(
        definition.player_cards,
        settings.number_of_epidemics,
        n_reserved,
        rng,
    )

    max_outbreaks = definition.max_outbreaks
    if settings.max_outbreaks is not None:
        max_outbreaks = settings.max_outbreaks

    return Situation(
        game_id=definition.game_id,
        state=TurnState.setup(),
        players=players,
        locations=locations,
        diseases=diseases,
        player_cards_draw=player_cards,
        player_cards_discard=[],
        infection_cards_draw=infection_cards,
        infection_cards_discard=[],
        outbreak_count=0,
        max_outbreaks=max_outbreaks,
        research_centers=[ResearchCenter(location=definition.starting_location)],
        research_centers_available=definition.research_centers_available - 1,
        infection_rate_levels=list(definition.infection_rate_levels),
        infection_rate_index=0,
        starting_location=definition.starting_location,
        number_of_epidemics=settings.number_of_epidemics,
        initial_infections=list(definition.initial_infections),
        initial_player_cards=dict(definition.initial_player_cards),
    )


def seed_initial_infections(situation: Situation, infection: InfectionEngine) -> bool:
    """
    Draw one infection card per entry of the initial infections table,
    placing that entry's number of cubes.

    Returns False if seeding already lost the game.
    """
    for cubes in situation.initial_infections:
        if not infection.draw_infection(cubes):
            return False
    return True


def deal_initial_hands(situation: Situation, draw: Callable[[str], bool]) -> bool:
    """
    Deal round-robin: each round, every player draws one card in turn order.

    Returns False if the player deck ran out during the deal.
    """
    hand_size = situation.initial_player_cards[len(situation.players)]
    for _ in range(hand_size):
        for player in situation.players:
            if not draw(player.player_id):
                return False
    return True
