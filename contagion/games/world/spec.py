"""
World Game Definition

The standard board, hand-authored. Use create_world_definition() as the
default GameDefinition for sessions and the CLI.
"""

from ...spec_schema.game_definition import (
    DiseaseDefinition,
    GameDefinition,
    InfectionCard,
    LocationDefinition,
    PlayerCard,
    RoleDefinition,
)
from .board import (
    CITIES_BY_DISEASE,
    EVENTS,
    ROLES,
    ROUTES,
    STARTING_LOCATION,
    build_adjacency,
)


def create_world_definition() -> GameDefinition:
    """
    Create the world board definition.

    48 cities, 4 diseases with 24 cubes each, 53 player cards
    (48 cities + 5 events), 7 roles.
    """
    locations = _define_locations()
    return GameDefinition(
        game_id="world_base",
        game_name="Contagion: World",
        locations=locations,
        diseases=tuple(
            DiseaseDefinition(name=name, cubes=24) for name in CITIES_BY_DISEASE
        ),
        roles=tuple(RoleDefinition(name=name, description=text) for name, text in ROLES),
        player_cards=tuple(
            [PlayerCard.city(loc.name) for loc in locations]
            + [PlayerCard.event(name) for name in EVENTS]
        ),
        infection_cards=tuple(InfectionCard(location=loc.name) for loc in locations),
        starting_location=STARTING_LOCATION,
        initial_infections=(3, 3, 3, 2, 2, 2, 1, 1, 1),
        initial_player_cards={2: 4, 3: 3, 4: 2},
        infection_rate_levels=(2, 2, 2, 3, 3, 4, 4),
        max_outbreaks=7,
        research_centers_available=6,
        min_players=2,
        max_players=4,
    )


def _define_locations() -> tuple[LocationDefinition, ...]:
    adjacency = build_adjacency(ROUTES)
    return tuple(
        LocationDefinition(name=city, disease=disease, adjacent=tuple(adjacency[city]))
        for disease, cities in CITIES_BY_DISEASE.items()
        for city in cities
    )
