"""
World - The standard board.

Four diseases spread across 48 cities of the world map.
Players start in Atlanta, where the first research center stands.
"""

from .spec import create_world_definition
from .board import CITIES_BY_DISEASE, ROUTES, EVENTS, ROLES, STARTING_LOCATION

__all__ = [
    "create_world_definition",
    "CITIES_BY_DISEASE",
    "ROUTES",
    "EVENTS",
    "ROLES",
    "STARTING_LOCATION",
]
