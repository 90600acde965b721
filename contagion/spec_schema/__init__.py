"""Game definition schema - static board data and settings."""

from .game_definition import (
    CardType,
    DiseaseDefinition,
    GameDefinition,
    GameSettings,
    InfectionCard,
    LocationDefinition,
    PlayerCard,
    RoleDefinition,
)
from .loader import DefinitionDocument, DefinitionLoadError, load_definition, parse_definition

__all__ = [
    "CardType",
    "DiseaseDefinition",
    "GameDefinition",
    "GameSettings",
    "InfectionCard",
    "LocationDefinition",
    "PlayerCard",
    "RoleDefinition",
    "DefinitionDocument",
    "DefinitionLoadError",
    "load_definition",
    "parse_definition",
]
