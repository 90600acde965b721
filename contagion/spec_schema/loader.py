"""
Definition Loader - Parse JSON board documents into a GameDefinition.

Documents are checked structurally with pydantic and converted into the
frozen dataclasses the engine consumes. Cross-references (adjacency names,
infection card locations) are taken as given.

Document shape:
    {
        "game_id": "...",
        "game_name": "...",
        "starting_location": "Atlanta",
        "locations": [{"name": "Atlanta", "disease": "blue",
                       "adjacent": ["Chicago", ...]}, ...],
        "diseases": [{"name": "blue", "cubes": 24}, ...],
        "roles": [{"name": "Medic"}, ...],
        "events": ["Airlift", ...],
        "initial_infections": [3, 3, 3, 2, 2, 2, 1, 1, 1],
        "initial_player_cards": {"2": 4, "3": 3, "4": 2},
        "infection_rate_levels": [2, 2, 2, 3, 3, 4, 4],
        "max_outbreaks": 7,
        "research_centers_available": 6
    }

One city card and one infection card are generated per location.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .game_definition import (
    DiseaseDefinition,
    GameDefinition,
    InfectionCard,
    LocationDefinition,
    PlayerCard,
    RoleDefinition,
)


class DefinitionLoadError(Exception):
    """Raised when a definition document cannot be parsed."""

    def __init__(self, errors: list[str], source: str | None = None):
        self.errors = errors
        self.source = source
        where = f" from {source}" if source else ""
        super().__init__(f"Failed to load definition{where} with {len(errors)} error(s)")


class LocationDocument(BaseModel):
    name: str
    disease: str
    adjacent: list[str] = Field(default_factory=list)


class DiseaseDocument(BaseModel):
    name: str
    cubes: int = Field(24, ge=0)


class RoleDocument(BaseModel):
    name: str
    description: str = ""


class DefinitionDocument(BaseModel):
    """Pydantic model of a JSON board document."""
    game_id: str
    game_name: str
    starting_location: str
    locations: list[LocationDocument] = Field(min_length=1)
    diseases: list[DiseaseDocument] = Field(min_length=1)
    roles: list[RoleDocument] = Field(default_factory=list)
    events: list[str] = Field(default_factory=list)
    initial_infections: list[int] = Field(default_factory=lambda: [3, 3, 3, 2, 2, 2, 1, 1, 1])
    initial_player_cards: dict[int, int] = Field(default_factory=lambda: {2: 4, 3: 3, 4: 2})
    infection_rate_levels: list[int] = Field(
        default_factory=lambda: [2, 2, 2, 3, 3, 4, 4], min_length=1
    )
    max_outbreaks: int = Field(7, ge=0)
    research_centers_available: int = Field(6, ge=1)

    def to_definition(self) -> GameDefinition:
        """Convert to the engine's frozen dataclasses."""
        player_counts = sorted(self.initial_player_cards) or [1]
        return GameDefinition(
            game_id=self.game_id,
            game_name=self.game_name,
            locations=tuple(
                LocationDefinition(
                    name=loc.name,
                    disease=loc.disease,
                    adjacent=tuple(loc.adjacent),
                )
                for loc in self.locations
            ),
            diseases=tuple(
                DiseaseDefinition(name=d.name, cubes=d.cubes) for d in self.diseases
            ),
            roles=tuple(
                RoleDefinition(name=r.name, description=r.description) for r in self.roles
            ),
            player_cards=tuple(
                [PlayerCard.city(loc.name) for loc in self.locations]
                + [PlayerCard.event(name) for name in self.events]
            ),
            infection_cards=tuple(InfectionCard(location=loc.name) for loc in self.locations),
            starting_location=self.starting_location,
            initial_infections=tuple(self.initial_infections),
            initial_player_cards=dict(self.initial_player_cards),
            infection_rate_levels=tuple(self.infection_rate_levels),
            max_outbreaks=self.max_outbreaks,
            research_centers_available=self.research_centers_available,
            min_players=player_counts[0],
            max_players=player_counts[-1],
        )


def parse_definition(data: dict[str, Any], source: str | None = None) -> GameDefinition:
    """Parse a definition document already decoded from JSON."""
    try:
        document = DefinitionDocument.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise DefinitionLoadError(errors, source=source) from e
    return document.to_definition()


def load_definition(path: str | Path) -> GameDefinition:
    """Load a definition document from a JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DefinitionLoadError([f"invalid JSON: {e}"], source=str(path)) from e
    return parse_definition(data, source=str(path))
