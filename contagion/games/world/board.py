"""
World Board - Cities, diseases and routes.

48 cities in four regions of twelve, one disease per region.
Routes are undirected; adjacency is derived from them.
"""

from __future__ import annotations

# Disease -> cities native to it
CITIES_BY_DISEASE: dict[str, list[str]] = {
    "blue": [
        "Atlanta", "Chicago", "Essen", "London", "Madrid", "Milan",
        "Montreal", "New York", "Paris", "San Francisco", "St. Petersburg",
        "Washington",
    ],
    "yellow": [
        "Bogota", "Buenos Aires", "Johannesburg", "Khartoum", "Kinshasa",
        "Lagos", "Lima", "Los Angeles", "Mexico City", "Miami", "Santiago",
        "Sao Paulo",
    ],
    "black": [
        "Algiers", "Baghdad", "Cairo", "Chennai", "Delhi", "Istanbul",
        "Karachi", "Kolkata", "Moscow", "Mumbai", "Riyadh", "Tehran",
    ],
    "red": [
        "Bangkok", "Beijing", "Ho Chi Minh City", "Hong Kong", "Jakarta",
        "Manila", "Osaka", "Seoul", "Shanghai", "Sydney", "Taipei", "Tokyo",
    ],
}

ROUTES: list[tuple[str, str]] = [
    # North America
    ("San Francisco", "Chicago"),
    ("San Francisco", "Los Angeles"),
    ("San Francisco", "Tokyo"),
    ("San Francisco", "Manila"),
    ("Chicago", "Los Angeles"),
    ("Chicago", "Mexico City"),
    ("Chicago", "Atlanta"),
    ("Chicago", "Montreal"),
    ("Montreal", "New York"),
    ("Montreal", "Washington"),
    ("New York", "Washington"),
    ("New York", "London"),
    ("New York", "Madrid"),
    ("Washington", "Atlanta"),
    ("Washington", "Miami"),
    ("Atlanta", "Miami"),
    ("Los Angeles", "Mexico City"),
    ("Los Angeles", "Sydney"),
    ("Mexico City", "Miami"),
    ("Mexico City", "Bogota"),
    ("Mexico City", "Lima"),
    ("Miami", "Bogota"),
    # South America
    ("Bogota", "Lima"),
    ("Bogota", "Buenos Aires"),
    ("Bogota", "Sao Paulo"),
    ("Lima", "Santiago"),
    ("Buenos Aires", "Sao Paulo"),
    ("Sao Paulo", "Madrid"),
    ("Sao Paulo", "Lagos"),
    # Europe
    ("London", "Madrid"),
    ("London", "Paris"),
    ("London", "Essen"),
    ("Madrid", "Paris"),
    ("Madrid", "Algiers"),
    ("Paris", "Essen"),
    ("Paris", "Milan"),
    ("Paris", "Algiers"),
    ("Essen", "Milan"),
    ("Essen", "St. Petersburg"),
    ("Milan", "Istanbul"),
    ("St. Petersburg", "Istanbul"),
    ("St. Petersburg", "Moscow"),
    # Africa
    ("Lagos", "Kinshasa"),
    ("Lagos", "Khartoum"),
    ("Kinshasa", "Khartoum"),
    ("Kinshasa", "Johannesburg"),
    ("Johannesburg", "Khartoum"),
    ("Khartoum", "Cairo"),
    # Middle East and South Asia
    ("Algiers", "Istanbul"),
    ("Algiers", "Cairo"),
    ("Istanbul", "Moscow"),
    ("Istanbul", "Baghdad"),
    ("Istanbul", "Cairo"),
    ("Moscow", "Tehran"),
    ("Cairo", "Baghdad"),
    ("Cairo", "Riyadh"),
    ("Baghdad", "Riyadh"),
    ("Baghdad", "Karachi"),
    ("Baghdad", "Tehran"),
    ("Riyadh", "Karachi"),
    ("Tehran", "Karachi"),
    ("Tehran", "Delhi"),
    ("Karachi", "Mumbai"),
    ("Karachi", "Delhi"),
    ("Delhi", "Mumbai"),
    ("Delhi", "Chennai"),
    ("Delhi", "Kolkata"),
    ("Mumbai", "Chennai"),
    ("Chennai", "Kolkata"),
    ("Chennai", "Bangkok"),
    ("Chennai", "Jakarta"),
    ("Kolkata", "Bangkok"),
    ("Kolkata", "Hong Kong"),
    # East Asia and Oceania
    ("Bangkok", "Jakarta"),
    ("Bangkok", "Ho Chi Minh City"),
    ("Bangkok", "Hong Kong"),
    ("Jakarta", "Ho Chi Minh City"),
    ("Jakarta", "Sydney"),
    ("Ho Chi Minh City", "Hong Kong"),
    ("Ho Chi Minh City", "Manila"),
    ("Hong Kong", "Shanghai"),
    ("Hong Kong", "Taipei"),
    ("Hong Kong", "Manila"),
    ("Shanghai", "Beijing"),
    ("Shanghai", "Seoul"),
    ("Shanghai", "Tokyo"),
    ("Shanghai", "Taipei"),
    ("Beijing", "Seoul"),
    ("Seoul", "Tokyo"),
    ("Tokyo", "Osaka"),
    ("Osaka", "Taipei"),
    ("Taipei", "Manila"),
    ("Manila", "Sydney"),
]

EVENTS = [
    "Airlift",
    "Forecast",
    "Government Grant",
    "One Quiet Night",
    "Resilient Population",
]

ROLES = [
    ("Contingency Planner", "May reuse one discarded event card"),
    ("Dispatcher", "Moves other players' pawns"),
    ("Medic", "Removes all cubes of a color when treating"),
    ("Operations Expert", "Builds research centers without a card"),
    ("Quarantine Specialist", "Prevents placement in current and adjacent cities"),
    ("Researcher", "May give any city card to a player in the same city"),
    ("Scientist", "Needs only 4 cards to discover a cure"),
]

STARTING_LOCATION = "Atlanta"


def build_adjacency(routes: list[tuple[str, str]]) -> dict[str, list[str]]:
    """Undirected adjacency lists in route order."""
    adjacency: dict[str, list[str]] = {}
    for a, b in routes:
        adjacency.setdefault(a, []).append(b)
        adjacency.setdefault(b, []).append(a)
    return adjacency
