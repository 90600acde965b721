"""
Deck Manager - Player deck construction and infection pile handling.

Player deck layout after setup (top first):

    [ reserved for initial deal | chunk 1 + E | chunk 2 + E | ... ]

The part after the reserved cards is cut into one chunk per epidemic and a
single epidemic card is spliced into each chunk at a random position.
"""

from __future__ import annotations
from typing import Sequence

from ..spec_schema.game_definition import InfectionCard, PlayerCard
from .errors import EngineConsistencyError
from .randomness import Randomness
from .state import Situation


def chunk_bounds(n_cards: int, n_reserved: int, n_epidemics: int) -> list[tuple[int, int]]:
    """
    Split positions [n_reserved, n_cards) into n_epidemics chunks.

    Chunks have floor(n / n_epidemics) cards; the first n % n_epidemics
    chunks get one extra. Returns (start, end) pairs, end exclusive.
    """
    if n_epidemics <= 0:
        return []
    n = max(n_cards - n_reserved, 0)
    chunk_size = n // n_epidemics
    larger = n - n_epidemics * chunk_size

    bounds = []
    index = n_reserved
    for i in range(n_epidemics):
        count = chunk_size + (1 if i < larger else 0)
        bounds.append((index, index + count))
        index += count
    return bounds


def build_player_deck(
    cards: Sequence[PlayerCard],
    n_epidemics: int,
    n_reserved: int,
    rng: Randomness,
) -> list[PlayerCard]:
    """
    Shuffle the player cards and interleave epidemic cards.

    The first n_reserved shuffled cards stay on top for the initial deal.
    """
    shuffled = rng.shuffle(cards)
    return interleave_epidemics(shuffled, n_epidemics, n_reserved, rng)


def interleave_epidemics(
    shuffled: list[PlayerCard],
    n_epidemics: int,
    n_reserved: int,
    rng: Randomness,
) -> list[PlayerCard]:
    """Splice one epidemic card into each chunk of an already shuffled deck."""
    bounds = chunk_bounds(len(shuffled), n_reserved, n_epidemics)
    if not bounds:
        return list(shuffled)

    deck = list(shuffled[:n_reserved])
    for start, end in bounds:
        where = rng.rand_int(start, end) if end > start else start
        deck.extend(shuffled[start:where])
        deck.append(PlayerCard.epidemic())
        deck.extend(shuffled[where:end])
    return deck


def draw_player_card(situation: Situation) -> PlayerCard | None:
    """Take the top player card, or None when the deck is exhausted."""
    if not situation.player_cards_draw:
        return None
    return situation.player_cards_draw.pop(0)


def draw_infection_card(situation: Situation, from_bottom: bool = False) -> InfectionCard:
    """
    Draw an infection card and put it on top of the discard pile.

    Regular draws take the top card; epidemics draw from the bottom.
    """
    if not situation.infection_cards_draw:
        raise EngineConsistencyError("infection draw pile is empty", state=situation.state)
    if from_bottom:
        card = situation.infection_cards_draw.pop()
    else:
        card = situation.infection_cards_draw.pop(0)
    situation.infection_cards_discard.insert(0, card)
    return card


def restack_infection_discard(situation: Situation, rng: Randomness) -> list[InfectionCard]:
    """
    Shuffle the discard pile back on top of the draw pile.

    Returns the shuffled cards in their new order.
    """
    cards = rng.shuffle(situation.infection_cards_discard)
    situation.infection_cards_discard = []
    situation.infection_cards_draw = cards + situation.infection_cards_draw
    return cards
