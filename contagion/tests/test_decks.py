"""
Tests for the deck manager.

Tests:
- Chunking of the player deck
- Epidemic interleaving
- Infection draw, discard and restack
"""

import pytest

from ..engine_core.decks import (
    build_player_deck,
    chunk_bounds,
    draw_infection_card,
    draw_player_card,
    interleave_epidemics,
    restack_infection_discard,
)
from ..engine_core.errors import EngineConsistencyError
from ..engine_core.randomness import SeededRandomness
from ..spec_schema import CardType, InfectionCard, PlayerCard


def _without_epidemics(deck):
    return [card for card in deck if not card.is_epidemic]


class TestChunkBounds:
    """Tests for splitting the player deck into epidemic chunks."""

    def test_even_split(self):
        """53 cards, 8 reserved, 5 epidemics: five 9-card chunks."""
        bounds = chunk_bounds(53, 8, 5)
        assert bounds == [(8, 17), (17, 26), (26, 35), (35, 44), (44, 53)]

    def test_remainder_goes_to_first_chunks(self):
        """Extra cards go one each to the first chunks."""
        bounds = chunk_bounds(49, 8, 4)  # n=41 -> 11, 10, 10, 10
        assert [end - start for start, end in bounds] == [11, 10, 10, 10]
        assert bounds[0][0] == 8
        assert bounds[-1][1] == 49

    def test_zero_epidemics(self):
        assert chunk_bounds(53, 8, 0) == []

    def test_reserved_block_covers_deck(self):
        """Nothing left to chunk: every chunk is empty."""
        assert chunk_bounds(5, 8, 2) == [(8, 8), (8, 8)]


class TestPlayerDeck:
    """Tests for building the player deck."""

    def test_removing_epidemics_restores_shuffled_order(self, world_definition):
        """The deck minus epidemic cards is exactly the shuffled deck."""
        cards = world_definition.player_cards
        expected = SeededRandomness(11).shuffle(cards)

        deck = build_player_deck(cards, 5, 8, SeededRandomness(11))

        assert len(deck) == 58
        assert _without_epidemics(deck) == expected

    def test_one_epidemic_per_chunk(self, world_definition):
        """Each 9-card chunk becomes 10 cards holding exactly one epidemic."""
        deck = build_player_deck(world_definition.player_cards, 5, 8, SeededRandomness(3))

        assert not any(card.is_epidemic for card in deck[:8])
        for i in range(5):
            chunk = deck[8 + 10 * i: 8 + 10 * (i + 1)]
            assert sum(card.is_epidemic for card in chunk) == 1

    def test_cut_point_position(self, scripted_rng):
        """The epidemic is inserted at the drawn cut point."""
        cards = [PlayerCard.city(str(i)) for i in range(10)]
        # reserved 2, chunks (2, 6) and (6, 10)
        deck = interleave_epidemics(cards, 2, 2, scripted_rng(cuts=[4, 9]))

        labels = ["E" if c.is_epidemic else c.location for c in deck]
        assert labels == ["0", "1", "2", "3", "E", "4", "5", "6", "7", "8", "E", "9"]

    def test_zero_epidemics_keeps_shuffle(self, scripted_rng):
        cards = [PlayerCard.city(str(i)) for i in range(5)]
        deck = build_player_deck(cards, 0, 2, scripted_rng())
        assert deck == cards

    def test_zero_epidemics_keeps_every_card(self, world_definition):
        """Cards past the reserved block stay in the deck."""
        cards = world_definition.player_cards
        expected = SeededRandomness(1).shuffle(cards)

        deck = build_player_deck(cards, 0, 8, SeededRandomness(1))

        assert len(deck) == len(cards)
        assert deck == expected

    def test_more_epidemics_than_cards(self, scripted_rng):
        """Empty chunks still get their epidemic."""
        cards = [PlayerCard.city(str(i)) for i in range(3)]
        deck = interleave_epidemics(cards, 3, 2, scripted_rng())

        assert len(deck) == 6
        assert sum(card.is_epidemic for card in deck) == 3
        assert _without_epidemics(deck) == cards

    def test_draw_from_top(self, make_game):
        game = make_game()
        situation = game.situation
        top = situation.player_cards_draw[0]
        size = len(situation.player_cards_draw)

        assert draw_player_card(situation) == top
        assert len(situation.player_cards_draw) == size - 1

    def test_draw_from_empty_deck(self, make_game):
        game = make_game()
        game.situation.player_cards_draw = []
        assert draw_player_card(game.situation) is None


class TestInfectionPiles:
    """Tests for infection draw pile and discard pile handling."""

    def test_draw_from_top_goes_to_discard(self, make_game):
        situation = make_game().situation

        card = draw_infection_card(situation)

        assert card == InfectionCard("Alpha")
        assert situation.infection_cards_discard[0] == card
        assert situation.infection_cards_draw[0] == InfectionCard("Bravo")

    def test_draw_from_bottom(self, make_game):
        situation = make_game().situation

        card = draw_infection_card(situation, from_bottom=True)

        assert card == InfectionCard("Foxtrot")
        assert situation.infection_cards_draw[-1] == InfectionCard("Echo")

    def test_discard_pile_is_newest_first(self, make_game):
        situation = make_game().situation
        draw_infection_card(situation)
        draw_infection_card(situation)

        assert [c.location for c in situation.infection_cards_discard] == ["Bravo", "Alpha"]

    def test_restack_puts_discard_on_top(self, make_game, scripted_rng):
        situation = make_game().situation
        draw_infection_card(situation)
        draw_infection_card(situation)

        cards = restack_infection_discard(situation, scripted_rng())

        assert [c.location for c in cards] == ["Bravo", "Alpha"]
        assert situation.infection_cards_discard == []
        assert [c.location for c in situation.infection_cards_draw] == [
            "Bravo", "Alpha", "Charlie", "Delta", "Echo", "Foxtrot",
        ]

    def test_empty_draw_pile_is_a_fault(self, make_game):
        situation = make_game().situation
        situation.infection_cards_draw = []

        with pytest.raises(EngineConsistencyError):
            draw_infection_card(situation)


def test_epidemic_card_type():
    assert PlayerCard.epidemic().card_type == CardType.EPIDEMIC
    assert PlayerCard.epidemic().is_epidemic
    assert not PlayerCard.city("Alpha").is_epidemic
