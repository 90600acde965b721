"""
Tests for the infection engine.

Tests:
- Cube placement and supply
- Outbreaks and chain reactions
- Both infection defeat conditions
- Epidemics
"""

import pytest

from ..engine_core import EventType, InfectionEngine, StateName, TurnState


@pytest.fixture
def situation(make_game):
    """Situation of a fresh 2-player game; first player to act."""
    return make_game().situation


@pytest.fixture
def engine(situation, log):
    log.clear()
    return InfectionEngine(situation=situation, sink=log)


def _cubes(situation, location, disease):
    return situation.find_location(location).cubes(disease)


class TestInfect:
    """Tests for placing cubes."""

    def test_places_cube(self, engine, situation, log):
        assert engine.infect("Alpha", "blue", 1)

        assert _cubes(situation, "Alpha", "blue") == 1
        assert situation.find_disease("blue").cubes == 23
        assert [e.event_type for e in log.events] == [EventType.INFECT]
        assert log.events[0]["location"] == "Alpha"
        assert log.events[0]["disease"] == "blue"

    def test_places_several_cubes(self, engine, situation):
        assert engine.infect("Delta", "red", 3)
        assert _cubes(situation, "Delta", "red") == 3
        assert situation.find_disease("red").cubes == 21

    def test_diseases_are_counted_separately(self, engine, situation):
        engine.infect("Alpha", "blue", 2)
        engine.infect("Alpha", "red", 1)

        assert _cubes(situation, "Alpha", "blue") == 2
        assert _cubes(situation, "Alpha", "red") == 1

    def test_fourth_cube_causes_outbreak(self, engine, situation, log):
        """A fourth cube is never placed; the city outbreaks instead."""
        assert engine.infect("Charlie", "blue", 4)

        assert _cubes(situation, "Charlie", "blue") == 3
        assert len(log.of_type(EventType.OUTBREAK)) == 1
        assert _cubes(situation, "Alpha", "blue") == 1
        assert _cubes(situation, "Bravo", "blue") == 1


class TestOutbreak:
    """Tests for outbreak resolution."""

    def test_single_outbreak(self, engine, situation, log):
        """A city at 3 blue cubes re-infected with blue outbreaks once."""
        situation.find_location("Alpha").infections["blue"] = 3

        assert engine.infect("Alpha", "blue", 1)

        outbreaks = log.of_type(EventType.OUTBREAK)
        assert len(outbreaks) == 1
        assert outbreaks[0]["location"] == "Alpha"
        assert situation.outbreak_count == 1
        assert _cubes(situation, "Alpha", "blue") == 3
        assert _cubes(situation, "Bravo", "blue") == 1
        assert _cubes(situation, "Charlie", "blue") == 1

    def test_outbreak_spreads_the_same_disease(self, engine, situation):
        """Neighbours get the outbreaking disease, not their own."""
        situation.find_location("Bravo").infections["blue"] = 3

        engine.infect("Bravo", "blue", 1)

        assert _cubes(situation, "Delta", "blue") == 1
        assert _cubes(situation, "Delta", "red") == 0

    def test_chain_reaction(self, engine, situation, log):
        """Each city outbreaks at most once; revisits are skipped."""
        situation.find_location("Alpha").infections["blue"] = 3
        situation.find_location("Bravo").infections["blue"] = 3

        assert engine.infect("Alpha", "blue", 1)

        assert [e["location"] for e in log.of_type(EventType.OUTBREAK)] == ["Alpha", "Bravo"]
        assert situation.outbreak_count == 2
        assert _cubes(situation, "Alpha", "blue") == 3
        assert _cubes(situation, "Bravo", "blue") == 3
        # From Alpha's outbreak and from Bravo's
        assert _cubes(situation, "Charlie", "blue") == 2
        assert _cubes(situation, "Delta", "blue") == 1

    def test_breadth_first_order(self, engine, situation, log):
        situation.find_location("Alpha").infections["blue"] = 3
        situation.find_location("Bravo").infections["blue"] = 3

        engine.infect("Alpha", "blue", 1)

        sequence = [
            (e.event_type.value, e["location"])
            for e in log.events
        ]
        assert sequence == [
            ("outbreak", "Alpha"),
            ("outbreak", "Bravo"),
            ("infect", "Charlie"),
            ("infect", "Charlie"),
            ("infect", "Delta"),
        ]

    def test_cubes_stay_within_limit(self, engine, situation):
        for location in situation.locations:
            location.infections["blue"] = 3

        engine.infect("Foxtrot", "blue", 1)

        assert all(0 <= loc.cubes("blue") <= 3 for loc in situation.locations)

    def test_reaching_the_limit_is_not_defeat(self, engine, situation):
        situation.outbreak_count = 2  # max is 3
        situation.find_location("Foxtrot").infections["red"] = 3

        assert engine.infect("Foxtrot", "red", 1)
        assert situation.outbreak_count == 3
        assert not situation.state.terminal

    def test_exceeding_the_limit_is_defeat(self, engine, situation, log):
        situation.outbreak_count = 3
        situation.find_location("Foxtrot").infections["red"] = 3

        assert not engine.infect("Foxtrot", "red", 1)

        assert situation.outbreak_count == 4
        assert situation.state.name == StateName.DEFEAT_TOO_MANY_OUTBREAKS
        assert situation.state.terminal
        # Aborted before spreading
        assert _cubes(situation, "Echo", "red") == 0
        changes = log.of_type(EventType.STATE_CHANGE)
        assert len(changes) == 1
        assert changes[0]["state"].name == StateName.DEFEAT_TOO_MANY_OUTBREAKS

    def test_defeat_mid_chain_happens_once(self, engine, situation, log):
        situation.outbreak_count = 2
        situation.find_location("Alpha").infections["blue"] = 3
        situation.find_location("Bravo").infections["blue"] = 3
        situation.find_location("Charlie").infections["blue"] = 3

        assert not engine.infect("Alpha", "blue", 1)

        assert situation.outbreak_count == 4
        assert len(log.of_type(EventType.STATE_CHANGE)) == 1


class TestCubeSupply:
    """Tests for running out of cubes."""

    def test_empty_supply_is_defeat(self, engine, situation, log):
        situation.find_disease("red").cubes = 0

        assert not engine.infect("Echo", "red", 1)

        assert situation.state == TurnState.defeat_too_many_infections("red")
        assert _cubes(situation, "Echo", "red") == 0
        assert log.of_type(EventType.STATE_CHANGE)[0]["state"].disease == "red"

    def test_last_cube_can_be_placed(self, engine, situation):
        situation.find_disease("red").cubes = 1

        assert engine.infect("Echo", "red", 1)
        assert situation.find_disease("red").cubes == 0

    def test_supply_runs_out_mid_infection(self, engine, situation):
        situation.find_disease("red").cubes = 2

        assert not engine.infect("Echo", "red", 3)

        assert situation.find_disease("red").cubes == 0
        assert _cubes(situation, "Echo", "red") == 2
        assert situation.state.name == StateName.DEFEAT_TOO_MANY_INFECTIONS


class TestDrawInfection:
    """Tests for drawing infection cards."""

    def test_draw_infects_card_location_with_its_disease(self, engine, situation, log):
        assert engine.draw_infection(1)

        assert _cubes(situation, "Alpha", "blue") == 1
        assert log.events[0].event_type == EventType.DRAW_AND_DISCARD_INFECTION_CARD
        assert log.events[0]["card"].location == "Alpha"
        assert situation.infection_cards_discard[0].location == "Alpha"

    def test_count_places_several_cubes_from_one_card(self, engine, situation):
        assert engine.draw_infection(3)

        assert _cubes(situation, "Alpha", "blue") == 3
        assert len(situation.infection_cards_discard) == 1


class TestEpidemic:
    """Tests for the immediate part of an epidemic."""

    def test_epidemic(self, engine, situation, log):
        previous = situation.state

        assert engine.handle_epidemic()

        kinds = [e.event_type for e in log.events]
        assert kinds[:2] == [
            EventType.INFECTION_RATE_INCREASED,
            EventType.DRAW_AND_DISCARD_INFECTION_CARD,
        ]
        assert kinds.count(EventType.INFECT) == 3
        assert kinds[-1] == EventType.STATE_CHANGE

        assert situation.infection_rate_index == 1
        assert log.events[0]["infection_rate"] == 2
        # Bottom card of the infection deck
        assert _cubes(situation, "Foxtrot", "red") == 3
        assert situation.state.name == StateName.EPIDEMIC
        assert situation.state.parent == previous

    def test_rate_index_is_capped(self, engine, situation):
        situation.infection_rate_index = 2

        engine.handle_epidemic()

        assert situation.infection_rate_index == 2
        assert situation.infection_rate == 3

    def test_epidemic_defeat_skips_interrupt(self, engine, situation):
        situation.find_disease("red").cubes = 1

        assert not engine.handle_epidemic()

        assert situation.state.name == StateName.DEFEAT_TOO_MANY_INFECTIONS
        assert situation.state.parent is None
