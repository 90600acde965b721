"""
Infection Engine - Cube placement, outbreak chains, and epidemics.

Outbreaks are resolved breadth-first from an explicit work queue. A location
outbreaks at most once per infect() call; later visits to it are skipped.
Both infection losses (outbreak limit, empty cube supply) are reported by
entering a terminal sub-state and returning False.
"""

from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass

from .decks import draw_infection_card
from .events import EventSink, EventType, emit_state_change, make_event
from .state import EPIDEMIC_INFECTION_CUBES, MAX_CUBES_PER_LOCATION, Situation, TurnState

logger = logging.getLogger(__name__)


@dataclass
class InfectionEngine:
    """
    Applies infections to a Situation.

    Stateless between calls apart from the situation it mutates.
    """
    situation: Situation
    sink: EventSink

    def infect(self, location: str, disease: str, count: int) -> bool:
        """
        Place `count` cubes of `disease` on `location`, spreading outbreaks.

        Returns False if the game was lost; the terminal sub-state is
        already set and announced in that case.
        """
        situation = self.situation
        queue = deque([location] * count)
        outbroken: set[str] = set()

        while queue:
            name = queue.popleft()
            if name in outbroken:
                continue

            target = situation.find_location(name)
            if target.cubes(disease) == MAX_CUBES_PER_LOCATION:
                self.sink.emit(make_event(EventType.OUTBREAK, location=name, disease=disease))
                situation.outbreak_count += 1
                logger.debug(
                    "Outbreak of %s in %s (%d/%d)",
                    disease, name, situation.outbreak_count, situation.max_outbreaks,
                )
                if situation.outbreak_count > situation.max_outbreaks:
                    self._defeat(TurnState.defeat_too_many_outbreaks())
                    return False
                queue.extend(target.adjacent)
                outbroken.add(name)
                continue

            supply = situation.find_disease(disease)
            if supply.cubes == 0:
                self._defeat(TurnState.defeat_too_many_infections(disease))
                return False

            target.infections[disease] = target.cubes(disease) + 1
            supply.cubes -= 1
            self.sink.emit(make_event(EventType.INFECT, location=name, disease=disease))

        return True

    def draw_infection(self, count: int, from_bottom: bool = False) -> bool:
        """
        Draw one infection card and infect its location with `count` cubes.

        During play count is always 1; initial infections pass the ring's
        cube count.
        """
        card = draw_infection_card(self.situation, from_bottom=from_bottom)
        self.sink.emit(make_event(EventType.DRAW_AND_DISCARD_INFECTION_CARD, card=card))

        location = self.situation.find_location(card.location)
        return self.infect(location.name, location.disease, count)

    def handle_epidemic(self) -> bool:
        """
        Resolve the immediate part of an epidemic.

        Raises the infection rate, infects the bottom infection card with
        three cubes, then interrupts the turn with the epidemic sub-state.
        The intensify step is left to the acting player.
        """
        situation = self.situation
        situation.infection_rate_index = min(
            situation.infection_rate_index + 1,
            len(situation.infection_rate_levels) - 1,
        )
        self.sink.emit(make_event(
            EventType.INFECTION_RATE_INCREASED,
            infection_rate_index=situation.infection_rate_index,
            infection_rate=situation.infection_rate,
        ))

        if not self.draw_infection(EPIDEMIC_INFECTION_CUBES, from_bottom=True):
            return False

        situation.state = TurnState.epidemic(parent=situation.state)
        emit_state_change(self.sink, situation.state)
        return True

    def _defeat(self, state: TurnState) -> None:
        logger.info("Game lost: %s", state.name.value)
        self.situation.state = state
        emit_state_change(self.sink, state)
