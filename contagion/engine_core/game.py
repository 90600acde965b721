"""
Game - The turn state machine.

The game is the single point of state mutation after setup.
All player input goes through act().

Design principles:
- Owns one mutable Situation; observers only see event copies
- Validates before applying: a rejected action changes nothing and
  emits nothing
- Delegates card handling to the deck manager and cube placement to
  the infection engine
- Terminal (defeat) sub-states match no action, so they are inert
  without an explicit guard
"""

from __future__ import annotations
import logging
from copy import deepcopy

from ..spec_schema.game_definition import GameDefinition, GameSettings
from .action import Action, ActionResult, ActionType, ErrorCode
from .decks import draw_player_card, restack_infection_discard
from .errors import EngineConsistencyError
from .events import EventSink, EventType, emit_state_change, make_event
from .infection import InfectionEngine
from .randomness import Randomness
from .setup import create_situation, deal_initial_hands, seed_initial_infections
from .state import Situation, StateName, TurnState

logger = logging.getLogger(__name__)


class Game:
    """
    One game from setup to defeat.

    Usage:
        log = EventLog()
        game = Game(definition, GameSettings(number_of_epidemics=5),
                    ["alice", "bob"], log, SeededRandomness(7))
        game.setup()
        result = game.act("alice", Action.action_pass())
    """

    def __init__(
        self,
        definition: GameDefinition,
        settings: GameSettings,
        players: list[str],
        sink: EventSink,
        rng: Randomness,
    ):
        self.definition = definition
        self.settings = settings
        self.player_ids = list(players)
        self.sink = sink
        self.rng = rng
        self.situation: Situation | None = None
        self._infection: InfectionEngine | None = None

    @property
    def state(self) -> TurnState | None:
        return self.situation.state if self.situation else None

    def setup(self) -> None:
        """
        Create the starting Situation and hand the turn to the first player.

        Must be called exactly once.
        """
        if self.situation is not None:
            raise EngineConsistencyError("setup() has already run")

        situation = create_situation(self.definition, self.settings, self.player_ids, self.rng)
        self.sink.emit(make_event(EventType.INITIAL_SITUATION, situation=situation))

        self.situation = situation
        self._infection = InfectionEngine(situation=situation, sink=self.sink)

        if not seed_initial_infections(situation, self._infection):
            return

        if not deal_initial_hands(situation, self._draw_player_card):
            return

        situation.state = TurnState.player_actions(situation.players[0].player_id)
        self._emit_state_change()
        logger.info(
            "Game %s set up for %d players, %d epidemics",
            situation.game_id, len(situation.players), situation.number_of_epidemics,
        )

    def act(self, player: str, action: Action) -> ActionResult:
        """
        Apply one action for a player.

        Returns ActionResult; a rejection leaves the game untouched.
        """
        validation_error = self._validate_action(player, action)
        if validation_error:
            error, code = validation_error
            logger.debug("Rejected %s from %s: %s", action.name, player, error)
            return ActionResult.failure(error, error_code=code)

        handler = self._get_handler(action.action_type)
        handler(player)
        return ActionResult.accepted(deepcopy(self.situation.state))

    def _validate_action(self, player: str, action: Action) -> tuple[str, ErrorCode] | None:
        """Return (error, code) if the action does not fit the current sub-state."""
        if self.situation is None:
            return "Game has not been set up", ErrorCode.NOT_SET_UP

        state = self.situation.state
        if state.name != action.action_type.required_state:
            return (
                f"{action.name} is not allowed in state {state.name.value}",
                ErrorCode.WRONG_STATE,
            )
        if player != state.acting_player():
            return f"Not {player}'s turn", ErrorCode.WRONG_PLAYER
        return None

    def _get_handler(self, action_type: ActionType):
        handlers = {
            ActionType.ACTION_PASS: self._handle_action_pass,
            ActionType.DRAW_PLAYER_CARD: self._handle_draw_player_card,
            ActionType.INCREASE_INFECTION_INTENSITY: self._handle_increase_infection_intensity,
            ActionType.DRAW_INFECTION_CARD: self._handle_draw_infection_card,
        }
        return handlers[action_type]

    def _handle_action_pass(self, player: str) -> None:
        situation = self.situation
        situation.state.actions_remaining -= 1
        if situation.state.actions_remaining == 0:
            situation.state = TurnState.draw_player_cards(player)
        self._emit_state_change()

    def _handle_draw_player_card(self, player: str) -> None:
        if not self._draw_player_card(player):
            return  # Defeat
        state = self.situation.state
        if state.name != StateName.DRAW_PLAYER_CARDS:
            return  # Epidemic interrupt, already announced
        if state.draws_remaining == 0:
            self._start_infection_phase(player)
        else:
            self._emit_state_change()

    def _handle_increase_infection_intensity(self, player: str) -> None:
        situation = self.situation
        parent = situation.state.parent
        if parent is None or parent.name != StateName.DRAW_PLAYER_CARDS:
            raise EngineConsistencyError(
                "epidemic interrupted a state other than draw_player_cards",
                state=deepcopy(situation.state),
            )

        cards = restack_infection_discard(situation, self.rng)
        self.sink.emit(make_event(EventType.INFECTION_CARDS_RESTACK, cards=cards))

        if parent.draws_remaining > 0:
            situation.state = parent
            self._emit_state_change()
        else:
            self._start_infection_phase(player)

    def _handle_draw_infection_card(self, player: str) -> None:
        situation = self.situation
        if not self._infection.draw_infection(1):
            return  # Defeat
        situation.state.draws_remaining -= 1
        if situation.state.draws_remaining == 0:
            next_player = situation.next_player(player)
            situation.state = TurnState.player_actions(next_player.player_id)
        self._emit_state_change()

    def _draw_player_card(self, player: str) -> bool:
        """
        Draw the top player card for a player.

        Counts the draw against draws_remaining when in the draw phase.
        Returns False if the game was lost.
        """
        situation = self.situation
        card = draw_player_card(situation)
        if card is None:
            logger.info("Game lost: player deck exhausted on %s's draw", player)
            situation.state = TurnState.defeat_out_of_player_cards(player)
            self._emit_state_change()
            return False

        self.sink.emit(make_event(EventType.DRAW_PLAYER_CARD, player=player, card=card))
        if situation.state.name == StateName.DRAW_PLAYER_CARDS:
            situation.state.draws_remaining -= 1

        if card.is_epidemic:
            situation.player_cards_discard.insert(0, card)
            return self._infection.handle_epidemic()

        situation.find_player(player).hand.append(card)
        return True

    def _start_infection_phase(self, player: str) -> None:
        situation = self.situation
        situation.state = TurnState.draw_infection_cards(player, situation.infection_rate)
        self._emit_state_change()

    def _emit_state_change(self) -> None:
        emit_state_change(self.sink, self.situation.state)
