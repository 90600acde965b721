"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions
3. Formats engine state and events for clients

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..engine_core import Action
from ..engine_core.events import to_plain
from ..engine_core.state import TurnState
from ..session import Session, SessionManager
from ..spec_schema import GameSettings
from .schemas import (
    ActionRequest,
    ActionResponse,
    BoardLocationInfo,
    BoardResponse,
    CreateSessionRequest,
    DiseaseInfo,
    EndSessionResponse,
    ErrorCode,
    ErrorResponse,
    EventInfo,
    EventsResponse,
    PlayerInfo,
    SessionResponse,
    SessionStatus,
    TurnStateInfo,
)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()
        session = service.create_session(CreateSessionRequest(player_ids=["a", "b"]))
        result = service.submit_action(session.session_id,
                                       ActionRequest(player_id="a", name="action_pass"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def get_board(self) -> BoardResponse:
        definition = self.session_manager.definition
        return BoardResponse(
            game_id=definition.game_id,
            game_name=definition.game_name,
            starting_location=definition.starting_location,
            min_players=definition.min_players,
            max_players=definition.max_players,
            diseases=[d.name for d in definition.diseases],
            roles=[r.name for r in definition.roles],
            player_card_count=len(definition.player_cards),
            locations=[
                BoardLocationInfo(name=loc.name, disease=loc.disease, adjacent=list(loc.adjacent))
                for loc in definition.locations
            ],
        )

    def create_session(self, request: CreateSessionRequest) -> SessionResponse | ErrorResponse:
        settings = GameSettings(
            number_of_epidemics=request.number_of_epidemics,
            max_outbreaks=request.max_outbreaks,
        )
        try:
            session = self.session_manager.create_session(
                request.player_ids, settings=settings, seed=request.seed
            )
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.INVALID_PLAYERS)
        return self._session_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)
        return self._session_response(session)

    def submit_action(
        self, session_id: str, request: ActionRequest
    ) -> ActionResponse | ErrorResponse:
        """
        Apply a player action.

        Engine rejections are not errors: they come back with accepted=False.
        """
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)

        first_new = len(session.events)
        action = Action.from_dict(request.model_dump(mode="json", exclude={"player_id"}))
        result = session.act(request.player_id, action)

        if not result.success:
            return ActionResponse(
                accepted=False,
                status=SessionStatus(session.state.value),
                error=result.error,
                error_code=ErrorCode(result.error_code.value) if result.error_code else None,
            )

        return ActionResponse(
            accepted=True,
            status=SessionStatus(session.state.value),
            state=_state_info(result.state),
            defeat=result.defeat,
            new_events=_event_infos(session, first_new),
        )

    def get_events(self, session_id: str, since: int = 0) -> EventsResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)
        return EventsResponse(
            session_id=session_id,
            events=_event_infos(session, since),
            next_index=len(session.events),
        )

    def end_session(self, session_id: str) -> EndSessionResponse | ErrorResponse:
        if not self.session_manager.end_session(session_id):
            return _not_found(session_id)
        return EndSessionResponse(success=True, session_id=session_id)

    def _session_response(self, session: Session) -> SessionResponse:
        situation = session.game.situation
        state = situation.state
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(session.state.value),
            game_name=self.session_manager.definition.game_name,
            state=_state_info(state),
            players=[
                PlayerInfo(
                    player_id=p.player_id,
                    role=p.role,
                    location=p.location,
                    hand=[to_plain(card) for card in p.hand],
                    is_current_turn=p.player_id == state.acting_player(),
                )
                for p in situation.players
            ],
            diseases=[
                DiseaseInfo(
                    name=d.name,
                    cubes_remaining=d.cubes,
                    cubes_on_board=situation.total_cubes_on_board(d.name),
                )
                for d in situation.diseases
            ],
            outbreak_count=situation.outbreak_count,
            max_outbreaks=situation.max_outbreaks,
            infection_rate=situation.infection_rate,
            player_cards_remaining=len(situation.player_cards_draw),
            event_count=len(session.events),
        )


def _state_info(state: TurnState) -> TurnStateInfo:
    return TurnStateInfo.model_validate(to_plain(state))


def _event_infos(session: Session, since: int) -> list[EventInfo]:
    infos = []
    for offset, event in enumerate(session.events.since(since)):
        data = event.to_dict()
        event_type = data.pop("event_type")
        infos.append(EventInfo(index=since + offset, event_type=event_type, data=data))
    return infos


def _not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"Session {session_id} not found",
        error_code=ErrorCode.SESSION_NOT_FOUND,
    )
