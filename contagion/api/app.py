"""
FastAPI Application - REST API for game clients.

Endpoints:
    GET    /api/v1/health                        Service health
    GET    /api/v1/board                         Board definition summary
    POST   /api/v1/sessions                      Create game session
    GET    /api/v1/sessions/{id}                 Get session status
    DELETE /api/v1/sessions/{id}                 End session
    POST   /api/v1/sessions/{id}/actions         Submit a player action
    GET    /api/v1/sessions/{id}/events          Read the event log

Run with:
    uvicorn contagion.api.app:create_app --factory

Endpoints are sync functions: FastAPI runs them on its thread pool and the
session lock keeps each game single-threaded.
"""

from typing import Annotated, Optional, Union
import os

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..session import SessionManager
from ..spec_schema import load_definition
from .schemas import (
    ActionRequest,
    ActionResponse,
    BoardResponse,
    CreateSessionRequest,
    EndSessionResponse,
    ErrorCode,
    ErrorResponse,
    EventsResponse,
    HealthResponse,
    SessionResponse,
)
from .service import APIService

# Environment configuration
CONTAGION_ENV = os.getenv("CONTAGION_ENV", "development")
CONTAGION_DEFINITION_PATH = os.getenv("CONTAGION_DEFINITION_PATH", None)
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

_ERROR_STATUS = {
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.INVALID_PLAYERS: 400,
}


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance. When omitted, one is created
            for the bundled world board, or for the board file named by
            CONTAGION_DEFINITION_PATH.

    Returns:
        FastAPI application instance
    """
    if service is None:
        definition = load_definition(CONTAGION_DEFINITION_PATH) if CONTAGION_DEFINITION_PATH else None
        service = APIService(session_manager=SessionManager(definition))
    api_service = service

    app = FastAPI(
        title="Contagion Engine API",
        description="Cooperative outbreak board game engine. "
                    "Every response that changes the game includes the new events.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def make_error_response(response: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=_ERROR_STATUS.get(response.error_code, 400),
            content=response.model_dump(mode="json"),
        )

    @app.get("/api/v1/health", response_model=HealthResponse, tags=["Meta"])
    def health() -> HealthResponse:
        return HealthResponse(
            version=__version__,
            environment=CONTAGION_ENV,
            active_sessions=len(api_service.session_manager.list_active_sessions()),
        )

    @app.get("/api/v1/board", response_model=BoardResponse, tags=["Meta"])
    def get_board() -> BoardResponse:
        """Summary of the board the sessions are played on."""
        return api_service.get_board()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid player list"}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    def create_session(request: CreateSessionRequest) -> Union[SessionResponse, JSONResponse]:
        """Set up a new game; the first listed player acts first."""
        response = api_service.create_session(request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="End a game session",
    )
    def end_session(session_id: str) -> Union[EndSessionResponse, JSONResponse]:
        response = api_service.end_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    # =========================================================================
    # Game Loop Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/actions",
        response_model=ActionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="Submit a player action",
    )
    def submit_action(
        session_id: str, request: ActionRequest
    ) -> Union[ActionResponse, JSONResponse]:
        """
        Apply one action.

        A rejected action (wrong phase or wrong player) returns 200 with
        `accepted=false`; the game is unchanged.
        """
        response = api_service.submit_action(session_id, request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/sessions/{session_id}/events",
        response_model=EventsResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="Read the event log",
    )
    def get_events(
        session_id: str,
        since: Annotated[int, Query(ge=0, description="First event index to return")] = 0,
    ) -> Union[EventsResponse, JSONResponse]:
        response = api_service.get_events(session_id, since)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    return app
