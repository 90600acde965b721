"""
Session Manager - Creates and manages game sessions.

A session wraps one Game together with the event log it writes to.
Sessions live in memory only; ending a session discards the game.

The engine itself is single-threaded. Each session carries a lock so that
callers serving several requests at once (the API runs sync endpoints on a
thread pool) apply actions one at a time.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import threading
import time
import uuid

from ..engine_core import Action, ActionResult, EventLog, Game, SeededRandomness
from ..spec_schema import GameDefinition, GameSettings

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    LOST = "lost"  # Game reached a defeat state
    ENDED = "ended"  # Ended by the caller


@dataclass
class Session:
    """
    An in-memory game session.

    Contains:
    - The running Game
    - Its event log
    """
    session_id: str
    game: Game
    events: EventLog
    created_at: float
    seed: int | None = None
    state: SessionState = SessionState.ACTIVE
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def act(self, player_id: str, action: Action) -> ActionResult:
        """Apply an action under the session lock."""
        with self.lock:
            result = self.game.act(player_id, action)
            if result.success and result.defeat:
                self.state = SessionState.LOST
            return result


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create and set up games
    - Track active sessions
    - Clean up ended sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, definition: GameDefinition | None = None):
        if definition is None:
            from ..games.world import create_world_definition
            definition = create_world_definition()
        self.definition = definition
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        player_ids: list[str],
        settings: GameSettings | None = None,
        seed: int | None = None,
    ) -> Session:
        """
        Create a session and run game setup.

        Args:
            player_ids: Players in turn order
            settings: Settings overlay (defaults to GameSettings())
            seed: Seed for the session's randomness

        Returns:
            New Session, first player to act
        """
        if not self.definition.min_players <= len(player_ids) <= self.definition.max_players:
            raise ValueError(
                f"{self.definition.game_name} supports "
                f"{self.definition.min_players}-{self.definition.max_players} players"
            )
        if len(set(player_ids)) != len(player_ids):
            raise ValueError("Player ids must be unique")

        session_id = str(uuid.uuid4())
        events = EventLog()
        game = Game(
            definition=self.definition,
            settings=settings or GameSettings(),
            players=player_ids,
            sink=events,
            rng=SeededRandomness(seed),
        )
        game.setup()

        session = Session(
            session_id=session_id,
            game=game,
            events=events,
            created_at=time.time(),
            seed=seed,
        )
        if game.state.terminal:
            session.state = SessionState.LOST

        self._sessions[session_id] = session
        logger.info("Created session %s for %s", session_id, ", ".join(player_ids))
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """
        End a session and drop it from memory.

        Returns False if the session did not exist.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.state = SessionState.ENDED
        logger.info("Ended session %s", session_id)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions whose game is still running."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Remove finished sessions older than max_age.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = [
            sid for sid, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds and not session.is_active()
        ]
        for session_id in to_remove:
            self.end_session(session_id)
        return len(to_remove)
