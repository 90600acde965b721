"""
Events - Everything the engine does is reported to an event sink.

The log is ordered and append-only. Payloads are deep copies taken at
emission time, so sinks can keep them without seeing later mutations.
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Protocol


class EventType(Enum):
    """Event taxonomy."""
    INITIAL_SITUATION = "initial_situation"
    STATE_CHANGE = "state_change"
    DRAW_PLAYER_CARD = "draw_player_card"
    INFECTION_RATE_INCREASED = "infection_rate_increased"
    DRAW_AND_DISCARD_INFECTION_CARD = "draw_and_discard_infection_card"
    OUTBREAK = "outbreak"
    INFECT = "infect"
    INFECTION_CARDS_RESTACK = "infection_cards_restack"


@dataclass
class Event:
    """A single log entry."""
    event_type: EventType
    payload: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form: `{"event_type": ..., **payload}`."""
        data = {"event_type": self.event_type.value}
        for key, value in self.payload.items():
            data[key] = to_plain(value)
        return data


class EventSink(Protocol):
    """Anything that accepts events."""

    def emit(self, event: Event) -> None:
        ...


class EventLog:
    """
    In-memory sink that records every event.

    Usage:
        log = EventLog()
        game = Game(definition, settings, ["a", "b"], log, SeededRandomness(42))
        game.setup()
        outbreaks = log.of_type(EventType.OUTBREAK)
    """

    def __init__(self):
        self.events: list[Event] = []

    def emit(self, event: Event) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> list[Event]:
        return [e for e in self.events if e.event_type == event_type]

    def since(self, index: int) -> list[Event]:
        return self.events[index:]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)


def make_event(event_type: EventType, **payload: Any) -> Event:
    """Build an event with a deep-copied payload."""
    return Event(event_type=event_type, payload=deepcopy(payload))


def emit_state_change(sink: EventSink, state: Any) -> None:
    sink.emit(make_event(EventType.STATE_CHANGE, state=state))


def to_plain(value: Any) -> Any:
    """Convert dataclasses, enums and containers to JSON-compatible data."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        result = {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
        if hasattr(value, "terminal"):
            result["terminal"] = value.terminal
        return result
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value
