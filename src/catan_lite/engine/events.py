"""Event sinks.

The engine reports what happened through ``LogEvent`` values pushed into a
sink. Sinks only observe; nothing they do feeds back into game state.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Protocol

from catan_lite.logging_config import get_logger

from .types import EventKind, LogEvent


class EventSink(Protocol):
    def emit(self, event: LogEvent) -> None: ...


class NullSink:
    def emit(self, event: LogEvent) -> None:
        return None


class EventLog:
    """In-memory event history, oldest first."""

    def __init__(self) -> None:
        self._events: List[LogEvent] = []

    def emit(self, event: LogEvent) -> None:
        self._events.append(event)

    def __iter__(self) -> Iterator[LogEvent]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def texts(self) -> List[str]:
        return [event.text for event in self._events]

    def clear(self) -> None:
        self._events.clear()


class LoggingSink:
    """Forward events to structlog."""

    def __init__(self, name: str = "catan_lite.events") -> None:
        self._log = get_logger(name)

    def emit(self, event: LogEvent) -> None:
        self._log.info("game_event", text=event.text, kind=event.kind.value)


class FanoutSink:
    def __init__(self, sinks: Iterable[EventSink]) -> None:
        self._sinks = list(sinks)

    def emit(self, event: LogEvent) -> None:
        for sink in self._sinks:
            sink.emit(event)


def system_event(text: str) -> LogEvent:
    return LogEvent(text=text, kind=EventKind.SYSTEM)


def player_event(text: str) -> LogEvent:
    return LogEvent(text=text, kind=EventKind.PLAYER)
