"""Events published by a game session for presentation layers to redraw from."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BoardChanged:
    position: tuple
    cell: object


@dataclass(frozen=True)
class TurnChanged:
    player: object


@dataclass(frozen=True)
class GameConcluded:
    outcome: object


@dataclass(frozen=True)
class PhaseChanged:
    phase: object


@dataclass(frozen=True)
class AutomatedMoveScheduled:
    player: object
    delay: float


class EventBus:
    """Synchronous publish/subscribe; handlers run in subscription order."""

    def __init__(self):
        self._handlers = []

    def subscribe(self, handler, event_type=None):
        """Register handler for every event, or only for instances of event_type."""
        entry = (handler, event_type)
        self._handlers.append(entry)

        def unsubscribe():
            if entry in self._handlers:
                self._handlers.remove(entry)

        return unsubscribe

    def publish(self, event):
        for handler, event_type in list(self._handlers):
            if event_type is None or isinstance(event, event_type):
                handler(event)
