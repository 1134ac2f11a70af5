"""In-memory voting event log.

In-memory implementation of VotingEventEmitterProtocol. It keeps every
emitted event in order and notifies subscribed observers synchronously,
which is all the voting process needs from its event channel when no
external bus is wired in.

Developer Golden Rules:
1. Sequence numbers start at 1 and never repeat
2. Observers run in subscription order, inside emit()
3. An observer failure is logged and never reaches the emitting caller
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime, timezone

from structlog import get_logger

from ballot_workflow.application.ports.voting_event_emitter import (
    RecordedVotingEvent,
    VotingEventEmitterProtocol,
)
from ballot_workflow.domain.events.voting import VotingEventPayload

logger = get_logger()

VotingEventObserver = Callable[[RecordedVotingEvent], None]


class InMemoryVotingEventLog(VotingEventEmitterProtocol):
    """In-memory, append-only log of voting events.

    Attributes:
        _events: Recorded events in emission order.
        _observers: Subscribed callbacks in subscription order.
        _last_sequence: Sequence of the most recent event, kept across clear().
        _lock: Guards sequence assignment and the observer list.
    """

    def __init__(self) -> None:
        """Initialize an empty log."""
        self._events: list[RecordedVotingEvent] = []
        self._observers: list[VotingEventObserver] = []
        self._last_sequence = 0
        self._lock = threading.RLock()

    def emit(self, event_type: str, payload: VotingEventPayload) -> None:
        """Record an event and notify observers.

        Observer failures are logged, not raised; the event stays recorded.

        Args:
            event_type: Event type constant.
            payload: Immutable event payload.
        """
        with self._lock:
            event = RecordedVotingEvent(
                sequence=self._last_sequence + 1,
                event_type=event_type,
                payload=payload,
                recorded_at=datetime.now(timezone.utc),
            )
            self._events.append(event)
            self._last_sequence = event.sequence
            observers = list(self._observers)

            logger.debug(
                "voting_event_recorded",
                sequence=event.sequence,
                event_type=event_type,
                observer_count=len(observers),
            )
            for observer in observers:
                self._notify(observer, event)

    def _notify(
        self, observer: VotingEventObserver, event: RecordedVotingEvent
    ) -> None:
        """Deliver one event to one observer.

        The event is already recorded and the emitting operation already
        applied, so a failing observer is logged and the remaining
        observers are still notified.
        """
        try:
            observer(event)
        except Exception:
            logger.exception(
                "voting_event_observer_failed",
                sequence=event.sequence,
                event_type=event.event_type,
                observer=getattr(observer, "__qualname__", repr(observer)),
            )

    def subscribe(self, observer: VotingEventObserver) -> Callable[[], None]:
        """Register an observer for future events.

        Args:
            observer: Callback receiving each RecordedVotingEvent.

        Returns:
            Callable that removes the observer again.
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    @property
    def events(self) -> tuple[RecordedVotingEvent, ...]:
        """All recorded events in emission order."""
        with self._lock:
            return tuple(self._events)

    def events_of_type(self, event_type: str) -> list[RecordedVotingEvent]:
        """Get recorded events of one type, in emission order."""
        with self._lock:
            return [e for e in self._events if e.event_type == event_type]

    def clear(self) -> None:
        """Clear recorded events (for testing). Observers stay subscribed."""
        with self._lock:
            self._events.clear()
