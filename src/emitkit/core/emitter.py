"""Typed in-process event emitter with failure-isolated async fan-out."""
from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from typing import Any, Awaitable, Dict, Generic, Hashable, List, Tuple

from ..config.settings import EmitterConfig
from .reporting import log_listener_failure, make_failure_reporter
from .subscription import Registration, Subscription
from .types import EventMapT, FailureReporter, Listener

logger = logging.getLogger(__name__)


class Emitter(Generic[EventMapT]):
    """Publish/subscribe hub keyed by event name.

    ``on`` appends a listener and returns a :class:`Subscription`; calling the
    subscription is the only way to remove it. ``emit`` calls every listener
    registered at the moment of the call, in registration order, then waits for
    all of them to settle. A listener that raises, synchronously or from its
    awaitable, is handed to the failure reporter and never affects the other
    listeners or the caller of ``emit``.

    The type parameter documents which payload goes with which event name and
    is not checked at runtime::

        class Events(TypedDict):
            saved: SaveResult

        emitter: Emitter[Events] = Emitter()
    """

    def __init__(self, reporter: FailureReporter | None = None) -> None:
        self._listeners: Dict[Hashable, List[Registration]] = {}
        self._lock = threading.Lock()
        self._report = reporter or log_listener_failure

    @classmethod
    def from_config(cls, config: EmitterConfig) -> "Emitter[Any]":
        return cls(reporter=make_failure_reporter(config))

    def on(self, name: Hashable, callback: Listener) -> Subscription:
        if not callable(callback):
            raise TypeError(
                f"Listener for event {name!r} must be callable, got {type(callback).__name__}"
            )
        registration = Registration(callback)
        with self._lock:
            self._listeners.setdefault(name, []).append(registration)
        logger.debug("Registered listener for event %r", name)
        return Subscription(self, name, registration)

    def _off(self, name: Hashable, registration: Registration) -> None:
        with self._lock:
            entries = self._listeners.get(name)
            if not entries:
                return
            remaining = [entry for entry in entries if entry is not registration]
            if len(remaining) == len(entries):
                return
            # Replace rather than mutate so snapshots held by running dispatches stay intact.
            if remaining:
                self._listeners[name] = remaining
            else:
                del self._listeners[name]
        logger.debug("Removed listener for event %r", name)

    async def emit(self, name: Hashable, payload: Any = None) -> None:
        with self._lock:
            entries: Tuple[Registration, ...] = tuple(self._listeners.get(name, ()))
        if not entries:
            return

        logger.debug("Dispatching event %r to %d listener(s)", name, len(entries))
        loop = asyncio.get_running_loop()
        pending: List[asyncio.Task[None]] = []
        for entry in entries:
            try:
                result = entry.callback(payload)
            except (Exception, asyncio.CancelledError) as exc:
                self._report_failure(name, exc)
                continue
            if inspect.isawaitable(result):
                # Eager start runs the listener up to its first suspension now, so
                # async and sync listeners begin in registration order.
                pending.append(asyncio.eager_task_factory(loop, self._settle(name, result)))

        if not pending:
            return
        # A listener ending in CancelledError comes back as a result here; cancelling
        # the caller of emit still cancels the gather and propagates.
        outcomes = await asyncio.gather(*pending, return_exceptions=True)
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                self._report_failure(name, outcome)

    async def _settle(self, name: Hashable, outcome: Awaitable[Any]) -> None:
        try:
            await outcome
        except Exception as exc:
            self._report_failure(name, exc)

    def _report_failure(self, name: Hashable, error: BaseException) -> None:
        try:
            self._report(name, error)
        except Exception:
            logger.exception("Failure reporter raised while handling event %r", name)

    def has_listeners(self, name: Hashable) -> bool:
        with self._lock:
            return name in self._listeners

    def listener_count(self, name: Hashable) -> int:
        with self._lock:
            return len(self._listeners.get(name, ()))

    def event_names(self) -> Tuple[Hashable, ...]:
        """Names that currently have at least one listener, oldest first."""
        with self._lock:
            return tuple(self._listeners)
