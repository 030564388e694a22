"""Type aliases shared by the emitter modules."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Hashable, Mapping, Optional, TypeVar

EventMap = Mapping[str, Any]
EventMapT = TypeVar("EventMapT", bound=EventMap)

Listener = Callable[[Any], Optional[Awaitable[None]]]
FailureReporter = Callable[[Hashable, BaseException], None]
