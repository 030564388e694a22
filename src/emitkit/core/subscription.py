"""Unsubscribe handles returned by ``Emitter.on``."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable

from .types import Listener

if TYPE_CHECKING:
    from .emitter import Emitter


class Registration:
    """One ``on`` call's entry in an emitter's listener sequence.

    Compared by identity, so registering the same callable twice yields two
    entries that are removed independently.
    """

    __slots__ = ("callback",)

    def __init__(self, callback: Listener) -> None:
        self.callback = callback

    def __repr__(self) -> str:
        return f"Registration({self.callback!r})"


class Subscription:
    """Callable handle that removes exactly one registration.

    Calling it more than once, or after the registration is already gone, does
    nothing.
    """

    __slots__ = ("_emitter", "_name", "_registration")

    def __init__(self, emitter: "Emitter[Any]", name: Hashable, registration: Registration) -> None:
        self._emitter: "Emitter[Any] | None" = emitter
        self._name = name
        self._registration = registration

    @property
    def name(self) -> Hashable:
        return self._name

    @property
    def callback(self) -> Listener:
        return self._registration.callback

    @property
    def active(self) -> bool:
        """Whether this handle has not been used yet."""
        return self._emitter is not None

    def __call__(self) -> None:
        emitter = self._emitter
        if emitter is None:
            return
        # Drop the emitter reference so a spent handle keeps nothing alive.
        self._emitter = None
        emitter._off(self._name, self._registration)

    unsubscribe = __call__

    def __repr__(self) -> str:
        state = "active" if self.active else "spent"
        return f"<Subscription name={self._name!r} {state}>"
