"""Core emitter modules."""

from .emitter import Emitter
from .subscription import Subscription

__all__ = ["Emitter", "Subscription"]
