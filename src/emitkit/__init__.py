"""emitkit package initialization."""
from __future__ import annotations

# Importing the package never touches logging configuration. Applications
# call `emitkit.logging.configure_logging()` during startup if they want
# emitkit's JSON output.

from .config.settings import EmitterConfig, load_config_from_env
from .core.emitter import Emitter
from .core.reporting import log_listener_failure
from .core.subscription import Subscription

__version__ = "0.1.0"

__all__ = [
    "Emitter",
    "EmitterConfig",
    "Subscription",
    "load_config_from_env",
    "log_listener_failure",
]
