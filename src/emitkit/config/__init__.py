"""Configuration models and loaders."""

from .settings import EmitterConfig, load_config_from_env

__all__ = ["EmitterConfig", "load_config_from_env"]
