"""Core configuration and factory components."""

from formsynth.core.config import Settings, get_settings
from formsynth.core.factory import ComponentFactory, get_factory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
    "get_factory",
]
