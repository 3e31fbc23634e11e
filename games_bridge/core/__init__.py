"""Core modules: configuration, logging and shared state."""

from .config import SERVICE_NAME, Settings, get_settings
from .logging import setup_logging
from .state import AppState

__all__ = [
    # Config
    "Settings",
    "SERVICE_NAME",
    "get_settings",
    # State
    "AppState",
    # Logging
    "setup_logging",
]
