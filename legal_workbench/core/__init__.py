"""Core configuration and ontology types."""

from .config import Settings, get_settings, configure_logging, DATA_ROOT

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "DATA_ROOT",
]
