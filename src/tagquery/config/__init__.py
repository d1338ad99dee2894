"""Runtime configuration."""

from .runtime import RuntimeSettings, StoreBackend, get_settings

__all__ = ["RuntimeSettings", "StoreBackend", "get_settings"]
