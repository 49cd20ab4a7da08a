"""Configuration helpers for the gateway relay."""

from .settings import get_settings, Settings

__all__ = ["get_settings", "Settings"]
