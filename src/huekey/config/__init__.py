"""Configuration package."""

from .settings import HueKeySettings, get_settings, reset_settings

__all__ = ["HueKeySettings", "get_settings", "reset_settings"]
