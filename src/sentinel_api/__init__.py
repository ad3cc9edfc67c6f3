"""Sentinel API: persistence for service accounts and project scopes."""

from .settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
