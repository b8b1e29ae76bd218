"""Configuration package."""

from budget_tracker.config.settings import (
    AppSettings,
    DisplaySettings,
    LedgerSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "DisplaySettings",
    "LedgerSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
