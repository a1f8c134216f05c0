"""Configuration package."""

from hogar.config.settings import (
    AppSettings,
    HouseholdSettings,
    PlannerSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "HouseholdSettings",
    "PlannerSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
