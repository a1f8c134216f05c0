"""
Configuration Management for Hogar

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Default seed amounts live here, not in the rules.
The split rules themselves are fixed at design time and are NOT
configurable; only the amounts a new period starts with are.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HouseholdSettings(BaseSettings):
    """Seed values used when a new monthly period is created."""
    
    model_config = SettingsConfigDict(
        env_prefix="HOGAR_",
        extra="ignore"
    )
    
    fund_goal: int = Field(
        default=350000,
        ge=0,
        description="Default monthly goal for the support fund"
    )
    rent_amount: int = Field(
        default=900000,
        ge=0,
        description="Rent expense seeded into every new period"
    )
    garage_amount: int = Field(
        default=180000,
        ge=0,
        description="Garage expense seeded into every new period"
    )
    rent_description: str = Field(
        default="Arriendo mensual",
    )
    garage_description: str = Field(
        default="Garaje mensual",
    )


class PlannerSettings(BaseSettings):
    """Debt planner configuration."""
    
    model_config = SettingsConfigDict(
        env_prefix="PLANNER_",
        extra="ignore"
    )
    
    default_monthly_budget: int = Field(
        default=0,
        ge=0,
        description="Budget used when none is configured (0 = not configured)"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept stdlib logging level names."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return v.upper()


class Settings(BaseSettings):
    """
    Root settings container.
    
    Aggregates all sub-settings for easy access.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    @property
    def household(self) -> HouseholdSettings:
        return HouseholdSettings()
    
    @property
    def planner(self) -> PlannerSettings:
        return PlannerSettings()
    
    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.
    
    Returns a dict of {setting_name: is_valid}, with an extra
    `<name>_error` entry describing each failure.
    """
    results = {}
    settings = get_settings()
    
    for name in ("household", "planner", "app"):
        try:
            _ = getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)
    
    return results
