"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Audit settings loaded from HOME_AUDIT_* environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HOME_AUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Utility rates used when a home has no bills
    default_electricity_rate: float = 0.16  # $/kWh
    default_gas_rate: float = 1.20          # $/therm

    # Floor area assumed when neither a total nor any room size is recorded
    default_home_sq_ft: float = 1500.0

    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Load application settings from the environment."""
    return Settings()
