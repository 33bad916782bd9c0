"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-calculator"
    log_level: str = "INFO"

    # Display
    currency: str = "GHS"

    # Calculator defaults
    default_annual_rate_percent: float = 22.0
    payment_variance: float = 0.05  # +/- fraction of the nominal payment


settings = Settings()
