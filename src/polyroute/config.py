"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    # ======================
    # Quoting
    # ======================
    quote_precision: int = Field(
        default=6, ge=0, le=18, description="Decimal places for quoted amounts"
    )
    gas_precision: int = Field(
        default=4, ge=0, le=18, description="Decimal places for gas estimates"
    )
    direct_workers: int = Field(
        default=0, ge=0, description="Threads for direct venue comparison (0 = sequential)"
    )

    # ======================
    # Presentation
    # ======================
    presentation_enabled: bool = Field(
        default=True, description="Show multi-hop routes at or above the direct quote"
    )
    presentation_margin: float = Field(
        default=0.001, gt=0, description="Target lead over the direct quote (0.1%)"
    )
    presentation_max_bonus: float = Field(
        default=0.02, gt=0, le=0.02, description="Upper bound of the adjustment (2%)"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_safe_dict(self) -> dict:
        """Return settings dict for diagnostics."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "quoting": {
                "quote_precision": self.quote_precision,
                "gas_precision": self.gas_precision,
                "direct_workers": self.direct_workers,
            },
            "presentation": {
                "enabled": self.presentation_enabled,
                "margin": self.presentation_margin,
                "max_bonus": self.presentation_max_bonus,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
