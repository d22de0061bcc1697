"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from EVENTDESK_* environment variables."""

    # Application
    app_name: str = "EventDesk"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Simulated backend latency, in seconds
    create_delay: float = Field(default=1.0, ge=0.0)
    update_delay: float = Field(default=1.0, ge=0.0)
    delete_delay: float = Field(default=1.0, ge=0.0)
    status_delay: float = Field(default=0.8, ge=0.0)
    featured_delay: float = Field(default=0.5, ge=0.0)
    list_delay: float = Field(default=0.8, ge=0.0)

    # Retry policy for transient backend failures
    retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts per operation, including the first",
    )
    retry_wait_min: float = Field(default=0.5, ge=0.0)
    retry_wait_max: float = Field(default=8.0, ge=0.0)

    # Seed data
    seed_file: Path | None = Field(
        default=None,
        description="JSON list of event records replacing the built-in samples",
    )

    model_config = {
        "env_prefix": "EVENTDESK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def operation_delays(self) -> dict[str, float]:
        """Latency per backend operation name."""
        return {
            "create": self.create_delay,
            "update": self.update_delay,
            "delete": self.delete_delay,
            "change_status": self.status_delay,
            "toggle_featured": self.featured_delay,
            "list": self.list_delay,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
