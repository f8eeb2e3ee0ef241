"""Application settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    vehicle_repository: str = "postgres"  # postgres or in_memory
    database_url: str = ""  # Required when vehicle_repository=postgres
    chassis_code_length: int = Field(default=17, ge=1, le=32)
    price_required_on_create: bool = True
    price_required_on_update: bool = True
    cors_allowed_origins: list[str] = ["http://localhost:3000"]
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
