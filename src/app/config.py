"""Application configuration with structured settings groups."""
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# Nested Settings Models
# =============================================================================


class UISettings(BaseModel):
    """
    Server-rendered admin UI settings.

    api_base_url: Where the UI sends its HTTP requests. The UI is a plain API
        consumer, so it may point at this same process or at another deployment.
    """

    enabled: bool = True
    title: str = "Administración — Clientes & Servicios"
    api_base_url: str = "http://localhost:8000"
    request_timeout_seconds: float = 10.0


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: UI__API_BASE_URL=http://api:8000, ALLOWED_ORIGINS=https://a.example,https://b.example
    """

    # Application metadata
    app_name: str = "Clientes & Servicios API"
    app_version: str = "1.0.0"
    environment: str = "production"  # "development" enables /docs and /redoc
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/clientes"
    create_schema_on_startup: bool = True

    # Server (used when started with `python -m src.app.main`)
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS: "*" (or blank) allows any origin, otherwise a comma-separated allow-list
    allowed_origins: str = "*"

    # Nested settings groups
    ui: UISettings = UISettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def docs_enabled(self) -> bool:
        """API docs are only exposed in development."""
        return self.environment.lower() == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
