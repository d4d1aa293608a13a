from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Sistema de Gestión y Control de Accesos API"
    app_version: str = "1.0.0"
    app_description: str = (
        "API administrativa para la gestión de aplicaciones, secciones, "
        "acciones y tipos de usuario."
    )
    app_env: str = "development"

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["*"]

    # Relational database
    database_url: str = "postgresql://localhost:5432/sgca"
    database_user: str = ""
    database_password: str = ""
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_echo: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine, SQL statements
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_services: str = "INFO"         # catalog services (mutations, lookups)

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def resolved_database_url(self) -> str:
        """Database URL with DATABASE_USER / DATABASE_PASSWORD merged in when set."""
        if not self.database_user and not self.database_password:
            return self.database_url
        url = make_url(self.database_url)
        if self.database_user:
            url = url.set(username=self.database_user)
        if self.database_password:
            url = url.set(password=self.database_password)
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
