"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str  # required; startup aborts without TJ_DATABASE_URL
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # Calendar
    timezone: str = "Asia/Ho_Chi_Minh"
    recent_sessions_limit: int = 100

    model_config = {"env_prefix": "TJ_", "env_file": ".env"}


settings = Settings()
