from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "heuristic"
    max_upload_bytes: int = 10 * 1024 * 1024

    api_host: str = "0.0.0.0"
    api_port: int = 8000
