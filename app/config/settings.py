from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 8080

    # The one credential for the extraction service (env API_KEY).
    api_key: str = ""

    extraction_provider: str = "gemini"
    extraction_model_name: str = ""
    extraction_base_url: str = ""
    extraction_timeout_seconds: int = 60
    extraction_temperature: float = 0.0

    max_html_chars: int = 15000
    copy_indicator_seconds: float = 2.0
