from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000

    analysis_provider: str = "gemini"

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-pro"
    gemini_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60
    openai_base_url: str = ""

    image_fetch_timeout_seconds: int = 10

    report_output_mode: str = "memory"
    report_output_dir: str = "output"
