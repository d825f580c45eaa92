from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider: str = "gemini"
    analysis_timeout_seconds: float | None = None
    analysis_prompt_path: str | None = None

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_base_url: str | None = None

    storage_engine: str = "supabase"
    storage_url: str = ""
    storage_api_key: str = ""
    storage_bucket: str = "materials"
    storage_local_root: str = "./storage"
    storage_timeout_seconds: float | None = None

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "materials"
    db_username: str = "materials"
    db_password: str = "secret"
    records_table: str = "material_analysis"
