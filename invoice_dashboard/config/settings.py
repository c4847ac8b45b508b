from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        protected_namespaces=("settings_",),
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "invoices"
    db_username: str = "invoices"
    db_password: str = "secret"
    db_pool_max_size: int = 10

    model_provider: str = "gemini"
    model_api_key: str = ""
    model_base_url: str | None = None
    model_timeout_seconds: int = 60
    model_supports_attachments: bool | None = None

    extraction_model_name: str = "gemini-2.5-flash-lite"
    extraction_temperature: float = 0.0
    analyst_model_name: str = "gemini-2.5-flash"
    analyst_temperature: float = 0.0
    analyst_max_records: int = 1000

    recent_invoices_limit: int = 10
    pdf_engine: str = "pdfplumber"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
