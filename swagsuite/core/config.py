
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "SwagSuite API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    # Artwork uploads (stored on local disk)
    max_upload_size_mb: int = 10
    upload_dir: str = Field(default="uploads", alias="UPLOAD_DIR")

    # Database (Postgres via asyncpg in production or SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./swagsuite_dev.db",
        alias="DATABASE_URL",
    )
    auto_create_tables: bool = Field(
        default=True, alias="AUTO_CREATE_TABLES",
    )  # Disable once Alembic migrations own the schema

    # Authentication is handled upstream; this user acts when no X-User-Id is sent
    default_user_id: str = Field(default="dev-user", alias="DEFAULT_USER_ID")

    # S&S Activewear supplier API
    ss_activewear_account_number: str | None = Field(
        default=None, alias="SS_ACTIVEWEAR_ACCOUNT_NUMBER",
    )
    ss_activewear_api_key: str | None = Field(default=None, alias="SS_ACTIVEWEAR_API_KEY")
    ss_activewear_base_url: str = Field(
        default="https://api.ssactivewear.com/V2", alias="SS_ACTIVEWEAR_BASE_URL",
    )
    ss_activewear_timeout: int = Field(default=30, alias="SS_ACTIVEWEAR_TIMEOUT")

    # OpenAI (AI report summaries)
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4.1-mini", alias="OPENAI_MODEL")
    openai_max_tokens: int = Field(default=800, alias="OPENAI_MAX_TOKENS")
    openai_timeout: int = Field(default=60, alias="OPENAI_TIMEOUT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def ai_enabled(self) -> bool:
        """AI features are available only when an OpenAI key is configured."""
        return bool(self.openai_api_key)

    @property
    def ss_activewear_enabled(self) -> bool:
        return bool(self.ss_activewear_account_number and self.ss_activewear_api_key)

settings = Settings()
