"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from pathlib import Path

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_JWT_SECRET = "development-secret-key-change-in-production"

DEFAULT_AI_SYSTEM_PROMPT = (
    "You are an assistant that writes professional, billable time entry descriptions for client invoices.\n"
    "Summarize the work in 2-3 concise sentences, highlight deliverables, mention tools or documents "
    "reviewed when relevant, and avoid first-person language."
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_title: str = Field(default="Hourbook")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Database
    database_url: str = Field(default=f"sqlite:///{BASE_DIR / 'hourbook.db'}", description="SQLAlchemy database URL")
    database_echo: bool = Field(default=False)

    # JWT Configuration
    jwt_secret_key: str = Field(default=DEFAULT_JWT_SECRET, description="JWT secret key")
    jwt_algorithm: str = Field(default="HS256")
    jwt_access_token_expire_minutes: int = Field(default=30)

    # CORS
    cors_origins: str | List[str] = Field(
        default="http://localhost:3000,http://localhost:5173"
    )
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(default=["*"])
    cors_allow_headers: List[str] = Field(default=["*"])

    # Sentry (Optional)
    sentry_dsn: Optional[str] = Field(default=None)
    sentry_traces_sample_rate: float = Field(default=0.1)

    # Invoicing
    invoice_number_prefix: str = Field(default="INV")
    invoice_payment_term_days: int = Field(default=30)
    invoice_number_max_attempts: int = Field(default=3)

    # AI description assistant
    ai_enabled: bool = Field(default=False)
    ai_provider: str = Field(default="OpenAI")
    ai_base_url: str = Field(default="https://api.openai.com/")
    ai_endpoint: str = Field(default="v1/chat/completions")
    ai_model: str = Field(default="gpt-4o-mini")
    ai_api_key: Optional[str] = Field(default=None)
    ai_api_version: Optional[str] = Field(default=None)
    ai_authentication_scheme: str = Field(default="Bearer", description="'Bearer' or 'api-key'")
    ai_temperature: float = Field(default=0.3, ge=0, le=2)
    ai_max_tokens: int = Field(default=300, gt=0)
    ai_system_prompt: Optional[str] = Field(default=None)
    ai_timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return ["http://localhost:3000", "http://localhost:5173"]
            return [origin.strip() for origin in v.split(",")]
        elif v is None:
            return ["http://localhost:3000", "http://localhost:5173"]
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"

    @property
    def ai_effective_system_prompt(self) -> str:
        """System prompt sent to the AI provider, falling back to the built-in one."""
        if self.ai_system_prompt and self.ai_system_prompt.strip():
            return self.ai_system_prompt
        return DEFAULT_AI_SYSTEM_PROMPT

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        missing_vars = []
        if not self.jwt_secret_key or self.jwt_secret_key == DEFAULT_JWT_SECRET:
            missing_vars.append("JWT_SECRET_KEY")
        if not self.database_url:
            missing_vars.append("DATABASE_URL")

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings


# Create a global settings instance
settings = get_settings()
