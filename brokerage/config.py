"""
Configuration management using Pydantic settings.
Handles database URL, session secrets, upload limits and company branding.
"""

from pydantic import field_validator, ValidationInfo
from pydantic_settings import BaseSettings
from typing import List, Optional
from functools import lru_cache
import os


DEFAULT_SESSION_SECRET = "change-me-session-secret"


class Settings(BaseSettings):
    """Application settings loaded from the environment and .env."""

    # Application configuration
    app_name: str = "Brokerage Site API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False

    # Database configuration
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/brokerage"

    # Admin session configuration
    session_secret_key: str = DEFAULT_SESSION_SECRET
    session_cookie_name: str = "brokerage_session"
    session_max_age: int = 7 * 24 * 60 * 60  # one week
    session_https_only: bool = False

    # File upload configuration
    upload_dir: str = "./uploads"
    upload_url_prefix: str = "/uploads"
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    max_photo_size: int = 5 * 1024 * 1024  # 5MB
    allowed_file_types: List[str] = ["image/jpeg", "image/png", "image/webp"]
    thumbnail_size: int = 400

    # API configuration
    api_prefix: str = "/api"
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]

    # Pagination defaults
    default_page_size: int = 24
    max_page_size: int = 100

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # Company branding used by the marketing generator
    company_name: str = "Qanzak Global Properties"
    company_tagline: str = "Your Trusted Real Estate Partner in Islamabad & Lahore"
    company_phone: str = "+92 331 1479800"
    company_email: str = "info@qanzakglobal.com"
    company_website: str = "www.qanzakglobal.com"
    company_address: str = "House 66, F-11/1, Islamabad, Pakistan"
    brand_primary_color: str = "#1e40af"
    brand_accent_color: str = "#d4af37"
    brand_dark_color: str = "#0f172a"
    marketing_font_path: Optional[str] = None
    marketing_bold_font_path: Optional[str] = None

    # Bootstrap admin used by the CLI
    admin_email: Optional[str] = None
    admin_password: Optional[str] = None
    admin_name: str = "Site Administrator"

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v):
        """Ensure an async driver is used."""
        if not v:
            raise ValueError("DATABASE_URL is required")
        if v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql://", 1)
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @field_validator("session_secret_key")
    @classmethod
    def validate_session_secret_key(cls, v, info: ValidationInfo):
        """Reject the placeholder secret or a short one outside development."""
        environment = info.data.get("environment", "development")
        if environment in ("staging", "production"):
            if v == DEFAULT_SESSION_SECRET or len(v) < 32:
                raise ValueError("SESSION_SECRET_KEY must be set to at least 32 characters")
        return v

    @field_validator("upload_dir", mode="before")
    @classmethod
    def create_upload_directory(cls, v):
        """Ensure the upload directory exists."""
        if v and not os.path.exists(v):
            os.makedirs(v, exist_ok=True)
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def company_slug(self) -> str:
        """First word of the company name, used in generated filenames."""
        first_word = self.company_name.split()[0] if self.company_name.strip() else "brokerage"
        return "".join(ch for ch in first_word.lower() if ch.isalnum()) or "brokerage"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()


# Global settings instance
settings = get_settings()
