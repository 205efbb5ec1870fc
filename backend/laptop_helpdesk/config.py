"""Application configuration management using Pydantic Settings."""
from functools import lru_cache
from typing import Optional
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the directory where config.py is located
BASE_DIR = Path(__file__).resolve().parent

DEFAULT_CATALOG_FILE = BASE_DIR / "data" / "laptops.json"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = "Laptop Helpdesk Assistant"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", pattern="^(development|staging|production)$")

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Catalog
    catalog_file: Optional[Path] = Field(
        default=None, description="JSON catalog to load; the bundled reference catalog when unset"
    )

    # Search & recommendations
    search_default_limit: int = Field(default=5, ge=0)
    recommendation_report_limit: int = Field(default=3, ge=1)

    # Order intake
    delivery_estimate: str = "Within 5-7 business days after approval"
    order_id_prefix: str = "PO"

    # Logging
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_format: str = Field(default="json", pattern="^(json|text)$")

    model_config = SettingsConfigDict(
        env_file=BASE_DIR.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @property
    def resolved_catalog_file(self) -> Path:
        """Catalog path to load, falling back to the bundled reference catalog."""
        return self.catalog_file or DEFAULT_CATALOG_FILE


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
