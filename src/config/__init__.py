"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ========== Constants ==========

class CatalogBackend(str):
    """Storage backends available for the exam and question catalogs."""
    MEMORY = "memory"       # Seeded in-process lists
    DATABASE = "database"   # SQLAlchemy-backed tables


VALID_CATALOG_BACKENDS = [CatalogBackend.MEMORY, CatalogBackend.DATABASE]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="exam-composer", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")

    # ========== Logging ==========
    log_level: str = Field(default="INFO", description="Root logging level")

    # ========== Catalogs ==========
    catalog_backend: str = Field(
        default=CatalogBackend.MEMORY,
        description="Catalog implementation to wire (memory or database)"
    )
    seed_sample_data: bool = Field(
        default=True,
        description="Load the sample exams and questions into the database backend"
    )

    # ========== Database ==========
    database_url: str = Field(
        default="sqlite+pysqlite:///:memory:",
        description="SQLAlchemy connection URL (sync driver)"
    )
    db_pool_size: int = Field(default=5, description="Database connection pool size", ge=1)
    db_max_overflow: int = Field(default=10, description="Max overflow connections", ge=0)
    db_echo: bool = Field(default=False, description="Echo SQL statements")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is one of allowed values."""
        allowed = {"development", "staging", "production", "test"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any standard logging level name, case-insensitively."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("catalog_backend")
    @classmethod
    def validate_catalog_backend(cls, v: str) -> str:
        """Ensure the catalog backend is one we know how to wire."""
        backend = v.lower()
        if backend not in VALID_CATALOG_BACKENDS:
            raise ValueError(f"catalog_backend must be one of {VALID_CATALOG_BACKENDS}")
        return backend


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
