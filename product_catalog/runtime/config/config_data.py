"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field
from sqlalchemy.engine import make_url


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log file format")
    file: str = Field(default="", description="Log file path (empty disables the file sink)")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./catalog.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo emitted SQL to the log")
    sqlite_timeout: int = Field(
        default=20, description="SQLite lock timeout in seconds"
    )

    @computed_field
    @property
    def backend(self) -> str:
        """Name of the database backend, e.g. 'sqlite' or 'postgresql'."""
        return make_url(self.url).get_backend_name()

    @property
    def is_in_memory(self) -> bool:
        """True for SQLite URLs that point at a private in-memory database."""
        if self.backend != "sqlite":
            return False
        database = make_url(self.url).database
        return not database or database == ":memory:"


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="product-catalog", description="Application name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
