"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field
from sqlalchemy.engine import make_url


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(default=["*"])
    allow_credentials: bool = False
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(
        default="logs/app.log", description="Log file path; empty or null disables it"
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./inventory.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Log every SQL statement")
    create_tables: bool = Field(
        default=True, description="Create missing tables on application startup"
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )
    password_file: str | None = Field(
        default=None,
        description="Path to file containing database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def password(self) -> str | None:
        """
        Get the database password from the appropriate source.
        1. A mounted secrets file named by `password_file`
        2. The environment variable named by `password_env_var`
        3. The password embedded in the URL, if any
        """
        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e

        if self.password_env_var:
            password = os.getenv(self.password_env_var)
            if password:
                return password
            raise ValueError(f"Environment variable {self.password_env_var} not set")

        return make_url(self.url).password

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the database connection string with the resolved password."""
        base_url = make_url(self.url)
        if self.is_sqlite:
            return self.url

        resolved_password = self.password
        if base_url.password and resolved_password != base_url.password:
            logger.warning(
                "Database password from secrets does not match the one in the URL. "
                "Using password from secrets."
            )
        if resolved_password:
            base_url = base_url.set(password=resolved_password)

        # Render manually to avoid SQLAlchemy's password masking
        return base_url.render_as_string(hide_password=False)


class PaginationConfig(BaseModel):
    """Defaults applied to paged product listings."""

    default_page_size: int = Field(default=5, ge=1, description="Default page size")
    max_page_size: int = Field(default=100, ge=1, description="Upper bound on page size")
    default_sort: str = Field(default="id", description="Default sort field")


class ApiConfig(BaseModel):
    """HTTP API behaviour configuration."""

    prefix: str = Field(default="/api/products", description="Product router prefix")
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="inventory-api", description="Application name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8080, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    api: ApiConfig = Field(default_factory=ApiConfig, description="API configuration")
