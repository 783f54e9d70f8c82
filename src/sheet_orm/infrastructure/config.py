"""Configuration management for the sheet query engine."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SourceConfig(BaseModel):
    """Spreadsheet source configuration."""

    sheet_id: str | None = Field(default=None, description="Google Sheet ID to query")
    request_timeout_seconds: float = Field(
        default=10.0, gt=0, description="HTTP timeout for the CSV export request"
    )


class CacheConfig(BaseModel):
    """Row cache configuration."""

    enabled: bool = Field(default=True, description="Serve rows from cache while valid")
    duration_seconds: float = Field(
        default=300.0, gt=0, description="Cache lifetime in seconds (default 5 minutes)"
    )


class ParseConfig(BaseModel):
    """CSV decoding configuration."""

    skip_empty_lines: bool = Field(default=True, description="Drop blank CSV records")
    delimiter: str = Field(
        default=",", min_length=1, max_length=1, description="CSV field delimiter"
    )


class QueryConfig(BaseModel):
    """Query evaluation configuration."""

    drop_incomplete_rows: bool = Field(
        default=True,
        description="Drop rows holding any null value when an ordering is requested",
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="sheet_orm", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the sheet query engine."""

    model_config = SettingsConfigDict(
        env_prefix="SHEET_ORM_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    source: SourceConfig = Field(default_factory=SourceConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
