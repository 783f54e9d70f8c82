"""REST API adapter for the sheet query engine.

This module provides a FastAPI-based REST API for querying a row-set
through a SheetORM instance.

Endpoints:
    POST /find-many   - Rows selected by the query
    POST /find-unique - The only selected row (409 if several)
    POST /find-first  - The first selected row
    POST /find-last   - The last selected row
    POST /count       - Number of selected rows
    GET /cache        - Cache status of the row source
    POST /cache/reset - Drop cached rows
    GET /health       - Health check

Every query endpoint takes the same JSON body:
    {"where": {...}, "orderBy": {...}, "select": [...], "limit": 10, "offset": 0}

Usage:
    from sheet_orm.adapters.inbound.rest_api import create_app

    app = create_app(orm)
    # Run with uvicorn: uvicorn app:app --host 0.0.0.0 --port 8000

References:
    - FastAPI documentation: https://fastapi.tiangolo.com/
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from sheet_orm import __version__
from sheet_orm.application import SheetORM
from sheet_orm.domain.errors import FetchError, MultipleResultsError, SourceError, ValidationError
from sheet_orm.domain.value_objects import Row


class QueryRequest(BaseModel):
    """Request model for query endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    where: dict[str, Any] | None = Field(None, description="Field name to condition")
    order_by: dict[str, Any] | list[dict[str, Any]] | None = Field(
        None, alias="orderBy", description="One or more {key, order} sort clauses"
    )
    select: list[str] | None = Field(None, description="Field names to return")
    limit: int | None = Field(None, description="Maximum number of rows")
    offset: int | None = Field(None, description="Number of leading rows to skip")

    def to_options(self) -> dict[str, Any]:
        """Raw query options in the JSON shape SheetORM accepts."""
        options = {
            "where": self.where,
            "orderBy": self.order_by,
            "select": self.select,
            "limit": self.limit,
            "offset": self.offset,
        }
        return {key: value for key, value in options.items() if value is not None}


class RowsResponse(BaseModel):
    """Response model for find-many."""

    rows: list[dict[str, Any]] = Field(default_factory=list, description="Result rows")
    count: int = Field(0, description="Number of rows returned")


class RowResponse(BaseModel):
    """Response model for single-row lookups."""

    row: dict[str, Any] | None = Field(None, description="The row, or null if none")


class CountResponse(BaseModel):
    """Response model for count."""

    count: int = Field(..., description="Number of selected rows")


class CacheStatusResponse(BaseModel):
    """Response model for cache status."""

    enabled: bool = Field(..., description="Whether caching is enabled")
    valid: bool = Field(..., description="Whether cached rows are fresh")
    last_fetch_time: float | None = Field(None, description="Monotonic time of last fetch")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


def _row_to_dict(row: Row | None) -> dict[str, Any] | None:
    return dict(row) if row is not None else None


def create_app(orm: SheetORM) -> FastAPI:
    """Create a FastAPI application for a SheetORM.

    Args:
        orm: The query orchestrator to expose.

    Returns:
        A configured FastAPI application.
    """
    app = FastAPI(
        title="Sheet ORM API",
        description="REST API for querying spreadsheet rows",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(MultipleResultsError)
    async def multiple_results_handler(request: Request, exc: MultipleResultsError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc), "count": exc.count})

    @app.exception_handler(SourceError)
    async def source_error_handler(request: Request, exc: SourceError) -> JSONResponse:
        content: dict[str, Any] = {"detail": str(exc)}
        if isinstance(exc, FetchError) and exc.status_code is not None:
            content["upstream_status"] = exc.status_code
        return JSONResponse(status_code=502, content=content)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.post("/find-many", response_model=RowsResponse, tags=["Query"])
    def find_many(request: QueryRequest) -> RowsResponse:
        """Return every row selected by the query."""
        rows = orm.find_many(request.to_options())
        return RowsResponse(rows=[dict(row) for row in rows], count=len(rows))

    @app.post("/find-unique", response_model=RowResponse, tags=["Query"])
    def find_unique(request: QueryRequest) -> RowResponse:
        """Return the only selected row."""
        return RowResponse(row=_row_to_dict(orm.find_unique(request.to_options())))

    @app.post("/find-first", response_model=RowResponse, tags=["Query"])
    def find_first(request: QueryRequest) -> RowResponse:
        """Return the first selected row."""
        return RowResponse(row=_row_to_dict(orm.find_first(request.to_options())))

    @app.post("/find-last", response_model=RowResponse, tags=["Query"])
    def find_last(request: QueryRequest) -> RowResponse:
        """Return the last selected row."""
        return RowResponse(row=_row_to_dict(orm.find_last(request.to_options())))

    @app.post("/count", response_model=CountResponse, tags=["Query"])
    def count(request: QueryRequest) -> CountResponse:
        """Return the number of selected rows."""
        return CountResponse(count=orm.count(request.to_options()))

    @app.get("/cache", response_model=CacheStatusResponse, tags=["Cache"])
    def cache_status() -> CacheStatusResponse:
        """Report the cache state of the row source."""
        status_fn = getattr(orm.source, "cache_status", None)
        if status_fn is None:
            raise HTTPException(status_code=404, detail="Row source does not cache")
        status = status_fn()
        return CacheStatusResponse(
            enabled=status.enabled,
            valid=status.valid,
            last_fetch_time=status.last_fetch_time,
        )

    @app.post("/cache/reset", tags=["Cache"])
    def reset_cache() -> dict[str, str]:
        """Drop cached rows so the next query fetches again."""
        orm.reset()
        return {"message": "Cache reset"}

    return app


def run_server(
    orm: SheetORM,
    host: str = "0.0.0.0",
    port: int = 8000,
) -> None:
    """Run the REST API server.

    Args:
        orm: The query orchestrator.
        host: Host to bind to.
        port: Port to bind to.
    """
    import uvicorn

    app = create_app(orm)
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    """Start the server from environment configuration."""
    from sheet_orm.application import build_container
    from sheet_orm.infrastructure.config import get_config
    from sheet_orm.infrastructure.logging import setup_logging_from_config
    from sheet_orm.infrastructure.metrics import setup_metrics
    from sheet_orm.infrastructure.tracing import setup_tracing

    config = get_config()
    setup_logging_from_config(config.observability)
    setup_tracing(
        service_name=config.observability.otel_service_name,
        otlp_endpoint=config.observability.otel_endpoint,
    )
    setup_metrics(port=config.server.metrics_port)

    container = build_container(config)
    run_server(container.resolve(SheetORM), host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
