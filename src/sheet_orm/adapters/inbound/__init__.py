"""Inbound adapters for the sheet query engine.

Inbound adapters handle incoming requests and convert them to
internal domain operations.

Exports:
    REST API:
        - create_app: Create a FastAPI application
        - run_server: Run the REST API server
        - QueryRequest: Request body shared by the query endpoints
"""

from sheet_orm.adapters.inbound.rest_api import (
    QueryRequest,
    create_app,
    run_server,
)

__all__ = [
    "create_app",
    "run_server",
    "QueryRequest",
]
