"""Application layer for the sheet query engine.

The application layer orchestrates domain logic to fulfill use cases.

Exports:
    - SheetORM: Runs find_many, find_unique, find_first, find_last and
      count against an injected row source
    - build_container: Wires config, row source and SheetORM together
"""

from sheet_orm.application.sheet_orm import SheetORM
from sheet_orm.application.wiring import build_container

__all__ = [
    "SheetORM",
    "build_container",
]
