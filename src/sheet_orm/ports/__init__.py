"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to clients (QueryEngine)
- Outbound ports: Dependencies on external systems (RowSource)

Adapters implement these ports with concrete functionality.
"""

from sheet_orm.ports.inbound import Options, QueryEngine
from sheet_orm.ports.outbound import RowSource

__all__ = [
    # Inbound ports
    "Options",
    "QueryEngine",
    # Outbound ports
    "RowSource",
]
