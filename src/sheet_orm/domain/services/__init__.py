"""Domain services for query evaluation.

Exports:
    - compare_values: Type-aware ordering comparison with null placement
    - matches, apply_where: Where-clause evaluation
    - OrderingEngine: Stable multi-key sort
    - apply_offset, apply_limit, apply_select, project: Pagination and projection
"""

from sheet_orm.domain.services.comparator import compare_values, display_value
from sheet_orm.domain.services.ordering import OrderingEngine, is_complete
from sheet_orm.domain.services.predicate import apply_where, condition_holds, matches
from sheet_orm.domain.services.projection import (
    apply_limit,
    apply_offset,
    apply_select,
    project,
    validate_select,
)

__all__ = [
    "compare_values",
    "display_value",
    "matches",
    "condition_holds",
    "apply_where",
    "OrderingEngine",
    "is_complete",
    "apply_offset",
    "apply_limit",
    "apply_select",
    "validate_select",
    "project",
]
