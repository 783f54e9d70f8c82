"""Value objects for the sheet query engine domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Rows:
        - Scalar, Row: Cell and record types
        - freeze_row, freeze_rows: Read-only row copies
        - infer_schema: Field names of a row-set

    Conditions:
        - Operator: Operators recognized in an operator set
        - LiteralCondition, OperatorCondition, Condition: Field conditions
        - WhereClause, parse_condition, parse_where

    Query Options:
        - SortDirection, OrderKey: Order specification
        - QueryOptions: Validated options for one query call
"""

from sheet_orm.domain.value_objects.conditions import (
    Condition,
    LiteralCondition,
    Operator,
    OperatorCondition,
    WhereClause,
    parse_condition,
    parse_where,
)
from sheet_orm.domain.value_objects.query_options import (
    OrderKey,
    QueryOptions,
    SortDirection,
    parse_order_by,
)
from sheet_orm.domain.value_objects.row import (
    Row,
    Scalar,
    freeze_row,
    freeze_rows,
    infer_schema,
    is_numeric,
    strict_equals,
)

__all__ = [
    # Rows
    "Row",
    "Scalar",
    "freeze_row",
    "freeze_rows",
    "infer_schema",
    "is_numeric",
    "strict_equals",
    # Conditions
    "Operator",
    "Condition",
    "LiteralCondition",
    "OperatorCondition",
    "WhereClause",
    "parse_condition",
    "parse_where",
    # Query options
    "SortDirection",
    "OrderKey",
    "QueryOptions",
    "parse_order_by",
]
