"""Field conditions for where clauses.

A condition is decided once, when the query is built:
    - LiteralCondition: the field must strictly equal a scalar.
    - OperatorCondition: the field must satisfy every operator in a set
      of named comparison, substring and membership operators.

Raw input follows the JSON shape used by callers:
    {"age": 30}                       -> LiteralCondition(30)
    {"age": {"gte": 18, "lt": 65}}    -> OperatorCondition
    {"name": {"in": ["Ann", "Bob"]}}  -> OperatorCondition
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Sequence, Union

from sheet_orm.domain.errors import ValidationError
from sheet_orm.domain.value_objects.row import Scalar


class Operator(Enum):
    """Operators recognized inside an operator set."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    IN = "in"
    NOT_IN = "notIn"


ORDERING_OPERATORS = frozenset({Operator.GT, Operator.GTE, Operator.LT, Operator.LTE})
STRING_OPERATORS = frozenset({Operator.CONTAINS, Operator.STARTS_WITH, Operator.ENDS_WITH})
MEMBERSHIP_OPERATORS = frozenset({Operator.IN, Operator.NOT_IN})

_OPERATOR_NAMES = {op.value: op for op in Operator}


@dataclass(frozen=True, slots=True)
class LiteralCondition:
    """Strict equality against a scalar value."""

    value: Scalar

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class OperatorCondition:
    """A conjunction of operators applied to one field.

    Attributes:
        operators: (operator, operand) pairs in the order they were given.
            Membership operands are stored as tuples. With no operators
            the condition places no constraint on a non-null cell.
    """

    operators: tuple[tuple[Operator, Any], ...]

    def __str__(self) -> str:
        return ", ".join(f"{op.value}={operand!r}" for op, operand in self.operators)


Condition = Union[LiteralCondition, OperatorCondition]


def parse_condition(raw: Any) -> Condition:
    """Build a condition from its raw form.

    Mappings become operator sets; anything else is a literal.

    Raises:
        ValidationError: If an operator set names an unknown operator or
            gives a membership operator a non-sequence operand.
    """
    if isinstance(raw, (LiteralCondition, OperatorCondition)):
        return raw
    if not isinstance(raw, Mapping):
        return LiteralCondition(raw)

    unknown = [str(key) for key in raw if key not in _OPERATOR_NAMES]
    if unknown:
        raise ValidationError(f"Unknown where operators: {', '.join(unknown)}")

    operators: list[tuple[Operator, Any]] = []
    for key, operand in raw.items():
        op = _OPERATOR_NAMES[key]
        if op in MEMBERSHIP_OPERATORS:
            if isinstance(operand, (str, bytes)) or not isinstance(
                operand, (Sequence, set, frozenset)
            ):
                raise ValidationError(
                    f"Operator '{key}' expects a list of values, got {type(operand).__name__}"
                )
            operand = tuple(operand)
        operators.append((op, operand))
    return OperatorCondition(operators=tuple(operators))


WhereClause = Mapping[str, Condition]


def parse_where(raw: Mapping[str, Any] | None) -> WhereClause:
    """Build a where clause from a mapping of field name to raw condition.

    Raises:
        ValidationError: If the clause is not a mapping, a field name is not
            a string, or any condition is invalid.
    """
    if raw is None:
        return MappingProxyType({})
    if not isinstance(raw, Mapping):
        raise ValidationError("Where clause must be a mapping of field to condition")

    clause: dict[str, Condition] = {}
    for field_name, raw_condition in raw.items():
        if not isinstance(field_name, str):
            raise ValidationError(f"Where field names must be strings, got {field_name!r}")
        clause[field_name] = parse_condition(raw_condition)
    return MappingProxyType(clause)
