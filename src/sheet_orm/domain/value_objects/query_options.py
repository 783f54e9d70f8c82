"""Query option value objects.

QueryOptions bundles everything one query call needs:

    where   - conjunctive filter (see conditions.py)
    orderBy - one or more (field, direction) sort keys
    select  - field names to project
    limit   - maximum number of rows to keep
    offset  - number of leading rows to skip

Every field is optional and absence means the stage is skipped. Options
are validated when built, so an invalid query fails before any row is
read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from sheet_orm.domain.errors import ValidationError
from sheet_orm.domain.value_objects.conditions import WhereClause, parse_where


class SortDirection(Enum):
    """Direction of one sort key."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class OrderKey:
    """One sort key of an order specification."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def ascending(self) -> bool:
        return self.direction is SortDirection.ASC

    def __str__(self) -> str:
        return f"{self.field} {self.direction.value}"


def _parse_direction(raw: Any) -> SortDirection:
    if isinstance(raw, SortDirection):
        return raw
    try:
        return SortDirection(str(raw).lower())
    except ValueError as e:
        raise ValidationError(f"Order direction must be 'asc' or 'desc', got {raw!r}") from e


def _parse_order_key(raw: Any) -> OrderKey:
    if isinstance(raw, OrderKey):
        return raw
    if isinstance(raw, Mapping):
        if "key" not in raw:
            raise ValidationError("Order clause requires a 'key'")
        key, direction = raw["key"], raw.get("order", SortDirection.ASC)
    elif isinstance(raw, tuple) and len(raw) == 2:
        key, direction = raw
    else:
        raise ValidationError(f"Invalid order clause: {raw!r}")
    if not isinstance(key, str):
        raise ValidationError(f"Order key must be a string, got {key!r}")
    return OrderKey(field=key, direction=_parse_direction(direction))


def _is_pair(raw: Any) -> bool:
    return isinstance(raw, tuple) and len(raw) == 2 and isinstance(raw[0], str)


def parse_order_by(raw: Any) -> tuple[OrderKey, ...]:
    """Build an order specification.

    Accepts a single clause ({"key": "age", "order": "asc"}, an OrderKey or
    a (field, direction) tuple) or a list of clauses.
    """
    if raw is None:
        return ()
    if isinstance(raw, (Mapping, OrderKey)) or _is_pair(raw):
        return (_parse_order_key(raw),)
    if isinstance(raw, (list, tuple)):
        return tuple(_parse_order_key(item) for item in raw)
    raise ValidationError(f"Invalid order specification: {raw!r}")


def _validate_count(name: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be a non-negative integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be a non-negative integer, got {value}")
    return value


def _validate_select(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, (Sequence, set, frozenset)):
        raise ValidationError("Select must be a list of field names")
    names: list[str] = []
    for name in value:
        if not isinstance(name, str):
            raise ValidationError(f"Select field names must be strings, got {name!r}")
        if name not in names:
            names.append(name)
    return tuple(names)


_OPTION_ALIASES = {
    "where": "where",
    "orderBy": "order_by",
    "order_by": "order_by",
    "select": "select",
    "limit": "limit",
    "offset": "offset",
}


@dataclass(frozen=True)
class QueryOptions:
    """Validated, immutable options for one query call.

    Attributes:
        where: Field name to condition; all must hold.
        order_by: Sort keys applied left to right.
        select: Field names to keep, in output order.
        limit: Maximum rows to keep after the offset.
        offset: Leading rows to skip.
    """

    where: WhereClause = field(default_factory=lambda: MappingProxyType({}))
    order_by: tuple[OrderKey, ...] = ()
    select: tuple[str, ...] | None = None
    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "where", parse_where(self.where))
        object.__setattr__(self, "order_by", parse_order_by(self.order_by))
        object.__setattr__(self, "limit", _validate_count("Limit", self.limit))
        object.__setattr__(self, "offset", _validate_count("Offset", self.offset))
        object.__setattr__(self, "select", _validate_select(self.select))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> QueryOptions:
        """Build options from their raw JSON form.

        Both "orderBy" and "order_by" are accepted for the order key.

        Raises:
            ValidationError: If any option is unknown or invalid.
        """
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise ValidationError("Query options must be a mapping")

        unknown = [str(key) for key in raw if key not in _OPTION_ALIASES]
        if unknown:
            raise ValidationError(f"Unknown query options: {', '.join(unknown)}")

        values = {_OPTION_ALIASES[key]: value for key, value in raw.items()}
        return cls(
            where=values.get("where"),
            order_by=values.get("order_by"),
            select=values.get("select"),
            limit=values.get("limit"),
            offset=values.get("offset"),
        )

    @classmethod
    def coerce(
        cls,
        options: QueryOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> QueryOptions:
        """Normalize the accepted option forms into a QueryOptions.

        Options may arrive as a QueryOptions instance, a raw mapping, or
        keyword arguments, but not as an instance mixed with keywords.
        """
        if isinstance(options, QueryOptions):
            if kwargs:
                raise ValidationError("Cannot combine QueryOptions with keyword options")
            return options
        if options is not None and not isinstance(options, Mapping):
            raise ValidationError("Query options must be a mapping")
        merged: dict[str, Any] = dict(options or {})
        merged.update({key: value for key, value in kwargs.items() if value is not None})
        return cls.from_mapping(merged)

    @property
    def paginates(self) -> bool:
        return self.limit is not None or self.offset is not None
