"""Type-aware comparison of cell values.

compare_values() defines the total order used by the ordering engine:

    - two strings compare by locale collation
    - two numbers compare numerically
    - any other pair compares by display string
    - None sinks to the bottom: last when ascending, first when descending

The function returns -1, 0 or 1 and already applies the sort direction,
so callers never negate its result themselves.
"""

from __future__ import annotations

import locale

from sheet_orm.domain.value_objects import Scalar, SortDirection, is_numeric


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def display_value(value: Scalar) -> str:
    """Render a scalar the way it appears in the spreadsheet."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def compare_strings(a: str, b: str) -> int:
    """Compare two strings under the process locale.

    Case is ignored first; on a tie lowercase sorts before uppercase.
    """
    left, right = locale.strxfrm(a.casefold()), locale.strxfrm(b.casefold())
    if left != right:
        return -1 if left < right else 1
    left, right = locale.strxfrm(a.swapcase()), locale.strxfrm(b.swapcase())
    if left != right:
        return -1 if left < right else 1
    return 0


def compare_values(
    a: Scalar,
    b: Scalar,
    direction: SortDirection = SortDirection.ASC,
) -> int:
    """Compare two cell values for ordering.

    Args:
        a: Left value.
        b: Right value.
        direction: Sort direction to apply to the result.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if they tie.
    """
    ascending = direction is SortDirection.ASC

    if a is None and b is None:
        return 0
    if a is None:
        return 1 if ascending else -1
    if b is None:
        return -1 if ascending else 1

    if isinstance(a, str) and isinstance(b, str):
        result = compare_strings(a, b)
    elif is_numeric(a) and is_numeric(b):
        result = _sign(a - b)  # type: ignore[operator]
    else:
        result = compare_strings(display_value(a), display_value(b))

    return result if ascending else -result
