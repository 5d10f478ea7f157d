"""Validated numeric addition."""

from __future__ import annotations

import math

from identcase.errors import ActionableError

Number = int | float


def _is_finite_number(value: object) -> bool:
    # bool is an int subclass but never a valid operand
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def add_numbers(a: object = None, b: object = None) -> Number:
    """Return ``a + b`` after checking both operands.

    Raises :class:`~identcase.errors.ActionableError`:
      - MISSING_ARGUMENT if either operand is omitted or ``None``
      - INVALID_NUMBER if either operand is not a finite int or float, or
        an int operand is too large to combine with a float operand

    The operand checks run before any arithmetic.
    """
    for name, value in (("a", a), ("b", b)):
        if value is None:
            raise ActionableError.missing_argument("add_numbers", name)
    for name, value in (("a", a), ("b", b)):
        if not _is_finite_number(value):
            raise ActionableError.invalid_number("add_numbers", name, value)
    try:
        return a + b  # type: ignore[operator]
    except OverflowError:
        # an int beyond float range met a float operand
        name, value = ("a", a) if isinstance(a, int) else ("b", b)
        raise ActionableError.invalid_number(
            "add_numbers",
            name,
            value,
            suggestion=f"Keep '{name}' within float range when the other operand is a float",
        ) from None
