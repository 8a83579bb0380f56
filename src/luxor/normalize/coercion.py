"""Scalar coercion for raw response fields.

Absent values (None or "") get the per-kind default: 0 for counts and 0.0 for
rates. Present values that are not numbers raise InvalidNumericLiteral and
are never defaulted.
"""

import math
from typing import Any, TypeVar

from luxor.exceptions import InvalidNumericLiteral
from luxor.normalize.decimal_engine import match_literal

T = TypeVar("T")


def is_absent(raw: Any) -> bool:
    """True for values the API uses to mean "no data"."""
    return raw is None or raw == ""


def coerce_int(raw: Any) -> int:
    """Coerce a count field to int.

    Strings keep only their leading integer digits, so ``"12.9"`` gives 12
    and ``"1e3"`` gives 1. Floats truncate toward zero.
    """
    if is_absent(raw):
        return 0
    if isinstance(raw, bool):
        raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")
        return math.trunc(raw)
    if not isinstance(raw, str):
        raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")

    match = match_literal(raw)
    digits = match.group("int")
    if digits is None:  # ".5" style literal has no integer part
        return 0
    return int(match.group("sign") + digits)


def coerce_float(raw: Any) -> float:
    """Coerce a rate / percentage / price field to float."""
    if is_absent(raw):
        return 0.0
    if isinstance(raw, bool):
        raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")
    if isinstance(raw, (int, float)):
        if not math.isfinite(raw):
            raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")
        return float(raw)
    if not isinstance(raw, str):
        raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")

    match_literal(raw)
    return float(raw)


def coerce_passthrough(raw: T) -> T:
    """Return ``raw`` unchanged (identifiers, statuses, decimal-string money)."""
    return raw
