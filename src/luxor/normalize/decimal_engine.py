"""Arbitrary-precision decimal helpers for wire numerics.

The pool returns large hash rates as numeric strings. They are parsed into
Decimal and scaled there; float is only produced by ``to_float`` at the very
end. All division runs in a local context so the caller's decimal context
never leaks in.

CRITICAL: Never route intermediate values through float.
"""

import re
from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext

from luxor.exceptions import InvalidNumericLiteral

#: Base-10 literal: optional sign, digits with optional fraction, optional exponent.
NUMERIC_LITERAL = re.compile(
    r"(?P<sign>[+-]?)(?:(?P<int>\d+)(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)

#: Significant digits kept by every scaling step.
SCALE_PRECISION = 50

#: Rounding rule applied when a quotient exceeds SCALE_PRECISION digits.
SCALE_ROUNDING = ROUND_HALF_EVEN

MAX_SCALE_STEPS = 7

_THOUSAND = Decimal(1000)


def _scale_context() -> Context:
    return Context(prec=SCALE_PRECISION, rounding=SCALE_ROUNDING)


def match_literal(raw: str) -> re.Match[str]:
    """Return the full-string literal match or raise InvalidNumericLiteral."""
    match = NUMERIC_LITERAL.fullmatch(raw)
    if match is None:
        raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")
    return match


def parse_decimal(raw: str | int | float | Decimal) -> Decimal:
    """Parse a wire numeric into a Decimal without binary rounding.

    Strings must match NUMERIC_LITERAL exactly (no whitespace, NaN or
    Infinity). Native ints are exact. Native floats go through ``str()`` so
    the shortest round-tripping repr is used, not the binary expansion.

    Raises:
        InvalidNumericLiteral: If the value is not a finite base-10 number.
    """
    if isinstance(raw, bool):
        raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")
    if isinstance(raw, Decimal):
        if not raw.is_finite():
            raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")
        return raw
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        raw = str(raw)
    if not isinstance(raw, str):
        raise InvalidNumericLiteral(f"Not a base-10 number: {raw!r}")

    match_literal(raw)
    return Decimal(raw)


def scale_down(value: Decimal, steps: int) -> Decimal:
    """Divide ``value`` by 1000 ``steps`` times.

    Each division runs with SCALE_PRECISION significant digits and
    ROUND_HALF_EVEN. Dividing by 1000 only shifts the exponent, so inputs
    within that precision come back exact.

    Args:
        value: Decimal to scale.
        steps: Number of divisions, 0 through MAX_SCALE_STEPS.

    Returns:
        The scaled Decimal.
    """
    if not 0 <= steps <= MAX_SCALE_STEPS:
        raise ValueError(f"steps must be in 0..{MAX_SCALE_STEPS}, got {steps}")

    with localcontext(_scale_context()):
        result = +value  # apply context precision to the input once
        for _ in range(steps):
            result = result / _THOUSAND
    return result


def scale_up(value: Decimal, steps: int) -> Decimal:
    """Multiply ``value`` by 1000 ``steps`` times. Inverse of scale_down."""
    if not 0 <= steps <= MAX_SCALE_STEPS:
        raise ValueError(f"steps must be in 0..{MAX_SCALE_STEPS}, got {steps}")

    with localcontext(_scale_context()):
        result = +value
        for _ in range(steps):
            result = result * _THOUSAND
    return result


def to_float(value: Decimal) -> float:
    """Export a Decimal as float for output."""
    return float(value)
