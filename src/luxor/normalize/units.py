"""Hash rate unit conversion.

The API reports hash rates in H/s. Conversion divides by 1000 once per unit
step using the Decimal engine, then exports a float.
"""

from decimal import Decimal
from typing import Any

from luxor.exceptions import UnknownUnit
from luxor.models import HashRateUnit
from luxor.normalize.decimal_engine import parse_decimal, scale_down, scale_up, to_float

#: Power-of-1000 exponent for each unit symbol.
UNIT_EXPONENTS: dict[HashRateUnit, int] = {
    HashRateUnit.H: 0,
    HashRateUnit.KH: 1,
    HashRateUnit.MH: 2,
    HashRateUnit.GH: 3,
    HashRateUnit.TH: 4,
    HashRateUnit.PH: 5,
    HashRateUnit.EH: 6,
    HashRateUnit.ZH: 7,
}

_EXPECTED = ", ".join(unit.value for unit in HashRateUnit)


def resolve_unit(unit: HashRateUnit | str | None) -> HashRateUnit:
    """Return the HashRateUnit for a symbol.

    Raises:
        UnknownUnit: If ``unit`` is not one of H, KH, MH, GH, TH, PH, EH, ZH.
    """
    if isinstance(unit, HashRateUnit):
        return unit
    try:
        return HashRateUnit(unit)
    except ValueError:
        raise UnknownUnit(
            f"Unexpected hash rate units: {unit!r}. Expected one of: {_EXPECTED}"
        ) from None


def to_unit(raw: Any, unit: HashRateUnit | str | None) -> Decimal:
    """Scale a raw H/s value into ``unit`` and return the exact Decimal.

    Absent raw values (None or "") count as 0. The unit is validated before
    the value is looked at.
    """
    exponent = UNIT_EXPONENTS[resolve_unit(unit)]
    if raw is None or raw == "":
        raw = 0
    return scale_down(parse_decimal(raw), exponent)


def from_unit(value: Any, unit: HashRateUnit | str | None) -> Decimal:
    """Scale a value expressed in ``unit`` back to H/s."""
    exponent = UNIT_EXPONENTS[resolve_unit(unit)]
    return scale_up(parse_decimal(value), exponent)


def convert_hashrate(raw: Any, unit: HashRateUnit | str | None) -> float:
    """Convert a raw H/s value (string or number) to ``unit`` as a float.

    Raises:
        UnknownUnit: If ``unit`` is not recognised.
        InvalidNumericLiteral: If ``raw`` is present but not a number.
    """
    return to_float(to_unit(raw, unit))
