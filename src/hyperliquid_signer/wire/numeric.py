"""
Precision-safe decimal conversions.

Prices, sizes and amounts travel in two shapes: a canonical decimal string in
the request body (``to_wire_string``) and, for a few hashed fields, a scaled
integer (``to_scaled_integer``). Both reject inputs whose rounding would move
the value beyond a fixed tolerance instead of silently truncating funds.
"""

from decimal import Decimal, DecimalException, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Union

from ..constants import HASH_SCALE_POWER, USD_SCALE_POWER, WIRE_DECIMALS
from ..engine.exceptions import PrecisionLossError, UnsupportedValueError

NumericLike = Union[Decimal, int, float, str]

# Wide enough for 64-bit magnitudes carrying 8+ fractional digits.
_CONTEXT_PRECISION = 80

_WIRE_QUANTUM = Decimal(1).scaleb(-WIRE_DECIMALS)
_WIRE_TOLERANCE = Decimal("1e-12")
_SCALED_TOLERANCE = Decimal("1e-3")


def to_decimal(value: NumericLike) -> Decimal:
    """
    Convert a numeric input to ``Decimal`` without binary float artefacts.

    Floats are routed through their shortest ``repr`` so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its exact binary expansion.
    """
    if isinstance(value, bool):
        raise UnsupportedValueError("booleans are not numeric wire values")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise UnsupportedValueError(f"not a decimal number: {value!r}") from exc
    else:
        raise UnsupportedValueError(f"unsupported numeric type: {type(value).__name__}")
    if not result.is_finite():
        raise UnsupportedValueError(f"non-finite numeric value: {value!r}")
    return result


def to_wire_string(value: NumericLike) -> str:
    """
    Render a number as the exchange's canonical decimal string.

    The value is rounded half-up to 8 fractional digits; trailing zeros and a
    dangling decimal point are stripped and negative zero becomes ``"0"``.
    Scientific notation is never produced.

    Args:
        value: Decimal, int, float or decimal string.

    Returns:
        str: Canonical wire string, e.g. ``"100.5"`` for ``100.50``.

    Raises:
        PrecisionLossError: If rounding moves the value by 1e-12 or more.
        UnsupportedValueError: If the value is too large to quantize.

    Example::

        to_wire_string("1670.10000000")   # "1670.1"
        to_wire_string(-0.0)              # "0"
    """
    number = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _CONTEXT_PRECISION
        try:
            rounded = number.quantize(_WIRE_QUANTUM, rounding=ROUND_HALF_UP)
        except DecimalException as exc:
            raise UnsupportedValueError(f"{value!r} is too large for a wire decimal") from exc
        if abs(rounded - number) >= _WIRE_TOLERANCE:
            raise PrecisionLossError(f"{value!r} has more than {WIRE_DECIMALS} significant fractional digits")
        text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def to_scaled_integer(value: NumericLike, power: int) -> int:
    """
    Multiply by ``10**power`` and round half-up to an integer.

    Raises:
        PrecisionLossError: If the scaled value is 0.001 or more away from
            the nearest integer.
        UnsupportedValueError: If scaling leaves the decimal context range.
    """
    number = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _CONTEXT_PRECISION
        try:
            scaled = number.scaleb(power)
            rounded = scaled.to_integral_value(rounding=ROUND_HALF_UP)
            difference = abs(rounded - scaled)
        except DecimalException as exc:
            raise UnsupportedValueError(f"{value!r} cannot be scaled by 10^{power}") from exc
        if difference >= _SCALED_TOLERANCE:
            raise PrecisionLossError(f"{value!r} cannot be scaled by 10^{power} without losing precision")
    return int(rounded)


def to_int_for_hashing(value: NumericLike) -> int:
    return to_scaled_integer(value, HASH_SCALE_POWER)


def to_usd_int(value: NumericLike) -> int:
    return to_scaled_integer(value, USD_SCALE_POWER)
