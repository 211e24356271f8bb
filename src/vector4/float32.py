"""Single-precision scalar <-> text conversion.

Every component of a Vector4D is an IEEE-754 binary32 value. This module
converts one such value to its canonical token and back:

1. Formatting emits the shortest decimal string that reads back to the
   identical binary32 value (at most 9 significant digits). Decimal exponents
   in [-5, 15) are written positionally, everything else in ``e`` notation.
2. Parsing accepts a fixed, locale-independent grammar (ASCII digits, ``.`` as
   the decimal point, optional sign and exponent) plus the literals ``NaN``,
   ``Infinity``, ``+Infinity`` and ``-Infinity``. Decimal strings are rounded
   correctly to binary32, ties to even.

Neither direction consults ``locale``.
"""

import math
import re
from decimal import Decimal

import numpy as np

from .constants import SpecialToken
from .errors import InvalidTokenError

POSITIONAL_EXPONENT_MIN = -5
POSITIONAL_EXPONENT_MAX = 15
# Halfway between the largest binary32 value and 2**128; ties here round to infinity.
OVERFLOW_THRESHOLD = 2.0**128 - 2.0**103

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_SPECIAL_VALUES: dict[str, float] = {
    SpecialToken.NAN.value: math.nan,
    SpecialToken.POSITIVE_INFINITY.value: math.inf,
    SpecialToken.EXPLICIT_POSITIVE_INFINITY.value: math.inf,
    SpecialToken.NEGATIVE_INFINITY.value: -math.inf,
}


def _single(value: float) -> np.float32:
    # Magnitudes past the binary32 range saturate to infinity.
    with np.errstate(over="ignore"):
        return np.float32(value)


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest binary32 value and return it as a Python float."""
    return float(_single(value))


def float32_bits(value: float) -> int:
    """Return the 32-bit pattern of ``value`` after rounding it to binary32."""
    return int(_single(value).view(np.uint32))


def format_float(value: float) -> str:
    """Format ``value`` as its shortest round-tripping binary32 token.

    Example:
        >>> format_float(1.1)
        '1.1'
        >>> format_float(-0.0)
        '-0'
        >>> format_float(float("inf"))
        'Infinity'
    """
    single = _single(value)
    if math.isnan(single):
        return SpecialToken.NAN.value
    if math.isinf(single):
        if single > 0:
            return SpecialToken.POSITIVE_INFINITY.value
        return SpecialToken.NEGATIVE_INFINITY.value

    scientific = np.format_float_scientific(single, unique=True, trim="-")
    exponent = int(scientific.rpartition("e")[2])
    if POSITIONAL_EXPONENT_MIN <= exponent < POSITIONAL_EXPONENT_MAX:
        return np.format_float_positional(single, unique=True, trim="-")
    return scientific


def parse_float(token: str, index: int = 0) -> float:
    """Parse one token into a binary32 value (returned as a Python float).

    Args:
        token: A single whitespace-free token.
        index: Position of the token in its vector, reported on failure.

    Raises:
        InvalidTokenError: If the token is not a number in the invariant grammar
            or one of the special literals.
    """
    special = _SPECIAL_VALUES.get(token)
    if special is not None:
        return special
    if _NUMBER_RE.fullmatch(token) is None:
        raise InvalidTokenError(token, index)
    return _round_decimal(token)


def _round_decimal(token: str) -> float:
    value = float(token)
    single = _single(value)
    if math.isinf(value) or float(single) == value:
        return float(single)

    # Going through binary64 first rounds twice. That only goes wrong when the
    # binary64 value lands exactly on a binary32 midpoint the decimal is not on.
    towards = np.float32(math.inf if value > float(single) else -math.inf)
    neighbour = np.nextafter(single, towards)
    if math.isinf(single):
        midpoint = math.copysign(OVERFLOW_THRESHOLD, value)
    else:
        midpoint = (float(single) + float(neighbour)) / 2
    if value != midpoint:
        return float(single)

    exact = Decimal(token)
    if exact == Decimal(midpoint):
        return float(single)
    upper, lower = max(single, neighbour), min(single, neighbour)
    return float(upper if exact > Decimal(midpoint) else lower)
