"""Shared constants for the Vector4D value type and its text codec."""

import os
from enum import StrEnum

NUM_COMPONENTS = 4
SKIP_VALIDATION = os.getenv("SKIP_VALIDATION", "0") == "1"


class ComponentName(StrEnum):
    X = "x"
    Y = "y"
    Z = "z"
    W = "w"


class SpecialToken(StrEnum):
    NAN = "NaN"
    POSITIVE_INFINITY = "Infinity"
    NEGATIVE_INFINITY = "-Infinity"
    EXPLICIT_POSITIVE_INFINITY = "+Infinity"


class NanPolicy(StrEnum):
    """How component comparison treats NaN and signed zero.

    IEEE: plain IEEE-754 ``==``; NaN never equals anything, ``-0 == 0``.
    NAN_EQUAL: as IEEE, except that any NaN equals any other NaN.
    BITWISE: the binary32 bit patterns must be identical.
    """

    IEEE = "ieee"
    NAN_EQUAL = "nan_equal"
    BITWISE = "bitwise"
