"""Text codec for four-component tuples.

The wire form is ``<x> <y> <z> <w>``: four tokens from ``float32.format_float``
joined by single spaces. Parsing splits on any run of whitespace (whatever
``str.split()`` treats as whitespace) and stops at the first bad token.
"""

import math
from collections.abc import Sequence

from .constants import NUM_COMPONENTS, NanPolicy
from .errors import WrongTokenCountError
from .float32 import float32_bits, format_float, parse_float

Components = tuple[float, float, float, float]


def format_components(components: Sequence[float]) -> str:
    return " ".join(format_float(component) for component in components)


def split_tokens(text: str) -> list[str]:
    """Split ``text`` into exactly four tokens.

    Raises:
        WrongTokenCountError: If the text does not hold exactly four tokens.
    """
    tokens = text.split()
    if len(tokens) != NUM_COMPONENTS:
        raise WrongTokenCountError(len(tokens))
    return tokens


def parse_components(text: str) -> Components:
    """Parse ``text`` into four binary32 components.

    Raises:
        WrongTokenCountError: If the text does not hold exactly four tokens.
        InvalidTokenError: For the first token that is not a valid number.
    """
    x, y, z, w = (parse_float(token, index) for index, token in enumerate(split_tokens(text)))
    return x, y, z, w


def components_equal(
    a: Sequence[float], b: Sequence[float], nan_policy: NanPolicy = NanPolicy.IEEE
) -> bool:
    """Compare two component sequences exactly, with no tolerance."""
    if len(a) != len(b):
        return False
    return all(_component_equal(p, q, nan_policy) for p, q in zip(a, b, strict=True))


def _component_equal(p: float, q: float, nan_policy: NanPolicy) -> bool:
    if nan_policy == NanPolicy.BITWISE:
        return float32_bits(p) == float32_bits(q)
    if nan_policy == NanPolicy.NAN_EQUAL and math.isnan(p) and math.isnan(q):
        return True
    return p == q
