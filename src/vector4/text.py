"""Free-function API over Vector4D: format, parse and compare."""

from .codec import components_equal, format_components, parse_components
from .constants import NanPolicy
from .messages.vector_4d import Vector4D


def format_vector(value: Vector4D) -> str:
    """Return the canonical ``"<x> <y> <z> <w>"`` form of ``value``. Never raises.

    Example:
        >>> format_vector(Vector4D.of(1.1, -0.0, float("inf"), 1e20))
        '1.1 -0 Infinity 1e+20'
    """
    return format_components(value.to_array())


def parse_vector(text: str) -> Vector4D:
    """Reconstruct a Vector4D from its text form.

    Args:
        text: Four whitespace-separated tokens. Leading and trailing whitespace
            and runs of whitespace between tokens are accepted.

    Returns:
        The parsed vector. Parsing is all-or-nothing.

    Raises:
        WrongTokenCountError: If the text does not hold exactly four tokens.
        InvalidTokenError: For the first token that is not a valid number.
    """
    return Vector4D.of(*parse_components(text))


def equals(a: Vector4D, b: Vector4D, nan_policy: NanPolicy = NanPolicy.IEEE) -> bool:
    """Exact component-wise equality under ``nan_policy``."""
    return components_equal(a.to_array(), b.to_array(), nan_policy)
