"""Errors raised while parsing the textual vector form."""

from .constants import NUM_COMPONENTS


class FormatError(ValueError):
    """Input text does not follow the ``<x> <y> <z> <w>`` layout."""


class WrongTokenCountError(FormatError):
    def __init__(self, actual: int, expected: int = NUM_COMPONENTS) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} tokens, got {actual}")


class InvalidTokenError(FormatError):
    def __init__(self, token: str, index: int) -> None:
        self.token = token
        self.index = index
        super().__init__(f"Invalid token {token!r} at index {index}")
