"""Four-component binary32 vector value with an exact, locale-independent text form."""

from .config import Vector4Config
from .constants import NanPolicy
from .errors import FormatError, InvalidTokenError, WrongTokenCountError
from .messages.vector_4d import Vector4D
from .table import VectorTable
from .text import equals, format_vector, parse_vector

__all__ = [
    "FormatError",
    "InvalidTokenError",
    "NanPolicy",
    "Vector4Config",
    "Vector4D",
    "VectorTable",
    "WrongTokenCountError",
    "equals",
    "format_vector",
    "parse_vector",
]
