import struct
from collections.abc import Mapping, Sequence
from typing import Any, Self, cast

import msgpack
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..codec import Components, components_equal, format_components, parse_components
from ..constants import NUM_COMPONENTS, SKIP_VALIDATION, ComponentName, NanPolicy
from ..float32 import to_float32

_BINARY = struct.Struct("<4f")


def _as_mapping(values: Sequence[float]) -> dict[str, float]:
    if len(values) != NUM_COMPONENTS:
        raise ValueError(f"Need {NUM_COMPONENTS} components, received {len(values)}")
    return {name.value: value for name, value in zip(ComponentName, values, strict=True)}


class Vector4D(BaseModel):
    """Immutable vector of four binary32 components.

    Besides keyword arguments, validation accepts the canonical text form
    (``"1.1 2.2 3.3 4.4"``) and a four-element sequence, so the type can be
    embedded directly in other models and config files. ``str(v)`` gives the
    canonical text form and ``Vector4D.parse`` reads it back exactly.
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float
    w: float

    @model_validator(mode="before")
    @classmethod
    def accept_text_and_arrays(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _as_mapping(parse_components(data))
        if isinstance(data, (list, tuple)):
            return _as_mapping(data)
        return data

    @field_validator("x", "y", "z", "w")
    @classmethod
    def round_to_float32(cls, v: float) -> float:
        return to_float32(v)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy the vector; updated components are validated and rounded to binary32."""
        if not update:
            return super().model_copy(deep=deep)
        return self.model_validate({**self.model_dump(), **update})

    @classmethod
    def of(cls, x: float, y: float, z: float, w: float) -> "Vector4D":
        return cls(x=x, y=y, z=z, w=w)

    @classmethod
    def parse(cls, text: str) -> "Vector4D":
        """Parse the canonical text form.

        Raises:
            WrongTokenCountError: If the text does not hold exactly four tokens.
            InvalidTokenError: For the first token that is not a valid number.
        """
        return cls.of(*parse_components(text))

    def __str__(self) -> str:
        return format_components(self.to_array())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector4D):
            return NotImplemented
        return components_equal(self.to_array(), other.to_array())

    def __hash__(self) -> int:
        return hash(self.to_array())

    def equals(self, other: "Vector4D", nan_policy: NanPolicy = NanPolicy.IEEE) -> bool:
        return components_equal(self.to_array(), other.to_array(), nan_policy)

    def to_array(self) -> Components:
        return self.x, self.y, self.z, self.w

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector4D":
        return cls(**_as_mapping(values))

    def to_bytes(self) -> bytes:
        return cast(bytes, msgpack.packb(self.model_dump()))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Vector4D":
        if SKIP_VALIDATION:
            return cls.model_construct(**msgpack.unpackb(data))
        return cls.model_validate(msgpack.unpackb(data))

    def to_binary(self) -> bytes:
        """Pack the vector into 16 bytes (4 floats, little-endian)."""
        return _BINARY.pack(*self.to_array())

    @classmethod
    def from_binary(cls, data: bytes, offset: int = 0) -> "Vector4D":
        """Unpack a vector from 16 bytes (4 floats, little-endian)."""
        if len(data) - offset < _BINARY.size:
            raise ValueError(f"Not enough bytes to unpack Vector4D. Need {_BINARY.size}.")
        return cls.from_array(_BINARY.unpack_from(data, offset))
