"""Named vectors stored as text in a YAML mapping.

A table file maps names to vectors in their canonical text form::

    gravity: "0 -9.81 0 0"
    tint: "1 0.5 0.25 1"

Entries may also be written as four-element YAML lists.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_serializer

from .config import Vector4Config
from .errors import FormatError
from .messages.vector_4d import Vector4D
from .text import equals, format_vector

logger = logging.getLogger(__name__)


def _parse_entry(name: str, raw: Any) -> Vector4D:
    try:
        if isinstance(raw, list):
            return Vector4D.from_array(raw)
        return Vector4D.parse(str(raw))
    except (ValueError, ValidationError) as e:
        raise FormatError(f"{name}: {e}") from e


class VectorTable(BaseModel):
    entries: dict[str, Vector4D] = Field(default_factory=dict)

    @field_serializer("entries")
    def serialize_entries(self, entries: dict[str, Vector4D]) -> dict[str, str]:
        return {name: format_vector(value) for name, value in entries.items()}

    @classmethod
    def from_yaml(cls, path: Path | str) -> "VectorTable":
        """Load a table from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the document is not a mapping.
            FormatError: If an entry is not a valid vector; the message starts
                with the entry name and the original error is the cause.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Vector table not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

        entries: dict[str, Vector4D] = {}
        for name, raw in data.items():
            entries[str(name)] = _parse_entry(str(name), raw)
            logger.debug(f"[TABLE] {name} = {entries[str(name)]}")

        logger.info(f"Loaded {len(entries)} vectors from {path}")
        return cls(entries=entries)

    def to_yaml(self, path: Path | str, config: Vector4Config | None = None) -> None:
        """Write the table as a YAML mapping of canonical text forms."""
        config = config or Vector4Config()
        path = Path(path)

        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.model_dump()["entries"], f, sort_keys=config.table.sort_keys)

        logger.info(f"Saved {len(self.entries)} vectors to {path}")

    def diff(self, other: "VectorTable", config: Vector4Config | None = None) -> list[str]:
        """Return the sorted names that were added, removed or changed."""
        config = config or Vector4Config()
        changed = set(self.entries.keys() ^ other.entries.keys())
        for name in self.entries.keys() & other.entries.keys():
            if not equals(self.entries[name], other.entries[name], config.comparison.nan_policy):
                changed.add(name)
        return sorted(changed)
