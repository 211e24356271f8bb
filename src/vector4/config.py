"""
Configuration module for vector4.

Loads configuration from a YAML file with Pydantic validation.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from .constants import NanPolicy


class ComparisonConfig(BaseModel):
    nan_policy: NanPolicy = NanPolicy.IEEE


class TableConfig(BaseModel):
    sort_keys: bool = True


class Vector4Config(BaseModel):
    comparison: ComparisonConfig = ComparisonConfig()
    table: TableConfig = TableConfig()

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "Vector4Config":
        """Load configuration from a YAML file.

        Sections missing from the file, or a missing path, fall back to defaults.

        Raises:
            FileNotFoundError: If ``path`` is given but does not exist.
            ValidationError: If a value has the wrong type or an unknown NaN policy.
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls(**data)
