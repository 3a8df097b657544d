"""Partition settings loading and validation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator

from .partition import PartitionEngine


class PartitionSettings(BaseModel):
    """Engine parameters as read from a configuration file."""

    model_config = ConfigDict(extra="forbid")

    size: StrictInt
    step: Optional[StrictInt] = None
    pad: Optional[List[Any]] = None
    limit: Optional[StrictInt] = None

    @field_validator("size", "step")
    @classmethod
    def _ensure_positive(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("must be a positive integer")
        return value

    @field_validator("limit")
    @classmethod
    def _ensure_non_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("must not be negative")
        return value

    def build(self, source: Iterable[Any]) -> PartitionEngine[Any]:
        return PartitionEngine(source, self.size, self.step, self.pad)


@dataclass
class ValidationResult:
    path: str
    errors: list[str]
    normalized: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "errors": self.errors,
            "normalized": self.normalized,
        }


def _read_mapping(path: str | Path) -> Mapping[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    loaded = yaml.safe_load(text) if path.suffix.lower() in {".yml", ".yaml"} else json.loads(text)
    if not isinstance(loaded, Mapping):
        raise ValueError("Partition config file must contain a mapping/object at the top level")
    section = loaded.get("partition", loaded)
    if not isinstance(section, Mapping):
        raise ValueError("The 'partition' section must be a mapping/object")
    return section


def load_partition_config(path: str | Path) -> PartitionSettings:
    """Load partition settings from YAML or JSON.

    Settings may sit at the top level or below a ``partition:`` key.
    """

    return PartitionSettings.model_validate(dict(_read_mapping(path)))


def validate_config_file(path: str | Path) -> ValidationResult:
    """Validate a configuration file without raising on schema errors."""

    raw = dict(_read_mapping(path))
    try:
        settings = PartitionSettings.model_validate(raw)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}" for err in exc.errors()
        ]
        return ValidationResult(path=str(path), errors=errors, normalized=raw)
    normalized = settings.model_dump()
    if normalized["step"] is None:
        normalized["step"] = settings.size
    return ValidationResult(path=str(path), errors=[], normalized=normalized)
