"""
Base domain model with camelCase JSON compatibility.

Report formatters and the ETL collaborators consume analysis and remediation
results as camelCase JSON. All domain models inherit from BaseDomainModel.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T", bound="BaseDomainModel")


def to_camel_case(snake_str: str) -> str:
    """
    Convert snake_case to camelCase.

    Examples:
        >>> to_camel_case("object_name")
        'objectName'
        >>> to_camel_case("readiness_score")
        'readinessScore'
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def _serialize(value: Any) -> Any:
    if isinstance(value, BaseDomainModel):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted(_serialize(item) for item in value)
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


@dataclass
class BaseDomainModel:
    """
    Base class for all domain models.

    Provides JSON compatibility:
    - to_json() serializes to camelCase
    - from_json() deserializes flat camelCase JSON
    - Enum values are serialized as their raw values
    - Sets are serialized as sorted lists
    """

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize to camelCase JSON.

        Returns:
            Dictionary with camelCase keys and JSON-safe values
        """
        result: Dict[str, Any] = {}

        for field in fields(self):
            value = getattr(self, field.name)
            result[to_camel_case(field.name)] = None if value is None else _serialize(value)

        return result

    @classmethod
    def from_json(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Deserialize from camelCase JSON (flat models only).

        Nested models override this in their subclass.

        Args:
            data: Dictionary with camelCase keys

        Returns:
            Instance of the domain model

        Raises:
            ValueError: If required fields are missing
        """
        kwargs: Dict[str, Any] = {}

        for field in fields(cls):
            if not field.init:
                continue
            json_key = to_camel_case(field.name)

            if json_key not in data:
                if field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING:  # type: ignore[attr-defined]
                    continue
                raise ValueError(f"Missing required field: {json_key}")

            kwargs[field.name] = data[json_key]

        return cls(**kwargs)
