"""Primitive schema type names and what the explorer derives from them."""

from enum import Enum
from typing import Any


class PrimitiveType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, name: str | None) -> "PrimitiveType":
        """Map a declared type name to a known type, UNKNOWN for anything else."""
        match (name or "").lower():
            case "string":
                return cls.STRING
            case "integer":
                return cls.INTEGER
            case "float":
                return cls.FLOAT
            case "number":
                return cls.NUMBER
            case "boolean":
                return cls.BOOLEAN
            case "array":
                return cls.ARRAY
            case "object":
                return cls.OBJECT
            case _:
                return cls.UNKNOWN

    @property
    def label_class(self) -> str:
        match self:
            case PrimitiveType.STRING:
                return "label-success"
            case PrimitiveType.INTEGER:
                return "label-primary"
            case PrimitiveType.FLOAT | PrimitiveType.NUMBER:
                return "label-info"
            case PrimitiveType.BOOLEAN:
                return "label-danger"
            case _:
                return "label-default"

    @property
    def example(self) -> Any:
        """Placeholder value used when sketching an example request body."""
        match self:
            case PrimitiveType.STRING:
                return ""
            case PrimitiveType.INTEGER:
                return 0
            case PrimitiveType.FLOAT | PrimitiveType.NUMBER:
                return 0.0
            case PrimitiveType.BOOLEAN:
                return False
            case PrimitiveType.ARRAY:
                return []
            case PrimitiveType.OBJECT:
                return {}
            case _:
                return None


def property_type(descriptor: dict | None) -> PrimitiveType:
    """Return the primitive type of a property descriptor like ``{"type": "string"}``."""
    if not isinstance(descriptor, dict):
        return PrimitiveType.UNKNOWN
    if "$ref" in descriptor:
        return PrimitiveType.OBJECT
    return PrimitiveType.parse(descriptor.get("type"))
