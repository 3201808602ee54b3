"""Operation kinds and resource descriptors understood by the builder."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .errors import UnknownOperationError

__all__ = ["Operation", "Resource"]


class Operation(str, Enum):
    GET_LIST = "GET_LIST"
    GET_ONE = "GET_ONE"
    GET_MANY = "GET_MANY"
    GET_MANY_REFERENCE = "GET_MANY_REFERENCE"
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    UPDATE_MANY = "UPDATE_MANY"
    DELETE = "DELETE"
    DELETE_MANY = "DELETE_MANY"

    @classmethod
    def coerce(cls, value: Any) -> "Operation":
        """Accept an ``Operation`` or its name; anything else is a caller bug."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise UnknownOperationError(value)


@dataclass(frozen=True)
class Resource:
    """Target resource, identified by its GraphQL object type name (``Post``)."""

    type_name: str

    @classmethod
    def coerce(cls, value: Any) -> "Resource":
        """Build a Resource from a name, a Resource or ``{"type": {"name": ...}}``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value:
            return cls(value)
        if isinstance(value, Mapping):
            type_info = value.get('type')
            name = type_info.get('name') if isinstance(type_info, Mapping) else value.get('name')
            if isinstance(name, str) and name:
                return cls(name)
        type_info = getattr(value, 'type', None)
        name = getattr(type_info, 'name', None)
        if isinstance(name, str) and name:
            return cls(name)
        raise TypeError(f"Unsupported resource descriptor: {value!r}")
