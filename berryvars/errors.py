"""Exception hierarchy for berryvars.

Missing schema capabilities are not errors: the builder drops the affected
field and logs it. The exceptions below cover caller bugs and malformed
introspection documents, which must not be masked by an empty result.
"""
from __future__ import annotations

__all__ = [
    'BerryVarsError',
    'UnknownOperationError',
    'SchemaLookupError',
    'IntrospectionFormatError',
    'InvalidParamsError',
]


class BerryVarsError(Exception):
    """Base class for all berryvars errors."""


class UnknownOperationError(BerryVarsError, ValueError):
    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"Unknown operation kind: {operation!r}")


class SchemaLookupError(BerryVarsError, KeyError):
    """A type or field required to proceed is absent from the schema."""

    def __init__(self, type_name: str, field_name: str | None = None, *, referenced_by: str | None = None):
        self.type_name = type_name
        self.field_name = field_name
        self.referenced_by = referenced_by
        if field_name is not None:
            msg = f"Field '{field_name}' not found on type '{type_name}'"
        else:
            msg = f"Type '{type_name}' not found in introspection document"
        if referenced_by:
            msg += f" (referenced by {referenced_by})"
        super().__init__(msg)

    def __str__(self) -> str:  # KeyError quotes its message otherwise
        return str(self.args[0]) if self.args else ''


class IntrospectionFormatError(BerryVarsError, ValueError):
    """The introspection document does not have the expected shape."""


class InvalidParamsError(BerryVarsError, ValueError):
    """Operation parameters are malformed (bad pagination, sort or missing ids)."""
