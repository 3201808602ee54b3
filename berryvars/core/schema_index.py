"""Read-only query surface over a GraphQL introspection document.

The document is parsed once into frozen dataclasses; type references keep
their NON_NULL/LIST wrapper chain and :meth:`SchemaIndex.unwrap` strips it
to reach the named type. Lookups never mutate the index, so one instance
can be shared by every builder in the process.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from graphql import GraphQLSchema, TypeKind, introspection_from_schema

from ..errors import IntrospectionFormatError, SchemaLookupError

__all__ = ['TypeRef', 'FieldDescriptor', 'TypeDescriptor', 'SchemaIndex', 'WRAPPER_KINDS']

logger = logging.getLogger(__name__)

WRAPPER_KINDS = frozenset({TypeKind.NON_NULL, TypeKind.LIST})


def _parse_kind(raw: Any) -> Optional[TypeKind]:
    if isinstance(raw, TypeKind):
        return raw
    if not isinstance(raw, str) or not raw:
        return None
    return TypeKind.__members__.get(raw.strip().upper())


@dataclass(frozen=True)
class TypeRef:
    """A possibly wrapped reference to a named type (``[Tag!]!``)."""

    kind: Optional[TypeKind]
    name: Optional[str] = None
    of_type: Optional['TypeRef'] = None

    @property
    def is_wrapper(self) -> bool:
        return self.kind in WRAPPER_KINDS

    @classmethod
    def parse(cls, raw: Any, *, where: str) -> 'TypeRef':
        if not isinstance(raw, Mapping):
            raise IntrospectionFormatError(f"Type reference of {where} must be an object, got {raw!r}")
        inner = raw.get('ofType')
        return cls(
            kind=_parse_kind(raw.get('kind')),
            name=raw.get('name') or None,
            of_type=cls.parse(inner, where=where) if inner is not None else None,
        )


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    type: Optional[TypeRef] = None

    @classmethod
    def parse(cls, raw: Any, *, owner: str) -> 'FieldDescriptor':
        if not isinstance(raw, Mapping) or not isinstance(raw.get('name'), str):
            raise IntrospectionFormatError(f"Field entry on type '{owner}' has no name: {raw!r}")
        name = raw['name']
        type_raw = raw.get('type')
        ref = TypeRef.parse(type_raw, where=f"'{owner}.{name}'") if type_raw is not None else None
        return cls(name=name, type=ref)


@dataclass(frozen=True)
class TypeDescriptor:
    """One entry of the introspection ``types`` list.

    ``fields`` is populated for output types, ``input_fields`` for input
    objects; both keep the document order.
    """

    name: str
    kind: Optional[TypeKind] = None
    fields: Tuple[FieldDescriptor, ...] = ()
    input_fields: Tuple[FieldDescriptor, ...] = ()

    @classmethod
    def parse(cls, raw: Any) -> 'TypeDescriptor':
        if not isinstance(raw, Mapping) or not isinstance(raw.get('name'), str) or not raw.get('name'):
            raise IntrospectionFormatError(f"Type entry has no name: {raw!r}")
        name = raw['name']
        return cls(
            name=name,
            kind=_parse_kind(raw.get('kind')),
            fields=tuple(FieldDescriptor.parse(f, owner=name) for f in (raw.get('fields') or ())),
            input_fields=tuple(FieldDescriptor.parse(f, owner=name) for f in (raw.get('inputFields') or ())),
        )

    def input_field(self, field_name: str) -> Optional[FieldDescriptor]:
        for f in self.input_fields:
            if f.name == field_name:
                return f
        return None


def _types_from_document(document: Any) -> List[Any]:
    """Locate the ``types`` list in the accepted document shapes."""
    if document is None:
        return []
    if isinstance(document, (list, tuple)):
        return list(document)
    if not isinstance(document, Mapping):
        raise IntrospectionFormatError(
            f"Introspection document must be a mapping or a list, got {type(document).__name__}"
        )
    if 'data' in document and isinstance(document.get('data'), Mapping):
        document = document['data']
    if '__schema' in document:
        document = document['__schema']
        if not isinstance(document, Mapping):
            raise IntrospectionFormatError("'__schema' must be an object")
    types = document.get('types', [])
    if types is None:
        return []
    if not isinstance(types, (list, tuple)):
        raise IntrospectionFormatError(f"'types' must be a list, got {type(types).__name__}")
    return list(types)


class SchemaIndex:
    """Name-indexed view of the types of an introspection document."""

    def __init__(self, types: Iterable[TypeDescriptor] = ()):
        self._types: Dict[str, TypeDescriptor] = {}
        for t in types:
            # first declaration wins, like a linear find over the list
            self._types.setdefault(t.name, t)

    @classmethod
    def from_introspection(cls, document: Any) -> 'SchemaIndex':
        """Parse ``{"types": [...]}``, ``{"__schema": ...}``, ``{"data": ...}`` or a bare list."""
        if isinstance(document, SchemaIndex):
            return document
        index = cls(TypeDescriptor.parse(raw) for raw in _types_from_document(document))
        logger.debug("schema index built with %d types", len(index))
        return index

    @classmethod
    def from_schema(cls, schema: Any) -> 'SchemaIndex':
        """Build an index from a graphql-core or Strawberry schema object."""
        if isinstance(schema, GraphQLSchema):
            return cls.from_introspection(introspection_from_schema(schema))
        inner = getattr(schema, '_schema', None)
        if isinstance(inner, GraphQLSchema):
            return cls.from_introspection(introspection_from_schema(inner))
        introspect = getattr(schema, 'introspect', None)
        if callable(introspect):
            return cls.from_introspection(introspect())
        raise TypeError(f"Cannot introspect schema object of type {type(schema).__name__}")

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def type_names(self) -> List[str]:
        return list(self._types)

    def find_type(self, name: Optional[str]) -> Optional[TypeDescriptor]:
        if not name:
            return None
        return self._types.get(name)

    def require_type(self, name: str, *, referenced_by: Optional[str] = None) -> TypeDescriptor:
        found = self.find_type(name)
        if found is None:
            raise SchemaLookupError(name, referenced_by=referenced_by)
        return found

    @staticmethod
    def unwrap(type_ref: Optional[TypeRef]) -> Optional[str]:
        """Strip NON_NULL/LIST layers and return the innermost type name."""
        named = SchemaIndex.named_ref(type_ref)
        return named.name if named is not None else None

    @staticmethod
    def named_ref(type_ref: Optional[TypeRef]) -> Optional[TypeRef]:
        ref = type_ref
        while ref is not None and ref.is_wrapper and ref.of_type is not None:
            ref = ref.of_type
        return ref

    @staticmethod
    def named_kind(type_ref: Optional[TypeRef]) -> Optional[TypeKind]:
        named = SchemaIndex.named_ref(type_ref)
        return named.kind if named is not None else None

    @staticmethod
    def is_list(type_ref: Optional[TypeRef]) -> bool:
        ref = type_ref
        while ref is not None:
            if ref.kind is TypeKind.LIST:
                return True
            ref = ref.of_type
        return False

    def input_field_names(self, type_name: Optional[str]) -> frozenset:
        t = self.find_type(type_name)
        if t is None:
            return frozenset()
        return frozenset(f.name for f in t.input_fields)

    def input_field(self, type_name: Optional[str], field_name: str) -> Optional[FieldDescriptor]:
        t = self.find_type(type_name)
        return t.input_field(field_name) if t is not None else None

    def has_input_field(self, type_name: Optional[str], field_name: str) -> bool:
        return self.input_field(type_name, field_name) is not None

    def input_field_target(self, type_name: str, field_name: str) -> Optional[str]:
        """Named type of ``type_name.field_name`` (``AuthorCreateOneInput`` for ``author``)."""
        f = self.input_field(type_name, field_name)
        return self.unwrap(f.type) if f is not None else None
