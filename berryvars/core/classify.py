"""Per-field classification of write payloads.

Every top-level payload key gets an explicit decision before any output is
built: keep it (as a scalar, a to-one or a to-many relation), drop it
silently, or fail because the schema itself is inconsistent.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Mapping, Optional

from graphql import TypeKind

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..naming import ids_sibling, relation_for_ids_key
from .schema_index import SchemaIndex

__all__ = ['FieldAction', 'FieldShape', 'FieldClassification', 'classify_field', 'classify_payload']


class FieldAction(Enum):
    KEEP = 'keep'
    DROP = 'drop'
    FATAL = 'fatal'


class FieldShape(Enum):
    SCALAR = 'scalar'
    TO_ONE = 'to_one'
    TO_MANY = 'to_many'


@dataclass(frozen=True)
class FieldClassification:
    """Decision for one payload key.

    Attributes:
        key: Key as found in the payload (``tagsIds``).
        field: Input field written to the output (``tags``).
        action: KEEP, DROP or FATAL.
        shape: How a kept field is rendered; None unless KEEP.
        reason: Human readable explanation, used for logs and errors.
        missing_type: For FATAL, the dangling type name.
    """

    key: str
    field: str
    action: FieldAction
    shape: Optional[FieldShape] = None
    reason: str = ''
    missing_type: Optional[str] = None

    @property
    def kept(self) -> bool:
        return self.action is FieldAction.KEEP


def _keep(key: str, field: str, shape: FieldShape, reason: str = '') -> FieldClassification:
    return FieldClassification(key=key, field=field, action=FieldAction.KEEP, shape=shape, reason=reason)


def _drop(key: str, reason: str) -> FieldClassification:
    return FieldClassification(key=key, field=key, action=FieldAction.DROP, reason=reason)


def classify_field(
    index: SchemaIndex,
    input_type: str,
    key: str,
    data: Mapping[str, Any],
    *,
    drop_id: bool = False,
    config: BuilderConfig = DEFAULT_CONFIG,
) -> FieldClassification:
    """Classify ``data[key]`` against the write-input type ``input_type``."""
    if drop_id and key == config.id_field:
        return _drop(key, 'immutable id')
    value = data.get(key)
    declared = index.input_field_names(input_type)
    if index.find_type(input_type) is None:
        return _drop(key, f"no input type '{input_type}'")

    relation = relation_for_ids_key(key, config.naming)
    if relation is not None and key not in declared:
        if isinstance(data.get(relation), (list, tuple)):
            return _drop(key, f"ids sibling of '{relation}'")
        if relation in declared:
            f = index.input_field(input_type, relation)
            if SchemaIndex.named_kind(f.type if f else None) is TypeKind.INPUT_OBJECT:
                return _classify_relation(index, input_type, key, relation, list(value or ()))

    if key not in declared:
        return _drop(key, f"not declared on '{input_type}'")
    if not isinstance(value, (list, tuple)) and isinstance(data.get(ids_sibling(key, config.naming)), (list, tuple)):
        # membership comes from the ids list
        return _classify_relation(index, input_type, key, key, [])
    return _classify_relation(index, input_type, key, key, value)


def _classify_relation(index: SchemaIndex, input_type: str, key: str, field: str, value: Any) -> FieldClassification:
    f = index.input_field(input_type, field)
    kind = SchemaIndex.named_kind(f.type if f else None)
    if kind is not TypeKind.INPUT_OBJECT:
        return _keep(key, field, FieldShape.SCALAR)
    target = SchemaIndex.unwrap(f.type)
    if index.find_type(target) is None:
        return FieldClassification(
            key=key, field=field, action=FieldAction.FATAL,
            reason=f"'{input_type}.{field}' references unknown type '{target}'",
            missing_type=target or '',
        )
    if isinstance(value, (list, tuple)):
        return _keep(key, field, FieldShape.TO_MANY)
    if value is None or isinstance(value, Mapping):
        return _keep(key, field, FieldShape.TO_ONE)
    return _drop(key, f"scalar value for relation input '{target}'")


def classify_payload(
    index: SchemaIndex,
    input_type: str,
    data: Mapping[str, Any],
    *,
    drop_id: bool = False,
    config: BuilderConfig = DEFAULT_CONFIG,
) -> Iterator[FieldClassification]:
    """Classify every key of ``data`` in payload order."""
    seen: List[str] = []
    for key in data:
        c = classify_field(index, input_type, key, data, drop_id=drop_id, config=config)
        if c.kept:
            if c.field in seen:
                continue
            seen.append(c.field)
        yield c
