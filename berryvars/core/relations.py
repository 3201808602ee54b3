"""Relation sub-mutation shaping (connect / create / disconnect / update).

The resolver receives the generated relation input type of one field
(``AuthorCreateOneInput``, ``TagUpdateManyInput``) and decides which verbs
to emit from what the payload carries and what that input type offers.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from graphql import TypeKind

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..naming import ids_sibling
from .diff import compute_add_remove_update, compute_fields_to_add, compute_nested_fields_to_update
from .schema_index import SchemaIndex

__all__ = ['RelationResolver', 'relation_ids', 'relation_items']

logger = logging.getLogger(__name__)

CONNECT = 'connect'
CREATE = 'create'
DISCONNECT = 'disconnect'
UPDATE = 'update'


def relation_items(data: Optional[Mapping[str, Any]], field: str) -> List[Any]:
    value = (data or {}).get(field)
    return list(value) if isinstance(value, (list, tuple)) else []


def relation_ids(data: Optional[Mapping[str, Any]], field: str, config: BuilderConfig = DEFAULT_CONFIG) -> List[Any]:
    """Membership of a to-many relation.

    ``<field>Ids`` is authoritative; without it the ids of the ``<field>``
    items are used (bare scalars count as ids).
    """
    data = data or {}
    ids = data.get(ids_sibling(field, config.naming))
    if isinstance(ids, (list, tuple)):
        return list(ids)
    out: List[Any] = []
    for item in relation_items(data, field):
        if isinstance(item, Mapping):
            if item.get(config.id_field) is not None:
                out.append(item[config.id_field])
        elif item is not None:
            out.append(item)
    return out


class RelationResolver:
    def __init__(self, index: SchemaIndex, config: BuilderConfig = DEFAULT_CONFIG):
        self.index = index
        self.config = config

    def verbs(self, relation_type: str) -> frozenset:
        return self.index.input_field_names(relation_type)

    def filter_scalars(self, type_name: str, value: Mapping[str, Any]) -> Dict[str, Any]:
        """Keep the keys of ``value`` declared as non-relation input fields of ``type_name``."""
        out: Dict[str, Any] = {}
        dropped: List[str] = []
        for k, v in value.items():
            f = self.index.input_field(type_name, k)
            if f is None or SchemaIndex.named_kind(f.type) is TypeKind.INPUT_OBJECT:
                dropped.append(k)
            else:
                out[k] = v
        if dropped:
            logger.debug("dropping %s from inline %s", dropped, type_name)
        return out

    def resolve_to_one(
        self,
        relation_type: str,
        value: Optional[Mapping[str, Any]],
        previous: Optional[Mapping[str, Any]] = None,
        *,
        allow_disconnect: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """Shape a to-one relation value; None means the field is dropped.

        A value carrying an id always connects, even when other scalars are
        present. Without an id the value is created inline.
        """
        verbs = self.verbs(relation_type)
        id_field = self.config.id_field
        if value is None:
            if allow_disconnect and previous is not None and DISCONNECT in verbs:
                return {DISCONNECT: True}
            return None
        if value.get(id_field) is not None:
            if CONNECT in verbs:
                return {CONNECT: {id_field: value[id_field]}}
            logger.debug("%s offers no connect; dropping relation value", relation_type)
            return None
        if CREATE in verbs:
            create_type = self.index.input_field_target(relation_type, CREATE)
            self.index.require_type(create_type, referenced_by=f"{relation_type}.{CREATE}")
            return {CREATE: self.filter_scalars(create_type, value)}
        logger.debug("%s offers neither connect nor create; dropping relation value", relation_type)
        return None

    def resolve_to_many_create(
        self,
        relation_type: str,
        ids: Sequence[Any],
        items: Sequence[Any] = (),
    ) -> Optional[Dict[str, Any]]:
        """Connect every id of a to-many relation on create."""
        id_field = self.config.id_field
        if any(isinstance(i, Mapping) and i.get(id_field) is None for i in items):
            # creating related records from a list is not supported; ids stay authoritative
            logger.debug("%s: items without %s are not created", relation_type, id_field)
        if CONNECT not in self.verbs(relation_type):
            logger.debug("%s offers no connect; dropping relation value", relation_type)
            return None
        return {CONNECT: compute_fields_to_add((), ids, id_field)}

    def resolve_to_many_update(
        self,
        relation_type: str,
        new_ids: Sequence[Any],
        old_ids: Sequence[Any],
        new_items: Sequence[Any] = (),
        old_items: Sequence[Any] = (),
    ) -> Dict[str, Any]:
        id_field = self.config.id_field
        diff = compute_add_remove_update(old_ids, new_ids, id_field)
        logger.debug(
            "%s: connect=%d disconnect=%d kept=%d",
            relation_type, len(diff.to_add), len(diff.to_remove), len(diff.to_update),
        )
        return {
            CONNECT: diff.to_add,
            DISCONNECT: diff.to_remove,
            UPDATE: compute_nested_fields_to_update(diff.to_update, old_items, new_items, id_field),
        }
