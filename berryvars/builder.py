"""Variable builder: one admin CRUD intent in, one GraphQL variables dict out.

Usage::

    build = build_variables(introspection_result)
    build({'type': {'name': 'Post'}}, 'GET_LIST', {
        'filter': {'ids': ['a', 'b']},
        'pagination': {'page': 2, 'perPage': 5},
        'sort': {'field': 'createdAt', 'order': 'DESC'},
    })
    # {'where': {'id_in': ['a', 'b']}, 'first': 5, 'skip': 5, 'orderBy': 'createdAt_DESC'}

The builder keeps no per-call state; a single instance can serve concurrent
callers.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .config import DEFAULT_CONFIG, BuilderConfig
from .core.classify import FieldAction, FieldShape, classify_payload
from .core.filters import build_order_by, build_pagination, build_reference_where, build_where, deep_merge
from .core.relations import RelationResolver, relation_ids, relation_items
from .core.schema_index import SchemaIndex
from .errors import InvalidParamsError, SchemaLookupError, UnknownOperationError
from .input_converter import convert_params
from .operations import Operation, Resource

__all__ = ['VariableBuilder', 'build_variables']

logger = logging.getLogger(__name__)

Handler = Callable[[Resource, Dict[str, Any]], Dict[str, Any]]


class VariableBuilder:
    def __init__(self, introspection: Any, config: Optional[BuilderConfig] = None):
        if isinstance(introspection, SchemaIndex):
            self.index = introspection
        else:
            self.index = SchemaIndex.from_introspection(introspection)
        self.config = config or DEFAULT_CONFIG
        self.resolver = RelationResolver(self.index, self.config)
        self._handlers: Dict[Operation, Handler] = {
            Operation.GET_LIST: self._get_list,
            Operation.GET_ONE: self._get_one,
            Operation.GET_MANY: self._get_many,
            Operation.GET_MANY_REFERENCE: self._get_many_reference,
            Operation.CREATE: self._create,
            Operation.UPDATE: self._update,
            Operation.UPDATE_MANY: self._update_many,
            Operation.DELETE: self._delete,
            Operation.DELETE_MANY: self._delete_many,
        }

    def __call__(self, resource: Any, operation: Any, params: Any = None) -> Dict[str, Any]:
        op = Operation.coerce(operation)
        handler = self._handlers.get(op)
        if handler is None:
            raise UnknownOperationError(operation)
        return handler(Resource.coerce(resource), convert_params(params))

    build = __call__

    # --- reads ---------------------------------------------------------------

    def _get_list(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        variables: Dict[str, Any] = {
            'where': build_where(self.index, resource.type_name, params.get('filter'), self.config),
        }
        variables.update(build_pagination(params.get('pagination')))
        variables.update(build_order_by(params.get('sort'), self.config))
        return variables

    def _get_one(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        return {'where': self._where_id(params)}

    def _get_many(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        return {'where': self._where_ids(params)}

    def _get_many_reference(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        target = params.get('target')
        if not isinstance(target, str) or not target.strip('.'):
            raise InvalidParamsError("GET_MANY_REFERENCE requires a 'target' field path")
        if 'id' not in params:
            raise InvalidParamsError("GET_MANY_REFERENCE requires an 'id'")
        where = build_where(self.index, resource.type_name, params.get('filter'), self.config)
        deep_merge(where, build_reference_where(target, params['id']))
        variables: Dict[str, Any] = {'where': where}
        variables.update(build_pagination(params.get('pagination')))
        variables.update(build_order_by(params.get('sort'), self.config))
        return variables

    # --- writes --------------------------------------------------------------

    def _create(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        input_type = self.config.naming.create_input(resource.type_name)
        return {'data': self._build_data(input_type, params.get('data') or {}, None, update=False)}

    def _update(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        data = params.get('data') or {}
        id_field = self.config.id_field
        id_value = data.get(id_field)
        if id_value is None:
            id_value = params.get('id')
        if id_value is None:
            raise InvalidParamsError(f"UPDATE requires '{id_field}' in data or params")
        input_type = self.config.naming.update_input(resource.type_name)
        previous = params.get('previousData') or {}
        return {
            'where': {id_field: id_value},
            'data': self._build_data(input_type, data, previous, update=True),
        }

    def _update_many(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        input_type = self.config.naming.update_many_input(resource.type_name)
        return {
            'where': self._where_ids(params),
            'data': self._build_data(input_type, params.get('data') or {}, None, update=True),
        }

    def _delete(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        return {'where': self._where_id(params)}

    def _delete_many(self, resource: Resource, params: Dict[str, Any]) -> Dict[str, Any]:
        return {'where': self._where_ids(params)}

    # --- helpers -------------------------------------------------------------

    def _where_id(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        if params.get('id') is None:
            raise InvalidParamsError("Operation requires an 'id'")
        return {self.config.id_field: params['id']}

    def _where_ids(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        ids = params.get('ids')
        if not isinstance(ids, (list, tuple)):
            raise InvalidParamsError("Operation requires an 'ids' list")
        return {self.config.naming.in_filter(self.config.id_field): list(ids)}

    def _build_data(
        self,
        input_type: str,
        data: Mapping[str, Any],
        previous: Optional[Mapping[str, Any]],
        *,
        update: bool,
    ) -> Dict[str, Any]:
        """Shape a write payload against ``input_type``.

        Scalars declared on the input type are copied, relations go through
        the resolver, everything else is dropped.
        """
        out: Dict[str, Any] = {}
        for c in classify_payload(self.index, input_type, data, drop_id=update, config=self.config):
            if c.action is FieldAction.FATAL:
                raise SchemaLookupError(c.missing_type or '', referenced_by=f"{input_type}.{c.field}")
            if c.action is FieldAction.DROP:
                logger.debug("drop %s: %s", c.key, c.reason)
                continue
            if c.shape is FieldShape.SCALAR:
                out[c.field] = data[c.key]
                continue
            relation_type = self.index.input_field_target(input_type, c.field)
            if c.shape is FieldShape.TO_ONE:
                value = self.resolver.resolve_to_one(
                    relation_type,
                    data.get(c.field),
                    (previous or {}).get(c.field),
                    allow_disconnect=update,
                )
            elif previous is not None:
                value = self.resolver.resolve_to_many_update(
                    relation_type,
                    relation_ids(data, c.field, self.config),
                    relation_ids(previous, c.field, self.config),
                    relation_items(data, c.field),
                    relation_items(previous, c.field),
                )
            else:
                value = self.resolver.resolve_to_many_create(
                    relation_type,
                    relation_ids(data, c.field, self.config),
                    relation_items(data, c.field),
                )
            if value is not None:
                out[c.field] = value
        return out


def build_variables(introspection: Any, config: Optional[BuilderConfig] = None) -> VariableBuilder:
    """Return a builder callable ``(resource, operation, params) -> variables``."""
    return VariableBuilder(introspection, config)
