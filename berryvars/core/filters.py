from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..input_converter import convert_pagination_input, convert_sort_input
from ..naming import split_path
from .schema_index import SchemaIndex

__all__ = [
    'FilterContext',
    'FILTER_RULES',
    'register_filter_rule',
    'build_where',
    'build_pagination',
    'build_order_by',
    'build_reference_where',
    'expand_path',
    'deep_merge',
]

logger = logging.getLogger(__name__)


class FilterContext:
    """What a filter rule may consult: the schema, the Where input and the config."""

    def __init__(self, index: SchemaIndex, type_name: str, config: BuilderConfig = DEFAULT_CONFIG):
        self.index = index
        self.type_name = type_name
        self.config = config
        self.where_type = config.naming.where_input(type_name)

    def has_where_field(self, name: str) -> bool:
        return self.index.has_input_field(self.where_type, name)


# A rule returns the where fragment for (key, value), or None to pass.
FilterRule = Callable[[FilterContext, str, Any], Optional[Dict[str, Any]]]


def expand_path(path: str, value: Any) -> Dict[str, Any]:
    """``expand_path('author.id', 'a1') == {'author': {'id': 'a1'}}``."""
    parts = split_path(path)
    if not parts:
        return {}
    out: Any = value
    for part in reversed(parts):
        out = {part: out}
    return out


def _copy_tree(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy_tree(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_copy_tree(v) for v in value]
    return value


def deep_merge(base: Dict[str, Any], extra: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``extra`` into ``base`` in place, recursing into nested mappings.

    Values taken from ``extra`` are copied, so later merges never reach back
    into the caller's data.
    """
    for key, value in extra.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            deep_merge(current, value)
        else:
            base[key] = _copy_tree(value)
    return base


def _ids_rule(ctx: FilterContext, key: str, value: Any) -> Optional[Dict[str, Any]]:
    if key != 'ids':
        return None
    return {ctx.config.naming.in_filter(ctx.config.id_field): value}


def _some_list_rule(ctx: FilterContext, key: str, value: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(value, (list, tuple)) or '.' in key:
        return None
    some = ctx.config.naming.some_filter(key)
    if not ctx.has_where_field(some):
        return None
    return {some: {ctx.config.naming.in_filter(ctx.config.id_field): list(value)}}


def _some_object_rule(ctx: FilterContext, key: str, value: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(value, Mapping) or '.' in key:
        return None
    some = ctx.config.naming.some_filter(key)
    if not ctx.has_where_field(some):
        # plain nesting: {author: {name: 'x'}}
        return {key: _copy_tree(value)}
    inner: Dict[str, Any] = {}
    for k, v in value.items():
        if isinstance(v, (list, tuple)):
            inner[ctx.config.naming.in_filter(k)] = list(v)
        else:
            inner[k] = v
    return {some: inner}


def _dotted_rule(ctx: FilterContext, key: str, value: Any) -> Optional[Dict[str, Any]]:
    if '.' not in key:
        return None
    return expand_path(key, value)


FILTER_RULES: List[Tuple[str, FilterRule]] = [
    ('ids', _ids_rule),
    ('some_list', _some_list_rule),
    ('some_object', _some_object_rule),
    ('dotted', _dotted_rule),
]


def register_filter_rule(name: str, rule: FilterRule, *, before: Optional[str] = None) -> None:
    """Add a rule, optionally ahead of an existing one."""
    if before is None:
        FILTER_RULES.append((name, rule))
        return
    for i, (existing, _) in enumerate(FILTER_RULES):
        if existing == before:
            FILTER_RULES.insert(i, (name, rule))
            return
    raise KeyError(before)


def build_where(
    index: SchemaIndex,
    type_name: str,
    filter_values: Optional[Mapping[str, Any]],
    config: BuilderConfig = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """Translate a list filter into a where clause for ``<type_name>WhereInput``.

    The first matching rule wins; keys no rule claims pass through as
    equality filters.
    """
    where: Dict[str, Any] = {}
    if not filter_values:
        return where
    ctx = FilterContext(index, type_name, config)
    for key, value in filter_values.items():
        fragment = None
        for _name, rule in FILTER_RULES:
            fragment = rule(ctx, key, value)
            if fragment is not None:
                break
        if fragment is None:
            fragment = {key: value}
        deep_merge(where, fragment)
    return where


def build_pagination(pagination: Any) -> Dict[str, Any]:
    p = convert_pagination_input(pagination)
    if p is None:
        return {}
    return {'first': p.first, 'skip': p.skip}


def build_order_by(sort: Any, config: BuilderConfig = DEFAULT_CONFIG) -> Dict[str, Any]:
    s = convert_sort_input(sort)
    if s is None:
        return {}
    return {'orderBy': config.naming.order_by(s.field, s.order)}


def build_reference_where(target: str, id_value: Any) -> Dict[str, Any]:
    """Where clause of a reference query: ``author.id`` -> ``{author: {id: ...}}``."""
    where = expand_path(target, id_value)
    if not where:
        logger.debug("empty reference target %r", target)
    return where
