"""Add/remove/update computation for to-many relation updates.

Membership is compared on the authoritative id lists; items kept on both
sides get a shallow scalar diff so edits made inline on related records are
sent back as nested ``update`` entries.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

__all__ = [
    'RelationDiff',
    'compute_fields_to_add',
    'compute_fields_to_remove',
    'compute_fields_to_update',
    'compute_add_remove_update',
    'compute_nested_fields_to_update',
    'object_difference',
    'find_by_id',
]

_MISSING = object()


@dataclass
class RelationDiff:
    to_add: List[Dict[str, Any]] = field(default_factory=list)
    to_remove: List[Dict[str, Any]] = field(default_factory=list)
    to_update: List[Dict[str, Any]] = field(default_factory=list)


def _format_id(value: Any, id_field: str = 'id') -> Dict[str, Any]:
    return {id_field: value}


def _unique(ids: Iterable[Any]) -> List[Any]:
    out: List[Any] = []
    for i in ids:
        if i not in out:
            out.append(i)
    return out


def compute_fields_to_add(old_ids: Sequence[Any], new_ids: Sequence[Any], id_field: str = 'id') -> List[Dict[str, Any]]:
    """Ids in ``new_ids`` but not in ``old_ids``, in ``new_ids`` order."""
    old = list(old_ids or ())
    return [_format_id(i, id_field) for i in _unique(new_ids or ()) if i not in old]


def compute_fields_to_remove(old_ids: Sequence[Any], new_ids: Sequence[Any], id_field: str = 'id') -> List[Dict[str, Any]]:
    """Ids in ``old_ids`` but not in ``new_ids``, in ``old_ids`` order."""
    new = list(new_ids or ())
    return [_format_id(i, id_field) for i in _unique(old_ids or ()) if i not in new]


def compute_fields_to_update(old_ids: Sequence[Any], new_ids: Sequence[Any], id_field: str = 'id') -> List[Dict[str, Any]]:
    """Ids present on both sides, in ``old_ids`` order."""
    new = list(new_ids or ())
    return [_format_id(i, id_field) for i in _unique(old_ids or ()) if i in new]


def compute_add_remove_update(old_ids: Sequence[Any], new_ids: Sequence[Any], id_field: str = 'id') -> RelationDiff:
    return RelationDiff(
        to_add=compute_fields_to_add(old_ids, new_ids, id_field),
        to_remove=compute_fields_to_remove(old_ids, new_ids, id_field),
        to_update=compute_fields_to_update(old_ids, new_ids, id_field),
    )


def find_by_id(items: Optional[Iterable[Any]], id_value: Any, id_field: str = 'id') -> Optional[Mapping[str, Any]]:
    """First mapping in ``items`` whose ``id_field`` equals ``id_value``."""
    for obj in items or ():
        if isinstance(obj, Mapping) and obj.get(id_field) and obj.get(id_field) == id_value:
            return obj
    return None


def _identical(left: Any, right: Any) -> bool:
    if left is right:
        return True
    # bool is an int subclass; True must not match 1
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    try:
        return bool(left == right)
    except Exception:
        return False


def object_difference(left: Optional[Mapping[str, Any]], right: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Keys of ``left`` whose value changed in ``right``, with ``right``'s values.

    Only one level deep: keys whose previous value is a mapping or a list are
    skipped. Keys absent from ``right`` or only present in ``right`` are
    ignored.
    """
    if left is right or left is None:
        return {}
    right = right or {}
    out: Dict[str, Any] = {}
    for name, previous in left.items():
        current = right.get(name, _MISSING)
        if current is _MISSING or _identical(current, previous):
            continue
        # one level only
        if isinstance(previous, (Mapping, list, tuple)):
            continue
        out[name] = current
    return out


def compute_nested_fields_to_update(
    id_list: Iterable[Mapping[str, Any]],
    previous_items: Optional[Iterable[Any]],
    new_items: Optional[Iterable[Any]],
    id_field: str = 'id',
) -> List[Dict[str, Any]]:
    """Nested ``update`` entries for relation items kept across an edit.

    Args:
        id_list: ``{id}`` objects of the items present before and after the edit.
        previous_items: Relation items from ``previousData``.
        new_items: Relation items from the edited ``data``.

    Returns:
        ``[{"where": {"id": ...}, "data": {...}}]`` for every item with at
        least one changed scalar. Items missing on either side are skipped.
    """
    previous_items = list(previous_items or ())
    new_items = list(new_items or ())
    out: List[Dict[str, Any]] = []
    for ref in id_list:
        id_value = ref.get(id_field)
        before = find_by_id(previous_items, id_value, id_field)
        after = find_by_id(new_items, id_value, id_field)
        if before is None or after is None:
            continue
        changed = object_difference(before, after)
        if changed:
            out.append({'where': _format_id(id_value, id_field), 'data': changed})
    return out
