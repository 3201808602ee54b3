"""
Parameter normalisation for the variable builder.

Operation parameters arrive either as plain mappings (``{"pagination":
{"page": 2, "perPage": 5}}``) or as Strawberry input objects from
:mod:`berryvars.input_types`. Both are reduced to the same mapping, with
pagination and sort validated into :class:`Pagination` and :class:`Sort`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidParamsError

__all__ = [
    'Pagination',
    'Sort',
    'convert_pagination_input',
    'convert_sort_input',
    'convert_params',
    'validate_sort_order',
]

_PARAM_ATTRS = {
    'filter': 'filter',
    'pagination': 'pagination',
    'sort': 'sort',
    'ids': 'ids',
    'id': 'id',
    'target': 'target',
    'data': 'data',
    'previous_data': 'previousData',
}


@dataclass(frozen=True)
class Pagination:
    page: int
    per_page: int

    @property
    def first(self) -> int:
        return self.per_page

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class Sort:
    field: str
    order: str = 'ASC'


def _get(obj: Any, *names: str) -> Any:
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidParamsError(f"Invalid {name} {value!r}. Must be a positive integer.")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidParamsError(f"Invalid {name} {value!r}. Must be a positive integer.") from None
    if number < 1 or (isinstance(value, float) and number != value):
        raise InvalidParamsError(f"Invalid {name} {value!r}. Must be a positive integer.")
    return number


def convert_pagination_input(pagination: Any) -> Optional[Pagination]:
    """
    Convert a pagination mapping or ``PaginationInput`` to :class:`Pagination`.

    Args:
        pagination: ``{"page": int, "perPage": int}`` or an object with
            ``page``/``per_page`` attributes. None means no pagination.

    Returns:
        Pagination or None

    Raises:
        InvalidParamsError: If page or perPage is not a positive integer
    """
    if pagination is None:
        return None
    if isinstance(pagination, Pagination):
        return pagination
    page = _get(pagination, 'page')
    per_page = _get(pagination, 'perPage', 'per_page')
    return Pagination(
        page=_positive_int(1 if page is None else page, 'page'),
        per_page=_positive_int(per_page, 'perPage'),
    )


def validate_sort_order(order: Any) -> str:
    """
    Validate and normalize a sort order.

    Accepts strings in any case and enum members (``SortOrder.DESC``).

    Raises:
        InvalidParamsError: If the order is not ASC or DESC
    """
    if order is None:
        return 'ASC'
    value = getattr(order, 'value', order)
    normalized = str(value).strip().upper()
    if normalized not in ('ASC', 'DESC'):
        raise InvalidParamsError(f"Invalid sort order '{value}'. Must be 'ASC' or 'DESC'.")
    return normalized


def convert_sort_input(sort: Any) -> Optional[Sort]:
    """Convert a sort mapping or ``SortInput`` to :class:`Sort`; None without a field."""
    if sort is None:
        return None
    if isinstance(sort, Sort):
        return sort
    field = _get(sort, 'field')
    if not field:
        return None
    return Sort(field=str(field), order=validate_sort_order(_get(sort, 'order')))


def convert_params(params: Any) -> Dict[str, Any]:
    """Return builder parameters as a plain dict.

    Mappings are copied as-is; input objects are read attribute by attribute
    (``previous_data`` becomes ``previousData``). Attributes left at None are
    omitted.
    """
    if params is None:
        return {}
    if isinstance(params, Mapping):
        return dict(params)
    result: Dict[str, Any] = {}
    for attr, key in _PARAM_ATTRS.items():
        value = getattr(params, attr, None)
        if value is not None:
            result[key] = value
    return result
