"""
Strawberry input types for admin list parameters.

Exposing these on a GraphQL API lets a client send pagination, sort and
filter as typed inputs; :mod:`berryvars.input_converter` turns them into the
parameter mapping the variable builder expects.
"""

from enum import Enum
from typing import Optional

import strawberry
from strawberry.scalars import JSON


@strawberry.enum
class SortOrder(Enum):
    """Sort direction, rendered as the ``_ASC``/``_DESC`` suffix of orderBy."""
    ASC = "ASC"
    DESC = "DESC"


@strawberry.input
class PaginationInput:
    """1-based page number and page size."""
    page: int = 1
    per_page: int = strawberry.field(name="perPage", default=25)


@strawberry.input
class SortInput:
    """Field to sort on and direction."""
    field: str
    order: SortOrder = SortOrder.ASC


@strawberry.input
class ListParamsInput:
    """Parameters of a list or reference query."""
    filter: Optional[JSON] = None
    pagination: Optional[PaginationInput] = None
    sort: Optional[SortInput] = None


__all__ = [
    'SortOrder',
    'PaginationInput',
    'SortInput',
    'ListParamsInput',
]
