"""Naming conventions of Prisma/OpenCRUD generated schemas.

Every type name the builder derives from a resource name goes through
:class:`InputNaming`, so a schema generator with different suffixes can be
supported by swapping one policy object instead of hunting string
interpolations.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

__all__ = ["InputNaming", "DEFAULT_NAMING", "split_path", "ids_sibling", "relation_for_ids_key"]


@dataclass(frozen=True)
class InputNaming:
    """Suffixes appended to a resource type name to get its input types.

    Attributes:
        create_suffix: ``Post`` -> ``PostCreateInput``.
        update_suffix: ``Post`` -> ``PostUpdateInput``.
        update_many_suffix: ``Post`` -> ``PostUpdateManyMutationInput``.
        where_suffix: ``Post`` -> ``PostWhereInput``.
        some_suffix: list filter variant matching any related record (``tags_some``).
        in_suffix: membership filter (``id_in``).
        ids_suffix: payload sibling carrying the ids of a to-many relation (``tagsIds``).
    """

    create_suffix: str = "CreateInput"
    update_suffix: str = "UpdateInput"
    update_many_suffix: str = "UpdateManyMutationInput"
    where_suffix: str = "WhereInput"
    some_suffix: str = "_some"
    in_suffix: str = "_in"
    ids_suffix: str = "Ids"

    def create_input(self, type_name: str) -> str:
        return f"{type_name}{self.create_suffix}"

    def update_input(self, type_name: str) -> str:
        return f"{type_name}{self.update_suffix}"

    def update_many_input(self, type_name: str) -> str:
        return f"{type_name}{self.update_many_suffix}"

    def where_input(self, type_name: str) -> str:
        return f"{type_name}{self.where_suffix}"

    def some_filter(self, field_name: str) -> str:
        return f"{field_name}{self.some_suffix}"

    def in_filter(self, field_name: str) -> str:
        return f"{field_name}{self.in_suffix}"

    def order_by(self, field_name: str, order: str) -> str:
        return f"{field_name}_{order}"

    def clone_with(self, **overrides: Any) -> "InputNaming":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


DEFAULT_NAMING = InputNaming()


def split_path(path: str) -> list[str]:
    """Split a dotted field path (``author.id``) into its non-empty parts."""
    if not isinstance(path, str) or not path:
        return []
    return [p for p in path.split('.') if p]


def ids_sibling(field_name: str, naming: InputNaming = DEFAULT_NAMING) -> str:
    return f"{field_name}{naming.ids_suffix}"


def relation_for_ids_key(key: str, naming: InputNaming = DEFAULT_NAMING) -> str | None:
    """Return ``tags`` for ``tagsIds``; None when ``key`` is not an ids sibling."""
    suffix = naming.ids_suffix
    if not suffix or not key.endswith(suffix) or len(key) == len(suffix):
        return None
    return key[: -len(suffix)]
