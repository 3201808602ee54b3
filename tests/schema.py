"""Strawberry schema mimicking the CRUD API a Prisma server generates for Post/Author/Tag.

Introspecting it yields a real document for end-to-end builder tests; the
``listVariables`` query exercises the Strawberry list parameter inputs.
"""
from typing import List, Optional

import strawberry
from strawberry.scalars import JSON

from berryvars import SchemaIndex, build_variables
from berryvars.input_types import ListParamsInput


@strawberry.type
class Author:
    id: strawberry.ID
    name: str


@strawberry.type
class Tag:
    id: strawberry.ID
    name: str


@strawberry.type
class Post:
    id: strawberry.ID
    title: str
    views: int
    author: Optional[Author] = None
    tags: List[Tag] = strawberry.field(default_factory=list)


@strawberry.input
class AuthorWhereUniqueInput:
    id: Optional[strawberry.ID] = None


@strawberry.input
class AuthorCreateInput:
    name: str


@strawberry.input
class AuthorCreateOneInput:
    connect: Optional[AuthorWhereUniqueInput] = None
    create: Optional[AuthorCreateInput] = None


@strawberry.input
class AuthorUpdateOneInput:
    connect: Optional[AuthorWhereUniqueInput] = None
    create: Optional[AuthorCreateInput] = None
    disconnect: Optional[bool] = None


@strawberry.input
class TagWhereUniqueInput:
    id: Optional[strawberry.ID] = None


@strawberry.input
class TagCreateInput:
    name: str


@strawberry.input
class TagCreateManyInput:
    connect: Optional[List[TagWhereUniqueInput]] = None
    create: Optional[List[TagCreateInput]] = None


@strawberry.input
class TagUpdateDataInput:
    name: Optional[str] = None


@strawberry.input
class TagUpdateWithWhereUniqueNestedInput:
    where: TagWhereUniqueInput
    data: TagUpdateDataInput


@strawberry.input
class TagUpdateManyInput:
    connect: Optional[List[TagWhereUniqueInput]] = None
    disconnect: Optional[List[TagWhereUniqueInput]] = None
    update: Optional[List[TagUpdateWithWhereUniqueNestedInput]] = None


@strawberry.input
class PostCreateInput:
    title: str
    views: Optional[int] = None
    author: Optional[AuthorCreateOneInput] = None
    tags: Optional[TagCreateManyInput] = None


@strawberry.input
class PostUpdateInput:
    title: Optional[str] = None
    views: Optional[int] = None
    author: Optional[AuthorUpdateOneInput] = None
    tags: Optional[TagUpdateManyInput] = None


@strawberry.input
class PostUpdateManyMutationInput:
    title: Optional[str] = None
    views: Optional[int] = None


@strawberry.input
class TagWhereInput:
    id_in: Optional[List[strawberry.ID]] = strawberry.field(name="id_in", default=None)


@strawberry.input
class PostWhereInput:
    id_in: Optional[List[strawberry.ID]] = strawberry.field(name="id_in", default=None)
    views: Optional[int] = None
    tags_some: Optional[TagWhereInput] = strawberry.field(name="tags_some", default=None)


@strawberry.input
class PostWhereUniqueInput:
    id: Optional[strawberry.ID] = None


@strawberry.type
class Query:
    @strawberry.field
    def posts(
        self,
        where: Optional[PostWhereInput] = None,
        order_by: Optional[str] = None,
        first: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[Post]:
        return []

    @strawberry.field
    def list_variables(self, params: ListParamsInput) -> JSON:
        return get_builder()('Post', 'GET_LIST', params)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_post(self, data: PostCreateInput) -> Optional[Post]:
        return None

    @strawberry.mutation
    def update_post(self, data: PostUpdateInput, where: PostWhereUniqueInput) -> Optional[Post]:
        return None

    @strawberry.mutation
    def update_many_posts(self, data: PostUpdateManyMutationInput, where: PostWhereInput) -> int:
        return 0


schema = strawberry.Schema(query=Query, mutation=Mutation)

_builder = None


def get_builder():
    global _builder
    if _builder is None:
        _builder = build_variables(SchemaIndex.from_schema(schema))
    return _builder
