"""Hand-written introspection documents shaped like a Prisma-generated schema."""
from typing import Any, Dict


def named(name: str, kind: str = 'INPUT_OBJECT') -> Dict[str, Any]:
    return {'kind': kind, 'name': name}


def non_null(name: str, kind: str = 'INPUT_OBJECT') -> Dict[str, Any]:
    return {'kind': 'NON_NULL', 'name': None, 'ofType': named(name, kind)}


def list_of(name: str, kind: str = 'INPUT_OBJECT') -> Dict[str, Any]:
    return {'kind': 'LIST', 'name': None, 'ofType': non_null(name, kind)}


def string() -> Dict[str, Any]:
    return named('String', 'SCALAR')


def input_object(type_name: str, **fields: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'kind': 'INPUT_OBJECT',
        'name': type_name,
        'inputFields': [{'name': k, 'type': v} for k, v in fields.items()],
    }


LIST_INTROSPECTION = {
    'types': [
        {
            'kind': 'INPUT_OBJECT',
            'name': 'PostWhereInput',
            'inputFields': [{'name': 'tags_some', 'type': {'kind': '', 'name': ''}}],
        }
    ]
}

CREATE_INTROSPECTION = {
    'types': [
        {'name': 'Post', 'fields': [{'name': 'title'}]},
        input_object(
            'PostCreateInput',
            author=non_null('AuthorCreateOneInput'),
            tags=non_null('TagCreateManyInput'),
            title=string(),
        ),
        input_object(
            'AuthorCreateOneInput',
            connect=non_null('AuthorWhereUniqueInput'),
            create=non_null('AuthorCreateInput'),
        ),
        input_object('AuthorCreateInput', name=string()),
        input_object('AuthorWhereUniqueInput', id=string()),
        input_object(
            'TagCreateManyInput',
            connect=non_null('TagWhereUniqueInput'),
            create=non_null('TagCreateInput'),
        ),
        input_object('TagCreateInput', name=string()),
        input_object('TagWhereUniqueInput', id=string()),
    ]
}

UPDATE_INTROSPECTION = {
    'types': [
        {'name': 'Post', 'fields': [{'name': 'title'}]},
        input_object(
            'PostUpdateInput',
            author=non_null('AuthorUpdateOneInput'),
            tags=non_null('TagsUpdateManyInput'),
            title=string(),
        ),
        input_object('AuthorUpdateOneInput', connect=non_null('AuthorWhereUniqueInput')),
        input_object('TagsUpdateManyInput', connect=non_null('TagsWhereUniqueInput')),
        input_object('TagsWhereUniqueInput', id=string()),
        input_object('AuthorWhereUniqueInput', id=string()),
    ]
}
