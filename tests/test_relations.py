import logging

import pytest

from berryvars import SchemaIndex, SchemaLookupError
from berryvars.core.relations import RelationResolver, relation_ids
from tests.fixtures import CREATE_INTROSPECTION, input_object, named, non_null


@pytest.fixture
def resolver():
    return RelationResolver(SchemaIndex.from_introspection(CREATE_INTROSPECTION))


def test_to_one_with_id_connects_and_drops_other_scalars(resolver):
    assert resolver.resolve_to_one('AuthorCreateOneInput', {'id': 'X', 'name': 'Y'}) == {'connect': {'id': 'X'}}


def test_to_one_without_id_creates_with_declared_scalars(resolver):
    value = {'name': 'Y', 'createdAt': 'now'}
    assert resolver.resolve_to_one('AuthorCreateOneInput', value) == {'create': {'name': 'Y'}}


def test_to_one_dropped_when_no_verb_available():
    index = SchemaIndex.from_introspection([input_object('AuthorUpdateOneInput', upsert=named('Boolean', 'SCALAR'))])
    r = RelationResolver(index)
    assert r.resolve_to_one('AuthorUpdateOneInput', {'id': 'a'}) is None
    assert r.resolve_to_one('AuthorUpdateOneInput', {'name': 'a'}) is None


def test_to_one_disconnect_on_update():
    index = SchemaIndex.from_introspection([
        input_object('AuthorUpdateOneInput', disconnect=named('Boolean', 'SCALAR')),
    ])
    r = RelationResolver(index)
    assert r.resolve_to_one('AuthorUpdateOneInput', None, {'id': 'a'}, allow_disconnect=True) == {'disconnect': True}
    assert r.resolve_to_one('AuthorUpdateOneInput', None, None, allow_disconnect=True) is None
    assert r.resolve_to_one('AuthorUpdateOneInput', None, {'id': 'a'}) is None


def test_to_one_create_target_missing_is_reported():
    index = SchemaIndex.from_introspection([
        input_object('AuthorCreateOneInput', create=non_null('AuthorCreateInput')),
    ])
    with pytest.raises(SchemaLookupError) as exc:
        RelationResolver(index).resolve_to_one('AuthorCreateOneInput', {'name': 'a'})
    assert 'AuthorCreateInput' in str(exc.value)
    assert 'AuthorCreateOneInput.create' in str(exc.value)


def test_to_many_create_connects_ids(resolver):
    result = resolver.resolve_to_many_create('TagCreateManyInput', ['t1', 't2'], [{'id': 't1'}, {'id': 't2'}])
    assert result == {'connect': [{'id': 't1'}, {'id': 't2'}]}


def test_to_many_create_items_without_id_are_logged(resolver, caplog):
    with caplog.at_level(logging.DEBUG, logger='berryvars.core.relations'):
        result = resolver.resolve_to_many_create('TagCreateManyInput', ['t1'], [{'name': 'new'}])
    assert result == {'connect': [{'id': 't1'}]}
    assert 'items without id are not created' in caplog.text


def test_to_many_update_always_emits_three_keys(resolver):
    result = resolver.resolve_to_many_update('TagCreateManyInput', ['t1', 't2'], ['t1', 't2', 't3'])
    assert result == {'connect': [], 'disconnect': [{'id': 't3'}], 'update': []}


def test_relation_ids_prefers_ids_sibling():
    assert relation_ids({'tags': [{'id': 'a'}], 'tagsIds': ['b']}, 'tags') == ['b']
    assert relation_ids({'tags': [{'id': 'a'}, {'name': 'n'}, 'c']}, 'tags') == ['a', 'c']
    assert relation_ids({}, 'tags') == []


def test_inline_create_keeps_only_scalars():
    index = SchemaIndex.from_introspection([
        input_object('AuthorCreateOneInput', create=non_null('AuthorCreateInput')),
        input_object(
            'AuthorCreateInput',
            name=named('String', 'SCALAR'),
            company=non_null('CompanyCreateOneInput'),
        ),
        input_object('CompanyCreateOneInput', connect=non_null('CompanyWhereUniqueInput')),
        input_object('CompanyWhereUniqueInput', id=named('ID', 'SCALAR')),
    ])
    value = {'name': 'Ada', 'company': {'id': 'c1'}}
    assert RelationResolver(index).resolve_to_one('AuthorCreateOneInput', value) == {'create': {'name': 'Ada'}}
