"""Test configuration and fixtures for berryvars."""

import copy

import pytest

from berryvars import build_variables
from tests.fixtures import CREATE_INTROSPECTION, LIST_INTROSPECTION, UPDATE_INTROSPECTION

POST = {'type': {'name': 'Post'}}


@pytest.fixture
def post_resource():
    return copy.deepcopy(POST)


@pytest.fixture
def list_introspection():
    return copy.deepcopy(LIST_INTROSPECTION)


@pytest.fixture
def create_introspection():
    return copy.deepcopy(CREATE_INTROSPECTION)


@pytest.fixture
def update_introspection():
    return copy.deepcopy(UPDATE_INTROSPECTION)


@pytest.fixture
def create_builder(create_introspection):
    return build_variables(create_introspection)


@pytest.fixture
def update_builder(update_introspection):
    return build_variables(update_introspection)
