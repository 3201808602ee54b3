"""berryvars public API.

Builds the variables of Prisma/OpenCRUD style GraphQL operations from
admin CRUD intents, driven by an introspection document.

Exposes:
- build_variables, VariableBuilder
- Operation, Resource, BuilderConfig, InputNaming
- SchemaIndex and the error classes
- Lazy attributes: SortOrder, PaginationInput, SortInput, ListParamsInput
  (Strawberry is only imported when one of them is accessed)
"""
from __future__ import annotations

from .builder import VariableBuilder, build_variables
from .config import BuilderConfig
from .core.schema_index import SchemaIndex
from .errors import (
    BerryVarsError,
    IntrospectionFormatError,
    InvalidParamsError,
    SchemaLookupError,
    UnknownOperationError,
)
from .naming import InputNaming
from .operations import Operation, Resource

_LAZY_INPUT_TYPES = {'SortOrder', 'PaginationInput', 'SortInput', 'ListParamsInput'}


def __getattr__(name: str):  # PEP 562 lazy exports
    import importlib as _importlib
    if name == 'input_types':
        return _importlib.import_module(__name__ + '.input_types')
    if name in _LAZY_INPUT_TYPES:
        _input_types = _importlib.import_module(__name__ + '.input_types')
        return getattr(_input_types, name)
    raise AttributeError(name)


__all__ = [
    'build_variables', 'VariableBuilder',
    'Operation', 'Resource', 'BuilderConfig', 'InputNaming', 'SchemaIndex',
    'BerryVarsError', 'UnknownOperationError', 'SchemaLookupError',
    'IntrospectionFormatError', 'InvalidParamsError',
    'SortOrder', 'PaginationInput', 'SortInput', 'ListParamsInput', 'input_types',
]
