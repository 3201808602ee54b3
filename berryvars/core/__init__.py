# Core subpackage: schema lookups, payload classification, relation shaping and diffs.
from .schema_index import SchemaIndex, TypeDescriptor, FieldDescriptor, TypeRef
from .classify import FieldAction, FieldShape, FieldClassification, classify_field, classify_payload
from .diff import RelationDiff, compute_add_remove_update, compute_nested_fields_to_update
from .relations import RelationResolver
from .filters import build_where, build_pagination, build_order_by, build_reference_where

__all__ = [
    'SchemaIndex', 'TypeDescriptor', 'FieldDescriptor', 'TypeRef',
    'FieldAction', 'FieldShape', 'FieldClassification', 'classify_field', 'classify_payload',
    'RelationDiff', 'compute_add_remove_update', 'compute_nested_fields_to_update',
    'RelationResolver',
    'build_where', 'build_pagination', 'build_order_by', 'build_reference_where',
]
