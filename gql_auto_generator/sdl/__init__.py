"""
GraphQL SDL generation module.

Builds structured type definitions and root fields per model and renders
them to SDL text, either per model or merged into one document.
"""

from .base import FieldDefinition, TypeDefinition
from .document import SchemaFragment, parse_fragment, merge_fragments, merge_fragment_texts
from .types import generate_type_defs, generate_object_type, generate_operation_input
from .filters import generate_filter_input, generate_unique_filter_input
from .queries import generate_meta_type, generate_query_fields, generate_mutation_fields
from .composer import generate_fragment, generate_fragment_code


__all__ = [
    'FieldDefinition',
    'TypeDefinition',
    'SchemaFragment',
    'parse_fragment',
    'merge_fragments',
    'merge_fragment_texts',
    'generate_type_defs',
    'generate_object_type',
    'generate_operation_input',
    'generate_filter_input',
    'generate_unique_filter_input',
    'generate_meta_type',
    'generate_query_fields',
    'generate_mutation_fields',
    'generate_fragment',
    'generate_fragment_code',
]
