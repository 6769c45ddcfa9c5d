"""
GQL Auto Generator.

Generates GraphQL SDL type definitions, filter inputs, root fields and
resolver stubs from a model schema.
"""

from .config_manager import GenerationConfig
from .domain.models import Schema
from .emitter import SchemaEmitter, emit_schema
from .schema_loader import load_schema
from .type_mapper import TypeMapper, map_property_type, is_base_type


__version__ = "0.1.0"

__all__ = [
    'GenerationConfig',
    'Schema',
    'SchemaEmitter',
    'emit_schema',
    'load_schema',
    'TypeMapper',
    'map_property_type',
    'is_base_type',
]
