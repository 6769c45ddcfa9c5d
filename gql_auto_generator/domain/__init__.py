"""
Domain module for GQL Auto Generator.

Holds the schema model the generator consumes and the naming rules used to
derive GraphQL names from it, independent of SDL rendering and file output.
"""

from .models import (
    PropertyKind,
    PropertyType,
    ArrayPropertyType,
    ReferenceModelType,
    ImportModelType,
    Relation,
    RelationType,
    Operation,
    Model,
    Schema,
)

from .naming import (
    NamingConventions,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
    pluralize,
    singularize,
)

__all__ = [
    # Core models
    'PropertyKind',
    'PropertyType',
    'ArrayPropertyType',
    'ReferenceModelType',
    'ImportModelType',
    'Relation',
    'RelationType',
    'Operation',
    'Model',
    'Schema',

    # Naming
    'NamingConventions',
    'to_camel_case',
    'to_pascal_case',
    'to_snake_case',
    'pluralize',
    'singularize',
]
