"""
Centralized constants for GQL Auto Generator.

Default option values, the fixed scalar table and the filter operator sets
live here so the mapper, the SDL composers and the config layer agree on them.
"""

from typing import Dict, List, Tuple


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    OUTPUT_DIR = "./generated_graphql"
    OUTPUT_TYPE = "source-module"
    UNIQUE_LOOKUP_MODE = "where"

    OVERWRITE_EXISTING = False
    VERBOSE = False
    USE_UUID_SCALAR = False
    ENABLE_FILTERING = True
    GENERATE_QUERIES = True
    EMIT_RESOLVERS = True


class OutputTypes:
    """Resolver stub flavours."""

    SOURCE_MODULE = "source-module"
    PLAIN_SCRIPT = "plain-script"
    PYTHON_MODULE = "python-module"

    ALL = [SOURCE_MODULE, PLAIN_SCRIPT, PYTHON_MODULE]


class UniqueLookupModes:
    """Shapes of the singular lookup query."""

    WHERE = "where"
    BY_PROPERTY = "by_property"

    ALL = [WHERE, BY_PROPERTY]


class FileExtensions:
    """File naming for emitted artifacts."""

    SDL = ".graphql"
    JS_RESOLVERS = ".resolvers.js"
    PY_RESOLVERS = "_resolvers.py"
    RESOLVERS_DIR = "resolvers"


# =============================================================================
# GRAPHQL TYPE MAPPINGS
# =============================================================================

class GraphQLScalars:
    """GraphQL scalar names produced by the type mapper."""

    STRING = "String"
    BOOLEAN = "Boolean"
    DATE = "Date"
    FLOAT = "Float"
    INT = "Int"
    ID = "ID"
    UUID = "UUID"

    # Built into GraphQL; everything else needs a `scalar` declaration
    BUILTIN = [STRING, BOOLEAN, FLOAT, INT, ID]


# Property type name -> GraphQL scalar name
SCALAR_TYPE_MAP: Dict[str, str] = {
    "Binary": GraphQLScalars.STRING,
    "Boolean": GraphQLScalars.BOOLEAN,
    "DateTime": GraphQLScalars.DATE,
    "Decimal": GraphQLScalars.FLOAT,
    "Integer": GraphQLScalars.INT,
    "String": GraphQLScalars.STRING,
    "UniqueIdentifier": GraphQLScalars.ID,
}

BASE_GRAPHQL_TYPES: List[str] = [
    GraphQLScalars.STRING,
    GraphQLScalars.BOOLEAN,
    GraphQLScalars.DATE,
    GraphQLScalars.FLOAT,
    GraphQLScalars.INT,
    GraphQLScalars.ID,
]


class TypeTokens:
    """Markers used when composing SDL type strings."""

    REQUIRED = "!"
    NULLABLE_MARKER = "?"
    ARRAY_MARKER = "[]"
    INPUT_SUFFIX = "Input"


# =============================================================================
# FILTER OPERATORS
# =============================================================================

class FilterSuffixes:
    """Comparison fields generated per filterable property."""

    ORDERED: Tuple[str, ...] = ("_lessThan", "_greaterThan", "_equals", "_notEquals")
    TEXT: Tuple[str, ...] = (
        "_contains", "_notContains", "_startsWith", "_endsWith", "_equals", "_notEquals"
    )
    BOOLEAN: Tuple[str, ...] = ("_equals", "_notEquals")
    IDENTIFIER: Tuple[str, ...] = ("_equals", "_notEquals")
    IDENTIFIER_LIST = "_in"


# Property type name -> operator suffixes; names absent here are not filterable
FILTER_SUFFIX_MAP: Dict[str, Tuple[str, ...]] = {
    "DateTime": FilterSuffixes.ORDERED,
    "Decimal": FilterSuffixes.ORDERED,
    "Integer": FilterSuffixes.ORDERED,
    "String": FilterSuffixes.TEXT,
    "Boolean": FilterSuffixes.BOOLEAN,
    "UniqueIdentifier": FilterSuffixes.IDENTIFIER,
}


class TypeNameSuffixes:
    """Suffixes of the generated companion type names."""

    ARGS = "Args"
    FILTER = "Filter"
    UNIQUE_FILTER = "UniqueFilter"
    META = "Meta"
    BY = "By"


class RootTypes:
    QUERY = "Query"
    MUTATION = "Mutation"
