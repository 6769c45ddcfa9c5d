"""
Property type to GraphQL type mapping for GQL Auto Generator.

Every SDL type string the generator writes goes through `TypeMapper`. The
mapping is a pure function of the property type and the input-position flag:

    <BaseName><InputSuffix><ListSuffix><RequiredSuffix>

Example:
    >>> mapper = TypeMapper()
    >>> mapper.map_property_type(PropertyType(PropertyKind.DECIMAL))
    'Float!'
    >>> mapper.map_property_type(ArrayPropertyType(member=ReferenceModelType(model_name="Widget")), for_input=True)
    '[WidgetInput!]!'
"""

from typing import Dict, FrozenSet, Union

from gql_auto_generator.constants import (
    SCALAR_TYPE_MAP,
    BASE_GRAPHQL_TYPES,
    GraphQLScalars,
    TypeTokens,
)
from gql_auto_generator.domain.models import (
    PropertyKind,
    PropertyType,
    ArrayPropertyType,
    ReferenceModelType,
    ImportModelType,
)
from gql_auto_generator.exceptions import UnsupportedTypeError, raise_unsupported_type_error


PropertyTypeLike = Union[PropertyType, str]


def strip_required(type_string: str) -> str:
    """Remove a single trailing non-null marker, e.g. '[ID!]!' -> '[ID!]'."""
    if type_string.endswith(TypeTokens.REQUIRED):
        return type_string[:-1]
    return type_string


def is_nullable(property_type: PropertyTypeLike) -> bool:
    """Bare type names are nullable only when they carry a '?' marker."""
    if isinstance(property_type, str):
        return TypeTokens.NULLABLE_MARKER in property_type
    return property_type.nullable


class TypeMapper:
    """
    Maps PropertyType values and bare type names to GraphQL SDL type strings.

    Args:
        use_uuid_scalar: Render UniqueIdentifier as the custom `UUID` scalar
            instead of the built-in `ID`.
    """

    def __init__(self, use_uuid_scalar: bool = False):
        self.use_uuid_scalar = use_uuid_scalar

        self.scalar_map: Dict[str, str] = dict(SCALAR_TYPE_MAP)
        base_types = set(BASE_GRAPHQL_TYPES)
        if use_uuid_scalar:
            self.scalar_map[PropertyKind.UNIQUE_IDENTIFIER.value] = GraphQLScalars.UUID
            base_types.add(GraphQLScalars.UUID)
        self.base_types: FrozenSet[str] = frozenset(base_types)

    @property
    def identifier_scalar(self) -> str:
        return self.scalar_map[PropertyKind.UNIQUE_IDENTIFIER.value]

    def is_base_type(self, type_name: str) -> bool:
        """True for the scalar names this mapper can produce."""
        return type_name in self.base_types

    def map_property_type(self, property_type: PropertyTypeLike, for_input: bool = False) -> str:
        """
        Map a property type to its SDL type string.

        Args:
            property_type: PropertyType value, or a bare type name such as 'String?'
            for_input: Render for an argument/input position, where object
                types need their `Input` counterpart

        Raises:
            UnsupportedTypeError: For Object properties and unknown type names.
        """
        if isinstance(property_type, str):
            return self._map_type_name(property_type)

        required = "" if property_type.nullable else TypeTokens.REQUIRED
        kind = property_type.kind

        if kind == PropertyKind.OBJECT:
            raise UnsupportedTypeError(
                "Object types are not supported in GraphQL schema generation",
                type_name=kind.value,
            )

        if kind == PropertyKind.ARRAY:
            return self._map_array(property_type, for_input, required)

        if kind in (PropertyKind.REFERENCE_MODEL, PropertyKind.IMPORT_MODEL):
            if not isinstance(property_type, (ReferenceModelType, ImportModelType)):
                raise_unsupported_type_error(
                    f"{kind.value} property is missing its model name",
                    type_name=kind.value,
                )
            input_token = TypeTokens.INPUT_SUFFIX if for_input else ""
            return f"{property_type.model_name}{input_token}{required}"

        scalar = self.scalar_map.get(kind.value)
        if scalar is None:
            raise_unsupported_type_error(
                f"Property type not supported in GraphQL schema generation: {kind.value}",
                type_name=kind.value,
            )
        return f"{scalar}{required}"

    def _map_type_name(self, type_name: str) -> str:
        required = "" if is_nullable(type_name) else TypeTokens.REQUIRED
        bare_name = type_name.replace(TypeTokens.NULLABLE_MARKER, "").strip()

        if bare_name == PropertyKind.OBJECT.value:
            raise UnsupportedTypeError(
                "Object types are not supported in GraphQL schema generation",
                type_name=bare_name,
            )

        scalar = self.scalar_map.get(bare_name)
        if scalar is None:
            # Array and model references need a payload a bare name cannot carry
            raise_unsupported_type_error(
                f"Property type not supported in GraphQL schema generation: {bare_name}",
                type_name=bare_name,
            )
        return f"{scalar}{required}"

    def _map_array(self, array_type: PropertyType, for_input: bool, required: str) -> str:
        if not isinstance(array_type, ArrayPropertyType):
            raise_unsupported_type_error(
                "Array property is missing its member type",
                type_name=array_type.kind.value,
            )

        member = array_type.member
        if isinstance(member, PropertyType) and member.kind == PropertyKind.ARRAY:
            # Nested lists carry the input suffix on their innermost member
            member_type = strip_required(self.map_property_type(member, for_input))
            input_token = ""
        else:
            member_type = strip_required(self.map_property_type(member))
            input_token = TypeTokens.INPUT_SUFFIX if for_input and not self.is_base_type(member_type) else ""
        member_required = "" if is_nullable(member) else TypeTokens.REQUIRED
        return f"[{member_type}{input_token}{member_required}]{required}"

    def base_type_name(self, property_type: PropertyTypeLike) -> str:
        """SDL type of a property with its own non-null marker removed."""
        return strip_required(self.map_property_type(property_type))


_default_mapper = TypeMapper()


def map_property_type(property_type: PropertyTypeLike, for_input: bool = False) -> str:
    """Map with the default (built-in `ID`) identifier convention."""
    return _default_mapper.map_property_type(property_type, for_input)


def is_base_type(type_name: str) -> bool:
    return _default_mapper.is_base_type(type_name)
