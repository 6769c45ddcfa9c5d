"""
Core domain models for GQL Auto Generator.

These models describe the entities the generator consumes: models with typed
properties, relations to other models and operations. They are supplied per
run and never mutated by the generator.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union
from enum import Enum


class PropertyKind(Enum):
    """Type tags a property can carry."""

    OBJECT = "Object"
    ARRAY = "Array"
    REFERENCE_MODEL = "ReferenceModel"
    IMPORT_MODEL = "ImportModel"
    BINARY = "Binary"
    BOOLEAN = "Boolean"
    DATE_TIME = "DateTime"
    DECIMAL = "Decimal"
    INTEGER = "Integer"
    STRING = "String"
    UNIQUE_IDENTIFIER = "UniqueIdentifier"

    @classmethod
    def from_name(cls, name: str) -> Optional["PropertyKind"]:
        """Look up a kind by its type name, returning None when unknown."""
        for kind in cls:
            if kind.value == name:
                return kind
        return None

    @property
    def is_scalar(self) -> bool:
        return self in SCALAR_KINDS


SCALAR_KINDS = frozenset({
    PropertyKind.BINARY,
    PropertyKind.BOOLEAN,
    PropertyKind.DATE_TIME,
    PropertyKind.DECIMAL,
    PropertyKind.INTEGER,
    PropertyKind.STRING,
    PropertyKind.UNIQUE_IDENTIFIER,
})


class RelationType(Enum):
    """Cardinality of a relation."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class PropertyType:
    """
    A typed property of a model or operation.

    Scalars and Object are plain PropertyType values; the variants that carry
    a payload are the subclasses below.
    """

    kind: PropertyKind
    nullable: bool = False
    is_primary_key: bool = False
    unique: bool = False

    @property
    def type_name(self) -> str:
        return self.kind.value

    @property
    def is_identifying(self) -> bool:
        """Primary key, unique or identifier typed, and never null."""
        if self.nullable:
            return False
        return self.is_primary_key or self.unique or self.kind == PropertyKind.UNIQUE_IDENTIFIER


@dataclass(frozen=True, kw_only=True)
class ArrayPropertyType(PropertyType):
    """A list of `member` values."""

    kind: PropertyKind = PropertyKind.ARRAY
    member: Union[PropertyType, str]


@dataclass(frozen=True, kw_only=True)
class ReferenceModelType(PropertyType):
    """A property holding another model of the same schema."""

    kind: PropertyKind = PropertyKind.REFERENCE_MODEL
    model_name: str


@dataclass(frozen=True, kw_only=True)
class ImportModelType(PropertyType):
    """A property holding a model imported from another schema."""

    kind: PropertyKind = PropertyKind.IMPORT_MODEL
    model_name: str


@dataclass(frozen=True)
class Relation:
    """A navigable link from one model to another."""

    model_name: str
    relation_type: RelationType = RelationType.SINGLE

    @property
    def is_multiple(self) -> bool:
        return self.relation_type == RelationType.MULTIPLE


@dataclass
class Operation:
    """A mutation-like action with ordered arguments and a return type."""

    arguments: Dict[str, Union[PropertyType, str]] = field(default_factory=dict)
    returns: Union[PropertyType, str] = "Boolean"


@dataclass
class Model:
    """
    A named record type.

    `properties`, `relations` and `operations` keep insertion order; the
    generated SDL lists fields in that order.
    """

    name: str
    properties: Dict[str, PropertyType] = field(default_factory=dict)
    relations: Dict[str, Relation] = field(default_factory=dict)
    operations: Dict[str, Operation] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Model name is required")

    @property
    def identifier_names(self) -> List[str]:
        """Names of the properties that can look up a single instance."""
        return [name for name, prop in self.properties.items() if prop.is_identifying]

    @property
    def has_operations(self) -> bool:
        return bool(self.operations)


@dataclass
class Schema:
    """Ordered collection of models."""

    models: List[Model] = field(default_factory=list)

    def __iter__(self) -> Iterator[Model]:
        return iter(self.models)

    def __len__(self) -> int:
        return len(self.models)

    def get_model(self, name: str) -> Optional[Model]:
        for model in self.models:
            if model.name == name:
                return model
        return None

    @property
    def model_names(self) -> List[str]:
        return [model.name for model in self.models]
