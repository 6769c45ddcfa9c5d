"""Small model builders shared by the test modules."""

from gql_auto_generator.domain.models import (
    ArrayPropertyType,
    Model,
    Operation,
    PropertyKind,
    PropertyType,
    ReferenceModelType,
    Relation,
    RelationType,
)


def prop(kind: PropertyKind, **flags) -> PropertyType:
    return PropertyType(kind=kind, **flags)


def widget_model(**overrides) -> Model:
    """Widget {id: UniqueIdentifier pk, name: String}"""
    options = {
        "name": "Widget",
        "properties": {
            "id": prop(PropertyKind.UNIQUE_IDENTIFIER, is_primary_key=True),
            "name": prop(PropertyKind.STRING),
        },
    }
    options.update(overrides)
    return Model(**options)


def gadget_model(**overrides) -> Model:
    options = {
        "name": "Gadget",
        "properties": {
            "id": prop(PropertyKind.INTEGER, is_primary_key=True),
            "enabled": prop(PropertyKind.BOOLEAN),
        },
    }
    options.update(overrides)
    return Model(**options)


def rename_operation() -> Operation:
    return Operation(arguments={"name": prop(PropertyKind.STRING)}, returns=ReferenceModelType(model_name="Widget"))


def add_parts_operation() -> Operation:
    return Operation(
        arguments={"parts": ArrayPropertyType(member=ReferenceModelType(model_name="Part"))},
        returns=prop(PropertyKind.BOOLEAN),
    )


def parts_relation() -> Relation:
    return Relation(model_name="Part", relation_type=RelationType.MULTIPLE)


SAMPLE_SCHEMA_YAML = """
models:
  Widget:
    properties:
      id: {type: UniqueIdentifier, primaryKey: true}
      name: String
      price: Decimal?
      createdAt: DateTime
      tags: String[]
    relations:
      parts: {model: Part, type: multiple}
    operations:
      rename:
        arguments:
          name: String
        returns: Widget?
  Part:
    properties:
      id: {type: Integer, primaryKey: true}
      label: String
      widget: Widget?
"""

SAMPLE_CONFIG_YAML = """
relation_resolvers:
  Widget.parts: "return context.parts.for_widget(parent.id)"
"""
