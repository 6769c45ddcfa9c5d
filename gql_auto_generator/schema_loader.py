"""
YAML schema loading for GQL Auto Generator.

Builds the `Schema` domain model from a YAML document:

    models:
      Widget:
        properties:
          id: {type: UniqueIdentifier, primaryKey: true}
          name: String
          description: String?
          tags: String[]
          owner: User
        relations:
          parts: {model: Part, type: multiple}
        operations:
          rename:
            arguments: {name: String}
            returns: Widget?

Property shorthand strings take a type name, a model name (reference), a
trailing `[]` for arrays and a trailing `?` for nullable values. `String?[]`
is a list of nullable strings, `String[]?` a nullable list of strings.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Set, Union

import yaml

from gql_auto_generator.constants import TypeTokens
from gql_auto_generator.domain.models import (
    ArrayPropertyType,
    ImportModelType,
    Model,
    Operation,
    PropertyKind,
    PropertyType,
    ReferenceModelType,
    Relation,
    RelationType,
    Schema,
)
from gql_auto_generator.exceptions import SchemaLoadError


logger = logging.getLogger(__name__)

_MODEL_SECTIONS = ("properties", "relations", "operations")


class SchemaLoader:
    """
    Turns a parsed YAML document into domain models.

    Model names are collected first so properties can reference models
    declared later in the document.
    """

    def __init__(self, schema_file: Optional[str] = None):
        self.schema_file = schema_file
        self.model_names: Set[str] = set()

    def _error(self, message: str, model: Optional[str] = None) -> SchemaLoadError:
        return SchemaLoadError(message, schema_file=self.schema_file, model=model)

    def parse(self, document: Any) -> Schema:
        if not isinstance(document, dict) or not isinstance(document.get("models"), dict):
            raise self._error("Schema document must contain a top-level 'models' mapping")

        raw_models: Dict[str, Any] = document["models"]
        self.model_names = {str(name) for name in raw_models}

        models = []
        for name, definition in raw_models.items():
            models.append(self.parse_model(str(name), definition))
        logger.debug(f"Parsed {len(models)} model(s): {', '.join(m.name for m in models)}")
        return Schema(models=models)

    def parse_model(self, name: str, definition: Any) -> Model:
        if definition is None:
            definition = {}
        if not isinstance(definition, dict):
            raise self._error(f"Model '{name}' must be a mapping", model=name)

        for section in _MODEL_SECTIONS:
            value = definition.get(section)
            if value is not None and not isinstance(value, dict):
                raise self._error(f"'{section}' of model '{name}' must be a mapping", model=name)

        properties = {
            str(prop_name): self.parse_property_type(spec, model=name, field=str(prop_name))
            for prop_name, spec in (definition.get("properties") or {}).items()
        }
        relations = {
            str(rel_name): self.parse_relation(spec, model=name, field=str(rel_name))
            for rel_name, spec in (definition.get("relations") or {}).items()
        }
        operations = {
            str(op_name): self.parse_operation(spec, model=name, field=str(op_name))
            for op_name, spec in (definition.get("operations") or {}).items()
        }
        return Model(name=name, properties=properties, relations=relations, operations=operations)

    def parse_property_type(self, spec: Any, model: str, field: str) -> PropertyType:
        if isinstance(spec, str):
            return self._parse_shorthand(spec.strip(), model, field)
        if isinstance(spec, dict):
            return self._parse_long_form(spec, model, field)
        raise self._error(f"Property '{field}' must be a type name or a mapping, got {type(spec).__name__}", model)

    def _parse_shorthand(self, spec: str, model: str, field: str) -> PropertyType:
        if not spec:
            raise self._error(f"Property '{field}' has an empty type", model)

        nullable = spec.endswith(TypeTokens.NULLABLE_MARKER)
        if nullable:
            spec = spec[:-1].rstrip()

        if spec.endswith(TypeTokens.ARRAY_MARKER):
            member = self._parse_shorthand(spec[:-len(TypeTokens.ARRAY_MARKER)].rstrip(), model, field)
            return ArrayPropertyType(member=member, nullable=nullable)

        return self._named_type(spec, model, field, nullable=nullable)

    def _named_type(self, type_name: str, model: str, field: str, **flags: Any) -> PropertyType:
        kind = PropertyKind.from_name(type_name)
        if kind is not None and (kind.is_scalar or kind == PropertyKind.OBJECT):
            # Object is kept here; the type mapper rejects it with a clearer error
            return PropertyType(kind=kind, **flags)
        if kind is not None:
            raise self._error(f"Property '{field}' of type {type_name} needs the long form with its payload", model)
        if type_name in self.model_names:
            return ReferenceModelType(model_name=type_name, **flags)
        raise self._error(f"Property '{field}' has unknown type '{type_name}'", model)

    def _parse_long_form(self, spec: Dict[str, Any], model: str, field: str) -> PropertyType:
        type_name = spec.get("type")
        if not isinstance(type_name, str) or not type_name:
            raise self._error(f"Property '{field}' is missing its 'type'", model)

        flags = {
            "nullable": bool(spec.get("nullable", False)),
            "is_primary_key": bool(spec.get("primaryKey", False)),
            "unique": bool(spec.get("unique", False)),
        }
        kind = PropertyKind.from_name(type_name)

        if kind == PropertyKind.ARRAY:
            if "member" not in spec:
                raise self._error(f"Array property '{field}' is missing its 'member'", model)
            member = self.parse_property_type(spec["member"], model, f"{field}[]")
            return ArrayPropertyType(member=member, **flags)

        if kind in (PropertyKind.REFERENCE_MODEL, PropertyKind.IMPORT_MODEL):
            target = spec.get("model")
            if not isinstance(target, str) or not target:
                raise self._error(f"{type_name} property '{field}' is missing its 'model'", model)
            if kind == PropertyKind.IMPORT_MODEL:
                return ImportModelType(model_name=target, **flags)
            if target not in self.model_names:
                logger.warning(f"Property {model}.{field} references unknown model '{target}'")
            return ReferenceModelType(model_name=target, **flags)

        return self._named_type(type_name, model, field, **flags)

    def parse_relation(self, spec: Any, model: str, field: str) -> Relation:
        if isinstance(spec, str):
            target = spec.strip()
            relation_type = RelationType.SINGLE
            if target.endswith(TypeTokens.ARRAY_MARKER):
                target = target[:-len(TypeTokens.ARRAY_MARKER)].rstrip()
                relation_type = RelationType.MULTIPLE
        elif isinstance(spec, dict):
            target = spec.get("model")
            raw_type = str(spec.get("type", RelationType.SINGLE.value)).lower()
            try:
                relation_type = RelationType(raw_type)
            except ValueError:
                raise self._error(
                    f"Relation '{field}' has invalid type '{raw_type}' (expected 'single' or 'multiple')", model
                ) from None
        else:
            raise self._error(f"Relation '{field}' must be a model name or a mapping", model)

        if not isinstance(target, str) or not target:
            raise self._error(f"Relation '{field}' is missing its 'model'", model)
        if target not in self.model_names:
            logger.warning(f"Relation {model}.{field} targets unknown model '{target}'")
        return Relation(model_name=target, relation_type=relation_type)

    def parse_operation(self, spec: Any, model: str, field: str) -> Operation:
        if spec is None:
            spec = {}
        if not isinstance(spec, dict):
            raise self._error(f"Operation '{field}' must be a mapping", model)

        raw_arguments = spec.get("arguments") or {}
        if not isinstance(raw_arguments, dict):
            raise self._error(f"'arguments' of operation '{field}' must be a mapping", model)

        arguments: Dict[str, Union[PropertyType, str]] = {
            str(arg_name): self.parse_property_type(arg_spec, model, f"{field}.{arg_name}")
            for arg_name, arg_spec in raw_arguments.items()
        }
        returns = self.parse_property_type(spec.get("returns", "Boolean"), model, f"{field} (return type)")
        return Operation(arguments=arguments, returns=returns)


def parse_schema(document: Any, schema_file: Optional[str] = None) -> Schema:
    """Build a Schema from an already parsed YAML document."""
    return SchemaLoader(schema_file).parse(document)


def load_schema(schema_path: Union[str, Path]) -> Schema:
    """
    Load and parse a YAML schema file.

    Raises:
        SchemaLoadError: When the file is missing, is not valid YAML or does
            not describe a schema.
    """
    schema_file = Path(schema_path)
    if not schema_file.is_file():
        raise SchemaLoadError(f"Schema file not found: {schema_file}", schema_file=str(schema_file))

    try:
        with open(schema_file, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Error parsing YAML file {schema_file}: {e}", schema_file=str(schema_file)) from e

    schema = parse_schema(document, schema_file=str(schema_file))
    logger.info(f"Loaded {len(schema)} model(s) from {schema_file}")
    return schema
