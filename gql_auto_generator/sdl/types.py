import logging
from typing import List, Optional

from gql_auto_generator.config_manager import GenerationConfig
from gql_auto_generator.domain.models import Model, Operation, Relation
from gql_auto_generator.domain.naming import NamingConventions
from gql_auto_generator.exceptions import UnsupportedTypeError
from gql_auto_generator.sdl.base import (
    FieldDefinition, TypeDefinition, create_field, create_object_type, create_input_type
)


logger = logging.getLogger(__name__)


def relation_type_string(relation: Relation) -> str:
    """Target model name, or a list of it for multiple relations."""
    if relation.is_multiple:
        return f"[{relation.model_name}!]"
    return relation.model_name


def create_property_fields(model: Model, config: GenerationConfig) -> List[FieldDefinition]:
    """One field per included property, in declaration order."""
    fields = []
    for name, prop in config.included_properties(model).items():
        try:
            type_string = config.type_mapper.map_property_type(prop)
        except UnsupportedTypeError as e:
            e.context.setdefault("model", model.name)
            e.context.setdefault("field", name)
            raise
        fields.append(create_field(name, type_string, directives=config.directives_for(model, name, prop)))
    return fields


def create_relation_fields(model: Model, config: GenerationConfig) -> List[FieldDefinition]:
    fields = []
    for name, relation in config.included_relations(model).items():
        fields.append(
            create_field(name, relation_type_string(relation), directives=config.directives_for(model, name, relation))
        )
    return fields


def generate_object_type(model: Model, config: GenerationConfig) -> TypeDefinition:
    """Creates the `type <Model>` definition."""
    fields = create_property_fields(model, config) + create_relation_fields(model, config)
    if not fields:
        logger.warning(f"Model {model.name} has no included fields; its type will be empty")
    return create_object_type(model.name, fields)


def generate_operation_input(
    model: Model, operation_name: str, operation: Operation, config: GenerationConfig
) -> Optional[TypeDefinition]:
    """Creates the `input <Operation>Args` definition, or None for an operation without arguments."""
    if not operation.arguments:
        return None
    fields = []
    for arg_name, arg_type in operation.arguments.items():
        try:
            type_string = config.type_mapper.map_property_type(arg_type, for_input=True)
        except UnsupportedTypeError as e:
            e.context.setdefault("model", model.name)
            e.context.setdefault("field", f"{operation_name}.{arg_name}")
            raise
        fields.append(create_field(arg_name, type_string))
    return create_input_type(NamingConventions.args_type(operation_name), fields)


def generate_type_defs(model: Model, config: GenerationConfig) -> List[TypeDefinition]:
    """The object type followed by one input type per included operation."""
    type_defs = [generate_object_type(model, config)]
    for operation_name, operation in config.included_operations(model).items():
        input_def = generate_operation_input(model, operation_name, operation, config)
        if input_def is not None:
            type_defs.append(input_def)
    return type_defs
