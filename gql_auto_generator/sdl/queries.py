import logging
from typing import List

from gql_auto_generator.config_manager import GenerationConfig
from gql_auto_generator.constants import GraphQLScalars, UniqueLookupModes
from gql_auto_generator.domain.models import Model
from gql_auto_generator.domain.naming import NamingConventions
from gql_auto_generator.exceptions import UnsupportedTypeError
from gql_auto_generator.sdl.base import FieldDefinition, TypeDefinition, create_field, create_object_type
from gql_auto_generator.type_mapper import strip_required


logger = logging.getLogger(__name__)


def generate_meta_type(model: Model) -> TypeDefinition:
    """Creates `type <Model>Meta { count: Int! }` returned by the meta query."""
    return create_object_type(
        NamingConventions.meta_type(model.name),
        [create_field("count", f"{GraphQLScalars.INT}!")],
    )


def create_lookup_fields(model: Model, config: GenerationConfig) -> List[FieldDefinition]:
    """Singular lookup queries; none when the model has no identifying property."""
    identifiers = config.included_identifiers(model)
    if not identifiers:
        logger.debug(f"Model {model.name} has no identifying properties, skipping singular lookup")
        return []

    if config.unique_lookup_mode == UniqueLookupModes.BY_PROPERTY:
        fields = []
        for name in identifiers:
            query_name = NamingConventions.lookup_query(model.name, name)
            arg_type = config.type_mapper.map_property_type(model.properties[name], for_input=True)
            fields.append(
                create_field(
                    query_name,
                    model.name,
                    arguments=[(name, arg_type)],
                    directives=config.directives_for(model, query_name, model),
                )
            )
        return fields

    query_name = NamingConventions.single_query(model.name)
    return [
        create_field(
            query_name,
            model.name,
            arguments=[("where", NamingConventions.unique_filter_type(model.name))],
            directives=config.directives_for(model, query_name, model),
        )
    ]


def generate_query_fields(model: Model, config: GenerationConfig, has_filter: bool) -> List[FieldDefinition]:
    """
    Query root fields for a model: paginated collection, count meta and singular lookup.

    Args:
        has_filter: Whether `<Model>Filter` was generated; the `filter`
            arguments are only added when it exists.
    """
    filter_args = [("filter", NamingConventions.filter_type(model.name))] if has_filter else []

    collection_name = NamingConventions.collection_query(model.name)
    meta_name = NamingConventions.meta_query(model.name)

    fields = [
        create_field(
            collection_name,
            f"[{model.name}!]!",
            arguments=[("offset", GraphQLScalars.INT), ("limit", GraphQLScalars.INT)] + filter_args,
            directives=config.directives_for(model, collection_name, model),
        ),
        create_field(
            meta_name,
            f"{NamingConventions.meta_type(model.name)}!",
            arguments=list(filter_args),
            directives=config.directives_for(model, meta_name, model),
        ),
    ]
    fields.extend(create_lookup_fields(model, config))
    return fields


def generate_mutation_fields(model: Model, config: GenerationConfig) -> List[FieldDefinition]:
    """
    One mutation per included operation, taking the operation's Args input as `data`.

    The declared return type loses its own non-null marker so a failing
    operation can resolve to null.
    """
    fields = []
    for operation_name, operation in config.included_operations(model).items():
        try:
            return_type = strip_required(config.type_mapper.map_property_type(operation.returns))
        except UnsupportedTypeError as e:
            e.context.setdefault("model", model.name)
            e.context.setdefault("field", f"{operation_name} (return type)")
            raise

        arguments = []
        if operation.arguments:
            arguments.append(("data", f"{NamingConventions.args_type(operation_name)}!"))

        fields.append(
            create_field(
                operation_name,
                return_type,
                arguments=arguments,
                directives=config.directives_for(model, operation_name, operation),
            )
        )
    return fields
