import logging
from typing import List, Optional

from gql_auto_generator.config_manager import GenerationConfig
from gql_auto_generator.constants import FILTER_SUFFIX_MAP, FilterSuffixes
from gql_auto_generator.domain.models import Model, PropertyKind
from gql_auto_generator.domain.naming import NamingConventions
from gql_auto_generator.sdl.base import FieldDefinition, TypeDefinition, create_field, create_input_type
from gql_auto_generator.type_mapper import strip_required


logger = logging.getLogger(__name__)


def create_filter_fields(model: Model, config: GenerationConfig) -> List[FieldDefinition]:
    """Comparison fields for every filterable scalar property."""
    fields = []
    for name, prop in config.included_properties(model).items():
        suffixes = FILTER_SUFFIX_MAP.get(prop.type_name)
        if suffixes is None:
            continue
        # Filter values are always optional
        gql_type = config.type_mapper.base_type_name(prop.type_name)

        if prop.kind == PropertyKind.UNIQUE_IDENTIFIER:
            fields.append(create_field(f"{name}{FilterSuffixes.IDENTIFIER_LIST}", f"[{gql_type}]"))
        for suffix in suffixes:
            fields.append(create_field(f"{name}{suffix}", gql_type))
    return fields


def generate_filter_input(model: Model, config: GenerationConfig) -> Optional[TypeDefinition]:
    """
    Creates `input <Model>Filter`, or None when no property can be filtered.

    The `or` / `and` fields take lists of the filter itself so conditions can
    be composed.
    """
    comparison_fields = create_filter_fields(model, config)
    if not comparison_fields:
        logger.debug(f"Model {model.name} has no filterable properties, skipping filter type")
        return None

    filter_name = NamingConventions.filter_type(model.name)
    fields = [
        create_field("or", f"[{filter_name}!]"),
        create_field("and", f"[{filter_name}!]"),
    ] + comparison_fields
    return create_input_type(filter_name, fields)


def generate_unique_filter_input(model: Model, config: GenerationConfig) -> Optional[TypeDefinition]:
    """Creates `input <Model>UniqueFilter` with one optional field per identifying property."""
    fields = []
    for name in config.included_identifiers(model):
        prop = model.properties[name]
        gql_type = strip_required(config.type_mapper.map_property_type(prop, for_input=True))
        fields.append(create_field(name, gql_type))

    if not fields:
        logger.debug(f"Model {model.name} has no identifying properties, skipping unique filter type")
        return None
    return create_input_type(NamingConventions.unique_filter_type(model.name), fields)
