"""
Per-model schema composition.

Builds the `SchemaFragment` for one model: its object type, one `Args`
input per operation, the filter inputs and the root fields it contributes
to `Query` and `Mutation`.
"""

import logging

from gql_auto_generator.config_manager import GenerationConfig
from gql_auto_generator.domain.models import Model
from gql_auto_generator.sdl.document import SchemaFragment
from gql_auto_generator.sdl.filters import generate_filter_input, generate_unique_filter_input
from gql_auto_generator.sdl.queries import generate_meta_type, generate_mutation_fields, generate_query_fields
from gql_auto_generator.sdl.types import generate_type_defs


logger = logging.getLogger(__name__)


def generate_fragment(model: Model, config: GenerationConfig) -> SchemaFragment:
    """
    Compose the SDL fragment for a single model.

    Type definitions come in a fixed order: the object type, the operation
    inputs, then `<Model>Meta`, `<Model>Filter` and `<Model>UniqueFilter`
    when queries are generated.
    """
    fragment = SchemaFragment(model_name=model.name)
    fragment.type_defs.extend(generate_type_defs(model, config))

    if config.generate_queries:
        fragment.type_defs.append(generate_meta_type(model))

        filter_def = generate_filter_input(model, config) if config.enable_filtering else None
        if filter_def is not None:
            fragment.type_defs.append(filter_def)

        unique_filter_def = generate_unique_filter_input(model, config)
        if unique_filter_def is not None:
            fragment.type_defs.append(unique_filter_def)

        fragment.query_fields.extend(generate_query_fields(model, config, has_filter=filter_def is not None))

    fragment.mutation_fields.extend(generate_mutation_fields(model, config))

    logger.debug(
        f"Composed fragment for {model.name}: {len(fragment.type_defs)} definitions, "
        f"{len(fragment.query_fields)} queries, {len(fragment.mutation_fields)} mutations"
    )
    return fragment


def generate_fragment_code(model: Model, config: GenerationConfig) -> str:
    """Render a model's fragment as a standalone SDL document."""
    return generate_fragment(model, config).render()
