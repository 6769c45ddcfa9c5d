"""
Resolver stub generation for GQL Auto Generator.

Writes one resolver file per model with a placeholder for every generated
Query and Mutation field. Each stub is named exactly like its schema field
and fails with "not implemented" until someone fills it in. Relation fields
get the resolver body supplied by the `get_relation_resolver` hook.

The file flavour is chosen by `output_type`:

    source-module  ->  <Model>.resolvers.js  (export default { ... })
    plain-script   ->  <Model>.resolvers.js  (module.exports = { ... })
    python-module  ->  <model>_resolvers.py  (Ariadne bindables)
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from jinja2 import Environment

from gql_auto_generator.codegen import render_template, setup_jinja_env
from gql_auto_generator.codegen_utils import format_python_code_using_black
from gql_auto_generator.config_manager import GenerationConfig
from gql_auto_generator.constants import FileExtensions, OutputTypes
from gql_auto_generator.domain.models import Model
from gql_auto_generator.domain.naming import to_snake_case
from gql_auto_generator.exceptions import MissingResolverError
from gql_auto_generator.sdl.document import SchemaFragment


logger = logging.getLogger(__name__)


def _field_names(fields) -> List[str]:
    return [field_def.name for field_def in fields if field_def.name]


def collect_resolver_context(model: Model, fragment: SchemaFragment, config: GenerationConfig) -> Dict[str, Any]:
    """
    Gather the stub names and relation bodies for one model.

    Raises:
        MissingResolverError: When an included relation has no resolver body.
    """
    queries = [
        name for name in _field_names(fragment.query_fields)
        if config.should_generate_resolver(model, name)
    ]
    mutations = [
        name for name in _field_names(fragment.mutation_fields)
        if config.should_generate_resolver(model, name)
    ]

    relations = []
    for relation_name, relation in config.included_relations(model).items():
        if not config.should_generate_resolver(model, relation_name):
            logger.debug(f"Resolver generation disabled for {model.name}.{relation_name}")
            continue
        body = config.get_relation_resolver(model, relation_name, relation)
        if not body or not body.strip():
            raise MissingResolverError(
                f"No resolver supplied for relation '{relation_name}' of model '{model.name}'",
                model=model.name,
                relation=relation_name,
            )
        relations.append({"name": relation_name, "body": body.strip()})

    return {
        "model_name": model.name,
        "queries": queries,
        "mutations": mutations,
        "relations": relations,
    }


def has_stubs(context: Dict[str, Any]) -> bool:
    return bool(context["queries"] or context["mutations"] or context["relations"])


# ---- Output strategies ----

class ResolverWriterStrategy(ABC):
    """Renders the resolver stubs of one model in a specific file flavour."""

    template_name: str = ""

    @abstractmethod
    def file_name(self, model: Model) -> str:
        """Name of the resolver file for a model."""
        pass

    def generate_code(self, env: Environment, context: Dict[str, Any]) -> str:
        return render_template(env, self.template_name, context)


class SourceModuleWriter(ResolverWriterStrategy):
    """ES module with a default export"""
    template_name = "resolvers_module.js.j2"

    def file_name(self, model: Model) -> str:
        return f"{model.name}{FileExtensions.JS_RESOLVERS}"


class PlainScriptWriter(ResolverWriterStrategy):
    """CommonJS script assigning module.exports"""
    template_name = "resolvers_script.js.j2"

    def file_name(self, model: Model) -> str:
        return f"{model.name}{FileExtensions.JS_RESOLVERS}"


class PythonModuleWriter(ResolverWriterStrategy):
    """Python module exposing Ariadne bindables, formatted with Black"""
    template_name = "resolvers.py.j2"

    def file_name(self, model: Model) -> str:
        return f"{to_snake_case(model.name)}{FileExtensions.PY_RESOLVERS}"

    def generate_code(self, env: Environment, context: Dict[str, Any]) -> str:
        type_var = f"{to_snake_case(context['model_name'])}_type"
        bindables = []
        if context["queries"]:
            bindables.append({"var": "query", "constructor": "QueryType()", "import": "QueryType"})
        if context["mutations"]:
            bindables.append({"var": "mutation", "constructor": "MutationType()", "import": "MutationType"})
        if context["relations"]:
            bindables.append(
                {"var": type_var, "constructor": f'ObjectType("{context["model_name"]}")', "import": "ObjectType"}
            )

        python_context = dict(context)
        python_context.update({
            "bindables": bindables,
            "imports": sorted({bindable["import"] for bindable in bindables}),
            "type_var": type_var,
        })
        code = render_template(env, self.template_name, python_context)
        filepath = Path(f"{to_snake_case(context['model_name'])}{FileExtensions.PY_RESOLVERS}")
        return format_python_code_using_black(filepath, code)


class ResolverWriterFactory:
    """Factory for creating resolver writer strategies"""

    _registry: Dict[str, Type[ResolverWriterStrategy]] = {
        OutputTypes.SOURCE_MODULE: SourceModuleWriter,
        OutputTypes.PLAIN_SCRIPT: PlainScriptWriter,
        OutputTypes.PYTHON_MODULE: PythonModuleWriter,
    }

    @classmethod
    def create(cls, output_type: str) -> ResolverWriterStrategy:
        """Create a writer strategy instance by output type"""
        writer_class = cls._registry.get(output_type)
        if not writer_class:
            raise ValueError(f"Unknown output type: {output_type}")
        return writer_class()


def resolver_file_name(model: Model, config: GenerationConfig) -> str:
    return ResolverWriterFactory.create(config.output_type).file_name(model)


def generate_resolvers_code(
    model: Model,
    fragment: SchemaFragment,
    config: GenerationConfig,
    env: Optional[Environment] = None,
) -> Optional[str]:
    """
    Render the resolver stub file for a model.

    Returns None when the model contributes no resolvable field at all.
    """
    context = collect_resolver_context(model, fragment, config)
    if not has_stubs(context):
        logger.debug(f"No resolver stubs for {model.name}")
        return None

    writer = ResolverWriterFactory.create(config.output_type)
    return writer.generate_code(env or setup_jinja_env(), context)
