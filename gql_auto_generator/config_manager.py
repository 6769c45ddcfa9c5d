"""
Configuration management system for GQL Auto Generator.

`GenerationConfig` is the options object every generator component reads.
Callback options always hold a callable: the defaults include everything and
inject nothing, so the composers never check for missing hooks.

Programmatic callers build a GenerationConfig directly; the CLI turns a
validated `ToolConfigSchema` into one with `build_generation_config`.
"""

import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable, Dict, List, Optional

from .constants import DefaultConfig, OutputTypes, UniqueLookupModes
from .domain.models import Model, Operation, PropertyType, Relation
from .exceptions import raise_configuration_error
from .type_mapper import TypeMapper


logger = logging.getLogger(__name__)


# --- Default callbacks ---

def include_all(*args: Any) -> bool:
    return True


def no_directives(model: Model, field_name: str, field_type: Any) -> str:
    return ""


def no_relation_resolver(model: Model, relation_name: str, relation: Relation) -> Optional[str]:
    return None


def ignore_emitted_files(files_emitted: List[str]) -> None:
    return None


@dataclass
class GenerationConfig:
    """Options and hooks for one generation run."""

    # Output settings
    output_dir: str = DefaultConfig.OUTPUT_DIR
    merge_output: Optional[str] = None
    overwrite_existing: bool = DefaultConfig.OVERWRITE_EXISTING
    verbose: bool = DefaultConfig.VERBOSE
    output_type: str = DefaultConfig.OUTPUT_TYPE

    # Schema shape
    use_uuid_scalar: bool = DefaultConfig.USE_UUID_SCALAR
    enable_filtering: bool = DefaultConfig.ENABLE_FILTERING
    unique_lookup_mode: str = DefaultConfig.UNIQUE_LOOKUP_MODE
    generate_queries: bool = DefaultConfig.GENERATE_QUERIES
    emit_resolvers: bool = DefaultConfig.EMIT_RESOLVERS

    # Hooks
    should_emit_model: Callable[[Model], bool] = include_all
    is_model_toplevel: Callable[[Model], bool] = include_all
    should_type_include_property: Callable[[Model, str, PropertyType], bool] = include_all
    should_type_include_relation: Callable[[Model, str, Relation], bool] = include_all
    should_type_include_operation: Callable[[Model, str, Operation], bool] = include_all
    should_generate_resolver: Callable[[Model, str], bool] = include_all
    get_field_directives: Callable[[Model, str, Any], str] = no_directives
    get_relation_resolver: Callable[[Model, str, Relation], Optional[str]] = no_relation_resolver
    on_complete: Callable[[List[str]], None] = ignore_emitted_files

    def __post_init__(self):
        """Validate option values."""
        if self.output_type not in OutputTypes.ALL:
            raise_configuration_error(
                f"Invalid output_type: {self.output_type}",
                context={"valid_options": OutputTypes.ALL},
            )
        if self.unique_lookup_mode not in UniqueLookupModes.ALL:
            raise_configuration_error(
                f"Invalid unique_lookup_mode: {self.unique_lookup_mode}",
                context={"valid_options": UniqueLookupModes.ALL},
            )
        if not self.output_dir:
            raise_configuration_error("output_dir cannot be empty")

    @property
    def merge_mode(self) -> bool:
        """All models go to one document instead of one file each."""
        return bool(self.merge_output)

    @cached_property
    def type_mapper(self) -> TypeMapper:
        return TypeMapper(use_uuid_scalar=self.use_uuid_scalar)

    def is_model_included(self, model: Model) -> bool:
        """A model is emitted only when both the current and the legacy predicate accept it."""
        return bool(self.should_emit_model(model)) and bool(self.is_model_toplevel(model))

    def included_properties(self, model: Model) -> Dict[str, PropertyType]:
        return {
            name: prop
            for name, prop in model.properties.items()
            if self.should_type_include_property(model, name, prop)
        }

    def included_relations(self, model: Model) -> Dict[str, Relation]:
        return {
            name: relation
            for name, relation in model.relations.items()
            if self.should_type_include_relation(model, name, relation)
        }

    def included_operations(self, model: Model) -> Dict[str, Operation]:
        return {
            name: operation
            for name, operation in model.operations.items()
            if self.should_type_include_operation(model, name, operation)
        }

    def included_identifiers(self, model: Model) -> List[str]:
        """Identifying properties that also pass the property predicate."""
        properties = self.included_properties(model)
        return [name for name in model.identifier_names if name in properties]

    def directives_for(self, model: Model, field_name: str, field_type: Any) -> str:
        """Directive text to append after a field, with a leading space when present."""
        directives = (self.get_field_directives(model, field_name, field_type) or "").strip()
        return f" {directives}" if directives else ""


def _split_qualified_name(qualified_name: str) -> tuple:
    model_name, _, member_name = qualified_name.partition(".")
    return model_name, member_name


def build_generation_config(tool_config: Any, **overrides: Any) -> GenerationConfig:
    """
    Turn a validated ToolConfigSchema into a GenerationConfig.

    Name lists and `Model.field` keyed mappings from the YAML file become the
    corresponding hooks. Keyword overrides (e.g. `on_complete`) are applied last.
    """
    include_models = set(tool_config.include_models or [])
    exclude_models = set(tool_config.exclude_models or [])
    exclude_properties = {
        _split_qualified_name(name) for name in (tool_config.exclude_properties or [])
    }
    field_directives = {
        _split_qualified_name(name): text for name, text in (tool_config.field_directives or {}).items()
    }
    relation_resolvers = {
        _split_qualified_name(name): body for name, body in (tool_config.relation_resolvers or {}).items()
    }

    def should_emit_model(model: Model) -> bool:
        if include_models and model.name not in include_models:
            logger.debug(f"Model {model.name} not in include_models, excluded")
            return False
        if model.name in exclude_models:
            logger.debug(f"Model {model.name} excluded by exclude_models")
            return False
        return True

    def should_type_include_property(model: Model, name: str, prop: PropertyType) -> bool:
        return (model.name, name) not in exclude_properties

    def get_field_directives(model: Model, field_name: str, field_type: Any) -> str:
        return field_directives.get((model.name, field_name), "")

    def get_relation_resolver(model: Model, relation_name: str, relation: Relation) -> Optional[str]:
        return relation_resolvers.get((model.name, relation_name))

    options: Dict[str, Any] = {
        "output_dir": tool_config.output_dir,
        "merge_output": tool_config.merge_output,
        "overwrite_existing": tool_config.overwrite_existing,
        "verbose": tool_config.verbose,
        "output_type": tool_config.output_type,
        "use_uuid_scalar": tool_config.use_uuid_scalar,
        "enable_filtering": tool_config.enable_filtering,
        "unique_lookup_mode": tool_config.unique_lookup_mode,
        "generate_queries": tool_config.generate_queries,
        "emit_resolvers": tool_config.emit_resolvers,
        "should_emit_model": should_emit_model,
        "should_type_include_property": should_type_include_property,
        "get_field_directives": get_field_directives,
        "get_relation_resolver": get_relation_resolver,
    }
    options.update(overrides)
    return GenerationConfig(**options)
