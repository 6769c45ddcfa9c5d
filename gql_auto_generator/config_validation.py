# File: gql_auto_generator/config_validation.py
from argparse import Namespace
import sys
import logging
from typing import List, Optional, Dict, Any, Literal, Self
import yaml
from pathlib import Path

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
    ConfigDict,
)

from gql_auto_generator.constants import DefaultConfig

logger = logging.getLogger(__name__)

# --- Helper Functions for Validation ---


def is_valid_graphql_name(name: str) -> bool:
    """Check if a string is a valid GraphQL name (letters, digits, underscores; no leading digit)."""
    return bool(name) and (name[0].isalpha() or name[0] == "_") and all(
        ch.isalnum() or ch == "_" for ch in name
    ) and name.isascii()


def _check_name_list(values: Optional[List[Any]], qualified: bool) -> Optional[List[str]]:
    if values is None:
        return None
    if not isinstance(values, list):
        raise ValueError("Expected a list of names.")
    processed_list = []
    for index, item in enumerate(values):
        if not isinstance(item, str):
            raise ValueError(
                f"Item at index {index} must be a string, found: {type(item).__name__}"
            )
        stripped_item = item.strip()
        if not stripped_item:
            raise ValueError(
                f"Item at index {index} cannot be empty or just whitespace."
            )
        _check_name(stripped_item, qualified)
        processed_list.append(stripped_item)
    return processed_list


def _check_name(name: str, qualified: bool) -> None:
    parts = name.split(".")
    if qualified and len(parts) != 2:
        raise ValueError(f"'{name}' must have the form 'Model.field'.")
    for part in parts:
        if not is_valid_graphql_name(part):
            raise ValueError(f"'{name}' is not a valid GraphQL name.")


# --- Pydantic Model for Configuration Schema ---
class ToolConfigSchema(BaseModel):
    """Pydantic schema defining the expected structure and types for the configuration."""

    schema_file: Optional[str] = Field(
        default=None,
        description="Path to the YAML schema document describing the models.",
    )
    output_dir: str = Field(
        DefaultConfig.OUTPUT_DIR,
        min_length=1,
        description="Directory for generated SDL and resolver files.",
    )
    merge_output: Optional[str] = Field(
        default=None,
        description="File name (relative to output_dir) of a single merged schema document. "
        "Enables merge mode when set.",
    )
    overwrite_existing: bool = Field(
        default=DefaultConfig.OVERWRITE_EXISTING,
        description="Overwrite files that already exist instead of skipping them.",
    )
    verbose: bool = Field(
        default=DefaultConfig.VERBOSE,
        description="Log a line for every file written or skipped.",
    )
    output_type: Literal["source-module", "plain-script", "python-module"] = Field(
        default=DefaultConfig.OUTPUT_TYPE,
        description="Flavour of the resolver stub files.",
    )
    use_uuid_scalar: bool = Field(
        default=DefaultConfig.USE_UUID_SCALAR,
        description="Render UniqueIdentifier properties as a custom UUID scalar instead of ID.",
    )
    enable_filtering: bool = Field(
        default=DefaultConfig.ENABLE_FILTERING,
        description="Generate <Model>Filter input types and filter arguments.",
    )
    unique_lookup_mode: Literal["where", "by_property"] = Field(
        default=DefaultConfig.UNIQUE_LOOKUP_MODE,
        description="Singular lookup shape: one query with a `where` argument, or one query per identifier.",
    )
    generate_queries: bool = Field(
        default=DefaultConfig.GENERATE_QUERIES,
        description="Generate Query root fields for every model.",
    )
    emit_resolvers: bool = Field(
        default=DefaultConfig.EMIT_RESOLVERS,
        description="Write resolver stub files next to the SDL output.",
    )
    include_models: Optional[List[str]] = Field(
        default=None,
        description="Optional list of model names to include.",
    )
    exclude_models: Optional[List[str]] = Field(
        default=None, description="Optional list of model names to exclude."
    )
    exclude_properties: Optional[List[str]] = Field(
        default=None, description="Properties to leave out of the object types, as 'Model.property'."
    )
    field_directives: Dict[str, str] = Field(
        default_factory=dict,
        description="SDL directive text appended after a field, keyed by 'Model.field'.",
    )
    relation_resolvers: Dict[str, str] = Field(
        default_factory=dict,
        description="Resolver body for relation fields, keyed by 'Model.relation'.",
    )

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access."""
        return getattr(self, key)

    def get(self, key: str, default: Any = None) -> Any:
        """Allow dict.get() style access."""
        return getattr(self, key, default)

    # --- Custom Field Validators ---

    @field_validator("include_models", "exclude_models", mode="before")
    @classmethod
    def check_model_names_list(cls, v: Optional[List[Any]]) -> Optional[List[str]]:
        """Ensure items in model lists are non-empty GraphQL names."""
        return _check_name_list(v, qualified=False)

    @field_validator("exclude_properties", mode="before")
    @classmethod
    def check_property_names_list(cls, v: Optional[List[Any]]) -> Optional[List[str]]:
        """Ensure items are 'Model.property' names."""
        return _check_name_list(v, qualified=True)

    @field_validator("field_directives", "relation_resolvers")
    @classmethod
    def check_qualified_keys(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Ensure mapping keys are 'Model.field' names."""
        for key in v:
            _check_name(key, qualified=True)
        return v

    @field_validator("merge_output")
    @classmethod
    def check_merge_output(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("merge_output cannot be empty or just whitespace.")
        if Path(v).suffix not in (".graphql", ".gql"):
            raise ValueError(f"merge_output must be a .graphql or .gql file, got '{v}'")
        return v

    # --- Cross-field Validation ---
    @model_validator(mode="after")
    def check_model_selection(self) -> Self:
        """Perform cross-field validation checks."""
        if self.include_models and self.exclude_models:
            overlap = set(self.include_models) & set(self.exclude_models)
            if overlap:
                logger.warning(
                    f"Models listed in both include_models and exclude_models will be excluded: {sorted(overlap)}"
                )
        if self.relation_resolvers and not self.emit_resolvers:
            logger.warning(
                "'relation_resolvers' is set but 'emit_resolvers' is False. The resolvers will not be written."
            )
        return self

    model_config = ConfigDict(
        extra="ignore",  # Allow and ignore extra fields from input dict
    )


# --- Validation Function ---
def validate_and_parse_config(config_dict: Dict[str, Any]) -> ToolConfigSchema:
    """
    Validates a raw configuration dictionary against the ToolConfigSchema.
    Exits with error messages if validation fails.
    """
    try:
        validated_config = ToolConfigSchema.model_validate(config_dict)
        logger.debug(
            "Configuration dictionary parsed and validated successfully against schema."
        )
        return validated_config
    except ValidationError as e:
        logger.critical(
            "Configuration validation failed! Please check your config file or arguments."
        )
        print("\n--- Configuration Errors ---", file=sys.stderr)
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            msg = error.get("msg", "Unknown validation error")
            input_value = error.get("input", "N/A")

            print(f"  - Location: '{loc_str}'", file=sys.stderr)
            print(f"    Error:    {msg}", file=sys.stderr)

            if any(x in loc_parts for x in ["field_directives", "relation_resolvers", "exclude_properties"]):
                print(
                    f"    Hint:     Value '{input_value}' must be written as 'Model.field'.",
                    file=sys.stderr,
                )

        print("----------------------------", file=sys.stderr)
        sys.exit(1)


# CLI argument name -> config key, for arguments whose names differ
CLI_ARGUMENT_KEYS = {
    "schema": "schema_file",
    "merge": "merge_output",
    "overwrite": "overwrite_existing",
}


def load_config(config_path: Optional[str], cli_args: Namespace) -> ToolConfigSchema:
    """
    Loads configuration from YAML file, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.
    Exits with error messages if validation fails.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error(f"Error parsing YAML file {config_path}: {e}")
                logger.warning("Proceeding with defaults and CLI arguments only.")
                yaml_config = None
            if yaml_config and isinstance(yaml_config, dict):
                raw_config.update(yaml_config)
                logger.debug(f"Loaded configuration from {config_path}")
            elif yaml_config:
                logger.warning(
                    f"Content in config file {config_path} is not a dictionary. Ignoring file content."
                )
        else:
            logger.warning(
                f"Config file not found at {config_path}. Using defaults and CLI arguments."
            )

    # 2. Override with CLI arguments (only those explicitly provided)
    cli_dict = vars(cli_args)
    overridden_keys = set()
    for key, value in cli_dict.items():
        config_key = CLI_ARGUMENT_KEYS.get(key, key)
        # store_true flags default to None so an absent flag never overrides the file
        if value is not None and config_key in ToolConfigSchema.model_fields:
            raw_config[config_key] = value
            overridden_keys.add(config_key)
    if overridden_keys:
        logger.debug(f"Overridden config keys from CLI arguments: {overridden_keys}")

    # 3. Validate
    logger.info("Validating final configuration...")
    validated_config: ToolConfigSchema = validate_and_parse_config(raw_config)

    # 4. Post-validation adjustments
    validated_config.output_dir = str(Path(validated_config.output_dir).resolve())

    logger.info("Configuration loaded and validated successfully.")
    return validated_config
