"""
Validation utilities for GQL Auto Generator.

Checks generated SDL by building it into a schema with graphql-core, so a
document that would not load in a GraphQL server is caught at generation time.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Set

from graphql import GraphQLError, build_schema, parse, validate_schema
from graphql.language import DocumentNode, ScalarTypeDefinitionNode

from .constants import GraphQLScalars
from .exceptions import ValidationError


logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    is_valid: bool
    errors: List[str]
    warnings: List[str]

    def __post_init__(self):
        """Ensure consistency."""
        if self.errors and self.is_valid:
            self.is_valid = False

    def add_error(self, error: str) -> None:
        """Add an error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning."""
        self.warnings.append(warning)

    def raise_if_invalid(self) -> None:
        """Raise ValidationError if invalid."""
        if not self.is_valid:
            raise ValidationError(
                f"Validation failed: {'; '.join(self.errors)}",
                validator="graphql-core",
                context={"errors": self.errors, "warnings": self.warnings}
            )


def declared_scalars(document: DocumentNode) -> Set[str]:
    return {
        definition.name.value
        for definition in document.definitions
        if isinstance(definition, ScalarTypeDefinitionNode)
    }


class SchemaValidator:
    """
    Validates SDL documents produced by the generator.

    Per-model files use the custom scalars without declaring them; the
    missing `scalar` declarations are prepended before the schema is built.
    """

    def __init__(self, scalars: Iterable[str] = (GraphQLScalars.DATE,)):
        self.scalars = [name for name in scalars if name not in GraphQLScalars.BUILTIN]

    def with_scalar_declarations(self, sdl: str, document: DocumentNode) -> str:
        missing = [name for name in self.scalars if name not in declared_scalars(document)]
        if not missing:
            return sdl
        return "\n".join(f"scalar {name}" for name in missing) + "\n\n" + sdl

    def validate_sdl(self, sdl: str) -> ValidationResult:
        """Parse and build an SDL document, collecting every problem found."""
        result = ValidationResult(True, [], [])

        if not sdl or not sdl.strip():
            result.add_error("SDL document is empty")
            return result

        try:
            document = parse(sdl)
            schema = build_schema(self.with_scalar_declarations(sdl, document))
        except GraphQLError as e:
            result.add_error(e.message)
            return result
        except TypeError as e:
            # build_schema reports SDL rule violations such as unknown types this way
            result.add_error(str(e))
            return result

        if schema.query_type is None:
            result.add_warning("Document defines no Query type")
        for error in validate_schema(schema):
            if schema.query_type is None and "Query root type must be provided" in error.message:
                continue
            result.add_error(error.message)

        if result.is_valid:
            logger.debug(f"SDL document is valid ({len(schema.type_map)} types)")
        return result
