"""
Custom exception hierarchy for GQL Auto Generator.

This module provides the exception system used across schema loading,
type mapping and file emission. Every error carries context and recovery
suggestions so the CLI can print something actionable.
"""

from typing import Dict, Any, Optional, List


class GqlAutoGeneratorError(Exception):
    """
    Base exception for all GQL Auto Generator errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [super().__str__()]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(GqlAutoGeneratorError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify option names and allowed values",
                "Check the README for configuration examples"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class UnsupportedTypeError(GqlAutoGeneratorError):
    """Raised when a property type has no GraphQL representation."""

    def __init__(self, message: str, type_name: str = None, model: str = None, field: str = None, **kwargs):
        context = kwargs.get('context', {})
        if type_name:
            context['type_name'] = type_name
        if model:
            context['model'] = model
        if field:
            context['field'] = field

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Replace Object properties with a reference to a named model",
                "Check the property type name for typos",
                "Supported types: Array, ReferenceModel, ImportModel, Binary, Boolean, "
                "DateTime, Decimal, Integer, String, UniqueIdentifier"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="UNSUPPORTED_TYPE"
        )


class MissingResolverError(GqlAutoGeneratorError):
    """Raised when a model declares a relation but no resolver is configured for it."""

    def __init__(self, message: str, model: str = None, relation: str = None, **kwargs):
        context = kwargs.get('context', {})
        if model:
            context['model'] = model
        if relation:
            context['relation'] = relation

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Add the relation to 'relation_resolvers' in the configuration",
                "Exclude the relation from the generated type",
                "Disable resolver emission with 'emit_resolvers: false'"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="MISSING_RESOLVER"
        )


class SchemaLoadError(GqlAutoGeneratorError):
    """Raised when a schema document cannot be turned into models."""

    def __init__(self, message: str, schema_file: str = None, model: str = None, **kwargs):
        context = kwargs.get('context', {})
        if schema_file:
            context['schema_file'] = schema_file
        if model:
            context['model'] = model

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the YAML syntax of the schema file",
                "Make sure the document has a top-level 'models' mapping",
                "Verify every property declares a type"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="SCHEMA_LOAD_ERROR"
        )


class CodeGenerationError(GqlAutoGeneratorError):
    """Raised when rendering generated output fails."""

    def __init__(self, message: str, component: str = None, model: str = None, **kwargs):
        context = kwargs.get('context', {})
        if component:
            context['component'] = component  # e.g., 'sdl', 'resolvers'
        if model:
            context['model'] = model

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the model for unsupported patterns",
                "Try generating one model at a time",
                "Check for naming conflicts between models"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CODE_GENERATION_ERROR"
        )


class ValidationError(GqlAutoGeneratorError):
    """Raised when validation of generated SDL fails."""

    def __init__(self, message: str, validator: str = None, **kwargs):
        context = kwargs.get('context', {})
        if validator:
            context['validator'] = validator

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that every referenced model is part of the schema",
                "Run generation in merge mode so all types share one document",
                "Review field directives injected through the configuration"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="VALIDATION_ERROR"
        )


# Convenience functions for common error patterns
def raise_configuration_error(message: str, config_file: str = None, **kwargs):
    """Convenience function to raise configuration errors."""
    raise ConfigurationError(message, config_file=config_file, **kwargs)


def raise_unsupported_type_error(message: str, type_name: str = None, **kwargs):
    """Convenience function to raise unsupported type errors."""
    raise UnsupportedTypeError(message, type_name=type_name, **kwargs)
