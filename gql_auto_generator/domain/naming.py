"""
Naming convention utilities for GQL Auto Generator.

GraphQL field names are camelCase, type names PascalCase. Query names are
derived from model names by pluralizing or singularizing them with inflect.
"""

import logging
import re
from typing import List

import inflect

from ..constants import TypeNameSuffixes


logger = logging.getLogger(__name__)

# Initialize inflect engine for pluralization
p = inflect.engine()

_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

# Singular nouns that inflect would otherwise strip an "s" from (address, status, analysis)
_SINGULAR_S_ENDINGS = ("ss", "us", "is")


def split_words(name: str) -> List[str]:
    """
    Split an identifier into words on case changes, digits and separators.

    Example:
        >>> split_words("createWidget_part")
        ['create', 'Widget', 'part']
        >>> split_words("XMLHttpRequest")
        ['XML', 'Http', 'Request']
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")
    return _WORD_PATTERN.findall(name)


def to_camel_case(name: str) -> str:
    """
    Convert any identifier to camelCase.

    Example:
        >>> to_camel_case("WidgetParts")
        'widgetParts'
        >>> to_camel_case("order_items")
        'orderItems'
    """
    words = split_words(name)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word.capitalize() for word in tail)


def to_pascal_case(name: str) -> str:
    """
    Upper-case the first letter of every word and drop the separators.

    Unlike to_camel_case the rest of each word is left alone, so acronyms
    survive: "resetAPIKey" becomes "ResetAPIKey".
    """
    return "".join(word[0].upper() + word[1:] for word in split_words(name))


def _inflect_last_word(name: str, inflect_word) -> str:
    """
    Apply an inflection to the last word of an identifier only.

    inflect treats capitalized words as proper nouns ("Category" ->
    "Categorys"), so the word is inflected in lower case and its leading
    capital put back afterwards.
    """
    matches = list(_WORD_PATTERN.finditer(name))
    if not matches:
        return inflect_word(name)
    last = matches[-1]
    word = last.group()
    inflected = inflect_word(word.lower())
    if word.isupper() and len(word) > 1:
        inflected = inflected.upper()
    elif word[0].isupper():
        inflected = inflected[0].upper() + inflected[1:]
    return f"{name[:last.start()]}{inflected}{name[last.end():]}"


def _plural_word(word: str) -> str:
    try:
        plural = p.plural_noun(word)
        if plural:
            return plural
        return word + "s"
    except Exception as e:
        logger.error(f"Inflect pluralization failed for '{word}': {e}. Falling back to adding 's'.")
        return word + "s"


def _singular_word(word: str) -> str:
    if word.endswith(_SINGULAR_S_ENDINGS):
        return word
    candidate = p.singular_noun(word)
    # inflect returns False for words it considers singular
    if not candidate or candidate == word:
        return word
    # Only accept the candidate when it inflects back to the original word
    if p.plural_noun(candidate) != word:
        return word
    return candidate


def pluralize(word: str) -> str:
    """Plural form of a model name, e.g. OrderCategory -> OrderCategories."""
    if not isinstance(word, str) or not word:
        return ""
    return _inflect_last_word(word, _plural_word)


def singularize(word: str) -> str:
    """Singular form of a model name; words that are already singular come back unchanged."""
    if not isinstance(word, str) or not word:
        return ""
    return _inflect_last_word(word, _singular_word)


def collection_query_name(model_name: str) -> str:
    """Name of the paginated list query, e.g. Widget -> widgets."""
    return to_camel_case(pluralize(model_name))


def single_query_name(model_name: str) -> str:
    """Name of the singular lookup query, e.g. Widgets -> widget."""
    return to_camel_case(singularize(model_name))


def args_type_name(operation_name: str) -> str:
    """Input type name for an operation's arguments, e.g. resetPassword -> ResetPasswordArgs."""
    return f"{to_pascal_case(operation_name)}{TypeNameSuffixes.ARGS}"


class NamingConventions:
    """
    Centralized naming convention utilities.

    This class provides consistent naming across the codebase.
    """

    @staticmethod
    def collection_query(model_name: str) -> str:
        return collection_query_name(model_name)

    @staticmethod
    def meta_query(model_name: str) -> str:
        return f"{collection_query_name(model_name)}{TypeNameSuffixes.META}"

    @staticmethod
    def single_query(model_name: str) -> str:
        return single_query_name(model_name)

    @staticmethod
    def lookup_query(model_name: str, property_name: str) -> str:
        """Per-property lookup name, e.g. (Widget, serialNumber) -> widgetBySerialNumber."""
        return f"{single_query_name(model_name)}{TypeNameSuffixes.BY}{to_pascal_case(property_name)}"

    @staticmethod
    def args_type(operation_name: str) -> str:
        return args_type_name(operation_name)

    @staticmethod
    def filter_type(model_name: str) -> str:
        return f"{model_name}{TypeNameSuffixes.FILTER}"

    @staticmethod
    def unique_filter_type(model_name: str) -> str:
        return f"{model_name}{TypeNameSuffixes.UNIQUE_FILTER}"

    @staticmethod
    def meta_type(model_name: str) -> str:
        return f"{model_name}{TypeNameSuffixes.META}"


def to_snake_case(name: str) -> str:
    """
    Convert any identifier to snake_case.

    Example:
        >>> to_snake_case("widgetsMeta")
        'widgets_meta'
    """
    return "_".join(word.lower() for word in split_words(name))
