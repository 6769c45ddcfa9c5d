"""
Schema fragments and the merged root document.

A `SchemaFragment` is the structured SDL output for one model: its type
definitions plus the fields it contributes to the `Query` and `Mutation`
root types. Per-model files render a fragment on its own; merge mode
combines every fragment into a single document with one `Query` and one
`Mutation` type.

Fragments that only exist as SDL text are turned back into the same
structure by `parse_fragment`. The text is parsed with graphql-core and each
definition is sliced out of the source by its location, so the merged
document reproduces the input byte for byte.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from graphql import GraphQLSyntaxError, parse
from graphql.language import (
    DefinitionNode,
    ExecutableDefinitionNode,
    Node,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
)

from gql_auto_generator.constants import GraphQLScalars, RootTypes
from gql_auto_generator.exceptions import CodeGenerationError
from gql_auto_generator.sdl.base import FieldDefinition, TypeDefinition, render_block


logger = logging.getLogger(__name__)

# graphql-core node kinds (without _definition/_extension) whose SDL keyword differs
_KEYWORDS_BY_KIND = {
    "object_type": "type",
    "input_object_type": "input",
    "enum_type": "enum",
    "interface_type": "interface",
    "union_type": "union",
    "scalar_type": "scalar",
}


@dataclass
class SchemaFragment:
    """SDL contributed by one model."""

    model_name: Optional[str] = None
    type_defs: List[TypeDefinition] = field(default_factory=list)
    query_fields: List[FieldDefinition] = field(default_factory=list)
    mutation_fields: List[FieldDefinition] = field(default_factory=list)
    scalars: List[str] = field(default_factory=list)

    @property
    def query_block(self) -> str:
        return render_block("type", RootTypes.QUERY, self.query_fields)

    @property
    def mutation_block(self) -> str:
        """Empty when the model has no operations."""
        return render_block("type", RootTypes.MUTATION, self.mutation_fields)

    def render(self) -> str:
        """Render the fragment as a standalone per-model document."""
        parts = [f"scalar {name}" for name in self.scalars]
        parts.extend(type_def.render() for type_def in self.type_defs)
        parts.extend([self.query_block, self.mutation_block])
        return "\n\n".join(part for part in parts if part) + "\n"


def _definition_keyword(node: DefinitionNode) -> str:
    """SDL keyword of a definition node, e.g. object_type_extension -> type."""
    kind = node.kind
    for suffix in ("_definition", "_extension"):
        if kind.endswith(suffix):
            kind = kind[: -len(suffix)]
            break
    return _KEYWORDS_BY_KIND.get(kind, kind)


def _source_text(text: str, node: Node) -> str:
    return text[node.loc.start:node.loc.end]


def parse_fragment(text: str, model_name: Optional[str] = None) -> SchemaFragment:
    """
    Parse SDL text into a SchemaFragment.

    `type Query` / `type Mutation` blocks (and their extensions) contribute
    their field definitions to the root fields; scalars are collected by
    name; every other definition is kept verbatim, description included.
    `#` comments outside a definition are dropped.

    Raises:
        CodeGenerationError: When the text is not valid SDL.
    """
    fragment = SchemaFragment(model_name=model_name)
    if not text.strip():
        return fragment

    try:
        document = parse(text)
    except GraphQLSyntaxError as e:
        raise CodeGenerationError(
            f"Cannot parse SDL fragment: {e.message}",
            component="sdl",
            model=model_name,
        ) from e

    for node in document.definitions:
        if isinstance(node, ExecutableDefinitionNode):
            logger.warning(f"Ignoring executable definition in SDL text: {_source_text(text, node)[:40]!r}")
            continue

        name = node.name.value if getattr(node, "name", None) else ""

        if isinstance(node, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode)) and name in (
            RootTypes.QUERY, RootTypes.MUTATION,
        ):
            fields = [FieldDefinition(name=field_node.name.value, raw=_source_text(text, field_node))
                      for field_node in node.fields or ()]
            if name == RootTypes.QUERY:
                fragment.query_fields.extend(fields)
            else:
                fragment.mutation_fields.extend(fields)
        elif isinstance(node, ScalarTypeDefinitionNode):
            fragment.scalars.append(name)
        else:
            fragment.type_defs.append(
                TypeDefinition(keyword=_definition_keyword(node), name=name, raw=_source_text(text, node))
            )

    return fragment


def merge_fragments(fragments: Iterable[SchemaFragment], scalars: Iterable[str] = (GraphQLScalars.DATE,)) -> str:
    """
    Combine fragments into one root document.

    Layout: scalar declarations, the merged Query type, the merged Mutation
    type (only when some model has operations), then all other definitions
    in fragment order.
    """
    scalar_names: List[str] = []
    query_fields: List[FieldDefinition] = []
    mutation_fields: List[FieldDefinition] = []
    general: List[str] = []

    for name in scalars:
        if name not in scalar_names:
            scalar_names.append(name)

    for fragment in fragments:
        for name in fragment.scalars:
            if name not in scalar_names:
                scalar_names.append(name)
        query_fields.extend(fragment.query_fields)
        mutation_fields.extend(fragment.mutation_fields)
        general.extend(type_def.render() for type_def in fragment.type_defs)

    parts = [f"scalar {name}" for name in scalar_names]
    parts.append(render_block("type", RootTypes.QUERY, query_fields))
    parts.append(render_block("type", RootTypes.MUTATION, mutation_fields))
    parts.extend(general)

    return "\n\n".join(part for part in parts if part) + "\n"


def merge_fragment_texts(texts: Iterable[str], scalars: Iterable[str] = (GraphQLScalars.DATE,)) -> str:
    """Merge per-model SDL documents that only exist as text."""
    return merge_fragments((parse_fragment(text) for text in texts), scalars)
