import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


logger = logging.getLogger(__name__)

INDENT = "  "


@dataclass
class FieldDefinition:
    """One field line of an SDL block."""

    name: str
    type: str = ""
    arguments: List[Tuple[str, str]] = field(default_factory=list)
    directives: str = ""
    # Verbatim line taken from existing SDL text; wins over the structured parts
    raw: Optional[str] = None

    def render(self, indent: str = INDENT) -> str:
        if self.raw is not None:
            return f"{indent}{self.raw}"
        args = ""
        if self.arguments:
            args = "(" + ", ".join(f"{arg_name}: {arg_type}" for arg_name, arg_type in self.arguments) + ")"
        return f"{indent}{self.name}{args}: {self.type}{self.directives}"


@dataclass
class TypeDefinition:
    """A top-level SDL definition: object type, input type or scalar."""

    keyword: str
    name: str
    fields: List[FieldDefinition] = field(default_factory=list)
    raw: Optional[str] = None

    def render(self) -> str:
        if self.raw is not None:
            return self.raw
        if self.keyword == "scalar":
            return f"scalar {self.name}"
        body = "\n".join(field_def.render() for field_def in self.fields)
        return f"{self.keyword} {self.name} {{\n{body}\n}}"


def create_field(
    name: str,
    type_string: str,
    arguments: Optional[List[Tuple[str, str]]] = None,
    directives: str = "",
) -> FieldDefinition:
    """Creates a field definition, e.g. `widgets(offset: Int): [Widget!]!`."""
    return FieldDefinition(name=name, type=type_string, arguments=arguments or [], directives=directives)


def create_object_type(name: str, fields: List[FieldDefinition]) -> TypeDefinition:
    """Creates a `type Name { ... }` definition."""
    return TypeDefinition(keyword="type", name=name, fields=fields)


def create_input_type(name: str, fields: List[FieldDefinition]) -> TypeDefinition:
    """Creates an `input Name { ... }` definition."""
    return TypeDefinition(keyword="input", name=name, fields=fields)


def create_scalar(name: str) -> TypeDefinition:
    """Creates a `scalar Name` declaration."""
    return TypeDefinition(keyword="scalar", name=name)


def render_block(keyword: str, name: str, fields: List[FieldDefinition]) -> str:
    """Renders a block, or an empty string when there are no fields (SDL forbids empty blocks)."""
    if not fields:
        return ""
    return TypeDefinition(keyword=keyword, name=name, fields=fields).render()
