"""
Node definitions for the GraphQL schema model.

These nodes are the read-only view of a schema that type resolution needs:
type expressions, type definitions by kind, and their directives.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union


@dataclass(frozen=True)
class NamedType:
    """A named type reference (e.g., `String`, `Show`)."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListType:
    """A list wrapper (e.g., `[Show]`)."""

    of_type: TypeExpression

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class NonNullType:
    """A non-null wrapper (e.g., `Show!`)."""

    of_type: TypeExpression

    def __str__(self) -> str:
        return f"{self.of_type}!"


TypeExpression = Union[NamedType, ListType, NonNullType]


class DefinitionKind(str, Enum):
    """Kind of a type definition in the schema."""

    OBJECT = "object"
    INTERFACE = "interface"
    ENUM = "enum"
    SCALAR = "scalar"
    INPUT = "input"
    UNION = "union"


@dataclass(frozen=True)
class Literal:
    """A directive argument value.

    Keeps the GraphQL literal kind next to the converted Python value, since
    an enum literal and a string literal both convert to `str`.
    """

    kind: str  # "string", "int", "float", "boolean", "enum", "null", "list", "object"
    value: Any = None


@dataclass(frozen=True)
class Directive:
    """A directive applied to a definition."""

    name: str
    arguments: Mapping[str, Literal] = field(default_factory=dict)


@dataclass(frozen=True)
class TypeDefinition:
    """A named type definition together with its directives."""

    name: str
    kind: DefinitionKind
    directives: tuple[Directive, ...] = ()

    def get_directives(self, name: str) -> list[Directive]:
        """Return every directive with the given name, in source order."""
        return [d for d in self.directives if d.name == name]


class SchemaDocument:
    """Immutable mapping from type name to its definition."""

    def __init__(self, definitions: Mapping[str, TypeDefinition] | None = None):
        self._definitions = MappingProxyType(dict(definitions or {}))

    @property
    def definitions(self) -> Mapping[str, TypeDefinition]:
        return self._definitions

    def get(self, name: str) -> TypeDefinition | None:
        return self._definitions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[TypeDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def of_kind(self, kind: DefinitionKind) -> list[TypeDefinition]:
        """Return all definitions of a kind, in definition order."""
        return [d for d in self._definitions.values() if d.kind is kind]

    def is_object_type(self, name: str) -> bool:
        definition = self._definitions.get(name)
        return definition is not None and definition.kind is DefinitionKind.OBJECT

    def __repr__(self) -> str:
        return f"SchemaDocument({sorted(self._definitions)!r})"
