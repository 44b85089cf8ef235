"""
GraphQL schema parser that builds the schema model.

Phase 1 of type resolution: parse schema source text with graphql-core and
keep only what the resolver needs (definition kinds and directives).
"""

from __future__ import annotations

import logging
from pathlib import Path

from graphql import parse, parse_type
from graphql.language import (
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    ValueNode,
)
from graphql.utilities import value_from_ast_untyped

from ..config import CodeGenConfig
from .nodes import (
    DefinitionKind,
    Directive,
    ListType,
    Literal,
    NamedType,
    NonNullType,
    SchemaDocument,
    TypeDefinition,
    TypeExpression,
)

logger = logging.getLogger(__name__)

# Definition and extension nodes, by the kind they contribute
_DEFINITION_KINDS: tuple[tuple[tuple[type, ...], DefinitionKind], ...] = (
    ((ObjectTypeDefinitionNode, ObjectTypeExtensionNode), DefinitionKind.OBJECT),
    ((InterfaceTypeDefinitionNode, InterfaceTypeExtensionNode), DefinitionKind.INTERFACE),
    ((EnumTypeDefinitionNode, EnumTypeExtensionNode), DefinitionKind.ENUM),
    ((ScalarTypeDefinitionNode, ScalarTypeExtensionNode), DefinitionKind.SCALAR),
    ((InputObjectTypeDefinitionNode, InputObjectTypeExtensionNode), DefinitionKind.INPUT),
    ((UnionTypeDefinitionNode, UnionTypeExtensionNode), DefinitionKind.UNION),
)


def type_expression_from_ast(node: TypeNode) -> TypeExpression:
    """Convert a graphql-core type node into a type expression."""
    if isinstance(node, NonNullTypeNode):
        return NonNullType(type_expression_from_ast(node.type))
    if isinstance(node, ListTypeNode):
        return ListType(type_expression_from_ast(node.type))
    if isinstance(node, NamedTypeNode):
        return NamedType(node.name.value)
    raise AssertionError(f"Unknown field type: {node!r}")


def parse_type_expression(source: str) -> TypeExpression:
    """Parse a type expression such as `[String!]!`."""
    return type_expression_from_ast(parse_type(source))


def load_schema_sources(config: CodeGenConfig) -> str:
    """
    Concatenate the configured schema sources.

    Every file below each `schema_files` entry is read (directories are
    walked recursively), then the inline `schemas` are appended.

    Args:
        config: Configuration naming the schema sources

    Returns:
        All sources joined by newlines
    """
    sources = []
    for entry in config.schema_files:
        path = Path(entry)
        if not path.exists():
            raise FileNotFoundError(f"Schema path does not exist: {path}")
        files = sorted(p for p in path.rglob("*") if p.is_file()) if path.is_dir() else [path]
        for file in files:
            logger.debug("Reading schema file %s", file)
            sources.append(file.read_text(encoding="utf-8"))
    sources.extend(config.schemas)
    return "\n".join(sources)


class SchemaParser:
    """Parses GraphQL schema text into a SchemaDocument."""

    def parse(self, source: str) -> SchemaDocument:
        """
        Parse GraphQL SDL into a schema document.

        Args:
            source: GraphQL schema source text

        Returns:
            SchemaDocument with every type definition in the source

        Raises:
            GraphQLSyntaxError: If the source is not valid GraphQL
        """
        if not source.strip():
            return SchemaDocument()
        return self.from_document(parse(source, no_location=True))

    def parse_sources(self, config: CodeGenConfig) -> SchemaDocument:
        """Parse the schema sources named by a configuration."""
        return self.parse(load_schema_sources(config))

    def from_document(self, document: DocumentNode) -> SchemaDocument:
        """Build a schema document from an already parsed graphql-core document."""
        definitions: dict[str, TypeDefinition] = {}
        for node in document.definitions:
            kind = self._definition_kind(node)
            if kind is None:
                continue

            name = node.name.value
            directives = tuple(self._parse_directive(d) for d in node.directives or ())
            existing = definitions.get(name)
            if existing is not None:
                # Extensions add their directives to the extended type
                definitions[name] = TypeDefinition(name, existing.kind, existing.directives + directives)
            else:
                definitions[name] = TypeDefinition(name, kind, directives)

        return SchemaDocument(definitions)

    def _definition_kind(self, node: object) -> DefinitionKind | None:
        for node_types, kind in _DEFINITION_KINDS:
            if isinstance(node, node_types):
                return kind
        return None

    def _parse_directive(self, node: DirectiveNode) -> Directive:
        arguments = {arg.name.value: self._parse_literal(arg.value) for arg in node.arguments or ()}
        return Directive(name=node.name.value, arguments=arguments)

    def _parse_literal(self, node: ValueNode) -> Literal:
        kind = node.kind.removesuffix("_value")
        return Literal(kind=kind, value=value_from_ast_untyped(node))
