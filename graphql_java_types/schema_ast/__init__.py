"""
Schema AST module.

Contains the type expression and schema document model, and the
graphql-core based parser that builds them.
"""

from __future__ import annotations

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
from .parser import SchemaParser, load_schema_sources, parse_type_expression, type_expression_from_ast

__all__ = [
    "DefinitionKind",
    "Directive",
    "ListType",
    "Literal",
    "NamedType",
    "NonNullType",
    "SchemaDocument",
    "SchemaParser",
    "TypeDefinition",
    "TypeExpression",
    "load_schema_sources",
    "parse_type_expression",
    "type_expression_from_ast",
]
