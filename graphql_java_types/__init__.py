"""GraphQL to Java type resolution

A Python package for mapping GraphQL schema type expressions to Java
types, with configurable type mappings, directive-declared custom
scalars, boxing rules and interface/wildcard policies.
"""

__version__ = "1.0.0"

from .analyzer import (
    BoxedPrimitiveType,
    ClassType,
    OverrideTable,
    ParameterizedType,
    PrimitiveType,
    ResolutionSession,
    TargetType,
    TypeResolver,
    WildcardType,
)
from .config import CodeGenConfig, load_config
from .errors import ConfigurationError, GraphQLJavaTypesError
from .schema_ast import ListType, NamedType, NonNullType, SchemaDocument, SchemaParser, parse_type_expression

__all__ = [
    "ResolutionSession",
    "TypeResolver",
    "OverrideTable",
    "CodeGenConfig",
    "load_config",
    "ConfigurationError",
    "GraphQLJavaTypesError",
    "SchemaParser",
    "SchemaDocument",
    "NamedType",
    "ListType",
    "NonNullType",
    "parse_type_expression",
    "TargetType",
    "PrimitiveType",
    "BoxedPrimitiveType",
    "ClassType",
    "ParameterizedType",
    "WildcardType",
]
