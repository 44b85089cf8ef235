"""
Resolution session.

Builds the schema document, override table and resolver once, so that
every field of a schema is resolved against the same read-only state.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import CodeGenConfig
from ..schema_ast.nodes import SchemaDocument, TypeExpression
from ..schema_ast.parser import SchemaParser
from .java_types import TargetType
from .scalar_table import DEFAULT_BUILTIN_SCALARS, BuiltinScalars, OverrideTable
from .type_resolver import TypeResolver


@dataclass(frozen=True)
class ResolutionSession:
    """Read-only state shared by all resolutions against one schema."""

    config: CodeGenConfig
    document: SchemaDocument
    overrides: OverrideTable
    resolver: TypeResolver

    @staticmethod
    def create(
        config: CodeGenConfig,
        document: SchemaDocument,
        builtins: BuiltinScalars = DEFAULT_BUILTIN_SCALARS,
        source_document: SchemaDocument | None = None,
    ) -> ResolutionSession:
        """
        Create a session for an already parsed schema.

        The override table is built eagerly, so directive errors surface
        here even for scalars no field refers to. Schema sources named in
        the configuration are parsed here unless `source_document` is given.

        Raises:
            ConfigurationError: If the directive or explicit mappings are invalid
            GraphQLSyntaxError: If the configured sources are not valid GraphQL
        """
        overrides = OverrideTable.build(config, document, builtins, source_document)
        resolver = TypeResolver(document, overrides, config, builtins)
        return ResolutionSession(config, document, overrides, resolver)

    @staticmethod
    def from_config(
        config: CodeGenConfig,
        builtins: BuiltinScalars = DEFAULT_BUILTIN_SCALARS,
    ) -> ResolutionSession:
        """
        Create a session from the schema sources named in the configuration.

        Raises:
            GraphQLSyntaxError: If the concatenated sources are not valid GraphQL
            ConfigurationError: If the directive or explicit mappings are invalid
        """
        document = SchemaParser().parse_sources(config)
        return ResolutionSession.create(config, document, builtins, source_document=document)

    def resolve(
        self,
        type_expression: TypeExpression,
        use_interface_type: bool = False,
        use_wildcard_type: bool = False,
    ) -> TargetType:
        return self.resolver.resolve(type_expression, use_interface_type, use_wildcard_type)

    def is_string_input(self, java_type: TargetType) -> bool:
        return self.resolver.is_string_input(java_type)
