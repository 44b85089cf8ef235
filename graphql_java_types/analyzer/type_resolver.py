"""
Type resolver that maps schema type expressions to Java types.

Folds a type expression post-order: the named leaf is resolved first, then
each enclosing list or non-null wrapper transforms the accumulated type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graphql.language import TypeNode

from ..config import CodeGenConfig
from ..schema_ast.nodes import DefinitionKind, ListType, NamedType, NonNullType, SchemaDocument, TypeExpression
from ..schema_ast.parser import type_expression_from_ast
from .java_types import (
    BOOLEAN,
    DOUBLE,
    INT,
    STRING,
    ClassType,
    TargetType,
    box,
    list_of,
    unbox,
)
from .scalar_table import BuiltinScalars, OverrideTable

logger = logging.getLogger(__name__)

# Prefix of the interface generated for each object type
INTERFACE_PREFIX = "I"

# Types never treated as string input, even when explicitly mapped to
_NON_STRING_TYPES = frozenset({INT, DOUBLE, BOOLEAN, box(INT), box(DOUBLE), box(BOOLEAN)})


@dataclass
class ResolutionContext:
    """Accumulator threaded through the fold."""

    accumulate: TargetType | None = None


class TypeResolver:
    """Resolves schema type expressions to Java types."""

    def __init__(
        self,
        document: SchemaDocument,
        overrides: OverrideTable,
        config: CodeGenConfig,
        builtins: BuiltinScalars | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            document: Schema document used to tell objects from enums
            overrides: Override table built for the same schema
            config: Code generation configuration
            builtins: Built-in scalar tables (defaults to the override table's)
        """
        self.document = document
        self.overrides = overrides
        self.config = config
        self.builtins = builtins or overrides.builtins
        self.package_name = config.types_package
        self._interface_names = frozenset(f"{INTERFACE_PREFIX}{d.name}" for d in document.of_kind(DefinitionKind.OBJECT))

    def resolve(
        self,
        type_expression: TypeExpression,
        use_interface_type: bool = False,
        use_wildcard_type: bool = False,
    ) -> TargetType:
        """
        Resolve a type expression to a Java type.

        Args:
            type_expression: The schema type (named, list or non-null, nested)
            use_interface_type: Reference the interface of object types
            use_wildcard_type: Allow `? extends` elements for interface lists

        Returns:
            The resolved Java type
        """
        # Walk down to the leaf, remembering the wrappers on the way
        wrappers: list[ListType | NonNullType] = []
        node = type_expression
        while not isinstance(node, NamedType):
            if not isinstance(node, (ListType, NonNullType)):
                raise AssertionError(f"Unknown field type: {node!r}")
            wrappers.append(node)
            node = node.of_type

        context = ResolutionContext()
        self._visit_named_type(node, context, use_interface_type)
        for wrapper in reversed(wrappers):
            if isinstance(wrapper, ListType):
                self._visit_list_type(context, use_wildcard_type)
            else:
                self._visit_non_null_type(context)

        logger.debug("Resolved %s to %s", type_expression, context.accumulate)
        return context.accumulate

    def resolve_ast(
        self,
        type_node: TypeNode,
        use_interface_type: bool = False,
        use_wildcard_type: bool = False,
    ) -> TargetType:
        """Resolve a graphql-core type node."""
        return self.resolve(type_expression_from_ast(type_node), use_interface_type, use_wildcard_type)

    def _visit_named_type(self, node: NamedType, context: ResolutionContext, use_interface_type: bool) -> None:
        context.accumulate = box(self._to_java_type(node.name, use_interface_type))

    def _visit_list_type(self, context: ResolutionContext, use_wildcard_type: bool) -> None:
        boxed = box(context.accumulate)
        covariant = use_wildcard_type and isinstance(boxed, ClassType) and boxed.simple_name in self._interface_names
        context.accumulate = list_of(boxed, covariant=covariant)

    def _visit_non_null_type(self, context: ResolutionContext) -> None:
        if self.config.generate_boxed_types:
            context.accumulate = box(context.accumulate)
        else:
            context.accumulate = unbox(context.accumulate)

    def _to_java_type(self, name: str, use_interface_type: bool) -> TargetType:
        """Map a schema type name to its natural Java type."""
        override = self.overrides.resolve_override(name)
        if override is not None:
            return override

        primitive = self.builtins.primitives.get(name)
        if primitive is not None:
            return primitive

        simple_name = name
        if use_interface_type and self.document.is_object_type(name):
            simple_name = f"{INTERFACE_PREFIX}{name}"
        return ClassType.get(self.package_name, simple_name)

    def is_string_input(self, java_type: TargetType) -> bool:
        """
        Check whether values of a Java type are written as string literals.

        Types that some schema type was explicitly mapped to count as strings
        unless they are int, double or boolean (raw or boxed). Otherwise only
        `java.lang.String` and the built-in scalar types count.
        """
        if str(java_type) in self.overrides.mapped_values():
            return java_type not in _NON_STRING_TYPES
        return java_type == STRING or java_type in self.overrides.builtin_values()
