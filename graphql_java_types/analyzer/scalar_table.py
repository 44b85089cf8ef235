"""
Scalar and override tables.

Maps schema type names to Java types before any object type resolution
happens. Three sources are layered, highest priority first:

1. Explicit `type_mapping` from configuration
2. Custom scalars annotated with the type directive (`@javaType(name: "...")`)
3. Built-in mappings of well-known scalars (temporal types, currency, paging)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..config import CodeGenConfig
from ..errors import ConfigurationError
from ..schema_ast.nodes import DefinitionKind, SchemaDocument
from ..schema_ast.parser import SchemaParser
from .java_types import BOOLEAN, DOUBLE, INT, STRING, ClassType, TargetType, best_guess

logger = logging.getLogger(__name__)

DIRECTIVE_NAME_ARGUMENT = "name"

_RESOLVERS_PACKAGE = "com.netflix.graphql.types.core.resolvers"
_PAGE_INFO = ClassType.get("graphql.relay", "PageInfo")


@dataclass(frozen=True)
class BuiltinScalars:
    """Built-in scalar mappings.

    `common_scalars` take part in the override table; `primitives` are the
    GraphQL built-in scalars, consulted only when no override matches.
    """

    common_scalars: Mapping[str, TargetType]
    primitives: Mapping[str, TargetType]

    def __post_init__(self):
        object.__setattr__(self, "common_scalars", MappingProxyType(dict(self.common_scalars)))
        object.__setattr__(self, "primitives", MappingProxyType(dict(self.primitives)))


DEFAULT_BUILTIN_SCALARS = BuiltinScalars(
    common_scalars={
        "LocalTime": ClassType.get("java.time", "LocalTime"),
        "LocalDate": ClassType.get("java.time", "LocalDate"),
        "LocalDateTime": ClassType.get("java.time", "LocalDateTime"),
        "TimeZone": STRING,
        "Date": ClassType.get("java.time", "LocalDate"),
        "DateTime": ClassType.get("java.time", "OffsetDateTime"),
        "Currency": ClassType.get("java.util", "Currency"),
        "Instant": ClassType.get("java.time", "Instant"),
        "RelayPageInfo": _PAGE_INFO,
        "PageInfo": _PAGE_INFO,
        "PresignedUrlResponse": ClassType.get(_RESOLVERS_PACKAGE, "PresignedUrlResponse"),
        "Header": ClassType.get(_RESOLVERS_PACKAGE, "PresignedUrlResponse", "Header"),
    },
    primitives={
        "String": STRING,
        "StringValue": STRING,
        "Int": INT,
        "IntValue": INT,
        "Float": DOUBLE,
        "FloatValue": DOUBLE,
        "Boolean": BOOLEAN,
        "BooleanValue": BOOLEAN,
        "ID": STRING,
        "IDValue": STRING,
    },
)


def derive_directive_mappings(
    document: SchemaDocument,
    directive_name: str = "javaType",
    argument_name: str = DIRECTIVE_NAME_ARGUMENT,
) -> dict[str, str]:
    """
    Collect custom scalar mappings declared with a directive.

    Every scalar in the document is checked, whether or not any field uses it.

    Args:
        document: The schema document to scan
        directive_name: Name of the directive carrying the Java type
        argument_name: Directive argument holding the class name

    Returns:
        Mapping from scalar name to Java class name

    Raises:
        ConfigurationError: If a scalar has several such directives, or a
            directive lacks a string-valued name argument
    """
    mappings = {}
    for scalar in document.of_kind(DefinitionKind.SCALAR):
        directives = scalar.get_directives(directive_name)
        if not directives:
            continue
        if len(directives) > 1:
            raise ConfigurationError(f"multiple @{directive_name} directives are defined on scalar {scalar.name}")

        argument = directives[0].arguments.get(argument_name)
        if argument is None or argument.kind != "string":
            raise ConfigurationError(f"@{directive_name} directive on scalar {scalar.name} must contain a {argument_name} argument")

        mappings[scalar.name] = argument.value

    logger.debug("Derived %d @%s mappings", len(mappings), directive_name)
    return mappings


class OverrideTable:
    """Merged, read-only table of schema name -> Java type overrides."""

    def __init__(
        self,
        explicit: Mapping[str, str] | None = None,
        directive: Mapping[str, str] | None = None,
        builtins: BuiltinScalars = DEFAULT_BUILTIN_SCALARS,
    ):
        """
        Initialize the table.

        Args:
            explicit: Configured name -> class name mappings
            directive: Directive-derived name -> class name mappings
            builtins: Built-in scalar tables
        """
        self.builtins = builtins
        self._explicit = MappingProxyType(dict(explicit or {}))
        self._directive = MappingProxyType(dict(directive or {}))

        # Lowest priority first, so later sources replace earlier ones
        merged: dict[str, TargetType] = dict(builtins.common_scalars)
        for name, class_name in self._directive.items():
            merged[name] = best_guess(class_name)
        for name, class_name in self._explicit.items():
            merged[name] = best_guess(class_name)
        self._merged = MappingProxyType(merged)
        self._mapped_values = frozenset(v.strip() for v in (*self._explicit.values(), *self._directive.values()))
        self._builtin_values = frozenset(builtins.common_scalars.values())

    @classmethod
    def build(
        cls,
        config: CodeGenConfig,
        document: SchemaDocument,
        builtins: BuiltinScalars = DEFAULT_BUILTIN_SCALARS,
        source_document: SchemaDocument | None = None,
    ) -> OverrideTable:
        """
        Build the table for a schema document and configuration.

        Directive mappings are derived from the schema sources named in the
        configuration; `document` is scanned only when the configuration
        names none.

        Args:
            config: Configuration with explicit mappings and schema sources
            document: The schema being resolved
            builtins: Built-in scalar tables
            source_document: Already parsed configured sources, to avoid a second parse

        Raises:
            ConfigurationError: If a directive or class name is invalid
            GraphQLSyntaxError: If the configured sources are not valid GraphQL
        """
        if source_document is None:
            if config.schema_files or config.schemas:
                source_document = SchemaParser().parse_sources(config)
            else:
                source_document = document
        directive = derive_directive_mappings(source_document, config.type_directive_name)
        return cls(config.type_mapping, directive, builtins)

    def resolve_override(self, name: str) -> TargetType | None:
        """Return the Java type a schema name is mapped to, if any."""
        return self._merged.get(name)

    @property
    def explicit_mappings(self) -> Mapping[str, str]:
        return self._explicit

    @property
    def directive_mappings(self) -> Mapping[str, str]:
        return self._directive

    def mapped_values(self) -> frozenset[str]:
        """Class names that some schema type was explicitly mapped to."""
        return self._mapped_values

    def builtin_values(self) -> frozenset[TargetType]:
        return self._builtin_values

    def __contains__(self, name: object) -> bool:
        return name in self._merged

    def __len__(self) -> int:
        return len(self._merged)

    def __repr__(self) -> str:
        return f"OverrideTable(explicit={dict(self._explicit)!r}, directive={dict(self._directive)!r})"
