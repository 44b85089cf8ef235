"""
Analyzer module.

Contains the Java type model, the scalar/override tables and the
type expression resolver.
"""

from __future__ import annotations

from .java_types import (
    BoxedPrimitiveType,
    ClassType,
    ParameterizedType,
    PrimitiveKind,
    PrimitiveType,
    TargetType,
    WildcardType,
    best_guess,
    box,
    list_of,
    unbox,
)
from .scalar_table import DEFAULT_BUILTIN_SCALARS, BuiltinScalars, OverrideTable, derive_directive_mappings
from .session import ResolutionSession
from .type_resolver import INTERFACE_PREFIX, ResolutionContext, TypeResolver

__all__ = [
    "BoxedPrimitiveType",
    "BuiltinScalars",
    "ClassType",
    "DEFAULT_BUILTIN_SCALARS",
    "INTERFACE_PREFIX",
    "OverrideTable",
    "ParameterizedType",
    "PrimitiveKind",
    "PrimitiveType",
    "ResolutionContext",
    "ResolutionSession",
    "TargetType",
    "TypeResolver",
    "WildcardType",
    "best_guess",
    "box",
    "derive_directive_mappings",
    "list_of",
    "unbox",
]
