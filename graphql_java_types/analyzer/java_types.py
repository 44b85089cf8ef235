"""
Java type representations.

These nodes are the output of type resolution: a primitive, a boxed
primitive, a class reference, or a parameterized container. `str()` gives
the canonical Java spelling, which is also how a type is compared against
class names written in configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..errors import ConfigurationError


class PrimitiveKind(str, Enum):
    """Java primitive types."""

    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    CHAR = "char"
    FLOAT = "float"
    DOUBLE = "double"


JAVA_LANG = "java.lang"

# Primitive -> wrapper class simple name in java.lang
BOXED_NAMES: dict[PrimitiveKind, str] = {
    PrimitiveKind.BOOLEAN: "Boolean",
    PrimitiveKind.BYTE: "Byte",
    PrimitiveKind.SHORT: "Short",
    PrimitiveKind.INT: "Integer",
    PrimitiveKind.LONG: "Long",
    PrimitiveKind.CHAR: "Character",
    PrimitiveKind.FLOAT: "Float",
    PrimitiveKind.DOUBLE: "Double",
}

_KINDS_BY_BOXED_NAME = {name: kind for kind, name in BOXED_NAMES.items()}
_PRIMITIVE_KEYWORDS = {kind.value for kind in PrimitiveKind}


@dataclass(frozen=True)
class PrimitiveType:
    """A raw primitive (e.g., `int`)."""

    kind: PrimitiveKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class BoxedPrimitiveType:
    """The java.lang wrapper of a primitive (e.g., `java.lang.Integer`)."""

    kind: PrimitiveKind

    @property
    def package_name(self) -> str:
        return JAVA_LANG

    @property
    def simple_name(self) -> str:
        return BOXED_NAMES[self.kind]

    def __str__(self) -> str:
        return f"{JAVA_LANG}.{self.simple_name}"


@dataclass(frozen=True)
class ClassType:
    """A reference to a class, possibly nested in enclosing classes."""

    package_name: str
    simple_names: tuple[str, ...]

    @staticmethod
    def get(package_name: str, simple_name: str, *nested: str) -> ClassType:
        """Create a class reference, e.g. `ClassType.get("a.b", "Outer", "Inner")`."""
        return ClassType(package_name, (simple_name, *nested))

    @property
    def simple_name(self) -> str:
        """Innermost simple name."""
        return self.simple_names[-1]

    def __str__(self) -> str:
        names = ".".join(self.simple_names)
        return f"{self.package_name}.{names}" if self.package_name else names


@dataclass(frozen=True)
class WildcardType:
    """An upper-bounded wildcard (`? extends T`)."""

    upper_bound: TargetType

    def __post_init__(self):
        if isinstance(self.upper_bound, PrimitiveType):
            raise ValueError(f"Wildcard bound cannot be primitive: {self.upper_bound}")

    def __str__(self) -> str:
        return f"? extends {self.upper_bound}"


@dataclass(frozen=True)
class ParameterizedType:
    """A generic container with one type argument (e.g., `java.util.List<T>`)."""

    raw_type: ClassType
    type_argument: TargetType | WildcardType

    def __post_init__(self):
        if isinstance(self.type_argument, PrimitiveType):
            raise ValueError(f"Type argument cannot be primitive: {self.type_argument}")

    @property
    def is_covariant(self) -> bool:
        return isinstance(self.type_argument, WildcardType)

    @property
    def element_type(self) -> TargetType:
        """The element type, without any wildcard."""
        if isinstance(self.type_argument, WildcardType):
            return self.type_argument.upper_bound
        return self.type_argument

    def __str__(self) -> str:
        return f"{self.raw_type}<{self.type_argument}>"


TargetType = Union[PrimitiveType, BoxedPrimitiveType, ClassType, ParameterizedType]

INT = PrimitiveType(PrimitiveKind.INT)
DOUBLE = PrimitiveType(PrimitiveKind.DOUBLE)
BOOLEAN = PrimitiveType(PrimitiveKind.BOOLEAN)
STRING = ClassType.get(JAVA_LANG, "String")
LIST = ClassType.get("java.util", "List")


def box(type_: TargetType) -> TargetType:
    """Box a primitive; other types are returned unchanged."""
    if isinstance(type_, PrimitiveType):
        return BoxedPrimitiveType(type_.kind)
    return type_


def unbox(type_: TargetType) -> TargetType:
    """Unbox a boxed primitive; other types are returned unchanged."""
    if isinstance(type_, BoxedPrimitiveType):
        return PrimitiveType(type_.kind)
    return type_


def list_of(element: TargetType, covariant: bool = False) -> ParameterizedType:
    """Create `java.util.List<element>` or `java.util.List<? extends element>`."""
    argument = WildcardType(element) if covariant else element
    return ParameterizedType(LIST, argument)


def best_guess(class_name: str) -> TargetType:
    """
    Guess the type named by a fully qualified Java class name.

    Leading lower-case segments form the package, the remaining segments
    are the class and its enclosing classes. Primitive keywords and
    java.lang wrapper classes map to primitive and boxed types.

    Examples:
        "java.time.LocalDate" -> ClassType("java.time", ("LocalDate",))
        "a.b.Outer.Inner" -> ClassType("a.b", ("Outer", "Inner"))
        "java.lang.Integer" -> BoxedPrimitiveType(INT)
        "int" -> PrimitiveType(INT)

    Args:
        class_name: The class name to parse

    Returns:
        The guessed type

    Raises:
        ConfigurationError: If the name is not a valid class name
    """
    name = class_name.strip()
    if name in _PRIMITIVE_KEYWORDS:
        return PrimitiveType(PrimitiveKind(name))

    parts = name.split(".")
    if not all(part.isidentifier() for part in parts):
        raise ConfigurationError(f"Couldn't make a guess for '{class_name}'")

    first_class = next((i for i, part in enumerate(parts) if part[0].isupper()), None)
    if first_class is None:
        raise ConfigurationError(f"Couldn't make a guess for '{class_name}'")

    package_name = ".".join(parts[:first_class])
    simple_names = tuple(parts[first_class:])

    if package_name == JAVA_LANG and len(simple_names) == 1 and simple_names[0] in _KINDS_BY_BOXED_NAME:
        return BoxedPrimitiveType(_KINDS_BY_BOXED_NAME[simple_names[0]])

    return ClassType(package_name, simple_names)
