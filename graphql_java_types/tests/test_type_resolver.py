"""
Tests for type expression resolution.

Covers boxing at each wrapper, interface naming, wildcard lists and the
priority of override sources.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from graphql import parse_type

from graphql_java_types.analyzer import (
    BoxedPrimitiveType,
    ClassType,
    ParameterizedType,
    PrimitiveKind,
    PrimitiveType,
    ResolutionContext,
    ResolutionSession,
    WildcardType,
)
from graphql_java_types.config import CodeGenConfig
from graphql_java_types.schema_ast import ListType, NamedType, NonNullType, SchemaParser, parse_type_expression

SCHEMA = """
scalar Long @javaType(name: "java.lang.Long")

interface Node {
    id: ID!
}

type Show implements Node {
    id: ID!
    title: String
    genre: Genre
}

enum Genre {
    DRAMA
    COMEDY
}

type PageInfo {
    hasNextPage: Boolean!
}
"""

TYPES_PACKAGE = "com.netflix.dgs.codegen.generated.types"


def load_test_data():
    """Load test data from JSON file"""
    test_data_path = Path(__file__).parent / "test_data" / "resolution_tests.json"
    with open(test_data_path) as f:
        return json.load(f)


def make_session(config: CodeGenConfig | None = None, schema: str = SCHEMA) -> ResolutionSession:
    document = SchemaParser().parse(schema)
    return ResolutionSession.create(config or CodeGenConfig(), document)


class TestResolutionCases:
    """Data-driven resolution cases"""

    @pytest.mark.parametrize("test_case", load_test_data(), ids=lambda tc: tc["name"])
    def test_resolution(self, test_case):
        """Resolve each case and compare the Java spelling"""
        config = CodeGenConfig.from_dict(test_case["config"])
        session = make_session(config)

        java_type = session.resolve(
            parse_type_expression(test_case["type"]),
            use_interface_type=test_case.get("use_interface_type", False),
            use_wildcard_type=test_case.get("use_wildcard_type", False),
        )

        assert str(java_type) == test_case["expected"], test_case["description"]


class TestTypeResolver:
    """Structural checks on resolved types"""

    def test_bare_leaf_is_never_primitive(self):
        """Leaves of every built-in primitive come back boxed"""
        session = make_session()
        for name, kind in [("Int", PrimitiveKind.INT), ("Float", PrimitiveKind.DOUBLE), ("Boolean", PrimitiveKind.BOOLEAN)]:
            assert session.resolve(NamedType(name)) == BoxedPrimitiveType(kind)

    def test_non_null_int(self):
        """Non-null Int is the raw int primitive"""
        session = make_session()
        assert session.resolve(NonNullType(NamedType("Int"))) == PrimitiveType(PrimitiveKind.INT)

    def test_non_null_int_with_boxed_types(self):
        """Non-null Int stays boxed when generate_boxed_types is set"""
        session = make_session(CodeGenConfig(generate_boxed_types=True))
        assert session.resolve(NonNullType(NamedType("Int"))) == BoxedPrimitiveType(PrimitiveKind.INT)

    @pytest.mark.parametrize("boxed_types", [False, True])
    def test_list_of_int_holds_boxed_integer(self, boxed_types):
        """List elements are boxed regardless of generate_boxed_types"""
        session = make_session(CodeGenConfig(generate_boxed_types=boxed_types))
        result = session.resolve(ListType(NamedType("Int")))

        assert isinstance(result, ParameterizedType)
        assert result.raw_type == ClassType.get("java.util", "List")
        assert result.type_argument == BoxedPrimitiveType(PrimitiveKind.INT)

    def test_nested_wrappers_keep_structure(self):
        """[String!]! resolves to a list of strings"""
        session = make_session()
        result = session.resolve(NonNullType(ListType(NonNullType(NamedType("String")))))

        assert result == ParameterizedType(ClassType.get("java.util", "List"), ClassType.get("java.lang", "String"))
        assert not result.is_covariant

    def test_interface_prefix_for_object_type(self):
        """Object types use the I-prefixed interface name"""
        session = make_session()
        result = session.resolve(NamedType("Show"), use_interface_type=True)
        assert result == ClassType.get(TYPES_PACKAGE, "IShow")

    def test_no_interface_prefix_for_enum(self):
        """Enum types keep their own name"""
        session = make_session()
        result = session.resolve(NamedType("Genre"), use_interface_type=True)
        assert result == ClassType.get(TYPES_PACKAGE, "Genre")

    def test_unknown_type_is_a_plain_reference(self):
        """Names the schema does not define still resolve to the types package"""
        session = make_session()
        result = session.resolve(NamedType("Missing"), use_interface_type=True)
        assert result == ClassType.get(TYPES_PACKAGE, "Missing")

    def test_wildcard_list_of_interfaces(self):
        """Lists of generated interfaces are covariant"""
        session = make_session()
        result = session.resolve(ListType(NamedType("Show")), use_interface_type=True, use_wildcard_type=True)

        assert result.is_covariant
        assert result.type_argument == WildcardType(ClassType.get(TYPES_PACKAGE, "IShow"))
        assert result.element_type == ClassType.get(TYPES_PACKAGE, "IShow")

    def test_wildcard_requires_matching_object(self):
        """An I-prefixed name with no matching object type stays exact"""
        session = make_session(schema="type IShow { id: ID }")
        result = session.resolve(ListType(NamedType("IShow")), use_wildcard_type=True)
        assert not result.is_covariant

    def test_builtin_scalar_wins_over_object_type(self):
        """A schema type named like a built-in scalar resolves to the built-in"""
        session = make_session()
        result = session.resolve(NamedType("PageInfo"), use_interface_type=True)
        assert result == ClassType.get("graphql.relay", "PageInfo")

    def test_explicit_mapping_wins_over_primitive(self):
        """A configured mapping of a GraphQL built-in replaces it"""
        session = make_session(CodeGenConfig(type_mapping={"ID": "java.util.UUID"}))
        assert session.resolve(NonNullType(NamedType("ID"))) == ClassType.get("java.util", "UUID")

    def test_override_priority(self):
        """Explicit mapping beats directive mapping beats built-in"""
        schema = 'scalar DateTime @javaType(name: "java.util.Date")'

        builtin = make_session(schema="scalar DateTime")
        directive = make_session(schema=schema)
        explicit = make_session(CodeGenConfig(type_mapping={"DateTime": "java.time.ZonedDateTime"}), schema=schema)

        assert builtin.resolve(NamedType("DateTime")) == ClassType.get("java.time", "OffsetDateTime")
        assert directive.resolve(NamedType("DateTime")) == ClassType.get("java.util", "Date")
        assert explicit.resolve(NamedType("DateTime")) == ClassType.get("java.time", "ZonedDateTime")

    def test_resolve_graphql_core_type_node(self):
        """graphql-core type nodes can be resolved directly"""
        session = make_session()
        result = session.resolver.resolve_ast(parse_type("[Show!]"), use_interface_type=True)
        assert str(result) == f"java.util.List<{TYPES_PACKAGE}.IShow>"

    def test_unknown_node_is_an_assertion_error(self):
        """Node kinds outside the type expression union are programming errors"""
        session = make_session()
        with pytest.raises(AssertionError, match="Unknown field type"):
            session.resolve(ListType("Show"))

    def test_resolution_context_starts_empty(self):
        """The accumulator holds nothing before the leaf is visited"""
        assert ResolutionContext().accumulate is None


class TestStringInput:
    """Tests for the string input predicate"""

    def test_builtin_string(self):
        """java.lang.String is a string input"""
        session = make_session()
        assert session.is_string_input(session.resolve(NamedType("String")))

    def test_builtin_scalar_targets(self):
        """Built-in scalar targets are written as strings"""
        session = make_session()
        assert session.is_string_input(ClassType.get("java.time", "LocalDate"))
        assert session.is_string_input(ClassType.get("java.time", "OffsetDateTime"))

    def test_numbers_and_generated_types(self):
        """Unmapped numbers and generated types are not string input"""
        session = make_session()
        assert not session.is_string_input(session.resolve(NonNullType(NamedType("Int"))))
        assert not session.is_string_input(session.resolve(NamedType("Int")))
        assert not session.is_string_input(session.resolve(NamedType("Show")))

    def test_explicitly_mapped_class(self):
        """A class some scalar is mapped to counts as string input"""
        session = make_session(CodeGenConfig(type_mapping={"Cursor": "com.example.Cursor"}))
        assert session.is_string_input(session.resolve(NamedType("Cursor")))

    def test_explicitly_mapped_numbers(self):
        """Mappings to int, double or boolean forms are not string input"""
        mapping = {
            "Count": "int",
            "Total": "java.lang.Integer",
            "Ratio": "java.lang.Double",
            "Flag": "boolean",
        }
        session = make_session(CodeGenConfig(type_mapping=mapping))

        for name in mapping:
            java_type = session.resolve(NonNullType(NamedType(name)))
            assert not session.is_string_input(java_type), name

    def test_directive_mapped_class(self):
        """Directive mappings count as explicit mappings"""
        session = make_session(schema='scalar Url @javaType(name: "java.net.URI")')
        assert session.is_string_input(ClassType.get("java.net", "URI"))

    def test_mapped_long_counts_as_string(self):
        """Only int, double and boolean forms are excluded from mapped values"""
        session = make_session()
        assert session.is_string_input(BoxedPrimitiveType(PrimitiveKind.LONG))
