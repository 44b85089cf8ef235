"""
Exceptions raised while building type mappings.
"""


class GraphQLJavaTypesError(Exception):
    """Base class for all errors raised by this package."""

    pass


class ConfigurationError(GraphQLJavaTypesError, ValueError):
    """Raised when schema or configuration input cannot produce a type mapping.

    This can happen when:
    - A scalar carries more than one custom type directive
    - A custom type directive has no string-valued name argument
    - A mapped Java class name cannot be parsed
    """

    pass
