"""
Configuration for Java type resolution.

Mirrors the subset of the code generator configuration that affects how
schema types are mapped to Java types.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PACKAGE_NAME = "com.netflix.dgs.codegen.generated"


@dataclass
class CodeGenConfig:
    """Configuration options for type resolution."""

    # Base package of the generated code
    package_name: str = DEFAULT_PACKAGE_NAME

    # Package holding generated data types (empty = "<package_name>.types")
    types_package_name: str = ""

    # Explicit schema type name -> fully qualified Java class name
    type_mapping: dict[str, str] = field(default_factory=dict)

    # Schema files or directories scanned for directive-declared mappings
    schema_files: list[str] = field(default_factory=list)

    # Inline schema sources, appended after the files
    schemas: list[str] = field(default_factory=list)

    # Keep boxed types even for non-null fields
    generate_boxed_types: bool = False

    # Directive declaring the Java type of a custom scalar
    type_directive_name: str = "javaType"

    @property
    def types_package(self) -> str:
        """Package used for references to generated types."""
        return self.types_package_name or f"{self.package_name}.types"

    @staticmethod
    def from_dict(d: dict) -> CodeGenConfig:
        """Create a config from a dictionary."""
        config = CodeGenConfig()
        for k, v in d.items():
            if k == "types_package":
                continue
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "package_name": self.package_name,
            "types_package_name": self.types_package_name,
            "type_mapping": self.type_mapping,
            "schema_files": self.schema_files,
            "schemas": self.schemas,
            "generate_boxed_types": self.generate_boxed_types,
            "type_directive_name": self.type_directive_name,
        }


def load_config(path: str | Path) -> CodeGenConfig:
    """Load a configuration from a JSON file."""
    with open(path) as f:
        return CodeGenConfig.from_dict(json.load(f))
