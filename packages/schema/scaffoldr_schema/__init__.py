"""
scaffoldr Schema Package

Pydantic models describing a build descriptor, plus dict/YAML conversion.

Usage:
    from scaffoldr_schema import BuildDescriptor, to_yaml_string

    descriptor = BuildDescriptor(language_version=21, framework_version="3.2.0")
    print(to_yaml_string(descriptor))
"""

from scaffoldr_common import UnsupportedOptionError, ValidationError

from .descriptor import (
    BuildDescriptor,
    BuildDsl,
    Dependency,
    DependencyScope,
    DockerConfig,
    ProjectInfo,
    TestPlatform,
)
from .serialization import from_dict, from_yaml_string, to_dict, to_yaml_string

__all__ = [
    "BuildDescriptor",
    "BuildDsl",
    "Dependency",
    "DependencyScope",
    "DockerConfig",
    "ProjectInfo",
    "TestPlatform",
    "from_dict",
    "from_yaml_string",
    "to_dict",
    "to_yaml_string",
    "ValidationError",
    "UnsupportedOptionError",
]
