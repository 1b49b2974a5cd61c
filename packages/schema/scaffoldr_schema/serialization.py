"""
Serialization utilities for build descriptors.

Converts between BuildDescriptor objects, plain dicts and YAML text.
Dependencies are written in the compact ``{coordinate: scope}`` form used
in scaffold.yaml files.
"""

from typing import Any, Dict

import yaml
from pydantic import ValidationError as PydanticValidationError

from scaffoldr_common import ValidationError

from .descriptor import BuildDescriptor


def to_dict(descriptor: BuildDescriptor, exclude_none: bool = True) -> Dict[str, Any]:
    """
    Convert a BuildDescriptor to a plain dict.

    Args:
        descriptor: Descriptor to convert
        exclude_none: Drop unset optional sections

    Returns:
        Dict with enum values as strings, suitable for YAML/JSON output
    """
    data: Dict[str, Any] = {
        "language_version": descriptor.language_version,
        "framework_version": descriptor.framework_version,
        "dependencies": [{dep.coordinate: dep.scope.value} for dep in descriptor.dependencies],
        "test_platform": descriptor.test_platform.value,
        "dsl": descriptor.dsl.value,
        "project": descriptor.project.model_dump(exclude_none=exclude_none)
        if descriptor.project
        else None,
        "docker": descriptor.docker.model_dump() if descriptor.docker else None,
    }
    if exclude_none:
        data = {key: value for key, value in data.items() if value is not None}
    return data


def from_dict(data: Dict[str, Any]) -> BuildDescriptor:
    """
    Validate a dict into a BuildDescriptor.

    Raises:
        ValidationError: If data is not a mapping or fails validation
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Build descriptor must be a mapping, got {type(data).__name__}"
        )
    try:
        return BuildDescriptor.model_validate(data)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'descriptor'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"Invalid build descriptor: {problems}") from e


def to_yaml_string(descriptor: BuildDescriptor) -> str:
    """Serialize a descriptor as YAML text (keys in declaration order)."""
    return yaml.safe_dump(
        to_dict(descriptor),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def from_yaml_string(text: str) -> BuildDescriptor:
    """
    Parse YAML text into a BuildDescriptor.

    Raises:
        ValidationError: On malformed YAML or invalid content
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in build descriptor: {e}") from e
    if data is None:
        raise ValidationError("Build descriptor is empty")
    return from_dict(data)
