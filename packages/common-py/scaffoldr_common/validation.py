"""
Validation Utilities

Input checks shared by the schema models and the renderer. Each function
either returns the normalized value or raises a scaffoldr error naming the
offending input.
"""

import re
from typing import Tuple

from .constants import (
    COORDINATE_PATTERN,
    FRAMEWORK_VERSION_PATTERN,
    GROUP_PATTERN,
    PROJECT_NAME_PATTERN,
    SPRING_BOOT_GROUP,
    SPRING_BOOT_STARTER_PREFIX,
    STARTER_NAME_PATTERN,
)
from .errors import UnsupportedVersionError, ValidationError


def is_starter_shorthand(coordinate: str) -> bool:
    """Return True when coordinate is a Spring Boot starter short name."""
    return ":" not in coordinate and re.fullmatch(STARTER_NAME_PATTERN, coordinate) is not None


def validate_coordinate(coordinate: str) -> str:
    """
    Validate a dependency coordinate.

    Accepts either a Maven coordinate (group:artifact[:version]) or a
    Spring Boot starter short name (web, data-jpa, ...).

    Raises:
        ValidationError: If the coordinate has any other shape
    """
    if not isinstance(coordinate, str) or not coordinate.strip():
        raise ValidationError("Dependency coordinate cannot be empty")

    coordinate = coordinate.strip()
    if is_starter_shorthand(coordinate):
        return coordinate
    if re.fullmatch(COORDINATE_PATTERN, coordinate):
        return coordinate

    raise ValidationError(
        f"Invalid dependency coordinate: '{coordinate}'. "
        "Expected 'group:artifact[:version]' or a starter name such as 'web'"
    )


def expand_coordinate(coordinate: str) -> str:
    """Expand a starter short name into its full Maven coordinate."""
    if is_starter_shorthand(coordinate):
        return f"{SPRING_BOOT_GROUP}:{SPRING_BOOT_STARTER_PREFIX}{coordinate}"
    return coordinate


def validate_framework_version(version: str) -> str:
    """
    Validate a Spring Boot version string.

    Raises:
        UnsupportedVersionError: If the string is not a recognizable release
    """
    if not isinstance(version, str) or not re.fullmatch(FRAMEWORK_VERSION_PATTERN, version):
        raise UnsupportedVersionError(
            "framework_version",
            version,
            message=(
                f"Unsupported framework_version: {version!r}. "
                "Expected a release like '3.2.0', '3.3.0-M1', '3.2.0-RC1' or '3.2.0-SNAPSHOT'"
            ),
        )
    return version


def parse_framework_version(version: str) -> Tuple[int, int, int]:
    """Return (major, minor, patch) of a validated framework version."""
    core = validate_framework_version(version).split("-", 1)[0]
    major, minor, patch = (int(part) for part in core.split("."))
    return major, minor, patch


def validate_project_name(name: str) -> str:
    """Validate a Gradle root project name (lowercase with hyphens)."""
    if not isinstance(name, str) or not re.fullmatch(PROJECT_NAME_PATTERN, name):
        raise ValidationError(
            f"Invalid project name: '{name}'. "
            "Use lowercase letters, numbers and hyphens (e.g. 'demo-service')"
        )
    return name


def validate_group(group: str) -> str:
    """Validate a Java package style group id (e.g. com.example)."""
    if not isinstance(group, str) or not re.fullmatch(GROUP_PATTERN, group):
        raise ValidationError(f"Invalid group: '{group}'. Expected a dotted id like 'com.example'")
    return group


def validate_port(port: int) -> int:
    """Validate a TCP port is within 1..65535."""
    if not isinstance(port, int) or isinstance(port, bool) or not 1 <= port <= 65535:
        raise ValidationError(f"Port must be between 1 and 65535. Got: {port}")
    return port


def validate_plain_text(value: str, field: str) -> str:
    """Reject quotes, backslashes and line breaks in text embedded in build scripts."""
    if any(ch in value for ch in "\"'\\\n\r$"):
        raise ValidationError(
            f"{field} cannot contain quotes, backslashes, '$' or line breaks. Got: {value!r}"
        )
    return value


__all__ = [
    "is_starter_shorthand",
    "validate_coordinate",
    "expand_coordinate",
    "validate_framework_version",
    "parse_framework_version",
    "validate_project_name",
    "validate_group",
    "validate_port",
    "validate_plain_text",
]
