"""
Descriptor Validation
=====================

Checks a descriptor file end to end: the file loads, the schema accepts
it, and every option has a rendering. Problems are collected into a result
dict instead of being raised, for display by the CLI.
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from scaffoldr_common import (
    ScaffoldrError,
    UnsupportedOptionError,
    get_logger,
    parse_framework_version,
)
from scaffoldr_common.constants import MIN_JAVA_FOR_BOOT_3
from scaffoldr_schema import BuildDescriptor

from ..templates.renderer import TemplateContext, require_application_jar
from .loader import load_descriptor

logger = get_logger(__name__)


def check_descriptor(descriptor: BuildDescriptor) -> Tuple[List[str], List[str]]:
    """
    Check an in-memory descriptor for render errors and advisory warnings.

    Returns:
        (errors, warnings)
    """
    errors: List[str] = []
    warnings: List[str] = []

    try:
        TemplateContext(descriptor).build()
        if descriptor.docker is not None:
            require_application_jar(descriptor)
    except UnsupportedOptionError as e:
        errors.append(e.message)
        return errors, warnings

    if descriptor.framework_version:
        major, _, _ = parse_framework_version(descriptor.framework_version)
        if major >= 3 and descriptor.language_version < MIN_JAVA_FOR_BOOT_3:
            warnings.append(
                f"Spring Boot {descriptor.framework_version} requires Java "
                f"{MIN_JAVA_FOR_BOOT_3} or newer (language_version is {descriptor.language_version})"
            )
        if "-" in descriptor.framework_version:
            warnings.append(
                f"Spring Boot {descriptor.framework_version} is a pre-release; "
                "it is only published to the Spring milestone/snapshot repositories"
            )

    seen = set()
    for dep in descriptor.dependencies:
        key = (dep.notation, dep.scope)
        if key in seen:
            warnings.append(f"Duplicate dependency: {dep.notation} ({dep.scope.value})")
        seen.add(key)

    return errors, warnings


def validate_descriptor(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Validate a descriptor file.

    Args:
        path: Path to scaffold.yaml

    Returns:
        {
            "valid": bool,
            "errors": [str, ...],
            "warnings": [str, ...],
            "descriptor": BuildDescriptor or None,
            "message": str,
        }
    """
    try:
        descriptor = load_descriptor(path)
    except ScaffoldrError as e:
        logger.debug("Descriptor failed to load", path=str(path), error_code=e.code)
        return {
            "valid": False,
            "errors": [e.message],
            "warnings": [],
            "descriptor": None,
            "message": f"Descriptor {path} is invalid",
        }

    errors, warnings = check_descriptor(descriptor)
    valid = not errors
    if valid:
        message = (
            f"Descriptor {path} is valid (Java {descriptor.language_version}, "
            f"{len(descriptor.dependencies)} dependencies)"
        )
    else:
        message = f"Descriptor {path} is invalid"

    return {
        "valid": valid,
        "errors": errors,
        "warnings": warnings,
        "descriptor": descriptor if valid else None,
        "message": message,
    }
