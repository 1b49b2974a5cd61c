"""
Descriptor Loader
=================

Reads scaffold.yaml files into validated BuildDescriptor objects.
String values may reference environment variables as ``${VAR}`` or
``${VAR:-default}``.
"""

import os
import re
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml

from scaffoldr_common import ScaffoldrError, ValidationError, get_logger
from scaffoldr_schema import BuildDescriptor, from_dict

logger = get_logger(__name__)

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


def expand_env_vars(value: Any, env: Optional[Mapping[str, str]] = None) -> Any:
    """
    Recursively expand ``${VAR}`` / ``${VAR:-default}`` references.

    Args:
        value: Parsed YAML value (dict, list, str or scalar)
        env: Variable source (defaults to os.environ)

    Returns:
        The value with every reference substituted

    Raises:
        ValidationError: If a referenced variable is unset and has no default
    """
    source = os.environ if env is None else env
    missing: List[str] = []

    def _expand(item: Any) -> Any:
        if isinstance(item, str):
            def _replace(match: "re.Match[str]") -> str:
                name, default = match.group(1), match.group(2)
                if name in source:
                    return source[name]
                if default is not None:
                    return default
                missing.append(name)
                return match.group(0)

            return ENV_VAR_PATTERN.sub(_replace, item)
        if isinstance(item, dict):
            return {key: _expand(val) for key, val in item.items()}
        if isinstance(item, list):
            return [_expand(val) for val in item]
        return item

    expanded = _expand(value)
    if missing:
        raise ValidationError(
            f"Environment variables referenced in descriptor are not set: {', '.join(sorted(set(missing)))}"
        )
    return expanded


def load_descriptor(
    path: Union[str, Path], env: Optional[Mapping[str, str]] = None
) -> BuildDescriptor:
    """
    Load and validate a build descriptor file.

    Args:
        path: Path to scaffold.yaml
        env: Variable source for ``${VAR}`` expansion (defaults to os.environ)

    Returns:
        Validated BuildDescriptor

    Raises:
        ScaffoldrError: If the file does not exist or cannot be read
        ValidationError: If the YAML is malformed or the content is invalid
    """
    descriptor_path = Path(path)
    if not descriptor_path.is_file():
        raise ScaffoldrError(f"Descriptor file not found: {descriptor_path}")

    try:
        text = descriptor_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScaffoldrError(f"Cannot read descriptor file {descriptor_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in {descriptor_path}: {e}") from e

    if data is None:
        raise ValidationError(f"Descriptor file is empty: {descriptor_path}")

    descriptor = from_dict(expand_env_vars(data, env))
    logger.debug(
        "Loaded build descriptor",
        path=str(descriptor_path),
        java=descriptor.language_version,
        framework=descriptor.framework_version,
    )
    return descriptor
