"""
scaffoldr Common Package

Shared utilities and primitives used across all scaffoldr packages.

This package provides:
- Exception classes for consistent error handling
- Constants for supported values and Gradle syntax tables
- Validation utilities for input checking
- Logging helpers
- Environment-driven settings

Usage:
    from scaffoldr_common import UnsupportedVersionError, SUPPORTED_JAVA_VERSIONS
    from scaffoldr_common import get_logger, get_settings
"""

# Error classes
from .errors import (
    ScaffoldrError,
    ValidationError,
    UnsupportedOptionError,
    UnsupportedVersionError,
    ParseError,
)

# Constants
from .constants import (
    SCAFFOLDR_VERSION,
    DESCRIPTOR_FILE_NAME,
    JAVA_VERSION_CONSTANTS,
    SUPPORTED_JAVA_VERSIONS,
    SUPPORTED_DSLS,
    SUPPORTED_SCOPES,
    SUPPORTED_TEST_PLATFORMS,
    SUPPORTED_BUILD_TOOLS,
    SCOPE_CONFIGURATIONS,
    TEST_DIRECTIVES,
    BUILD_SCRIPT_NAMES,
    SETTINGS_SCRIPT_NAMES,
    LOG_LEVELS,
)

# Validation utilities
from .validation import (
    is_starter_shorthand,
    validate_coordinate,
    expand_coordinate,
    validate_framework_version,
    parse_framework_version,
    validate_project_name,
    validate_group,
    validate_port,
    validate_plain_text,
)

# Logger
from .logger import (
    ScaffoldrLogger,
    get_logger,
    configure_logging,
)

# Settings
from .config import Settings, get_settings

__version__ = SCAFFOLDR_VERSION

__all__ = [
    # Errors
    "ScaffoldrError",
    "ValidationError",
    "UnsupportedOptionError",
    "UnsupportedVersionError",
    "ParseError",
    # Constants
    "SCAFFOLDR_VERSION",
    "DESCRIPTOR_FILE_NAME",
    "JAVA_VERSION_CONSTANTS",
    "SUPPORTED_JAVA_VERSIONS",
    "SUPPORTED_DSLS",
    "SUPPORTED_SCOPES",
    "SUPPORTED_TEST_PLATFORMS",
    "SUPPORTED_BUILD_TOOLS",
    "SCOPE_CONFIGURATIONS",
    "TEST_DIRECTIVES",
    "BUILD_SCRIPT_NAMES",
    "SETTINGS_SCRIPT_NAMES",
    "LOG_LEVELS",
    # Validation
    "is_starter_shorthand",
    "validate_coordinate",
    "expand_coordinate",
    "validate_framework_version",
    "parse_framework_version",
    "validate_project_name",
    "validate_group",
    "validate_port",
    "validate_plain_text",
    # Logger
    "ScaffoldrLogger",
    "get_logger",
    "configure_logging",
    # Settings
    "Settings",
    "get_settings",
]
