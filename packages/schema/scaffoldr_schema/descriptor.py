"""
scaffoldr Build Descriptor Schema

This module defines Pydantic models for validating build descriptors.
A descriptor is the small configuration record that the template renderer
turns into a Gradle build script.

Design Principles:
- Structural validation only: the schema checks shapes and enumerated
  options; whether a language/framework version can be rendered is
  decided by the renderer, which raises UnsupportedVersionError
- Immutable: descriptors are constructed once, rendered, then discarded
- No file I/O: reading descriptor files is the SDK's responsibility

Usage:
    from scaffoldr_schema import BuildDescriptor

    descriptor = BuildDescriptor.model_validate({
        "language_version": 21,
        "framework_version": "3.2.0",
        "dependencies": [{"web": "compile"}, {"test": "test"}],
        "test_platform": "junit",
    })
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing_extensions import Self

from scaffoldr_common import (
    SUPPORTED_BUILD_TOOLS,
    SUPPORTED_DSLS,
    SUPPORTED_SCOPES,
    SUPPORTED_TEST_PLATFORMS,
    UnsupportedOptionError,
    ValidationError,
    expand_coordinate,
    validate_coordinate,
    validate_group,
    validate_plain_text,
    validate_port,
)
from scaffoldr_common.constants import DEFAULT_BUILD_TOOL, DEFAULT_CONTAINER_PORT


# =============================================================================
# ENUMERATED OPTIONS
# =============================================================================

class DependencyScope(str, Enum):
    """When a dependency is needed."""

    COMPILE = "compile"
    TEST = "test"
    RUNTIME = "runtime"
    COMPILE_ONLY = "compile_only"


class TestPlatform(str, Enum):
    """Test framework the Gradle test task is pointed at."""

    __test__ = False  # not a pytest test class

    JUNIT = "junit"
    JUNIT4 = "junit4"
    TESTNG = "testng"
    NONE = "none"


class BuildDsl(str, Enum):
    """Gradle script dialect."""

    KOTLIN = "kotlin"
    GROOVY = "groovy"


def _enum_option(option: str, value: Any, supported: List[str]) -> Any:
    """Normalize an enumerated option or raise UnsupportedOptionError."""
    if isinstance(value, Enum):
        return value
    if isinstance(value, str) and value.strip().lower() in supported:
        return value.strip().lower()
    raise UnsupportedOptionError(option, value, supported=supported)


# =============================================================================
# DEPENDENCIES
# =============================================================================

class Dependency(BaseModel):
    """
    A single dependency declaration.

    The coordinate is either a full Maven coordinate
    (``group:artifact[:version]``) or a Spring Boot starter short name
    (``web`` -> ``org.springframework.boot:spring-boot-starter-web``).
    """

    coordinate: str
    scope: DependencyScope = DependencyScope.COMPILE

    model_config = ConfigDict(frozen=True)

    @field_validator("coordinate")
    @classmethod
    def validate_coordinate_format(cls, v: str) -> str:
        return validate_coordinate(v)

    @field_validator("scope", mode="before")
    @classmethod
    def validate_scope_supported(cls, v: Any) -> Any:
        return _enum_option("dependency scope", v, SUPPORTED_SCOPES)

    @property
    def notation(self) -> str:
        """Full Maven coordinate with starter shorthands expanded."""
        return expand_coordinate(self.coordinate)

    @classmethod
    def parse(cls, value: Any) -> "Dependency":
        """
        Build a Dependency from any of the accepted descriptor forms.

        Accepted forms:
            "web"                                   -> compile scope
            {"web": "compile"}                      -> compact mapping
            {"coordinate": "web", "scope": "test"}  -> explicit object
        """
        if isinstance(value, Dependency):
            return value
        if isinstance(value, str):
            return cls(coordinate=value)
        if isinstance(value, dict):
            if "coordinate" in value:
                return cls.model_validate(value)
            if len(value) == 1:
                coordinate, scope = next(iter(value.items()))
                return cls(coordinate=coordinate, scope=scope)
        raise ValidationError(
            f"Invalid dependency entry: {value!r}. "
            "Use 'coordinate', {coordinate: scope} or {coordinate: ..., scope: ...}"
        )


# =============================================================================
# OPTIONAL SECTIONS
# =============================================================================

class ProjectInfo(BaseModel):
    """Gradle project coordinates written next to the plugins block."""

    group: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("group")
    @classmethod
    def validate_group_format(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            validate_group(v)
        return v

    @field_validator("version", "description")
    @classmethod
    def validate_text(cls, v: Optional[str], info) -> Optional[str]:
        if v is not None:
            validate_plain_text(v, info.field_name)
        return v

    def is_empty(self) -> bool:
        return self.group is None and self.version is None and self.description is None


class DockerConfig(BaseModel):
    """Container image settings for the generated Dockerfile."""

    port: int = DEFAULT_CONTAINER_PORT
    build_tool: str = DEFAULT_BUILD_TOOL

    model_config = ConfigDict(frozen=True)

    @field_validator("port")
    @classmethod
    def validate_port_range(cls, v: int) -> int:
        return validate_port(v)

    @field_validator("build_tool", mode="before")
    @classmethod
    def validate_build_tool_supported(cls, v: Any) -> Any:
        return _enum_option("build tool", v, SUPPORTED_BUILD_TOOLS)


# =============================================================================
# ROOT DESCRIPTOR
# =============================================================================

class BuildDescriptor(BaseModel):
    """
    Root model of a build descriptor.

    Fields:
        language_version: Java release (8, 11, 17, 21, 25 can be rendered)
        framework_version: Spring Boot plugin version; None omits the plugin
        dependencies: Ordered dependency declarations
        test_platform: Test framework for the Gradle test task
        dsl: Kotlin (build.gradle.kts) or Groovy (build.gradle)
        project: Optional group/version/description
        docker: Optional container image settings

    Invariant:
        dependencies is non-empty only if framework_version is set.
    """

    language_version: int
    framework_version: Optional[str] = None
    dependencies: List[Dependency] = []
    test_platform: TestPlatform = TestPlatform.JUNIT
    dsl: BuildDsl = BuildDsl.KOTLIN
    project: Optional[ProjectInfo] = None
    docker: Optional[DockerConfig] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("language_version", mode="before")
    @classmethod
    def validate_language_version_type(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValidationError(f"language_version must be an integer. Got: {v!r}")
        if isinstance(v, str) and v.strip().lstrip("-").isdigit():
            return int(v.strip())
        if not isinstance(v, int):
            raise ValidationError(f"language_version must be an integer. Got: {v!r}")
        return v

    @field_validator("framework_version", mode="before")
    @classmethod
    def validate_framework_version_type(cls, v: Any) -> Any:
        if v is None:
            return v
        if not isinstance(v, str) or not v.strip():
            raise ValidationError(f"framework_version must be a non-empty string. Got: {v!r}")
        return v.strip()

    @field_validator("dependencies", mode="before")
    @classmethod
    def normalize_dependencies(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            raise ValidationError("dependencies must be a list")
        return [Dependency.parse(item) for item in v]

    @field_validator("test_platform", mode="before")
    @classmethod
    def validate_test_platform_supported(cls, v: Any) -> Any:
        return _enum_option("test platform", v, SUPPORTED_TEST_PLATFORMS)

    @field_validator("dsl", mode="before")
    @classmethod
    def validate_dsl_supported(cls, v: Any) -> Any:
        return _enum_option("dsl", v, SUPPORTED_DSLS)

    @model_validator(mode="after")
    def validate_dependencies_need_framework(self) -> Self:
        """Dependencies are only declared alongside the framework plugin."""
        if self.dependencies and not self.framework_version:
            raise ValidationError(
                "dependencies require framework_version to be set "
                f"({len(self.dependencies)} dependencies declared without a framework)"
            )
        return self

    @property
    def has_framework(self) -> bool:
        return self.framework_version is not None
