"""
Scaffoldr Shared Constants

This module defines constants used across multiple scaffoldr packages.
It serves as the single source of truth for supported values, defaults,
and the tables that map descriptor options onto Gradle syntax.

Usage:
    from scaffoldr_common.constants import SUPPORTED_JAVA_VERSIONS

    if version not in SUPPORTED_JAVA_VERSIONS:
        raise UnsupportedVersionError("language_version", version, SUPPORTED_JAVA_VERSIONS)
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

SCAFFOLDR_VERSION = "0.1.0"
"""Current scaffoldr release"""

DESCRIPTOR_FILE_NAME = "scaffold.yaml"
"""Default file name of a build descriptor"""


# =============================================================================
# LANGUAGE VERSIONS
# =============================================================================

JAVA_VERSION_CONSTANTS = {
    8: "VERSION_1_8",
    11: "VERSION_11",
    17: "VERSION_17",
    21: "VERSION_21",
    25: "VERSION_25",
}
"""Gradle JavaVersion enum constant for each supported language version"""

SUPPORTED_JAVA_VERSIONS = sorted(JAVA_VERSION_CONSTANTS)
"""Java language versions scaffoldr knows how to render"""

MIN_JAVA_FOR_BOOT_3 = 17
"""Spring Boot 3.x requires at least this Java release"""

DEFAULT_JAVA_VERSION = 21
DEFAULT_BOOT_VERSION = "3.2.0"


# =============================================================================
# BUILD SCRIPT SYNTAX
# =============================================================================

SUPPORTED_DSLS = ["kotlin", "groovy"]
"""Gradle script dialects"""

BUILD_SCRIPT_NAMES = {
    "kotlin": "build.gradle.kts",
    "groovy": "build.gradle",
}

SETTINGS_SCRIPT_NAMES = {
    "kotlin": "settings.gradle.kts",
    "groovy": "settings.gradle",
}

SPRING_BOOT_PLUGIN_ID = "org.springframework.boot"
SPRING_BOOT_GROUP = "org.springframework.boot"
SPRING_BOOT_STARTER_PREFIX = "spring-boot-starter-"

SCOPE_CONFIGURATIONS = {
    "compile": "implementation",
    "test": "testImplementation",
    "runtime": "runtimeOnly",
    "compile_only": "compileOnly",
}
"""Gradle dependency configuration for each dependency scope"""

SUPPORTED_SCOPES = list(SCOPE_CONFIGURATIONS)

TEST_DIRECTIVES = {
    "junit": "useJUnitPlatform()",
    "junit4": "useJUnit()",
    "testng": "useTestNG()",
    "none": None,
}
"""Test task directive for each test platform (None: no test block)"""

SUPPORTED_TEST_PLATFORMS = list(TEST_DIRECTIVES)


# =============================================================================
# CONTAINER IMAGE
# =============================================================================

SUPPORTED_BUILD_TOOLS = ["gradle", "maven"]

DEFAULT_BUILD_TOOL = "gradle"

DEFAULT_CONTAINER_PORT = 8080

BASE_IMAGE = "eclipse-temurin"

BUILD_TOOL_COMMANDS = {
    "gradle": {
        "build": "./gradlew bootJar -x test",
        "artifact": "build/libs/*.jar",
    },
    "maven": {
        "build": "./mvnw package -DskipTests",
        "artifact": "target/*.jar",
    },
}


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVELS = ["debug", "info", "warning", "error"]

DEFAULT_LOG_LEVEL = "warning"


# =============================================================================
# VALIDATION PATTERNS
# =============================================================================

STARTER_NAME_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"
"""Spring Boot starter shorthand (e.g. web, data-jpa)"""

COORDINATE_PATTERN = r"^[A-Za-z0-9_.\-]+:[A-Za-z0-9_.\-]+(:[A-Za-z0-9_.\-+\[\](),]+)?$"
"""Maven coordinate group:artifact[:version]"""

FRAMEWORK_VERSION_PATTERN = r"^\d+\.\d+\.\d+(-(M\d+|RC\d+|SNAPSHOT))?$"
"""Spring Boot release identifier (3.2.0, 3.3.0-M1, 3.2.0-RC2, 3.2.0-SNAPSHOT)"""

PROJECT_NAME_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"
"""Gradle root project name (lowercase with hyphens)"""

GROUP_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$"
"""Java package style group id"""
