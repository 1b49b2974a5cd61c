"""
Build Script Reader
===================

Reads a build script produced by the renderer back into a BuildDescriptor.

This understands exactly the layout the packaged templates emit (plugins,
project properties, java, dependencies and test blocks). It is not a
Gradle parser: any other content is rejected with ParseError.
"""

import re
from typing import Dict, List, Optional, Union

from scaffoldr_common import (
    JAVA_VERSION_CONSTANTS,
    SCOPE_CONFIGURATIONS,
    TEST_DIRECTIVES,
    ParseError,
    ScaffoldrError,
)
from scaffoldr_common.constants import SPRING_BOOT_PLUGIN_ID
from scaffoldr_schema import BuildDescriptor, BuildDsl

_JAVA_VERSIONS = {constant: version for version, constant in JAVA_VERSION_CONSTANTS.items()}
_SCOPES = {configuration: scope for scope, configuration in SCOPE_CONFIGURATIONS.items()}
_TEST_PLATFORMS = {
    directive: platform for platform, directive in TEST_DIRECTIVES.items() if directive
}

# Per-DSL line patterns. A string literal is captured without its quotes.
_PATTERNS = {
    BuildDsl.KOTLIN: {
        "java_plugin": re.compile(r"^java$"),
        "plugin": re.compile(r'^id\("([^"]+)"\)(?: version "([^"]+)")?$'),
        "property": re.compile(r'^(group|version|description) = "((?:[^"\\]|\\.)*)"$'),
        "dependency": re.compile(r'^(\w+)\("([^"]+)"\)$'),
        "test_block": re.compile(r"^tasks\.test \{$"),
    },
    BuildDsl.GROOVY: {
        "java_plugin": re.compile(r"^id 'java'$"),
        "plugin": re.compile(r"^id '([^']+)'(?: version '([^']+)')?$"),
        "property": re.compile(r"^(group|version|description) = '((?:[^'\\]|\\.)*)'$"),
        "dependency": re.compile(r"^(\w+) '([^']+)'$"),
        "test_block": re.compile(r"^tasks\.named\('test'\) \{$"),
    },
}

_SOURCE_COMPATIBILITY = re.compile(r"^sourceCompatibility = JavaVersion\.(\w+)$")


def detect_dsl(text: str) -> BuildDsl:
    """
    Detect whether a build script uses the Kotlin or Groovy DSL.

    Raises:
        ParseError: If neither layout is recognized
    """
    stripped = [line.strip() for line in text.splitlines()]
    if "id 'java'" in stripped or any(line.startswith("tasks.named('test')") for line in stripped):
        return BuildDsl.GROOVY
    if "java" in stripped or "tasks.test {" in stripped:
        return BuildDsl.KOTLIN
    raise ParseError("Cannot detect build script DSL: no java plugin declaration found")


def _unescape(value: str) -> str:
    return re.sub(r"\\(.)", r"\1", value)


class _ScriptReader:
    """Single-pass block reader over the rendered layout."""

    def __init__(self, dsl: BuildDsl):
        self.dsl = dsl
        self.patterns = _PATTERNS[dsl]
        self.has_java_plugin = False
        self.framework_version: Optional[str] = None
        self.project: Dict[str, str] = {}
        self.java_constant: Optional[str] = None
        self.dependencies: List[Dict[str, str]] = []
        self.test_platform = "none"

    def read(self, text: str) -> None:
        block: Optional[str] = None
        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                continue
            if block is None:
                block = self._open_block(line, number)
            elif line == "}":
                block = None
            else:
                self._read_block_line(block, line, number)
        if block is not None:
            raise ParseError(f"Unterminated '{block}' block")

    def _open_block(self, line: str, number: int) -> Optional[str]:
        if line in ("plugins {", "java {", "dependencies {"):
            return line[:-2]
        if self.patterns["test_block"].match(line):
            return "test"
        match = self.patterns["property"].match(line)
        if match:
            self.project[match.group(1)] = _unescape(match.group(2))
            return None
        raise ParseError(f"Unrecognized top-level statement: {line!r}", line=number)

    def _read_block_line(self, block: str, line: str, number: int) -> None:
        if block == "plugins":
            self._read_plugin(line, number)
        elif block == "java":
            match = _SOURCE_COMPATIBILITY.match(line)
            if not match:
                raise ParseError(f"Unrecognized java block entry: {line!r}", line=number)
            self.java_constant = match.group(1)
        elif block == "dependencies":
            match = self.patterns["dependency"].match(line)
            if not match or match.group(1) not in _SCOPES:
                raise ParseError(f"Unrecognized dependency declaration: {line!r}", line=number)
            self.dependencies.append({match.group(2): _SCOPES[match.group(1)]})
        elif block == "test":
            if line not in _TEST_PLATFORMS:
                raise ParseError(f"Unrecognized test directive: {line!r}", line=number)
            self.test_platform = _TEST_PLATFORMS[line]

    def _read_plugin(self, line: str, number: int) -> None:
        if self.patterns["java_plugin"].match(line):
            self.has_java_plugin = True
            return
        match = self.patterns["plugin"].match(line)
        if not match or match.group(1) != SPRING_BOOT_PLUGIN_ID or not match.group(2):
            raise ParseError(f"Unrecognized plugin declaration: {line!r}", line=number)
        self.framework_version = match.group(2)

    def to_data(self) -> Dict[str, object]:
        if not self.has_java_plugin:
            raise ParseError("Build script does not apply the java plugin")
        if self.java_constant is None:
            raise ParseError("Build script does not declare sourceCompatibility")
        if self.java_constant not in _JAVA_VERSIONS:
            raise ParseError(f"Unknown JavaVersion constant: {self.java_constant}")

        data: Dict[str, object] = {
            "language_version": _JAVA_VERSIONS[self.java_constant],
            "framework_version": self.framework_version,
            "dependencies": self.dependencies,
            "test_platform": self.test_platform,
            "dsl": self.dsl.value,
        }
        if self.project:
            data["project"] = dict(self.project)
        return data


def read_build_script(
    text: str, dsl: Optional[Union[BuildDsl, str]] = None
) -> BuildDescriptor:
    """
    Read a rendered build script back into a descriptor.

    Starter shorthands come back as full coordinates
    (``web`` -> ``org.springframework.boot:spring-boot-starter-web``).
    Docker settings are not part of a build script and are left unset.

    Args:
        text: Build script content
        dsl: Script dialect; detected from the content when omitted

    Returns:
        BuildDescriptor equivalent to the one that produced the script

    Raises:
        ParseError: If the script does not follow the rendered layout
    """
    script_dsl = BuildDsl(dsl) if dsl is not None else detect_dsl(text)
    reader = _ScriptReader(script_dsl)
    reader.read(text)
    data = reader.to_data()
    try:
        return BuildDescriptor.model_validate(data)
    except ScaffoldrError as e:
        raise ParseError(f"Build script describes an invalid descriptor: {e.message}") from e

