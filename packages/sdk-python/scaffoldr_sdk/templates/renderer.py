"""
Scaffoldr Template Renderer
===========================

Renders build artifacts from a BuildDescriptor:
- Gradle build scripts (Kotlin DSL and Groovy DSL)
- Gradle settings scripts
- Dockerfiles

Uses Jinja2 with a custom string-quoting filter. For a fixed set of
templates, rendering is a pure function of the descriptor: no timestamps
or environment values reach the output, so the same descriptor always
produces byte-identical text. Which templates are used depends on the
search path (see default_template_dirs).
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    Undefined,
    select_autoescape,
)

from scaffoldr_common import (
    BUILD_SCRIPT_NAMES,
    JAVA_VERSION_CONSTANTS,
    SCAFFOLDR_VERSION,
    SCOPE_CONFIGURATIONS,
    SETTINGS_SCRIPT_NAMES,
    SUPPORTED_JAVA_VERSIONS,
    TEST_DIRECTIVES,
    ScaffoldrError,
    UnsupportedOptionError,
    UnsupportedVersionError,
    get_logger,
    get_settings,
    validate_framework_version,
    validate_project_name,
)
from scaffoldr_common.constants import (
    BASE_IMAGE,
    BUILD_TOOL_COMMANDS,
    SPRING_BOOT_PLUGIN_ID,
)
from scaffoldr_schema import BuildDescriptor, BuildDsl, DockerConfig

logger = get_logger(__name__)

# ============================================================================
# Constants
# ============================================================================

PACKAGE_TEMPLATE_DIR = Path(__file__).parent

# Template file mappings
TEMPLATE_FILES = {
    "build_kotlin": "gradle/build.gradle.kts.j2",
    "build_groovy": "gradle/build.gradle.j2",
    "settings_kotlin": "gradle/settings.gradle.kts.j2",
    "settings_groovy": "gradle/settings.gradle.j2",
    "dockerfile": "dockerfiles/Dockerfile.j2",
}

QUOTES = {
    BuildDsl.KOTLIN: '"',
    BuildDsl.GROOVY: "'",
}


def default_template_dirs() -> List[Path]:
    """
    Template directories searched after any explicit ones, in order:
    ./templates, $SCAFFOLDR_TEMPLATE_DIR, then the packaged templates.
    """
    dirs = [Path.cwd() / "templates"]
    settings_dir = get_settings().template_dir
    if settings_dir:
        dirs.append(Path(settings_dir))
    dirs.append(PACKAGE_TEMPLATE_DIR)
    return dirs


# ============================================================================
# Custom Jinja2 Filters
# ============================================================================


def gradle_string_filter(value: Any, quote: str = '"') -> str:
    """Quote a value as a Gradle string literal."""
    text = str(value).replace("\\", "\\\\").replace(quote, "\\" + quote)
    if quote == '"':
        text = text.replace("$", "\\$")
    return f"{quote}{text}{quote}"


# ============================================================================
# Template Context Builder
# ============================================================================


def java_version_constant(version: int) -> str:
    """
    Gradle JavaVersion constant for a language version.

    Raises:
        UnsupportedVersionError: If the version has no known rendering
    """
    try:
        return JAVA_VERSION_CONSTANTS[version]
    except (KeyError, TypeError):
        raise UnsupportedVersionError(
            "language_version", version, supported=SUPPORTED_JAVA_VERSIONS
        ) from None


def require_application_jar(descriptor: BuildDescriptor) -> None:
    """
    Check that the build produces an executable jar for the container image.

    Both image build commands package the Spring Boot fat jar (bootJar or the
    repackaged Maven artifact); a plain java build has no such jar.

    Raises:
        UnsupportedOptionError: If framework_version is unset
    """
    if not descriptor.has_framework:
        docker = descriptor.docker or DockerConfig()
        raise UnsupportedOptionError(
            "docker",
            docker.build_tool,
            message=(
                "A Dockerfile requires framework_version: without the Spring Boot plugin "
                "the build produces no executable application jar"
            ),
        )


class TemplateContext:
    """
    Builds the context dictionary for template rendering.

    All option checks happen here, before any template is touched, so an
    unsupported option fails the render without producing partial text.
    """

    def __init__(self, descriptor: BuildDescriptor):
        self.descriptor = descriptor

    def build(self, extra_context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Build complete template context.

        Args:
            extra_context: Additional context variables to include

        Returns:
            Dictionary with all template variables

        Raises:
            UnsupportedVersionError: If language or framework version is unsupported
        """
        d = self.descriptor
        framework_version = d.framework_version
        if framework_version is not None:
            validate_framework_version(framework_version)

        context: Dict[str, Any] = {
            "scaffoldr_version": SCAFFOLDR_VERSION,
            "dsl": d.dsl.value,
            "quote": QUOTES[d.dsl],
            "java_version": d.language_version,
            "java_version_constant": java_version_constant(d.language_version),
            "framework_plugin_id": SPRING_BOOT_PLUGIN_ID,
            "framework_version": framework_version,
            "project": self._get_project_properties(),
            "dependencies": self._get_dependencies(),
            "test_directive": TEST_DIRECTIVES[d.test_platform.value],
            "docker": self._get_docker(),
        }

        if extra_context:
            context.update(extra_context)

        return context

    def _get_project_properties(self) -> Optional[List[Tuple[str, str]]]:
        """Ordered (property, value) pairs of the project block, or None."""
        project = self.descriptor.project
        if project is None or project.is_empty():
            return None
        pairs = [
            ("group", project.group),
            ("version", project.version),
            ("description", project.description),
        ]
        return [(key, value) for key, value in pairs if value is not None]

    def _get_dependencies(self) -> List[Dict[str, str]]:
        """Dependency lines in declaration order."""
        return [
            {
                "configuration": SCOPE_CONFIGURATIONS[dep.scope.value],
                "notation": dep.notation,
            }
            for dep in self.descriptor.dependencies
        ]

    def _get_docker(self) -> Dict[str, Any]:
        docker = self.descriptor.docker or DockerConfig()
        commands = BUILD_TOOL_COMMANDS[docker.build_tool]
        return {
            "base_image": BASE_IMAGE,
            "build_tool": docker.build_tool,
            "build_command": commands["build"],
            "artifact_path": commands["artifact"],
            "port": docker.port,
        }


# ============================================================================
# Template Renderer
# ============================================================================


class TemplateRenderer:
    """
    Main template rendering engine for Scaffoldr.

    Example:
        >>> renderer = TemplateRenderer()
        >>> descriptor = load_descriptor("scaffold.yaml")
        >>> build_script = renderer.render_build_script(descriptor)
        >>> dockerfile = renderer.render_dockerfile(descriptor)
    """

    def __init__(
        self, template_dirs: Optional[List[Union[str, Path]]] = None, strict_mode: bool = True
    ):
        """
        Initialize the template renderer.

        Args:
            template_dirs: Custom template directories (searched first)
            strict_mode: If True, raise errors for undefined variables
        """
        search_paths: List[str] = []

        for td in list(template_dirs or []) + default_template_dirs():
            path = Path(td)
            if path.is_dir() and str(path) not in search_paths:
                search_paths.append(str(path))

        if not search_paths:
            raise ScaffoldrError(
                "No template directories found. Expected templates at:\n"
                f"  - {PACKAGE_TEMPLATE_DIR}"
            )

        logger.debug("Template search paths resolved", paths=search_paths)

        self.env = Environment(
            loader=FileSystemLoader(search_paths),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined if strict_mode else Undefined,
        )

        self.env.filters["gradle_string"] = gradle_string_filter

        self.template_paths = search_paths

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with given context.

        Args:
            template_name: Template file path (relative to template dirs)
            context: Variables to pass to template

        Returns:
            Rendered template as string

        Raises:
            ScaffoldrError: If template not found or rendering fails
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound as e:
            raise ScaffoldrError(
                f"Template not found: {template_name}\nSearched in: {self.template_paths}"
            ) from e
        except TemplateError as e:
            raise ScaffoldrError(f"Template rendering error: {e}") from e

    def render_build_script(
        self,
        descriptor: BuildDescriptor,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Render the Gradle build script in the descriptor's DSL.

        Raises:
            UnsupportedVersionError: If language or framework version is unsupported
        """
        context = TemplateContext(descriptor).build(extra_context)
        template_file = TEMPLATE_FILES[f"build_{descriptor.dsl.value}"]
        logger.info(
            "Rendering build script",
            template=template_file,
            java=descriptor.language_version,
            dependency_count=len(descriptor.dependencies),
        )
        return self.render(template_file, context)

    def render_settings(
        self,
        descriptor: BuildDescriptor,
        project_name: str,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Render the Gradle settings script declaring the root project name."""
        validate_project_name(project_name)
        context = TemplateContext(descriptor).build(extra_context)
        context["project_name"] = project_name
        template_file = TEMPLATE_FILES[f"settings_{descriptor.dsl.value}"]
        logger.info("Rendering settings script", template=template_file)
        return self.render(template_file, context)

    def render_dockerfile(
        self,
        descriptor: BuildDescriptor,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Render a two-stage Dockerfile that builds and runs the application jar.

        Raises:
            UnsupportedVersionError: If language or framework version is unsupported
            UnsupportedOptionError: If the descriptor has no framework plugin
        """
        context = TemplateContext(descriptor).build(extra_context)
        require_application_jar(descriptor)
        template_file = TEMPLATE_FILES["dockerfile"]
        logger.info("Rendering Dockerfile", template=template_file)
        return self.render(template_file, context)

    def render_all(
        self,
        descriptor: BuildDescriptor,
        project_name: Optional[str] = None,
        include_dockerfile: bool = False,
    ) -> Dict[str, str]:
        """
        Render every artifact for a descriptor.

        Returns:
            Dictionary mapping file names to rendered content, e.g.
            {"build.gradle.kts": "...", "settings.gradle.kts": "...", "Dockerfile": "..."}
        """
        dsl = descriptor.dsl.value
        rendered = {BUILD_SCRIPT_NAMES[dsl]: self.render_build_script(descriptor)}
        if project_name:
            rendered[SETTINGS_SCRIPT_NAMES[dsl]] = self.render_settings(descriptor, project_name)
        if include_dockerfile:
            rendered["Dockerfile"] = self.render_dockerfile(descriptor)
        return rendered

    def list_templates(self) -> List[str]:
        """
        List all available templates.

        Returns:
            Sorted template paths relative to their search directory
        """
        templates: List[str] = []
        for path in self.template_paths:
            for root, _, files in os.walk(path):
                for file in files:
                    if file.endswith(".j2"):
                        rel_path = Path(os.path.relpath(os.path.join(root, file), path)).as_posix()
                        if rel_path not in templates:
                            templates.append(rel_path)
        return sorted(templates)


# ============================================================================
# Convenience Functions
# ============================================================================

# Global renderer instance (lazy initialization)
_renderer: Optional[TemplateRenderer] = None


def get_renderer() -> TemplateRenderer:
    """Get or create the global template renderer."""
    global _renderer
    if _renderer is None:
        _renderer = TemplateRenderer()
    return _renderer


def render(descriptor: BuildDescriptor) -> str:
    """
    Render the build script for a descriptor with the global renderer.

    The global renderer resolves its template search path once, on first
    use, so ./templates and $SCAFFOLDR_TEMPLATE_DIR are read from the
    working directory and environment of that first call. Build a
    TemplateRenderer directly to pick up later changes.
    """
    return get_renderer().render_build_script(descriptor)


def render_build_script(descriptor: BuildDescriptor, **kwargs: Any) -> str:
    """Convenience function to render the build script."""
    return get_renderer().render_build_script(descriptor, kwargs if kwargs else None)


def render_settings(descriptor: BuildDescriptor, project_name: str) -> str:
    """Convenience function to render the settings script."""
    return get_renderer().render_settings(descriptor, project_name)


def render_dockerfile(descriptor: BuildDescriptor, **kwargs: Any) -> str:
    """Convenience function to render the Dockerfile."""
    return get_renderer().render_dockerfile(descriptor, kwargs if kwargs else None)


__all__ = [
    "TemplateRenderer",
    "TemplateContext",
    "render",
    "render_build_script",
    "render_settings",
    "render_dockerfile",
    "get_renderer",
    "java_version_constant",
    "require_application_jar",
    "default_template_dirs",
    "TEMPLATE_FILES",
]
