"""Scaffoldr SDK - render Gradle build descriptors for Spring Boot projects.

This package provides tools for:
- Loading and validating scaffold.yaml descriptors
- Template-based rendering of build scripts, settings scripts and Dockerfiles
- Reading rendered build scripts back into descriptors
- Writing rendered files into a project directory

Example:
    >>> from scaffoldr_sdk import load_descriptor, render, write_project
    >>> descriptor = load_descriptor("scaffold.yaml")
    >>> print(render(descriptor))
    >>> write_project(descriptor, "demo", project_name="demo")

Package Structure:
    scaffoldr_sdk/
    ├── core/       - Loader, validation, build-script reader
    ├── project/    - Writing rendered files to disk
    └── templates/  - Template rendering system
"""

from scaffoldr_common import SCAFFOLDR_VERSION

# Core loading and validation
from .core import (
    check_descriptor,
    detect_dsl,
    expand_env_vars,
    load_descriptor,
    read_build_script,
    validate_descriptor,
)

# Project generation
from .project import plan_project, write_project

# Templates
from .templates import (
    TemplateContext,
    TemplateRenderer,
    get_renderer,
    render,
    render_build_script,
    render_dockerfile,
    render_settings,
)

__version__ = SCAFFOLDR_VERSION

__all__ = [
    # Core functions
    "load_descriptor",
    "expand_env_vars",
    "read_build_script",
    "detect_dsl",
    # Validation
    "validate_descriptor",
    "check_descriptor",
    # Project generation
    "plan_project",
    "write_project",
    # Templates
    "TemplateRenderer",
    "TemplateContext",
    "render",
    "render_build_script",
    "render_settings",
    "render_dockerfile",
    "get_renderer",
]
