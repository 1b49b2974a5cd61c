"""
Template System Module
======================

Jinja2 templates and the renderer that turns a BuildDescriptor into:
- Gradle build scripts (Kotlin and Groovy DSL)
- Gradle settings scripts
- Dockerfiles
"""

from .renderer import (
    TEMPLATE_FILES,
    TemplateContext,
    TemplateRenderer,
    default_template_dirs,
    get_renderer,
    java_version_constant,
    render,
    render_build_script,
    render_dockerfile,
    render_settings,
)

__all__ = [
    "TemplateRenderer",
    "TemplateContext",
    "render",
    "render_build_script",
    "render_settings",
    "render_dockerfile",
    "get_renderer",
    "java_version_constant",
    "default_template_dirs",
    "TEMPLATE_FILES",
]
