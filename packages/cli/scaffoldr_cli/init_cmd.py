"""Init command - Create a starter build descriptor."""
from pathlib import Path
from typing import List, Optional

import typer

from scaffoldr_common import DESCRIPTOR_FILE_NAME, ScaffoldrError, get_settings
from scaffoldr_schema import BuildDescriptor, Dependency, DependencyScope, ProjectInfo, to_yaml_string
from scaffoldr_sdk import check_descriptor

from .utils import confirm_action, console, error, handle_error, success, warning


def generate_descriptor(
    java: int,
    boot: Optional[str],
    deps: List[str],
    test_deps: List[str],
    test_platform: str,
    dsl: str,
    group: Optional[str] = None,
) -> BuildDescriptor:
    """Build a starter descriptor from init options.

    Building through the schema models keeps the written YAML valid by
    construction.
    """
    dependencies = [Dependency(coordinate=d) for d in deps]
    dependencies += [Dependency(coordinate=d, scope=DependencyScope.TEST) for d in test_deps]
    return BuildDescriptor(
        language_version=java,
        framework_version=boot,
        dependencies=dependencies if boot else [],
        test_platform=test_platform,
        dsl=dsl,
        project=ProjectInfo(group=group, version="0.0.1-SNAPSHOT") if group else None,
    )


def init(
    output: str = typer.Option(
        DESCRIPTOR_FILE_NAME,
        "--output", "-o",
        help="Output file path"
    ),
    java: Optional[int] = typer.Option(
        None,
        "--java",
        help="Java language version (default: $SCAFFOLDR_DEFAULT_JAVA_VERSION or 21)"
    ),
    boot: Optional[str] = typer.Option(
        None,
        "--boot",
        help="Spring Boot plugin version (default: $SCAFFOLDR_DEFAULT_BOOT_VERSION or 3.2.0)"
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain Java project: no Spring Boot plugin and no dependencies"
    ),
    dep: Optional[List[str]] = typer.Option(
        None,
        "--dep", "-d",
        help="Compile dependency (starter name or group:artifact[:version]); repeatable"
    ),
    test_dep: Optional[List[str]] = typer.Option(
        None,
        "--test-dep",
        help="Test dependency; repeatable"
    ),
    test_platform: str = typer.Option(
        "junit",
        "--test-platform",
        help="Test platform: junit, junit4, testng or none"
    ),
    dsl: Optional[str] = typer.Option(
        None,
        "--dsl",
        help="Build script DSL: kotlin or groovy"
    ),
    group: Optional[str] = typer.Option(
        None,
        "--group",
        help="Project group (e.g. com.example)"
    ),
    force: bool = typer.Option(
        False,
        "--force", "-f",
        help="Overwrite existing file without asking"
    ),
):
    """
    Create a starter build descriptor.

    Examples:
        scaffoldr init
        scaffoldr init --java 17 --boot 3.3.0 --dep web --dep data-jpa
        scaffoldr init --plain --dsl groovy -o plain.yaml
    """
    settings = get_settings()
    boot_version = None if plain else (boot or settings.default_boot_version)

    try:
        descriptor = generate_descriptor(
            java=java if java is not None else settings.default_java_version,
            boot=boot_version,
            deps=[] if plain else (dep if dep is not None else ["web"]),
            test_deps=[] if plain else (test_dep if test_dep is not None else ["test"]),
            test_platform=test_platform,
            dsl=dsl or settings.default_dsl,
            group=group,
        )
    except ScaffoldrError as e:
        handle_error(e)

    errors, warnings = check_descriptor(descriptor)
    if errors:
        for message in errors:
            error(message)
        raise typer.Exit(1)

    output_path = Path(output)
    if output_path.exists() and not force:
        if not confirm_action(f"{output} already exists. Overwrite?", default=False):
            warning("Cancelled")
            raise typer.Exit(0)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(to_yaml_string(descriptor), encoding="utf-8")

    success(f"Created {output}")
    for message in warnings:
        warning(message)

    console.print("\n[bold cyan]Configuration:[/bold cyan]")
    console.print(f"  Java: {descriptor.language_version}")
    console.print(f"  Spring Boot: {descriptor.framework_version or 'none'}")
    console.print(f"  Dependencies: {len(descriptor.dependencies)}")
    console.print(f"  Test platform: {descriptor.test_platform.value}")
    console.print(f"  DSL: {descriptor.dsl.value}")

    console.print("\n[bold cyan]Next steps:[/bold cyan]")
    console.print(f"  1. Validate the descriptor: [cyan]scaffoldr validate {output}[/cyan]")
    console.print(f"  2. Render the build files: [cyan]scaffoldr render {output}[/cyan]")
