"""Inspect command - Read a rendered build script back into a descriptor."""
from pathlib import Path
from typing import Optional

import typer

from scaffoldr_common import ScaffoldrError
from scaffoldr_schema import to_yaml_string
from scaffoldr_sdk import read_build_script

from .utils import error, handle_error, success


def inspect(
    build_file: str = typer.Argument(
        ...,
        help="Path to build.gradle.kts or build.gradle"
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Write the descriptor YAML to this file instead of stdout"
    ),
):
    """
    Print the build descriptor equivalent to a rendered build script.

    Only scripts in the layout scaffoldr renders are understood.

    Examples:
        scaffoldr inspect build.gradle.kts
        scaffoldr inspect build.gradle -o scaffold.yaml
    """
    script_path = Path(build_file)
    if not script_path.is_file():
        error(f"Build script not found: {build_file}")
        raise typer.Exit(1)

    try:
        text = script_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        error(f"Cannot read build script {build_file}: {e}")
        raise typer.Exit(1)

    try:
        descriptor = read_build_script(text)
    except ScaffoldrError as e:
        handle_error(e)

    content = to_yaml_string(descriptor)
    if output:
        try:
            Path(output).write_text(content, encoding="utf-8")
        except OSError as e:
            error(f"Cannot write {output}: {e}")
            raise typer.Exit(1)
        success(f"Wrote {output}")
    else:
        typer.echo(content, nl=False)
