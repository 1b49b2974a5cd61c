"""Render command - Render build files from a descriptor."""
from pathlib import Path
from typing import Optional

import typer

from scaffoldr_common import DESCRIPTOR_FILE_NAME, ScaffoldrError
from scaffoldr_sdk import load_descriptor, plan_project, render_build_script, write_project

from .utils import confirm_action, console, handle_error, info, success, warning


def render(
    path: str = typer.Argument(
        DESCRIPTOR_FILE_NAME,
        help="Path to the build descriptor"
    ),
    output_dir: str = typer.Option(
        ".",
        "--output-dir", "-o",
        help="Directory receiving the rendered files"
    ),
    name: Optional[str] = typer.Option(
        None,
        "--name", "-n",
        help="Root project name; also renders the settings script"
    ),
    dockerfile: bool = typer.Option(
        False,
        "--dockerfile",
        help="Also render a Dockerfile"
    ),
    stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print the build script instead of writing files"
    ),
    force: bool = typer.Option(
        False,
        "--force", "-f",
        help="Overwrite existing files without asking"
    ),
):
    """
    Render the Gradle build script (and optional settings script and
    Dockerfile) described by a build descriptor.

    Examples:
        scaffoldr render
        scaffoldr render scaffold.yaml --output-dir demo --name demo --dockerfile
        scaffoldr render --stdout
    """
    try:
        descriptor = load_descriptor(path)

        if stdout:
            typer.echo(render_build_script(descriptor), nl=False)
            return

        planned = plan_project(
            descriptor, output_dir, project_name=name, include_dockerfile=dockerfile
        )
        existing = [p for p in planned if p.exists()]
        if existing and not force:
            names = ", ".join(str(p) for p in existing)
            if not confirm_action(f"Overwrite {names}?", default=False):
                warning("Cancelled")
                raise typer.Exit(0)

        written = write_project(
            descriptor,
            output_dir,
            project_name=name,
            include_dockerfile=dockerfile,
            force=True,
        )
    except ScaffoldrError as e:
        handle_error(e)

    for file_path in written:
        success(f"Wrote {file_path}")
    if not name:
        info("Pass --name to also render a settings script")
    console.print(f"\nBuild with: [cyan]cd {Path(output_dir)} && gradle build[/cyan]")
