"""Validate command - Check a build descriptor."""
import typer

from scaffoldr_common import DESCRIPTOR_FILE_NAME
from scaffoldr_sdk import validate_descriptor

from .utils import console, error, success, warning


def validate(
    path: str = typer.Argument(
        DESCRIPTOR_FILE_NAME,
        help="Path to the build descriptor"
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Only report errors"
    ),
):
    """
    Validate a build descriptor.

    Checks that the file loads, that it matches the descriptor schema and
    that every option (Java version, Spring Boot version, test platform,
    DSL) can be rendered.

    Examples:
        scaffoldr validate
        scaffoldr validate custom/scaffold.yaml --quiet
    """
    result = validate_descriptor(path)

    if not result["valid"]:
        error(result["message"])
        for message in result["errors"]:
            console.print(f"  • {message}", markup=False)
        raise typer.Exit(1)

    if not quiet:
        success(result["message"])
        for message in result["warnings"]:
            warning(message)
