"""Info commands - Version and template listing."""
import sys

from rich.table import Table

from scaffoldr_common import SCAFFOLDR_VERSION
from scaffoldr_sdk import TemplateRenderer

from .utils import console


def version():
    """
    Show scaffoldr version information.

    Examples:
        scaffoldr version
    """
    import scaffoldr_sdk

    python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    table = Table(title="Scaffoldr Version Information", show_header=True, header_style="bold cyan")
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Version", style="green")

    table.add_row("CLI", SCAFFOLDR_VERSION)
    table.add_row("SDK", scaffoldr_sdk.__version__)
    table.add_row("Python", python_version)

    console.print(table)


def templates():
    """
    List the templates available to the renderer.

    Templates in ./templates or $SCAFFOLDR_TEMPLATE_DIR override the
    packaged ones with the same relative path.

    Examples:
        scaffoldr templates
    """
    renderer = TemplateRenderer()

    table = Table(title="Templates", show_header=True, header_style="bold cyan")
    table.add_column("Template", style="cyan", no_wrap=True)
    for name in renderer.list_templates():
        table.add_row(name)
    console.print(table)

    console.print("\n[bold]Search path:[/bold]")
    for path in renderer.template_paths:
        console.print(f"  {path}", markup=False)
