"""Scaffoldr CLI - Main entry point."""
import typer

from scaffoldr_common import configure_logging, get_settings

from . import info_cmd, init_cmd, inspect_cmd, render_cmd, validate_cmd

app = typer.Typer(
    name="scaffoldr",
    help="Scaffoldr CLI - Render Gradle build files for Spring Boot projects",
    no_args_is_help=True,
    add_completion=False
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show debug logs"
    ),
):
    """Configure logging before any command runs."""
    settings = get_settings()
    configure_logging(
        level="debug" if verbose else settings.log_level,
        json_format=settings.log_json,
    )


# Register all commands
app.command()(init_cmd.init)
app.command()(render_cmd.render)
app.command()(validate_cmd.validate)
app.command()(inspect_cmd.inspect)
app.command()(info_cmd.templates)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
