"""Main Typer CLI application for geo_homography."""

import logging

import typer

app = typer.Typer(
    help="Project image pixels to longitude/latitude using ground control points",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Homography projection tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _register_commands() -> None:
    """
    Import command modules to register commands with the app.

    Commands use the @app.command() decorator and register themselves when
    the module is imported.
    """
    from geo_homography.cli import commands

    _ = commands


_register_commands()


if __name__ == "__main__":
    app()
