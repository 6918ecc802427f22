"""Projection CLI commands."""

from pathlib import Path

import typer

from geo_homography.cli.main import app
from geo_homography.exceptions import ProjectionError
from geo_homography.geojson import feature_collection, to_json
from geo_homography.homography import MIN_POINT_PAIRS
from geo_homography.projection_input import ProjectionInput, default_input
from geo_homography.projector import fit_local_plane


def _load_input(input_file: Path) -> ProjectionInput:
    """Load a projection input file, exiting with status 1 on failure."""
    try:
        return ProjectionInput.from_file(input_file)
    except FileNotFoundError:
        typer.echo(f"Error: Input file not found: {input_file}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: Failed to load input: {e}", err=True)
        raise typer.Exit(1)


@app.command("project")
def project_command(
    input_file: Path = typer.Argument(..., help="Projection input file (YAML or JSON)"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output GeoJSON file (default: stdout)"
    ),
    indent: int = typer.Option(2, help="JSON indentation"),
    camera: bool = typer.Option(
        True, help="Append the camera position feature when the input enables it"
    ),
) -> None:
    """
    Project the input's points to a GeoJSON FeatureCollection.

    Example:
        geo-homography project input.yaml --output points.geojson
    """
    projection_input = _load_input(input_file)

    try:
        collection = projection_input.project()
    except ProjectionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if len(projection_input.gcps) < MIN_POINT_PAIRS:
        typer.echo(
            f"Warning: {len(projection_input.gcps)} GCPs given, at least {MIN_POINT_PAIRS} "
            "are needed; no points projected",
            err=True,
        )

    features = list(collection["features"])
    camera_feature = projection_input.camera_feature() if camera else None
    if camera_feature is not None:
        features.append(camera_feature)

    try:
        geojson = to_json(feature_collection(features), indent=indent)
    except ValueError as e:
        typer.echo(f"Error: Projected coordinates are not finite: {e}", err=True)
        raise typer.Exit(1)

    if output is None:
        typer.echo(geojson)
    else:
        output.write_text(geojson + "\n", encoding="utf-8")
        typer.echo(f"Wrote {len(features)} features to {output}", err=True)


@app.command("fit")
def fit_command(
    input_file: Path = typer.Argument(..., help="Projection input file (YAML or JSON)"),
) -> None:
    """
    Print the reference point and the pixel -> local meters homography.

    Example:
        geo-homography fit input.yaml
    """
    projection_input = _load_input(input_file)

    try:
        fit = fit_local_plane(projection_input.gcps)
    except ProjectionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Reference point: lon={fit.ref_lon:.7f} lat={fit.ref_lat:.7f}")
    typer.echo("Homography (pixel -> east/north meters):")
    for row in fit.matrix.as_array():
        typer.echo("  " + "  ".join(f"{value:+.9e}" for value in row))


@app.command("init")
def init_command(
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output YAML file (default: stdout)"
    ),
) -> None:
    """
    Write an empty projection input with default settings.

    Example:
        geo-homography init --output input.yaml
    """
    content = default_input().to_yaml()
    if output is None:
        typer.echo(content, nl=False)
    else:
        output.write_text(content, encoding="utf-8")
        typer.echo(f"Wrote default input to {output}", err=True)
