"""Shapefile to GeoJSON conversion command.

Exit codes: 0 success, 1 usage error, 2 input not found, 3 read/decode
failure, 4 write failure.
"""

from pathlib import Path

import typer
from loguru import logger

EXIT_USAGE = 1
EXIT_MISSING_INPUT = 2
EXIT_READ_FAILED = 3
EXIT_WRITE_FAILED = 4

# Extra arguments after INPUT and OUTPUT are ignored; exit code 2 is reserved for missing input
CONVERT_CONTEXT_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}


def convert_shapefile(
    ctx: typer.Context,
    input_path: Path | None = typer.Argument(None, metavar="INPUT.shp", help="Shapefile to convert"),  # noqa: B008
    output_path: Path | None = typer.Argument(None, metavar="OUTPUT.geojson", help="GeoJSON file to write"),  # noqa: B008
) -> None:
    """Convert a shapefile into a GeoJSON FeatureCollection."""
    from spectra_atlas.lib.boundary_loader import read_shapefile_features
    from spectra_atlas.lib.exporter import write_feature_collection

    if input_path is None or output_path is None:
        typer.echo("Usage: spectra-atlas convert-shapefile <input.shp> <output.geojson>", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    if ctx.args:
        logger.warning(f"Ignoring extra arguments: {' '.join(ctx.args)}")

    if not input_path.exists():
        typer.echo(f"Input .shp not found: {input_path}", err=True)
        raise typer.Exit(code=EXIT_MISSING_INPUT)

    try:
        features = read_shapefile_features(input_path)
    except Exception:
        logger.exception(f"Failed to read shapefile: {input_path}")
        raise typer.Exit(code=EXIT_READ_FAILED) from None

    try:
        count = write_feature_collection(output_path, features, indent=2)
    except OSError as e:
        logger.error(f"Failed to write output GeoJSON: {e}")
        raise typer.Exit(code=EXIT_WRITE_FAILED) from None

    typer.echo(f"Wrote {output_path} with {count} features")
