"""District-to-state geodata preparation commands."""

from pathlib import Path

import typer
from loguru import logger

districts_app = typer.Typer()

# Missing inputs exit 1; unparseable inputs exit with a distinct code
EXIT_PARSE_FAILED = 3


def _path_or_default(value: Path | None, default: str) -> Path:
    return value if value is not None else Path(default)


@districts_app.command("split")
def split_districts(
    districts: Path | None = typer.Option(None, "--districts", help="Simplified district FeatureCollection"),  # noqa: B008
    states: Path | None = typer.Option(None, "--states", help="State features (.geojson or .shp)"),  # noqa: B008
    out_dir: Path | None = typer.Option(None, "--out-dir", help="Directory for per-state files"),  # noqa: B008
) -> None:
    """Split districts into per-state files by nearest state point."""
    from spectra_atlas.core.config import get_settings
    from spectra_atlas.lib.assigner import split_by_nearest_state, state_points, write_state_buckets
    from spectra_atlas.lib.boundary_loader import load_features, read_features

    settings = get_settings()
    districts_path = _path_or_default(districts, settings.districts_source_simplified)
    states_path = _path_or_default(states, settings.states_boundary_file)
    out_path = _path_or_default(out_dir, settings.state_districts_dir)

    for required in (districts_path, states_path):
        if not required.is_file():
            logger.error(f"Input not found: {required}")
            raise typer.Exit(code=1)

    try:
        logger.info(f"Reading states... {states_path}")
        points = state_points(load_features(states_path))
        logger.info(f"Found {len(points)} states")

        logger.info(f"Reading districts... {districts_path}")
        district_features = read_features(districts_path)
    except ValueError:
        logger.exception("Failed to parse input")
        raise typer.Exit(code=EXIT_PARSE_FAILED) from None
    logger.info(f"Total district features: {len(district_features)}")

    result = split_by_nearest_state(district_features, points)
    result.files_written = write_state_buckets(result.buckets, out_path)

    typer.echo(f"Done. states written: {result.files_written} unassigned districts: {result.unassigned}")


@districts_app.command("refine")
def refine_districts(
    districts: Path | None = typer.Option(None, "--districts", help="Unsimplified district FeatureCollection"),  # noqa: B008
    states_dir: Path | None = typer.Option(None, "--states-dir", help="Directory of existing per-state files"),  # noqa: B008
    out_dir: Path | None = typer.Option(None, "--out-dir", help="Output directory (defaults to --states-dir)"),  # noqa: B008
) -> None:
    """Reassign districts to states by centroid containment."""
    from spectra_atlas.core.config import get_settings
    from spectra_atlas.lib.assigner import load_state_index, refine_by_containment, write_state_buckets
    from spectra_atlas.lib.boundary_loader import read_features

    settings = get_settings()
    districts_path = _path_or_default(districts, settings.districts_source)
    states_path = _path_or_default(states_dir, settings.state_districts_dir)
    out_path = out_dir if out_dir is not None else states_path

    if not districts_path.is_file():
        logger.error(f"districts source not found: {districts_path}")
        raise typer.Exit(code=1)

    try:
        index = load_state_index(states_path)
        logger.info("Loading districts source...")
        district_features = read_features(districts_path)
    except FileNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from None
    except ValueError:
        logger.exception("Failed to parse GeoJSON input")
        raise typer.Exit(code=EXIT_PARSE_FAILED) from None

    result = refine_by_containment(district_features, index.states, index.previous)
    result.files_written = write_state_buckets(result.buckets, out_path)

    typer.echo(
        f"Done. total districts processed: {result.total} "
        f"reassignments detected: {result.reassignments} "
        f"dropped: {result.dropped} "
        f"state files written: {result.files_written}"
    )


@districts_app.command("dissolve")
def dissolve_districts(
    states_dir: Path | None = typer.Option(None, "--states-dir", help="Directory of per-state district files"),  # noqa: B008
    out_dir: Path | None = typer.Option(None, "--out-dir", help="Directory for dissolved state outlines"),  # noqa: B008
) -> None:
    """Dissolve each per-state district file into a single state outline."""
    from spectra_atlas.core.config import get_settings
    from spectra_atlas.lib.assigner import dissolve_state_dir

    settings = get_settings()
    states_path = _path_or_default(states_dir, settings.state_districts_dir)
    out_path = _path_or_default(out_dir, settings.state_polygons_dir)

    try:
        result = dissolve_state_dir(states_path, out_path)
    except FileNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from None

    typer.echo(f"Done. dissolved: {len(result.written)} failed: {len(result.failed)}")
    for name in result.failed:
        typer.echo(f"  failed: {name}")
