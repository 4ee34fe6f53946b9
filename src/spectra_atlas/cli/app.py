"""Typer CLI root application with serve command."""

from pathlib import Path

import typer
from loguru import logger

from spectra_atlas.core.config import get_settings
from spectra_atlas.core.logging import setup_logging

app = typer.Typer(name="spectra-atlas", help="Spectroscopic data viewer tooling: geodata preparation and preview")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    port: int | None = typer.Option(None, "--port", help="Bind port (defaults to PREVIEW_PORT)"),
    root: Path | None = typer.Option(None, "--root", help="Directory to serve (defaults to PREVIEW_ROOT)"),  # noqa: B008
    host: str = typer.Option("127.0.0.1", "--host", help="Bind host"),
) -> None:
    """Serve the built front-end with SPA fallback and fixed headers."""
    import uvicorn

    from spectra_atlas.main import create_app

    settings = get_settings()
    root = (root or Path(settings.preview_root)).resolve()
    port = port or settings.preview_port

    if not root.is_dir():
        logger.error(f"Preview root not found: {root}. Build the front-end first.")
        raise typer.Exit(code=1)

    typer.echo(f"Preview server running at http://localhost:{port} serving {root}")
    uvicorn.run(create_app(root), host=host, port=port)


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from spectra_atlas.cli.check_headers_cmd import check_headers
    from spectra_atlas.cli.convert_cmd import CONVERT_CONTEXT_SETTINGS, convert_shapefile
    from spectra_atlas.cli.districts_cmd import districts_app
    from spectra_atlas.cli.spectra_cmd import spectra_app

    app.add_typer(districts_app, name="districts", help="District-to-state geodata preparation")
    app.add_typer(spectra_app, name="spectra", help="Spectroscopic sample data commands")
    app.command("convert-shapefile", context_settings=CONVERT_CONTEXT_SETTINGS)(convert_shapefile)
    app.command("check-headers")(check_headers)


_register_subcommands()
