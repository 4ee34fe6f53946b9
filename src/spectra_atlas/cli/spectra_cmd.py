"""Spectroscopic sample data commands."""

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from loguru import logger

if TYPE_CHECKING:
    from spectra_atlas.lib.spectra import SpectrumSample

spectra_app = typer.Typer()


async def _fetch_samples() -> list["SpectrumSample"]:
    from spectra_atlas.core.config import get_settings
    from spectra_atlas.lib.spectra import DataServiceClient, DataServiceError, sample_from_row

    settings = get_settings()
    if not settings.supabase_anon_key:
        typer.echo("SUPABASE_ANON_KEY is not set", err=True)
        raise typer.Exit(code=1)

    client = DataServiceClient(
        settings.supabase_url,
        settings.supabase_anon_key,
        timeout=settings.data_service_timeout,
    )
    try:
        rows = await client.fetch_rows(settings.spectra_table)
    except DataServiceError as e:
        logger.error(f"Data fetch failed: {e.message}")
        raise typer.Exit(code=1) from None
    return [sample_from_row(row) for row in rows]


@spectra_app.command("list")
def list_samples(
    sample_no: str | None = typer.Option(None, "--sample", help="Show only this S.No"),
) -> None:
    """List samples with their spectrum sizes."""
    from spectra_atlas.lib.spectra import find_sample

    samples = asyncio.run(_fetch_samples())
    if sample_no is not None:
        sample = find_sample(samples, sample_no)
        if sample is None:
            typer.echo(f"No sample with S.No {sample_no}", err=True)
            raise typer.Exit(code=1)
        samples = [sample]

    if not samples:
        typer.echo("No samples found")
        return

    for sample in samples:
        typer.echo(f"{sample.sample_no:>6}  {sample.sample_name or '-':<40} points={sample.point_count}")


@spectra_app.command("export")
def export_samples(
    output: Path = typer.Option(..., "--output", help="JSON file to write"),  # noqa: B008
) -> None:
    """Export every sample's parsed spectrum as JSON."""
    from spectra_atlas.lib.exporter import write_json

    samples = asyncio.run(_fetch_samples())
    count = write_json(output, (s.to_dict() for s in samples))
    typer.echo(f"Exported {count} samples to {output}")
