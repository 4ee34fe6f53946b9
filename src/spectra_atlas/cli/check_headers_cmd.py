"""Header check command for a running preview server.

Issues HEAD requests against the target URL and a few common static paths
and reports the response headers with warnings. Pure HTTP client; no
preview-server imports.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import urljoin

import httpx
import typer

STATIC_PATHS = ["/", "/index.html", "/favicon.svg", "/vite.svg", "/src/main.jsx"]

_TEXT_TYPE_RE = re.compile(r"(text|json|javascript|html)", re.IGNORECASE)
_CHARSET_RE = re.compile(r"charset=utf-8", re.IGNORECASE)


@dataclass
class HeaderReport:
    """Headers returned for one URL plus any findings."""

    url: str
    status: int
    headers: dict[str, str]
    warnings: list[str] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)


def inspect_headers(headers: dict[str, str]) -> tuple[list[str], list[str]]:
    """Evaluate a header mapping against the preview header policy.

    Args:
        headers: Response headers with lowercase names.

    Returns:
        ``(warnings, notices)`` message lists.
    """
    warnings: list[str] = []
    notices: list[str] = []

    content_type = headers.get("content-type")
    if not content_type:
        warnings.append("missing Content-Type header")
    elif _TEXT_TYPE_RE.search(content_type) and not _CHARSET_RE.search(content_type):
        warnings.append("text content-type missing charset=utf-8")

    if "cache-control" not in headers:
        warnings.append("Cache-Control header missing")
    if "x-content-type-options" not in headers:
        warnings.append("X-Content-Type-Options header missing")
    if "expires" in headers:
        notices.append("Expires header present (prefer Cache-Control instead)")
    if "set-cookie" in headers:
        notices.append(f"Set-Cookie header(s) present: {headers['set-cookie']}")

    return warnings, notices


def _head(client: httpx.Client, url: str) -> HeaderReport:
    resp = client.request("HEAD", url)
    headers = {k.lower(): v for k, v in resp.headers.items()}
    warnings, notices = inspect_headers(headers)
    return HeaderReport(url, resp.status_code, headers, warnings, notices)


def collect_reports(client: httpx.Client, target: str) -> list[HeaderReport]:
    """HEAD the target and the common static paths.

    Raises:
        httpx.HTTPError: If the target itself cannot be reached.
    """
    reports = [_head(client, target)]
    for path in STATIC_PATHS:
        try:
            reports.append(_head(client, urljoin(target, path)))
        except httpx.HTTPError:
            continue
    return reports


def _print_report(report: HeaderReport) -> None:
    typer.echo(f"\nURL: {report.url}")
    typer.echo(f" status: {report.status}")
    typer.echo(" headers:")
    for name, value in report.headers.items():
        typer.echo(f"   {name}: {value}")
    for warning in report.warnings:
        typer.echo(typer.style(f"  -> WARNING: {warning}", fg=typer.colors.YELLOW))
    for notice in report.notices:
        typer.echo(f"  -> NOTICE: {notice}")


def check_headers(
    url: str | None = typer.Argument(None, help="URL to check (defaults to PREVIEW_URL)"),
    timeout: int = typer.Option(10, "--timeout", help="Per-request timeout in seconds"),
) -> None:
    """Check cache and security headers returned by a preview server."""
    from spectra_atlas.core.config import get_settings

    target = url or get_settings().preview_url
    typer.echo(f"Checking headers for {target}")

    try:
        with httpx.Client(timeout=timeout, follow_redirects=False) as client:
            reports = collect_reports(client, target)
    except httpx.HTTPError as e:
        typer.echo(f"Check failed: {e}", err=True)
        raise typer.Exit(code=1) from None

    for report in reports:
        _print_report(report)
