"""Static file routing with SPA fallback for the preview server."""

from pathlib import Path
from urllib.parse import unquote

from fastapi import APIRouter, Request, Response
from fastapi.responses import FileResponse, PlainTextResponse
from loguru import logger

INDEX_FILE = "index.html"

MIME_TYPES: dict[str, str] = {
    ".html": "text/html; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
    ".jsx": "text/jsx; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".json": "application/json; charset=utf-8",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".ico": "image/x-icon",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

_TRAVERSAL_SEQUENCES = ("../", "..\\")


def sanitize_path(pathname: str) -> str:
    """URL-decode a request path and strip parent-directory sequences.

    Removal repeats until no ``../`` or ``..\\`` remains, so nested
    sequences such as ``....//`` cannot reassemble into a traversal.
    """
    path = unquote(pathname)
    while any(seq in path for seq in _TRAVERSAL_SEQUENCES):
        for seq in _TRAVERSAL_SEQUENCES:
            path = path.replace(seq, "")
    return path


def content_type_for(path: Path) -> str:
    """Look up the Content-Type for a file by extension."""
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_MIME_TYPE)


def resolve_static_file(root: Path, pathname: str) -> Path:
    """Map a request path to a file under ``root``.

    Missing files, directories, and anything resolving outside ``root``
    fall back to ``index.html``.
    """
    root = root.resolve()
    candidate = (root / sanitize_path(pathname).lstrip("/\\")).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return root / INDEX_FILE
    return candidate


def create_static_router(root: Path) -> APIRouter:
    """Create a catch-all router serving files from ``root``."""
    router = APIRouter(tags=["preview"])

    @router.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    async def serve_static(request: Request, full_path: str) -> Response:
        file_path = resolve_static_file(root, request.url.path)
        if not file_path.is_file():
            logger.error(f"Preview file missing: {file_path}")
            return PlainTextResponse("Internal Server Error", status_code=500)
        return FileResponse(file_path, media_type=content_type_for(file_path))

    return router
