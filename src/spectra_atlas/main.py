"""FastAPI application factory for the static preview server.

Serves the front-end build output with SPA fallback and a fixed response
header policy.
"""

from pathlib import Path

from fastapi import FastAPI

from spectra_atlas.api.middleware import PreviewHeadersMiddleware
from spectra_atlas.api.static import create_static_router
from spectra_atlas.core.config import get_settings


def create_app(root: Path | None = None) -> FastAPI:
    """Create and configure the preview application.

    Args:
        root: Directory to serve. Defaults to ``preview_root`` from settings.

    Returns:
        Configured FastAPI application instance.
    """
    if root is None:
        root = Path(get_settings().preview_root)

    app = FastAPI(
        title="Spectra Atlas Preview",
        description="Static preview server for the spectroscopic data viewer build",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_middleware(PreviewHeadersMiddleware)
    app.include_router(create_static_router(root))

    return app
