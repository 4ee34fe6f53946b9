"""Response header policy for the static preview server."""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

CACHE_CONTROL = "no-store, no-cache, must-revalidate, proxy-revalidate, max-age=0"
CONTENT_SECURITY_POLICY = "frame-ancestors 'self'"

# Legacy headers that scanners flag; Cache-Control and CSP replace them
REMOVED_HEADERS = ("X-XSS-Protection", "X-Frame-Options", "Expires")


class PreviewHeadersMiddleware(BaseHTTPMiddleware):
    """Set cache and security headers on every response and strip legacy ones."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Apply the header policy to the response.

        Args:
            request: The incoming request.
            call_next: The next middleware/handler.

        Returns:
            Response with the preview header policy applied.
        """
        response = await call_next(request)
        response.headers["Cache-Control"] = CACHE_CONTROL
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Content-Security-Policy"] = CONTENT_SECURITY_POLICY
        for header in REMOVED_HEADERS:
            if header in response.headers:
                del response.headers[header]
        return response
