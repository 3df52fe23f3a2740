"""
CORS and request logging middleware for the LabelCheck API
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("labelcheck.http")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add permissive CORS headers to every response, errors included,
    so browsers and mobile web views can call the API from any origin.

    Starlette's CORSMiddleware is not used: it answers preflights itself
    with a plain-text body and skips requests without an Origin header.
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One log line per request with the upload size and time spent.

    Label uploads carry a base64 image, so the declared body size is logged
    instead of the body. Server errors log at ERROR, client errors at WARNING.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        content_length = request.headers.get("content-length", "")
        upload_bytes = int(content_length) if content_length.isdigit() else 0

        response = await call_next(request)

        elapsed = time.perf_counter() - start_time
        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {elapsed:.3f}s (upload {upload_bytes} bytes)",
        )
        response.headers["X-Process-Time"] = f"{elapsed:.3f}"
        return response
