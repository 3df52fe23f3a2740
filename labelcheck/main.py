import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from labelcheck.core.config import settings
from labelcheck.middleware import CORSHeadersMiddleware, RequestLoggingMiddleware
from labelcheck.routers import analyze

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("labelcheck")

if not settings.GEMINI_API_KEY:
    logger.warning("GEMINI_API_KEY is missing. Label analysis requests will fail.")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Food label compliance checks powered by Gemini"
)

app.add_middleware(RequestLoggingMiddleware)
# Added last so it wraps request logging
app.add_middleware(CORSHeadersMiddleware)

ANALYZE_PATH = "/api/analyze"

app.include_router(analyze.router, prefix=ANALYZE_PATH, tags=["Analysis"])


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """405s use the same error body as the rest of the API"""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    headers = dict(exc.headers or {})
    if request.url.path == ANALYZE_PATH:
        headers["Allow"] = "POST, OPTIONS"
    return JSONResponse(status_code=405, content={"error": "Method Not Allowed"}, headers=headers)


@app.get("/health")
def health_check():
    return {"status": "ok", "version": settings.VERSION}
