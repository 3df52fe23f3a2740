import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from labelcheck.core.errors import InvalidRequestError
from labelcheck.schemas.analysis import AnalysisRequest, AnalysisResponse, ErrorResponse
from labelcheck.services.analyzer import ComplianceAnalyzer, get_analyzer

router = APIRouter()
logger = logging.getLogger("labelcheck.api")

MISSING_FIELDS = "Missing required fields: image_data and mime_type"


async def _read_request(request: Request) -> AnalysisRequest:
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}
    # Non-string values count as missing
    fields = {k: v for k, v in body.items() if k in ("image_data", "mime_type") and isinstance(v, str)}
    analysis_request = AnalysisRequest(**fields)

    missing = analysis_request.missing_fields()
    if missing:
        raise InvalidRequestError(missing)
    return analysis_request


@router.options("")
async def preflight():
    """CORS preflight; the body is never read"""
    return {"message": "CORS preflight OK"}


@router.post("", response_model=AnalysisResponse, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def analyze_label(request: Request, analyzer: ComplianceAnalyzer = Depends(get_analyzer)):
    """
    Analyse a food label image against the compliance checklist.

    Expects a JSON body with base64 ``image_data`` and its ``mime_type``.
    """
    try:
        payload = await _read_request(request)
        analysis_results = await run_in_threadpool(analyzer.analyze, payload.image_data, payload.mime_type)
        return AnalysisResponse(success=True, analysis_results=analysis_results)

    except InvalidRequestError as e:
        logger.info(f"Rejected request: {e}")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=MISSING_FIELDS, message=str(e)).model_dump(exclude_none=True),
        )
    except Exception as e:
        logger.error(f"Top-level error in analyze handler: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal Server Error", message=str(e)).model_dump(),
        )
