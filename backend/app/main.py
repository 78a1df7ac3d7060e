"""
FastAPI Main Application for img2ggb.
Accepts a geometry problem image and returns GeoGebra construction commands.
"""

from typing import Callable

from fastapi import FastAPI, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from loguru import logger

from .config import Settings, get_settings
from .errors import AnalysisError, MissingImage
from .llm import close_chat_clients
from .models.schemas import AnalyzeResponse, ErrorResponse
from .security import verify_request_method, verify_request_origin
from .utils.encoding import encode_base64_chunked
from .utils.log_setup import configure_logging
from .vision import AnalysisPipeline, get_analysis_pipeline

DEFAULT_MIME_TYPE = "image/png"

# Every verb is routed to the handler so that it can answer 403/405 itself
ANALYZE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Initialize FastAPI app
app = FastAPI(
    title="img2ggb API",
    description="Geometry problem image to GeoGebra commands",
    version="1.0.0"
)


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    """Render taxonomy errors as {error, message}."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, unrouted verb) as {error, message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "message": f"{request.method} {request.url.path}: {exc.detail}"},
        headers=getattr(exc, "headers", None)
    )


def get_pipeline_builder() -> Callable[[Settings], AnalysisPipeline]:
    """Pipeline factory, called only once a request has passed its checks."""
    return get_analysis_pipeline


# ==================== Analysis API ====================

@app.api_route(
    "/api/analyze",
    methods=ANALYZE_METHODS,
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)
async def analyze_image(
    request: Request,
    settings: Settings = Depends(get_settings),
    build_pipeline: Callable[[Settings], AnalysisPipeline] = Depends(get_pipeline_builder)
):
    """
    Analyze an uploaded geometry problem image.

    Expects a multipart form with an ``image`` file field. Method and origin are
    checked before the upload is read or any provider client is created.
    """
    verify_request_method(request)
    verify_request_origin(request, settings)

    try:
        form = await request.form()
        image = form.get("image")

        if not isinstance(image, UploadFile):
            raise MissingImage()

        data = await image.read()
        mime_type = image.content_type or DEFAULT_MIME_TYPE
        logger.info(f"Received image: {len(data)} bytes ({mime_type})")

        pipeline = build_pipeline(settings)
        result = await pipeline.analyze(encode_base64_chunked(data), mime_type)

    except AnalysisError as e:
        if e.status_code >= 500:
            logger.error(f"Analysis error: {e}")
        raise
    except Exception as e:
        logger.error(f"Analysis error: {e}")
        raise AnalysisError(str(e)) from e

    return AnalyzeResponse(ocr_result=result.ocr_result, commands=result.commands)


@app.on_event("startup")
async def startup_event():
    """Configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting img2ggb API server")
    if settings.demo_mode:
        logger.warning("Demo mode: provider calls are disabled (no AI_API_KEY or TEST_MODE=true)")


@app.on_event("shutdown")
async def shutdown_event():
    """Close provider connections on shutdown."""
    await close_chat_clients()
    logger.info("Shutting down img2ggb API server")


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "backend.app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower()
    )
