"""FastAPI application exposing the analysis pipeline."""

from __future__ import annotations

import logging
from uuid import uuid4

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from prism_analysis.api.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from prism_analysis.config import PrismConfig, create_from_config, load_config
from prism_analysis.errors import InvalidInput, MalformedResponse, SynthesisFailure
from prism_analysis.pipeline.base import Pipeline

logger = logging.getLogger(__name__)

INVALID_TOPIC_MESSAGE = "Missing or invalid topic"
SYNTHESIS_FAILED_MESSAGE = "The analysis service is unavailable. Please try again."
MALFORMED_RESPONSE_MESSAGE = "Failed to parse analysis from AI response."
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    pipeline: Pipeline | None = None,
    *,
    config: PrismConfig | None = None,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> FastAPI:
    """Build the API around a pipeline.

    Args:
        pipeline: Pipeline to serve. Built from ``config`` when omitted.
        config: Configuration used when no pipeline is given; defaults to
            the file named by PRISM_CONFIG, else the bundled default.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
    """
    if pipeline is None:
        config = config or load_config()
        pipeline, _ = create_from_config(
            config, log_override=log_override, log_dir_override=log_dir_override
        )

    from prism_analysis import __version__

    app = FastAPI(title="Prism Analysis API", version=__version__)
    app.state.pipeline = pipeline

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):  # type: ignore[no-untyped-def]
        request_id = request.headers.get("X-Request-ID", uuid4().hex)
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, INVALID_TOPIC_MESSAGE)

    @app.exception_handler(InvalidInput)
    async def handle_invalid_input(request: Request, exc: InvalidInput) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc) or INVALID_TOPIC_MESSAGE)

    @app.exception_handler(SynthesisFailure)
    async def handle_synthesis_failure(request: Request, exc: SynthesisFailure) -> JSONResponse:
        logger.error(
            "Synthesis failed (request %s, status %s)",
            getattr(request.state, "request_id", "-"),
            exc.status_code,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, SYNTHESIS_FAILED_MESSAGE)

    @app.exception_handler(MalformedResponse)
    async def handle_malformed_response(request: Request, exc: MalformedResponse) -> JSONResponse:
        logger.error(
            "Model returned malformed output (request %s, %d chars)",
            getattr(request.state, "request_id", "-"),
            len(exc.raw_text),
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, MALFORMED_RESPONSE_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error (request %s)", getattr(request.state, "request_id", "-"))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    def get_pipeline(request: Request) -> Pipeline:
        return request.app.state.pipeline

    @app.post(
        "/analyze",
        response_model=AnalyzeResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def analyze(
        payload: AnalyzeRequest,
        pipeline: Pipeline = Depends(get_pipeline),
    ) -> AnalyzeResponse:
        result = await pipeline.run(payload.topic)  # type: ignore[arg-type]
        return AnalyzeResponse.model_validate(
            {"topic": payload.topic.strip(), **result.to_dict()}  # type: ignore[union-attr]
        )

    @app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app
