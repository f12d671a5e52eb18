import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import sentry_sdk

from app.ai.config import resolve_generation_parameters
from app.ai.factory import get_ai_client
from app.ai.types import GenerativeClient
from app.api.v1.analyze import UPLOAD_FIELDS, router as analyze_router
from app.api.v1.health import router as health_router
from app.core.config import Settings, load_settings
from app.core.cors import cors_allowed_origins
from app.core.errors import AnalysisError, InvalidRequest, MissingFile
from app.core.lifespan import lifespan
from app.core.rate_limit import build_limiter
from app.services.analysis_service import AnalysisPipeline

logger = logging.getLogger(__name__)


async def _analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    settings = request.app.state.settings
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_payload(include_details=settings.expose_error_details),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # A text value under the upload field name means no file was attached.
    if any(len(err.get("loc", ())) > 1 and err["loc"][1] in UPLOAD_FIELDS for err in errors):
        error: AnalysisError = MissingFile()
    else:
        error = InvalidRequest(details="; ".join(str(err.get("msg", "")) for err in errors))
    logger.info("request_rejected path=%s code=%s", request.url.path, error.code)
    return await _analysis_error_handler(request, error)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error path=%s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Settings | None = None, *, ai_client: GenerativeClient | None = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.environment)

    if ai_client is None and settings.gemini_configured:
        ai_client = get_ai_client(settings)

    app = FastAPI(title="Resume Analyzer API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.analysis_pipeline = AnalysisPipeline(
        settings=settings,
        ai_client=ai_client,
        generation=resolve_generation_parameters(settings),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allowed_origins(settings),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(AnalysisError, _analysis_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(health_router, tags=["Health"])
    app.include_router(analyze_router, tags=["Analysis"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
