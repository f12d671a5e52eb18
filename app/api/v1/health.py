from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from app.schemas.analysis import HealthResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root():
    return "Resume Analyzer API is running."


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check the health status of the application.",
)
async def health_check(request: Request):
    settings = request.app.state.settings
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        gemini_api_configured=settings.gemini_configured,
        model=settings.gemini_model,
    )
