from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from app.core.rate_limit import enforce_rate_limit
from app.schemas.analysis import AnalysisResponse, ErrorResponse, PromptVariant
from app.services.analysis_service import AnalysisPipeline
from app.services.upload_gate import read_upload

router = APIRouter(dependencies=[Depends(enforce_rate_limit)])

UPLOAD_FIELDS = frozenset({"file", "resume"})

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid upload or unreadable PDF"},
    429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    500: {"model": ErrorResponse, "description": "Configuration or Gemini API failure"},
}


async def _analyze_upload(
    request: Request,
    upload: UploadFile | None,
    portfolio_links: str | None,
    variant: PromptVariant,
) -> AnalysisResponse:
    settings = request.app.state.settings
    pipeline: AnalysisPipeline = request.app.state.analysis_pipeline
    document = await read_upload(
        upload,
        max_bytes=settings.max_upload_bytes,
        verify_signature=settings.verify_upload_signature,
    )
    return await pipeline.analyze(document, variant=variant, portfolio_links=portfolio_links)


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
    summary="Project analysis",
    description="Critique the projects and technical skills found in an uploaded PDF resume.",
)
async def analyze_projects(
    request: Request,
    file: UploadFile | None = File(default=None),
    portfolio_links: str | None = Form(default=None, alias="portfolioLinks"),
):
    return await _analyze_upload(request, file, portfolio_links, "project")


@router.post(
    "/analyze-resume",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
    summary="Portfolio analysis with gamified scoring",
    description="Analyze a PDF resume plus portfolio links and return a score, tier and skill level.",
)
async def analyze_resume(
    request: Request,
    resume: UploadFile | None = File(default=None),
    portfolio_links: str | None = Form(default=None, alias="portfolioLinks"),
):
    return await _analyze_upload(request, resume, portfolio_links, "portfolio")


@router.post(
    "/analyze-gaps",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
    summary="Career gap analysis",
    description="Summarize strengths, gaps, keywords and suitable roles for an uploaded PDF resume.",
)
async def analyze_gaps(
    request: Request,
    resume: UploadFile | None = File(default=None),
):
    return await _analyze_upload(request, resume, None, "gap_analysis")
