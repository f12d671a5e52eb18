from contextlib import asynccontextmanager
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    settings = app.state.settings
    logger.info(
        "resume_analyzer_started env=%s gemini_configured=%s model=%s max_upload_bytes=%s",
        settings.environment,
        settings.gemini_configured,
        settings.gemini_model,
        settings.max_upload_bytes,
    )
    if not settings.gemini_configured:
        logger.warning("resume_analyzer_missing_credential: set GOOGLE_API_KEY to enable analysis")
    yield
    logger.info("resume_analyzer_stopped")
