from app.ai.providers.gemini_provider import GeminiProvider
from app.ai.types import GenerativeClient
from app.core.config import Settings


def get_ai_client(settings: Settings) -> GenerativeClient:
    return GeminiProvider(model=settings.gemini_model, api_key=settings.google_api_key)
