from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types as genai_types

from app.ai.types import GenerationParameters
from app.core.errors import AnalysisError, AuthError, EmptyResponse, QuotaExceeded, UpstreamError

logger = logging.getLogger(__name__)


def classify_upstream_error(exc: Exception) -> AnalysisError:
    """Map an exception raised by the Gemini SDK onto the analysis error taxonomy."""
    message = str(getattr(exc, "message", None) or exc)
    lowered = message.lower()
    code = getattr(exc, "code", None)
    upstream_status = str(getattr(exc, "status", "") or "").upper()

    if "api key" in lowered:
        return AuthError(details=message)
    if "quota" in lowered or code == 429 or upstream_status == "RESOURCE_EXHAUSTED":
        return QuotaExceeded(details=message)
    return UpstreamError(details=message)


class GeminiProvider:
    def __init__(self, model: str, api_key: str | None = None, client: Any | None = None):
        self._model = model
        if client is None:
            key = (api_key or "").strip()
            if not key:
                raise RuntimeError("GOOGLE_API_KEY is missing")
            client = genai.Client(api_key=key)
        self._client = client

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str, params: GenerationParameters) -> str:
        config = genai_types.GenerateContentConfig(
            max_output_tokens=params.max_output_tokens,
            temperature=params.temperature,
            top_p=params.top_p,
            top_k=params.top_k,
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=config,
            )
        except Exception as exc:  # noqa: BLE001 - every upstream failure is classified
            error = classify_upstream_error(exc)
            logger.warning("gemini_generate_failed model=%s code=%s: %s", self._model, error.code, exc)
            raise error from exc

        text = getattr(response, "text", None) or ""
        if not text.strip():
            logger.warning("gemini_generate_empty model=%s", self._model)
            raise EmptyResponse()
        return text
