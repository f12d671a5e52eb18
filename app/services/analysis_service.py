from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Mapping

from app.ai.types import GenerationParameters, GenerativeClient
from app.core.config import Settings
from app.core.errors import AnalysisError, MissingCredential, UpstreamError
from app.parsing.parse import extract_text
from app.schemas.analysis import AnalysisResponse, NormalizedSignals, PromptVariant, UploadedDocument
from app.services.prompts import compose_prompt
from app.services.signals import extract_signals

logger = logging.getLogger("app.analysis")

SCORED_VARIANTS: frozenset[PromptVariant] = frozenset({"portfolio"})

UPSTREAM_FAILURE_MESSAGES: Mapping[PromptVariant, str] = {
    "project": "Failed to analyze projects. Please try again later.",
}


def assemble_response(
    document: UploadedDocument,
    analysis: str,
    *,
    signals: NormalizedSignals | None = None,
    portfolio_links: str | None = None,
) -> AnalysisResponse:
    return AnalysisResponse(
        success=True,
        analysis=analysis,
        filename=document.filename,
        file_size=document.size_bytes,
        portfolio_score=signals.portfolio_score if signals else None,
        gamified_level=signals.gamified_level if signals else None,
        skill_level=signals.skill_level if signals else None,
        portfolio_links=portfolio_links,
    )


@dataclass(frozen=True)
class AnalysisPipeline:
    """Extract -> compose -> generate -> normalize -> assemble, once per upload.

    Built once at startup and shared read-only between requests.
    """

    settings: Settings
    ai_client: GenerativeClient | None
    generation: Mapping[PromptVariant, GenerationParameters]
    rng: random.Random | None = None

    async def analyze(
        self,
        document: UploadedDocument,
        *,
        variant: PromptVariant,
        portfolio_links: str | None = None,
    ) -> AnalysisResponse:
        started = time.perf_counter()
        logger.info(
            "resume_analysis_started variant=%s filename=%s size=%s links_len=%s",
            variant,
            document.filename,
            document.size_bytes,
            len(portfolio_links or ""),
        )

        if self.ai_client is None or not self.settings.gemini_configured:
            logger.error("resume_analysis_rejected reason=missing_credential")
            raise MissingCredential()

        try:
            resume_text = await extract_text(document.content)
            logger.info("resume_analysis_pdf_parsed text_len=%s", len(resume_text))

            prompt = compose_prompt(resume_text, portfolio_links, variant)
            params = self.generation[variant]
            logger.info(
                "resume_analysis_generating model=%s prompt_len=%s max_output_tokens=%s temperature=%s top_p=%s top_k=%s",
                self.ai_client.model,
                len(prompt),
                params.max_output_tokens,
                params.temperature,
                params.top_p,
                params.top_k,
            )
            try:
                analysis = await self.ai_client.generate(prompt, params)
            except UpstreamError as exc:
                message = UPSTREAM_FAILURE_MESSAGES.get(variant)
                if message is None:
                    raise
                raise UpstreamError(message, details=exc.details) from exc
        except AnalysisError as exc:
            logger.info(
                "resume_analysis_failed variant=%s code=%s latency_ms=%s",
                variant,
                exc.code,
                int((time.perf_counter() - started) * 1000),
            )
            raise

        signals = extract_signals(analysis, self.rng) if variant in SCORED_VARIANTS else None
        echoed_links = (portfolio_links or "") if variant in SCORED_VARIANTS else None

        logger.info(
            "resume_analysis_completed variant=%s analysis_len=%s latency_ms=%s",
            variant,
            len(analysis),
            int((time.perf_counter() - started) * 1000),
        )
        return assemble_response(document, analysis, signals=signals, portfolio_links=echoed_links)
