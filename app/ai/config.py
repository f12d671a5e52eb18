from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Mapping

from app.ai.types import GenerationParameters
from app.core.config import Settings
from app.schemas.analysis import PromptVariant

DEFAULT_GENERATION_PARAMETERS: Mapping[PromptVariant, GenerationParameters] = MappingProxyType(
    {
        "project": GenerationParameters(max_output_tokens=300, temperature=0.7, top_p=0.8, top_k=40),
        "portfolio": GenerationParameters(max_output_tokens=400, temperature=0.7, top_p=0.8, top_k=40),
        "gap_analysis": GenerationParameters(max_output_tokens=2000, temperature=0.3, top_p=1.0, top_k=1),
    }
)


def resolve_generation_parameters(settings: Settings) -> Mapping[PromptVariant, GenerationParameters]:
    """Apply MAX_TOKENS / TEMPERATURE overrides once, at startup."""
    resolved: dict[PromptVariant, GenerationParameters] = {}
    for variant, params in DEFAULT_GENERATION_PARAMETERS.items():
        if settings.max_output_tokens_override is not None:
            params = replace(params, max_output_tokens=settings.max_output_tokens_override)
        if settings.temperature_override is not None:
            params = replace(params, temperature=settings.temperature_override)
        resolved[variant] = params
    return MappingProxyType(resolved)
