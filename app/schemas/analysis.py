from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PromptVariant = Literal["project", "portfolio", "gap_analysis"]
GamifiedLevel = Literal["Bronze", "Silver", "Gold", "Platinum", "Diamond"]
SkillLevel = Literal["Novice", "Intermediate", "Advanced", "Expert"]


@dataclass(frozen=True)
class UploadedDocument:
    content: bytes
    content_type: str
    filename: str
    size_bytes: int


@dataclass(frozen=True)
class NormalizedSignals:
    portfolio_score: int
    gamified_level: GamifiedLevel
    skill_level: SkillLevel


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    success: bool = True
    analysis: str
    filename: str
    file_size: int = Field(alias="fileSize", ge=0)
    portfolio_score: int | None = Field(default=None, alias="portfolioScore", ge=0, le=100)
    gamified_level: GamifiedLevel | None = Field(default=None, alias="gamifiedLevel")
    skill_level: SkillLevel | None = Field(default=None, alias="skillLevel")
    portfolio_links: str | None = Field(default=None, alias="portfolioLinks")


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["healthy"] = "healthy"
    timestamp: datetime
    gemini_api_configured: bool = Field(alias="geminiApiConfigured")
    model: str
