"""Best-effort extraction of gamified scores from free-text model output.

This is a heuristic, not a parser: the model is asked to report a
"Portfolio Score", a tier and a skill level, but nothing forces it to. Each
field is searched for independently and falls back to a default when absent,
so extraction never fails the request.
"""

from __future__ import annotations

import random
import re

from app.schemas.analysis import GamifiedLevel, NormalizedSignals, SkillLevel

GAMIFIED_LEVELS: tuple[GamifiedLevel, ...] = ("Bronze", "Silver", "Gold", "Platinum", "Diamond")
SKILL_LEVELS: tuple[SkillLevel, ...] = ("Novice", "Intermediate", "Advanced", "Expert")

DEFAULT_GAMIFIED_LEVEL: GamifiedLevel = "Silver"
DEFAULT_SKILL_LEVEL: SkillLevel = "Intermediate"
FALLBACK_SCORE_RANGE = (30, 70)

# Tolerates markdown emphasis between label and number: "**Portfolio Score:** 78".
_SCORE_PATTERN = re.compile(r"portfolio score[:\s*]*(\d+)", re.IGNORECASE)
_GAMIFIED_PATTERN = re.compile(r"\b(" + "|".join(GAMIFIED_LEVELS) + r")\b", re.IGNORECASE)
_SKILL_PATTERN = re.compile(r"\b(" + "|".join(SKILL_LEVELS) + r")\b", re.IGNORECASE)


def extract_portfolio_score(text: str, rng: random.Random | None = None) -> int:
    match = _SCORE_PATTERN.search(text or "")
    if match:
        return max(0, min(100, int(match.group(1))))
    randrange = rng.randrange if rng is not None else random.randrange
    return randrange(*FALLBACK_SCORE_RANGE)


def _first_label(text: str, pattern: re.Pattern[str], labels: tuple[str, ...], default: str) -> str:
    match = pattern.search(text or "")
    if not match:
        return default
    found = match.group(1).lower()
    return next(label for label in labels if label.lower() == found)


def extract_gamified_level(text: str) -> GamifiedLevel:
    return _first_label(text, _GAMIFIED_PATTERN, GAMIFIED_LEVELS, DEFAULT_GAMIFIED_LEVEL)  # type: ignore[return-value]


def extract_skill_level(text: str) -> SkillLevel:
    return _first_label(text, _SKILL_PATTERN, SKILL_LEVELS, DEFAULT_SKILL_LEVEL)  # type: ignore[return-value]


def extract_signals(text: str, rng: random.Random | None = None) -> NormalizedSignals:
    return NormalizedSignals(
        portfolio_score=extract_portfolio_score(text, rng),
        gamified_level=extract_gamified_level(text),
        skill_level=extract_skill_level(text),
    )
