"""Core fit scoring engine components."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..schemas import CandidateProfile, JobRequisition
from .ranking import DEFAULT_LIMIT, Ranker
from .scoring import EvaluationResult, Explanation, FitResult, FitScorer, ScoreComponent
from .scorers import (
    AvailabilityScorer,
    ExperienceScorer,
    KeywordSkillMatcher,
    SalaryScorer,
    SkillMatcher,
    SkillMatchError,
    SkillMatchScorer,
    TimezoneScorer,
)


@runtime_checkable
class Scorer(Protocol):
    """Sub-scorer contract for one component of the fit score."""

    method: str

    def evaluate(self, candidate: CandidateProfile, job: JobRequisition) -> dict[str, Any]:
        """Return ``method``, ``score``, ``details`` and ``metadata`` for the pair."""


__all__ = [
    "AvailabilityScorer",
    "DEFAULT_LIMIT",
    "EvaluationResult",
    "ExperienceScorer",
    "Explanation",
    "FitResult",
    "FitScorer",
    "KeywordSkillMatcher",
    "Ranker",
    "SalaryScorer",
    "ScoreComponent",
    "Scorer",
    "SkillMatchError",
    "SkillMatchScorer",
    "SkillMatcher",
    "TimezoneScorer",
]
