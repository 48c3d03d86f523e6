"""Composite fit score aggregation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from ..schemas import CandidateProfile, DEFAULT_WEIGHTS, JobRequisition, ScoringWeights
from .scorers import (
    AvailabilityScorer,
    ExperienceScorer,
    SalaryScorer,
    SkillMatchScorer,
    TimezoneScorer,
)


@dataclass(slots=True, frozen=True)
class ScoreComponent:
    """One weighted sub-score with its rationale."""

    score: float
    weight: float
    contribution: float
    details: str


@dataclass(slots=True, frozen=True)
class Explanation:
    """Per-component breakdown of a composite fit score."""

    skill_match: ScoreComponent
    experience: ScoreComponent
    timezone: ScoreComponent
    availability: ScoreComponent
    salary: ScoreComponent

    def components(self) -> dict[str, ScoreComponent]:
        return {
            "skill_match": self.skill_match,
            "experience": self.experience,
            "timezone": self.timezone,
            "availability": self.availability,
            "salary": self.salary,
        }


@dataclass(slots=True, frozen=True)
class FitResult:
    """Composite fit of one candidate for one job."""

    candidate_id: str
    job_id: str
    fit_score: float
    skill_match_score: float
    experience_score: float
    timezone_score: float
    availability_score: float
    salary_score: float
    explanation: Explanation
    skill_match_source: str = "keyword"
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload.pop("metadata")
        return payload


@dataclass(slots=True)
class EvaluationResult:
    """Normalized scorer output."""

    method: str
    score: float
    details: str
    metadata: dict[str, Any] = field(default_factory=dict)


class FitScorer:
    """Runs the five sub-scorers and combines them into a weighted sum.

    The composite is ``sum(score_i * weight_i)`` with no renormalization,
    so it only stays within [0, 1] when the weights sum to at most 1.0.
    """

    # explanation component -> ScoringWeights field
    _WEIGHT_FIELDS: dict[str, str] = {
        "skill_match": "skills",
        "experience": "experience",
        "timezone": "timezone",
        "availability": "availability",
        "salary": "salary",
    }

    def __init__(
        self,
        *,
        skill_scorer: SkillMatchScorer | None = None,
        experience_scorer: ExperienceScorer | None = None,
        timezone_scorer: TimezoneScorer | None = None,
        availability_scorer: AvailabilityScorer | None = None,
        salary_scorer: SalaryScorer | None = None,
        weights: ScoringWeights | dict[str, float] | None = None,
    ) -> None:
        self._scorers = {
            "skill_match": skill_scorer or SkillMatchScorer(),
            "experience": experience_scorer or ExperienceScorer(),
            "timezone": timezone_scorer or TimezoneScorer(),
            "availability": availability_scorer or AvailabilityScorer(),
            "salary": salary_scorer or SalaryScorer(),
        }
        if isinstance(weights, ScoringWeights):
            self._weights = weights
        else:
            self._weights = DEFAULT_WEIGHTS.merged(weights)

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def score(
        self,
        *,
        candidate: CandidateProfile,
        job: JobRequisition,
        weights: ScoringWeights | None = None,
    ) -> FitResult:
        weights = weights or self._weights

        evaluations: dict[str, EvaluationResult] = {}
        for component, scorer in self._scorers.items():
            raw_result = scorer.evaluate(candidate, job)
            evaluations[component] = self._normalize_evaluation_result(raw_result)

        components: dict[str, ScoreComponent] = {}
        for component, weight_name in self._WEIGHT_FIELDS.items():
            evaluation = evaluations[component]
            weight = float(getattr(weights, weight_name))
            components[component] = ScoreComponent(
                score=evaluation.score,
                weight=weight,
                contribution=evaluation.score * weight,
                details=evaluation.details,
            )

        fit_score = self._compute_weighted_score(components)
        explanation = Explanation(**components)
        skill_metadata = evaluations["skill_match"].metadata

        return FitResult(
            candidate_id=candidate.candidate_id,
            job_id=job.job_id,
            fit_score=fit_score,
            skill_match_score=explanation.skill_match.score,
            experience_score=explanation.experience.score,
            timezone_score=explanation.timezone.score,
            availability_score=explanation.availability.score,
            salary_score=explanation.salary.score,
            explanation=explanation,
            skill_match_source=str(skill_metadata.get("source", "keyword")),
            metadata={name: result.metadata for name, result in evaluations.items()},
        )

    @staticmethod
    def _normalize_evaluation_result(payload: dict[str, Any]) -> EvaluationResult:
        method = payload.get("method")
        if method is None:
            raise ValueError("Scorer result must include 'method'.")
        score = float(payload.get("score", 0.0))
        return EvaluationResult(
            method=str(method),
            score=min(1.0, max(0.0, score)),
            details=str(payload.get("details") or ""),
            metadata=dict(payload.get("metadata") or {}),
        )

    @staticmethod
    def _compute_weighted_score(components: dict[str, ScoreComponent]) -> float:
        return sum(component.contribution for component in components.values())
