"""Shortlist request handling: load, rank, persist, respond."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import pendulum
import structlog

from . import __version__
from .core import DEFAULT_LIMIT, FitResult, Ranker
from .repositories import CandidateLoadError, CandidateRepository, JobRepository
from .schemas import CandidateProfile, JobRequisition, ScoringWeights

DEFAULT_EXCLUDED_STATUSES: tuple[str, ...] = ("not_looking",)

_SCORE_FIELDS = (
    "fit_score",
    "skill_match_score",
    "experience_score",
    "timezone_score",
    "availability_score",
    "salary_score",
)


@dataclass(slots=True)
class ShortlistEntry:
    """Ranked candidate with its fit breakdown."""

    candidate: CandidateProfile
    result: FitResult

    def to_dict(self, *, percent: bool = False) -> dict[str, Any]:
        scores = {name: getattr(self.result, name) for name in _SCORE_FIELDS}
        if percent:
            scores = {name: round(value * 100) for name, value in scores.items()}
        return {
            "id": self.candidate.candidate_id,
            "name": self.candidate.name,
            "location": self.candidate.location,
            **scores,
            "explanation": self.result.to_dict()["explanation"],
            "skill_match_source": self.result.skill_match_source,
            "pdf_url": self.candidate.pdf_url,
            "availability_status": self.candidate.availability_status,
            "skills": list(self.candidate.skills),
            "experience_years": self.candidate.experience_years,
        }


@dataclass(slots=True)
class ShortlistResult:
    """Response for one ranking request."""

    job: JobRequisition
    weights: ScoringWeights
    entries: list[ShortlistEntry]
    pool_size: int
    errors: list[str] = field(default_factory=list)
    generated_at: str = ""

    def to_dict(self, *, percent: bool = False) -> dict[str, Any]:
        return {
            "shortlist": [entry.to_dict(percent=percent) for entry in self.entries],
            "job": self.job.summary(),
            "weights": self.weights.model_dump(),
            "metadata": {
                "pool_size": self.pool_size,
                "errors": self.errors,
                "timestamp": self.generated_at,
                "app_version": __version__,
            },
        }

    def to_display(self) -> dict[str, Any]:
        """Render scores as rounded percentages for presentation."""
        return self.to_dict(percent=True)


class ShortlistService:
    """Ranks the active candidate pool for a job."""

    def __init__(
        self,
        *,
        ranker: Ranker,
        jobs: JobRepository,
        candidates: CandidateRepository,
        default_weights: ScoringWeights | None = None,
        default_limit: int = DEFAULT_LIMIT,
        exclude_statuses: Sequence[str] = DEFAULT_EXCLUDED_STATUSES,
    ) -> None:
        self._ranker = ranker
        self._jobs = jobs
        self._candidates = candidates
        self._default_weights = default_weights or ScoringWeights()
        self._default_limit = default_limit
        self._exclude_statuses = tuple(exclude_statuses)
        self._logger = structlog.get_logger(__name__)

    def shortlist(
        self,
        job_id: str,
        *,
        weights: Mapping[str, float] | ScoringWeights | None = None,
        limit: int | None = None,
    ) -> ShortlistResult:
        """Rank the candidate pool for ``job_id``.

        Raises :class:`~talentfit.repositories.JobNotFoundError` before any
        scoring when the job does not exist.
        """
        job = self._jobs.get(job_id)
        resolved_weights = (
            weights
            if isinstance(weights, ScoringWeights)
            else self._default_weights.merged(weights)
        )
        resolved_limit = limit if limit is not None else self._default_limit

        load_errors: list[str] = []
        try:
            pool = self._candidates.list_pool(self._exclude_statuses)
        except CandidateLoadError as exc:
            pool = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("candidates.partial_load", errors=exc.errors)

        # the repository guarantees unique ids within a pool
        by_id = {candidate.candidate_id: candidate for candidate in pool}

        results = self._ranker.rank(
            job=job,
            candidates=pool,
            weights=resolved_weights,
            limit=resolved_limit,
        )
        entries = [ShortlistEntry(candidate=by_id[result.candidate_id], result=result) for result in results]

        self._logger.info(
            "shortlist.generated",
            job_id=job.job_id,
            pool_size=len(pool),
            returned=len(entries),
            top_score=entries[0].result.fit_score if entries else None,
        )
        return ShortlistResult(
            job=job,
            weights=resolved_weights,
            entries=entries,
            pool_size=len(pool),
            errors=load_errors,
            generated_at=pendulum.now("UTC").to_iso8601_string(),
        )

    def score_candidate(
        self,
        job_id: str,
        candidate_id: str,
        *,
        weights: Mapping[str, float] | ScoringWeights | None = None,
    ) -> FitResult:
        """Score a single candidate/job pair without persisting a record."""
        job = self._jobs.get(job_id)
        candidate = self._candidates.get(candidate_id)
        resolved_weights = (
            weights
            if isinstance(weights, ScoringWeights)
            else self._default_weights.merged(weights)
        )
        return self._ranker.scorer.score(candidate=candidate, job=job, weights=resolved_weights)
