"""Skill match scoring with an AI-backed primary path and keyword fallback."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable

import structlog

from ...schemas import CandidateProfile, JobRequisition


class SkillMatchError(RuntimeError):
    """Raised when a skill matcher cannot produce a usable score."""


@runtime_checkable
class SkillMatcher(Protocol):
    """Capability rating how well candidate skills cover job skills."""

    name: str

    def score(
        self,
        candidate_skills: Sequence[str],
        resume_excerpt: str,
        required_skills: Sequence[str],
        preferred_skills: Sequence[str],
    ) -> float:
        """Return a match score in [0, 1] where 1.0 is a perfect match."""


@dataclass
class KeywordMatchConfig:
    """Weights for the deterministic keyword overlap."""

    required_weight: float = 1.0
    preferred_weight: float = 0.5
    empty_job_score: float = 0.5


class KeywordSkillMatcher:
    """Deterministic case-insensitive substring overlap between skill lists."""

    name = "keyword"

    def __init__(self, *, config: KeywordMatchConfig | None = None) -> None:
        self._config = config or KeywordMatchConfig()

    def score(
        self,
        candidate_skills: Sequence[str],
        resume_excerpt: str,
        required_skills: Sequence[str],
        preferred_skills: Sequence[str],
    ) -> float:
        return self.breakdown(candidate_skills, required_skills, preferred_skills)["score"]

    def breakdown(
        self,
        candidate_skills: Sequence[str],
        required_skills: Sequence[str],
        preferred_skills: Sequence[str],
    ) -> dict[str, Any]:
        candidate = _normalize(candidate_skills)
        required = _normalize(required_skills)
        preferred = _normalize(preferred_skills)

        matched_required = [skill for skill in required if _has_overlap(skill, candidate)]
        matched_preferred = [skill for skill in preferred if _has_overlap(skill, candidate)]

        total = (
            len(required) * self._config.required_weight
            + len(preferred) * self._config.preferred_weight
        )
        matched = (
            len(matched_required) * self._config.required_weight
            + len(matched_preferred) * self._config.preferred_weight
        )
        score = min(1.0, matched / total) if total > 0 else self._config.empty_job_score

        return {
            "score": score,
            "matched_required": matched_required,
            "matched_preferred": matched_preferred,
            "required_count": len(required),
            "preferred_count": len(preferred),
        }


class SkillMatchScorer:
    """Score skill coverage, falling back to keyword overlap on matcher failure.

    The primary matcher's output is treated as untrusted. Any exception or
    non-finite value it produces is logged and replaced by the keyword
    score for that candidate only, so skill scoring never fails a ranking.
    """

    method = "skill_match"

    def __init__(
        self,
        *,
        matcher: SkillMatcher | None = None,
        fallback: KeywordSkillMatcher | None = None,
        resume_excerpt_chars: int = 2000,
    ) -> None:
        self._fallback = fallback or KeywordSkillMatcher()
        self._matcher = matcher or self._fallback
        self._resume_excerpt_chars = resume_excerpt_chars
        self._logger = structlog.get_logger(__name__)

    @property
    def matcher(self) -> SkillMatcher:
        return self._matcher

    def evaluate(self, candidate: CandidateProfile, job: JobRequisition) -> dict[str, Any]:
        keyword = self._fallback.breakdown(
            candidate.skills, job.skills_required, job.skills_preferred
        )
        metadata: dict[str, Any] = {
            "matched_required": keyword["matched_required"],
            "matched_preferred": keyword["matched_preferred"],
            "keyword_score": keyword["score"],
        }

        if isinstance(self._matcher, KeywordSkillMatcher):
            return self._keyword_response(keyword, metadata)

        try:
            raw_score = self._matcher.score(
                candidate.skills,
                (candidate.resume_text or "")[: self._resume_excerpt_chars],
                job.skills_required,
                job.skills_preferred,
            )
            score = float(raw_score)
        except Exception as exc:  # noqa: BLE001
            self._logger.warning(
                "skill_match.fallback",
                candidate_id=candidate.candidate_id,
                job_id=job.job_id,
                matcher=getattr(self._matcher, "name", type(self._matcher).__name__),
                error=str(exc),
            )
            metadata["fallback_reason"] = str(exc)
            return self._keyword_response(keyword, metadata)

        if not math.isfinite(score):
            self._logger.warning(
                "skill_match.fallback",
                candidate_id=candidate.candidate_id,
                job_id=job.job_id,
                error="non-finite score",
            )
            metadata["fallback_reason"] = "non-finite score"
            return self._keyword_response(keyword, metadata)

        metadata["source"] = getattr(self._matcher, "name", "external")
        return {
            "method": self.method,
            "score": min(1.0, max(0.0, score)),
            "details": "Skills analysis based on job requirements",
            "metadata": metadata,
        }

    def _keyword_response(
        self,
        keyword: dict[str, Any],
        metadata: dict[str, Any],
    ) -> dict[str, Any]:
        metadata["source"] = self._fallback.name
        return {
            "method": self.method,
            "score": keyword["score"],
            "details": (
                "Keyword skill overlap: "
                f"{len(keyword['matched_required'])}/{keyword['required_count']} required, "
                f"{len(keyword['matched_preferred'])}/{keyword['preferred_count']} preferred"
            ),
            "metadata": metadata,
        }


def _normalize(skills: Sequence[str]) -> list[str]:
    return [skill.strip().lower() for skill in skills or [] if skill and skill.strip()]


def _has_overlap(skill: str, candidate_skills: Sequence[str]) -> bool:
    return any(skill in other or other in skill for other in candidate_skills)
