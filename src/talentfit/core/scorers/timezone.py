"""Timezone compatibility scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateProfile, JobRequisition


@dataclass
class TimezoneConfig:
    """Scores for the coarse timezone comparison."""

    missing_score: float = 0.5
    match_score: float = 1.0
    mismatch_score: float = 0.3


class TimezoneScorer:
    """Match timezone identifiers by case-insensitive containment.

    ``"America/New_York"`` and ``"america"`` match; no UTC offset
    arithmetic is performed.
    """

    method = "timezone"

    def __init__(self, *, config: TimezoneConfig | None = None) -> None:
        self._config = config or TimezoneConfig()

    def evaluate(self, candidate: CandidateProfile, job: JobRequisition) -> dict[str, Any]:
        candidate_tz = (candidate.timezone or "").strip().lower()
        job_tz = (job.timezone_preference or "").strip().lower()

        if not candidate_tz or not job_tz:
            score = self._config.missing_score
            status = "insufficient_data"
        elif candidate_tz in job_tz or job_tz in candidate_tz:
            score = self._config.match_score
            status = "match"
        else:
            score = self._config.mismatch_score
            status = "mismatch"

        return {
            "method": self.method,
            "score": score,
            "details": f"Timezone compatibility: {candidate.timezone or 'Unknown'}",
            "metadata": {
                "candidate_timezone": candidate.timezone,
                "job_timezone": job.timezone_preference,
                "status": status,
            },
        }
