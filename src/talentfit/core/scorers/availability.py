"""Availability status scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...schemas import AvailabilityStatus, CandidateProfile, JobRequisition


def _default_status_scores() -> dict[AvailabilityStatus, float]:
    return {
        "actively_looking": 1.0,
        "open": 0.7,
        "not_looking": 0.1,
    }


@dataclass
class AvailabilityConfig:
    """Lookup table from availability status to score."""

    status_scores: dict[AvailabilityStatus, float] = field(default_factory=_default_status_scores)
    unknown_score: float = 0.5


class AvailabilityScorer:
    """Score how available a candidate is for a new role."""

    method = "availability"

    def __init__(self, *, config: AvailabilityConfig | None = None) -> None:
        self._config = config or AvailabilityConfig()

    def evaluate(self, candidate: CandidateProfile, job: JobRequisition) -> dict[str, Any]:
        status = candidate.availability_status or "unknown"
        score = self._config.status_scores.get(status, self._config.unknown_score)
        return {
            "method": self.method,
            "score": score,
            "details": f"Status: {status}",
            "metadata": {"status": status},
        }
