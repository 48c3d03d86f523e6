"""Pydantic schema definitions for candidates, jobs and scoring settings."""

from __future__ import annotations

from .candidate import AvailabilityStatus, CandidateProfile
from .job import JobRequisition
from .weights import DEFAULT_WEIGHTS, ScoringWeights

__all__ = [
    "AvailabilityStatus",
    "CandidateProfile",
    "DEFAULT_WEIGHTS",
    "JobRequisition",
    "ScoringWeights",
]
