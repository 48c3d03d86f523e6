"""Scoring weight schema."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class ScoringWeights(BaseModel):
    """Weights applied to the five sub-scores.

    Weights are used as-is in a direct weighted sum and are never
    renormalized. Supply weights summing to 1.0 to keep the composite
    score within [0, 1].
    """

    skills: float = Field(default=0.40, ge=0.0)
    experience: float = Field(default=0.25, ge=0.0)
    timezone: float = Field(default=0.15, ge=0.0)
    availability: float = Field(default=0.10, ge=0.0)
    salary: float = Field(default=0.10, ge=0.0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> "ScoringWeights":
        """Merge partial overrides onto the default weights."""
        return cls.model_validate(dict(overrides or {}))

    def merged(self, overrides: Mapping[str, Any] | None) -> "ScoringWeights":
        if not overrides:
            return self
        payload = self.model_dump()
        payload.update(overrides)
        return ScoringWeights.model_validate(payload)

    @property
    def total(self) -> float:
        return self.skills + self.experience + self.timezone + self.availability + self.salary


DEFAULT_WEIGHTS = ScoringWeights()
