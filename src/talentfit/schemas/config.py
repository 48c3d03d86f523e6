"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .candidate import AvailabilityStatus
from .weights import ScoringWeights


class CoreConfig(BaseModel):
    weights: dict[str, float] | None = None
    limit: int | None = Field(default=None, ge=1)
    max_workers: int | None = Field(default=None, ge=1)
    exclude_statuses: list[str] | None = None

    model_config = ConfigDict(extra="forbid")


class ExperienceSettings(BaseModel):
    default_max_years: float | None = Field(default=None, ge=0)
    display_max_years: float | None = Field(default=None, ge=0)
    overqualified_floor: float | None = Field(default=None, ge=0, le=1)
    overqualified_span_years: float | None = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class TimezoneSettings(BaseModel):
    missing_score: float | None = Field(default=None, ge=0, le=1)
    match_score: float | None = Field(default=None, ge=0, le=1)
    mismatch_score: float | None = Field(default=None, ge=0, le=1)

    model_config = ConfigDict(extra="forbid")


class AvailabilitySettings(BaseModel):
    status_scores: dict[AvailabilityStatus, float] | None = None
    unknown_score: float | None = Field(default=None, ge=0, le=1)

    model_config = ConfigDict(extra="forbid")


class SalarySettings(BaseModel):
    missing_score: float | None = Field(default=None, ge=0, le=1)
    overlap_score: float | None = Field(default=None, ge=0, le=1)
    below_budget_score: float | None = Field(default=None, ge=0, le=1)
    zero_ceiling_score: float | None = Field(default=None, ge=0, le=1)

    model_config = ConfigDict(extra="forbid")


class ScorerConfig(BaseModel):
    experience: ExperienceSettings | None = None
    timezone: TimezoneSettings | None = None
    availability: AvailabilitySettings | None = None
    salary: SalarySettings | None = None

    model_config = ConfigDict(extra="forbid")


class LLMConfig(BaseModel):
    enabled: bool = False
    endpoint: str | None = None
    model: str | None = None
    api_key: str | None = None
    timeout: float | None = Field(default=None, gt=0)
    max_tokens: int | None = Field(default=None, ge=1)
    temperature: float | None = Field(default=None, ge=0)
    resume_excerpt_chars: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    scorers: ScorerConfig = Field(default_factory=ScorerConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        core_settings = self.core.model_dump(exclude_none=True)
        if self.core.weights:
            # reject bad weights here rather than at first ranking
            ScoringWeights.from_overrides(self.core.weights)
        if core_settings:
            settings["core"] = core_settings
        scorer_settings = self.scorers.model_dump(exclude_none=True)
        if scorer_settings:
            settings["scorers"] = scorer_settings
        if self.llm.enabled:
            settings["llm"] = self.llm.model_dump(exclude_none=True)
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValueError("Config must be a mapping")
    return AppConfig.model_validate(raw)
