"""Candidate profile schema."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

AvailabilityStatus = Literal["actively_looking", "open", "not_looking", "unknown"]


class CandidateProfile(BaseModel):
    """Candidate document as read from the resume store.

    ``availability_status`` is kept as a plain string: values outside
    :data:`AvailabilityStatus` are tolerated and scored as unknown.
    """

    candidate_id: str
    name: str | None = None
    location: str | None = None
    skills: list[str] = Field(default_factory=list)
    experience_years: float | None = None
    timezone: str | None = None
    availability_status: str = "unknown"
    preferred_salary_min: int | None = None
    preferred_salary_max: int | None = None
    resume_text: str = ""
    pdf_url: str | None = None

    model_config = ConfigDict(extra="allow")
