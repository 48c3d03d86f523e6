"""Job requisition schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JobRequisition(BaseModel):
    """Job requisition scored against candidate profiles."""

    job_id: str
    title: str = ""
    requirements: Any = None
    skills_required: list[str] = Field(default_factory=list)
    skills_preferred: list[str] = Field(default_factory=list)
    experience_min: float | None = None
    experience_max: float | None = None
    timezone_preference: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None

    model_config = ConfigDict(extra="allow")

    def summary(self) -> dict[str, Any]:
        return {
            "id": self.job_id,
            "title": self.title,
            "requirements": self.requirements,
        }
