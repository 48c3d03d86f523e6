"""Years-of-experience scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateProfile, JobRequisition


@dataclass
class ExperienceConfig:
    """Configuration for experience scoring."""

    default_max_years: float = 20.0
    display_max_years: float = 10.0
    overqualified_floor: float = 0.7
    overqualified_span_years: float = 10.0


class ExperienceScorer:
    """Compare candidate years of experience with the job's range."""

    method = "experience"

    def __init__(self, *, config: ExperienceConfig | None = None) -> None:
        self._config = config or ExperienceConfig()

    def evaluate(self, candidate: CandidateProfile, job: JobRequisition) -> dict[str, Any]:
        years = self._candidate_years(candidate)
        minimum = job.experience_min or 0.0
        maximum = job.experience_max or self._config.default_max_years

        if years < minimum:
            score = max(0.0, years / minimum)
            status = "below_min"
        elif years > maximum:
            overshoot = (years - maximum) / self._config.overqualified_span_years
            score = max(self._config.overqualified_floor, 1.0 - overshoot)
            status = "above_max"
        else:
            score = 1.0
            status = "within_range"

        display_max = job.experience_max or self._config.display_max_years
        return {
            "method": self.method,
            "score": score,
            "details": (
                f"{_format_years(years)} years vs "
                f"{_format_years(minimum)}-{_format_years(display_max)} required"
            ),
            "metadata": {
                "candidate_years": years,
                "required_range": (minimum, maximum),
                "status": status,
            },
        }

    @staticmethod
    def _candidate_years(candidate: CandidateProfile) -> float:
        # unknown or negative experience counts as none
        if candidate.experience_years is None:
            return 0.0
        return max(0.0, float(candidate.experience_years))


def _format_years(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
