"""Salary expectation scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateProfile, JobRequisition


@dataclass
class SalaryConfig:
    """Scores for the salary comparison outcomes."""

    missing_score: float = 0.5
    overlap_score: float = 1.0
    below_budget_score: float = 0.9
    zero_ceiling_score: float = 0.0


class SalaryScorer:
    """Compare the candidate's preferred salary range with the job's budget.

    Only missing minimums trigger the neutral score. A missing maximum on
    either side is read as 0 in the range checks, so a job without a
    ceiling is treated as offering nothing above its minimum.
    """

    method = "salary"

    def __init__(self, *, config: SalaryConfig | None = None) -> None:
        self._config = config or SalaryConfig()

    def evaluate(self, candidate: CandidateProfile, job: JobRequisition) -> dict[str, Any]:
        cand_min = candidate.preferred_salary_min
        cand_max = candidate.preferred_salary_max
        job_min = job.salary_min
        job_max = job.salary_max

        gap: int | None = None
        if not cand_min or not job_min or cand_min < 0 or job_min < 0:
            score, status = self._config.missing_score, "insufficient_data"
        elif _out_of_order(cand_min, cand_max) or _out_of_order(job_min, job_max):
            score, status = self._config.missing_score, "invalid_range"
        else:
            job_ceiling = job_max or 0
            cand_ceiling = cand_max or 0
            if cand_min <= job_ceiling and cand_ceiling >= job_min:
                score, status = self._config.overlap_score, "overlap"
            elif cand_min > job_ceiling:
                gap = cand_min - job_ceiling
                status = "above_budget"
                if job_ceiling <= 0:
                    score = self._config.zero_ceiling_score
                else:
                    score = max(0.0, 1.0 - gap / job_ceiling)
            else:
                score, status = self._config.below_budget_score, "below_budget"

        return {
            "method": self.method,
            "score": score,
            "details": _describe(status, gap),
            "metadata": {
                "candidate_range": (cand_min, cand_max),
                "job_range": (job_min, job_max),
                "status": status,
                "gap_amount": gap,
            },
        }


def _out_of_order(minimum: int | None, maximum: int | None) -> bool:
    # a zero or missing maximum is read as "no ceiling given"
    return bool(minimum) and bool(maximum) and minimum > maximum


def _describe(status: str, gap: int | None) -> str:
    if status == "insufficient_data":
        return "Salary expectation alignment: not enough data"
    if status == "invalid_range":
        return "Salary expectation alignment: inconsistent range"
    if status == "above_budget":
        return f"Salary expectation alignment: {gap:,} above budget"
    if status == "below_budget":
        return "Salary expectation alignment: within budget"
    return "Salary expectation alignment: ranges overlap"
