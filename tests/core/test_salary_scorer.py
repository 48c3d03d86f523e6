from __future__ import annotations

import pytest

from talentfit.core.scorers import SalaryScorer
from talentfit.schemas import CandidateProfile, JobRequisition


def evaluate(
    cand_min: int | None,
    cand_max: int | None,
    job_min: int | None,
    job_max: int | None,
) -> dict:
    candidate = CandidateProfile(
        candidate_id="C-200",
        preferred_salary_min=cand_min,
        preferred_salary_max=cand_max,
    )
    job = JobRequisition(job_id="JD-200", salary_min=job_min, salary_max=job_max)
    return SalaryScorer().evaluate(candidate, job)


def test_salary_overlapping_ranges_score_full():
    result = evaluate(90_000, 120_000, 100_000, 140_000)

    assert result["score"] == 1.0
    assert result["metadata"]["status"] == "overlap"


def test_salary_above_budget_decreases_with_gap():
    near = evaluate(110_000, 130_000, 80_000, 100_000)["score"]
    mid = evaluate(150_000, 170_000, 80_000, 100_000)["score"]
    far = evaluate(190_000, 210_000, 80_000, 100_000)["score"]

    assert near == pytest.approx(0.9)
    assert mid == pytest.approx(0.5)
    assert 0.0 <= far < mid < near < 1.0


def test_salary_huge_gap_floors_at_zero():
    assert evaluate(500_000, None, 80_000, 100_000)["score"] == 0.0


def test_salary_zero_job_ceiling_is_zero_not_an_error():
    result = evaluate(50_000, 60_000, 40_000, 0)

    assert result["score"] == 0.0
    assert result["metadata"]["status"] == "above_budget"


def test_salary_missing_job_ceiling_counts_as_zero():
    assert evaluate(50_000, 60_000, 40_000, None)["score"] == 0.0


@pytest.mark.parametrize(
    "cand_min, job_min",
    [(None, 100_000), (100_000, None), (None, None), (0, 100_000)],
)
def test_salary_missing_minimum_is_neutral(cand_min, job_min):
    result = evaluate(cand_min, 150_000, job_min, 150_000)

    assert result["score"] == 0.5
    assert result["metadata"]["status"] == "insufficient_data"


def test_salary_job_pays_more_than_expected():
    result = evaluate(50_000, 60_000, 80_000, 100_000)

    assert result["score"] == pytest.approx(0.9)
    assert result["metadata"]["status"] == "below_budget"


def test_salary_out_of_order_candidate_range_is_neutral():
    result = evaluate(150_000, 90_000, 100_000, 140_000)

    assert result["score"] == 0.5
    assert result["metadata"]["status"] == "invalid_range"
