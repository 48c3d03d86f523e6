from __future__ import annotations

import json
from pathlib import Path

import pytest

JOBS = [
    {
        "job_id": "JD-001",
        "title": "Backend Engineer",
        "requirements": {"must": ["Python", "PostgreSQL"], "nice": ["Kubernetes"]},
        "skills_required": ["Python", "PostgreSQL"],
        "skills_preferred": ["Kubernetes"],
        "experience_min": 3,
        "experience_max": 8,
        "timezone_preference": "America",
        "salary_min": 120000,
        "salary_max": 160000,
    },
    {"job_id": "JD-002", "title": "Designer"},
]

CANDIDATES = [
    {
        "candidate_id": "C-001",
        "name": "Ada",
        "location": "New York",
        "skills": ["Python", "PostgreSQL", "Kubernetes"],
        "experience_years": 6,
        "timezone": "America/New_York",
        "availability_status": "actively_looking",
        "preferred_salary_min": 130000,
        "preferred_salary_max": 150000,
        "resume_text": "Backend engineer building Python services.",
    },
    {
        "candidate_id": "C-002",
        "name": "Grace",
        "skills": ["Python"],
        "experience_years": 2,
        "timezone": "Europe/Berlin",
        "availability_status": "open",
        "preferred_salary_min": 200000,
    },
    {
        "candidate_id": "C-003",
        "name": "Linus",
        "skills": ["C", "PostgreSQL"],
        "experience_years": 15,
        "availability_status": "not_looking",
    },
    {
        "candidate_id": "C-004",
        "name": "Barbara",
        "skills": ["Java"],
        "availability_status": "unknown",
    },
]


@pytest.fixture
def data_files(tmp_path: Path) -> dict[str, Path]:
    jobs_path = tmp_path / "jobs.json"
    candidates_path = tmp_path / "candidates.jsonl"
    jobs_path.write_text(json.dumps(JOBS, ensure_ascii=False), encoding="utf-8")
    candidates_path.write_text(
        "\n".join(json.dumps(item, ensure_ascii=False) for item in CANDIDATES),
        encoding="utf-8",
    )
    return {"jobs": jobs_path, "candidates": candidates_path, "root": tmp_path}
