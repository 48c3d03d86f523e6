from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from talentfit.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_cli_shortlist_writes_output_and_records(data_files, runner: CliRunner) -> None:
    output_path = data_files["root"] / "out" / "shortlist.json"
    records_path = data_files["root"] / "records.jsonl"

    result = runner.invoke(
        app,
        [
            "shortlist",
            "--job-id",
            "JD-001",
            "--jobs",
            str(data_files["jobs"]),
            "--candidates",
            str(data_files["candidates"]),
            "--records",
            str(records_path),
            "--limit",
            "2",
            "--weight",
            "skills=0.5",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert [entry["id"] for entry in rendered["shortlist"]] == ["C-001", "C-002"]
    assert rendered["weights"]["skills"] == 0.5
    assert rendered["weights"]["experience"] == 0.25
    assert rendered["shortlist"][0]["fit_score"] == pytest.approx(1.1)
    assert len(records_path.read_text(encoding="utf-8").strip().splitlines()) == 2


def test_cli_shortlist_percent_output(data_files, runner: CliRunner) -> None:
    output_path = data_files["root"] / "shortlist.json"

    result = runner.invoke(
        app,
        [
            "shortlist",
            "--job-id",
            "JD-001",
            "--jobs",
            str(data_files["jobs"]),
            "--candidates",
            str(data_files["candidates"]),
            "--percent",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["shortlist"][0]["fit_score"] == 100


def test_cli_shortlist_unknown_job_exits_with_error(data_files, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        [
            "shortlist",
            "--job-id",
            "JD-404",
            "--jobs",
            str(data_files["jobs"]),
            "--candidates",
            str(data_files["candidates"]),
        ],
    )

    assert result.exit_code == 1
    assert "Job not found" in result.output


def test_cli_rejects_negative_weight(data_files, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        [
            "shortlist",
            "--job-id",
            "JD-001",
            "--jobs",
            str(data_files["jobs"]),
            "--candidates",
            str(data_files["candidates"]),
            "--weight",
            "skills=-1",
        ],
    )

    assert result.exit_code != 0


def test_cli_score_uses_config_file(data_files, runner: CliRunner) -> None:
    config_path = data_files["root"] / "config.yaml"
    config_path.write_text(
        "core:\n  weights:\n    availability: 0.5\nscorers:\n  availability:\n    unknown_score: 0.2\n",
        encoding="utf-8",
    )
    output_path = data_files["root"] / "score.json"

    result = runner.invoke(
        app,
        [
            "score",
            "--job-id",
            "JD-001",
            "--candidate-id",
            "C-004",
            "--jobs",
            str(data_files["jobs"]),
            "--candidates",
            str(data_files["candidates"]),
            "--config",
            str(config_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["candidate_id"] == "C-004"
    assert rendered["availability_score"] == pytest.approx(0.2)
    assert rendered["explanation"]["availability"]["weight"] == 0.5
    assert rendered["explanation"]["availability"]["contribution"] == pytest.approx(0.1)


def test_cli_score_unknown_candidate(data_files, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        [
            "score",
            "--job-id",
            "JD-001",
            "--candidate-id",
            "C-404",
            "--jobs",
            str(data_files["jobs"]),
            "--candidates",
            str(data_files["candidates"]),
        ],
    )

    assert result.exit_code == 1
    assert "Candidate not found" in result.output


def test_cli_rejects_unknown_scorer_setting(data_files, runner: CliRunner) -> None:
    config_path = data_files["root"] / "config.yaml"
    config_path.write_text("scorers:\n  experience:\n    bogus: 1\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "shortlist",
            "--job-id",
            "JD-001",
            "--jobs",
            str(data_files["jobs"]),
            "--candidates",
            str(data_files["candidates"]),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 2
