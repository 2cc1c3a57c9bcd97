"""Tests for the Typer CLI, run against the dry-run client."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from buildcost.cli import app

runner = CliRunner()


class TestValidate:
    def test_valid_project(self, tmp_project: Path) -> None:
        result = runner.invoke(app, ["validate", "--project", str(tmp_project)])
        assert result.exit_code == 0
        assert "Project is valid" in result.output
        assert "Lagos, Nigeria" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", "--project", str(tmp_path / "nope.yml")])
        assert result.exit_code == 1
        assert "Project validation failed" in result.output


class TestCheck:
    def test_dry_run(self, tmp_project: Path) -> None:
        result = runner.invoke(app, ["check", "--project", str(tmp_project), "--dry-run"])
        assert result.exit_code == 0
        assert "Feasible" in result.output
        assert "Realistic" in result.output


class TestEstimate:
    def test_dry_run_writes_report(self, tmp_project: Path, tmp_path: Path) -> None:
        out = tmp_path / "report.md"
        result = runner.invoke(
            app,
            ["estimate", "--project", str(tmp_project), "--dry-run", "--check", "--output", str(out)],
        )
        assert result.exit_code == 0, result.output
        assert "Total estimated cost" in result.output
        report = out.read_text()
        assert "## Monthly Cashflow" in report
        assert "## Feasibility" in report
        # tmp_project asks for 6 months
        assert "| 6 |" in report
        assert "| 7 |" not in report


class TestChat:
    def test_dry_run_session(self) -> None:
        result = runner.invoke(app, ["chat", "--dry-run"], input="hello there\n\n")
        assert result.exit_code == 0
        assert "You said: hello there" in result.output
