"""Tests for Markdown report generation."""

from __future__ import annotations

from buildcost.output.markdown import render_estimate_report
from buildcost.schemas.estimate import CashflowEntry, CostItem, EstimationResult, RiskItem
from buildcost.schemas.feasibility import FeasibilityResult
from buildcost.schemas.project import ProjectInputs


def _make_estimate() -> EstimationResult:
    return EstimationResult(
        currency_symbol="₦",
        total_estimated_cost=1_250_000,
        breakdown=[CostItem(category="Labor & Wages", cost=300_000, description="20 workers")],
        cashflow=[
            CashflowEntry(month=1, amount=400_000, phase="Site Preparation"),
            CashflowEntry(month=2, amount=850_000, phase="Structure"),
        ],
        risks=[RiskItem(risk="Cement shortage", impact="High", mitigation="Stockpile early")],
        confidence_score=72.5,
        confidence_reason="Limited local price data.",
        efficiency_tips=["Use precast lintels."],
        summary="Tight but achievable.",
    )


class TestRenderEstimateReport:
    def test_sections(self, project_inputs: ProjectInputs) -> None:
        md = render_estimate_report(project_inputs, _make_estimate())
        assert md.startswith("# Construction Estimate: Residential in Austin, TX")
        assert "**Total estimated cost:** ₦1,250,000" in md
        assert "| Labor & Wages | ₦300,000 | 20 workers |" in md
        assert "| 2 | ₦850,000 | Structure |" in md
        assert "**[High]** Cement shortage" in md
        assert "**Score:** 72.5/100" in md
        assert "- Use precast lintels." in md
        assert "## Feasibility" not in md

    def test_with_feasibility(self, project_inputs: ProjectInputs) -> None:
        md = render_estimate_report(
            project_inputs, _make_estimate(), feasibility=FeasibilityResult.fallback(),
        )
        assert "## Feasibility" in md
        assert "**Not feasible**" in md
        assert "Service unavailable or parse error" in md
