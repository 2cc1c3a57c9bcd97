"""Markdown report builder — renders an estimate to a structured Markdown document."""

from __future__ import annotations

from buildcost.schemas.estimate import EstimationResult
from buildcost.schemas.feasibility import FeasibilityResult
from buildcost.schemas.project import ProjectInputs


def _money(symbol: str, amount: float) -> str:
    return f"{symbol}{amount:,.0f}"


def render_estimate_report(
    inputs: ProjectInputs,
    estimate: EstimationResult,
    *,
    feasibility: FeasibilityResult | None = None,
) -> str:
    """Render an estimate (and optional feasibility verdict) into a Markdown string."""
    cur = estimate.currency_symbol
    sections: list[str] = []

    sections.append(f"# Construction Estimate: {inputs.project_type} in {inputs.location}\n")

    # Inputs
    sections.append("## Project Inputs\n")
    sections.append(f"- **Type:** {inputs.project_type}")
    sections.append(f"- **Quality:** {inputs.quality}")
    sections.append(f"- **Size:** {inputs.size_sq_ft:,.0f} sq ft")
    sections.append(f"- **Budget:** {_money(cur, inputs.budget_limit)}")
    sections.append(f"- **Timeline:** {inputs.timeline_months} months")
    sections.append(f"- **Manpower:** {inputs.manpower} workers")
    sections.append("")

    if feasibility:
        sections.append("## Feasibility\n")
        status = "Feasible" if feasibility.is_valid else "Not feasible"
        sections.append(f"**{status}** — budget verdict: {feasibility.budget_verdict.value}\n")
        for issue in feasibility.issues:
            sections.append(f"- ⚠ {issue}")
        for suggestion in feasibility.suggestions:
            sections.append(f"- → {suggestion}")
        sections.append("")

    sections.append("## Summary\n")
    sections.append(f"**Total estimated cost:** {_money(cur, estimate.total_estimated_cost)}\n")
    sections.append(estimate.summary + "\n")

    # Breakdown
    if estimate.breakdown:
        sections.append("## Cost Breakdown\n")
        sections.append("| Category | Cost | Description |")
        sections.append("|----------|-----:|-------------|")
        for item in estimate.breakdown:
            sections.append(f"| {item.category} | {_money(cur, item.cost)} | {item.description} |")
        sections.append("")

    # Cashflow
    if estimate.cashflow:
        sections.append("## Monthly Cashflow\n")
        sections.append("| Month | Amount | Phase |")
        sections.append("|------:|-------:|-------|")
        for entry in estimate.cashflow:
            sections.append(f"| {entry.month} | {_money(cur, entry.amount)} | {entry.phase} |")
        sections.append("")

    if estimate.risks:
        sections.append("## Risks\n")
        for r in estimate.risks:
            sections.append(f"- **[{r.impact.value}]** {r.risk} — *Mitigation:* {r.mitigation}")
        sections.append("")

    sections.append("## Confidence\n")
    sections.append(f"**Score:** {estimate.confidence_score:g}/100\n")
    sections.append(estimate.confidence_reason + "\n")

    if estimate.efficiency_tips:
        sections.append("## Efficiency Tips\n")
        for tip in estimate.efficiency_tips:
            sections.append(f"- {tip}")
        sections.append("")

    return "\n".join(sections)
