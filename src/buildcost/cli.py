"""Typer CLI — ``buildcost check``, ``estimate``, ``chat`` and ``validate`` commands."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from buildcost.config import load_project, load_settings
from buildcost.schemas.chat import ChatMessage
from buildcost.schemas.estimate import EstimationResult
from buildcost.schemas.feasibility import FeasibilityResult
from buildcost.schemas.project import ProjectInputs

# Load .env file from project root (if it exists)
load_dotenv()

app = typer.Typer(
    name="buildcost",
    help="Construction feasibility checks and cost estimates from a hosted LLM.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )
    # httpx logs every HTTP request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _make_client(config: Path | None, dry_run: bool):
    if dry_run:
        from buildcost.shared.llm_client import DryRunClient
        return DryRunClient()

    from buildcost.shared.llm_client import LLMClient

    try:
        settings = load_settings(config)
    except Exception as exc:
        console.print(f"[red]Config validation failed:[/] {exc}")
        raise typer.Exit(code=1)
    return LLMClient(settings)


def _load_project_or_exit(project: Path) -> ProjectInputs:
    try:
        return load_project(project)
    except Exception as exc:
        console.print(f"[red]Project validation failed:[/] {exc}")
        raise typer.Exit(code=1)


def _print_feasibility(result: FeasibilityResult) -> None:
    colour = "green" if result.is_valid else "red"
    status = "Feasible" if result.is_valid else "Not feasible"
    console.print(f"[bold {colour}]{status}[/] — budget verdict: [bold]{result.budget_verdict.value}[/]")
    if result.issues:
        console.print("\n[bold]Issues:[/]")
        for issue in result.issues:
            console.print(f"  [yellow]•[/] {issue}")
    if result.suggestions:
        console.print("\n[bold]Suggestions:[/]")
        for suggestion in result.suggestions:
            console.print(f"  [cyan]•[/] {suggestion}")


def _print_estimate(result: EstimationResult) -> None:
    cur = result.currency_symbol
    console.print(f"[bold]Total estimated cost:[/] {cur}{result.total_estimated_cost:,.0f}")
    console.print(f"[bold]Confidence:[/] {result.confidence_score:g}/100 — {result.confidence_reason}\n")

    breakdown = Table(title="Cost Breakdown")
    breakdown.add_column("Category")
    breakdown.add_column("Cost", justify="right")
    breakdown.add_column("Description")
    for item in result.breakdown:
        breakdown.add_row(item.category, f"{cur}{item.cost:,.0f}", item.description)
    console.print(breakdown)

    cashflow = Table(title="Monthly Cashflow")
    cashflow.add_column("Month", justify="right")
    cashflow.add_column("Amount", justify="right")
    cashflow.add_column("Phase")
    for entry in result.cashflow:
        cashflow.add_row(str(entry.month), f"{cur}{entry.amount:,.0f}", entry.phase)
    console.print(cashflow)

    if result.risks:
        console.print("[bold]Risks:[/]")
        for r in result.risks:
            console.print(f"  [{r.impact.value}] {r.risk} — {r.mitigation}")
    if result.efficiency_tips:
        console.print("[bold]Efficiency tips:[/]")
        for tip in result.efficiency_tips:
            console.print(f"  • {tip}")
    console.print(f"\n{result.summary}")


@app.command()
def validate(
    project: Path = typer.Option(..., "--project", "-p", help="Path to a project YAML file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Validate a project file without calling the model."""
    _setup_logging(verbose)
    inputs = _load_project_or_exit(project)

    console.print("[green]Project is valid![/]\n")
    console.print(f"  Type:      {inputs.project_type}")
    console.print(f"  Location:  {inputs.location}")
    console.print(f"  Size:      {inputs.size_sq_ft:,.0f} sq ft")
    console.print(f"  Budget:    {inputs.budget_limit:,.0f}")
    console.print(f"  Quality:   {inputs.quality}")
    console.print(f"  Timeline:  {inputs.timeline_months} months")
    console.print(f"  Manpower:  {inputs.manpower} workers")


@app.command()
def check(
    project: Path = typer.Option(..., "--project", "-p", help="Path to a project YAML file"),
    config: Path = typer.Option(None, "--config", "-c", help="Optional client settings YAML"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use canned replies (no API calls)."),
) -> None:
    """Run the feasibility pre-check for a project."""
    _setup_logging(verbose)
    inputs = _load_project_or_exit(project)

    from buildcost.agents.feasibility.agent import FeasibilityAgent

    agent = FeasibilityAgent(_make_client(config, dry_run))
    with console.status("Checking feasibility…"):
        result = asyncio.run(agent.check(inputs))
    _print_feasibility(result)


@app.command()
def estimate(
    project: Path = typer.Option(..., "--project", "-p", help="Path to a project YAML file"),
    config: Path = typer.Option(None, "--config", "-c", help="Optional client settings YAML"),
    output: Path = typer.Option(None, "--output", "-o", help="Write a Markdown report to this file."),
    with_check: bool = typer.Option(False, "--check", help="Run the feasibility check first and include it."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use canned replies (no API calls)."),
) -> None:
    """Generate a detailed cost and schedule estimate."""
    _setup_logging(verbose)
    inputs = _load_project_or_exit(project)
    client = _make_client(config, dry_run)

    try:
        with console.status("Generating estimate…"):
            feasibility, result = asyncio.run(_run_estimate(client, inputs, with_check=with_check))
    except Exception as exc:
        console.print(f"[red]Estimation failed:[/] {exc}")
        raise typer.Exit(code=1)

    if feasibility:
        _print_feasibility(feasibility)
        console.print()
    _print_estimate(result)

    if output:
        from buildcost.output.markdown import render_estimate_report

        output.write_text(render_estimate_report(inputs, result, feasibility=feasibility))
        console.print(f"\n[green]Markdown report written to:[/] {output}")


async def _run_estimate(
    client, inputs: ProjectInputs, *, with_check: bool = False,
) -> tuple[FeasibilityResult | None, EstimationResult]:
    """Optional feasibility check, then the estimate, on one event loop."""
    from buildcost.agents.estimate.agent import EstimateAgent
    from buildcost.agents.feasibility.agent import FeasibilityAgent

    feasibility = await FeasibilityAgent(client).check(inputs) if with_check else None
    result = await EstimateAgent(client).generate(inputs)
    return feasibility, result


@app.command()
def chat(
    config: Path = typer.Option(None, "--config", "-c", help="Optional client settings YAML"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use canned replies (no API calls)."),
) -> None:
    """Chat with the model. An empty line or ``exit`` ends the session."""
    _setup_logging(verbose)
    asyncio.run(_run_chat(_make_client(config, dry_run)))


async def _run_chat(client) -> None:
    from buildcost.agents.chat.agent import ChatAgent

    agent = ChatAgent(client)
    history: list[ChatMessage] = []
    while True:
        message = Prompt.ask("[bold cyan]you[/]", default="", show_default=False).strip()
        if not message or message.lower() in ("exit", "quit"):
            break
        try:
            reply = await agent.send(history, message)
        except Exception as exc:
            console.print(f"[red]Chat failed:[/] {exc}")
            continue
        console.print(f"[bold green]model[/] {reply}")
        history.append(ChatMessage(role="user", text=message))
        history.append(ChatMessage(role="model", text=reply))
