"""
MarketMatch Command Line Interface

Runs the matching engine over agent and task JSON exports: rank agents
for a task, recommend tasks to an agent, or inspect a single pairing.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from marketmatch.data.models import ScoredMatch
from marketmatch.data.repositories import InMemoryAgentRepository, InMemoryTaskRepository
from marketmatch.utils.exceptions import MarketMatchError

app = typer.Typer(
    name="marketmatch",
    help="Agent/task matching engine for an AI agent marketplace",
    add_completion=False,
)
console = Console()

AGENTS_OPTION = typer.Option(..., "--agents", "-a", help="JSON file with agent profiles")
TASKS_OPTION = typer.Option(..., "--tasks", "-t", help="JSON file with tasks")


@app.callback()
def main():
    """Configure logging before any command runs."""
    from marketmatch.utils.logger import setup_logging

    setup_logging()


def _load_repositories(
    agents_file: Path,
    tasks_file: Path,
) -> tuple[InMemoryAgentRepository, InMemoryTaskRepository]:
    try:
        agents = InMemoryAgentRepository.from_json_file(agents_file)
        tasks = InMemoryTaskRepository.from_json_file(tasks_file)
    except MarketMatchError as e:
        console.print(f"[red]Error loading data: {e}[/red]")
        raise typer.Exit(1)
    return agents, tasks


def _score_color(percentage: int) -> str:
    if percentage >= 75:
        return "green"
    elif percentage >= 50:
        return "blue"
    elif percentage >= 30:
        return "yellow"
    return "red"


def _print_breakdown(title: str, match: ScoredMatch) -> None:
    table = Table(title=title)
    table.add_column("Factor", style="cyan")
    table.add_column("Sub-score", justify="right")

    for factor, value in match.match_breakdown.items():
        table.add_row(factor, f"{value:.2f}")
    table.add_row("[bold]match score[/bold]", f"[bold]{match.match_score:.2f}[/bold]")

    console.print(table)


@app.command()
def version():
    """Show application version."""
    from marketmatch import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from marketmatch.utils.config import get_settings

    settings = get_settings()

    table = Table(title="MarketMatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Default Match Limit", str(settings.matching.default_match_limit))
    table.add_row("Candidate Pool Multiplier", str(settings.matching.candidate_pool_multiplier))
    table.add_row("Statistics Limit", str(settings.matching.statistics_limit))
    table.add_row("Recommendation Limit", str(settings.matching.recommendation_limit))
    table.add_row("Open Task Fetch Limit", str(settings.matching.open_task_fetch_limit))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def match_task(
    task_id: str = typer.Argument(..., help="Task ID to find agents for"),
    agents_file: Path = AGENTS_OPTION,
    tasks_file: Path = TASKS_OPTION,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Number of matches to show"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Rank available agents for a task."""
    from marketmatch.services import TaskMatchingService

    agents, tasks = _load_repositories(agents_file, tasks_file)
    service = TaskMatchingService(agents, tasks)

    try:
        result = service.get_task_matches(task_id, limit)
    except MarketMatchError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(result.model_dump_api()))
        return

    if not result.matches:
        console.print("[yellow]No agents matched this task.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {len(result.matches)} Agents for {result.task_title or result.task_id}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Agent", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Match", justify="right")
    table.add_column("Rating", justify="right")
    table.add_column("Rate", justify="right")

    for i, match in enumerate(result.matches, 1):
        agent = match.entity
        color = _score_color(match.match_percentage)
        rate = f"{agent.hourly_rate:.2f}" if agent.hourly_rate is not None else "-"
        table.add_row(
            str(i),
            agent.display_name,
            f"{match.match_score:.2f}",
            f"[{color}]{match.match_percentage}%[/{color}]",
            f"{agent.average_rating:.1f}",
            rate,
        )

    console.print(table)

    stats = result.statistics
    console.print("\n[bold]Statistics:[/bold]")
    console.print(f"  Total matches: [cyan]{stats.total_matches}[/cyan]")
    console.print(f"  Average score: [cyan]{stats.average_score:.2f}[/cyan]")
    console.print(f"  Top score: [cyan]{stats.top_score:.2f}[/cyan]")
    console.print(f"  Average hourly rate: [cyan]{stats.average_hourly_rate:.2f}[/cyan]")


@app.command()
def recommend(
    agent_id: str = typer.Argument(..., help="Agent ID to recommend tasks to"),
    agents_file: Path = AGENTS_OPTION,
    tasks_file: Path = TASKS_OPTION,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Number of tasks to show"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Recommend open tasks to an agent."""
    from marketmatch.services import AgentRecommendationService

    agents, tasks = _load_repositories(agents_file, tasks_file)
    service = AgentRecommendationService(agents, tasks)

    try:
        recommendations = service.get_recommended_tasks(agent_id, limit)
    except MarketMatchError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps([m.model_dump_api() for m in recommendations]))
        return

    if not recommendations:
        console.print("[yellow]No open tasks are a good fit for this agent.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Recommended Tasks for {agent_id}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Task", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Match", justify="right")
    table.add_column("Complexity", justify="center")
    table.add_column("Budget", justify="right")

    for i, match in enumerate(recommendations, 1):
        task = match.entity
        color = _score_color(match.match_percentage)
        low = f"{task.budget_min:.0f}" if task.budget_min is not None else "?"
        high = f"{task.budget_max:.0f}" if task.budget_max is not None else "?"
        table.add_row(
            str(i),
            task.title or task.id,
            f"{match.match_score:.2f}",
            f"[{color}]{match.match_percentage}%[/{color}]",
            task.complexity.value,
            f"{low}-{high}",
        )

    console.print(table)


@app.command()
def score(
    agent_id: str = typer.Argument(..., help="Agent ID"),
    task_id: str = typer.Argument(..., help="Task ID"),
    agents_file: Path = AGENTS_OPTION,
    tasks_file: Path = TASKS_OPTION,
):
    """Show the factor breakdown for one agent and task, in both directions."""
    from marketmatch.core.matching import MatchingEngine

    agents, tasks = _load_repositories(agents_file, tasks_file)

    agent = agents.get_by_id(agent_id)
    if agent is None:
        console.print(f"[red]Error: Agent not found: {agent_id}[/red]")
        raise typer.Exit(1)

    task = tasks.get_by_id(task_id)
    if task is None:
        console.print(f"[red]Error: Task not found: {task_id}[/red]")
        raise typer.Exit(1)

    _print_breakdown(
        f"{agent.display_name} for {task.title or task.id}",
        MatchingEngine.score_agent_for_task(agent, task),
    )
    _print_breakdown(
        f"{task.title or task.id} for {agent.display_name}",
        MatchingEngine.score_task_for_agent(task, agent),
    )


if __name__ == "__main__":
    app()
