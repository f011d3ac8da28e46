"""Command-line interface for Ganttify."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .config import build_calendar
from .exceptions import GanttifyError
from .loader import load_plan
from .logger import setup_logger
from .scheduler import SchedulingService, TaskDefinition
from .workdays import parse_date

app = typer.Typer(
    name="ganttify",
    help="Resolve task schedules from dates, durations and dependencies on a workday calendar",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
) -> None:
    """Global options for ganttify commands."""
    setup_logger(verbose)


def _format_range(task: TaskDefinition | None) -> str:
    if task is None:
        return "-"
    return f"{task.start_date} - {task.end_date}"


@app.command()
def schedule(
    file: Annotated[Path, typer.Argument(help="Path to the plan YAML file")] = Path("plan.yaml"),
    *,
    today: Annotated[
        str | None,
        typer.Option("--today", help="Reference date for task status (YYYY/MM/DD)"),
    ] = None,
) -> None:
    """Resolve planned and actual schedules and print them with task status."""
    parsed_today: str | None = None
    if today is not None:
        parsed_today = parse_date(today)
        if parsed_today is None:
            typer.echo(f"Error: Invalid date format '{today}'. Use YYYY/MM/DD", err=True)
            raise typer.Exit(1)

    try:
        plan = load_plan(file)
        service = SchedulingService(build_calendar(plan.calendar), parsed_today)
        result = service.schedule(plan.tasks, plan.progress)
    except GanttifyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    for task in plan.tasks:
        status = result.statuses.get(task.id)
        typer.echo(
            f"{task.id}\t{plan.names.get(task.id, '')}\t"
            f"planned: {_format_range(result.planned.get(task.id))}\t"
            f"actual: {_format_range(result.actual.get(task.id))}\t"
            f"status: {status.value if status else '-'}"
        )


@app.command()
def workdays(
    file: Annotated[Path, typer.Argument(help="Path to the plan YAML file")],
    day: Annotated[str, typer.Argument(help="Base date (YYYY/MM/DD)")],
    *,
    offset: Annotated[
        int | None,
        typer.Option("--offset", "-n", help="Print the workday this many workdays away"),
    ] = None,
) -> None:
    """Answer workday queries against the plan's calendar."""
    base = parse_date(day)
    if base is None:
        typer.echo(f"Error: Invalid date format '{day}'. Use YYYY/MM/DD", err=True)
        raise typer.Exit(1)

    try:
        plan = load_plan(file)
    except GanttifyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    calendar = build_calendar(plan.calendar)

    if offset is not None:
        target = calendar.workday_at_offset(base, offset)
        if target is None:
            typer.echo(
                f"Error: offset {offset} from {base} is outside the calendar window "
                f"({calendar.start_date} - {calendar.end_date})",
                err=True,
            )
            raise typer.Exit(1)
        typer.echo(target)
        return

    typer.echo(f"workday: {'yes' if calendar.is_workday(base) else 'no'}")
    typer.echo(f"next: {calendar.next_workday(base) or '-'}")
    typer.echo(f"previous: {calendar.previous_workday(base) or '-'}")


def main() -> int:
    """Main entry point."""
    app()
    return 0


if __name__ == "__main__":
    main()
