#!/usr/bin/env python3
"""
Tempo Worklogs CLI

Runs the worklog pipeline from the command line using Typer + Rich
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .api.models.schemas import WorklogQuery, WorklogsResponse
from .config import Config
from .errors import describe_upstream_error
from .models import WorklogRecord
from .service import WorklogService
from .validation import QueryValidationError, validate_date_range
from .worklogs import summarize

app = typer.Typer(
    name="tempo-worklogs",
    help="Export Tempo worklogs enriched with Jira issue keys",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main():
    """Export Tempo worklogs enriched with Jira issue keys"""


def build_payload(records: list[WorklogRecord], start_date: str, end_date: str, flat: bool):
    """JSON-ready payload, same shape as the HTTP endpoint"""
    if flat:
        return [record.model_dump(mode="json", by_alias=True) for record in records]
    response = WorklogsResponse(
        query=WorklogQuery(start_date=start_date, end_date=end_date),
        summary=summarize(records),
        worklogs=records,
    )
    return response.model_dump(mode="json", by_alias=True)


def render_table(records: list[WorklogRecord]) -> Table:
    """Rich table of worklogs with a totals footer"""
    summary = summarize(records)
    table = Table(title="Tempo Worklogs", show_footer=True)
    table.add_column("Date", footer="Total")
    table.add_column("Issue", style="cyan", footer=str(summary.total_worklogs))
    table.add_column("Author")
    table.add_column("Hours", justify="right", footer=f"{summary.total_hours:.2f}")
    table.add_column("Description", overflow="fold")

    for record in records:
        table.add_row(
            record.date or "",
            record.issue_key,
            record.author.display_name,
            record.time_spent_hours,
            record.description,
        )
    return table


@app.command()
def fetch(
    start_date: str = typer.Argument(..., help="Start date (YYYY-MM-DD)"),
    end_date: str = typer.Argument(..., help="End date (YYYY-MM-DD)"),
    flat: bool = typer.Option(False, "--flat", "-f", help="Output the worklog array only"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to a file"),
    table: bool = typer.Option(False, "--table", "-t", help="Show a table instead of JSON"),
):
    """Fetch worklogs for a date range"""
    try:
        start_date, end_date = validate_date_range(start_date, end_date)
    except QueryValidationError as e:
        err_console.print(f"[red]✗ {e.error}: {e.message}[/red]")
        raise typer.Exit(1)

    config = Config.from_env()
    if not config.is_configured():
        err_console.print("[red]✗ TEMPO_API_TOKEN is not configured[/red]")
        raise typer.Exit(1)

    if not config.is_jira_configured():
        err_console.print("[yellow]⚠ Jira is not configured, issue keys will not be resolved[/yellow]")

    try:
        with err_console.status("Fetching worklogs..."):
            records = WorklogService.from_config(config).get_worklogs(start_date, end_date)
    except Exception as e:
        status_code, message, _ = describe_upstream_error(e)
        err_console.print(f"[red]✗ Failed to retrieve worklogs ({status_code}): {message}[/red]")
        raise typer.Exit(1)

    if table:
        console.print(render_table(records))
        return

    text = json.dumps(build_payload(records, start_date, end_date, flat), indent=2, ensure_ascii=False)
    if output:
        output.write_text(text, encoding="utf-8")
        err_console.print(f"[green]✓ Wrote {len(records)} worklogs to {output}[/green]")
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
