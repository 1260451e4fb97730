"""CLI principal (Typer).

Por qué la CLI es delgada:
- Solo parsea argumentos, configura logging, imprime y fija el exit code.
- Toda la lógica de consulta/agregación vive en `core.services`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.text import Text

from adapters.json_exporter import export_report_json, report_to_json
from cli.ui_components import print_header, print_report
from core.config import AppSettings
from core.logging_config import configure_logging, get_logger
from core.services.unled_components import find_components_without_lead

app = typer.Typer(
    add_completion=False,
    help="Detect Jira components without a component lead and count their issues.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


def _validate_base_url(value: str) -> str:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise typer.BadParameter(str(exc)) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise typer.BadParameter("must be an absolute http(s) URL, e.g. https://acme.atlassian.net")
    return value.rstrip("/")


@app.command()
def report(
    jira_base_url: str = typer.Option(
        ...,
        "--jira-base-url",
        help="Base URL of the Jira Cloud instance.",
        callback=_validate_base_url,
    ),
    jira_project_id: str = typer.Option(
        ...,
        "--jira-project-id",
        help="Project key or id.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the JSON report to this file.",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Report components without a lead and how many issues reference each."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, format_json=settings.log_json)

    try:
        if not as_json:
            print_header(_console, base_url=jira_base_url, project_id=jira_project_id)

        reports = asyncio.run(
            find_components_without_lead(
                base_url=jira_base_url,
                project_id=jira_project_id,
                settings=settings,
            )
        )

        if output is not None:
            export_report_json(reports=reports, output_path=output)
        if as_json:
            typer.echo(report_to_json(reports))
        else:
            print_report(_console, reports)
            if output is not None:
                _console.print(f"[green]Saved JSON report to:[/green] {output}")
    except Exception as exc:
        logger.debug("report_failed", exc_info=True)
        _err_console.print(Text(f"{type(exc).__name__}: {exc}"))
        _err_console.print()
        _err_console.print("[red]Oops, something went wrong.[/red]")
        _err_console.print("[red]The detailed error can be found above this message.[/red]")
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()
