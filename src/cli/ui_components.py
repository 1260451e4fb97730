"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles si aparecen más comandos.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import UnledComponentReport


def print_header(console: Console, *, base_url: str, project_id: str) -> None:
    """Imprime el encabezado con los parámetros de la consulta."""

    console.print(Text("Detecting Jira components without a component lead...", style="bold cyan"))
    console.print()
    console.print(Text.assemble("• Jira base url: ", (base_url, "bold")))
    console.print(Text.assemble("• Jira project:  ", (project_id, "bold")))
    console.print()


def build_components_table(reports: Sequence[UnledComponentReport]) -> Table:
    """Tabla Rich con una fila por componente sin lead."""

    table = Table(title="Components without a lead")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Issues", style="magenta", justify="right")
    for report in reports:
        table.add_row(report.id, report.name, str(report.issues))
    return table


def print_report(console: Console, reports: Sequence[UnledComponentReport]) -> None:
    if not reports:
        console.print(
            Text("Script didn't detect any components without a component lead :)", style="green")
        )
        return

    console.print(
        Text.assemble(
            ("Script detected ", "yellow"),
            (str(len(reports)), "bold yellow"),
            (" component(s) without a component lead:", "yellow"),
        )
    )
    console.print()
    console.print(build_components_table(reports))
