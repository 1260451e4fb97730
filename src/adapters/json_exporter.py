"""Exportación JSON del reporte.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (dashboards, CI).
- Misma forma que `--json` en stdout.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from core.domain.models import UnledComponentReport


def report_to_json(reports: Sequence[UnledComponentReport]) -> str:
    """Serializa el reporte a JSON UTF-8 con formato estable."""

    payload = [report.model_dump(mode="json") for report in reports]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def export_report_json(*, reports: Sequence[UnledComponentReport], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(report_to_json(reports) + "\n", encoding="utf-8")
    return output_path
