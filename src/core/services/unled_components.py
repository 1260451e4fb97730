"""Unled component detection.

Combines the tracker's component list with the issues that reference the
components lacking a lead, and produces one report row per such component.
The CLI delegates all aggregation here so the flow stays reusable (tests,
other entry-points) and free of printing.
"""

from __future__ import annotations

from collections import Counter

import httpx

from adapters.jira_client import JiraClient
from core.config import AppSettings
from core.domain.models import Issue, UnledComponentReport
from core.interfaces.tracker import IssueTracker
from core.logging_config import get_logger

logger = get_logger(__name__)


def count_issues_by_component(issues: list[Issue]) -> Counter[str]:
    """Count, per component id, how many issues reference it."""

    counts: Counter[str] = Counter()
    for issue in issues:
        for component in issue.components:
            counts[component.id] += 1
    return counts


async def find_components_without_lead(
    *,
    base_url: str,
    project_id: str,
    settings: AppSettings | None = None,
    tracker: IssueTracker | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[UnledComponentReport]:
    """Return the project's components without a lead, with their issue counts.

    Rows keep the server's component order. The issue search is skipped when
    every component has a lead.
    """

    tracker = tracker or JiraClient(
        base_url=base_url,
        project_id=project_id,
        settings=settings,
        transport=transport,
    )

    components = await tracker.get_components()
    unled = [component for component in components if component.lead is None]
    logger.info("components_loaded", total=len(components), without_lead=len(unled))
    if not unled:
        return []

    issues = await tracker.get_issues_by_components([component.id for component in unled])
    counts = count_issues_by_component(issues)

    return [
        UnledComponentReport(id=component.id, name=component.name, issues=counts.get(component.id, 0))
        for component in unled
    ]
