from __future__ import annotations

import asyncio
from collections.abc import Iterable

import httpx

from core.domain.models import Component, ComponentLead, Issue, UnledComponentReport
from core.services.unled_components import count_issues_by_component, find_components_without_lead
from tests.conftest import BASE_URL, PROJECT_ID, paginating_search


class FakeTracker:
    def __init__(self, components: list[Component], issues: list[Issue]) -> None:
        self.components = components
        self.issues = issues
        self.searched: list[list[str]] = []

    async def get_components(self) -> list[Component]:
        return self.components

    async def get_issues_by_components(self, component_ids: Iterable[str]) -> list[Issue]:
        self.searched.append(list(component_ids))
        return self.issues


def _issue(issue_id: str, *component_ids: str) -> Issue:
    return Issue.model_validate(
        {
            "id": issue_id,
            "fields": {"components": [{"id": cid, "name": f"name-{cid}"} for cid in component_ids]},
        }
    )


def _find(tracker: FakeTracker) -> list[UnledComponentReport]:
    return asyncio.run(find_components_without_lead(base_url=BASE_URL, project_id=PROJECT_ID, tracker=tracker))


def test_single_unled_component_with_two_issues():
    tracker = FakeTracker(
        components=[Component(id="C1", name="Payments")],
        issues=[_issue("1", "C1"), _issue("2", "C1")],
    )

    assert _find(tracker) == [UnledComponentReport(id="C1", name="Payments", issues=2)]


def test_no_components_means_no_search():
    tracker = FakeTracker(components=[], issues=[])

    assert _find(tracker) == []
    assert tracker.searched == []


def test_all_components_led_means_no_search():
    lead = ComponentLead.model_validate({"accountId": "abc", "displayName": "Ada"})
    tracker = FakeTracker(components=[Component(id="C1", name="Payments", lead=lead)], issues=[])

    assert _find(tracker) == []
    assert tracker.searched == []


def test_only_unled_ids_are_searched_and_zero_counts_kept():
    lead = ComponentLead.model_validate({"accountId": "abc", "displayName": "Ada"})
    tracker = FakeTracker(
        components=[
            Component(id="C1", name="Payments"),
            Component(id="C2", name="Search", lead=lead),
            Component(id="C3", name="Docs"),
        ],
        issues=[_issue("1", "C1", "C2")],
    )

    reports = _find(tracker)

    assert tracker.searched == [["C1", "C3"]]
    assert reports == [
        UnledComponentReport(id="C1", name="Payments", issues=1),
        UnledComponentReport(id="C3", name="Docs", issues=0),
    ]


def test_count_issues_by_component_counts_every_reference():
    counts = count_issues_by_component([_issue("1", "A", "B"), _issue("2", "A"), _issue("3")])

    assert counts == {"A": 2, "B": 1}


def test_end_to_end_against_mocked_jira(settings, components_payload, issues_payload):
    search = paginating_search(issues_payload, server_page_size=3)
    searched_jql: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/components"):
            return httpx.Response(200, json=components_payload)
        searched_jql.append(request.url.params["jql"])
        return search(request)

    reports = asyncio.run(
        find_components_without_lead(
            base_url=BASE_URL,
            project_id=PROJECT_ID,
            settings=settings,
            transport=httpx.MockTransport(handler),
        )
    )

    assert reports == [
        UnledComponentReport(id="10100", name="Backend", issues=5),
        UnledComponentReport(id="10102", name="Infrastructure", issues=4),
    ]
    assert set(searched_jql) == {"project = SP AND component IN (10100, 10102)"}
    assert len(searched_jql) == 3
