"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
import structlog

from core.config import AppSettings

FIXTURES = Path(__file__).parent / "fixtures"

BASE_URL = "https://acme.atlassian.net"
PROJECT_ID = "SP"


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    # configure_logging binds a stderr handler to the CliRunner stream.
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def components_payload() -> list[dict[str, Any]]:
    return load_fixture("components.json")


@pytest.fixture
def issues_payload() -> dict[str, Any]:
    return load_fixture("search_issues.json")


def paginating_search(
    body: dict[str, Any],
    *,
    server_page_size: int,
    history: list[tuple[int, int]] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Fake `/search` that clamps `maxResults` like Jira does."""

    def handler(request: httpx.Request) -> httpx.Response:
        start_at = int(request.url.params["startAt"])
        max_results = int(request.url.params["maxResults"])
        if history is not None:
            history.append((start_at, max_results))
        page_size = min(server_page_size, max_results)
        return httpx.Response(
            200,
            json={
                **body,
                "startAt": start_at,
                "maxResults": server_page_size,
                "issues": body["issues"][start_at : start_at + page_size],
            },
        )

    return handler
