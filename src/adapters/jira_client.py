"""Cliente del API REST v3 de Jira Cloud.

Solo dos endpoints, ambos GET:
- `/rest/api/3/project/{project}/components`
- `/rest/api/3/search` (paginado por `startAt`/`maxResults`)

Sobre la paginación de `/search`:
- Jira trata `maxResults` como una sugerencia y lo recorta según sus propios
  límites. El tamaño real y el total solo se conocen tras la primera página,
  así que se pide una primera página "grande", y con lo que confirma el
  servidor se planifican el resto de ventanas y se piden en paralelo.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

import httpx

from adapters.http_client import build_async_client, ensure_ok, read_json
from adapters.response_validator import parse_components, parse_issue_page
from core.config import AppSettings
from core.domain.models import Component, Issue, IssuePage
from core.domain.pagination import plan_page_windows
from core.errors import InvalidArgumentError
from core.interfaces.tracker import IssueTracker
from core.logging_config import get_logger

logger = get_logger(__name__)

SEARCH_FIELDS = "id,components"


def build_components_jql(project_id: str, component_ids: list[str]) -> str:
    return f"project = {project_id} AND component IN ({', '.join(component_ids)})"


class JiraClient(IssueTracker):
    """Consulta componentes e issues de un proyecto Jira."""

    def __init__(
        self,
        *,
        base_url: str,
        project_id: str,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._project_id = project_id
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def components_url(self) -> str:
        return f"{self._base_url}/rest/api/3/project/{self._project_id}/components"

    @property
    def search_url(self) -> str:
        return f"{self._base_url}/rest/api/3/search"

    def _client(self) -> httpx.AsyncClient:
        return build_async_client(self._settings, transport=self._transport)

    async def get_components(self) -> list[Component]:
        """Lista los componentes del proyecto.

        Raises:
            TrackerResponseError: status distinto de 200.
            SchemaValidationError: body con forma inesperada.
        """

        async with self._client() as client:
            logger.debug("tracker_request", url=self.components_url)
            response = await client.get(self.components_url)

        components = parse_components(read_json(ensure_ok(response)))
        logger.debug("components_fetched", count=len(components))
        return components

    async def get_issues_by_components(self, component_ids: Iterable[str]) -> list[Issue]:
        """Devuelve todas las issues del proyecto con alguno de `component_ids`.

        La primera página se pide con `initial_max_results`; el resto de
        ventanas salen de `maxResults`/`total` de esa respuesta y se piden
        concurrentemente. El resultado respeta el orden de las ventanas.
        Un fallo en cualquier página invalida la operación completa.

        Raises:
            InvalidArgumentError: `component_ids` vacío, o paginación inválida.
            TrackerResponseError: alguna página respondió con status distinto de 200.
            SchemaValidationError: alguna página tiene una forma inesperada.
        """

        ids = list(dict.fromkeys(component_ids))
        if not ids:
            raise InvalidArgumentError("At least one component id is required.")

        params: dict[str, str] = {
            "startAt": "0",
            "maxResults": str(self._settings.initial_max_results),
            "validateQuery": "strict",
            "fields": SEARCH_FIELDS,
            "jql": build_components_jql(self._project_id, ids),
        }

        async with self._client() as client:
            first_page = await self._fetch_issue_page(client, params)

            windows = plan_page_windows(first_page.max_results, first_page.total)[1:]
            logger.debug(
                "issue_pages_planned",
                total=first_page.total,
                page_size=first_page.max_results,
                remaining_pages=len(windows),
            )

            tasks = [
                asyncio.create_task(
                    self._fetch_issue_page(
                        client,
                        {
                            **params,
                            "startAt": str(window.start_at),
                            "maxResults": str(window.page_size),
                        },
                    )
                )
                for window in windows
            ]
            try:
                rest_pages = await asyncio.gather(*tasks)
            except BaseException:
                # El primer fallo decide; el resto se cancela y se descarta.
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        issues = list(first_page.issues)
        for page in rest_pages:
            issues.extend(page.issues)
        return issues

    async def _fetch_issue_page(self, client: httpx.AsyncClient, params: dict[str, str]) -> IssuePage:
        logger.debug("tracker_request", url=self.search_url, start_at=params["startAt"])
        response = await client.get(self.search_url, params=params)
        return parse_issue_page(read_json(ensure_ok(response)))
