"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y el manejo de status/JSON para todas las
  llamadas al API de Jira.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.errors import SchemaIssue, SchemaValidationError, TrackerResponseError
from core.logging_config import get_logger

logger = get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los endpoints se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def ensure_ok(response: httpx.Response) -> httpx.Response:
    """Devuelve la respuesta si el status es 200; si no, `TrackerResponseError`.

    Cualquier otro status (incluidos otros 2xx) es terminal: sin reintentos.
    """

    if response.status_code != 200:
        url = str(response.request.url)
        logger.warning("tracker_request_failed", url=url, status=response.status_code)
        raise TrackerResponseError(
            url=url,
            status=response.status_code,
            status_text=response.reason_phrase,
        )
    return response


def read_json(response: httpx.Response) -> Any:
    """Decodifica el body JSON; un body ilegible es un error de esquema."""

    try:
        return response.json()
    except ValueError as exc:
        raise SchemaValidationError(
            [
                SchemaIssue(
                    path=(),
                    expected="JSON document",
                    actual=response.headers.get("content-type", "unknown content"),
                    message=f"Body is not valid JSON: {exc}",
                )
            ],
            shape="response body",
        ) from exc
