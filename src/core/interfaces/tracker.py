"""Contrato del cliente de issue tracker.

Por qué Protocol:
- El agregador solo necesita dos operaciones; cualquier objeto que las
  implemente (cliente Jira real, fake en tests) sirve.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from core.domain.models import Component, Issue


@runtime_checkable
class IssueTracker(Protocol):
    """Contrato mínimo para consultar componentes e issues de un proyecto.

    Reglas de diseño:
    - Ambas operaciones son asíncronas porque hacen I/O (HTTP).
    - Los errores (`TrackerResponseError`, `SchemaValidationError`) se
      propagan sin recuperación local.
    """

    async def get_components(self) -> list[Component]:
        """Lista los componentes del proyecto, en el orden del servidor."""

        ...

    async def get_issues_by_components(self, component_ids: Iterable[str]) -> list[Issue]:
        """Devuelve todas las issues que referencian alguno de los componentes."""

        ...
