"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los mismos modelos validan el JSON de Jira en el borde y tipan el resto
  del pipeline; no hay una segunda capa de DTOs.
- `Strict*` evita coerciones silenciosas ("10" no es un número).

Nota:
- Todos los modelos son inmutables (`frozen`): viven lo que dura un request.
- Campos extra del API se ignoran.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasPath, BaseModel, Field, StrictInt, StrictStr, field_validator
from pydantic.config import ConfigDict
from pydantic_core import PydanticCustomError

# Solo nombres del wire (aliases): `startAt`, no `start_at`.
_WIRE_CONFIG = ConfigDict(extra="ignore", frozen=True)


class ComponentLead(BaseModel):
    """Persona responsable de un componente."""

    model_config = _WIRE_CONFIG

    account_id: StrictStr = Field(
        ...,
        alias="accountId",
        description="Atlassian account id del lead.",
    )
    display_name: StrictStr = Field(
        ...,
        alias="displayName",
        description="Nombre visible del lead.",
    )


class Component(BaseModel):
    """Componente de un proyecto Jira (categoría de trabajo).

    Por qué `lead` es opcional:
    - Jira omite la clave cuando nadie es responsable; esos son justo los
      componentes que reporta la herramienta.
    """

    model_config = _WIRE_CONFIG

    id: StrictStr = Field(..., description="Id del componente (string en el API).")
    name: StrictStr = Field(..., description="Nombre del componente.")
    lead: ComponentLead | None = Field(
        default=None,
        description="Lead asignado, si existe.",
    )

    @field_validator("lead", mode="before")
    @classmethod
    def _lead_absent_not_null(cls, value: Any) -> Any:
        # Jira omite `lead`; un `null` explícito no es parte del contrato.
        if value is None:
            raise PydanticCustomError("model_type", "Input should be an object when present")
        return value


class IssueComponent(BaseModel):
    """Referencia a un componente dentro de una issue."""

    model_config = _WIRE_CONFIG

    id: StrictStr
    name: StrictStr


class Issue(BaseModel):
    """Issue reducida a lo que pedimos con `fields=id,components`.

    En el wire los componentes viven en `fields.components`; aquí se aplanan.
    """

    model_config = _WIRE_CONFIG

    id: StrictStr = Field(..., description="Id de la issue.")
    components: list[IssueComponent] = Field(
        ...,
        validation_alias=AliasPath("fields", "components"),
        description="Componentes asignados, en el orden que devuelve Jira.",
    )


class IssuePage(BaseModel):
    """Una página de `GET /rest/api/3/search`."""

    model_config = _WIRE_CONFIG

    start_at: StrictInt = Field(..., alias="startAt")
    max_results: StrictInt = Field(
        ...,
        alias="maxResults",
        description="Tamaño de página confirmado por el servidor (puede ser menor al pedido).",
    )
    total: StrictInt = Field(..., description="Total de resultados entre todas las páginas.")
    issues: list[Issue] = Field(..., description="Issues de esta página.")


class UnledComponentReport(BaseModel):
    """Fila del reporte: componente sin lead y cuántas issues lo referencian."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    issues: int = Field(default=0, ge=0)
