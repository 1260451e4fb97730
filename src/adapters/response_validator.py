"""Validación de respuestas del API de Jira.

Por qué en el borde:
- El JSON se valida una sola vez, justo al salir de la red; el resto del
  pipeline trabaja con modelos tipados.
- Un payload con forma inesperada es una violación de contrato del upstream:
  se rechaza con la lista exacta de diferencias, sin intentar repararlo.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.domain.models import Component, IssuePage
from core.errors import SchemaIssue, SchemaValidationError

_COMPONENT_LIST = TypeAdapter(list[Component])

# Tipo JSON esperado según el `type` del error de pydantic.
_EXPECTED_BY_ERROR_TYPE: dict[str, str] = {
    "missing": "value",
    "string_type": "string",
    "int_type": "integer",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}

_JSON_TYPE_NAMES: dict[type, str] = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def _json_type_name(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _to_schema_issues(exc: ValidationError) -> list[SchemaIssue]:
    issues: list[SchemaIssue] = []
    for error in exc.errors(include_url=False):
        error_type = error.get("type", "")
        actual = "missing" if error_type == "missing" else _json_type_name(error.get("input"))
        issues.append(
            SchemaIssue(
                path=tuple(error.get("loc", ())),
                expected=_EXPECTED_BY_ERROR_TYPE.get(error_type, error_type),
                actual=actual,
                message=error.get("msg", "invalid value"),
            )
        )
    return issues


def parse_components(payload: Any) -> list[Component]:
    """Valida el body de `GET /project/{id}/components`."""

    try:
        return _COMPONENT_LIST.validate_python(payload)
    except ValidationError as exc:
        raise SchemaValidationError(_to_schema_issues(exc), shape="component list") from exc


def parse_issue_page(payload: Any) -> IssuePage:
    """Valida una página de `GET /search`."""

    try:
        return IssuePage.model_validate(payload)
    except ValidationError as exc:
        raise SchemaValidationError(_to_schema_issues(exc), shape="issue search page") from exc
