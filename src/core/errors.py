"""Errores del Core.

Por qué una jerarquía propia:
- La CLI captura `TrackerError` en un único punto y decide el exit code.
- Cada error lleva su payload (url/status, ruta del esquema) en atributos,
  no solo en el mensaje.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class TrackerError(Exception):
    """Base class for every failure raised by the tracker core."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class InvalidArgumentError(TrackerError, ValueError):
    """Invalid local input (pagination bounds, empty component set)."""


class TrackerResponseError(TrackerError):
    """The tracker answered with a status other than 200."""

    def __init__(self, *, url: str, status: int, status_text: str) -> None:
        reason = f" {status_text}" if status_text else ""
        super().__init__(
            f"HTTP {status}{reason} for {url}",
            context={"url": url, "status": status},
        )
        self.url = url
        self.status = status
        self.status_text = status_text


@dataclass(frozen=True)
class SchemaIssue:
    """One structural mismatch between a payload and the expected shape."""

    path: tuple[str | int, ...]
    expected: str
    actual: str
    message: str

    def format(self) -> str:
        location = ".".join(str(part) for part in self.path) or "<root>"
        return f"{location}: {self.message} (expected {self.expected}, got {self.actual})"


class SchemaValidationError(TrackerError):
    """A response body does not match the expected shape."""

    def __init__(self, issues: list[SchemaIssue], *, shape: str | None = None) -> None:
        header = f"Invalid {shape} payload" if shape else "Invalid payload"
        lines = [header + ":"] + [f"  - {issue.format()}" for issue in issues]
        super().__init__("\n".join(lines), context={"shape": shape})
        self.issues = issues
        self.shape = shape
