"""Errores del cliente CMA.

Taxonomía:
- Errores de transporte (red/DNS/timeout): se propagan tal cual desde httpx.
- Errores HTTP (cualquier status no-2xx): `RequestError` o una subclase según
  el status, con el cuerpo estructurado de la API si existe.
- Errores de decodificación: `DecodeError`, cuando el cuerpo no es JSON o no
  encaja con el esquema esperado.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict


class APIErrorBody(BaseModel):
    """Cuerpo de error devuelto por la API (`{"sys": {"type": "Error", "id": ...}}`)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sys: dict[str, Any] = Field(default_factory=dict)
    message: str | None = None
    details: dict[str, Any] | None = None
    request_id: str | None = Field(default=None, alias="requestId")

    @property
    def error_id(self) -> str | None:
        value = self.sys.get("id")
        return value if isinstance(value, str) else None


class CMAError(Exception):
    """Raíz de todos los errores propios del cliente."""


class RequestError(CMAError):
    """La API respondió con un status no-2xx (o un cuerpo ilegible)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        method: str = "",
        url: str = "",
        body: bytes = b"",
        error: APIErrorBody | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body
        self.error = error

    @property
    def error_id(self) -> str | None:
        return self.error.error_id if self.error else None

    def __str__(self) -> str:
        base = super().__str__()
        if self.error and self.error.message:
            return f"{base}: {self.error.message}"
        return base


class BadRequestError(RequestError):
    pass


class AccessDeniedError(RequestError):
    pass


class NotFoundError(RequestError):
    pass


class VersionMismatchError(RequestError):
    """La versión enviada en `X-Contentful-Version` no es la última del servidor."""


class ValidationFailedError(RequestError):
    pass


class ServerError(RequestError):
    pass


class DecodeError(RequestError):
    """El cuerpo de una respuesta 2xx no se pudo convertir en la entidad esperada."""


_STATUS_ERRORS: dict[int, type[RequestError]] = {
    400: BadRequestError,
    401: AccessDeniedError,
    403: AccessDeniedError,
    404: NotFoundError,
    409: VersionMismatchError,
    422: ValidationFailedError,
}


def parse_error_body(body: bytes) -> APIErrorBody | None:
    """Intenta leer el cuerpo de error estructurado; `None` si no lo es."""

    if not body:
        return None
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    try:
        return APIErrorBody.model_validate(data)
    except ValidationError:
        return None


def error_for_status(
    *,
    status_code: int,
    method: str,
    url: str,
    body: bytes,
) -> RequestError:
    """Construye el `RequestError` adecuado para una respuesta no-2xx."""

    if status_code >= 500:
        cls: type[RequestError] = ServerError
    else:
        cls = _STATUS_ERRORS.get(status_code, RequestError)

    error = parse_error_body(body)
    return cls(
        f"{method} {url} failed with HTTP {status_code}",
        status_code=status_code,
        method=method,
        url=url,
        body=body,
        error=error,
    )
