"""Contrato del transporte HTTP.

El transporte resuelve TLS, pooling de conexiones e inyección de cabeceras
(token Bearer, content-type, user agent). Los servicios solo le piden un
método, una ruta y, opcionalmente, parámetros, cuerpo JSON y cabeceras extra.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Respuesta cruda: status, cuerpo y cabeceras."""

    status_code: int
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    method: str = ""
    url: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo para hablar con la API.

    Reglas:
    - `send` bloquea hasta recibir la respuesta completa.
    - Los fallos de red se propagan tal cual (no se reintenta).
    - Un status no-2xx NO es una excepción a este nivel.
    """

    def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        ...
