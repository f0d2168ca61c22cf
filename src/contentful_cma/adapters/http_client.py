"""Wrapper de httpx.

- Estandariza base URL, timeouts y cabeceras de la Content Management API.
- Implementa `core.interfaces.transport.Transport`; en tests se inyecta un
  `httpx.Client` con `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from contentful_cma.core.config import CMASettings
from contentful_cma.core.interfaces.transport import TransportResponse

logger = logging.getLogger(__name__)

CMA_CONTENT_TYPE = "application/vnd.contentful.management.v1+json"


def build_client(
    settings: CMASettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` apuntando a la API con las cabeceras comunes.

    El token Bearer se añade solo si está configurado.
    """

    settings = settings or CMASettings()
    headers: dict[str, str] = {
        "Accept": "application/json",
        "Content-Type": CMA_CONTENT_TYPE,
        "X-Contentful-User-Agent": settings.user_agent,
    }
    if settings.access_token:
        headers["Authorization"] = f"Bearer {settings.access_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HTTPTransport:
    """Transporte síncrono sobre `httpx.Client`.

    Si el cliente httpx se inyecta desde fuera, `close()` no lo cierra.
    """

    def __init__(
        self,
        settings: CMASettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or CMASettings()
        self._client = client or build_client(self._settings)
        self._owns_client = client is None

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        logger.debug("%s %s params=%s", method, path, dict(params) if params else None)
        response = self._client.request(
            method,
            path,
            params=dict(params) if params else None,
            json=json,
            headers=dict(headers) if headers else None,
        )
        logger.debug("%s %s -> HTTP %s", method, path, response.status_code)
        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
            method=method,
            url=str(response.request.url),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
