"""Cliente de la Content Management API.

Agrupa un transporte HTTP y un servicio por recurso:

    with CMAClient(CMASettings(access_token="...")) as cma:
        for page in cma.assets.list("space-id"):
            ...
"""

from __future__ import annotations

from contentful_cma.adapters.http_client import HTTPTransport
from contentful_cma.core.config import CMASettings
from contentful_cma.core.interfaces.transport import Transport
from contentful_cma.core.services import (
    AssetsService,
    ContentTypesService,
    EntriesService,
    LocalesService,
    MembershipsService,
    RolesService,
)


class CMAClient:
    """Punto de entrada: `cma.assets`, `cma.memberships`, `cma.roles`..."""

    def __init__(
        self,
        settings: CMASettings | None = None,
        *,
        transport: Transport | None = None,
        environment: str | None = None,
    ) -> None:
        self.settings = settings or CMASettings()
        self._owns_transport = transport is None
        self.transport: Transport = transport or HTTPTransport(self.settings)
        self.environment = environment or self.settings.environment

        common = {"environment": self.environment, "page_limit": self.settings.page_limit}
        self.assets = AssetsService(
            self.transport,
            default_locale=self.settings.default_locale,
            **common,
        )
        self.memberships = MembershipsService(self.transport, **common)
        self.roles = RolesService(self.transport, **common)
        self.content_types = ContentTypesService(self.transport, **common)
        self.locales = LocalesService(self.transport, **common)
        self.entries = EntriesService(self.transport, **common)

    def close(self) -> None:
        if self._owns_transport and isinstance(self.transport, HTTPTransport):
            self.transport.close()

    def __enter__(self) -> "CMAClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
