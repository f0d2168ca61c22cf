"""Servicio de assets.

Además del CRUD común expone el ciclo de vida del asset:
- `process`: pide al servidor procesar el fichero subido de un locale.
- `publish` / `unpublish`: `PUT` / `DELETE` sobre `/published`.
- `archive` / `unarchive`: `PUT` / `DELETE` sobre `/archived`.
"""

from __future__ import annotations

from contentful_cma.core.domain.entities import Asset
from contentful_cma.core.interfaces.transport import Transport
from contentful_cma.core.services.base import ResourceService
from contentful_cma.core.services.pagination import CollectionIterator, Query


class AssetsService(ResourceService[Asset]):
    resource = "assets"
    entity_cls = Asset

    def __init__(
        self,
        transport: Transport,
        *,
        environment: str | None = None,
        page_limit: int | None = None,
        default_locale: str | None = None,
    ) -> None:
        super().__init__(transport, environment=environment, page_limit=page_limit)
        self._default_locale = default_locale

    def list_published(self, space_id: str, query: Query | None = None) -> CollectionIterator[Asset]:
        """Assets publicados (`/public/assets`)."""

        return self._iterate(f"{self.space_path(space_id)}/public/{self.resource}", query)

    def process(self, space_id: str, asset: Asset, locale: str | None = None) -> Asset:
        """Procesa el fichero del asset para `locale`.

        Orden de resolución del locale: argumento, `asset.locale` y el locale
        por defecto del cliente.
        """

        locale = locale or asset.locale or self._default_locale
        if not locale:
            raise ValueError("a locale is required to process an asset file")
        return self._lifecycle("PUT", space_id, asset, f"files/{locale}/process")

    def publish(self, space_id: str, asset: Asset) -> Asset:
        return self._lifecycle("PUT", space_id, asset, "published")

    def unpublish(self, space_id: str, asset: Asset) -> Asset:
        return self._lifecycle("DELETE", space_id, asset, "published")

    def archive(self, space_id: str, asset: Asset) -> Asset:
        return self._lifecycle("PUT", space_id, asset, "archived")

    def unarchive(self, space_id: str, asset: Asset) -> Asset:
        return self._lifecycle("DELETE", space_id, asset, "archived")
