"""Servicio genérico por recurso.

Cada recurso (assets, memberships, roles...) hereda de `ResourceService` y
solo declara su ruta, su entidad y sus operaciones de ciclo de vida. Aquí
vive lo común: construcción de rutas, decodificación, errores, listado
paginado, `get`, `upsert` y `delete`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, ClassVar, Generic, Mapping

from pydantic import ValidationError

from contentful_cma.core.domain.models import Collection, Entity, EntityT
from contentful_cma.core.errors import DecodeError, error_for_status
from contentful_cma.core.interfaces.transport import Transport, TransportResponse
from contentful_cma.core.services.pagination import CollectionIterator, Query
from contentful_cma.core.services.upsert import VERSION_HEADER, plan_upsert

logger = logging.getLogger(__name__)


class ResourceService(Generic[EntityT]):
    """Operaciones CRUD sobre `/spaces/{space_id}/<resource>`."""

    resource: ClassVar[str]
    entity_cls: ClassVar[type[Entity]]
    environment_scoped: ClassVar[bool] = True

    def __init__(
        self,
        transport: Transport,
        *,
        environment: str | None = None,
        page_limit: int | None = None,
    ) -> None:
        self._transport = transport
        self._environment = environment
        self._page_limit = page_limit

    # Rutas

    def space_path(self, space_id: str) -> str:
        if not space_id:
            raise ValueError("space_id is required")
        if self.environment_scoped and self._environment:
            return f"/spaces/{space_id}/environments/{self._environment}"
        return f"/spaces/{space_id}"

    def collection_path(self, space_id: str) -> str:
        return f"{self.space_path(space_id)}/{self.resource}"

    def item_path(self, space_id: str, entity_id: str) -> str:
        if not entity_id:
            raise ValueError("entity id is required")
        return f"{self.collection_path(space_id)}/{entity_id}"

    # Transporte + decodificación

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        response = self._transport.send(method, path, params=params, json=json, headers=headers)
        if not response.is_success:
            error = error_for_status(
                status_code=response.status_code,
                method=method,
                url=response.url or path,
                body=response.content,
            )
            logger.warning(
                "%s %s -> HTTP %s (%s)",
                method,
                path,
                response.status_code,
                error.error_id or "sin cuerpo de error",
            )
            raise error
        return response

    def _decode(self, response: TransportResponse, model: type[Any]) -> Any:
        try:
            data = json.loads(response.content)
            return model.model_validate(data)
        except (ValueError, ValidationError) as exc:
            raise DecodeError(
                f"{response.method} {response.url}: invalid {model.__name__} payload ({exc})",
                status_code=response.status_code,
                method=response.method,
                url=response.url,
                body=response.content,
            ) from exc

    def _decode_entity(self, response: TransportResponse) -> EntityT:
        return self._decode(response, self.entity_cls)

    def _apply_response(self, entity: EntityT, response: TransportResponse) -> EntityT:
        """Sobrescribe `entity` en sitio con lo que devolvió el servidor."""

        if not response.content.strip():
            return entity
        fresh = self._decode_entity(response)
        entity.refresh_from(fresh)
        return entity

    def payload(self, entity: EntityT) -> dict[str, Any]:
        """Cuerpo JSON enviado en create/update (sin el bloque `sys`)."""

        data = entity.to_wire()
        data.pop("sys", None)
        return data

    def create_headers(self, entity: EntityT) -> dict[str, str]:
        """Cabeceras extra para `POST` de creación; vacío por defecto."""

        return {}

    @staticmethod
    def _entity_id(entity_or_id: Entity | str) -> str:
        if isinstance(entity_or_id, Entity):
            entity_id = entity_or_id.sys.id
        else:
            entity_id = entity_or_id
        if not entity_id:
            raise ValueError("entity has no sys.id; it must be created first")
        return entity_id

    # Operaciones

    def _page_fetcher(self, path: str):
        collection_cls = Collection[self.entity_cls]  # type: ignore[name-defined]

        def fetch(params: dict[str, str]) -> Collection[EntityT]:
            response = self._request("GET", path, params=params)
            return self._decode(response, collection_cls)

        return fetch

    def _iterate(self, path: str, query: Query | None) -> CollectionIterator[EntityT]:
        if query is None:
            query = Query(limit=self._page_limit)
        return CollectionIterator(self._page_fetcher(path), query)

    def list(self, space_id: str, query: Query | None = None) -> CollectionIterator[EntityT]:
        """Iterador paginado sobre el recurso; no hace red hasta el primer `next()`."""

        return self._iterate(self.collection_path(space_id), query)

    def get(self, space_id: str, entity_id: str) -> EntityT:
        response = self._request("GET", self.item_path(space_id, entity_id))
        return self._decode_entity(response)

    def upsert(self, space_id: str, entity: EntityT) -> EntityT:
        """Crea (`POST`) o actualiza (`PUT`) según tenga `sys.id`.

        La entidad se actualiza en sitio con la respuesta; ante un error se
        lanza `RequestError` y la entidad queda intacta.
        """

        plan = plan_upsert(entity)
        headers = plan.headers()
        if plan.entity_id is None:
            headers.update(self.create_headers(entity))
        response = self._request(
            plan.method,
            plan.path(self.collection_path(space_id)),
            json=self.payload(entity),
            headers=headers,
        )
        self._apply_response(entity, response)
        logger.info("%s %s %s", plan.action.value, self.resource, entity.sys.id)
        return entity

    def delete(self, space_id: str, entity_or_id: Entity | str) -> None:
        self._request("DELETE", self.item_path(space_id, self._entity_id(entity_or_id)))

    def _lifecycle(self, method: str, space_id: str, entity: EntityT, suffix: str) -> EntityT:
        """Dispara una transición en el servidor (`/published`, `/archived`...)."""

        entity_id = self._entity_id(entity)
        headers: dict[str, str] = {}
        if entity.sys.version is not None:
            headers[VERSION_HEADER] = str(entity.sys.version)
        response = self._request(
            method,
            f"{self.item_path(space_id, entity_id)}/{suffix}",
            headers=headers,
        )
        return self._apply_response(entity, response)
