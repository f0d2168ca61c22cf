"""Decisión create-vs-update de `upsert`.

La regla depende solo de `sys.id`:
- sin id  -> CREATE: `POST` a la ruta de colección.
- con id  -> UPDATE: `PUT` a la ruta del item con `X-Contentful-Version`.

Una actualización sin `sys.version` conocida se rechaza antes de salir a la
red. Es una función pura para poder probarla sin red.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from contentful_cma.core.domain.models import Entity

VERSION_HEADER = "X-Contentful-Version"


class UpsertAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"

    @property
    def method(self) -> str:
        return "POST" if self is UpsertAction.CREATE else "PUT"


@dataclass(frozen=True)
class UpsertPlan:
    """Resultado de la comprobación de identidad de una entidad."""

    action: UpsertAction
    entity_id: str | None = None
    version: int | None = None

    @property
    def method(self) -> str:
        return self.action.method

    def path(self, collection_path: str) -> str:
        if self.action is UpsertAction.CREATE:
            return collection_path
        return f"{collection_path}/{self.entity_id}"

    def headers(self) -> dict[str, str]:
        if self.action is UpsertAction.UPDATE:
            return {VERSION_HEADER: str(self.version)}
        return {}


def plan_upsert(entity: Entity) -> UpsertPlan:
    """Decide si `entity` se crea o se actualiza.

    Lanza `ValueError` si la entidad tiene `sys.id` pero no `sys.version`.
    """

    entity_id = entity.sys.id
    if not entity_id:
        return UpsertPlan(action=UpsertAction.CREATE)
    if entity.sys.version is None:
        raise ValueError(f"entity {entity_id} has sys.id but no sys.version; fetch it first")
    return UpsertPlan(action=UpsertAction.UPDATE, entity_id=entity_id, version=entity.sys.version)
