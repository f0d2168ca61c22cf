"""Servicio de content types.

Un content type se "activa" publicándolo (`PUT /published`) y se desactiva
con `DELETE /published`; solo los activos pueden usarse para crear entries.
"""

from __future__ import annotations

from contentful_cma.core.domain.entities import ContentType
from contentful_cma.core.services.base import ResourceService


class ContentTypesService(ResourceService[ContentType]):
    resource = "content_types"
    entity_cls = ContentType

    def activate(self, space_id: str, content_type: ContentType) -> ContentType:
        return self._lifecycle("PUT", space_id, content_type, "published")

    def deactivate(self, space_id: str, content_type: ContentType) -> ContentType:
        return self._lifecycle("DELETE", space_id, content_type, "published")
