"""Servicio de entries.

La creación necesita el content type en la cabecera
`X-Contentful-Content-Type`; se toma de `entry.sys.content_type`.
"""

from __future__ import annotations

from contentful_cma.core.domain.entities import Entry
from contentful_cma.core.services.base import ResourceService
from contentful_cma.core.services.pagination import CollectionIterator, Query

CONTENT_TYPE_HEADER = "X-Contentful-Content-Type"


class EntriesService(ResourceService[Entry]):
    resource = "entries"
    entity_cls = Entry

    def list_by_content_type(
        self,
        space_id: str,
        content_type_id: str,
        query: Query | None = None,
    ) -> CollectionIterator[Entry]:
        query = query.copy() if query is not None else Query(limit=self._page_limit)
        return self.list(space_id, query.content_type(content_type_id))

    def create_headers(self, entity: Entry) -> dict[str, str]:
        content_type_id = entity.content_type_id
        if not content_type_id:
            raise ValueError("entry.sys.content_type is required to create an entry")
        return {CONTENT_TYPE_HEADER: content_type_id}

    def publish(self, space_id: str, entry: Entry) -> Entry:
        return self._lifecycle("PUT", space_id, entry, "published")

    def unpublish(self, space_id: str, entry: Entry) -> Entry:
        return self._lifecycle("DELETE", space_id, entry, "published")

    def archive(self, space_id: str, entry: Entry) -> Entry:
        return self._lifecycle("PUT", space_id, entry, "archived")

    def unarchive(self, space_id: str, entry: Entry) -> Entry:
        return self._lifecycle("DELETE", space_id, entry, "archived")
