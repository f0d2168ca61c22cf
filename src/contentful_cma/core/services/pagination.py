"""Paginación genérica de listados.

`CollectionIterator` recorre un endpoint de listado página a página, sin
cargar todo el resultado en memoria. Cada llamada a `next()` hace un único
GET con el `skip`/`limit` actual.

Importante: el iterador guarda el offset como estado mutable; no compartir
una misma instancia entre hilos sin sincronización externa.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Iterator

from contentful_cma.core.domain.models import Collection, EntityT

logger = logging.getLogger(__name__)

MAX_PAGE_LIMIT = 1000


@dataclass
class Query:
    """Parámetros de query-string de un listado (filtros, orden, paginación)."""

    limit: int | None = None
    skip: int = 0
    order: str | None = None
    select: list[str] | None = None
    filters: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.limit is not None and not 1 <= self.limit <= MAX_PAGE_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_PAGE_LIMIT}")
        if self.skip < 0:
            raise ValueError("skip must be >= 0")

    def equal(self, name: str, value: Any) -> "Query":
        self.filters[name] = _format_value(value)
        return self

    def not_equal(self, name: str, value: Any) -> "Query":
        self.filters[f"{name}[ne]"] = _format_value(value)
        return self

    def in_(self, name: str, values: list[Any]) -> "Query":
        self.filters[f"{name}[in]"] = ",".join(_format_value(v) for v in values)
        return self

    def exists(self, name: str, present: bool = True) -> "Query":
        self.filters[f"{name}[exists]"] = "true" if present else "false"
        return self

    def content_type(self, content_type_id: str) -> "Query":
        self.filters["content_type"] = content_type_id
        return self

    def copy(self) -> "Query":
        """Copia independiente; los filtros no se comparten con el original."""

        return replace(self, select=list(self.select) if self.select else None, filters=dict(self.filters))

    def params(self) -> dict[str, str]:
        out: dict[str, str] = {"skip": str(self.skip)}
        if self.limit is not None:
            out["limit"] = str(self.limit)
        if self.order:
            out["order"] = self.order
        if self.select:
            out["select"] = ",".join(self.select)
        out.update(self.filters)
        return out


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


PageFetcher = Callable[[dict[str, str]], Collection[EntityT]]


class CollectionIterator(Generic[EntityT]):
    """Iterador perezoso sobre las páginas de un listado.

    - `next()` devuelve la siguiente `Collection` o lanza `StopIteration`
      cuando lo devuelto acumulado alcanza el `total` del servidor.
    - Una página vacía también termina el recorrido.
    - Los errores (`RequestError`, `DecodeError`) se propagan al llamador y
      no avanzan el offset.
    """

    def __init__(self, fetch: PageFetcher[EntityT], query: Query | None = None) -> None:
        self._fetch = fetch
        self._query = query.copy() if query is not None else Query()
        self._skip = self._query.skip
        self._returned = 0
        self._total: int | None = None
        self._exhausted = False

    @property
    def skip(self) -> int:
        return self._skip

    @property
    def total(self) -> int | None:
        """Total reportado por el servidor (`None` antes de la primera página)."""

        return self._total

    @property
    def returned(self) -> int:
        """Entidades devueltas hasta ahora por este iterador."""

        return self._returned

    @property
    def done(self) -> bool:
        return self._exhausted

    def next(self) -> Collection[EntityT]:
        if self._exhausted:
            raise StopIteration

        params = self._query.params()
        params["skip"] = str(self._skip)
        page = self._fetch(params)

        self._total = page.total
        count = len(page.items)
        self._skip += count
        self._returned += count
        logger.debug("page skip=%s count=%s total=%s", page.skip, count, page.total)

        if count == 0:
            self._exhausted = True
            raise StopIteration
        if self._skip >= page.total:
            self._exhausted = True
        return page

    def __iter__(self) -> Iterator[Collection[EntityT]]:
        return self

    def __next__(self) -> Collection[EntityT]:
        return self.next()

    def iter_items(self) -> Iterator[EntityT]:
        """Aplana las páginas restantes en un iterador de entidades."""

        for page in self:
            yield from page.items
