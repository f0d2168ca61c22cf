"""Modelos comunes del dominio (Pydantic v2).

Nota:
- La API usa camelCase en el JSON; los atributos Python son snake_case y se
  mapean con alias.
- Estos modelos describen *qué* intercambia la API, no *cómo* se transporta.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, Iterator, TypeVar

from pydantic import BaseModel, Field, RootModel
from pydantic.config import ConfigDict

T = TypeVar("T")


class WireModel(BaseModel):
    """Base para todo lo que viaja por la API."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serializa con los nombres de la API, omitiendo valores no definidos."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Link(WireModel):
    """Referencia a otra entidad: `{"sys": {"type": "Link", "linkType": ..., "id": ...}}`."""

    sys: "Sys"

    @classmethod
    def to(cls, link_type: str, id: str) -> "Link":
        return cls(sys=Sys(type="Link", link_type=link_type, id=id))

    @property
    def id(self) -> str | None:
        return self.sys.id


class Sys(WireModel):
    """Metadatos comunes a todas las entidades.

    `id` es `None` hasta que el servidor crea la entidad; `version` debe ser la
    última conocida o las actualizaciones se rechazan.
    """

    id: str | None = None
    type: str | None = None
    link_type: str | None = Field(default=None, alias="linkType")
    version: int | None = None
    space: Link | None = None
    environment: Link | None = None
    content_type: Link | None = Field(default=None, alias="contentType")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    created_by: Link | None = Field(default=None, alias="createdBy")
    updated_by: Link | None = Field(default=None, alias="updatedBy")
    published_version: int | None = Field(default=None, alias="publishedVersion")
    published_at: datetime | None = Field(default=None, alias="publishedAt")
    first_published_at: datetime | None = Field(default=None, alias="firstPublishedAt")
    published_counter: int | None = Field(default=None, alias="publishedCounter")
    archived_version: int | None = Field(default=None, alias="archivedVersion")
    archived_at: datetime | None = Field(default=None, alias="archivedAt")


Link.model_rebuild()


class LocaleItem(RootModel[dict[str, T]], Generic[T]):
    """Campo localizado: mapea código de locale -> valor.

    Se serializa como objeto JSON (`{"en-US": "valor"}`).
    """

    root: dict[str, T] = Field(default_factory=dict)

    def __getitem__(self, locale: str) -> T:
        return self.root[locale]

    def __setitem__(self, locale: str, value: T) -> None:
        self.root[locale] = value

    def __contains__(self, locale: object) -> bool:
        return locale in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, locale: str, default: T | None = None) -> T | None:
        return self.root.get(locale, default)

    def locales(self) -> list[str]:
        return list(self.root)


class Entity(WireModel):
    """Entidad de la API: bloque `sys` + campos propios del recurso."""

    sys: Sys = Field(default_factory=Sys)

    @property
    def id(self) -> str | None:
        return self.sys.id or None

    @property
    def version(self) -> int | None:
        return self.sys.version

    def is_new(self) -> bool:
        return not self.sys.id

    def refresh_from(self, other: "Entity") -> None:
        """Copia en sitio el estado devuelto por el servidor (sys + campos).

        Los campos excluidos del wire (estado solo de cliente) se conservan.
        """

        for name, field in type(self).model_fields.items():
            if field.exclude:
                continue
            self.__dict__[name] = other.__dict__[name]
        self.__pydantic_fields_set__.update(other.model_fields_set)


EntityT = TypeVar("EntityT", bound=Entity)


class Collection(WireModel, Generic[EntityT]):
    """Una página de un listado con su metadata de paginación."""

    sys: Sys = Field(default_factory=Sys)
    items: list[EntityT] = Field(default_factory=list)
    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[EntityT]:  # type: ignore[override]
        return iter(self.items)
