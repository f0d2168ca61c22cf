"""Entidades concretas de la Content Management API.

Cada entidad es un `Entity` (bloque `sys`) más los campos propios del
recurso. Los campos localizados usan `LocaleItem[T]`.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from contentful_cma.core.domain.models import Entity, Link, LocaleItem, WireModel


class ImageFields(WireModel):
    width: int | None = None
    height: int | None = None


class FileDetails(WireModel):
    size: int | None = None
    image: ImageFields | None = None


class File(WireModel):
    """Fichero de un asset para un locale concreto."""

    file_name: str | None = Field(default=None, alias="fileName")
    content_type: str | None = Field(default=None, alias="contentType")
    url: str | None = None
    upload: str | None = Field(
        default=None,
        description="URL de subida; el servidor la sustituye por `url` tras `process`.",
    )
    details: FileDetails | None = None


class AssetFields(WireModel):
    title: LocaleItem[str] = Field(default_factory=LocaleItem[str])
    description: LocaleItem[str] = Field(default_factory=LocaleItem[str])
    file: LocaleItem[File] = Field(default_factory=LocaleItem[File])


class Asset(Entity):
    """Asset (imagen, documento...) con sus ficheros por locale."""

    locale: str | None = Field(
        default=None,
        exclude=True,
        description="Locale de trabajo del cliente; lo usa `process` y no viaja en el JSON.",
    )
    fields: AssetFields = Field(default_factory=AssetFields)


class Membership(Entity):
    """Pertenencia de un usuario a un space."""

    admin: bool = False
    roles: list[Link] = Field(default_factory=list)
    user: Link | None = None
    email: str | None = None


class Policy(WireModel):
    effect: str = Field(..., description="'allow' o 'deny'.")
    actions: list[str] | str = Field(default_factory=list)
    constraint: dict[str, Any] | None = None


class Role(Entity):
    """Rol de un space: permisos agregados y políticas detalladas."""

    name: str | None = None
    description: str | None = None
    permissions: dict[str, list[str] | str] = Field(default_factory=dict)
    policies: list[Policy] = Field(default_factory=list)


class FieldItems(WireModel):
    type: str
    link_type: str | None = Field(default=None, alias="linkType")
    validations: list[dict[str, Any]] | None = None


class ContentTypeField(WireModel):
    id: str
    name: str
    type: str
    link_type: str | None = Field(default=None, alias="linkType")
    items: FieldItems | None = None
    required: bool = False
    localized: bool = False
    disabled: bool = False
    omitted: bool = False
    validations: list[dict[str, Any]] | None = None


class ContentType(Entity):
    name: str | None = None
    description: str | None = None
    display_field: str | None = Field(default=None, alias="displayField")
    fields: list[ContentTypeField] = Field(default_factory=list)

    def field(self, field_id: str) -> ContentTypeField | None:
        for item in self.fields:
            if item.id == field_id:
                return item
        return None


class Locale(Entity):
    name: str | None = None
    code: str | None = None
    fallback_code: str | None = Field(default=None, alias="fallbackCode")
    default: bool = False
    optional: bool = False
    content_delivery_api: bool = Field(default=True, alias="contentDeliveryApi")
    content_management_api: bool = Field(default=True, alias="contentManagementApi")


class Entry(Entity):
    """Entrada de contenido; sus campos dependen del content type."""

    fields: dict[str, LocaleItem[Any]] = Field(default_factory=dict)

    @property
    def content_type_id(self) -> str | None:
        link = self.sys.content_type
        return link.id if link else None

    def set_field(self, field_id: str, locale: str, value: Any) -> None:
        """Asigna `value` al campo `field_id` para `locale`, creando el campo si falta."""

        item = self.fields.get(field_id)
        if item is None:
            item = LocaleItem[Any]({})
            self.fields[field_id] = item
        item[locale] = value
