"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos (Pydantic v2) que intercambia la API:
metadatos `sys`, campos localizados, colecciones paginadas y entidades.
"""

from contentful_cma.core.domain.entities import (
    Asset,
    AssetFields,
    ContentType,
    ContentTypeField,
    Entry,
    File,
    FileDetails,
    ImageFields,
    Locale,
    Membership,
    Policy,
    Role,
)
from contentful_cma.core.domain.models import Collection, Entity, Link, LocaleItem, Sys

__all__ = [
    "Asset",
    "AssetFields",
    "Collection",
    "ContentType",
    "ContentTypeField",
    "Entity",
    "Entry",
    "File",
    "FileDetails",
    "ImageFields",
    "Link",
    "Locale",
    "LocaleItem",
    "Membership",
    "Policy",
    "Role",
    "Sys",
]
