"""contentful-cma: cliente tipado para la Content Management API de Contentful."""

from contentful_cma.client import CMAClient
from contentful_cma.core.config import CMASettings
from contentful_cma.core.domain import (
    Asset,
    AssetFields,
    Collection,
    ContentType,
    ContentTypeField,
    Entity,
    Entry,
    File,
    FileDetails,
    ImageFields,
    Link,
    Locale,
    LocaleItem,
    Membership,
    Policy,
    Role,
    Sys,
)
from contentful_cma.core.errors import (
    AccessDeniedError,
    APIErrorBody,
    BadRequestError,
    CMAError,
    DecodeError,
    NotFoundError,
    RequestError,
    ServerError,
    ValidationFailedError,
    VersionMismatchError,
)
from contentful_cma.core.services import CollectionIterator, Query, UpsertAction, plan_upsert

__version__ = "0.1.0"

__all__ = [
    "APIErrorBody",
    "AccessDeniedError",
    "Asset",
    "AssetFields",
    "BadRequestError",
    "CMAClient",
    "CMAError",
    "CMASettings",
    "Collection",
    "CollectionIterator",
    "ContentType",
    "ContentTypeField",
    "DecodeError",
    "Entity",
    "Entry",
    "File",
    "FileDetails",
    "ImageFields",
    "Link",
    "Locale",
    "LocaleItem",
    "Membership",
    "NotFoundError",
    "Policy",
    "Query",
    "RequestError",
    "Role",
    "ServerError",
    "Sys",
    "UpsertAction",
    "ValidationFailedError",
    "VersionMismatchError",
    "plan_upsert",
]
