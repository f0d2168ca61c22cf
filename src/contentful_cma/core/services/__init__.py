"""Servicios por recurso sobre el transporte HTTP."""

from contentful_cma.core.services.assets import AssetsService
from contentful_cma.core.services.base import ResourceService
from contentful_cma.core.services.content_types import ContentTypesService
from contentful_cma.core.services.entries import EntriesService
from contentful_cma.core.services.locales import LocalesService
from contentful_cma.core.services.memberships import MembershipsService
from contentful_cma.core.services.pagination import CollectionIterator, Query
from contentful_cma.core.services.roles import RolesService
from contentful_cma.core.services.upsert import UpsertAction, UpsertPlan, plan_upsert

__all__ = [
    "AssetsService",
    "CollectionIterator",
    "ContentTypesService",
    "EntriesService",
    "LocalesService",
    "MembershipsService",
    "Query",
    "ResourceService",
    "RolesService",
    "UpsertAction",
    "UpsertPlan",
    "plan_upsert",
]
