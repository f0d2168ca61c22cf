"""Servicio de roles del space."""

from __future__ import annotations

from contentful_cma.core.domain.entities import Role
from contentful_cma.core.services.base import ResourceService


class RolesService(ResourceService[Role]):
    resource = "roles"
    entity_cls = Role
    environment_scoped = False
