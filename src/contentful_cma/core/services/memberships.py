"""Servicio de space memberships (`/spaces/{id}/space_memberships`).

Las memberships son recursos del space: no dependen del entorno.
"""

from __future__ import annotations

from contentful_cma.core.domain.entities import Membership
from contentful_cma.core.services.base import ResourceService


class MembershipsService(ResourceService[Membership]):
    resource = "space_memberships"
    entity_cls = Membership
    environment_scoped = False
