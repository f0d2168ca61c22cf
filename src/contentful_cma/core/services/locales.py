"""Servicio de locales del space/entorno."""

from __future__ import annotations

from contentful_cma.core.domain.entities import Locale
from contentful_cma.core.services.base import ResourceService


class LocalesService(ResourceService[Locale]):
    resource = "locales"
    entity_cls = Locale
