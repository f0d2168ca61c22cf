"""Volcado JSON de entidades para `--output` de la CLI.

El fichero contiene una lista con el cuerpo de cada entidad tal y como lo
devuelve la API (incluido `sys`), así que cada elemento se puede volver a
cargar con `Asset.model_validate(...)` y reenviar con `upsert`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from contentful_cma.core.domain.models import Entity


def export_entities_json(*, entities: Iterable[Entity], output_path: Path) -> Path:
    """Escribe `entities` en `output_path` con claves ordenadas para diffs estables."""

    items = [entity.to_wire() for entity in entities]
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        json.dump(items, fh, ensure_ascii=False, indent=2, sort_keys=True)
        fh.write("\n")
    return output_path
