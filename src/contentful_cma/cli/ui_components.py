"""Componentes de UI para la CLI (Rich).

Separa cómo se pinta cada recurso de los comandos que lo piden.
"""

from __future__ import annotations

from typing import Callable, Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from contentful_cma.core.domain.entities import (
    Asset,
    ContentType,
    Entry,
    Locale,
    Membership,
    Role,
)
from contentful_cma.core.domain.models import Collection, Entity
from contentful_cma.core.errors import RequestError

RowBuilder = Callable[[Entity, str], list[str]]


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _asset_row(asset: Asset, locale: str) -> list[str]:
    file = asset.fields.file.get(locale)
    return [
        _text(asset.fields.title.get(locale)),
        _text(file.file_name if file else None),
        _text(file.content_type if file else None),
    ]


def _membership_row(membership: Membership, locale: str) -> list[str]:
    roles = ", ".join(r.id or "?" for r in membership.roles)
    return [_text(membership.email), "yes" if membership.admin else "no", roles]


def _role_row(role: Role, locale: str) -> list[str]:
    return [_text(role.name), _text(role.description), str(len(role.policies))]


def _content_type_row(content_type: ContentType, locale: str) -> list[str]:
    return [_text(content_type.name), _text(content_type.display_field), str(len(content_type.fields))]


def _locale_row(item: Locale, locale: str) -> list[str]:
    return [_text(item.code), _text(item.name), "yes" if item.default else "no"]


def _entry_row(entry: Entry, locale: str) -> list[str]:
    return [_text(entry.content_type_id), ", ".join(sorted(entry.fields))]


_COLUMNS: dict[type[Entity], tuple[list[str], RowBuilder]] = {
    Asset: (["Title", "File", "MIME"], _asset_row),  # type: ignore[dict-item]
    Membership: (["Email", "Admin", "Roles"], _membership_row),  # type: ignore[dict-item]
    Role: (["Name", "Description", "Policies"], _role_row),  # type: ignore[dict-item]
    ContentType: (["Name", "Display field", "Fields"], _content_type_row),  # type: ignore[dict-item]
    Locale: (["Code", "Name", "Default"], _locale_row),  # type: ignore[dict-item]
    Entry: (["Content type", "Fields"], _entry_row),  # type: ignore[dict-item]
}


def build_entities_table(
    *,
    title: str,
    entity_cls: type[Entity],
    entities: Iterable[Entity],
    locale: str,
) -> Table:
    """Tabla Rich con `ID`, `Version` y las columnas propias del recurso."""

    extra_columns, row_builder = _COLUMNS[entity_cls]

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Version", style="dim", justify="right")
    for name in extra_columns:
        table.add_column(name, style="white")

    for entity in entities:
        table.add_row(
            _text(entity.sys.id),
            _text(entity.sys.version),
            *row_builder(entity, locale),
        )
    return table


def page_caption(page: Collection) -> str:
    return f"skip={page.skip} limit={page.limit} total={page.total}"


def build_error_panel(error: RequestError) -> Panel:
    """Panel para presentar un `RequestError` de la API."""

    body = Text()
    body.append(f"HTTP {error.status_code}", style="bold")
    if error.method or error.url:
        body.append(f"  {error.method} {error.url}\n", style="dim")
    if error.error_id:
        body.append(f"\n{error.error_id}", style="bold red")
    if error.error and error.error.message:
        body.append(f": {error.error.message}")
    if error.error and error.error.request_id:
        body.append(f"\nrequest id: {error.error.request_id}", style="dim")
    return Panel(body, title=Text("API error", style="bold red"), border_style="red")


def print_entity_json(console: Console, entity: Entity) -> None:
    console.print_json(data=entity.to_wire())
