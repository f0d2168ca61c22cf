"""CLI de contentful-cma (Typer + Rich).

Un sub-comando por recurso con `list`, `get` y `delete`:

    contentful-cma assets list <space_id> --all --output assets.json
    contentful-cma memberships get <space_id> <membership_id>
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from contentful_cma.adapters.json_exporter import export_entities_json
from contentful_cma.cli import doctor
from contentful_cma.cli.ui_components import (
    build_entities_table,
    build_error_panel,
    page_caption,
    print_entity_json,
)
from contentful_cma.client import CMAClient
from contentful_cma.core.config import CMASettings
from contentful_cma.core.errors import RequestError
from contentful_cma.core.services.base import ResourceService
from contentful_cma.core.services.pagination import Query

app = typer.Typer(
    name="contentful-cma",
    help="Content Management API client.",
    no_args_is_help=True,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

ServiceGetter = Callable[[CMAClient], ResourceService]


def build_cma_client(environment: str | None = None) -> CMAClient:
    """Crea el cliente a partir de la configuración (env/.env)."""

    settings = CMASettings()
    if not settings.access_token:
        _console.print(
            "[red]No access token configured.[/red] "
            "Set CONTENTFUL_CMA_ACCESS_TOKEN or run `contentful-cma doctor configure`."
        )
        raise typer.Exit(code=2)
    return CMAClient(settings, environment=environment)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests."),
) -> None:
    """Content Management API client."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _resource_app(name: str, service_getter: ServiceGetter) -> typer.Typer:
    sub = typer.Typer(help=f"Manage {name}.", no_args_is_help=True)

    @sub.command("list")
    def list_command(
        space_id: str = typer.Argument(..., help="Space ID."),
        limit: Optional[int] = typer.Option(None, "--limit", min=1, max=1000, help="Page size."),
        all_pages: bool = typer.Option(False, "--all", help="Fetch every page."),
        environment: Optional[str] = typer.Option(None, "--environment", "-e"),
        output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
    ) -> None:
        """List entities (first page unless --all)."""

        with build_cma_client(environment) as cma:
            service = service_getter(cma)
            query = Query(limit=limit or cma.settings.page_limit)
            iterator = service.list(space_id, query)
            entities = []
            caption = ""
            try:
                for page in iterator:
                    entities.extend(page.items)
                    caption = page_caption(page)
                    if not all_pages:
                        break
            except RequestError as exc:
                _console.print(build_error_panel(exc))
                raise typer.Exit(code=1) from exc

            table = build_entities_table(
                title=name,
                entity_cls=service.entity_cls,
                entities=entities,
                locale=cma.settings.default_locale,
            )
            table.caption = caption
            _console.print(table)

        if output is not None:
            path = export_entities_json(entities=entities, output_path=output)
            _console.print(f"[green]Saved {len(entities)} {name} to:[/green] {path}")

    @sub.command("get")
    def get_command(
        space_id: str = typer.Argument(..., help="Space ID."),
        entity_id: str = typer.Argument(..., help="Entity ID."),
        environment: Optional[str] = typer.Option(None, "--environment", "-e"),
        output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
    ) -> None:
        """Show one entity as JSON."""

        with build_cma_client(environment) as cma:
            try:
                entity = service_getter(cma).get(space_id, entity_id)
            except RequestError as exc:
                _console.print(build_error_panel(exc))
                raise typer.Exit(code=1) from exc

        print_entity_json(_console, entity)
        if output is not None:
            export_entities_json(entities=[entity], output_path=output)

    @sub.command("delete")
    def delete_command(
        space_id: str = typer.Argument(..., help="Space ID."),
        entity_id: str = typer.Argument(..., help="Entity ID."),
        environment: Optional[str] = typer.Option(None, "--environment", "-e"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
    ) -> None:
        """Delete one entity."""

        if not yes and not typer.confirm(f"Delete {entity_id} from {name}?"):
            raise typer.Abort()

        with build_cma_client(environment) as cma:
            try:
                service_getter(cma).delete(space_id, entity_id)
            except RequestError as exc:
                _console.print(build_error_panel(exc))
                raise typer.Exit(code=1) from exc

        _console.print(f"[green]Deleted[/green] {entity_id}")

    return sub


app.add_typer(_resource_app("assets", lambda cma: cma.assets), name="assets")
app.add_typer(_resource_app("memberships", lambda cma: cma.memberships), name="memberships")
app.add_typer(_resource_app("roles", lambda cma: cma.roles), name="roles")
app.add_typer(_resource_app("content types", lambda cma: cma.content_types), name="content-types")
app.add_typer(_resource_app("locales", lambda cma: cma.locales), name="locales")
app.add_typer(_resource_app("entries", lambda cma: cma.entries), name="entries")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
