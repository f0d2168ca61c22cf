"""Doctor command for environment diagnostics."""

from __future__ import annotations

from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from contentful_cma.adapters.http_client import build_client
from contentful_cma.core.config import CMASettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def check_api(settings: CMASettings, space_id: str | None = None) -> tuple[bool, str]:
    """Hit the API once and report the HTTP status.

    Without a space this only checks connectivity; with one it also checks
    the token can read the space's roles.
    """

    path = f"/spaces/{space_id}/roles" if space_id else "/"
    try:
        with build_client(settings) as client:
            response = client.get(path, params={"limit": "1"} if space_id else None)
    except httpx.HTTPError as exc:
        return False, str(exc)
    ok = response.is_success if space_id else True
    return ok, f"HTTP {response.status_code}"


@app.command()
def run(
    space_id: Optional[str] = typer.Option(None, "--space", "-s", help="Space used to check token access."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = CMASettings()

    table = Table(title="contentful-cma Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.access_token:
        table.add_row("Access token", "OK", f"...{settings.access_token[-4:]}")
    else:
        table.add_row("Access token", "MISSING", "Run `contentful-cma doctor configure`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Environment", "OK", settings.environment or "(space level)")
    table.add_row("Default locale", "OK", settings.default_locale)

    ok_http, detail_http = check_api(settings, space_id)
    table.add_row("API access" if space_id else "HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.access_token or not ok_http:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = CMASettings()
    token = typer.prompt("CMA access token", hide_input=True).strip()
    base_url = typer.prompt("Base URL", default=settings.base_url, show_default=True).strip()
    environment = typer.prompt("Environment (blank for space level)", default="", show_default=False).strip()
    locale = typer.prompt("Default locale", default=settings.default_locale, show_default=True).strip()

    if not token:
        raise typer.BadParameter("access token is required")

    env_path = write_user_env_vars(
        {
            "CONTENTFUL_CMA_ACCESS_TOKEN": token,
            "CONTENTFUL_CMA_BASE_URL": base_url or None,
            "CONTENTFUL_CMA_ENVIRONMENT": environment or None,
            "CONTENTFUL_CMA_DEFAULT_LOCALE": locale or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
