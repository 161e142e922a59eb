"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.characters_api import CHARACTERS_PATH
from adapters.http_client import build_async_client, check_base_url
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.logger import setup_logger

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings, path: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(path)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        # httpx.HTTPError o p.ej. httpx.InvalidURL (no hereda de HTTPError) con una base_url mal formada
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    setup_logger(settings.log_level)

    table = Table(title="character-feed Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings, CHARACTERS_PATH))
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Check network access or override the endpoint with "
            "`character-feed doctor set-base-url <URL>`."
        )
        raise typer.Exit(code=1)


@app.command(name="set-base-url")
def set_base_url(url: str = typer.Argument(..., help="Base URL de la API (p.ej. https://rickandmortyapi.com/).")) -> None:
    """Guarda la base URL en el .env de configuración del usuario."""

    try:
        url = check_base_url(url)
    except httpx.InvalidURL as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars({"CHARACTER_FEED_API_BASE_URL": url})
    _console.print(f"[green]Saved API base URL to:[/green] {env_path}")
