"""CLI principal (Typer).

Comandos:
- `list`: obtiene los personajes y los muestra (tabla o JSON).
- `doctor`: diagnósticos de configuración y conectividad.
"""

from __future__ import annotations

import asyncio
import json
from contextlib import aclosing
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.live import Live

from adapters.http_client import check_base_url
from cli import doctor
from cli.container import build_container
from cli.ui_components import print_banner, render_state, state_to_json
from core.config import AppSettings
from core.domain.models import Characters
from core.domain.result import Error, NetworkResult, is_settled
from core.logger import setup_logger

app = typer.Typer(no_args_is_help=True, help="Rick and Morty characters client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


async def _collect_characters(settings: AppSettings, *, live: Live | None) -> NetworkResult[Characters]:
    async with build_container(settings) as container:
        view_model = container.characters_view_model()
        try:
            async with aclosing(view_model.characters.watch()) as states:
                async for state in states:
                    if live is not None:
                        live.update(render_state(state))
                    if is_settled(state):
                        return state
        finally:
            await view_model.aclose()
    raise RuntimeError("characters state stream ended without a result")  # pragma: no cover


@app.command(name="list")
def list_characters(
    as_json: bool = typer.Option(False, "--json", help="Imprime el resultado como JSON."),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Sobrescribe la base URL de la API."),
) -> None:
    """Descarga y muestra el listado de personajes."""

    settings = AppSettings()
    if base_url:
        try:
            base_url = check_base_url(base_url)
        except httpx.InvalidURL as exc:
            raise typer.BadParameter(str(exc), param_hint="--base-url") from exc
        settings = settings.model_copy(update={"api_base_url": base_url})
    setup_logger(settings.log_level)

    if as_json:
        state = asyncio.run(_collect_characters(settings, live=None))
        typer.echo(json.dumps(state_to_json(state), ensure_ascii=False, indent=2))
    else:
        print_banner(_console)
        with Live(console=_console, refresh_per_second=12, transient=False) as live:
            state = asyncio.run(_collect_characters(settings, live=live))

    if isinstance(state, Error):
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
