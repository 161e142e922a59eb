"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `render_state` es el único punto que decide cómo se ve cada variante de
  `NetworkResult`; maneja las tres sin excepción.
"""

from __future__ import annotations

from typing import Any, assert_never

from rich.align import Align
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from core.domain.models import Characters
from core.domain.result import Error, Loading, NetworkResult, Success


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite en modo `--json` para no ensuciar la salida.
    """

    title = Text("character-feed", style="bold cyan")
    subtitle = Text("Rick and Morty API • personajes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_characters_table(characters: Characters) -> Table:
    table = Table(title="Characters")
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Name", style="white")
    table.add_column("Status", no_wrap=True)
    table.add_column("Image", style="magenta")
    for character in characters.results:
        status = Text("●", style="green") if character.is_alive else Text("●", style="red")
        table.add_row(str(character.id), character.name, status, character.image_url)
    return table


def render_state(state: NetworkResult[Characters]) -> RenderableType:
    match state:
        case Loading():
            return Spinner("dots", text="Loading characters...")
        case Error(message=message):
            return Text(message or "", style="bold red")
        case Success(data=characters):
            return build_characters_table(characters)
        case _:
            assert_never(state)


def state_to_json(state: NetworkResult[Characters]) -> dict[str, Any]:
    """Representación JSON estable del estado (para `--json`)."""

    match state:
        case Loading():
            return {"state": "loading"}
        case Error(message=message):
            return {"state": "error", "message": message}
        case Success(data=characters):
            return {"state": "success", "data": characters.model_dump(mode="json")}
        case _:
            assert_never(state)
