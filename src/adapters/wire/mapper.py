"""Mapeo wire -> dominio.

Función pura: nunca falla y no tiene efectos. Los datos faltantes se
degradan a defaults (`0`, `""`, `False`).
"""

from __future__ import annotations

from typing import Sequence

from adapters.wire.models import CharacterResponse, CharacterStatusResponse
from core.domain.models import Character, Characters


def map_character(raw: CharacterResponse) -> Character:
    return Character(
        id=raw.id if raw.id is not None else 0,
        name=raw.name if raw.name is not None else "",
        is_alive=raw.status is CharacterStatusResponse.ALIVE,
        image_url=raw.image if raw.image is not None else "",
    )


def map_characters(results: Sequence[CharacterResponse] | None) -> Characters:
    """Convierte la lista cruda en `Characters`; `None`/vacía -> colección vacía."""

    if not results:
        return Characters(results=())
    return Characters(results=tuple(map_character(raw) for raw in results))
