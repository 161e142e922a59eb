"""Modelos del esquema de la API (wire).

Idea:
- La API remota no es de fiar: todos los campos son opcionales.
- `status` llega como texto ("Alive", "Dead", "unknown"); cualquier otro valor
  se trata como ausente en vez de invalidar el payload completo.
- Ignoramos claves extra (`species`, `origin`, `info`, ...).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.models import Characters


class CharacterStatusResponse(str, Enum):
    ALIVE = "Alive"
    DEAD = "Dead"
    UNKNOWN = "unknown"


class CharacterResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str | None = None
    status: CharacterStatusResponse | None = None
    image: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _unknown_status_as_none(cls, value: Any) -> Any:
        if value is None or isinstance(value, CharacterStatusResponse):
            return value
        try:
            return CharacterStatusResponse(value)
        except ValueError:
            return None


class CharactersResponse(BaseModel):
    """Cuerpo de `GET /api/character`."""

    model_config = ConfigDict(extra="ignore")

    results: list[CharacterResponse] | None = Field(
        default=None,
        description="Personajes de la página devuelta (la paginación se ignora).",
    )

    def to_domain(self) -> Characters:
        from adapters.wire.mapper import map_characters  # noqa: PLC0415

        return map_characters(self.results)
