"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `frozen=True`: un personaje no cambia una vez construido.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene. La
  forma cruda de la API (campos opcionales, status como texto) vive en
  `adapters.wire`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Character(BaseModel):
    """Un personaje ya normalizado (sin campos nulos)."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Identificador numérico del personaje (0 si la API no lo envía).",
    )
    name: str = Field(
        ...,
        description="Nombre del personaje (vacío si la API no lo envía).",
    )
    is_alive: bool = Field(
        ...,
        description="True solo si la API reporta status 'Alive'.",
    )
    image_url: str = Field(
        ...,
        description="URL del avatar (vacía si la API no la envía).",
    )


class Characters(BaseModel):
    """Colección ordenada de personajes.

    Una colección vacía es un estado válido, no un error.
    """

    model_config = ConfigDict(frozen=True)

    results: tuple[Character, ...] = Field(
        default=(),
        description="Personajes en el orden recibido de la API.",
    )

    @property
    def is_empty(self) -> bool:
        return not self.results
