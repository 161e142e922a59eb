"""Transporte HTTP de la API de personajes.

Contrato:
- `get_characters()` hace un `GET /api/character` y devuelve un `ApiResponse`
  (éxito a nivel HTTP, status code y cuerpo decodificado opcional).
- Si la llamada falla antes de obtener respuesta (red, timeout) o el cuerpo
  no se puede decodificar, lanza. El repositorio traduce eso a `Error`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

from adapters.wire.models import CharactersResponse

CHARACTERS_PATH = "/api/character"


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: CharactersResponse | None = None

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class CharactersApi(Protocol):
    async def get_characters(self) -> ApiResponse:
        ...


class HttpCharactersApi(CharactersApi):
    """Implementación sobre un `httpx.AsyncClient` ya configurado.

    El cliente lo crea y cierra quien compone la aplicación
    (ver `cli.container`), no este adaptador.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_characters(self) -> ApiResponse:
        response = await self._client.get(CHARACTERS_PATH)
        if not response.is_success:
            return ApiResponse(status_code=response.status_code)

        # Cuerpo vacío o `null` -> sin body; JSON inválido -> lanza.
        if not response.content.strip():
            return ApiResponse(status_code=response.status_code)
        payload = response.json()
        if payload is None:
            return ApiResponse(status_code=response.status_code)
        return ApiResponse(
            status_code=response.status_code,
            body=CharactersResponse.model_validate(payload),
        )
