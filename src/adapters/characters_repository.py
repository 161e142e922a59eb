"""Repositorio de personajes sobre la API HTTP.

Traduce cada desenlace del transporte a un único `NetworkResult`:
- 2xx con cuerpo   -> `Success(Characters)`
- 2xx sin cuerpo   -> `Error("Empty response body: <code>")`
- no 2xx           -> `Error("Error occurred: <code>")`
- excepción previa -> `Error(<mensaje de la excepción>)`
"""

from __future__ import annotations

from typing import AsyncIterator

from adapters.characters_api import CharactersApi
from core.domain.models import Characters
from core.domain.result import Error, NetworkResult, Success
from core.interfaces.characters import CharactersRepository
from core.logger import get_logger

logger = get_logger(__name__)


class CharactersRepositoryImpl(CharactersRepository):
    def __init__(self, api: CharactersApi) -> None:
        self._api = api

    async def fetch_characters(self) -> AsyncIterator[NetworkResult[Characters]]:
        yield await self._fetch_once()

    async def _fetch_once(self) -> NetworkResult[Characters]:
        try:
            response = await self._api.get_characters()
        except Exception as exc:
            logger.warning("Characters request failed: %r", exc)
            return Error(message=str(exc) or None)

        if not response.is_successful:
            logger.warning("Characters request returned HTTP %s", response.status_code)
            return Error(message=f"Error occurred: {response.status_code}")

        if response.body is None:
            # Un 2xx sin cuerpo también resuelve el stream (nunca queda en Loading).
            logger.warning("Characters request returned HTTP %s without body", response.status_code)
            return Error(message=f"Empty response body: {response.status_code}")

        characters = response.body.to_domain()
        logger.debug("Fetched %d characters", len(characters.results))
        return Success(data=characters)
