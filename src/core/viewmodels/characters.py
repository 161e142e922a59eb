"""View model del listado de personajes.

Ciclo de vida (una instancia = un fetch):
- Al construirse publica `Loading` y lanza una única tarea que consume el
  stream del caso de uso en el event loop en curso; no bloquea.
- La emisión (exactamente una) reemplaza el estado: `Success` o `Error`.
  Nunca se vuelve a `Loading`.
- `dispose()` cancela la tarea en vuelo; después no hay más escrituras.
"""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Callable

from core.domain.models import Characters
from core.domain.result import Loading, NetworkResult
from core.logger import get_logger
from core.state.flow import MutableStateFlow, StateFlow

logger = get_logger(__name__)

GetCharacters = Callable[[], AsyncIterator[NetworkResult[Characters]]]


class CharactersViewModel:
    def __init__(self, get_characters: GetCharacters) -> None:
        self._get_characters = get_characters
        self._characters: MutableStateFlow[NetworkResult[Characters]] = MutableStateFlow(Loading())
        self._disposed = False
        # Requiere un loop en marcha, igual que un view model requiere su scope.
        self._task: asyncio.Task[None] = asyncio.get_running_loop().create_task(
            self._load_characters(),
            name="characters-view-model-fetch",
        )

    @property
    def characters(self) -> StateFlow[NetworkResult[Characters]]:
        return self._characters.as_state_flow()

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    async def _load_characters(self) -> None:
        async for result in self._get_characters():
            if self._disposed:
                return
            logger.debug("Characters state -> %s", type(result).__name__)
            self._characters.value = result

    async def wait_until_settled(self) -> NetworkResult[Characters]:
        """Espera a que termine el fetch y devuelve el estado resultante."""

        try:
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
        return self._characters.value

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if not self._task.done():
            logger.debug("Cancelling in-flight characters fetch")
            self._task.cancel()

    async def aclose(self) -> None:
        """`dispose()` y espera a que la cancelación se complete."""

        self.dispose()
        try:
            await self._task
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
