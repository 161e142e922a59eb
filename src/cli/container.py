"""Composition root.

Construye las piezas en orden de dependencias y las pasa por referencia
explícita (sin registro global): cliente HTTP -> API -> repositorio ->
caso de uso -> view model.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from adapters.characters_api import CharactersApi, HttpCharactersApi
from adapters.characters_repository import CharactersRepositoryImpl
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.interfaces.characters import CharactersRepository
from core.services.get_characters import GetCharactersUseCase
from core.viewmodels.characters import CharactersViewModel


@dataclass
class AppContainer:
    settings: AppSettings
    client: httpx.AsyncClient
    api: CharactersApi
    repository: CharactersRepository
    get_characters: GetCharactersUseCase

    def characters_view_model(self) -> CharactersViewModel:
        """Nuevo view model (dispara su fetch); debe llamarse dentro del loop."""

        return CharactersViewModel(self.get_characters)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> AppContainer:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def build_container(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppContainer:
    settings = settings or AppSettings()
    client = build_async_client(settings, transport=transport)
    api = HttpCharactersApi(client)
    repository = CharactersRepositoryImpl(api)
    return AppContainer(
        settings=settings,
        client=client,
        api=api,
        repository=repository,
        get_characters=GetCharactersUseCase(repository),
    )
