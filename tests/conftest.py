"""Pytest fixtures compartidos."""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import Characters
from core.domain.result import NetworkResult

RICK = {
    "id": 1,
    "name": "Rick Sanchez",
    "status": "Alive",
    "species": "Human",
    "image": "https://rickandmortyapi.com/api/character/avatar/1.jpeg",
}
MORTY_DEAD = {
    "id": 2,
    "name": "Morty Smith",
    "status": "Dead",
    "image": "https://rickandmortyapi.com/api/character/avatar/2.jpeg",
}


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_base_url="https://rickandmortyapi.test/",
        http_timeout_seconds=2.0,
    )


@pytest.fixture
def characters_payload() -> dict[str, Any]:
    return {
        "info": {"count": 2, "pages": 1, "next": None, "prev": None},
        "results": [RICK, MORTY_DEAD],
    }


def mock_transport(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


class StubRepository:
    """Repositorio en memoria; opcionalmente bloquea hasta `release()`."""

    def __init__(self, result: NetworkResult[Characters], *, gated: bool = False) -> None:
        self.result = result
        self.calls = 0
        self._gate = asyncio.Event()
        if not gated:
            self._gate.set()

    def release(self) -> None:
        self._gate.set()

    async def fetch_characters(self) -> AsyncIterator[NetworkResult[Characters]]:
        self.calls += 1
        await self._gate.wait()
        yield self.result


async def collect(stream: AsyncIterator[Any]) -> list[Any]:
    return [item async for item in stream]
