"""Tests for CharactersRepositoryImpl."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest

from adapters.characters_api import ApiResponse, HttpCharactersApi
from adapters.characters_repository import CharactersRepositoryImpl
from adapters.http_client import build_async_client
from adapters.wire import CharactersResponse
from core.config import AppSettings
from core.domain.models import Character, Characters
from core.domain.result import Error, Success
from core.interfaces.characters import CharactersRepository
from conftest import collect, mock_transport


def _repository(api_response: ApiResponse | None = None, *, side_effect: BaseException | None = None):
    api = AsyncMock()
    api.get_characters = AsyncMock(return_value=api_response, side_effect=side_effect)
    return CharactersRepositoryImpl(api), api


def test_implements_repository_protocol() -> None:
    repository, _ = _repository(ApiResponse(status_code=200))
    assert isinstance(repository, CharactersRepository)


@pytest.mark.asyncio
async def test_success_emits_single_mapped_value() -> None:
    body = CharactersResponse.model_validate(
        {"results": [{"id": 1, "name": "Rick", "status": "Alive", "image": "u"}]}
    )
    repository, api = _repository(ApiResponse(status_code=200, body=body))

    emitted = await collect(repository.fetch_characters())

    assert emitted == [Success(data=Characters(results=(Character(id=1, name="Rick", is_alive=True, image_url="u"),)))]
    api.get_characters.assert_awaited_once()


@pytest.mark.asyncio
async def test_success_with_empty_results_is_success() -> None:
    repository, _ = _repository(ApiResponse(status_code=200, body=CharactersResponse(results=[])))

    emitted = await collect(repository.fetch_characters())

    assert emitted == [Success(data=Characters(results=()))]


@pytest.mark.asyncio
async def test_http_error_status_emits_error_with_code() -> None:
    repository, _ = _repository(ApiResponse(status_code=404))

    emitted = await collect(repository.fetch_characters())

    assert len(emitted) == 1
    assert isinstance(emitted[0], Error)
    assert "404" in (emitted[0].message or "")
    assert emitted[0] == Error(message="Error occurred: 404")


@pytest.mark.asyncio
async def test_missing_body_emits_error_instead_of_nothing() -> None:
    repository, _ = _repository(ApiResponse(status_code=200, body=None))

    emitted = await collect(repository.fetch_characters())

    assert emitted == [Error(message="Empty response body: 200")]


@pytest.mark.asyncio
async def test_transport_failure_message_is_propagated() -> None:
    repository, _ = _repository(side_effect=TimeoutError("timeout"))

    emitted = await collect(repository.fetch_characters())

    assert emitted == [Error(message="timeout")]


@pytest.mark.asyncio
async def test_transport_failure_without_message_is_absent() -> None:
    repository, _ = _repository(side_effect=RuntimeError())

    emitted = await collect(repository.fetch_characters())

    assert emitted == [Error(message=None)]


@pytest.mark.asyncio
async def test_cancellation_is_not_swallowed() -> None:
    repository, _ = _repository(side_effect=asyncio.CancelledError())

    with pytest.raises(asyncio.CancelledError):
        await collect(repository.fetch_characters())


@pytest.mark.asyncio
async def test_each_fetch_calls_transport_once() -> None:
    repository, api = _repository(ApiResponse(status_code=500))

    await collect(repository.fetch_characters())
    await collect(repository.fetch_characters())

    assert api.get_characters.await_count == 2


@pytest.mark.asyncio
async def test_end_to_end_over_mock_transport(settings: AppSettings, characters_payload: dict) -> None:
    client = build_async_client(settings, transport=mock_transport(lambda r: httpx.Response(200, json=characters_payload)))
    async with client:
        repository = CharactersRepositoryImpl(HttpCharactersApi(client))
        emitted = await collect(repository.fetch_characters())

    assert len(emitted) == 1
    result = emitted[0]
    assert isinstance(result, Success)
    assert [(c.id, c.is_alive) for c in result.data.results] == [(1, True), (2, False)]


@pytest.mark.asyncio
async def test_end_to_end_malformed_payload_becomes_error(settings: AppSettings) -> None:
    client = build_async_client(settings, transport=mock_transport(lambda r: httpx.Response(200, content=b"<html>")))
    async with client:
        repository = CharactersRepositoryImpl(HttpCharactersApi(client))
        emitted = await collect(repository.fetch_characters())

    assert len(emitted) == 1
    assert isinstance(emitted[0], Error)
    assert emitted[0].message
