"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base_url, timeouts, headers y logging de requests/responses.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.logger import get_logger

logger = get_logger(__name__)


def _build_event_hooks(settings: AppSettings) -> dict[str, list]:
    """Hooks de logging equivalentes a un interceptor HTTP."""

    async def log_request(request: httpx.Request) -> None:
        logger.info("--> %s %s", request.method, request.url)

    async def log_response(response: httpx.Response) -> None:
        request = response.request
        logger.info("<-- %s %s %s", response.status_code, request.method, request.url)
        if settings.log_http_bodies:
            body = await response.aread()
            logger.debug("<-- body (%d bytes): %s", len(body), body.decode("utf-8", errors="replace"))

    return {"request": [log_request], "response": [log_response]}


def check_base_url(url: str) -> str:
    """Valida una base URL http(s) antes de persistirla o usarla.

    Lanza `httpx.InvalidURL` si no se puede parsear o no tiene host.
    """

    url = url.strip()
    parsed = httpx.URL(url)
    if parsed.scheme not in ("http", "https"):
        raise httpx.InvalidURL("url must start with http:// or https://")
    if not parsed.host:
        raise httpx.InvalidURL("url must include a host")
    return url


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a la API configurada.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        event_hooks=_build_event_hooks(settings),
        transport=transport,
    )
