"""Configuración de logging.

Por qué centralizado:
- Un único punto que decide handlers/formato; el resto del código solo pide
  `get_logger(__name__)`.
- Logs a stderr para no mezclar con la salida de la CLI (tablas/JSON).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "character_feed"


def setup_logger(level: int | str = logging.WARNING) -> logging.Logger:
    """Configura y devuelve el logger raíz de la aplicación.

    Idempotente: si ya tiene handlers solo ajusta el nivel.
    """

    log = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        # Un nombre desconocido lanza ValueError en setLevel.
        level = level.strip().upper()
    log.setLevel(level)
    if log.handlers:
        return log

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s", datefmt="%H:%M:%S"))
    log.addHandler(handler)
    return log


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger hijo de `character_feed` (p.ej. `character_feed.adapters.http_client`)."""

    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
