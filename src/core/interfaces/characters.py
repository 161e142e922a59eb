"""Contrato del repositorio de personajes.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El caso de uso depende de esta abstracción; la implementación HTTP vive en
  `adapters` y es intercambiable por stubs en tests.
"""

from __future__ import annotations

from typing import AsyncIterator, Protocol, runtime_checkable

from core.domain.models import Characters
from core.domain.result import NetworkResult


@runtime_checkable
class CharactersRepository(Protocol):
    """Fuente de personajes.

    Reglas de diseño:
    - `fetch_characters` devuelve un stream asíncrono de un solo valor: emite
      exactamente un `NetworkResult` y termina.
    - Nunca lanza por fallos de red/protocolo; los expresa como `Error`.
    """

    def fetch_characters(self) -> AsyncIterator[NetworkResult[Characters]]:
        ...
