"""Caso de uso: obtener el listado de personajes.

Existe para que la capa de presentación no conozca el repositorio concreto.
No contiene lógica propia: devuelve el stream del repositorio tal cual.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterator

from core.domain.models import Characters
from core.domain.result import NetworkResult
from core.interfaces.characters import CharactersRepository


@dataclass(slots=True)
class GetCharactersUseCase:
    repository: CharactersRepository

    def __call__(self) -> AsyncIterator[NetworkResult[Characters]]:
        return self.repository.fetch_characters()
