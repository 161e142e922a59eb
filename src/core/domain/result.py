"""Contenedor de resultado de red: `Loading | Success(data) | Error(message)`.

Por qué una unión cerrada y no una jerarquía:
- Cada variante es un dataclass congelado independiente; `NetworkResult` es
  la unión. Los consumidores hacen `match` sobre las tres variantes y cierran
  con `assert_never`, así un checker de tipos detecta casos no manejados.
- Es el único canal para datos *y* fallos: ninguna excepción cruza la
  frontera repositorio -> caso de uso -> view model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Loading:
    """Fetch en curso; sin payload."""


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    data: T


@dataclass(frozen=True, slots=True)
class Error:
    message: str | None = None


NetworkResult = Union[Loading, Success[T], Error]


def is_settled(result: NetworkResult[T]) -> bool:
    """True para `Success`/`Error` (estados terminales)."""

    return not isinstance(result, Loading)
