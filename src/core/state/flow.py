"""Estado observable con replay del último valor.

`MutableStateFlow` guarda un valor y lo difunde en cada escritura. Todo
suscriptor nuevo recibe el valor actual de forma síncrona al suscribirse y
luego cada reemplazo posterior.

Reglas:
- El valor se reemplaza entero (asignación única); nunca se muta in situ.
- Pensado para un único event loop: escrituras y notificaciones ocurren en
  el mismo hilo, así ningún observador ve un valor a medias.
- Un listener que lanza se loguea y no impide notificar al resto.
"""

from __future__ import annotations

import asyncio
from typing import AsyncGenerator, Callable, Generic, TypeVar

from core.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]
Unsubscribe = Callable[[], None]


class StateFlow(Generic[T]):
    """Vista de solo lectura sobre un `MutableStateFlow`."""

    def __init__(self, source: MutableStateFlow[T]) -> None:
        self._source = source

    @property
    def value(self) -> T:
        return self._source.value

    def subscribe(self, listener: Listener[T]) -> Unsubscribe:
        return self._source.subscribe(listener)

    def watch(self) -> AsyncGenerator[T, None]:
        return self._source.watch()


class MutableStateFlow(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Listener[T]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value
        for listener in list(self._listeners):
            self._notify(listener, new_value)

    def subscribe(self, listener: Listener[T]) -> Unsubscribe:
        """Registra `listener` y le entrega el valor actual inmediatamente."""

        self._listeners.append(listener)
        self._notify(listener, self._value)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def watch(self) -> AsyncGenerator[T, None]:
        """Itera el valor actual y luego cada reemplazo (no termina solo)."""

        queue: asyncio.Queue[T] = asyncio.Queue()
        unsubscribe = self.subscribe(queue.put_nowait)
        try:
            while True:
                yield await queue.get()
        finally:
            unsubscribe()

    def as_state_flow(self) -> StateFlow[T]:
        return StateFlow(self)

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    @staticmethod
    def _notify(listener: Listener[T], value: T) -> None:
        try:
            listener(value)
        except Exception:
            logger.exception("State listener %r failed", listener)
