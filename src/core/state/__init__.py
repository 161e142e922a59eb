"""Contenedores de estado observable (replay-latest) para la presentación."""

from core.state.flow import MutableStateFlow, StateFlow

__all__ = ["MutableStateFlow", "StateFlow"]
