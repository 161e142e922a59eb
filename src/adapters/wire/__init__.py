from adapters.wire.mapper import map_character, map_characters
from adapters.wire.models import (
    CharacterResponse,
    CharactersResponse,
    CharacterStatusResponse,
)

__all__ = [
    "CharacterResponse",
    "CharactersResponse",
    "CharacterStatusResponse",
    "map_character",
    "map_characters",
]
