"""View models: estado observable para la capa de presentación.

No conocen HTTP ni la CLI; solo consumen casos de uso del Core.
"""

from core.viewmodels.characters import CharactersViewModel

__all__ = ["CharactersViewModel"]
