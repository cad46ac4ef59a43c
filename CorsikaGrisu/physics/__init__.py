"""Physics modules: constants and atmospheric profiles."""

from .atmosphere import (
    AtmosphereModel,
    LinsleyAtmosphere,
    TabulatedAtmosphere,
    init_atmosphere
)

__all__ = [
    'AtmosphereModel',
    'LinsleyAtmosphere',
    'TabulatedAtmosphere',
    'init_atmosphere'
]
