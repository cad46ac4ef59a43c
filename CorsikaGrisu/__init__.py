"""
CORSIKA to GrIsu photon list conversion

Writes CORSIKA Cherenkov photon bunches, shower parameters and run
information as GrIsu readable text, transforming coordinates and
particle IDs to the kascade conventions.
"""

__version__ = "0.1.0"

from .core.grisu_writer import GrisuWriter
from .core.converter import GrisuConverter
from .utils.config import ConverterConfig

__all__ = ['GrisuWriter', 'GrisuConverter', 'ConverterConfig']
