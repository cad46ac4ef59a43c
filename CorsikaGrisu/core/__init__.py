"""Core conversion components."""

from .data_models import (
    RunHeaderBuffer,
    ShowerEvent,
    PhotonBunch,
    RunHeaderInfo,
    InputCardHeader
)
from .coordinates import (
    reduce_angle,
    transform_azimuth,
    transform_position,
    transform_coordinates
)
from .particle_map import ParticleMap, UNKNOWN_PARTICLE_MARKER
from .line_format import LineFormat, format_number, format_line
from .output_sink import OutputSink
from .grisu_writer import GrisuWriter
from .input_manager import InputManager, CorsikaRecords
from .converter import GrisuConverter

__all__ = [
    'RunHeaderBuffer',
    'ShowerEvent',
    'PhotonBunch',
    'RunHeaderInfo',
    'InputCardHeader',
    'reduce_angle',
    'transform_azimuth',
    'transform_position',
    'transform_coordinates',
    'ParticleMap',
    'UNKNOWN_PARTICLE_MARKER',
    'LineFormat',
    'format_number',
    'format_line',
    'OutputSink',
    'GrisuWriter',
    'InputManager',
    'CorsikaRecords',
    'GrisuConverter'
]
