"""CORSIKA to kascade particle ID mapping."""

from types import MappingProxyType
from typing import Mapping, Optional


UNKNOWN_PARTICLE_MARKER = 'unknown particle (for kascade)'

CORSIKA_TO_KASCADE = {
    1: 1,    # gamma
    2: 2,    # positron
    3: 3,    # electron
    5: 4,    # mu+
    6: 5,    # mu-
    7: 6,    # pi0
    8: 7,    # pi+
    9: 8,    # pi-
    11: 9,   # K+
    12: 10,  # K-
    10: 11,  # K0 long
    16: 12,  # K0 short
    14: 13,  # proton
    13: 14,  # neutron
}


class ParticleMap:
    """Read-only lookup from CORSIKA particle codes to kascade codes.
    
    Attributes:
        table: Read-only view of the mapping
    """
    
    def __init__(self):
        self._particles = dict(CORSIKA_TO_KASCADE)
        self.table: Mapping[int, int] = MappingProxyType(self._particles)
    
    def lookup(self, code: int) -> Optional[int]:
        """Return the kascade code for a CORSIKA code, or None if unmapped."""
        return self.table.get(int(code))
    
    def __contains__(self, code) -> bool:
        return int(code) in self.table
    
    def __len__(self) -> int:
        return len(self.table)
