"""Core data models for CORSIKA records."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Protocol, Sequence, TextIO, Tuple, Union

import numpy as np

from ..physics import constants as const
from ..utils.validation import InvalidRecordError


@dataclass
class RunHeaderBuffer:
    """CORSIKA header block as a float32 vector.

    Positions follow the CORSIKA event header layout; only the fields
    written to the GrIsu header are exposed by name.

    Attributes:
        values: Header words [N], N >= 72
    """
    values: np.ndarray

    def __post_init__(self):
        self.values = np.asarray(self.values, dtype=np.float32).ravel()
        if len(self.values) < const.RUNH_MIN_LENGTH:
            raise InvalidRecordError(
                f"Run header buffer needs at least {const.RUNH_MIN_LENGTH} "
                f"entries, got {len(self.values)}"
            )

    def __getitem__(self, index):
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    @property
    def primary_id(self) -> int:
        """CORSIKA particle code of the primary."""
        return int(self.values[const.RUNH_PRIMARY_ID])

    @property
    def zenith(self) -> np.float32:
        """Primary zenith angle in radians."""
        return self.values[const.RUNH_ZENITH]

    @property
    def azimuth(self) -> np.float32:
        """Primary azimuth angle in radians (CORSIKA coordinates)."""
        return self.values[const.RUNH_AZIMUTH]

    @property
    def run_number(self) -> int:
        return int(self.values[const.RUNH_RUN_NUMBER])

    @property
    def date(self) -> int:
        return int(self.values[const.RUNH_DATE])

    @property
    def version(self) -> np.float32:
        return self.values[const.RUNH_VERSION]

    @property
    def observation_height(self) -> np.float32:
        """Observation level in cm."""
        return self.values[const.RUNH_OBSERVATION_HEIGHT]

    @property
    def spectral_slope(self) -> np.float32:
        return self.values[const.RUNH_SPECTRAL_SLOPE]

    @property
    def energy_range(self) -> Tuple[np.float32, np.float32]:
        """Primary energy range (min, max) in GeV."""
        return self.values[const.RUNH_ENERGY_MIN], self.values[const.RUNH_ENERGY_MAX]

    @property
    def energy_cuts(self) -> np.ndarray:
        """Energy cuts (hadrons, muons, electrons, photons) in GeV."""
        return self.values[const.RUNH_ENERGY_CUTS]

    @property
    def magnetic_field(self) -> Tuple[np.float32, np.float32]:
        """Magnetic field components (x, z) in uT."""
        return self.values[const.RUNH_BX], self.values[const.RUNH_BZ]


@dataclass
class ShowerEvent:
    """Simulated shower parameters of one event.

    Attributes:
        energy: Primary energy in TeV
        azimuth: Primary azimuth in degrees (CORSIKA coordinates)
        altitude: Primary altitude in degrees
        xcore: Core position x in m (CORSIKA coordinates)
        ycore: Core position y in m (CORSIKA coordinates)
        firstint: Height of first interaction in m
        shower_id: CORSIKA shower number
    """
    energy: float
    azimuth: float
    altitude: float
    xcore: float = 0.0
    ycore: float = 0.0
    firstint: float = 0.0
    shower_id: int = 0

    @classmethod
    def from_record(cls, record) -> 'ShowerEvent':
        """Create from a row of a structured numpy array."""
        return cls(
            energy=record['energy'],
            azimuth=record['azimuth'],
            altitude=record['altitude'],
            xcore=record['xcore'],
            ycore=record['ycore'],
            firstint=record['firstint'],
            shower_id=int(record['shower_id'])
        )


@dataclass
class PhotonBunch:
    """Cherenkov photon bunch hitting a telescope.

    Attributes:
        x: Position x in cm relative to the telescope (CORSIKA coordinates)
        y: Position y in cm relative to the telescope (CORSIKA coordinates)
        cx: Direction cosine along x
        cy: Direction cosine along y
        zem: Emission height in cm
        ctime: Arrival time in ns since first interaction
        wavelength: Wavelength in nm
        photons: Number of photons in the bunch
    """
    x: float
    y: float
    cx: float
    cy: float
    zem: float
    ctime: float
    wavelength: float
    photons: float = 1.0

    @classmethod
    def from_record(cls, record) -> 'PhotonBunch':
        """Create from a row of a structured numpy array."""
        names = record.dtype.names
        return cls(
            x=record['x'],
            y=record['y'],
            cx=record['cx'],
            cy=record['cy'],
            zem=record['zem'],
            ctime=record['ctime'],
            wavelength=record['wavelength'],
            photons=record['photons'] if 'photons' in names else 1.0
        )


class RunHeaderInfo(Protocol):
    """Anything that can print a descriptive run header block."""

    def print_header(self, stream: TextIO) -> None:
        ...


@dataclass
class InputCardHeader:
    """CORSIKA input card, copied verbatim into the GrIsu header.

    Attributes:
        lines: Input card lines without trailing newlines
    """
    lines: List[str] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'InputCardHeader':
        with open(path, 'r') as f:
            return cls([line.rstrip('\n') for line in f])

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> 'InputCardHeader':
        return cls([str(line) for line in lines])

    def print_header(self, stream: TextIO) -> None:
        for line in self.lines:
            stream.write(line + '\n')
