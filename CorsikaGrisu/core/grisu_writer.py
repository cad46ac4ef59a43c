"""Writer for GrIsu readable photon lists from CORSIKA records.

Coordinate transformations:

- CORSIKA: x to north, y to west, z upwards (z = 0 at observation level),
  azimuth counter-clockwise
- kascade: x to east, y to south, z downwards, azimuth clockwise

Record quantities are kept in single precision, as delivered by CORSIKA.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np

from .coordinates import transform_azimuth, transform_coordinates
from .data_models import PhotonBunch, RunHeaderBuffer, RunHeaderInfo, ShowerEvent
from .line_format import (
    HEADER_FORMAT,
    RECORD_FORMAT,
    SIGNED_RECORD_FORMAT,
    format_fields,
    format_line,
    format_number
)
from .output_sink import OutputSink
from .particle_map import ParticleMap, UNKNOWN_PARTICLE_MARKER
from ..physics.atmosphere import AtmosphereModel, init_atmosphere
from ..physics.constants import (
    CM_TO_M,
    DEFAULT_OBSERVATION_HEIGHT_M,
    DEFAULT_QUANTUM_EFFICIENCY,
    DEGRAD,
    DIRECTION_COSINE_EPSILON,
    GEV_PER_TEV,
    M_TO_CM,
    PHOTON_EMITTER_TYPE,
    SHOWER_PLACEHOLDER
)
from ..utils.logging import get_logger
from ..utils.validation import AtmosphereNotInitializedError


logger = get_logger()

f32 = np.float32

HEADER_START_FLAG = '* HEADF  <-- Start of header flag'
HEADER_END_FLAG = '* DATAF  <-- end of header flag'
RUN_HEADER_START = 'CORSIKA RUN HEADER (START)'
RUN_HEADER_END = 'CORSIKA RUN HEADER (END)'
TAB = '\t'


class GrisuWriter:
    """Writes run header, shower ('S', 'C') and photon ('P') lines.

    Call ``write_run_header`` once, then ``write_event`` per shower followed
    by ``write_photon`` per bunch. Every call writes its lines immediately.

    Attributes:
        version: Label written into the header banner
        sink: Output destination
        particles: CORSIKA to kascade particle ID map
        atmosphere: Atmosphere model, None if atmosphere_id < 0
        atmosphere_id: CORSIKA atmosphere id
        observation_height: Observation height in m ('H' line)
        quantum_efficiency: Value of the 'R' line
        core_offset: CORSIKA core position (x, y) of the last event
        events_written: Number of 'S' lines written
        photons_written: Number of 'P' lines written
    """

    def __init__(
        self,
        version: str,
        output_file: Union[str, Path] = 'stdout',
        atmosphere_id: int = -1,
        observation_height: float = DEFAULT_OBSERVATION_HEIGHT_M,
        quantum_efficiency: float = DEFAULT_QUANTUM_EFFICIENCY,
        atmosphere_dir: Optional[Union[str, Path]] = None,
        sink: Optional[OutputSink] = None
    ):
        """Initialize GrisuWriter.

        Args:
            version: Label written into the header banner
            output_file: Output file path, or 'stdout'
            atmosphere_id: CORSIKA atmosphere id, negative disables the model
            observation_height: Observation height in m
            quantum_efficiency: Value of the 'R' line
            atmosphere_dir: Directory with atmprof<id>.dat tables
            sink: Already open destination, replaces ``output_file``

        Raises:
            OutputFileError: If ``output_file`` cannot be opened for writing
        """
        self.version = version
        self.atmosphere_id = atmosphere_id
        self.observation_height = observation_height
        self.quantum_efficiency = quantum_efficiency
        self.particles = ParticleMap()
        self.core_offset = (f32(0.0), f32(0.0))
        self.events_written = 0
        self.photons_written = 0

        self.atmosphere: Optional[AtmosphereModel] = None
        if atmosphere_id >= 0:
            self.atmosphere = init_atmosphere(
                atmosphere_id, observation_height, atmosphere_dir
            )

        self.sink = sink if sink is not None else OutputSink.open(output_file)

    def write_run_header(
        self,
        buffer: Union[RunHeaderBuffer, Sequence[float], np.ndarray],
        header_info: Optional[RunHeaderInfo] = None
    ) -> None:
        """Write the header block.

        Args:
            buffer: CORSIKA header block
            header_info: Optional renderer for the CORSIKA run header block
        """
        if not isinstance(buffer, RunHeaderBuffer):
            buffer = RunHeaderBuffer(buffer)

        write = self.sink.write_line

        def fmt(value) -> str:
            return format_number(value, HEADER_FORMAT)

        write(HEADER_START_FLAG)
        write()
        write(f"photon list created with {self.version}")
        write()
        write(f"       Photons generated by CORSIKA  (date: {buffer.date})")
        write()
        write(f"\t CORSIKA run number: {buffer.run_number}")
        write(f"\t CORSIKA version: {fmt(buffer.version)}")
        write()
        write()

        e_min, e_max = buffer.energy_range
        write(" TITLE OF RUN: ")
        write(
            "\t\t\t Primary energy<min.,max.> TeV = "
            f"{fmt(float(e_min) / GEV_PER_TEV)}\t{fmt(float(e_max) / GEV_PER_TEV)}"
        )
        write(f"\t\t\t Slope of energy spectrum: {fmt(buffer.spectral_slope)}")

        primary_id = buffer.primary_id
        write(f"\t\t\t Type code for primary particle (CORSIKA ID) {primary_id}")
        write(f"PTYPE: {primary_id}")
        kascade_id = self.particles.lookup(primary_id)
        if kascade_id is not None:
            write(f"\t\t\t Type code for primary particle (kascade ID) {kascade_id}")
        else:
            logger.warning(f"No kascade particle ID for CORSIKA particle {primary_id}")
            write(
                "\t\t\t Type code for primary particle (kascade ID) "
                f"\t {UNKNOWN_PARTICLE_MARKER}"
            )

        zenith_deg = float(buffer.zenith) * DEGRAD
        kascade_azimuth = f32(transform_azimuth(float(buffer.azimuth)))
        write(f"\t\t\t Primary zenith angle  (CORSIKA coord.): {fmt(zenith_deg)}")
        write(f"\t\t\t Primary azimuth angle (CORSIKA coord.): {fmt(float(buffer.azimuth) * DEGRAD)}")
        write(f"\t\t\t Primary zenith angle  (kascade coord.): {fmt(zenith_deg)}")
        write(f"\t\t\t Primary azimuth angle (kascade coord.): {fmt(float(kascade_azimuth) * DEGRAD)}")

        magnetic_field = format_fields(buffer.magnetic_field, HEADER_FORMAT, TAB)
        energy_cuts = format_fields(buffer.energy_cuts, HEADER_FORMAT, TAB)
        write(f"\t\t\t Magnetic field (x/z): {magnetic_field}")
        write(f"\t\t\t Observation height [m]: {fmt(float(buffer.observation_height) * CM_TO_M)}")
        write(f"\t\t\t Energy cuts (hadr./muon/el./phot.) [GeV]: {energy_cuts}")

        write(RUN_HEADER_START)
        if header_info is not None:
            header_info.print_header(self.sink.stream)
        write(RUN_HEADER_END)

        write()
        write(HEADER_END_FLAG)
        write(f"R {fmt(float(self.quantum_efficiency))}")
        # observation height in [m]
        write(f"H {fmt(float(self.observation_height))}")

        logger.debug(f"Run header written for run {buffer.run_number}")

    def write_event(self, event: ShowerEvent, print_more_info: bool = False) -> None:
        """Write the shower line ('S') and optionally the 'C' line.

        The 'C' line holds first interaction height, first interaction
        depth along the shower axis and the CORSIKA shower number.

        Args:
            event: Shower parameters
            print_more_info: Also write the 'C' line

        Raises:
            AtmosphereNotInitializedError: If ``print_more_info`` is set
                without an atmosphere model
        """
        if print_more_info and self.atmosphere is None:
            raise AtmosphereNotInitializedError(
                "First interaction depth needs an atmosphere model (atmosphere_id >= 0)"
            )

        phi = f32(float(event.azimuth) / DEGRAD)
        ze = f32((90.0 - float(event.altitude)) / DEGRAD)
        x = f32(event.xcore)
        y = f32(event.ycore)

        self.core_offset = (x, y)

        azimuth, new_x, new_y = transform_coordinates(float(phi), float(x), float(y))
        phi, x, y = f32(azimuth), f32(new_x), f32(new_y)

        dcos = self._snap_to_zero(np.sin(ze) * np.cos(phi))
        dsin = self._snap_to_zero(np.sin(ze) * np.sin(phi))

        energy = f32(event.energy)
        firstint = f32(event.firstint)

        self.sink.write_line(format_line(
            'S',
            [energy, x, y, dcos, dsin, firstint,
             SHOWER_PLACEHOLDER, SHOWER_PLACEHOLDER, SHOWER_PLACEHOLDER],
            RECORD_FORMAT
        ))
        self.events_written += 1

        if print_more_info:
            thickness = self.atmosphere.thickness(M_TO_CM * float(firstint)) / float(np.cos(ze))
            self.sink.write_line(format_line(
                'C', [firstint, thickness, int(event.shower_id)], RECORD_FORMAT
            ))

    def write_photon(self, bunch: PhotonBunch, telescope: int) -> None:
        """Write the next photon line ('P').

        Args:
            bunch: Photon bunch
            telescope: Telescope index, counted from 0
        """
        x = f32(bunch.x)
        y = f32(bunch.y)
        cx = f32(bunch.cx)
        cy = f32(bunch.cy)

        az = np.arctan2(cy, cx)
        cos2_ze = f32(1.0 - float(cx * cx + cy * cy))
        if cos2_ze > 0.0:
            cos_ze = np.sqrt(cos2_ze)
        else:
            cos_ze = f32(0.0)
        ze = np.arccos(cos_ze)

        azimuth, new_x, new_y = transform_coordinates(float(az), float(x), float(y))
        az, x, y = f32(azimuth), f32(new_x), f32(new_y)

        # ctime is the time since first interaction, not since emission;
        # the emitting particle type is unknown and always written as 3
        self.sink.write_line(format_line(
            'P',
            [x, y,
             np.sin(ze) * np.cos(az),
             np.sin(ze) * np.sin(az),
             f32(bunch.zem),
             f32(bunch.ctime),
             int(f32(bunch.wavelength)),
             PHOTON_EMITTER_TYPE,
             int(telescope) + 1],
            SIGNED_RECORD_FORMAT
        ))
        self.photons_written += 1

    @staticmethod
    def _snap_to_zero(value: np.float32) -> np.float32:
        # rounding error
        if abs(value) < DIRECTION_COSINE_EPSILON:
            return f32(0.0)
        return value

    def close(self) -> None:
        """Close the output file (standard output is only flushed)."""
        self.sink.close()
        logger.debug(
            f"Wrote {self.events_written} events and "
            f"{self.photons_written} photon bunches to {self.sink.name}"
        )

    def __enter__(self) -> 'GrisuWriter':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
