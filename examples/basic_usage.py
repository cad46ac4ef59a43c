"""
Basic usage example for writing a GrIsu photon list.

This example demonstrates how to:
1. Build a CORSIKA header block and shower records
2. Write header, shower and photon lines with GrisuWriter
3. Run the converter on an .npz record dump
"""

import numpy as np
from pathlib import Path

from CorsikaGrisu import GrisuWriter, GrisuConverter, ConverterConfig
from CorsikaGrisu.core import (
    InputCardHeader,
    InputManager,
    PhotonBunch,
    ShowerEvent
)
from CorsikaGrisu.core.input_manager import EVENT_FIELDS, PHOTON_FIELDS
from CorsikaGrisu.utils import setup_logger


def create_run_header() -> np.ndarray:
    """Create a CORSIKA header block for a 1 TeV vertical gamma run."""
    buffer = np.zeros(273, dtype=np.float32)
    buffer[2] = 1           # gamma
    buffer[10] = 0.0        # zenith [rad]
    buffer[11] = 0.0        # azimuth [rad]
    buffer[43] = 1          # run number
    buffer[44] = 230615     # date
    buffer[45] = 7.741      # CORSIKA version
    buffer[47] = 125000.0   # observation level [cm]
    buffer[57] = -2.0       # spectral slope
    buffer[58] = 1000.0     # E min [GeV]
    buffer[59] = 1000.0     # E max [GeV]
    buffer[60:64] = [0.3, 0.1, 0.02, 0.02]
    buffer[70] = 25.2       # Bx [uT]
    buffer[71] = 40.88      # Bz [uT]
    return buffer


def create_record_dump(output_dir: str = './grisu_example') -> str:
    """Write a small .npz record dump.

    Args:
        output_dir: Directory for the dump

    Returns:
        Path to the dump
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    events = np.zeros(2, dtype=[(name, np.float32) for name in EVENT_FIELDS[:-1]]
                      + [('shower_id', np.int32)])
    events['energy'] = 1.0
    events['azimuth'] = [0.0, 45.0]
    events['altitude'] = [90.0, 70.0]
    events['xcore'] = [10.0, -35.0]
    events['ycore'] = [5.0, 120.0]
    events['firstint'] = [25000.0, 21000.0]
    events['shower_id'] = [1, 2]

    rng = np.random.default_rng(42)
    n_photons = 20
    photons = np.zeros(
        n_photons,
        dtype=[('event', np.int32), ('telescope', np.int32)]
        + [(name, np.float32) for name in PHOTON_FIELDS[2:]]
    )
    photons['event'] = np.repeat([0, 1], n_photons // 2)
    photons['telescope'] = rng.integers(0, 4, n_photons)
    photons['x'] = rng.uniform(-600, 600, n_photons)
    photons['y'] = rng.uniform(-600, 600, n_photons)
    photons['cx'] = rng.uniform(-0.02, 0.02, n_photons)
    photons['cy'] = rng.uniform(-0.02, 0.02, n_photons)
    photons['zem'] = rng.uniform(5e5, 1.5e6, n_photons)
    photons['ctime'] = rng.uniform(0, 20, n_photons)
    photons['wavelength'] = rng.uniform(300, 600, n_photons)

    dump_path = output_path / 'records.npz'
    np.savez(dump_path, run_header=create_run_header(), events=events, photons=photons)
    print(f"Record dump created: {dump_path}")
    return str(dump_path)


def example_writer():
    """Write records one by one to stdout."""
    print("\n=== Example 1: GrisuWriter ===\n")

    with GrisuWriter("CorsikaGrisu example", output_file='stdout') as writer:
        writer.write_run_header(
            create_run_header(),
            InputCardHeader.from_lines(["RUNNR 1", "PRMPAR 1", "ERANGE 1.E3 1.E3"])
        )
        writer.write_event(ShowerEvent(
            energy=1.0, azimuth=0.0, altitude=90.0,
            xcore=10.0, ycore=5.0, firstint=25000.0, shower_id=1
        ))
        writer.write_photon(PhotonBunch(
            x=120.0, y=-40.0, cx=0.01, cy=-0.005,
            zem=9.8e5, ctime=3.2, wavelength=412.7
        ), telescope=0)


def example_converter(dump_path: str):
    """Convert an .npz dump to a file, with 'C' lines."""
    print("\n=== Example 2: GrisuConverter ===\n")

    config = ConverterConfig(
        output_file=str(Path(dump_path).with_suffix('.grisu')),
        atmosphere_id=1,
        print_more_info=True,
        version_label="CorsikaGrisu example"
    )
    records = InputManager().load_records(dump_path)
    summary = GrisuConverter(config).run(records)
    print(f"Wrote {summary['events']} events, {summary['photons']} bunches "
          f"to {summary['output']}")


if __name__ == '__main__':
    setup_logger()
    example_writer()
    example_converter(create_record_dump())
