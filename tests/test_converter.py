"""Tests for record loading and full conversion."""

import io

import numpy as np
import pytest

from CorsikaGrisu import ConverterConfig, GrisuConverter
from CorsikaGrisu.core import InputManager, OutputSink
from CorsikaGrisu.core.input_manager import EVENT_FIELDS, PHOTON_FIELDS
from CorsikaGrisu.utils.validation import InvalidRecordError, OutputFileError


EVENT_DTYPE = [(name, np.float32) for name in EVENT_FIELDS[:-1]] + [('shower_id', np.int32)]
PHOTON_DTYPE = [('event', np.int32), ('telescope', np.int32)] + \
    [(name, np.float32) for name in PHOTON_FIELDS[2:]]


@pytest.fixture
def records(run_header):
    events = np.zeros(2, dtype=EVENT_DTYPE)
    events['energy'] = [1.0, 2.0]
    events['azimuth'] = [0.0, 45.0]
    events['altitude'] = [90.0, 70.0]
    events['firstint'] = [20000.0, 15000.0]
    events['shower_id'] = [1, 2]

    photons = np.zeros(3, dtype=PHOTON_DTYPE)
    photons['event'] = [0, 1, 1]
    photons['telescope'] = [0, 2, 3]
    photons['x'] = [10.0, -20.0, 30.0]
    photons['cx'] = [0.01, 0.02, -0.01]
    photons['zem'] = 1.0e6
    photons['wavelength'] = [350.0, 420.5, 599.9]
    return run_header, events, photons


@pytest.fixture
def record_file(tmp_path, records):
    run_header, events, photons = records
    path = tmp_path / "records.npz"
    np.savez(path, run_header=run_header, events=events, photons=photons)
    return path


def test_load_records(record_file):
    loaded = InputManager().load_records(record_file)

    assert loaded.num_events == 2
    assert loaded.num_photons == 3
    assert loaded.run_header.primary_id == 14


def test_iter_events_groups_photons(records):
    loaded = InputManager().create_records(*records)
    grouped = list(loaded.iter_events())

    assert [event.shower_id for event, _ in grouped] == [1, 2]
    assert [len(bunches) for _, bunches in grouped] == [1, 2]
    assert [telescope for telescope, _ in grouped[1][1]] == [2, 3]
    assert grouped[1][1][0][1].wavelength == pytest.approx(420.5)


def test_iter_events_with_unsorted_photons(records):
    run_header, events, _ = records
    photons = np.zeros(5, dtype=PHOTON_DTYPE)
    photons['event'] = [1, 0, 1, 0, 1]
    photons['telescope'] = [0, 1, 2, 3, 4]
    photons['wavelength'] = [300.0, 310.0, 320.0, 330.0, 340.0]
    loaded = InputManager().create_records(run_header, events, photons)

    grouped = list(loaded.iter_events())

    assert [telescope for telescope, _ in grouped[0][1]] == [1, 3]
    assert [telescope for telescope, _ in grouped[1][1]] == [0, 2, 4]
    assert [bunch.wavelength for _, bunch in grouped[1][1]] == [300.0, 320.0, 340.0]


def test_iter_events_without_photons(records):
    run_header, events, _ = records
    loaded = InputManager().create_records(run_header, events, np.zeros(0, dtype=PHOTON_DTYPE))

    grouped = list(loaded.iter_events())

    assert len(grouped) == 2
    assert all(bunches == [] for _, bunches in grouped)


def test_missing_file(tmp_path):
    with pytest.raises(InvalidRecordError):
        InputManager().load_records(tmp_path / "missing.npz")


def test_missing_array(tmp_path, run_header):
    path = tmp_path / "records.npz"
    np.savez(path, run_header=run_header)
    with pytest.raises(InvalidRecordError):
        InputManager().load_records(path)


def test_missing_event_field(records):
    run_header, events, photons = records
    with pytest.raises(InvalidRecordError):
        InputManager().create_records(run_header, events[['energy', 'azimuth']], photons)


def test_photon_refers_to_missing_event(records):
    run_header, events, photons = records
    photons['event'][2] = 5
    with pytest.raises(InvalidRecordError):
        InputManager().create_records(run_header, events, photons)


def test_converter_to_file(tmp_path, record_file):
    output = tmp_path / "out.grisu"
    card = tmp_path / "input.card"
    card.write_text("RUNNR 42\nPRMPAR 14\n")
    config = ConverterConfig(
        output_file=str(output),
        atmosphere_id=1,
        print_more_info=True,
        version_label="converter test",
        run_header_info_path=str(card)
    )

    summary = GrisuConverter(config).run(str(record_file))

    assert summary['events'] == 2
    assert summary['photons'] == 3
    lines = output.read_text().splitlines()
    tags = [line.split()[0] for line in lines[lines.index("H 100.0000") + 1:]]
    assert tags == ['S', 'C', 'P', 'S', 'C', 'P', 'P']
    assert "RUNNR 42" in lines
    assert "photon list created with converter test" in lines


def test_converter_with_sink(records):
    stream = io.StringIO()
    loaded = InputManager().create_records(*records)

    GrisuConverter(ConverterConfig()).run(loaded, sink=OutputSink.from_stream(stream))

    lines = stream.getvalue().splitlines()
    assert sum(line.startswith('S ') for line in lines) == 2
    assert not any(line.startswith('C ') for line in lines)
    assert not stream.closed


def test_converter_unwritable_output(tmp_path, records):
    config = ConverterConfig(output_file=str(tmp_path / "missing" / "out.grisu"))
    loaded = InputManager().create_records(*records)
    with pytest.raises(OutputFileError):
        GrisuConverter(config).run(loaded)
