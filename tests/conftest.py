"""Shared fixtures for the CorsikaGrisu tests."""

import io

import numpy as np
import pytest

from CorsikaGrisu.core import GrisuWriter, OutputSink


@pytest.fixture
def run_header():
    """CORSIKA header block of a proton run."""
    buffer = np.zeros(273, dtype=np.float32)
    buffer[2] = 14
    buffer[10] = np.deg2rad(20.0)
    buffer[11] = 0.0
    buffer[43] = 42
    buffer[44] = 230615
    buffer[45] = 7.5
    buffer[47] = 123400.0
    buffer[57] = -2.5
    buffer[58] = 100.0
    buffer[59] = 2000.0
    buffer[60:64] = [0.5, 0.25, 0.125, 0.0625]
    buffer[70] = 25.0
    buffer[71] = -40.5
    return buffer


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def writer(stream):
    """Writer without atmosphere, writing into a StringIO."""
    return GrisuWriter("test-version", sink=OutputSink.from_stream(stream))


@pytest.fixture
def atm_writer(stream):
    """Writer with the bundled U.S. standard atmosphere."""
    return GrisuWriter("test-version", atmosphere_id=1, sink=OutputSink.from_stream(stream))
