"""Tests for atmospheric profiles."""

import numpy as np
import pytest

from CorsikaGrisu.physics.atmosphere import (
    LinsleyAtmosphere,
    TabulatedAtmosphere,
    init_atmosphere,
    load_atmosphere_database
)
from CorsikaGrisu.utils.validation import AtmosphereNotFoundError


@pytest.fixture
def us_standard():
    return init_atmosphere(1, 100.0)


def test_bundled_database_ids():
    database = load_atmosphere_database()
    assert 1 in database
    assert 17 in database


def test_init_keeps_id_and_height(us_standard):
    assert isinstance(us_standard, LinsleyAtmosphere)
    assert us_standard.atmosphere_id == 1
    assert us_standard.observation_height == 100.0


def test_sea_level_thickness(us_standard):
    assert us_standard.thickness(0.0) == pytest.approx(-186.555305 + 1222.6562)


@pytest.mark.parametrize("boundary", [4.0e5, 1.0e6, 4.0e6, 1.0e7])
def test_layers_are_continuous(us_standard, boundary):
    below = us_standard.thickness(boundary - 1.0)
    above = us_standard.thickness(boundary)
    assert below == pytest.approx(above, rel=1e-2, abs=1e-3)


def test_thickness_decreases_with_height(us_standard):
    heights = np.linspace(0.0, 1.1e7, 200)
    values = [us_standard.thickness(h) for h in heights]
    assert all(a > b for a, b in zip(values, values[1:]))


def test_zero_above_top(us_standard):
    assert us_standard.thickness(us_standard.top) == 0.0
    assert us_standard.thickness(2.0e7) == 0.0


def test_unknown_atmosphere():
    with pytest.raises(AtmosphereNotFoundError):
        init_atmosphere(99, 100.0)


def test_linsley_needs_five_layers():
    with pytest.raises(ValueError):
        LinsleyAtmosphere(0, 0.0, a=[0.0], b=[1.0], c=[1.0], boundaries=[0.0])


@pytest.fixture
def atmprof_dir(tmp_path):
    (tmp_path / "atmprof5.dat").write_text(
        "# Atmospheric Model 5\n"
        "#  Alt [km]  rho [g/cm^3]  thick [g/cm^2]  n-1\n"
        "   0.0   1.2e-3   1000.0   2.8e-4\n"
        "   10.0  4.1e-4   300.0    9.6e-5\n"
        "   20.0  8.9e-5   60.0     2.0e-5\n"
        "   50.0  1.0e-6   1.0      2.0e-7\n"
        "   120.0 0.0      0.0      0.0\n"
    )
    return tmp_path


def test_tabulated_atmosphere_from_directory(atmprof_dir):
    atmosphere = init_atmosphere(5, 1800.0, atmosphere_dir=atmprof_dir)

    assert isinstance(atmosphere, TabulatedAtmosphere)
    assert atmosphere.atmosphere_id == 5
    assert atmosphere.observation_height == 1800.0
    assert atmosphere.thickness(0.0) == pytest.approx(1000.0)
    assert atmosphere.thickness(10.0e5) == pytest.approx(300.0)
    # log-linear between table points
    assert atmosphere.thickness(5.0e5) == pytest.approx(np.sqrt(1000.0 * 300.0))
    assert atmosphere.thickness(120.0e5) == 0.0


def test_table_takes_precedence_over_bundled(tmp_path):
    (tmp_path / "atmprof1.dat").write_text("0.0 1.0 500.0 0.0\n50.0 0.0 5.0 0.0\n")
    atmosphere = init_atmosphere(1, 100.0, atmosphere_dir=tmp_path)
    assert isinstance(atmosphere, TabulatedAtmosphere)
    assert atmosphere.thickness(0.0) == pytest.approx(500.0)


def test_missing_table_falls_back_to_bundled(tmp_path):
    atmosphere = init_atmosphere(1, 100.0, atmosphere_dir=tmp_path)
    assert isinstance(atmosphere, LinsleyAtmosphere)


def test_tabulated_thickness_falls_to_zero_at_top(atmprof_dir):
    atmosphere = init_atmosphere(5, 1800.0, atmosphere_dir=atmprof_dir)

    assert atmosphere.top == pytest.approx(120.0e5)
    assert atmosphere.thickness(50.0e5) == pytest.approx(1.0)
    assert atmosphere.thickness(85.0e5) == pytest.approx(0.5)
    assert atmosphere.thickness(113.0e5) == pytest.approx(0.1)
    heights = np.linspace(50.0e5, 120.0e5, 50)
    values = [atmosphere.thickness(h) for h in heights]
    assert all(a > b for a, b in zip(values, values[1:]))


def test_table_without_positive_thickness():
    with pytest.raises(ValueError):
        TabulatedAtmosphere(5, 0.0, heights=[0.0, 1.0e6], thicknesses=[0.0, 0.0])
