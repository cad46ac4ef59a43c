"""Tests for the CORSIKA to kascade particle map."""

import pytest

from CorsikaGrisu.core.particle_map import ParticleMap, CORSIKA_TO_KASCADE


@pytest.fixture
def particles():
    return ParticleMap()


@pytest.mark.parametrize("corsika, kascade", [
    (1, 1), (2, 2), (3, 3), (5, 4), (6, 5), (7, 6), (8, 7), (9, 8),
    (11, 9), (12, 10), (10, 11), (16, 12), (14, 13), (13, 14),
])
def test_lookup(particles, corsika, kascade):
    assert particles.lookup(corsika) == kascade


@pytest.mark.parametrize("code", [0, 4, 15, 402, 5626, 999, -1])
def test_unknown_codes(particles, code):
    assert particles.lookup(code) is None
    assert code not in particles


def test_table_size(particles):
    assert len(particles) == 14


def test_table_is_read_only(particles):
    with pytest.raises(TypeError):
        particles.table[99] = 1
    assert particles.lookup(99) is None


def test_instances_do_not_share_state():
    first, second = ParticleMap(), ParticleMap()
    assert dict(first.table) == dict(second.table) == CORSIKA_TO_KASCADE
    assert first.lookup(14.0) == 13
