import dataclasses
import math

import pytest

from photon_core.config import load_constants
from photon_core.constants import DEFAULT_CONSTANTS, G, PhysicalConstants, c, schwarzschild_radius
from photon_core.errors import InvalidParameter
from photon_core.models import BlackHole


def test_schwarzschild_radius_formula():
    mass = 8.54e36
    bh = BlackHole((0.0, 0.0), mass)
    assert bh.schwarzschild_radius == pytest.approx(2 * 6.6743e-11 * mass / 299792458 ** 2, rel=1e-12)
    assert bh.schwarzschild_radius == pytest.approx(1.27e10, rel=1e-2)
    assert schwarzschild_radius(mass) == bh.schwarzschild_radius


def test_black_hole_is_immutable():
    bh = BlackHole((400, 300), 8.54e36)
    with pytest.raises(dataclasses.FrozenInstanceError):
        bh.mass = 1.0
    assert bh.position == (400.0, 300.0)


@pytest.mark.parametrize("mass", [0.0, -1.0, math.nan, math.inf])
def test_black_hole_rejects_bad_mass(mass):
    with pytest.raises(InvalidParameter):
        BlackHole((0.0, 0.0), mass)


def test_display_and_photon_sphere_radii():
    bh = BlackHole((0.0, 0.0), 8.54e36)
    assert bh.display_radius == pytest.approx(bh.schwarzschild_radius * DEFAULT_CONSTANTS.vis_scale)
    assert bh.photon_sphere_radius == pytest.approx(1.5 * bh.schwarzschild_radius)
    assert bh.photon_sphere_display_radius > bh.display_radius


def test_constants_defaults():
    assert DEFAULT_CONSTANTS.c == c == 299_792_458.0
    assert DEFAULT_CONSTANTS.G == G
    assert DEFAULT_CONSTANTS.time_multiplier == 100.0


def test_constants_reject_non_positive():
    with pytest.raises(InvalidParameter):
        PhysicalConstants(vis_scale=0.0)
    with pytest.raises(InvalidParameter):
        PhysicalConstants(c=-1.0)


def test_load_constants_reads_environment():
    constants = load_constants({"PHOTON_VIS_SCALE": "1e-8", "PHOTON_TIME_MULTIPLIER": "50"})
    assert constants.vis_scale == 1e-8
    assert constants.time_multiplier == 50.0
    assert load_constants({}) == DEFAULT_CONSTANTS


def test_load_constants_rejects_garbage():
    with pytest.raises(InvalidParameter):
        load_constants({"PHOTON_VIS_SCALE": "lots"})
    with pytest.raises(InvalidParameter):
        load_constants({"PHOTON_TIME_MULTIPLIER": "-3"})
