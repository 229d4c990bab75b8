import math

import numpy as np
import pytest
from pytest import approx

from tmgrid.ellipsoid import Ellipsoid
from tmgrid.meridian import arc_length_of_meridian, footpoint_latitude, rectifying_radius


def test_rectifying_radius():
    assert rectifying_radius() == approx(6367449.1458, abs=1e-3)

    # A sphere's rectifying radius is its radius
    assert rectifying_radius(Ellipsoid(1000., 1000. - 1e-9)) == approx(1000.)


def test_arc_length_of_meridian():
    assert arc_length_of_meridian(0.) == 0.

    # Quarter meridian
    assert arc_length_of_meridian(math.pi / 2) == approx(10_001_965.729, abs=0.01)

    assert arc_length_of_meridian(math.pi / 4) == approx(4_984_944.378, abs=0.05)

    # Odd about the equator
    for deg in (1., 15., 45., 70.):
        phi = math.radians(deg)
        assert arc_length_of_meridian(-phi) == approx(-arc_length_of_meridian(phi))


def test_arc_length_of_meridian_monotonic():
    lengths = [arc_length_of_meridian(math.radians(deg)) for deg in range(-89, 90)]
    assert all(b > a for a, b in zip(lengths, lengths[1:]))


def test_footpoint_latitude():
    assert footpoint_latitude(0.) == 0.

    for deg in (-80., -33.3, -1., 0.5, 12., 45., 59.3, 68., 84.):
        phi = math.radians(deg)
        assert footpoint_latitude(arc_length_of_meridian(phi)) == approx(phi, abs=1e-10)


def test_meridian_nan_propagation():
    assert math.isnan(arc_length_of_meridian(float('nan')))
    assert math.isnan(arc_length_of_meridian(float('inf')))
    assert math.isnan(footpoint_latitude(float('nan')))
    assert math.isnan(footpoint_latitude(float('-inf')))


def test_meridian_arrays():
    phis = np.radians([0., 30., 60.])
    lengths = arc_length_of_meridian(phis)
    assert lengths.shape == (3,)
    assert lengths[1] == approx(arc_length_of_meridian(math.radians(30.)))

    np.testing.assert_allclose(footpoint_latitude(lengths), phis, atol=1e-10)


@pytest.mark.parametrize('deg', [10., 50.])
def test_meridian_other_ellipsoid(deg):
    # GRS80 differs from WGS84 by a tenth of a millimeter in the minor axis
    grs80 = Ellipsoid(6378137.0, 6356752.314140)
    phi = math.radians(deg)
    assert arc_length_of_meridian(phi, grs80) == approx(arc_length_of_meridian(phi), abs=1e-3)
