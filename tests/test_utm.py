import math

import pytest
from pytest import approx

from tmgrid import GeographicCoordinate, PlanarCoordinate
from tmgrid.exceptions import InvalidZoneError, OutOfDomainError
from tmgrid.meridian import arc_length_of_meridian
from tmgrid.utm import central_meridian, geographic_to_utm, utm_to_geographic, zone_from_longitude
from tmgrid.validation import utm_round_trip_error, validate_utm

from tests.functions import assert_coordinates_equal


def test_zone_from_longitude():
    assert zone_from_longitude(-180.) == 1
    assert zone_from_longitude(-174.) == 2
    assert zone_from_longitude(-174.000001) == 1
    assert zone_from_longitude(-0.000001) == 30
    assert zone_from_longitude(0.) == 31
    assert zone_from_longitude(12.) == 33
    assert zone_from_longitude(15.) == 33
    assert zone_from_longitude(17.999999) == 33
    assert zone_from_longitude(18.) == 34
    assert zone_from_longitude(179.999999) == 60

    # Same meridian as -180
    assert zone_from_longitude(180.) == 1

    with pytest.raises(ValueError):
        zone_from_longitude(180.5)

    with pytest.raises(OutOfDomainError):
        zone_from_longitude(float('nan'))


def test_zone_boundaries():
    for zone in range(1, 61):
        assert zone_from_longitude(-180. + 6 * (zone - 1)) == zone


def test_central_meridian():
    assert central_meridian(1) == -177.
    assert central_meridian(31) == 3.
    assert central_meridian(33) == 15.
    assert central_meridian(60) == 177.

    for zone in (0, 61, -1, 2.5):
        with pytest.raises(InvalidZoneError):
            central_meridian(zone)


def test_geographic_to_utm_known_points():
    # On zone 33's central meridian at the equator
    p = geographic_to_utm(GeographicCoordinate(15., 0.))
    assert p.zone == 33
    assert not p.southern
    assert p.x == approx(500000., abs=1e-6)
    assert p.y == approx(0., abs=1e-6)

    # Null island, MGRS 31NAA6602100000
    p = geographic_to_utm(GeographicCoordinate(0., 0.))
    assert p.zone == 31
    assert p.x == approx(166021.443, abs=0.01)
    assert p.y == approx(0., abs=1e-6)

    # Northing on the central meridian is the scaled meridian arc
    p = geographic_to_utm(GeographicCoordinate(15., 45.))
    assert p.x == approx(500000., abs=1e-6)
    assert p.y == approx(0.9996 * 4_984_944.378, abs=0.05)


def test_geographic_to_utm_central_meridian():
    for zone in (1, 17, 33, 60):
        for lat in (-60., -1., 0., 30., 75.):
            p = geographic_to_utm(GeographicCoordinate(central_meridian(zone), lat))
            assert p.zone == zone
            assert p.x == approx(500000., abs=1e-6)


def test_geographic_to_utm_southern():
    p = geographic_to_utm(GeographicCoordinate(15., -10.))
    assert p.zone == 33
    assert p.southern
    assert p.y == approx(10_000_000. - 0.9996 * arc_length_of_meridian(math.radians(10.)))
    assert 0. < p.y < 10_000_000.

    # Hemisphere follows the latitude's sign, not the northing
    p = geographic_to_utm(GeographicCoordinate(21., 0.))
    assert not p.southern
    assert p.y == approx(0., abs=1e-6)


def test_geographic_to_utm_explicit_zone():
    # Stockholm lies in zone 34, but can be forced through zone 33
    coord = GeographicCoordinate(18.0686, 59.3293)
    assert geographic_to_utm(coord).zone == 34

    forced = geographic_to_utm(coord, zone=33)
    assert forced.zone == 33
    assert forced.x > 500000.
    assert forced.x != approx(geographic_to_utm(coord).x)

    for zone in (0, 61, 33.5):
        with pytest.raises(InvalidZoneError):
            geographic_to_utm(coord, zone=zone)


def test_monotonicity():
    northings = [geographic_to_utm(GeographicCoordinate(15.5, lat)).y for lat in range(0, 85)]
    assert all(b > a for a, b in zip(northings, northings[1:]))

    northings = [geographic_to_utm(GeographicCoordinate(15.5, -lat)).y for lat in range(1, 80)]
    assert all(b < a for a, b in zip(northings, northings[1:]))

    eastings = [
        geographic_to_utm(GeographicCoordinate(12. + lon / 10, 59.)).x for lon in range(0, 60)
    ]
    assert all(b > a for a, b in zip(eastings, eastings[1:]))


def test_utm_to_geographic():
    assert_coordinates_equal(
        utm_to_geographic(PlanarCoordinate(500000., 0., 33)),
        GeographicCoordinate(15., 0.),
    )

    assert_coordinates_equal(
        utm_to_geographic(PlanarCoordinate(166021.443, 0., 31)),
        GeographicCoordinate(0., 0.),
    )


def test_utm_round_trip():
    for lat in (-79.5, -45., -12.3, -0.5, 0., 0.5, 23.4, 59.3293, 83.9):
        for lon in (-179.9, -120.2, -3.1, 0., 2.999, 18.0686, 101.7, 179.9):
            coord = GeographicCoordinate(lon, lat)
            p = geographic_to_utm(coord)
            assert_coordinates_equal(utm_to_geographic(p), coord, abs_tol=1e-8)
            assert utm_round_trip_error(coord) < 0.001
            assert validate_utm(coord)


def test_utm_round_trip_explicit_zone():
    coord = GeographicCoordinate(18.0686, 59.3293)
    assert utm_round_trip_error(coord, zone=33) < 0.001


def test_validate_utm_out_of_domain():
    # Halfway around the world from the central meridian
    assert not validate_utm(GeographicCoordinate(-165., 20.), zone=33)


def test_utm_matches_pyproj():
    pyproj = pytest.importorskip('pyproj')

    for zone, lon, lat in ((33, 15.5, 59.), (33, 12.1, 55.4), (34, 18.0686, 59.3293),
                           (31, 0., 0.), (56, 151.2, -33.9), (18, -74.0, 40.7)):
        coord = GeographicCoordinate(lon, lat)
        p = geographic_to_utm(coord)
        assert p.zone == zone

        epsg = f'EPSG:{32700 + zone if coord.southern else 32600 + zone}'
        transformer = pyproj.Transformer.from_crs('EPSG:4326', epsg, always_xy=True)
        x, y = transformer.transform(lon, lat)
        assert p.x == approx(x, abs=0.01)
        assert p.y == approx(y, abs=0.01)
