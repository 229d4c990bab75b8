import re

import pytest
from pytest import approx

from tmgrid import Absent, GeographicCoordinate, GridCoordinate, NationalGrid, Present, SWEREF99_TM
from tmgrid.exceptions import InvalidZoneError, RoundTripToleranceError, TmgridError
from tmgrid.grid import to_geographic, to_grid
from tmgrid.utm import geographic_to_utm

from tests.functions import assert_coordinates_equal, sweden_sample


def test_national_grid_init():
    grid = NationalGrid('Test', 32, tolerance=0.5)
    assert grid.zone == 32
    assert grid.tolerance == 0.5
    assert grid.central_meridian == 9.
    assert repr(grid) == "<NationalGrid('Test', zone=32)>"

    with pytest.raises(InvalidZoneError):
        NationalGrid('Test', 0)

    with pytest.raises(ValueError):
        NationalGrid('Test', 33, tolerance=0.)


def test_sweref99_tm():
    assert SWEREF99_TM.zone == 33
    assert SWEREF99_TM.central_meridian == 15.
    assert SWEREF99_TM.tolerance == 0.1


def test_to_grid():
    result = to_grid(GeographicCoordinate(15., 60.))
    assert isinstance(result, Present)
    assert result.present
    grid_coord = result.unwrap()
    assert grid_coord.x == approx(500000., abs=1e-6)

    # Identical to UTM zone 33, even outside zone 33
    for coord in sweden_sample():
        utm = geographic_to_utm(coord, zone=33)
        grid_coord = to_grid(coord).unwrap()
        assert grid_coord == GridCoordinate(utm.x, utm.y)


def test_to_grid_southern_hemisphere():
    for coord in (
        GeographicCoordinate(15., -0.0001),
        GeographicCoordinate(15., -45.),
        GeographicCoordinate(18.4, -33.9),
    ):
        result = to_grid(coord)
        assert isinstance(result, Absent)
        assert not result.present
        assert 'southern hemisphere' in result.reason

        with pytest.raises(ValueError):
            result.unwrap()

        assert SWEREF99_TM.round_trip_error(coord) is None


def test_to_geographic():
    assert_coordinates_equal(
        to_geographic(GridCoordinate(500000., 0.)),
        GeographicCoordinate(15., 0.),
    )

    for coord in sweden_sample():
        assert_coordinates_equal(to_geographic(to_grid(coord).unwrap()), coord, abs_tol=1e-6)


def test_round_trip_error():
    for coord in sweden_sample():
        assert SWEREF99_TM.round_trip_error(coord) < 0.1

    # Near the central meridian the series are far better than the gate
    for lon in (13., 14.5, 15., 15.5, 17.):
        for lat in (55.5, 60., 65., 69.):
            assert SWEREF99_TM.round_trip_error(GeographicCoordinate(lon, lat)) < 0.001


def test_convert():
    coord = GeographicCoordinate(18.0686, 59.3293)
    result = SWEREF99_TM.convert(coord)
    assert result.present
    assert result.unwrap() == to_grid(coord).unwrap()

    result = SWEREF99_TM.convert(GeographicCoordinate(18.0686, -59.3293))
    assert isinstance(result, Absent)


def test_convert_tolerance_exceeded():
    # Far enough from the central meridian that the series break down
    coord = GeographicCoordinate(120., 30.)
    with pytest.raises(TmgridError):
        SWEREF99_TM.convert(coord)

    # Tolerances below the actual drift trip the gate
    coord = GeographicCoordinate(24.1365, 65.8355)
    drift = SWEREF99_TM.round_trip_error(coord)
    with pytest.raises(RoundTripToleranceError) as e:
        SWEREF99_TM.convert(coord, tolerance=drift / 2 - 1e-12)

    assert e.value.coordinate == coord
    assert e.value.error == drift
    assert e.value.tolerance == drift / 2 - 1e-12


def test_stretch_warning(caplog, monkeypatch):
    monkeypatch.setattr(NationalGrid, 'WARNED_ONCE', set())

    SWEREF99_TM.to_grid(GeographicCoordinate(20., 60.))
    assert 'central meridian' not in caplog.text

    SWEREF99_TM.to_grid(GeographicCoordinate(26., 60.))
    SWEREF99_TM.to_grid(GeographicCoordinate(27., 60.))
    assert len(re.findall('central meridian', caplog.text)) == 1


def test_grid_matches_pyproj():
    pyproj = pytest.importorskip('pyproj')
    transformer = pyproj.Transformer.from_crs('EPSG:4326', 'EPSG:3006', always_xy=True)

    for coord in sweden_sample():
        x, y = transformer.transform(coord.longitude, coord.latitude)
        grid_coord = to_grid(coord).unwrap()
        assert grid_coord.x == approx(x, abs=0.05)
        assert grid_coord.y == approx(y, abs=0.05)


def test_stretch_warning_per_grid(caplog, monkeypatch):
    monkeypatch.setattr(NationalGrid, 'WARNED_ONCE', set())
    other = NationalGrid('Other', 31)

    for _ in range(2):
        SWEREF99_TM.to_grid(GeographicCoordinate(27., 60.))
        other.to_grid(GeographicCoordinate(27., 60.))

    assert len(re.findall('central meridian', caplog.text)) == 2
    assert 'SWEREF 99 TM is being used' in caplog.text
    assert 'Other is being used' in caplog.text
