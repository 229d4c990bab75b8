"""
Universal Transverse Mercator: 60 six-degree zones with a fixed scale factor
and false origin layered on top of tmgrid.transverse_mercator.

Zones are derived from longitude alone. The irregular zones over
southwestern Norway and Svalbard are not applied.
"""

__all__ = [
    'central_meridian', 'geographic_to_utm', 'utm_to_geographic', 'zone_from_longitude'
]

import math
from typing import Optional

from tmgrid._const import (
    UTM_FALSE_EASTING, UTM_FALSE_NORTHING, UTM_SCALE_FACTOR, UTM_ZONE_WIDTH
)
from tmgrid.coordinates import GeographicCoordinate, PlanarCoordinate, validate_zone
from tmgrid.ellipsoid import Ellipsoid, WGS84
from tmgrid.exceptions import OutOfDomainError
from tmgrid.transverse_mercator import project, unproject
from tmgrid.utils.functions import all_finite


def zone_from_longitude(longitude: float) -> int:
    """
    Determines the UTM zone containing a longitude. Zone boundaries belong
    to the zone to their east, e.g. -180 and -174 fall in zones 1 and 2.

    Args:
        longitude:
            Longitude in decimal degrees, [-180, 180]

    Returns:
        int, the zone number in [1, 60]
    """
    if not math.isfinite(longitude):
        raise OutOfDomainError(f'Cannot derive a UTM zone from longitude {longitude}')

    if not -180 <= longitude <= 180:
        raise ValueError(f'Longitude must be between -180 and 180, got {longitude}')

    # 180 is the same meridian as -180
    if longitude == 180:
        longitude = -180.

    return validate_zone(int(math.floor((longitude + 180.0) / UTM_ZONE_WIDTH)) + 1)


def central_meridian(zone: int) -> float:
    """
    Determines the central meridian for the given UTM zone.

    Args:
        zone:
            The UTM zone, in [1, 60]

    Returns:
        The central meridian in decimal degrees, in [-177, 177]
    """
    return -183.0 + (validate_zone(zone) * UTM_ZONE_WIDTH)


def geographic_to_utm(
    coord: GeographicCoordinate,
    zone: Optional[int] = None,
    ellipsoid: Ellipsoid = WGS84,
) -> PlanarCoordinate:
    """
    Converts a geographic coordinate to UTM.

    Points south of the equator receive the 10,000km false northing. The
    hemisphere flag follows the sign of the input latitude.

    Args:
        coord: (GeographicCoordinate)
            The point to convert

        zone: (int)
            (Optional) The zone to project through. Supplying a zone forces the
            projection onto that zone's central meridian even if the point lies
            outside it. Derived from the longitude if omitted.

        ellipsoid: (Ellipsoid)
            (Default WGS84) The reference ellipsoid

    Returns:
        PlanarCoordinate
    """
    zone = zone_from_longitude(coord.longitude) if zone is None else validate_zone(zone)
    lon, lat = coord.radians

    x, y = project(lat, lon, math.radians(central_meridian(zone)), ellipsoid)
    if not all_finite(x, y):
        raise OutOfDomainError(f'{coord!r} cannot be projected into UTM zone {zone}')

    x = x * UTM_SCALE_FACTOR + UTM_FALSE_EASTING
    y = y * UTM_SCALE_FACTOR
    if y < 0.:
        y = y + UTM_FALSE_NORTHING

    return PlanarCoordinate(x, y, zone, coord.southern)


def utm_to_geographic(
    planar: PlanarCoordinate,
    ellipsoid: Ellipsoid = WGS84,
) -> GeographicCoordinate:
    """
    Converts a UTM coordinate back to latitude/longitude.

    Args:
        planar: (PlanarCoordinate)
            The point to convert, with the zone and hemisphere it was computed under

        ellipsoid: (Ellipsoid)
            (Default WGS84) The reference ellipsoid

    Returns:
        GeographicCoordinate
    """
    x = (planar.x - UTM_FALSE_EASTING) / UTM_SCALE_FACTOR

    y = planar.y
    if planar.southern:
        y -= UTM_FALSE_NORTHING
    y /= UTM_SCALE_FACTOR

    lat, lon = unproject(x, y, math.radians(central_meridian(planar.zone)), ellipsoid)
    if not all_finite(lat, lon):
        raise OutOfDomainError(f'{planar} cannot be converted to a geographic coordinate')

    lat, lon = math.degrees(lat), math.degrees(lon)
    if not -90 <= lat <= 90:
        raise OutOfDomainError(f'{planar} lies beyond the poles (latitude {lat})')

    return GeographicCoordinate(lon, lat)
