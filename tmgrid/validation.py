"""
Round trip validation: project a coordinate, reproject the result back to
geographic and check how far it drifted. A drift beyond a few centimeters
means the input was outside the projection's domain (wrong hemisphere, near
a pole, far from the central meridian), not floating point noise, so results
failing this check must be rejected.
"""

__all__ = ['round_trip_error', 'utm_round_trip_error', 'validate', 'validate_utm']

from typing import Optional

from tmgrid._const import DEFAULT_ROUND_TRIP_TOLERANCE
from tmgrid.coordinates import GeographicCoordinate
from tmgrid.distance import distance_meters
from tmgrid.exceptions import OutOfDomainError
from tmgrid.grid import NationalGrid, SWEREF99_TM
from tmgrid.utm import geographic_to_utm, utm_to_geographic


def round_trip_error(
    coord: GeographicCoordinate,
    grid: NationalGrid = SWEREF99_TM,
) -> Optional[float]:
    """
    Surface distance in meters between a coordinate and its reprojection
    through a national grid.

    Args:
        coord: (GeographicCoordinate)
            The original coordinate

        grid: (NationalGrid)
            (Default SWEREF 99 TM) The grid to project through

    Returns:
        The drift in meters, or None if the grid does not cover the coordinate
    """
    return grid.round_trip_error(coord)


def validate(
    coord: GeographicCoordinate,
    tolerance: Optional[float] = None,
    grid: NationalGrid = SWEREF99_TM,
) -> bool:
    """
    Whether a coordinate survives a round trip through a national grid.

    Args:
        coord: (GeographicCoordinate)
            The original coordinate

        tolerance: (float)
            (Optional) Maximum drift in meters; defaults to the grid's
            tolerance (0.1m unless configured otherwise)

        grid: (NationalGrid)
            (Default SWEREF 99 TM) The grid to project through

    Returns:
        bool; False for coordinates the grid does not cover
    """
    tolerance = grid.tolerance if tolerance is None else tolerance
    try:
        error = grid.round_trip_error(coord)
    except OutOfDomainError:
        return False

    return error is not None and error <= tolerance


def utm_round_trip_error(coord: GeographicCoordinate, zone: Optional[int] = None) -> float:
    """
    Surface distance in meters between a coordinate and its reprojection
    through UTM.

    Args:
        coord: (GeographicCoordinate)
            The original coordinate

        zone: (int)
            (Optional) The zone to project through; derived from the longitude
            if omitted

    Returns:
        float
    """
    return distance_meters(coord, utm_to_geographic(geographic_to_utm(coord, zone)))


def validate_utm(
    coord: GeographicCoordinate,
    zone: Optional[int] = None,
    tolerance: float = DEFAULT_ROUND_TRIP_TOLERANCE,
) -> bool:
    """Whether a coordinate survives a round trip through UTM within tolerance"""
    try:
        return utm_round_trip_error(coord, zone) <= tolerance
    except OutOfDomainError:
        return False
