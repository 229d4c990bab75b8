"""
National grids built by stretching a single UTM zone across a whole country.

SWEREF 99 TM, the Swedish national grid, projects all of Sweden (true UTM
zones 32 through 35) through zone 33's central meridian at 15E.
"""

__all__ = ['NationalGrid', 'SWEREF99_TM', 'to_geographic', 'to_grid']

from typing import Optional

from tmgrid._const import DEFAULT_ROUND_TRIP_TOLERANCE, SWEREF99_TM_ZONE
from tmgrid.coordinates import GeographicCoordinate, GridCoordinate, PlanarCoordinate, validate_zone
from tmgrid.distance import distance_meters
from tmgrid.exceptions import RoundTripToleranceError
from tmgrid.results import Absent, Present, Result
from tmgrid.utils.mixins import LoggingMixin
from tmgrid.utm import central_meridian, geographic_to_utm, utm_to_geographic

# Beyond this many degrees from the central meridian, series error grows quickly
_STRETCH_WARNING_DEGREES = 10.0


class NationalGrid(LoggingMixin):
    """
    A fixed-zone Transverse Mercator grid covering the northern hemisphere.

    Args:
        name: (str)
            A display name, e.g. 'SWEREF 99 TM'

        zone: (int)
            The UTM zone whose central meridian the grid uses

        tolerance: (float)
            (Default 0.1) The default round trip tolerance in meters used by
            .convert() and tmgrid.validation.validate()
    """

    def __init__(
        self,
        name: str,
        zone: int,
        tolerance: float = DEFAULT_ROUND_TRIP_TOLERANCE,
    ):
        if not tolerance > 0:
            raise ValueError(f'Round trip tolerance must be positive, got {tolerance}')

        self.name = name
        self.zone = validate_zone(zone)
        self.tolerance = float(tolerance)

    def __repr__(self):
        return f'<NationalGrid({self.name!r}, zone={self.zone})>'

    @property
    def central_meridian(self) -> float:
        """The grid's central meridian, in decimal degrees"""
        return central_meridian(self.zone)

    def to_grid(self, coord: GeographicCoordinate) -> Result[GridCoordinate]:
        """
        Projects a geographic coordinate into the grid.

        Args:
            coord: (GeographicCoordinate)
                The point to project

        Returns:
            Present(GridCoordinate), or Absent for southern hemisphere points,
            which the grid does not cover
        """
        if abs(coord.longitude - self.central_meridian) > _STRETCH_WARNING_DEGREES:
            self.warn_once(
                f'{self.name} is being used more than {_STRETCH_WARNING_DEGREES} degrees '
                'from its central meridian; expect reduced accuracy. '
                '(this warning will not repeat)'
            )

        utm = geographic_to_utm(coord, zone=self.zone)
        if utm.southern:
            return Absent(f'{coord!r} lies in the southern hemisphere, outside {self.name}')

        return Present(GridCoordinate(utm.x, utm.y))

    def to_geographic(self, grid_coord: GridCoordinate) -> GeographicCoordinate:
        """
        Converts a grid coordinate back to latitude/longitude.

        Args:
            grid_coord: (GridCoordinate)
                A coordinate in this grid

        Returns:
            GeographicCoordinate
        """
        return utm_to_geographic(
            PlanarCoordinate(grid_coord.x, grid_coord.y, self.zone, southern=False)
        )

    def round_trip_error(self, coord: GeographicCoordinate) -> Optional[float]:
        """
        Projects a coordinate into the grid and back, returning how far the
        result landed from the original in meters, or None if the grid does not
        cover the coordinate.
        """
        result = self.to_grid(coord)
        if not result.present:
            return None

        return distance_meters(coord, self.to_geographic(result.unwrap()))

    def convert(
        self,
        coord: GeographicCoordinate,
        tolerance: Optional[float] = None,
    ) -> Result[GridCoordinate]:
        """
        Projects a geographic coordinate into the grid, refusing to return a
        result that does not survive a round trip back to geographic.

        Args:
            coord: (GeographicCoordinate)
                The point to project

            tolerance: (float)
                (Optional) Maximum round trip drift in meters; defaults to the
                grid's tolerance

        Returns:
            Present(GridCoordinate), or Absent for southern hemisphere points

        Raises:
            RoundTripToleranceError: the reprojected point drifted beyond tolerance
        """
        tolerance = self.tolerance if tolerance is None else tolerance

        result = self.to_grid(coord)
        if not result.present:
            return result

        grid_coord = result.unwrap()
        error = distance_meters(coord, self.to_geographic(grid_coord))
        if not error <= tolerance:
            self.logger.debug('Round trip of %r failed: %sm > %sm', coord, error, tolerance)
            raise RoundTripToleranceError(coord, error, tolerance)

        return result


SWEREF99_TM = NationalGrid('SWEREF 99 TM', SWEREF99_TM_ZONE)


def to_grid(coord: GeographicCoordinate) -> Result[GridCoordinate]:
    """Projects a geographic coordinate into SWEREF 99 TM"""
    return SWEREF99_TM.to_grid(coord)


def to_geographic(grid_coord: GridCoordinate) -> GeographicCoordinate:
    """Converts a SWEREF 99 TM coordinate to latitude/longitude"""
    return SWEREF99_TM.to_geographic(grid_coord)
