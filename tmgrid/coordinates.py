"""
Value types for geographic and projected coordinates
"""

__all__ = ['GeographicCoordinate', 'GridCoordinate', 'PlanarCoordinate', 'validate_zone']

from dataclasses import dataclass
import math
import numbers
from typing import Tuple, Union

from tmgrid._const import UTM_MAX_ZONE, UTM_MIN_ZONE
from tmgrid.exceptions import InvalidZoneError, OutOfDomainError
from tmgrid.utils.functions import round_half_up


def validate_zone(zone) -> int:
    """
    Returns the zone as an int, or raises InvalidZoneError if it is not an
    integer in [1, 60].
    """
    if isinstance(zone, bool) or not isinstance(zone, numbers.Integral):
        raise InvalidZoneError(zone)

    if not UTM_MIN_ZONE <= zone <= UTM_MAX_ZONE:
        raise InvalidZoneError(zone)

    return int(zone)


@dataclass(frozen=True)
class GeographicCoordinate:
    """
    Representation of a coordinate on the globe (i.e., a lon/lat pair), in
    decimal degrees on the WGS84 ellipsoid.

    Longitudes are wrapped across the antimeridian into [-180, 180).
    Latitudes outside [-90, 90] are rejected.
    """
    longitude: float
    latitude: float

    def __post_init__(self):
        lon, lat = float(self.longitude), float(self.latitude)
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise OutOfDomainError(f'Coordinate values must be finite, got ({lon}, {lat})')

        if not -90 <= lat <= 90:
            raise ValueError(f'Latitude must be between -90 and 90, got {lat}')

        while not -180 <= lon <= 180:
            # Crosses the antimeridian
            lon = lon - 360 if lon > 180 else lon + 360

        # Longitudes are bounded to [-180, 180)
        if lon == 180:
            lon = -180.

        object.__setattr__(self, 'longitude', lon)
        object.__setattr__(self, 'latitude', lat)

    def __repr__(self):
        return f'<GeographicCoordinate({self.longitude}, {self.latitude})>'

    @property
    def radians(self) -> Tuple[float, float]:
        """The (longitude, latitude) pair in radians"""
        return math.radians(self.longitude), math.radians(self.latitude)

    @property
    def southern(self) -> bool:
        """Whether the coordinate lies south of the equator"""
        return self.latitude < 0.

    @classmethod
    def from_dms(
        cls,
        lon: Tuple[Union[int, float], Union[int, float], float, str],
        lat: Tuple[Union[int, float], Union[int, float], float, str],
    ):
        """
        Creates a GeographicCoordinate from a Degree Minutes Seconds (lon, lat) pair,
        as stored in image GPS metadata.

        The quadrant value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude);
        'W' and 'S' negate the value.

        Args:
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            GeographicCoordinate
        """
        def convert(dms, valid: Tuple[str, str]):
            quadrant = dms[3].upper()
            if quadrant not in valid:
                raise ValueError(f'Quadrant must be one of {valid}, got {dms[3]!r}')

            mult = -1 if quadrant in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lon, ('E', 'W')), convert(lat, ('N', 'S')))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the coordinate to (longitude, latitude) tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted value as ((degrees, minutes, seconds, hemisphere), ...)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude
        return self.longitude, self.latitude


@dataclass(frozen=True)
class PlanarCoordinate:
    """
    A projected UTM coordinate. Easting and northing only mean something
    together with the zone and hemisphere they were computed under, so all
    four travel together.

    Args:
        x:
            Easting, in meters (false easting applied)

        y:
            Northing, in meters (false northing applied in the southern hemisphere)

        zone:
            The UTM zone, in [1, 60]

        southern:
            True if the point lies in the southern hemisphere
    """
    x: float
    y: float
    zone: int
    southern: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'zone', validate_zone(self.zone))
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'southern', bool(self.southern))
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise OutOfDomainError(
                f'Projected values must be finite, got ({self.x}, {self.y}) in zone {self.zone}'
            )

    @property
    def hemisphere(self) -> str:
        """'N' or 'S'"""
        return 'S' if self.southern else 'N'

    def __str__(self):
        return f'{self.zone}{self.hemisphere} {self.x:1.3f} {self.y:1.3f}'


@dataclass(frozen=True)
class GridCoordinate:
    """
    An easting/northing pair in a national grid, where the zone and hemisphere
    are fixed by the grid itself (see tmgrid.grid.NationalGrid).
    """
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise OutOfDomainError(f'Grid values must be finite, got ({self.x}, {self.y})')

    def __str__(self):
        return f'{self.x:1.3f}, {self.y:1.3f}'

    def to_float(self) -> Tuple[float, float]:
        """The (x, y) pair, as sent to parcel registries"""
        return self.x, self.y
