"""
Contracts for the services around the projection core: where coordinates
come from (image geotags), and what consumes them (parcel registries, reverse
geocoders, report writers).

Implementations only need to provide the matching method; no subclassing
required.
"""

__all__ = [
    'AddressRecord', 'GeotagSource', 'ParcelRecord', 'ParcelRegistry',
    'ReportWriter', 'ResultRow', 'ReverseGeocoder',
]

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, runtime_checkable

from tmgrid.coordinates import GeographicCoordinate, GridCoordinate
from tmgrid.results import Result


@dataclass(frozen=True)
class ParcelRecord:
    """
    A parcel registry match. Either field may be missing even when the
    registry answered successfully.
    """
    area_name: Optional[str] = None
    parcel_id: Optional[str] = None


@dataclass(frozen=True)
class AddressRecord:
    """A reverse geocoded street address"""
    address: str
    low_accuracy: bool = False


@dataclass(frozen=True)
class ResultRow:
    """One fully processed input, as handed to a report writer"""
    identifier: str
    coordinate: GeographicCoordinate
    grid_coordinate: GridCoordinate
    parcel: Optional[ParcelRecord] = None
    address: Optional[AddressRecord] = None
    registry_error: Optional[str] = None
    address_error: Optional[str] = None

    @property
    def area_name(self) -> Optional[str]:
        return self.parcel.area_name if self.parcel else None

    @property
    def parcel_id(self) -> Optional[str]:
        return self.parcel.parcel_id if self.parcel else None


@runtime_checkable
class GeotagSource(Protocol):
    """
    Yields the location embedded in an image, if any. Hemisphere references
    (S/W) must already be applied to the signs.
    """

    def geotag(self, identifier: str) -> Optional[GeographicCoordinate]:
        ...


@runtime_checkable
class ParcelRegistry(Protocol):
    """
    Looks up the parcel containing a grid coordinate. Returns Absent when the
    registry has no parcel at the point and raises RegistryRequestError when
    the lookup itself failed.
    """

    def lookup(self, grid_coord: GridCoordinate) -> Result[ParcelRecord]:
        ...


@runtime_checkable
class ReverseGeocoder(Protocol):
    """Resolves a coordinate to a street address, if one is known"""

    def reverse(self, coord: GeographicCoordinate) -> Optional[AddressRecord]:
        ...


@runtime_checkable
class ReportWriter(Protocol):
    """Serializes processed rows"""

    def write(self, rows: Sequence[ResultRow]) -> None:
        ...
