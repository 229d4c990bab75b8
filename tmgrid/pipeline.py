"""
Batch lookups: geotagged inputs in, one outcome per input out.

Each input is geotagged, projected into a national grid, gated on a round
trip check, and then enriched with parcel and address information. A failure
on one input never stops the batch.
"""

__all__ = ['Failed', 'LookupPipeline', 'Outcome', 'Processed', 'Skipped']

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from tmgrid.collaborators import (
    GeotagSource, ParcelRecord, ParcelRegistry,
    ReportWriter, ResultRow, ReverseGeocoder,
)
from tmgrid.coordinates import GeographicCoordinate, GridCoordinate
from tmgrid.exceptions import RegistryRequestError, TmgridError
from tmgrid.grid import NationalGrid, SWEREF99_TM
from tmgrid.utils.mixins import LoggingMixin


@dataclass(frozen=True)
class Processed:
    """The input was converted and looked up"""
    row: ResultRow

    @property
    def identifier(self) -> str:
        return self.row.identifier


@dataclass(frozen=True)
class Skipped:
    """The input has no answer: no geotag, or outside the grid"""
    identifier: str
    reason: str


@dataclass(frozen=True)
class Failed:
    """
    The input could not be converted: the round trip check tripped, or the
    geotag source raised while reading it
    """
    identifier: str
    error: Exception

    @property
    def reason(self) -> str:
        return str(self.error)


Outcome = Union[Processed, Skipped, Failed]


class LookupPipeline(LoggingMixin):
    """
    Runs geotagged inputs through a national grid and the lookup services.

    Args:
        geotag_source: (GeotagSource)
            Provides the coordinate for each input identifier

        registry: (ParcelRegistry)
            (Optional) Parcel registry to query with each grid coordinate

        geocoder: (ReverseGeocoder)
            (Optional) Reverse geocoder to query with each geographic coordinate

        writer: (ReportWriter)
            (Optional) Receives all processed rows once the batch completes

        grid: (NationalGrid)
            (Default SWEREF 99 TM) The grid to project into

        tolerance: (float)
            (Optional) Round trip tolerance in meters; defaults to the grid's
    """

    def __init__(
        self,
        geotag_source: GeotagSource,
        registry: Optional[ParcelRegistry] = None,
        geocoder: Optional[ReverseGeocoder] = None,
        writer: Optional[ReportWriter] = None,
        grid: NationalGrid = SWEREF99_TM,
        tolerance: Optional[float] = None,
    ):
        self.geotag_source = geotag_source
        self.registry = registry
        self.geocoder = geocoder
        self.writer = writer
        self.grid = grid
        self.tolerance = tolerance

    def _lookup_parcel(self, identifier: str, grid_coord: GridCoordinate):
        if self.registry is None:
            return None, None

        try:
            result = self.registry.lookup(grid_coord)
        except RegistryRequestError as e:
            self.logger.warning('Registry lookup failed for %s: %s', identifier, e.reason)
            return None, e.reason
        except Exception as e:  # pylint: disable=broad-except
            self.logger.warning('Registry lookup failed for %s: %r', identifier, e)
            return None, str(e) or type(e).__name__

        if not result.present:
            return ParcelRecord(), None

        return result.unwrap(), None

    def _lookup_address(self, identifier: str, coord: GeographicCoordinate):
        if self.geocoder is None:
            return None, None

        try:
            return self.geocoder.reverse(coord), None
        except Exception as e:  # pylint: disable=broad-except
            self.logger.warning('Reverse geocoding failed for %s: %r', identifier, e)
            return None, str(e) or type(e).__name__

    def process(self, identifier: str) -> Outcome:
        """
        Processes a single input.

        Args:
            identifier: (str)
                The input to process, as understood by the geotag source

        Returns:
            Processed, Skipped or Failed
        """
        try:
            coord = self.geotag_source.geotag(identifier)
        except Exception as e:  # pylint: disable=broad-except
            self.logger.warning('Could not read geotag from %s: %r', identifier, e)
            return Failed(identifier, e)

        if coord is None:
            self.logger.warning('No geotag present in %s', identifier)
            return Skipped(identifier, 'No geotag present')

        self.logger.info('Performing lookups for %s', identifier)
        try:
            result = self.grid.convert(coord, self.tolerance)
        except TmgridError as e:
            self.logger.warning('Coordinate conversion failed for %s: %s', identifier, e)
            return Failed(identifier, e)

        if not result.present:
            self.logger.warning("Couldn't convert %s to %s", identifier, self.grid.name)
            return Skipped(identifier, result.reason)

        grid_coord = result.unwrap()
        self.logger.info('%s coordinate of %s is %s', self.grid.name, identifier, grid_coord)

        parcel, registry_error = self._lookup_parcel(identifier, grid_coord)
        address, address_error = self._lookup_address(identifier, coord)
        return Processed(ResultRow(
            identifier=identifier,
            coordinate=coord,
            grid_coordinate=grid_coord,
            parcel=parcel,
            address=address,
            registry_error=registry_error,
            address_error=address_error,
        ))

    def run(self, identifiers: Iterable[str]) -> List[Outcome]:
        """
        Processes a batch of inputs, in order. Every input yields exactly one
        outcome. Processed rows are passed to the report writer, if any.

        Args:
            identifiers: (Iterable[str])
                The inputs to process

        Returns:
            List of outcomes, in input order
        """
        outcomes = [self.process(identifier) for identifier in identifiers]

        rows = [x.row for x in outcomes if isinstance(x, Processed)]
        self.logger.info(
            'Processed %s of %s inputs', len(rows), len(outcomes)
        )
        if self.writer is not None:
            self.writer.write(rows)

        return outcomes
