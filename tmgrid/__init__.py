import sys

from tmgrid._version import __version__  # noqa: F401
from tmgrid.utils.logging import LOGGER, set_log_level
from tmgrid.coordinates import GeographicCoordinate, GridCoordinate, PlanarCoordinate
from tmgrid.ellipsoid import Ellipsoid, WGS84
from tmgrid.exceptions import (
    InvalidZoneError, OutOfDomainError, RegistryRequestError,
    RoundTripToleranceError, TmgridError
)
from tmgrid.grid import NationalGrid, SWEREF99_TM
from tmgrid.results import Absent, Present
from tmgrid.utm import geographic_to_utm, utm_to_geographic, zone_from_longitude
from tmgrid.validation import validate
from tmgrid.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'geographiclib': 'tmgrid[geodesic]',
        'httpx': 'tmgrid[registry]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'Absent',
    'Ellipsoid',
    'GeographicCoordinate',
    'GridCoordinate',
    'InvalidZoneError',
    'NationalGrid',
    'OutOfDomainError',
    'PlanarCoordinate',
    'Present',
    'RegistryRequestError',
    'RoundTripToleranceError',
    'SWEREF99_TM',
    'TmgridError',
    'WGS84',
    'geographic_to_utm',
    'utm_to_geographic',
    'validate',
    'zone_from_longitude',
    'LOGGER',
    'set_log_level',
]
