"""
Exceptions raised by tmgrid. Every failure is local to a single coordinate;
callers processing batches should catch TmgridError per input.
"""

__all__ = [
    'InvalidZoneError', 'OutOfDomainError', 'RegistryRequestError',
    'RoundTripToleranceError', 'TmgridError',
]

from typing import Any, Optional


class TmgridError(Exception):
    """Base class for all tmgrid errors"""


class InvalidZoneError(TmgridError, ValueError):
    """A UTM zone outside of the range [1, 60]"""

    def __init__(self, zone: Any):
        super().__init__(f'UTM zone must be an integer in [1, 60], not {zone!r}')
        self.zone = zone


class OutOfDomainError(TmgridError, ValueError):
    """A coordinate the projection cannot represent, e.g. NaN or infinite values"""


class RoundTripToleranceError(TmgridError):
    """
    Reprojecting a converted coordinate back to geographic landed too far from the
    original. Signals an out-of-domain input rather than floating point noise.
    """

    def __init__(self, coordinate: Any, error: float, tolerance: float):
        super().__init__(
            f'Round trip of {coordinate!r} drifted {error:.6f}m, '
            f'exceeding tolerance of {tolerance}m'
        )
        self.coordinate = coordinate
        self.error = error
        self.tolerance = tolerance


class RegistryRequestError(TmgridError):
    """A parcel registry request failed (as opposed to finding nothing)"""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
