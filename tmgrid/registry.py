"""
Client for Lantmateriet's property register, which resolves a SWEREF 99 TM
coordinate to the municipal register area and property designation
(fastighetsbeteckning) at that point.

Requires the optional httpx package (pip install tmgrid[registry]).
"""

__all__ = ['LantmaterietRegistry', 'parse_registry_response']

import json
from typing import Any, Optional

from tmgrid._const import LANTMATERIET_REGISTRY_URL, LANTMATERIET_TIMEOUT_SECONDS
from tmgrid.collaborators import ParcelRecord
from tmgrid.coordinates import GridCoordinate
from tmgrid.exceptions import RegistryRequestError
from tmgrid.results import Absent, Present, Result
from tmgrid.utils.mixins import LoggingMixin


def parse_registry_response(body: Any) -> Result[ParcelRecord]:
    """
    Interprets a decoded registry response: a JSON list of matching register
    units, of which the first is used.

    Args:
        body:
            The decoded JSON body

    Returns:
        Present(ParcelRecord), or Absent if the registry has no unit at the point

    Raises:
        RegistryRequestError: the body does not have the expected shape
    """
    if not isinstance(body, list):
        raise RegistryRequestError('Response not as expected')

    if not body:
        return Absent('No register unit at this point')

    unit = body[0]
    if not isinstance(unit, dict):
        raise RegistryRequestError('Response not as expected')

    area_name = unit.get('registeromrade')
    if not isinstance(area_name, str):
        area_name = None

    parcel_id = None
    trakt, block, enhet = unit.get('trakt'), unit.get('block'), unit.get('enhet')
    if all(isinstance(part, str) for part in (trakt, block, enhet)):
        parcel_id = f'{trakt} {block}:{enhet}'

    return Present(ParcelRecord(area_name=area_name, parcel_id=parcel_id))


class LantmaterietRegistry(LoggingMixin):
    """
    Parcel registry backed by Lantmateriet's register unit reference service.

    Requests are made once; retries and rate limiting are left to the caller.

    Args:
        url: (str)
            (Optional) The lookup endpoint

        timeout: (float)
            (Default 5.0) Request timeout in seconds

        client: (httpx.Client)
            (Optional) A preconfigured client, e.g. with a proxy or a mock
            transport. A default client is used if omitted.
    """

    def __init__(
        self,
        url: str = LANTMATERIET_REGISTRY_URL,
        timeout: float = LANTMATERIET_TIMEOUT_SECONDS,
        client: Optional[Any] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._client = client

    def _post(self, content: str):
        import httpx  # pylint: disable=import-outside-toplevel

        headers = {'Content-Type': 'application/text'}
        try:
            if self._client is not None:
                return self._client.post(
                    self.url, content=content, headers=headers, timeout=self.timeout
                )
            return httpx.post(self.url, content=content, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            raise RegistryRequestError(f'Error making request: {e}') from e

    def lookup(self, grid_coord: GridCoordinate) -> Result[ParcelRecord]:
        """
        Looks up the register unit containing a SWEREF 99 TM coordinate.

        Args:
            grid_coord: (GridCoordinate)
                A SWEREF 99 TM coordinate

        Returns:
            Present(ParcelRecord), or Absent if no unit covers the point

        Raises:
            RegistryRequestError: the request failed or the response was malformed
        """
        payload = {'type': 'Point', 'coordinates': list(grid_coord.to_float())}
        self.logger.debug('Looking up %s', grid_coord)

        resp = self._post(json.dumps(payload))
        if resp.status_code != 200:
            raise RegistryRequestError(
                f'Got error code: {resp.status_code}', status_code=resp.status_code
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise RegistryRequestError("Response isn't JSON") from e

        return parse_registry_response(body)
