"""
Meridian arc length and its inverse, the footpoint latitude.

Both are truncated series in the third flattening n, after
Hoffmann-Wellenhof, Lichtenegger and Collins, GPS: Theory and Practice,
3rd ed. (1994), eqs. 10.17 - 10.23.

Evaluated with numpy ufuncs: inputs may be floats or arrays, and NaN or
infinite inputs come back as NaN rather than raising.
"""

__all__ = ['arc_length_of_meridian', 'footpoint_latitude', 'rectifying_radius']

import numpy as np

from tmgrid.ellipsoid import Ellipsoid, WGS84


def rectifying_radius(ellipsoid: Ellipsoid = WGS84) -> float:
    """
    The alpha term shared by both series: the radius of a sphere whose
    meridians have the same length as the ellipsoid's.
    """
    a, b = ellipsoid.semi_major_axis, ellipsoid.semi_minor_axis
    n = ellipsoid.third_flattening
    return ((a + b) / 2.0) * (1.0 + (n ** 2 / 4.0) + (n ** 4 / 64.0))


def arc_length_of_meridian(phi, ellipsoid: Ellipsoid = WGS84):
    """
    Computes the ellipsoidal distance from the equator to a point at a given
    latitude.

    Args:
        phi:
            Latitude of the point, in radians

        ellipsoid: (Ellipsoid)
            (Default WGS84) The reference ellipsoid

    Returns:
        The distance from the equator along the meridian, in meters.
        Negative for southern latitudes.
    """
    n = ellipsoid.third_flattening
    alpha = rectifying_radius(ellipsoid)

    beta = (-3.0 * n / 2.0) + (9.0 * n ** 3 / 16.0) + (-3.0 * n ** 5 / 32.0)
    gamma = (15.0 * n ** 2 / 16.0) + (-15.0 * n ** 4 / 32.0)
    delta = (-35.0 * n ** 3 / 48.0) + (105.0 * n ** 5 / 256.0)
    epsilon = 315.0 * n ** 4 / 512.0

    with np.errstate(invalid='ignore'):
        return alpha * (
            phi
            + (beta * np.sin(2.0 * phi))
            + (gamma * np.sin(4.0 * phi))
            + (delta * np.sin(6.0 * phi))
            + (epsilon * np.sin(8.0 * phi))
        )


def footpoint_latitude(y, ellipsoid: Ellipsoid = WGS84):
    """
    Computes the footpoint latitude: the latitude whose meridian arc length
    equals the given northing. Used as the expansion point when converting
    Transverse Mercator coordinates back to latitude/longitude.

    Args:
        y:
            The northing, in meters, in the unscaled Transverse Mercator plane

        ellipsoid: (Ellipsoid)
            (Default WGS84) The reference ellipsoid

    Returns:
        The footpoint latitude, in radians
    """
    n = ellipsoid.third_flattening
    y_ = y / rectifying_radius(ellipsoid)

    beta_ = (3.0 * n / 2.0) + (-27.0 * n ** 3 / 32.0) + (269.0 * n ** 5 / 512.0)
    gamma_ = (21.0 * n ** 2 / 16.0) + (-55.0 * n ** 4 / 32.0)
    delta_ = (151.0 * n ** 3 / 96.0) + (-417.0 * n ** 5 / 128.0)
    epsilon_ = 1097.0 * n ** 4 / 512.0

    with np.errstate(invalid='ignore'):
        return (
            y_
            + (beta_ * np.sin(2.0 * y_))
            + (gamma_ * np.sin(4.0 * y_))
            + (delta_ * np.sin(6.0 * y_))
            + (epsilon_ * np.sin(8.0 * y_))
        )
