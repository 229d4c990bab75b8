"""
Transverse Mercator projection on an ellipsoid, forward and inverse.

Both directions are power series about auxiliary quantities (the radius of
curvature N, t = tan(phi) and, for the inverse, the footpoint latitude), so
each conversion is a fixed-degree polynomial evaluation with no iteration.
Terms run through the 8th power of the longitude offset / easting.

Reference: Hoffmann-Wellenhof, B., Lichtenegger, H., and Collins, J.,
GPS: Theory and Practice, 3rd ed. New York: Springer-Verlag Wien, 1994.

Results are in the unscaled Transverse Mercator plane; scale factor and false
origin belong to the caller (see tmgrid.utm).
"""

__all__ = ['project', 'unproject']

from typing import Tuple

import numpy as np

from tmgrid.ellipsoid import Ellipsoid, WGS84
from tmgrid.meridian import arc_length_of_meridian, footpoint_latitude


def project(phi, lam, lam0, ellipsoid: Ellipsoid = WGS84) -> Tuple:
    """
    Converts a latitude/longitude pair to x and y coordinates in the
    Transverse Mercator projection.

    Args:
        phi:
            Latitude of the point, in radians

        lam:
            Longitude of the point, in radians

        lam0:
            Longitude of the central meridian to be used, in radians

        ellipsoid: (Ellipsoid)
            (Default WGS84) The reference ellipsoid

    Returns:
        Tuple of (x, y) in meters
    """
    a, b = ellipsoid.semi_major_axis, ellipsoid.semi_minor_axis
    ep2 = ellipsoid.second_eccentricity_squared

    with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
        cos_phi = np.cos(phi)
        nu2 = ep2 * cos_phi ** 2
        N = a ** 2 / (b * np.sqrt(1 + nu2))  # pylint: disable=invalid-name

        t = np.tan(phi)
        t2 = t * t

        l = lam - lam0  # noqa: E741

        # l**1 and l**2 have coefficients of 1.0
        l3coef = 1.0 - t2 + nu2
        l4coef = 5.0 - t2 + 9 * nu2 + 4.0 * (nu2 * nu2)
        l5coef = 5.0 - 18.0 * t2 + (t2 * t2) + 14.0 * nu2 - 58.0 * t2 * nu2
        l6coef = 61.0 - 58.0 * t2 + (t2 * t2) + 270.0 * nu2 - 330.0 * t2 * nu2
        l7coef = 61.0 - 479.0 * t2 + 179.0 * (t2 * t2) - (t2 * t2 * t2)
        l8coef = 1385.0 - 3111.0 * t2 + 543.0 * (t2 * t2) - (t2 * t2 * t2)

        # Easting: odd powers of l
        x = (
            N * cos_phi * l
            + (N / 6.0 * cos_phi ** 3 * l3coef * l ** 3)
            + (N / 120.0 * cos_phi ** 5 * l5coef * l ** 5)
            + (N / 5040.0 * cos_phi ** 7 * l7coef * l ** 7)
        )

        # Northing: even powers of l on top of the meridian arc
        y = (
            arc_length_of_meridian(phi, ellipsoid)
            + (t / 2.0 * N * cos_phi ** 2 * l ** 2)
            + (t / 24.0 * N * cos_phi ** 4 * l4coef * l ** 4)
            + (t / 720.0 * N * cos_phi ** 6 * l6coef * l ** 6)
            + (t / 40320.0 * N * cos_phi ** 8 * l8coef * l ** 8)
        )

    return x, y


def unproject(x, y, lam0, ellipsoid: Ellipsoid = WGS84) -> Tuple:
    """
    Converts x and y coordinates in the Transverse Mercator projection to a
    latitude/longitude pair.

    Nf, nuf2, tf and tf2 play the same roles as N, nu2, t and t2 in project(),
    but are evaluated at the footpoint latitude phif.

    Args:
        x:
            The easting of the point, in meters

        y:
            The northing of the point, in meters

        lam0:
            Longitude of the central meridian to be used, in radians

        ellipsoid: (Ellipsoid)
            (Default WGS84) The reference ellipsoid

    Returns:
        Tuple of (latitude, longitude) in radians
    """
    a, b = ellipsoid.semi_major_axis, ellipsoid.semi_minor_axis
    ep2 = ellipsoid.second_eccentricity_squared

    phif = footpoint_latitude(y, ellipsoid)

    with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
        cf = np.cos(phif)
        nuf2 = ep2 * cf ** 2
        Nf = a ** 2 / (b * np.sqrt(1 + nuf2))  # pylint: disable=invalid-name

        tf = np.tan(phif)
        tf2 = tf * tf
        tf4 = tf2 * tf2

        # Fractional coefficients for x**n
        x1frac = 1.0 / (Nf * cf)
        x2frac = tf / (2.0 * Nf ** 2)
        x3frac = 1.0 / (6.0 * Nf ** 3 * cf)
        x4frac = tf / (24.0 * Nf ** 4)
        x5frac = 1.0 / (120.0 * Nf ** 5 * cf)
        x6frac = tf / (720.0 * Nf ** 6)
        x7frac = 1.0 / (5040.0 * Nf ** 7 * cf)
        x8frac = tf / (40320.0 * Nf ** 8)

        # Polynomial coefficients for x**n; x**1 has none
        x2poly = -1.0 - nuf2
        x3poly = -1.0 - 2 * tf2 - nuf2
        x4poly = (
            5.0 + 3.0 * tf2 + 6.0 * nuf2 - 6.0 * tf2 * nuf2
            - 3.0 * (nuf2 * nuf2) - 9.0 * tf2 * (nuf2 * nuf2)
        )
        x5poly = 5.0 + 28.0 * tf2 + 24.0 * tf4 + 6.0 * nuf2 + 8.0 * tf2 * nuf2
        x6poly = -61.0 - 90.0 * tf2 - 45.0 * tf4 - 107.0 * nuf2 + 162.0 * tf2 * nuf2
        x7poly = -61.0 - 662.0 * tf2 - 1320.0 * tf4 - 720.0 * (tf4 * tf2)
        x8poly = 1385.0 + 3633.0 * tf2 + 4095.0 * tf4 + 1575 * (tf4 * tf2)

        phi = (
            phif
            + x2frac * x2poly * (x * x)
            + x4frac * x4poly * x ** 4
            + x6frac * x6poly * x ** 6
            + x8frac * x8poly * x ** 8
        )

        lam = (
            lam0
            + x1frac * x
            + x3frac * x3poly * x ** 3
            + x5frac * x5poly * x ** 5
            + x7frac * x7poly * x ** 7
        )

    return phi, lam
