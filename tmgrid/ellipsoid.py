"""
Reference ellipsoid models
"""

__all__ = ['Ellipsoid', 'WGS84']

from dataclasses import dataclass

from tmgrid._const import WGS84_A, WGS84_B


@dataclass(frozen=True)
class Ellipsoid:
    """
    An oblate spheroid approximating the shape of the earth.

    Only the two axes are stored; everything else is derived on access.

    Args:
        semi_major_axis:
            Equatorial radius, in meters

        semi_minor_axis:
            Polar radius, in meters
    """
    semi_major_axis: float
    semi_minor_axis: float

    def __post_init__(self):
        if not self.semi_major_axis > self.semi_minor_axis > 0:
            raise ValueError(
                'Ellipsoid axes must satisfy semi_major_axis > semi_minor_axis > 0, '
                f'got {self.semi_major_axis}, {self.semi_minor_axis}'
            )

    @property
    def flattening(self) -> float:
        """f = (a - b) / a"""
        return (self.semi_major_axis - self.semi_minor_axis) / self.semi_major_axis

    @property
    def third_flattening(self) -> float:
        """n = (a - b) / (a + b), the expansion parameter of the meridian series"""
        return (
            (self.semi_major_axis - self.semi_minor_axis)
            / (self.semi_major_axis + self.semi_minor_axis)
        )

    @property
    def eccentricity_squared(self) -> float:
        """e^2 = (a^2 - b^2) / a^2"""
        return (
            (self.semi_major_axis ** 2 - self.semi_minor_axis ** 2)
            / self.semi_major_axis ** 2
        )

    @property
    def second_eccentricity_squared(self) -> float:
        """e'^2 = (a^2 - b^2) / b^2"""
        return (
            (self.semi_major_axis ** 2 - self.semi_minor_axis ** 2)
            / self.semi_minor_axis ** 2
        )


WGS84 = Ellipsoid(WGS84_A, WGS84_B)
