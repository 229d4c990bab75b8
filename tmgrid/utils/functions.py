"""Module for miscellaneous multi-use functions"""

__all__ = ['all_finite', 'round_half_up']

import numpy as np


def all_finite(*values) -> bool:
    """
    Test whether every value (scalar or array) is neither NaN nor infinite.

    Args:
        *values:
            Floats or numpy arrays

    Returns:
        bool
    """
    return all(bool(np.all(np.isfinite(value))) for value in values)


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)
