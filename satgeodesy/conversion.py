"""
Module for unit conversions of propagator output
"""
__all__ = ['convert_to_kilometers', 'normalize_position', 'normalize_positions']

import numpy as np

from satgeodesy._const import EARTH_A_KM, NATIVE_UNIT_SCALE
from satgeodesy.vectors import PositionVector

_KILOMETER_FACTORS = {
    'km': 1.,
    'm': 1e-3,
    'gm': NATIVE_UNIT_SCALE,
    'au': 149_597_870.7,
    'er': EARTH_A_KM,
}


def _factor(unit: str) -> float:
    unit = unit.lower()
    if unit not in _KILOMETER_FACTORS:
        raise ValueError(
            f"Unknown unit '{unit}'. Options: {list(_KILOMETER_FACTORS.keys())}"
        )

    return _KILOMETER_FACTORS[unit]


def convert_to_kilometers(distance: float, unit: str) -> float:
    """
    Converts distance to kilometers.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', gigameter = 'gm',
        astronomical unit = 'au', equatorial earth radius = 'er').

    Returns:
        float: The distance in kilometers.
    """
    return distance * _factor(unit)


def normalize_position(vector: PositionVector, unit: str = 'gm') -> PositionVector:
    """
    Rescale a propagator position from its native unit to kilometers. The
    magnitude is not validated; a zero vector is returned unchanged.

    Args:
        vector:
            The position as reported by the propagator

        unit:
            (Default 'gm') The unit the propagator reports in

    Returns:
        PositionVector, in kilometers
    """
    return vector.scale(_factor(unit))


def normalize_positions(positions: np.ndarray, unit: str = 'gm') -> np.ndarray:
    """
    Rescale an array of propagator positions to kilometers.

    Args:
        positions:
            Array of shape (N, 3)

        unit:
            (Default 'gm') The unit the propagator reports in

    Returns:
        Array of shape (N, 3), in kilometers
    """
    positions = np.asarray(positions, dtype=float)
    if positions.ndim != 2 or positions.shape[1] != 3:
        raise ValueError(f'Expected an array of shape (N, 3), received {positions.shape}')

    return positions * _factor(unit)
