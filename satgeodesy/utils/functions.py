"""Module for miscellaneous multi-use functions"""

__all__ = ['default_to_zulu', 'ensure_finite', 'round_half_up']

from datetime import datetime, timezone
import math
from typing import Iterable

from satgeodesy.exceptions import DomainError
from satgeodesy.utils.logging import warn_once


def default_to_zulu(dt: datetime) -> datetime:
    """Add Zulu/UTC as timezone, if timezone not present"""
    if not dt.tzinfo:
        warn_once(
            'Datetime does not contain timezone information; Zulu/UTC time assumed. '
            '(this warning will not repeat)'
        )
        return dt.replace(tzinfo=timezone.utc)

    return dt


def ensure_finite(values: Iterable[float], msg: str) -> None:
    """
    Raise a DomainError if any value is NaN or infinite.

    Args:
        values:
            The values to check

        msg:
            The error message, describing what the values are

    Returns:
        None
    """
    values = tuple(values)
    if not all(math.isfinite(x) for x in values):
        raise DomainError(msg, values)


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
