"""Epoch conversions for the propagator's day-count time scales"""

__all__ = ['current_epoch', 'julian_date', 'julian_epoch', 'modified_julian_date']

from datetime import datetime, timezone

from pydantic import validate_call

from satgeodesy._const import JD_EPOCH_OFFSET, JD_UNIX_EPOCH, MJD_OFFSET
from satgeodesy.utils.functions import default_to_zulu


@validate_call
def julian_date(dt: datetime) -> float:
    """
    Convert a datetime to a Julian Date. Datetimes without timezone information
    are assumed to be UTC.

    Args:
        dt:
            The datetime

    Returns:
        (float) the Julian Date
    """
    dt = default_to_zulu(dt)
    return dt.timestamp() / 86400.0 + JD_UNIX_EPOCH


def julian_epoch(dt: datetime) -> float:
    """
    Convert a datetime to the propagator's epoch: days since JD 2450000.0
    (1995-10-09T12:00Z).

    Args:
        dt:
            The datetime

    Returns:
        (float) days since JD 2450000.0
    """
    return julian_date(dt) - JD_EPOCH_OFFSET


def modified_julian_date(dt: datetime) -> float:
    """Convert a datetime to a Modified Julian Date (days since 1858-11-17T00:00Z)"""
    return julian_date(dt) - MJD_OFFSET


def current_epoch() -> float:
    """The propagator's epoch (see julian_epoch) for the current time"""
    return julian_epoch(datetime.now(timezone.utc))
