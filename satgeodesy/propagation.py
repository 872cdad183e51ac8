"""
The boundary between satgeodesy and an external orbital propagator.

satgeodesy does not propagate orbits. Any object with a
``propagate(satellite, epoch)`` method returning an ECEF position in the
propagator's native unit can be used (e.g. a wrapper around an SGP4/SDP4
implementation).
"""

__all__ = ['Propagator', 'Satellite', 'satellite_to_geodetic', 'track_satellites']

from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from satgeodesy.conversion import normalize_position
from satgeodesy.coordinates import GeodeticCoordinate
from satgeodesy.exceptions import GeodeticError, PropagationError
from satgeodesy.geodetic import GeodeticResolver
from satgeodesy.time import current_epoch
from satgeodesy.utils.logging import LOGGER
from satgeodesy.vectors import PositionVector


class Satellite:
    """
    A catalogued satellite and its orbital element set.

    Args:
        catalog_id:
            The catalog identifier, e.g. '1998-067A'

        name:
            The satellite's name, as used to look it up in the element set

        tle:
            The raw element set text. Not parsed by satgeodesy.

        is_favorite:
            (Default False) Whether the satellite has been marked by the user
    """

    def __init__(self, catalog_id: str, name: str, tle: str, is_favorite: bool = False):
        self.catalog_id = catalog_id
        self.name = name
        self.tle = tle
        self.is_favorite = is_favorite

    def __eq__(self, other):
        if not isinstance(other, Satellite):
            return False

        return (
            self.catalog_id == other.catalog_id and
            self.name == other.name and
            self.tle == other.tle
        )

    def __hash__(self):
        return hash((self.catalog_id, self.name, self.tle))

    def __repr__(self):
        return f'<Satellite({self.catalog_id}, {self.name})>'


class Propagator(Protocol):  # pylint: disable=too-few-public-methods
    """An external orbital propagator"""

    def propagate(self, satellite: Satellite, epoch: float) -> Sequence[float]:
        """
        Compute the satellite's ECEF position at the epoch, in the propagator's
        native unit. Raises a PropagationError (e.g. SatelliteNotFoundError,
        EpochOutOfRangeError) on failure.
        """


def satellite_to_geodetic(
    propagator: Propagator,
    satellite: Satellite,
    epoch: Optional[float] = None,
    resolver: Optional[GeodeticResolver] = None,
    unit: str = 'gm',
) -> GeodeticCoordinate:
    """
    Locate a satellite over the globe: propagate, normalize to kilometers, then
    resolve to geodetic coordinates.

    Propagation errors are raised unchanged; conversion failures raise
    DomainError or NonConvergenceError.

    Args:
        propagator:
            The external propagator

        satellite:
            The satellite to locate

        epoch:
            (Optional) Days since JD 2450000.0. Defaults to the current time.

        resolver:
            (Optional) A configured GeodeticResolver. Defaults to GeodeticResolver().

        unit:
            (Default 'gm') The unit the propagator reports positions in

    Returns:
        GeodeticCoordinate
    """
    epoch = current_epoch() if epoch is None else epoch
    resolver = resolver or GeodeticResolver()

    raw = PositionVector(*propagator.propagate(satellite, epoch))
    return resolver.resolve(normalize_position(raw, unit))


def track_satellites(
    propagator: Propagator,
    satellites: Iterable[Satellite],
    epoch: Optional[float] = None,
    resolver: Optional[GeodeticResolver] = None,
    unit: str = 'gm',
) -> List[Tuple[Satellite, Union[GeodeticCoordinate, GeodeticError, PropagationError]]]:
    """
    Locate many satellites at a single epoch. A satellite that cannot be
    located is paired with the error it raised instead of a coordinate.

    Args:
        propagator:
            The external propagator

        satellites:
            The satellites to locate

        epoch:
            (Optional) Days since JD 2450000.0. Defaults to the current time.

        resolver:
            (Optional) A configured GeodeticResolver

        unit:
            (Default 'gm') The unit the propagator reports positions in

    Returns:
        List of (satellite, coordinate or error) pairs, in input order
    """
    epoch = current_epoch() if epoch is None else epoch
    resolver = resolver or GeodeticResolver()

    results: List[Tuple[Satellite, Union[GeodeticCoordinate, GeodeticError, PropagationError]]] = []
    for satellite in satellites:
        try:
            result = satellite_to_geodetic(propagator, satellite, epoch, resolver, unit)
        except (GeodeticError, PropagationError) as exc:
            LOGGER.info('Could not locate %s at epoch %s: %s', satellite.name, epoch, exc)
            result = exc
        results.append((satellite, result))

    return results
