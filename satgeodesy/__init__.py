
from satgeodesy._version import __version__  # noqa: F401
from satgeodesy.utils.logging import LOGGER
from satgeodesy.conversion import normalize_position
from satgeodesy.coordinates import GeodeticCoordinate
from satgeodesy.ellipsoid import EARTH, EllipsoidModel, WGS84
from satgeodesy.exceptions import (
    DomainError, EpochOutOfRangeError, GeodeticError, NonConvergenceError,
    PropagationError, SatelliteNotFoundError
)
from satgeodesy.geodetic import GeodeticResolver, ecef_to_geodetic, set_latitude_algorithm
from satgeodesy.propagation import Propagator, Satellite, satellite_to_geodetic, track_satellites
from satgeodesy.vectors import PositionVector


__all__ = [
    'DomainError',
    'EARTH',
    'EllipsoidModel',
    'EpochOutOfRangeError',
    'GeodeticCoordinate',
    'GeodeticError',
    'GeodeticResolver',
    'NonConvergenceError',
    'PositionVector',
    'PropagationError',
    'Propagator',
    'Satellite',
    'SatelliteNotFoundError',
    'WGS84',
    'ecef_to_geodetic',
    'normalize_position',
    'satellite_to_geodetic',
    'set_latitude_algorithm',
    'track_satellites',
    'LOGGER',
]
