# satgeodesy/geodetic.py
"""
Conversion of Earth-Centered-Earth-Fixed positions to geodetic coordinates.
Supports switching between Newton-Raphson iteration and Heikkinen's closed form
for the latitude.
"""

__all__ = [
    'GeodeticResolver', 'calculate_longitude', 'ecef_to_geodetic',
    'ecef_to_geodetic_batch', 'geodetic_altitude', 'geodetic_to_ecef',
    'heikkinen_latitude', 'latitude_degrees', 'naive_longitude',
    'newton_latitude', 'set_latitude_algorithm',
]

import math
from typing import Callable, Literal, Optional

import numpy as np
from pydantic import NonNegativeFloat, PositiveInt, validate_call

from satgeodesy._const import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE
from satgeodesy.coordinates import GeodeticCoordinate
from satgeodesy.ellipsoid import EARTH, EllipsoidModel
from satgeodesy.exceptions import DomainError, NonConvergenceError
from satgeodesy.utils.functions import ensure_finite
from satgeodesy.utils.logging import LOGGER
from satgeodesy.utils.mixins import LoggingMixin
from satgeodesy.vectors import PositionVector

TraceCallback = Callable[[int, float, float], None]


# -------------------------------------------------------------------------
# Longitude
# -------------------------------------------------------------------------

def naive_longitude(vector: PositionVector) -> float:
    """
    Longitude from the single-argument arctangent, atan(y / x).

    Cannot distinguish opposite quadrants, so the result is always within
    (-90, 90). Use calculate_longitude() for the full circle.

    Args:
        vector:
            An ECEF position

    Returns:
        (float) the longitude in degrees
    """
    ensure_finite(vector, 'Position components must be finite')
    if vector.x == 0:
        raise DomainError('Longitude is undefined for x = 0', vector.to_float())

    ratio = vector.y / vector.x
    ensure_finite((ratio,), 'Longitude ratio y / x is not finite')
    return math.degrees(math.atan(ratio))


def calculate_longitude(vector: PositionVector) -> float:
    """
    Quadrant-aware longitude, atan2(y, x), within (-180, 180].

    Args:
        vector:
            An ECEF position

    Returns:
        (float) the longitude in degrees
    """
    ensure_finite(vector, 'Position components must be finite')
    if vector.x == 0 and vector.y == 0:
        raise DomainError('Longitude is undefined on the polar axis', vector.to_float())

    return math.degrees(math.atan2(vector.y, vector.x))


# -------------------------------------------------------------------------
# Latitude
# -------------------------------------------------------------------------

def _radial_squared(vector: PositionVector) -> float:
    """Square of the distance from the polar axis; rejects degenerate input"""
    ensure_finite(vector, 'Position components must be finite')
    try:
        p_sq = vector.x ** 2 + vector.y ** 2
    except OverflowError as exc:
        raise DomainError('Distance from the polar axis overflowed', vector.to_float()) from exc

    if p_sq == 0:
        raise DomainError('Latitude is undefined on the polar axis', vector.to_float())

    return p_sq


def newton_latitude(
    vector: PositionVector,
    ellipsoid: EllipsoidModel = EARTH,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    trace: Optional[TraceCallback] = None,
) -> float:
    """
    Calculate the geodetic latitude by Newton-Raphson iteration on
    kappa = (p / z) * tan(latitude), where p is the distance from the polar axis.

    The iterate starts from 1 / (1 - e^2), which is exact for points on the
    ellipsoid surface, and stops once successive iterates differ by less than
    the tolerance.

    Args:
        vector:
            An ECEF position, in kilometers

        ellipsoid:
            (Default EARTH) The reference ellipsoid

        tolerance:
            (Default 0.1) Convergence threshold on the dimensionless iterate

        max_iterations:
            (Default 100) Number of steps after which NonConvergenceError is raised

        trace:
            (Optional) Called as trace(iteration, previous, current) after each step

    Returns:
        (float) the latitude in degrees
    """
    if tolerance < 0:
        raise ValueError(f'tolerance must be non-negative, not {tolerance}')
    if max_iterations < 1:
        raise ValueError(f'max_iterations must be at least 1, not {max_iterations}')

    p_sq = _radial_squared(vector)
    z = vector.z
    ecc_sq = ellipsoid.eccentricity_squared
    if ecc_sq == 0:
        # Spherical earth; geodetic and geocentric latitude coincide
        return math.degrees(math.atan2(z, math.sqrt(p_sq)))

    z_term = (1 - ecc_sq) * z ** 2
    scale = ellipsoid.a * ecc_sq

    previous = current = 1 / (1 - ecc_sq)
    for iteration in range(1, max_iterations + 1):
        try:
            c = (p_sq + z_term * previous ** 2) ** 1.5 / scale
            denominator = c - p_sq
            if denominator == 0:
                raise DomainError(
                    'Latitude iteration denominator vanished', vector.to_float()
                )
            current = 1 + (p_sq + z_term * previous ** 3) / denominator
        except OverflowError as exc:
            raise DomainError('Latitude iteration overflowed', vector.to_float()) from exc

        ensure_finite((current,), 'Latitude iteration produced a non-finite iterate')

        LOGGER.debug(
            'Latitude iteration %d: previous=%r current=%r', iteration, previous, current
        )
        if trace is not None:
            trace(iteration, previous, current)

        if abs(current - previous) < tolerance:
            break

        previous = current
    else:
        raise NonConvergenceError(current, max_iterations, tolerance)

    return math.degrees(math.atan2(current * z, math.sqrt(p_sq)))


def heikkinen_latitude(  # pylint: disable=unused-argument
    vector: PositionVector,
    ellipsoid: EllipsoidModel = EARTH,
    tolerance: Optional[float] = None,
    max_iterations: Optional[int] = None,
    trace: Optional[TraceCallback] = None,
) -> float:
    """
    Calculate the geodetic latitude using Heikkinen's closed-form solution.

    Iteration settings (tolerance, max_iterations, trace) are accepted so the
    function can be dispatched in place of newton_latitude, but are unused.

    Args:
        vector:
            An ECEF position, in kilometers

        ellipsoid:
            (Default EARTH) The reference ellipsoid

    Returns:
        (float) the latitude in degrees
    """
    p_sq = _radial_squared(vector)
    z = vector.z
    a, b = ellipsoid.a, ellipsoid.b
    e_sq = ellipsoid.eccentricity_squared
    p = math.sqrt(p_sq)

    f = 54 * b ** 2 * z ** 2
    g = p_sq + (1 - e_sq) * z ** 2 - e_sq * (a ** 2 - b ** 2)
    try:
        c = e_sq ** 2 * f * p_sq / g ** 3
        s = float(np.cbrt(1 + c + math.sqrt(c ** 2 + 2 * c)))
        k = s + 1 + 1 / s
        big_p = f / (3 * k ** 2 * g ** 2)
        q = math.sqrt(1 + 2 * e_sq ** 2 * big_p)
        r0 = -(big_p * e_sq * p) / (1 + q) + math.sqrt(
            0.5 * a ** 2 * (1 + 1 / q)
            - big_p * (1 - e_sq) * z ** 2 / (q * (1 + q))
            - 0.5 * big_p * p_sq
        )
        v = math.sqrt((p - e_sq * r0) ** 2 + (1 - e_sq) * z ** 2)
        z0 = b ** 2 * z / (a * v)
    except (ValueError, ZeroDivisionError, OverflowError) as exc:
        raise DomainError(
            'Closed-form latitude is undefined for this position', vector.to_float()
        ) from exc

    latitude = math.atan((z + ellipsoid.second_eccentricity_squared * z0) / p)
    ensure_finite((latitude,), 'Closed-form latitude is not finite')
    return math.degrees(latitude)


def geodetic_altitude(
    vector: PositionVector,
    latitude: float,
    ellipsoid: EllipsoidModel = EARTH,
) -> float:
    """
    Height of a position above the ellipsoid, given its geodetic latitude.

    Args:
        vector:
            An ECEF position, in kilometers

        latitude:
            The geodetic latitude of the position, in degrees

        ellipsoid:
            (Default EARTH) The reference ellipsoid

    Returns:
        (float) the altitude in kilometers
    """
    phi = math.radians(latitude)
    sin_phi = math.sin(phi)
    p = math.hypot(vector.x, vector.y)
    return (
        p * math.cos(phi) + vector.z * sin_phi
        - ellipsoid.a * math.sqrt(1 - ellipsoid.eccentricity_squared * sin_phi ** 2)
    )


def geodetic_to_ecef(
    latitude: float,
    longitude: float,
    altitude: float = 0.,
    ellipsoid: EllipsoidModel = EARTH,
) -> PositionVector:
    """
    Convert geodetic coordinates to an ECEF position.

    Args:
        latitude:
            Latitude in degrees

        longitude:
            Longitude in degrees

        altitude:
            (Default 0) Height above the ellipsoid, in kilometers

        ellipsoid:
            (Default EARTH) The reference ellipsoid

    Returns:
        PositionVector, in kilometers
    """
    phi, lam = math.radians(latitude), math.radians(longitude)
    e_sq = ellipsoid.eccentricity_squared

    # Radius of curvature in the prime vertical
    n = ellipsoid.a / math.sqrt(1 - e_sq * math.sin(phi) ** 2)

    return PositionVector(
        (n + altitude) * math.cos(phi) * math.cos(lam),
        (n + altitude) * math.cos(phi) * math.sin(lam),
        (n * (1 - e_sq) + altitude) * math.sin(phi),
    )


# -------------------------------------------------------------------------
# Dynamic Dispatch & Configuration
# -------------------------------------------------------------------------

# Declares the latitude algorithm in use (default newton)
latitude_degrees = newton_latitude

_ALGORITHMS = {
    'newton': newton_latitude,
    'heikkinen': heikkinen_latitude,
}


def set_latitude_algorithm(algorithm: Literal['newton', 'heikkinen']):
    """
    Set the global latitude calculation method.

    Args:
        algorithm: 'newton' or 'heikkinen'
    """
    global latitude_degrees

    if algorithm not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS.keys())}")

    latitude_degrees = _ALGORITHMS[algorithm]


class GeodeticResolver(LoggingMixin):
    """
    Resolves ECEF positions into geodetic coordinates with a fixed configuration.

    Resolvers hold no state between calls and may be shared between threads.

    Args:
        ellipsoid:
            (Default EARTH) The reference ellipsoid

        tolerance:
            (Default 0.1) Convergence threshold for the latitude iteration

        max_iterations:
            (Default 100) Iteration cap for the latitude iteration

        trace:
            (Optional) Called as trace(iteration, previous, current) on each step

        algorithm:
            (Optional) 'newton' or 'heikkinen'. If not provided, the algorithm
            selected with set_latitude_algorithm() is used.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        ellipsoid: EllipsoidModel = EARTH,
        tolerance: NonNegativeFloat = DEFAULT_TOLERANCE,
        max_iterations: PositiveInt = DEFAULT_MAX_ITERATIONS,
        trace: Optional[TraceCallback] = None,
        algorithm: Optional[Literal['newton', 'heikkinen']] = None,
    ):
        super().__init__()
        self.ellipsoid = ellipsoid
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.trace = trace
        self.algorithm = algorithm

    def __repr__(self):
        return (
            f'<GeodeticResolver({self.ellipsoid!r}, tolerance={self.tolerance}, '
            f'max_iterations={self.max_iterations}, algorithm={self.algorithm})>'
        )

    def latitude(self, vector: PositionVector) -> float:
        """Geodetic latitude of the position, in degrees"""
        func = _ALGORITHMS[self.algorithm] if self.algorithm else latitude_degrees
        if self.trace is not None and func is heikkinen_latitude:
            self.warn_once(
                'The heikkinen algorithm does not iterate; trace callbacks will not be called. '
                '(this warning will not repeat)'
            )

        return func(
            vector,
            self.ellipsoid,
            tolerance=self.tolerance,
            max_iterations=self.max_iterations,
            trace=self.trace,
        )

    def resolve(self, vector: PositionVector) -> GeodeticCoordinate:
        """
        Convert an ECEF position into a geodetic coordinate.

        Args:
            vector:
                An ECEF position, in kilometers

        Returns:
            GeodeticCoordinate with latitude, longitude and altitude
        """
        latitude = self.latitude(vector)
        longitude = calculate_longitude(vector)
        altitude = geodetic_altitude(vector, latitude, self.ellipsoid)

        self.logger.debug('Resolved %r to (%s, %s)', vector, latitude, longitude)
        return GeodeticCoordinate(latitude, longitude, altitude)

    def resolve_many(self, positions: np.ndarray) -> np.ndarray:
        """
        Convert an array of ECEF positions into geodetic coordinates. The first
        failing row raises its error.

        Args:
            positions:
                Array of shape (N, 3), in kilometers

        Returns:
            Array of shape (N, 3) of (latitude, longitude, altitude)
        """
        positions = np.asarray(positions, dtype=float)
        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f'Expected an array of shape (N, 3), received {positions.shape}')

        out = np.empty_like(positions)
        for idx, row in enumerate(positions):
            out[idx] = self.resolve(PositionVector.from_numpy(row)).to_float()

        return out


def ecef_to_geodetic(vector: PositionVector, **kwargs) -> GeodeticCoordinate:
    """
    Convert an ECEF position into a geodetic coordinate.

    Keyword Args:
        Any GeodeticResolver argument (ellipsoid, tolerance, max_iterations,
        trace, algorithm)

    Returns:
        GeodeticCoordinate
    """
    return GeodeticResolver(**kwargs).resolve(vector)


def ecef_to_geodetic_batch(positions: np.ndarray, **kwargs) -> np.ndarray:
    """
    Convert an (N, 3) array of ECEF positions into (latitude, longitude, altitude) rows.

    Keyword Args:
        Any GeodeticResolver argument (ellipsoid, tolerance, max_iterations,
        trace, algorithm)

    Returns:
        Array of shape (N, 3)
    """
    return GeodeticResolver(**kwargs).resolve_many(positions)
