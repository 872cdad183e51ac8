from typing import Dict, Sequence

from pytest import approx

from satgeodesy import GeodeticCoordinate, Satellite, SatelliteNotFoundError


def assert_coordinates_equal(c1: GeodeticCoordinate, c2: GeodeticCoordinate, abs_tol=1e-7):
    """
    Asserts that two coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first GeodeticCoordinate
        c2: The second GeodeticCoordinate
        abs_tol: The absolute tolerance for floating point comparison, in degrees
                 (and kilometers for altitude).
    """
    assert c1.latitude == approx(c2.latitude, abs=abs_tol)
    assert c1.longitude == approx(c2.longitude, abs=abs_tol)
    if c1.altitude is None or c2.altitude is None:
        assert c1.altitude == c2.altitude
    else:
        assert c1.altitude == approx(c2.altitude, abs=abs_tol)


class StaticPropagator:
    """Reports a fixed native-unit position for each known satellite name"""

    def __init__(self, positions: Dict[str, Sequence[float]], error=None):
        self.positions = positions
        self.error = error
        self.calls = []

    def propagate(self, satellite: Satellite, epoch: float):
        self.calls.append((satellite.name, epoch))
        if self.error is not None:
            raise self.error
        if satellite.name not in self.positions:
            raise SatelliteNotFoundError(satellite.name, 'test catalog')
        return self.positions[satellite.name]
