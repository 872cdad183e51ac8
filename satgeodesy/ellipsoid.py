"""
Two-axis (oblate spheroid) models of the Earth
"""

__all__ = ['EARTH', 'EllipsoidModel', 'WGS84']

from pydantic import PositiveFloat, validate_call

from satgeodesy._const import EARTH_A_KM, EARTH_B_KM, WGS84_A_KM, WGS84_B_KM


class EllipsoidModel:
    """
    An ellipse of revolution approximating the shape of the Earth.

    Args:
        semi_major:
            The equatorial radius, in kilometers

        semi_minor:
            The polar radius, in kilometers. Must not exceed the semi-major axis.
    """

    @validate_call
    def __init__(self, semi_major: PositiveFloat, semi_minor: PositiveFloat):
        if semi_minor > semi_major:
            raise ValueError(
                f'semi-minor axis {semi_minor} must not exceed semi-major axis {semi_major}'
            )

        self._a = semi_major
        self._b = semi_minor

    def __eq__(self, other):
        if not isinstance(other, EllipsoidModel):
            return False

        return self.a == other.a and self.b == other.b

    def __hash__(self):
        return hash((self.a, self.b))

    def __repr__(self):
        return f'<EllipsoidModel(a={self.a}, b={self.b})>'

    @property
    def a(self) -> float:
        """The semi-major axis (km)"""
        return self._a

    @property
    def b(self) -> float:
        """The semi-minor axis (km)"""
        return self._b

    @property
    def flattening(self) -> float:
        return (self.a - self.b) / self.a

    @property
    def eccentricity_squared(self) -> float:
        """The first eccentricity squared, 1 - (b/a)^2"""
        return 1 - (self.b / self.a) ** 2

    @property
    def second_eccentricity_squared(self) -> float:
        """The second eccentricity squared, (a^2 - b^2) / b^2"""
        return (self.a ** 2 - self.b ** 2) / self.b ** 2


EARTH = EllipsoidModel(EARTH_A_KM, EARTH_B_KM)
WGS84 = EllipsoidModel(WGS84_A_KM, WGS84_B_KM)
