"""
Representation of a satellite's position over the globe
"""

__all__ = ['GeodeticCoordinate']

import math
from typing import Optional, Tuple, Union

from satgeodesy.utils.functions import round_half_up


class GeodeticCoordinate:
    """
    A geodetic latitude/longitude pair on a reference ellipsoid, with an optional
    altitude above that ellipsoid.

    Args:
        latitude:
            Latitude in degrees, within [-90, 90]

        longitude:
            Longitude in degrees. Normalized into (-180, 180].

        altitude:
            (Optional) Height above the ellipsoid, in kilometers
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        altitude: Optional[float] = None,
    ):
        lat, lon = float(latitude), float(longitude)
        if not -90 <= lat <= 90:
            raise ValueError(f'latitude {lat} must be within [-90, 90]')

        if not math.isfinite(lon):
            raise ValueError(f'longitude {lon} must be finite')

        # Longitudes are bounded to (-180, 180]
        if not -180 < lon <= 180:
            lon = 180 - ((180 - lon) % 360)

        self.latitude = lat
        self.longitude = lon
        self.altitude = altitude

    def __eq__(self, other):
        if not isinstance(other, GeodeticCoordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.altitude == other.altitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.altitude))

    def __repr__(self):
        parts = filter(lambda x: x is not None, (self.latitude, self.longitude, self.altitude))
        return f'<GeodeticCoordinate({", ".join(map(str, parts))})>'

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude to degrees, minutes, seconds, hemisphere

        Returns:
            ((degrees, minutes, seconds, 'N'/'S'), (degrees, minutes, seconds, 'E'/'W'))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple:
        """
        Converts the coordinate to a tuple of floats (latitude, longitude). If an
        altitude is present it is appended.

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude) or (latitude, longitude, altitude)
        """
        out = [self.latitude, self.longitude]
        if reverse:
            out = out[::-1]

        if self.altitude is not None:
            out.append(self.altitude)
        return tuple(out)
