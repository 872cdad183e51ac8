"""
Representation of a position relative to the center of the earth
"""

__all__ = ['PositionVector']

import math
from typing import Iterator, Sequence, Tuple, Union

import numpy as np


class PositionVector:
    """
    An Earth-Centered-Earth-Fixed position (x, y, z). Components are stored as floats
    and may not be changed after creation.

    Units are not tracked by the vector itself; after normalization (see
    satgeodesy.conversion) all components are kilometers.
    """

    __slots__ = ('_xyz',)

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
        z: Union[float, int, str],
    ):
        object.__setattr__(self, '_xyz', (float(x), float(y), float(z)))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, PositionVector):
            return False

        return self._xyz == other._xyz

    def __hash__(self):
        return hash(self._xyz)

    def __iter__(self) -> Iterator[float]:
        return iter(self._xyz)

    def __repr__(self):
        return f'<PositionVector({", ".join(map(str, self._xyz))})>'

    @property
    def x(self) -> float:
        return self._xyz[0]

    @property
    def y(self) -> float:
        return self._xyz[1]

    @property
    def z(self) -> float:
        return self._xyz[2]

    @property
    def magnitude(self) -> float:
        """The distance from the center of the earth"""
        return math.sqrt(sum(c ** 2 for c in self._xyz))

    @classmethod
    def from_numpy(cls, array: Union[np.ndarray, Sequence[float]]):
        """
        Create a PositionVector from a numpy array (or any sequence) of length 3

        Args:
            array:
                The [x, y, z] components

        Returns:
            PositionVector
        """
        array = np.asarray(array, dtype=float).ravel()
        if array.shape != (3,):
            raise ValueError(f'Expected exactly 3 components, received {array.size}')

        return cls(*array.tolist())

    def scale(self, factor: float):
        """Returns a new PositionVector with every component multiplied by factor"""
        return PositionVector(*(c * factor for c in self._xyz))

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the vector to a tuple of floats (x, y, z)"""
        return self._xyz

    def to_numpy(self) -> np.ndarray:
        """Converts the vector to a numpy array of shape (3,)"""
        return np.array(self._xyz)
