"""
Exception types raised by satgeodesy.

Conversion failures derive from GeodeticError. Propagation failures originate
in the external propagator and are passed through to the caller unchanged.
"""

__all__ = [
    'DomainError', 'EpochOutOfRangeError', 'GeodeticError',
    'NonConvergenceError', 'PropagationError', 'SatelliteNotFoundError',
]

from typing import Optional, Tuple


class GeodeticError(Exception):
    """Base class for failures while converting a position to geodetic coordinates"""


class DomainError(GeodeticError, ValueError):
    """
    The input vector violates a mathematical precondition of the conversion,
    e.g. a zero denominator or a position on the polar axis.

    Args:
        msg:
            A description of the violated precondition

        values:
            The offending values
    """

    def __init__(self, msg: str, values: Tuple[float, ...] = ()):
        super().__init__(f'{msg}: {values}' if values else msg)
        self.values = tuple(values)


class NonConvergenceError(GeodeticError, ArithmeticError):
    """
    A fixed-point iteration reached its iteration cap without settling to
    within the requested tolerance.

    Args:
        last_iterate:
            The value of the iterate when the cap was reached

        iterations:
            The number of iterations performed

        tolerance:
            The convergence tolerance that was not met
    """

    def __init__(self, last_iterate: float, iterations: int, tolerance: float):
        super().__init__(
            f'Iteration did not converge to within {tolerance} after {iterations} '
            f'iterations (last iterate {last_iterate})'
        )
        self.last_iterate = last_iterate
        self.iterations = iterations
        self.tolerance = tolerance


class PropagationError(Exception):
    """Superclass for failures raised by an orbital propagator"""


class SatelliteNotFoundError(PropagationError):
    """The named satellite was not found in the element source"""

    def __init__(self, name: str, source: Optional[str] = None):
        msg = f'Satellite {name!r} not found'
        if source:
            msg += f' in {source}'
        super().__init__(msg)
        self.name = name
        self.source = source


class EpochOutOfRangeError(PropagationError):
    """The requested epoch lies outside the element set's valid range"""

    def __init__(self, epoch: float):
        super().__init__(f'Epoch {epoch} is outside the valid propagation range')
        self.epoch = epoch
