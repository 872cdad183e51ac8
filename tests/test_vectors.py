import numpy as np
import pytest

from satgeodesy import PositionVector


def test_vector_init():
    v = PositionVector(1, '2.5', 3.)
    assert v.x == 1.
    assert v.y == 2.5
    assert v.z == 3.
    assert isinstance(v.x, float)


def test_vector_immutable():
    v = PositionVector(1., 2., 3.)
    with pytest.raises(AttributeError):
        v.x = 5.

    with pytest.raises(AttributeError):
        v.w = 5.


def test_vector_eq_hash():
    assert PositionVector(1., 2., 3.) == PositionVector(1, 2, 3)
    assert PositionVector(1., 2., 3.) != PositionVector(3., 2., 1.)
    assert PositionVector(1., 2., 3.) != (1., 2., 3.)
    assert len({PositionVector(1., 2., 3.), PositionVector(1, 2, 3)}) == 1


def test_vector_repr():
    assert repr(PositionVector(1., 2., 3.)) == '<PositionVector(1.0, 2.0, 3.0)>'


def test_vector_unpack():
    x, y, z = PositionVector(1., 2., 3.)
    assert (x, y, z) == (1., 2., 3.)
    assert PositionVector(1., 2., 3.).to_float() == (1., 2., 3.)


def test_vector_magnitude():
    assert PositionVector(3., 4., 0.).magnitude == 5.
    assert PositionVector(0., 0., 0.).magnitude == 0.


def test_vector_scale():
    v = PositionVector(1., 2., 3.)
    assert v.scale(2) == PositionVector(2., 4., 6.)
    assert v == PositionVector(1., 2., 3.)


def test_vector_numpy():
    v = PositionVector.from_numpy(np.array([1., 2., 3.]))
    assert v == PositionVector(1., 2., 3.)
    np.testing.assert_array_equal(v.to_numpy(), np.array([1., 2., 3.]))

    assert PositionVector.from_numpy([[1, 2, 3]]) == PositionVector(1., 2., 3.)

    with pytest.raises(ValueError):
        PositionVector.from_numpy([1., 2.])
