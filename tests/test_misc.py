"""tests :mod:`rl_environments.misc`"""

import logging
import random

import numpy as np
import pytest

from rl_environments.misc import (
    BoxSpace,
    DiscreteSpace,
    LogLevel,
    set_log_level,
    set_random_seed,
)


def test_num_elements():
    """tests whether the number of elements is as expected"""

    space = DiscreteSpace([3, 2, 3])

    assert space.n == space.num_elements
    assert space.n == 18


def test_num_dimensions():
    """tests whether it correctly returns the number of dimensions"""

    space = DiscreteSpace([3] * 8)

    assert space.ndim == 8


def test_sample():
    """tests sampling"""

    space = DiscreteSpace([5, 2])

    for _ in range(20):
        assert space.contains(space.sample())


def test_contain():
    """tests contains"""

    space = DiscreteSpace([2, 3])

    assert space.contains(np.array([0, 0]))
    assert space.contains(np.array([1, 2]))
    assert not space.contains(np.array([-1, 0]))
    assert not space.contains(np.array([0, 3]))
    assert not space.contains(np.array([0, 0, 0]))
    assert not space.contains(np.array([0.5, 1.0]))


def test_box_bounds():
    """tests :class:`BoxSpace` keeps (read-only) bounds"""

    space = BoxSpace([0.0, -1.0], [1.0, 1.0])

    np.testing.assert_array_equal(space.low, [0.0, -1.0])
    np.testing.assert_array_equal(space.high, [1.0, 1.0])
    assert space.ndim == 2
    assert space.shape == (2,)

    with pytest.raises(ValueError):
        space.low[0] = 5.0


def test_box_illegal_bounds():
    """tests :class:`BoxSpace` asserts on mismatching bounds"""

    with pytest.raises(AssertionError):
        BoxSpace([0.0], [1.0, 1.0])

    with pytest.raises(AssertionError):
        BoxSpace([2.0, 0.0], [1.0, 1.0])


def test_box_contains():
    """tests :meth:`BoxSpace.contains` including the bounds themselves"""

    space = BoxSpace([0.0, 0.0], [1.0, 1.0])

    assert space.contains(np.array([0.0, 1.0]))
    assert space.contains(np.array([0.25, 0.75]))
    assert not space.contains(np.array([1.1, 0.0]))
    assert not space.contains(np.array([0.0, -0.1]))
    assert not space.contains(np.array([0.5]))


def test_box_sample():
    """tests samples of :class:`BoxSpace` lie in the space"""

    space = BoxSpace([-2.0, 0.0, 3.0], [2.0, 0.0, 4.0])

    for _ in range(20):
        sample = space.sample()

        assert sample.dtype == np.float32
        assert space.contains(sample)
        assert sample[1] == 0.0


def test_log_level_create():
    """tests :meth:`LogLevel.create`"""

    assert LogLevel.create(0) == LogLevel.V0
    assert LogLevel.create(4) == LogLevel.V4

    with pytest.raises(KeyError):
        LogLevel.create(6)


def test_set_log_level():
    """tests :func:`set_log_level` sets level on the package root once"""

    set_log_level(LogLevel.V3)
    set_log_level(LogLevel.V2)

    package_logger = logging.getLogger("rl_environments")

    assert package_logger.level == LogLevel.V2.value
    assert len(package_logger.handlers) == 1

    set_log_level(LogLevel.V0)


def test_set_random_seed():
    """tests :func:`set_random_seed` makes sampling repeatable"""

    space = DiscreteSpace([100, 100])

    set_random_seed(3)
    first = (space.sample(), random.random())

    set_random_seed(3)
    second = (space.sample(), random.random())

    np.testing.assert_array_equal(first[0], second[0])
    assert first[1] == second[1]


if __name__ == "__main__":
    pytest.main([__file__])
