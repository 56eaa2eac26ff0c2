"""miscellaneous functions"""

import abc
import logging
import random
from enum import Enum
from typing import List, Sequence, Union

import numpy as np


def set_random_seed(seed: int) -> None:
    """sets the random seed of our program

    NOTE that this function is not designed to be able to replicate
    experiments, this would require more code. This is merely to **ensure
    experiments are different**. Sometimes you will want to run scripts
    multiple times to then later aggregate the results: if programs use the
    current time as random seed then all runs that are started at the same time
    will result in the similar behaviour. This is to circumvent that.

    Sets `numpy` and `random` seed.


    Args:
         seed: (`int`): what seed to set it to

    RETURNS (`None`):

    """
    np.random.seed(seed)
    random.seed(seed)


class LogLevel(Enum):
    """log levels"""

    V0 = 1000  # NO messages
    V1 = 30  # print results and setup
    V2 = 20  # print episodes
    V3 = 15  # print episode level agent things
    V4 = 10  # print time steps level agent things
    V5 = 5  # hardcore debugging

    @staticmethod
    def create(level: int) -> "LogLevel":
        """creates a loglevel from an int

        Args:
             level: (`int`): in [0 ... 5]

        RETURNS (`rl_environments.misc.LogLevel`):

        """
        return LogLevel["V" + str(level)]


def set_log_level(level: LogLevel) -> None:
    """sets the level of all loggers in this package

    Anything that is logged with a **higher** (or equal) level will be
    displayed. Attaches a single stream handler to the package root the first
    time it is called.

    Args:
         level: (`LogLevel`):

    """
    package_logger = logging.getLogger(__name__.split(".", maxsplit=1)[0])
    package_logger.setLevel(level.value)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", "%H:%M"))
        package_logger.addHandler(handler)


class Space(abc.ABC):
    """some mathematical space"""

    @property
    @abc.abstractmethod
    def ndim(self) -> int:
        """returns number of dimensions of the space"""

    @abc.abstractmethod
    def sample(self) -> np.ndarray:
        """samples from the space"""

    @abc.abstractmethod
    def contains(self, elem: np.ndarray) -> bool:
        """returns whether `elem` is in this space"""


class DiscreteSpace(Space):
    """DiscreteSpace discrete uninterupted space of some shape"""

    def __init__(self, size: Union[List[int], np.ndarray]):
        """initiates a discrete space of size size

        Args:
             size: (`Union[List[int], np.ndarray]`): is a list of dimension ranges

        """
        assert len(size) > 0 and all(s > 0 for s in size), f"illegal size {size}"

        self.size = np.array(size).astype(int)
        self.num_elements: int = int(np.prod(self.size))

    @property
    def n(self) -> int:
        """Number of elements in space

        While the naming is pretty awful, it is consistent with the `Space`
        class of open AI gym, which I prioritized here

        RETURNS (`int`):

        """
        return self.num_elements

    @property
    def ndim(self) -> int:
        """returns the number of dimensions

        RETURNS (`int`): number of dimensions

        """
        return len(self.size)

    def contains(self, elem: np.ndarray) -> bool:
        """returns whether `self` contains ``elem``

        Args:
             elem: (`np.ndarray`): element to check against

        RETURNS (`bool`):

        """

        return bool(
            elem.shape == (self.ndim,)
            and np.issubdtype(elem.dtype, np.integer)
            and (elem >= 0).all()
            and (elem < self.size).all()
        )

    def sample(self) -> np.ndarray:
        """returns a sample from the space at random

        RETURNS (`np.array`): a sample in the space of this

        """
        return (np.random.random(self.ndim) * self.size).astype(int)

    def __repr__(self):
        return f"DiscreteSpace of size {self.size}"


class BoxSpace(Space):
    """A continuous box: each dimension ``i`` lies in [``low[i]``, ``high[i]``]

    The bounds are copied and made read-only on construction, so a space
    handed out by an environment can not be modified by whoever reads it.
    """

    def __init__(self, low: Sequence[float], high: Sequence[float]):
        """initiates a box with lower bounds ``low`` and upper bounds ``high``

        Args:
             low: (`Sequence[float]`): lower bound per dimension
             high: (`Sequence[float]`): upper bound per dimension

        """
        assert len(low) == len(high), f"bounds {low} and {high} differ in length"

        self._low = np.array(low, dtype=np.float32)
        self._high = np.array(high, dtype=np.float32)

        assert (self._low <= self._high).all(), f"{low} is not below {high}"

        self._low.flags.writeable = False
        self._high.flags.writeable = False

    @property
    def low(self) -> np.ndarray:
        """the (read-only) lower bounds"""
        return self._low

    @property
    def high(self) -> np.ndarray:
        """the (read-only) upper bounds"""
        return self._high

    @property
    def shape(self):
        """the shape of elements in this space (``(ndim,)``)"""
        return self._low.shape

    @property
    def ndim(self) -> int:
        return len(self._low)

    def contains(self, elem: np.ndarray) -> bool:
        """returns whether ``elem`` lies within the bounds of ``self``

        Args:
             elem: (`np.ndarray`): element to check against

        RETURNS (`bool`):

        """
        elem = np.asarray(elem)

        return bool(
            elem.shape == self.shape
            and (elem >= self._low).all()
            and (elem <= self._high).all()
        )

    def sample(self) -> np.ndarray:
        """returns a uniform sample within the bounds

        RETURNS (`np.ndarray`): a float32 element of ``self``

        """
        return np.random.uniform(self._low, self._high).astype(np.float32)

    def __repr__(self):
        return f"BoxSpace from {self._low} to {self._high}"
