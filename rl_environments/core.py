"""Core functionality

Contains the interface every environment in this package implements, and the
building block classes used to describe what it returns.

"""

import abc
from typing import NamedTuple

import numpy as np

from rl_environments.misc import DiscreteSpace, Space


class ActionSpace(DiscreteSpace):
    """action space for environments"""

    def __init__(self, size: int):
        """initiates an action space of size

        Args:
             size: (`int`): number of actions

        """
        super().__init__([size])

    def __repr__(self):
        return f"ActionSpace of size {self.n}"

    def contains(self, elem: int) -> bool:
        """returns whether `this` contains action

        Only (numpy) integers are actions, so ``1.0`` or ``True`` is not.

        Args:
             elem: (`int`): an action

        RETURNS (`bool`): true if in `this`

        """
        if isinstance(elem, bool) or not isinstance(elem, (int, np.integer)):
            return False

        return super().contains(np.array([elem]))

    def sample_as_int(self) -> int:
        """Samples an action in its int representation"""
        return int(self.sample()[0])


class EnvironmentStepResult(NamedTuple):
    """the tuple returned by environments doing steps

    ``terminated`` signals the episode ended naturally (e.g. goal reached),
    ``truncated`` that it was cut short (e.g. step budget exhausted).
    """

    observation: np.ndarray
    reward: float
    terminated: bool
    truncated: bool


class InvalidConfiguration(ValueError):
    """raised when constructing an environment with illegal parameters"""


class Environment(abc.ABC):
    """interface to all environments

    A driver holds a reference to `Environment` and interacts through
    :meth:`reset`, :meth:`step` and :meth:`is_terminal`. Implementations keep
    no thread-bound state, so an instance can be handed to a worker thread,
    but it is never meant to be used by two drivers at once.
    """

    @abc.abstractmethod
    def reset(self) -> np.ndarray:
        """resets internal state and return first observation

        Can be called at any time, abandoning the current episode
        """

    @abc.abstractmethod
    def step(self, action: int) -> EnvironmentStepResult:
        """update state as a result of action

        Calling this after the episode ended is allowed: what happens is up
        to the implementation, but it must not raise.

        Args:
             action: (`int`): agent's taken action

        RETURNS (`EnvironmentStepResult`): the transition

        """

    @abc.abstractmethod
    def is_terminal(self) -> bool:
        """returns whether the current episode ended (terminated or truncated)"""

    @property
    @abc.abstractmethod
    def action_space(self) -> ActionSpace:
        """returns the domain action space

        RETURNS(`rl_environments.core.ActionSpace`): the action space

        """

    @property
    @abc.abstractmethod
    def observation_space(self) -> Space:
        """returns the domain observation space

        RETURNS(`rl_environments.misc.Space`): the observation space

        """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """a stable, human readable, identifier of the environment"""

    def __repr__(self):
        return (
            f"{self.name} with action space {self.action_space}, "
            f"observation space {self.observation_space}"
        )

    def action_to_string(self, action: int) -> str:  # pylint: disable=no-self-use
        """Returns a string representation of the `action`

        Exists so that other environments can override this, and hopefully
        provide more useful info than the int representation

        Args:
            action (`int`):

        Returns:
            `str`:
        """
        return str(action)

    def observation_to_string(  # pylint: disable=no-self-use
        self, observation: np.ndarray
    ) -> str:
        """Returns a string representation of the `observation`

        Exists so that other environments can override this, and hopefully
        provide more useful info than the array representation

        Args:
            observation (`np.ndarray`):

        Returns:
            `str`:
        """
        return str(observation)
