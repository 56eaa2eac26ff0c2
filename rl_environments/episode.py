"""implements running an episode"""

import logging
from typing import NamedTuple

import numpy as np
from typing_extensions import Protocol

from rl_environments.core import ActionSpace, Environment
from rl_environments.misc import LogLevel

logger = logging.getLogger(__name__)


class Policy(Protocol):
    """anything that picks actions given observations"""

    def select_action(self, observation: np.ndarray) -> int:
        """returns the action to take in response to ``observation``"""


class RandomPolicy:
    """picks actions uniformly from an action space"""

    def __init__(self, action_space: ActionSpace):
        self._action_space = action_space

    def select_action(self, observation: np.ndarray) -> int:
        """ignores ``observation`` and returns a random action"""
        return self._action_space.sample_as_int()


class EpisodeResult(NamedTuple):
    """summary of a single episode"""

    discounted_return: float
    undiscounted_return: float
    length: int
    terminated: bool
    truncated: bool


def run_episode(
    env: Environment, policy: Policy, horizon: int, gamma: float = 1.0
) -> EpisodeResult:
    """runs a single episode of the policy in the environment

    Stops when the environment reports the episode has ended, or after
    ``horizon`` steps, whichever comes first.

    Args:
         env: (`rl_environments.core.Environment`):
         policy: (`Policy`):
         horizon: (`int`): maximum number of steps
         gamma: (`float`): discount factor

    RETURNS (`EpisodeResult`):

    """
    assert horizon > 0 and 0 <= gamma <= 1

    obs = env.reset()

    discounted_return = 0.0
    undiscounted_return = 0.0
    discount = 1.0  # discount accumulates by multiplying with gamma
    time = 0
    terminated = truncated = False

    while not env.is_terminal() and time < horizon:

        action = policy.select_action(obs)
        step = env.step(action)

        discounted_return += discount * step.reward
        undiscounted_return += step.reward
        discount *= gamma

        obs = step.observation
        terminated, truncated = step.terminated, step.truncated
        time += 1

    if logger.isEnabledFor(LogLevel.V3.value):
        logger.log(
            LogLevel.V3.value,
            "Episode in %s ended after %d steps (terminated=%s, truncated=%s)",
            env.name,
            time,
            terminated,
            truncated,
        )

    return EpisodeResult(
        discounted_return, undiscounted_return, time, terminated, truncated
    )
