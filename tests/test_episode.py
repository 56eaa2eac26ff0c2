"""Tests :mod:`rl_environments.episode`"""

import numpy as np
import pytest

from rl_environments.core import ActionSpace
from rl_environments.domains.gridworld import GridWorld
from rl_environments.episode import RandomPolicy, run_episode


class FixedPolicy:
    """cycles through a fixed list of actions, remembers observations"""

    def __init__(self, actions):
        self.actions = actions
        self.observations = []

    def select_action(self, observation: np.ndarray) -> int:
        self.observations.append(observation)
        return self.actions[(len(self.observations) - 1) % len(self.actions)]


def test_run_episode_to_goal():
    """Tests an episode that reaches the goal"""
    env = GridWorld((2, 2), start_pos=(0, 0), goal_pos=(1, 1), max_steps=10)
    policy = FixedPolicy([GridWorld.UP, GridWorld.RIGHT])

    result = run_episode(env, policy, horizon=100, gamma=0.5)

    assert result.length == 2
    assert result.terminated and not result.truncated
    assert result.undiscounted_return == pytest.approx(-0.01 + 1.0)
    assert result.discounted_return == pytest.approx(-0.01 + 0.5 * 1.0)

    np.testing.assert_array_equal(policy.observations[0], [0.0, 0.0])
    np.testing.assert_array_equal(policy.observations[1], [0.0, 1.0])


def test_run_episode_truncated():
    """Tests an episode that runs out of its step budget"""
    env = GridWorld(max_steps=3)

    result = run_episode(env, FixedPolicy([GridWorld.LEFT]), horizon=100)

    assert result.length == 3
    assert result.truncated and not result.terminated
    assert result.undiscounted_return == pytest.approx(-0.01 - 0.01 - 1.0)
    assert result.discounted_return == pytest.approx(result.undiscounted_return)


def test_run_episode_horizon():
    """Tests the horizon stops an episode before the environment does"""
    env = GridWorld()

    result = run_episode(env, FixedPolicy([GridWorld.DOWN]), horizon=5)

    assert result.length == 5
    assert not result.terminated and not result.truncated
    assert not env.is_terminal()


def test_random_policy():
    """Tests :class:`RandomPolicy` picks all legal actions"""
    policy = RandomPolicy(ActionSpace(4))

    actions = {policy.select_action(np.zeros(2)) for _ in range(500)}

    assert actions == {0, 1, 2, 3}


def test_random_policy_episode_ends():
    """Tests a random walk in gridworld always ends within the budget"""
    env = GridWorld(max_steps=20)

    for _ in range(10):
        result = run_episode(env, RandomPolicy(env.action_space), horizon=1000)

        assert result.length <= 20
        assert result.terminated != result.truncated


if __name__ == "__main__":
    pytest.main([__file__])
