"""Gridworld problem implemented as environment"""
import logging
from typing import Tuple

import numpy as np

from rl_environments.core import (
    ActionSpace,
    Environment,
    EnvironmentStepResult,
    InvalidConfiguration,
)
from rl_environments.misc import BoxSpace, LogLevel


class GridWorld(Environment):
    """The gridworld environment

    A deterministic 2-d grid of ``width`` x ``height`` cells where the agent
    starts at ``start_pos`` and needs to go to ``goal_pos``. The agent has 4
    actions, a step in each direction. Moves into the edge of the grid keep
    the agent in place along that axis.

    Every step costs 0.01, reaching the goal gives 1 and terminates the
    episode, while running out of the ``max_steps`` budget gives -1 and
    truncates it.

    The observation is the agent's position normalized to [0, 1]:
    ``[x / (width - 1), y / (height - 1)]``, which requires both ``width``
    and ``height`` to be at least 2. The step budget ``max_steps`` must be
    at least 1. Violating either is refused at construction time.
    """

    # consts
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    GOAL_REWARD = 1.0
    TRUNCATION_REWARD = -1.0
    STEP_REWARD = -0.01

    action_to_x = [0, 0, -1, 1]
    action_to_y = [1, -1, 0, 0]
    action_names = ["UP", "DOWN", "LEFT", "RIGHT"]

    def __init__(
        self,
        grid_size: Tuple[int, int] = (5, 5),
        start_pos: Tuple[int, int] = (0, 0),
        goal_pos: Tuple[int, int] = (4, 4),
        max_steps: int = 100,
    ):
        """creates a gridworld of provided size, start, goal and step budget

        Raises :class:`~rl_environments.core.InvalidConfiguration` when any
        dimension is smaller than 2 (the observation normalizes by ``size -
        1``), when start or goal lie outside of the grid, or when
        ``max_steps`` is not positive.

        Args:
             grid_size: (`Tuple[int, int]`): (width, height) of the grid
             start_pos: (`Tuple[int, int]`): (x, y) where each episode starts
             goal_pos: (`Tuple[int, int]`): (x, y) the agent needs to reach
             max_steps: (`int`): the number of steps before truncation

        """
        width, height = grid_size

        if width < 2 or height < 2:
            raise InvalidConfiguration(
                f"grid dimensions must be at least 2, got {grid_size}"
            )
        if max_steps < 1:
            raise InvalidConfiguration(f"max_steps must be positive, got {max_steps}")

        super().__init__()
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        # confs
        self.grid_size = (int(width), int(height))
        self.start_pos = self._validated_position(start_pos, "start")
        self.goal_pos = self._validated_position(goal_pos, "goal")
        self.max_steps = int(max_steps)

        self._action_space = ActionSpace(4)
        self._obs_space = BoxSpace([0.0, 0.0], [1.0, 1.0])

        # episode state, (re)set in `reset`
        self.agent_pos = self.start_pos
        self.steps = 0
        self.terminated = False
        self.truncated = False

    def _validated_position(self, pos: Tuple[int, int], what: str) -> Tuple[int, int]:
        """returns ``pos`` as tuple of ints, raises if not in the grid"""
        x, y = pos

        if not (0 <= x < self.grid_size[0] and 0 <= y < self.grid_size[1]):
            raise InvalidConfiguration(
                f"{what} position {pos} is not in grid of size {self.grid_size}"
            )

        return int(x), int(y)

    @property
    def name(self) -> str:
        return "GridWorld"

    @property
    def action_space(self) -> ActionSpace:
        """a :class:`rl_environments.core.ActionSpace` ([4]) space"""
        return self._action_space

    @property
    def observation_space(self) -> BoxSpace:
        """a :class:`rl_environments.misc.BoxSpace` from [0, 0] to [1, 1]"""
        return self._obs_space

    def bound_in_grid(self, x: int, y: int) -> Tuple[int, int]:
        """returns [x, y] bounded s.t. it is within the grid

        Args:
            x: (`int`): some integer value (representing position x)
            y: (`int`): some integer value (representing position y)

        RETURNS (`x, y`): x / y with minimum value 0 and maximum value width / height - 1

        """
        # very basic min/max, apparently quicker than either:
        #   (1): np.clip
        #   (2): min(max(lower_bound, x), higher_bound)
        max_x, max_y = self.grid_size[0] - 1, self.grid_size[1] - 1

        x = 0 if x < 0 else max_x if x > max_x else x
        y = 0 if y < 0 else max_y if y > max_y else y

        return x, y

    def generate_observation(self) -> np.ndarray:
        """returns the normalized position of the agent

        RETURNS (`np.ndarray`): float32 [x / (width - 1), y / (height - 1)]

        """
        return np.array(
            [
                self.agent_pos[0] / (self.grid_size[0] - 1),
                self.agent_pos[1] / (self.grid_size[1] - 1),
            ],
            dtype=np.float32,
        )

    def is_terminal(self) -> bool:
        return self.terminated or self.truncated

    def reset(self) -> np.ndarray:
        """puts the agent back at the start and clears the episode"""

        self.agent_pos = self.start_pos
        self.steps = 0
        self.terminated = False
        self.truncated = False

        return self.generate_observation()

    def step(self, action: int) -> EnvironmentStepResult:
        """update state as a result of action

        Moves agent accross the grid depending on the direction it took. An
        illegal ``action``, or any action after the episode ended, is ignored:
        the returned transition repeats the current observation and flags with
        a reward of 0 and nothing (including the step count) changes.

        Args:
             action: (`int`): agent's taken action

        RETURNS (`rl_environments.core.EnvironmentStepResult`): the transition

        """

        if not self.action_space.contains(action) or self.is_terminal():
            self._logger.log(
                LogLevel.V4.value,
                "Ignoring action %s (terminated=%s, truncated=%s)",
                action,
                self.terminated,
                self.truncated,
            )
            return EnvironmentStepResult(
                self.generate_observation(), 0.0, self.terminated, self.truncated
            )

        prev_pos = self.agent_pos

        self.steps += 1
        self.agent_pos = self.bound_in_grid(
            prev_pos[0] + GridWorld.action_to_x[action],
            prev_pos[1] + GridWorld.action_to_y[action],
        )

        if self.agent_pos == self.goal_pos:
            reward = GridWorld.GOAL_REWARD
            self.terminated = True
        elif self.steps >= self.max_steps:
            reward = GridWorld.TRUNCATION_REWARD
            self.truncated = True
        else:
            reward = GridWorld.STEP_REWARD

        if self._logger.isEnabledFor(LogLevel.V4.value):
            self._logger.log(
                LogLevel.V4.value,
                "Agent moved from %s to %s after picking %s (step %d, reward %s)",
                prev_pos,
                self.agent_pos,
                self.action_to_string(action),
                self.steps,
                reward,
            )

        return EnvironmentStepResult(
            self.generate_observation(), reward, self.terminated, self.truncated
        )

    def action_to_string(self, action: int) -> str:
        """returns 'UP', 'DOWN', 'LEFT' or 'RIGHT', ``str(action)`` for illegal actions"""
        if not self.action_space.contains(action):
            return str(action)

        return GridWorld.action_names[action]

    def observation_to_string(self, observation: np.ndarray) -> str:
        """translates the normalized ``observation`` back to grid coordinates"""
        x, y = np.rint(
            observation * (np.array(self.grid_size, dtype=np.float32) - 1)
        ).astype(int)
        return f"({x}, {y})"

    def __repr__(self):
        return (
            f"GridWorld of size {self.grid_size} from {self.start_pos} to "
            f"{self.goal_pos} in at most {self.max_steps} steps"
        )
