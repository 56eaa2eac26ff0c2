"""Reinforcement-learning environments: the common interface and its domains"""

from rl_environments.core import (
    ActionSpace,
    Environment,
    EnvironmentStepResult,
    InvalidConfiguration,
)
from rl_environments.domains import GridWorld, create_environment
from rl_environments.misc import BoxSpace, DiscreteSpace, Space
