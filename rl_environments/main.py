"""the main entrance for running a policy in an environment"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser
from typing import List, Optional

import numpy as np

from rl_environments.domains import create_environment
from rl_environments.episode import RandomPolicy, run_episode
from rl_environments.misc import LogLevel, set_log_level, set_random_seed

logger = logging.getLogger(__name__)


def main(args: Optional[List[str]] = None) -> None:
    """entry point of the `rl-environments` script, see :func:`run`

    Args:
         args: (`Optional[List[str]]`): optional list of arguments

    RETURNS (`None`):

    """
    run(args)


def run(args: Optional[List[str]] = None) -> np.ndarray:
    """runs a random policy for a number of episodes on given configurations

    Args:
         args: (`Optional[List[str]]`): optional list of arguments

    RETURNS (`np.ndarray`): the discounted return of each episode

    """

    conf = parse_arguments(args)

    set_log_level(LogLevel.create(conf.verbose))

    if conf.random_seed:
        set_random_seed(conf.random_seed)

    env = create_environment(
        conf.domain,
        grid_size=(conf.width, conf.height),
        start_pos=(0, 0),
        goal_pos=(conf.width - 1, conf.height - 1),
        max_steps=conf.max_steps,
    )
    policy = RandomPolicy(env.action_space)

    logger.log(LogLevel.V1.value, "Running random policy on %s", env)

    returns = np.zeros(conf.episodes)
    for episode in range(conf.episodes):

        result = run_episode(env, policy, conf.max_steps, conf.gamma)
        returns[episode] = result.discounted_return

        logger.log(
            LogLevel.V2.value,
            "episode %d: return %.3f after %d steps (%s)",
            episode,
            result.discounted_return,
            result.length,
            "goal" if result.terminated else "truncated",
        )

    logger.log(
        LogLevel.V1.value,
        "avg return over %d episodes: %.3f",
        conf.episodes,
        np.mean(returns),
    )

    return returns


def parse_arguments(args: Optional[List[str]] = None):
    """converts arguments from commandline (or string) to namespace

    Args:
         args: (`Optional[List[str]]`): a string of arguments, uses cmdline if None

    """
    parser = ArgumentParser(formatter_class=ArgumentDefaultsHelpFormatter)

    parser.add_argument(
        "--verbose",
        "-v",
        choices=[0, 1, 2, 3, 4, 5],
        default=1,
        type=int,
        help="level of logging",
    )

    parser.add_argument(
        "--domain",
        "-D",
        default="gridworld",
        choices=["gridworld"],
        help="which environment to run in",
    )

    parser.add_argument("--width", default=5, type=int, help="width of the grid")

    parser.add_argument("--height", default=5, type=int, help="height of the grid")

    parser.add_argument(
        "--max_steps",
        default=100,
        type=int,
        help="step budget of an episode",
    )

    parser.add_argument(
        "--episodes",
        default=10,
        type=int,
        help="number of episodes to run",
    )

    parser.add_argument(
        "--gamma",
        default=0.95,
        type=float,
        help="discount factor to be used",
    )

    parser.add_argument(
        "--random_seed",
        "--seed",
        default=0,
        type=int,
        help="set random seed",
    )

    return parser.parse_args(args=args)


if __name__ == "__main__":
    main()
