"""all the environments in which an agent can act"""

from rl_environments.core import Environment

from .gridworld import GridWorld


def create_environment(domain_name: str, **kwargs) -> Environment:
    """the factory function to construct environments

    Args:
         domain_name: (`str`): determines which environment is created
         kwargs: passed on to the constructor of the environment

    RETURNS (`rl_environments.core.Environment`)

    """

    if domain_name == "gridworld":
        return GridWorld(**kwargs)

    raise ValueError("unknown domain " + domain_name)
