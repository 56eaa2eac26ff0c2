""" installation script of rl_environments """

from setuptools import find_packages, setup

requirements = [
    "typing_extensions",
    "numpy",
]

setup(
    name='rl_environments',
    version='0.1.0',
    packages=find_packages(include=['rl_environments', 'rl_environments.*']),
    test_suite='tests',
    install_requires=requirements,
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['rl-environments=rl_environments.main:main']
    }
)
