import pytest

import instances
from config import SolverConfig
from data_structures import ProblemDefinition
from solve_driver import create_env


@pytest.fixture
def quiet_config():
    return SolverConfig(OutputFlag=0)


@pytest.fixture
def env(quiet_config):
    env = create_env(quiet_config)
    yield env
    env.dispose()


@pytest.fixture
def uniform_problem():
    return instances.uniform_pair()


@pytest.fixture
def infeasible_problem():
    # 4 units fit in the budgets, 20 coverage at most
    return instances.uniform_pair(min_coverage=100.0)


@pytest.fixture
def skewed_problem():
    """3 outlets x 4 slots with distinct prices."""
    return ProblemDefinition(
        capacity=((2, 3, 1, 2), (1, 2, 2, 3), (3, 1, 2, 2)),
        unit_cost=((10, 12, 9, 14), (11, 8, 13, 10), (9, 15, 12, 11)),
        unit_coverage=((30, 45, 20, 50), (25, 35, 40, 30), (40, 20, 35, 45)),
        max_budget=(40, 35, 45),
        min_coverage=300,
        min_slot_spend_fraction=0.05,
        name="skewed",
    )
