"""Convex combination of two feasible points."""
from typing import List, Optional, Sequence

from data_structures import SolutionVector
from exceptions import DimensionMismatchError


def combine(vector_a: Sequence[float], vector_b: Sequence[float], weight: float = 0.5) -> List[float]:
    """
    weight * a + (1 - weight) * b, elementwise.

    Any weight in [0, 1] keeps feasibility because every row is linear.
    Weights outside that range are not clamped.
    """
    if len(vector_a) != len(vector_b):
        raise DimensionMismatchError(
            f"cannot combine vectors of length {len(vector_a)} and {len(vector_b)}"
        )
    return [weight * a + (1.0 - weight) * b for a, b in zip(vector_a, vector_b)]


def combine_solutions(
    solution_a: SolutionVector,
    solution_b: SolutionVector,
    weight: float = 0.5,
    label: Optional[str] = None,
) -> SolutionVector:
    """Same as combine() but also requires identical variable ordering."""
    if len(solution_a) != len(solution_b):
        raise DimensionMismatchError(
            f"{solution_a.label} has {len(solution_a)} variables, "
            f"{solution_b.label} has {len(solution_b)}"
        )
    if solution_a.names != solution_b.names:
        raise DimensionMismatchError(
            f"{solution_a.label} and {solution_b.label} list their variables in a different order"
        )
    return SolutionVector(
        label=label or f"combine({solution_a.label}, {solution_b.label}, {weight})",
        names=solution_a.names,
        values=combine(solution_a.values, solution_b.values, weight),
    )
