"""Basis analysis of an optimal vertex: degeneracy, alternate optima, binding rows."""
from typing import Iterable

from data_structures import SLACK, SolutionClassification, VariableRecord

DEFAULT_DIGITS = 4


def rounded(value: float, digits: int = DEFAULT_DIGITS) -> float:
    # + 0.0 folds -0.0 into 0.0
    return round(float(value), digits) + 0.0


def is_zero(value: float, digits: int = DEFAULT_DIGITS) -> bool:
    return rounded(value, digits) == 0.0


def classify(records: Iterable[VariableRecord], digits: int = DEFAULT_DIGITS) -> SolutionClassification:
    """
    Degenerate: some basic variable sits at zero.
    Multiple optima: some nonbasic variable has a zero reduced cost.
    Binding constraints: rows whose slack/surplus is zero, in slack index order.
    """
    records = list(records)

    is_degenerate = any(r.is_basic and is_zero(r.value, digits) for r in records)
    is_multiple = any((not r.is_basic) and is_zero(r.reduced_cost, digits) for r in records)
    binding = tuple(
        r.row or r.name
        for r in records
        if r.kind == SLACK and is_zero(r.value, digits)
    )

    return SolutionClassification(
        is_degenerate=is_degenerate,
        is_multiple_optima=is_multiple,
        binding_constraints=binding,
        basis=tuple(1 if r.is_basic else 0 for r in records),
        reduced_costs=tuple(rounded(r.reduced_cost, digits) for r in records),
    )
