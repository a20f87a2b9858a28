"""Copies solver results out of a live model into plain records and vectors."""
from typing import List

from gurobipy import GRB

from data_structures import (
    DEVIATION, PENALTY, PURCHASE, SLACK,
    ProblemDefinition, SolutionVector, SolveSnapshot, VariableRecord,
)
from exceptions import InfeasibleError, SolveError, UnboundedError
from model_builder import AllocationModel, purchase_name

STATUS_NAMES = {
    GRB.LOADED: "LOADED",
    GRB.OPTIMAL: "OPTIMAL",
    GRB.INFEASIBLE: "INFEASIBLE",
    GRB.INF_OR_UNBD: "INF_OR_UNBD",
    GRB.UNBOUNDED: "UNBOUNDED",
    GRB.ITERATION_LIMIT: "ITERATION_LIMIT",
    GRB.TIME_LIMIT: "TIME_LIMIT",
    GRB.NUMERIC: "NUMERIC",
    GRB.INTERRUPTED: "INTERRUPTED",
}


def status_name(status: int) -> str:
    return STATUS_NAMES.get(status, str(status))


def raise_for_status(status: int, problem: ProblemDefinition, stage: str) -> None:
    """Map a non-optimal Gurobi status to the matching pipeline error."""
    if status == GRB.OPTIMAL:
        return
    if status in (GRB.INFEASIBLE, GRB.INF_OR_UNBD):
        raise InfeasibleError(f"model is {status_name(status).lower()}", stage=stage, size=problem.size)
    if status == GRB.UNBOUNDED:
        raise UnboundedError("model is unbounded", stage=stage, size=problem.size)
    raise SolveError(f"solver stopped with status {status_name(status)}", stage=stage, size=problem.size)


def variable_kinds(built: AllocationModel) -> List[str]:
    rows = built.problem.num_rows
    kinds = [PURCHASE] * len(built.x) + [SLACK] * rows
    if built.penalty is not None:
        kinds += [PENALTY] * rows
    kinds.append(DEVIATION)
    return kinds


def variable_rows(built: AllocationModel) -> List:
    rows = [None] * len(built.x) + list(built.row_names)
    if built.penalty is not None:
        rows += list(built.row_names)
    rows.append(None)
    return rows


def extract_vector(built: AllocationModel, label: str) -> SolutionVector:
    model = built.model
    variables = model.getVars()
    return SolutionVector(
        label=label,
        names=model.getAttr("VarName", variables),
        values=model.getAttr("X", variables),
    )


def snapshot(built: AllocationModel) -> SolveSnapshot:
    """
    Value, basis status and reduced cost of every variable, read once after
    an optimal solve so that nothing downstream touches the live model.
    """
    model = built.model
    variables = model.getVars()
    names = model.getAttr("VarName", variables)
    values = model.getAttr("X", variables)
    vbasis = model.getAttr("VBasis", variables)
    reduced = model.getAttr("RC", variables)

    records = tuple(
        VariableRecord(
            name=name,
            kind=kind,
            value=value,
            is_basic=(basis == GRB.BASIC),
            reduced_cost=rc,
            row=row,
        )
        for name, kind, value, basis, rc, row in zip(
            names, variable_kinds(built), values, vbasis, reduced, variable_rows(built)
        )
    )
    return SolveSnapshot(
        status=model.Status,
        objective_value=model.ObjVal,
        iterations=int(model.IterCount),
        records=records,
    )


def purchase_totals(problem: ProblemDefinition, vector: SolutionVector):
    """Total quantity, cost and coverage of the x part of a vector."""
    values = vector.as_dict()
    quantity = cost = coverage = 0.0
    for i in range(problem.num_outlets):
        for j in range(problem.num_slots):
            v = values[purchase_name(i, j)]
            quantity += v
            cost += problem.unit_cost[i][j] * v
            coverage += problem.unit_coverage[i][j] * v
    return quantity, cost, coverage
