"""Builds the Gurobi model for an allocation instance, primal or auxiliary."""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import gurobipy as gp
from gurobipy import GRB

from data_structures import ProblemDefinition
from exceptions import ModelBuildError
from adspend_utils.decorators import log_and_time
import adspend_utils.logging as logging
logger = logging.getLogger(__name__)


@dataclass
class AllocationModel:
    """
    A built model plus ordered handles into it.

    Variable order inside the model (and in every extracted vector):
    x row-major, slack, penalty (auxiliary only), deviation.
    """
    problem: ProblemDefinition
    model: gp.Model
    x: Dict[Tuple[int, int], gp.Var]
    slack: List[gp.Var]
    penalty: Optional[List[gp.Var]]
    deviation: gp.Var
    row_names: List[str]
    auxiliary: bool = False

    def variables(self) -> List[gp.Var]:
        return self.model.getVars()

    def dispose(self) -> None:
        self.model.dispose()


def purchase_name(i, j):
    return f"x_{i + 1}_{j + 1}"


def row_names(problem: ProblemDefinition) -> List[str]:
    """Constraint name for each slack index k = 0 .. M+K."""
    names = [f"c_max_budget_{i + 1}" for i in range(problem.num_outlets)]
    names += [f"c_min_slot_spend_{j + 1}" for j in range(problem.num_slots)]
    names.append("c_min_coverage")
    return names


@log_and_time("model build", error_cls=ModelBuildError)
def build_model(env: gp.Env, problem: ProblemDefinition, auxiliary: bool = False) -> AllocationModel:
    """
    Create variables, equality rows and the objective for `problem`.

    auxiliary=False: minimise the coverage imbalance between the first and
    second half of the slots (epigraph variable `aux`).
    auxiliary=True: add one penalty per row to the slot-minimum and coverage
    rows and minimise the sum of penalties instead.
    """
    m, k = problem.size
    label = "Auxiliary" if auxiliary else "Primal"
    model = gp.Model(f"{label}_{problem.name}", env=env)
    try:
        x = _add_purchase_variables(model, problem)
        slack = _add_row_variables(model, problem, "s")
        penalty = _add_row_variables(model, problem, "a") if auxiliary else None
        deviation = model.addVar(lb=0.0, ub=GRB.INFINITY, obj=0.0, vtype=GRB.CONTINUOUS, name="aux")

        names = row_names(problem)
        _add_budget_constraints(model, problem, x, slack, names)
        _add_slot_constraints(model, problem, x, slack, penalty, names)
        _add_coverage_constraint(model, problem, x, slack, penalty, names)
        _add_balance_constraints(model, problem, x, deviation)

        if auxiliary:
            model.setObjective(gp.quicksum(penalty), GRB.MINIMIZE)
        else:
            model.setObjective(gp.LinExpr(1.0, deviation), GRB.MINIMIZE)

        model.update()
    except Exception:
        model.dispose()
        raise

    logger.info("%s model built: %d vars, %d constrs (M=%d, K=%d)",
                label, model.NumVars, model.NumConstrs, m, k)
    return AllocationModel(
        problem=problem,
        model=model,
        x=x,
        slack=slack,
        penalty=penalty,
        deviation=deviation,
        row_names=names,
        auxiliary=auxiliary,
    )


def _add_purchase_variables(model, problem):
    x = {}
    for i in range(problem.num_outlets):
        for j in range(problem.num_slots):
            x[(i, j)] = model.addVar(
                lb=0.0,
                ub=problem.capacity[i][j],
                obj=0.0,
                vtype=GRB.CONTINUOUS,
                name=purchase_name(i, j),
            )
    return x


# used for slack variables and auxiliary penalty variables
def _add_row_variables(model, problem, prefix):
    return [
        model.addVar(lb=0.0, ub=GRB.INFINITY, obj=0.0, vtype=GRB.CONTINUOUS, name=f"{prefix}_{r}")
        for r in range(problem.num_rows)
    ]


def _add_budget_constraints(model, problem, x, slack, names):
    # never penalised, even in the auxiliary model
    for i in range(problem.num_outlets):
        spend = gp.quicksum(problem.unit_cost[i][j] * x[(i, j)] for j in range(problem.num_slots))
        model.addConstr(spend + slack[i] == problem.max_budget[i], name=names[i])


def _add_slot_constraints(model, problem, x, slack, penalty, names):
    m = problem.num_outlets
    floor = problem.slot_spend_floor
    for j in range(problem.num_slots):
        expr = gp.quicksum(problem.unit_cost[i][j] * x[(i, j)] for i in range(m)) - slack[m + j]
        if penalty is not None:
            expr += penalty[m + j]
        model.addConstr(expr == floor, name=names[m + j])


def _add_coverage_constraint(model, problem, x, slack, penalty, names):
    r = problem.num_rows - 1
    expr = gp.quicksum(
        problem.unit_coverage[i][j] * x[(i, j)]
        for i in range(problem.num_outlets)
        for j in range(problem.num_slots)
    ) - slack[r]
    if penalty is not None:
        expr += penalty[r]
    model.addConstr(expr == problem.min_coverage, name=names[r])


def _add_balance_constraints(model, problem, x, deviation):
    # aux >= |first-half coverage - second-half coverage|
    imbalance = gp.quicksum(
        problem.slot_sign(j) * problem.unit_coverage[i][j] * x[(i, j)]
        for i in range(problem.num_outlets)
        for j in range(problem.num_slots)
    )
    model.addConstr(deviation >= imbalance, name="c_balance_pos")
    model.addConstr(deviation >= -imbalance, name="c_balance_neg")
