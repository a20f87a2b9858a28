"""
Feasible but non-optimal points for an instance:

point_a  the primal model re-solved from scratch with the simplex stopped
         after half the iterations the optimum needed
point_b  the optimum of the auxiliary model, which only drives the
         slot/coverage penalties to zero
"""
import math

import gurobipy as gp
from gurobipy import GRB

from data_structures import ProblemDefinition, SolutionVector
from exceptions import AuxiliaryInfeasibleError, BoundedSolveError
from model_builder import AllocationModel, build_model, purchase_name
from solution_processor import extract_vector, status_name
from adspend_utils.decorators import log_and_time
import adspend_utils.logging as logging
logger = logging.getLogger(__name__)


def iteration_limit(iterations: int, divisor: int = 2) -> int:
    return int(math.floor(iterations / divisor))


@log_and_time("bounded-iteration solve", error_cls=BoundedSolveError)
def bounded_iteration_point(built: AllocationModel, iterations: int, divisor: int = 2) -> SolutionVector:
    """
    Reset the already-solved primal model and re-optimize with
    IterationLimit = floor(iterations / divisor). With a limit of 0 the
    result is the starting basis.
    """
    model = built.model
    limit = iteration_limit(iterations, divisor)
    logger.info("Re-solving %s with IterationLimit=%d (optimum used %d)", model.ModelName, limit, iterations)

    model.reset()
    model.Params.IterationLimit = limit
    model.optimize()

    status = model.Status
    if status not in (GRB.OPTIMAL, GRB.ITERATION_LIMIT):
        raise BoundedSolveError(f"re-solve ended with status {status_name(status)}", size=built.problem.size)
    try:
        vector = extract_vector(built, "point_a")
    except gp.GurobiError as e:
        raise BoundedSolveError(f"no solution readable after {limit} iterations: {e}",
                                size=built.problem.size) from e

    logger.info("Bounded re-solve => status=%s after %d iterations", status_name(status), int(model.IterCount))
    return vector


@log_and_time("auxiliary solve", error_cls=AuxiliaryInfeasibleError)
def auxiliary_point(env: gp.Env, problem: ProblemDefinition) -> SolutionVector:
    built = build_model(env, problem, auxiliary=True)
    try:
        built.model.optimize()
        status = built.model.Status
        if status in (GRB.INFEASIBLE, GRB.INF_OR_UNBD, GRB.UNBOUNDED):
            raise AuxiliaryInfeasibleError(
                f"no auxiliary feasible point found (status {status_name(status)})", size=problem.size
            )
        if status != GRB.OPTIMAL:
            raise AuxiliaryInfeasibleError(
                f"auxiliary solve stopped with status {status_name(status)}", size=problem.size
            )
        logger.info("Auxiliary model => OPTIMAL, total penalty=%s", built.model.ObjVal)
        return extract_vector(built, "point_b")
    finally:
        built.dispose()


def max_violation(problem: ProblemDefinition, vector: SolutionVector) -> float:
    """
    Largest violation of the primal rows and bounds at a named point.
    Penalty variables, if present, are ignored: they do not exist in the
    primal model.
    """
    v = vector.as_dict()
    m, k = problem.size
    x = {(i, j): v[purchase_name(i, j)] for i in range(m) for j in range(k)}
    s = [v[f"s_{r}"] for r in range(problem.num_rows)]
    aux = v["aux"]

    worst = 0.0
    for (i, j), value in x.items():
        worst = max(worst, -value, value - problem.capacity[i][j])
    worst = max(worst, -aux, *(-value for value in s))

    for i in range(m):
        spend = sum(problem.unit_cost[i][j] * x[(i, j)] for j in range(k))
        worst = max(worst, abs(spend + s[i] - problem.max_budget[i]))
    for j in range(k):
        spend = sum(problem.unit_cost[i][j] * x[(i, j)] for i in range(m))
        worst = max(worst, abs(spend - s[m + j] - problem.slot_spend_floor))

    coverage = sum(problem.unit_coverage[i][j] * x[(i, j)] for i in range(m) for j in range(k))
    worst = max(worst, abs(coverage - s[m + k] - problem.min_coverage))

    imbalance = sum(
        problem.slot_sign(j) * problem.unit_coverage[i][j] * x[(i, j)]
        for i in range(m) for j in range(k)
    )
    worst = max(worst, imbalance - aux, -imbalance - aux)
    return worst
