import gurobipy as gp

from config import SETTINGS, SolverConfig
from data_structures import PrimalResult, ProblemDefinition, SolutionVector
from exceptions import AlternatePointError, SolveError
from model_builder import build_model
from alternate_points import auxiliary_point, bounded_iteration_point, max_violation
from interpolator import combine_solutions
from solution_classifier import classify
from solution_processor import purchase_totals, raise_for_status, snapshot, status_name
from adspend_utils.context import instance_context
from adspend_utils.decorators import log_and_time
import adspend_utils.logging as logging
logger = logging.getLogger(__name__)


def create_env(config: SolverConfig) -> gp.Env:
    env = gp.Env(empty=True)
    env.setParam("OutputFlag", int(config.OutputFlag))
    # primal simplex, no presolve: basis and reduced costs refer to the model as written
    env.setParam("Method", int(config.Method))
    env.setParam("Presolve", int(config.Presolve))
    if config.LogFile:
        env.setParam("LogFile", config.LogFile)
    env.start()
    return env


def solve(problem: ProblemDefinition, config: SolverConfig = None) -> PrimalResult:
    """
    Solve the primal model, classify its optimum and build the three
    alternate points (bounded re-solve, auxiliary model, interpolation).

    Infeasible/unbounded primal models raise and no result is produced.
    A missing alternate point is recorded in `notes` instead.
    """
    config = config or SETTINGS
    config.validate()

    with instance_context(problem.name, size=problem.size):
        logger.info("Solving %s (M=%d, K=%d)", problem.name, *problem.size)
        env = create_env(config)
        try:
            optimum, point_a, notes = _solve_primal(env, problem, config)
            point_b = None
            try:
                point_b = auxiliary_point(env, problem)
            except AlternatePointError as e:
                logger.warning("Continuing without auxiliary point: %s", e)
                notes["point_b"] = str(e)
        finally:
            env.dispose()

        optimal = SolutionVector("optimal", optimum.names(), optimum.values())
        interpolated = None
        if point_a is not None:
            interpolated = combine_solutions(optimal, point_a, config.InterpolationWeight, label="interpolated")
        else:
            notes["interpolated"] = "no bounded-iteration point to combine with"

        quantity, cost, coverage = purchase_totals(problem, optimal)
        classification = classify(optimum.records, config.RoundingDigits)
        violations = {
            p.label: max_violation(problem, p)
            for p in (optimal, point_a, point_b, interpolated)
            if p is not None
        }

        logger.info(
            "Optimum %s: degenerate=%s multiple=%s binding=%d",
            optimum.objective_value,
            classification.is_degenerate,
            classification.is_multiple_optima,
            len(classification.binding_constraints),
        )

    return PrimalResult(
        problem_name=problem.name,
        size=problem.size,
        status=optimum.status,
        objective_value=optimum.objective_value,
        iterations=optimum.iterations,
        total_quantity=quantity,
        total_cost=cost,
        total_coverage=coverage,
        unused_budget=problem.total_budget - cost,
        records=optimum.records,
        classification=classification,
        optimal=optimal,
        point_a=point_a,
        point_b=point_b,
        interpolated=interpolated,
        violations=violations,
        notes=notes,
    )


@log_and_time("primal solve", error_cls=SolveError)
def _solve_primal(env, problem, config):
    notes = {}
    built = build_model(env, problem, auxiliary=False)
    try:
        built.model.optimize()
        raise_for_status(built.model.Status, problem, "primal solve")
        optimum = snapshot(built)
        logger.info("Primal => %s, ObjVal=%s, IterCount=%d",
                    status_name(optimum.status), optimum.objective_value, optimum.iterations)

        point_a = None
        try:
            point_a = bounded_iteration_point(built, optimum.iterations, config.IterationDivisor)
        except AlternatePointError as e:
            logger.warning("Continuing without bounded-iteration point: %s", e)
            notes["point_a"] = str(e)
    finally:
        built.dispose()
    return optimum, point_a, notes
