"""Text and tabular renderings of a PrimalResult."""
import os

import pandas as pd

from data_structures import PrimalResult, SolutionVector
from exceptions import ReportWriteError
from solution_classifier import rounded
from solution_processor import status_name
import adspend_utils.logging as logging
logger = logging.getLogger(__name__)


def _listing(vector: SolutionVector, digits: int) -> str:
    return "".join(f"{name} = {rounded(value, digits)}\n" for name, value in zip(vector.names, vector.values))


def summary_dict(result: PrimalResult, digits: int = 4) -> dict:
    c = result.classification
    return {
        "problem": result.problem_name,
        "outlets": result.size[0],
        "slots": result.size[1],
        "status": status_name(result.status),
        "objective_value": rounded(result.objective_value, digits),
        "iterations": result.iterations,
        "total_coverage": rounded(result.total_coverage, digits),
        "total_quantity": rounded(result.total_quantity, digits),
        "total_cost": rounded(result.total_cost, digits),
        "unused_budget": rounded(result.unused_budget, digits),
        "is_degenerate": c.is_degenerate,
        "is_multiple_optima": c.is_multiple_optima,
        "binding_constraints": list(c.binding_constraints),
        "violations": {k: rounded(v, digits) for k, v in result.violations.items()},
        "notes": dict(result.notes),
    }


def format_report(result: PrimalResult, digits: int = 4) -> str:
    c = result.classification
    yes_no = {True: "yes", False: "no"}

    lines = [
        f"INSTANCE: {result.problem_name} (M={result.size[0]}, K={result.size[1]})",
        "",
        "QUESTION I:",
        f"objective value = {rounded(result.objective_value, digits)}",
        f"total coverage reached = {rounded(result.total_coverage, digits)}",
        f"quantity purchased = {rounded(result.total_quantity, digits)}",
        f"unused budget = {rounded(result.unused_budget, digits)}",
        "optimal basic solution:",
        _listing(result.optimal, digits),
        "QUESTION II:",
        f"basic variables: {list(c.basis)}",
        f"reduced costs: {list(c.reduced_costs)}",
        f"multiple optimal solutions: {yes_no[c.is_multiple_optima]}",
        f"degenerate optimal solution: {yes_no[c.is_degenerate]}",
        f"optimal vertex constraints: {list(c.binding_constraints)}",
        "",
        "QUESTION III:",
    ]

    points = [
        ("first non-optimal solution (bounded iterations, may be infeasible)", result.point_a, "point_a"),
        ("second feasible non-optimal solution (auxiliary problem)", result.point_b, "point_b"),
        ("third non-optimal solution (convex combination, may be infeasible)", result.interpolated, "interpolated"),
    ]
    for title, point, key in points:
        lines.append(f"{title}:")
        if point is None:
            lines.append(f"  not available: {result.notes.get(key, 'not computed')}")
            lines.append("")
            continue
        lines.append(_listing(point, digits))
        if key in result.violations:
            lines.append(f"max constraint violation = {rounded(result.violations[key], digits)}")
            lines.append("")
    return "\n".join(lines)


def variables_frame(result: PrimalResult, digits: int = 4) -> pd.DataFrame:
    """One row per variable of the primal model."""
    df = pd.DataFrame({
        "VARIABLE": [r.name for r in result.records],
        "KIND": [r.kind for r in result.records],
        "CONSTRAINT": [r.row or "" for r in result.records],
        "OPTIMAL": [rounded(r.value, digits) for r in result.records],
        "BASIC": [int(r.is_basic) for r in result.records],
        "REDUCED_COST": [rounded(r.reduced_cost, digits) for r in result.records],
    })
    for label, point in (("POINT_A", result.point_a), ("INTERPOLATED", result.interpolated)):
        if point is not None:
            df[label] = [rounded(v, digits) for v in point.values]
    return df


def points_frame(result: PrimalResult, digits: int = 4) -> pd.DataFrame:
    """Every reported point in long form: POINT, VARIABLE, VALUE."""
    rows = []
    for point in (result.optimal, *result.alternate_points()):
        for name, value in zip(point.names, point.values):
            rows.append([point.label, name, rounded(value, digits)])
    return pd.DataFrame(rows, columns=["POINT", "VARIABLE", "VALUE"])


def write_reports(output_folder, result: PrimalResult, digits: int = 4) -> dict:
    """Writes report.txt, variables.csv and points.csv; returns their paths."""
    paths = {
        "report": os.path.join(output_folder, "report.txt"),
        "variables": os.path.join(output_folder, "variables.csv"),
        "points": os.path.join(output_folder, "points.csv"),
    }
    try:
        os.makedirs(output_folder, exist_ok=True)
        with open(paths["report"], "w", encoding="utf-8") as f:
            f.write(format_report(result, digits))
        variables_frame(result, digits).to_csv(paths["variables"], index=False)
        points_frame(result, digits).to_csv(paths["points"], index=False)
    except OSError as e:
        raise ReportWriteError(f"cannot write reports to {output_folder}: {e}",
                               stage="report", size=result.size) from e

    logger.info(f"[OK] Wrote reports for {result.problem_name} to {output_folder}")
    return paths
