import os

import pandas as pd

from data_structures import ProblemDefinition
from exceptions import DataLoadError, InvalidProblemError
import adspend_utils.logging as logging
logger = logging.getLogger(__name__)

# table key -> (csv file, required columns)
TABLES = {
    "OUTLETS": ("outlets.csv", ["OUTLET_ID", "MAX_BUDGET"]),
    "SLOTS": ("slots.csv", ["OUTLET_ID", "SLOT_ID", "CAPACITY", "UNIT_COST", "UNIT_COVERAGE"]),
    "PARAMS": ("params.csv", ["MIN_COVERAGE", "MIN_SLOT_SPEND_FRACTION"]),
}


def _require(dataframes, key):
    df = dataframes.get(key)
    if df is None or df.empty:
        raise DataLoadError(f"table {key} is missing or empty", stage="data load")
    missing = [c for c in TABLES[key][1] if c not in df.columns]
    if missing:
        raise DataLoadError(f"table {key} lacks columns {missing}", stage="data load")
    return df


def load_problem_from_dataframes(dataframes, name="instance"):
    """
    Build a ProblemDefinition from three tables:
      OUTLETS  one row per outlet (OUTLET_ID, MAX_BUDGET)
      SLOTS    one row per outlet/slot pair (CAPACITY, UNIT_COST, UNIT_COVERAGE)
      PARAMS   a single row with MIN_COVERAGE and MIN_SLOT_SPEND_FRACTION
    Outlets and slots are ordered by id.
    """
    logger.info("CHECKPOINT: Starting load_problem_from_dataframes for %s", name)
    df_out = _require(dataframes, "OUTLETS").sort_values("OUTLET_ID")
    df_slots = _require(dataframes, "SLOTS")
    df_params = _require(dataframes, "PARAMS")

    if df_out["OUTLET_ID"].duplicated().any():
        raise DataLoadError("duplicate OUTLET_ID in OUTLETS", stage="data load")
    if df_slots.duplicated(subset=["OUTLET_ID", "SLOT_ID"]).any():
        raise DataLoadError("duplicate (OUTLET_ID, SLOT_ID) in SLOTS", stage="data load")

    outlet_ids = df_out["OUTLET_ID"].tolist()
    slot_ids = sorted(df_slots["SLOT_ID"].unique().tolist())
    unknown = set(df_slots["OUTLET_ID"]) - set(outlet_ids)
    if unknown:
        raise DataLoadError(f"SLOTS references unknown outlets {sorted(unknown)}", stage="data load")

    tables = {}
    for column in ("CAPACITY", "UNIT_COST", "UNIT_COVERAGE"):
        grid = df_slots.pivot(index="OUTLET_ID", columns="SLOT_ID", values=column)
        grid = grid.reindex(index=outlet_ids, columns=slot_ids)
        if grid.isna().any().any():
            raise DataLoadError(
                f"{column} is missing for some outlet/slot pairs",
                stage="data load",
                size=(len(outlet_ids), len(slot_ids)),
            )
        tables[column] = grid.to_numpy(dtype=float).tolist()

    params = df_params.iloc[0]
    try:
        problem = ProblemDefinition(
            capacity=tables["CAPACITY"],
            unit_cost=tables["UNIT_COST"],
            unit_coverage=tables["UNIT_COVERAGE"],
            max_budget=df_out["MAX_BUDGET"].astype(float).tolist(),
            min_coverage=float(params["MIN_COVERAGE"]),
            min_slot_spend_fraction=float(params["MIN_SLOT_SPEND_FRACTION"]),
            name=str(name),
        )
    except InvalidProblemError as e:
        raise DataLoadError(e.message, stage="data load", size=e.size) from e

    logger.info("Loaded %s: %d outlets x %d slots, total budget %.2f",
                name, problem.num_outlets, problem.num_slots, problem.total_budget)
    return problem


def load_problem(folder, name=None):
    """Read outlets.csv, slots.csv and params.csv from `folder`."""
    dataframes = {}
    for key, (filename, _) in TABLES.items():
        path = os.path.join(folder, filename)
        try:
            dataframes[key] = pd.read_csv(path)
            logger.info("Loaded %s with %d rows", key, len(dataframes[key]))
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise DataLoadError(f"cannot read {path}: {e}", stage="data load") from e
    return load_problem_from_dataframes(dataframes, name or os.path.basename(os.path.normpath(folder)))
