import pandas as pd
import pytest

from data_loader import load_problem, load_problem_from_dataframes
from exceptions import DataLoadError


def frames():
    outlets = pd.DataFrame({"OUTLET_ID": [2, 1], "MAX_BUDGET": [35, 40]})
    slots = pd.DataFrame({
        "OUTLET_ID": [1, 1, 2, 2],
        "SLOT_ID": [1, 2, 1, 2],
        "CAPACITY": [2, 3, 1, 2],
        "UNIT_COST": [10, 12, 11, 8],
        "UNIT_COVERAGE": [30, 45, 25, 35],
    })
    params = pd.DataFrame({"MIN_COVERAGE": [100], "MIN_SLOT_SPEND_FRACTION": [0.05]})
    return {"OUTLETS": outlets, "SLOTS": slots, "PARAMS": params}


def test_tables_are_pivoted_in_id_order():
    problem = load_problem_from_dataframes(frames(), name="toy")
    assert problem.name == "toy"
    assert problem.size == (2, 2)
    assert problem.max_budget == (40.0, 35.0)
    assert problem.capacity == ((2.0, 3.0), (1.0, 2.0))
    assert problem.unit_cost == ((10.0, 12.0), (11.0, 8.0))
    assert problem.unit_coverage == ((30.0, 45.0), (25.0, 35.0))
    assert problem.min_coverage == 100.0
    assert problem.min_slot_spend_fraction == 0.05


def test_missing_grid_cell_is_reported():
    data = frames()
    data["SLOTS"] = data["SLOTS"].iloc[:-1]
    with pytest.raises(DataLoadError, match="missing"):
        load_problem_from_dataframes(data)


def test_missing_column_is_reported():
    data = frames()
    data["SLOTS"] = data["SLOTS"].drop(columns=["UNIT_COST"])
    with pytest.raises(DataLoadError, match="UNIT_COST"):
        load_problem_from_dataframes(data)


def test_duplicate_pairs_are_rejected():
    data = frames()
    data["SLOTS"] = pd.concat([data["SLOTS"], data["SLOTS"].iloc[[0]]])
    with pytest.raises(DataLoadError, match="duplicate"):
        load_problem_from_dataframes(data)


def test_negative_values_surface_as_load_errors():
    data = frames()
    data["OUTLETS"].loc[0, "MAX_BUDGET"] = -1
    with pytest.raises(DataLoadError, match="negative"):
        load_problem_from_dataframes(data)


def test_load_problem_reads_csv_folder(tmp_path):
    data = frames()
    data["OUTLETS"].to_csv(tmp_path / "outlets.csv", index=False)
    data["SLOTS"].to_csv(tmp_path / "slots.csv", index=False)
    data["PARAMS"].to_csv(tmp_path / "params.csv", index=False)

    problem = load_problem(str(tmp_path))
    assert problem.name == tmp_path.name
    assert problem.size == (2, 2)


def test_missing_file_raises(tmp_path):
    with pytest.raises(DataLoadError, match="cannot read"):
        load_problem(str(tmp_path))
