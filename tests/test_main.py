import pandas as pd

import config as cfg
from main import run_pipeline


def write_uniform_instance(folder):
    pd.DataFrame({"OUTLET_ID": [1, 2], "MAX_BUDGET": [20, 20]}).to_csv(folder / "outlets.csv", index=False)
    pd.DataFrame({
        "OUTLET_ID": [1, 1, 2, 2],
        "SLOT_ID": [1, 2, 1, 2],
        "CAPACITY": [2, 2, 2, 2],
        "UNIT_COST": [10, 10, 10, 10],
        "UNIT_COVERAGE": [5, 5, 5, 5],
    }).to_csv(folder / "slots.csv", index=False)
    pd.DataFrame({"MIN_COVERAGE": [20], "MIN_SLOT_SPEND_FRACTION": [0.1]}).to_csv(folder / "params.csv", index=False)


def test_pipeline_from_csv_folder(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(cfg, "SETTINGS", cfg.SolverConfig())
    instance = tmp_path / "uniform"
    instance.mkdir()
    write_uniform_instance(instance)
    settings = tmp_path / "settings.csv"
    pd.DataFrame({"INTERPOLATION_WEIGHT": [0.25]}).to_csv(settings, index=False)

    result = run_pipeline(
        str(instance),
        output_folder=str(tmp_path / "out"),
        settings_file=str(settings),
        log_dir=str(tmp_path / "logs"),
    )

    assert result.problem_name == "uniform"
    assert cfg.SETTINGS.InterpolationWeight == 0.25
    assert "QUESTION III:" in capsys.readouterr().out
    assert (tmp_path / "out" / "report.txt").exists()
    assert (tmp_path / "out" / "variables.csv").exists()
    assert (tmp_path / "out" / "points.csv").exists()
