import pytest

from model_builder import build_model, row_names


@pytest.mark.parametrize("auxiliary", [False, True])
def test_variable_counts(env, skewed_problem, auxiliary):
    built = build_model(env, skewed_problem, auxiliary=auxiliary)
    try:
        m, k = skewed_problem.size
        rows = m + k + 1
        assert len(built.x) == m * k
        assert len(built.slack) == rows
        if auxiliary:
            assert len(built.penalty) == rows
        else:
            assert built.penalty is None
        # x, slack, [penalty], aux
        assert built.model.NumVars == m * k + rows + (rows if auxiliary else 0) + 1
        assert built.model.NumConstrs == rows + 2
    finally:
        built.dispose()


def test_names_are_index_derived(env, uniform_problem):
    built = build_model(env, uniform_problem, auxiliary=True)
    try:
        names = [v.VarName for v in built.variables()]
        assert names == [
            "x_1_1", "x_1_2", "x_2_1", "x_2_2",
            "s_0", "s_1", "s_2", "s_3", "s_4",
            "a_0", "a_1", "a_2", "a_3", "a_4",
            "aux",
        ]
        constrs = [c.ConstrName for c in built.model.getConstrs()]
        assert constrs == row_names(uniform_problem) + ["c_balance_pos", "c_balance_neg"]
        assert constrs[:5] == [
            "c_max_budget_1", "c_max_budget_2",
            "c_min_slot_spend_1", "c_min_slot_spend_2",
            "c_min_coverage",
        ]
    finally:
        built.dispose()


def test_bounds_follow_capacity(env, skewed_problem):
    built = build_model(env, skewed_problem)
    try:
        for (i, j), var in built.x.items():
            assert var.LB == 0.0
            assert var.UB == skewed_problem.capacity[i][j]
    finally:
        built.dispose()


def test_primal_objective_is_deviation_only(env, skewed_problem):
    built = build_model(env, skewed_problem)
    try:
        objective = {v.VarName: v.Obj for v in built.variables()}
        assert objective.pop("aux") == 1.0
        assert all(coef == 0.0 for coef in objective.values())
    finally:
        built.dispose()


def test_auxiliary_objective_sums_penalties(env, skewed_problem):
    built = build_model(env, skewed_problem, auxiliary=True)
    try:
        for var in built.variables():
            expected = 1.0 if var.VarName.startswith("a_") else 0.0
            assert var.Obj == expected
    finally:
        built.dispose()


def test_penalties_never_enter_budget_rows(env, skewed_problem):
    built = build_model(env, skewed_problem, auxiliary=True)
    try:
        m = skewed_problem.num_outlets
        constrs = built.model.getConstrs()
        for r, constr in enumerate(constrs[:skewed_problem.num_rows]):
            for q, penalty in enumerate(built.penalty):
                coef = built.model.getCoeff(constr, penalty)
                if r >= m and q == r:
                    assert coef == 1.0
                else:
                    assert coef == 0.0
    finally:
        built.dispose()


def test_row_coefficients_and_rhs(env, uniform_problem):
    built = build_model(env, uniform_problem)
    try:
        model = built.model
        budget_1 = model.getConstrByName("c_max_budget_1")
        assert budget_1.RHS == 20.0
        assert model.getCoeff(budget_1, built.x[(0, 0)]) == 10.0
        assert model.getCoeff(budget_1, built.slack[0]) == 1.0

        slot_2 = model.getConstrByName("c_min_slot_spend_2")
        assert slot_2.RHS == pytest.approx(4.0)
        assert model.getCoeff(slot_2, built.slack[3]) == -1.0

        coverage = model.getConstrByName("c_min_coverage")
        assert coverage.RHS == 20.0
        assert model.getCoeff(coverage, built.slack[4]) == -1.0
    finally:
        built.dispose()
