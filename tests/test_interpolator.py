import pytest

from data_structures import SolutionVector
from exceptions import DimensionMismatchError
from interpolator import combine, combine_solutions

A = [2.0, 0.0, 16.0, 1.5]
B = [0.0, 2.0, 4.0, 0.5]


def test_midpoint_by_default():
    assert combine(A, B) == pytest.approx([1.0, 1.0, 10.0, 1.0])


def test_boundary_weights_return_the_endpoints():
    assert combine(A, B, 1.0) == pytest.approx(A)
    assert combine(A, B, 0.0) == pytest.approx(B)
    assert combine(A, A, 0.5) == pytest.approx(A)


def test_weights_outside_unit_interval_are_not_clamped():
    assert combine([1.0], [0.0], 1.5) == pytest.approx([1.5])
    assert combine([1.0], [0.0], -0.5) == pytest.approx([-0.5])


def test_unequal_lengths_raise_instead_of_truncating():
    with pytest.raises(DimensionMismatchError):
        combine(A, B[:-1])


def test_combine_solutions_checks_variable_order():
    a = SolutionVector("optimal", ("x_1_1", "s_0"), (2.0, 0.0))
    b = SolutionVector("point_a", ("x_1_1", "s_0"), (0.0, 20.0))
    c = combine_solutions(a, b, 0.25, label="interpolated")
    assert c.label == "interpolated"
    assert c.names == ("x_1_1", "s_0")
    assert c.values == pytest.approx((0.5, 15.0))

    swapped = SolutionVector("point_b", ("s_0", "x_1_1"), (20.0, 0.0))
    with pytest.raises(DimensionMismatchError):
        combine_solutions(a, swapped)

    longer = SolutionVector("point_b", ("x_1_1", "s_0", "a_0"), (0.0, 20.0, 0.0))
    with pytest.raises(DimensionMismatchError):
        combine_solutions(a, longer)
