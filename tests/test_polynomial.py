import pytest

from quadmpc.polynomial import (
    poly_conv,
    poly_deri,
    poly_eval,
    poly_mod,
    poly_sqr,
    poly_val,
)

SAMPLES = [
    [1.0, -2.0, 3.0],
    [0.5, 0.0, -1.5, 2.0, 4.0],
    [3.0],
    [-1.0, 7.0, 0.25, -3.0, 0.0, 1.0],
]
POINTS = [-2.5, -1.0, 0.3, 1.0, 1.7, 3.0]


@pytest.mark.parametrize("coeffs", SAMPLES)
def test_poly_sqr_matches_self_convolution(coeffs):
    assert poly_sqr(coeffs) == pytest.approx(poly_conv(coeffs, coeffs))


@pytest.mark.parametrize("x", POINTS)
def test_poly_conv_evaluates_to_product(x):
    left, right = SAMPLES[0], SAMPLES[1]
    product = poly_conv(left, right)
    assert len(product) == len(left) + len(right) - 1
    assert poly_val(product, x) == pytest.approx(poly_val(left, x) * poly_val(right, x))


def test_poly_conv_rejects_empty():
    with pytest.raises(ValueError):
        poly_conv([], [1.0])


def test_poly_sqr_rejects_empty():
    with pytest.raises(ValueError):
        poly_sqr([])


@pytest.mark.parametrize("coeffs", SAMPLES)
@pytest.mark.parametrize("x", POINTS)
def test_evaluation_forms_agree(coeffs, x):
    stable = poly_val(coeffs, x)
    assert poly_val(coeffs, x, False) == pytest.approx(stable)
    assert poly_eval(coeffs, x) == pytest.approx(stable)


@pytest.mark.parametrize("coeffs", SAMPLES)
def test_evaluation_at_zero_gives_constant_term(coeffs):
    assert poly_val(coeffs, 0.0) == coeffs[-1]
    assert poly_eval(coeffs, 0.0) == coeffs[-1]


@pytest.mark.parametrize("coeffs", SAMPLES)
def test_evaluation_at_one_gives_sum(coeffs):
    assert poly_val(coeffs, 1.0) == pytest.approx(sum(coeffs))
    assert poly_eval(coeffs, 1.0) == pytest.approx(sum(coeffs))


def test_empty_polynomial_evaluates_to_zero():
    assert poly_val([], 2.0) == 0.0
    assert poly_eval([], 2.0) == 0.0


def test_poly_deri_of_cubic():
    assert poly_deri([1.0, 1.0, 1.0, 1.0]) == [3.0, 2.0, 1.0]


def test_poly_deri_of_constant_is_empty():
    assert poly_deri([5.0]) == []


@pytest.mark.parametrize("x", POINTS)
def test_poly_deri_matches_finite_difference(x):
    coeffs = SAMPLES[1]
    h = 1e-6
    numeric = (poly_val(coeffs, x + h) - poly_val(coeffs, x - h)) / (2 * h)
    assert poly_val(poly_deri(coeffs), x) == pytest.approx(numeric, rel=1e-5, abs=1e-6)


@pytest.mark.parametrize("divisor, root", [([1.0, -2.0], 2.0), ([-1.0, 2.0], 2.0), ([1.0, 3.0], -3.0)])
@pytest.mark.parametrize("dividend", [[1.0, 0.0, 0.0], [2.0, -1.0, 0.5, 4.0]])
def test_poly_mod_by_linear_is_value_at_root(dividend, divisor, root):
    remainder = poly_mod(dividend, divisor)
    assert len(remainder) == 1
    assert remainder[0] == pytest.approx(poly_val(dividend, root))


def test_poly_mod_by_quadratic():
    remainder = poly_mod([1.0, 0.0, 0.0, 0.0], [1.0, 0.0, -1.0])
    assert remainder == pytest.approx([1.0, 0.0])
    for root in (1.0, -1.0):
        assert poly_val(remainder, root) == pytest.approx(poly_val([1.0, 0.0, 0.0, 0.0], root))


def test_poly_mod_exact_division_leaves_zero():
    assert poly_mod([1.0, 0.0, -1.0], [1.0, -1.0]) == [0.0]


def test_poly_mod_does_not_modify_inputs():
    dividend = [1.0, 2.0, 3.0]
    divisor = [1.0, -1.0]
    poly_mod(dividend, divisor)
    assert dividend == [1.0, 2.0, 3.0]
    assert divisor == [1.0, -1.0]


def test_poly_mod_requires_unit_leading_coefficient():
    with pytest.raises(ValueError):
        poly_mod([1.0, 0.0, 0.0], [2.0, 1.0])


def test_poly_mod_requires_lower_degree_divisor():
    with pytest.raises(ValueError):
        poly_mod([1.0, 2.0], [1.0, 0.0, 0.0])