import math

import pytest

from pfdsp.factors import (
    COMPLEX_TRIAL_DIVISORS,
    REAL_TRIAL_DIVISORS,
    complex_twiddles,
    factorize,
    real_twiddles,
)

LENGTHS = [1, 2, 3, 4, 8, 12, 24, 28, 32, 49, 54, 91, 120]


@pytest.mark.parametrize("n", LENGTHS)
@pytest.mark.parametrize("divisors", [REAL_TRIAL_DIVISORS, COMPLEX_TRIAL_DIVISORS])
def test_factors_multiply_to_length(n, divisors):
    assert math.prod(factorize(n, divisors)) == n


@pytest.mark.parametrize("n", LENGTHS)
def test_two_comes_first_when_present(n):
    factors = factorize(n, REAL_TRIAL_DIVISORS)
    if 2 in factors:
        assert factors[0] == 2
        assert factors.count(2) == 1
    else:
        assert all(f != 2 for f in factors)


def test_real_factorization_of_eight():
    assert factorize(8, REAL_TRIAL_DIVISORS) == [2, 4]


def test_prime_beyond_trial_divisors():
    assert factorize(91, REAL_TRIAL_DIVISORS) == [7, 13]


def test_one_has_no_factors():
    assert factorize(1, COMPLEX_TRIAL_DIVISORS) == []


def test_complex_order_prefers_three():
    factors = factorize(12, COMPLEX_TRIAL_DIVISORS)
    assert factors[0] == 3
    assert math.prod(factors) == 12


@pytest.mark.parametrize("n", [0, -4])
def test_nonpositive_length_rejected(n):
    with pytest.raises(ValueError):
        factorize(n, REAL_TRIAL_DIVISORS)


def test_empty_divisors_rejected():
    with pytest.raises(ValueError):
        factorize(12, ())


def test_divisor_one_rejected():
    with pytest.raises(ValueError):
        factorize(12, (1, 2))


@pytest.mark.parametrize("n", LENGTHS)
def test_complex_twiddle_length(n):
    table = complex_twiddles(n, factorize(n, COMPLEX_TRIAL_DIVISORS))
    assert len(table) == 2 * n


@pytest.mark.parametrize("n", [l for l in LENGTHS if l > 1])
def test_complex_twiddles_are_roots_of_unity(n):
    table = complex_twiddles(n, factorize(n, COMPLEX_TRIAL_DIVISORS))
    for c, s in zip(table[0::2], table[1::2]):
        assert c * c + s * s == pytest.approx(1.0, abs=1e-12)
        turns = math.atan2(s, c) * n / (2.0 * math.pi)
        assert turns == pytest.approx(round(turns), abs=1e-9)


def test_complex_twiddles_start_with_unity_for_small_radix():
    table = complex_twiddles(8, factorize(8, COMPLEX_TRIAL_DIVISORS))
    assert table[0] == 1.0
    assert table[1] == 0.0


@pytest.mark.parametrize("n", LENGTHS)
def test_real_twiddle_length(n):
    table = real_twiddles(n, factorize(n, REAL_TRIAL_DIVISORS))
    assert len(table) == n


def test_real_twiddles_single_factor_are_zero():
    table = real_twiddles(7, factorize(7, REAL_TRIAL_DIVISORS))
    assert table == [0.0] * 7


def test_real_twiddles_for_eight():
    table = real_twiddles(8, factorize(8, REAL_TRIAL_DIVISORS))
    assert table[0] == pytest.approx(math.cos(math.pi / 4))
    assert table[1] == pytest.approx(math.sin(math.pi / 4))
    assert table[2:] == [0.0] * 6


@pytest.mark.parametrize("n", [24, 54, 120])
def test_real_twiddles_bounded(n):
    table = real_twiddles(n, factorize(n, REAL_TRIAL_DIVISORS))
    assert all(-1.0 <= v <= 1.0 for v in table)


def test_twiddles_reject_nonpositive_length():
    with pytest.raises(ValueError):
        complex_twiddles(0, [])
    with pytest.raises(ValueError):
        real_twiddles(0, [])