import math

import pytest

from pfdsp.cfft import ComplexFFT
from pfdsp.factors import REAL_TRIAL_DIVISORS, factorize, real_twiddles
from pfdsp.rfft_forward import real_forward


def _signal(n):
    return [math.sin((j + 1) * math.sqrt(2.0)) for j in range(n)]


def _forward(values, factors=None):
    n = len(values)
    if factors is None:
        factors = factorize(n, REAL_TRIAL_DIVISORS) if n > 1 else []
    return real_forward(values, n, factors, real_twiddles(n, factors))


def _packed_reference(values):
    n = len(values)
    spectrum = ComplexFFT(n).forward(values)
    packed = [spectrum[0].real]
    for m in range(1, (n + 1) // 2):
        packed.extend([spectrum[m].real, spectrum[m].imag])
    if n % 2 == 0:
        packed.append(spectrum[n // 2].real)
    return packed


@pytest.mark.parametrize(
    "n", [120, 91, 54, 49, 32, 28, 24, 8, 4, 3, 2, 5, 6, 7, 11, 13, 35, 45, 77, 60]
)
def test_matches_complex_transform(n):
    values = _signal(n)
    result = _forward(values)
    expected = _packed_reference(values)
    assert len(result) == n
    assert result == pytest.approx(expected, abs=1e-9 * n)


def test_length_one_is_identity():
    assert _forward([2.5]) == [2.5]


def test_constant_input_puts_everything_in_first_bin():
    n = 6
    result = _forward([1.0] * n)
    assert result == pytest.approx([float(n)] + [0.0] * (n - 1), abs=1e-12)


def test_impulse_has_flat_real_spectrum():
    n = 9
    result = _forward([1.0] + [0.0] * (n - 1))
    expected = [1.0] + [1.0, 0.0] * ((n - 1) // 2)
    assert result == pytest.approx(expected, abs=1e-12)


def test_alternating_input_lands_in_nyquist_bin():
    n = 8
    result = _forward([(-1.0) ** i for i in range(n)])
    assert result[-1] == pytest.approx(n)
    assert result[:-1] == pytest.approx([0.0] * (n - 1), abs=1e-12)


def test_linearity():
    n = 30
    a = _signal(n)
    b = [math.cos(0.3 * j) for j in range(n)]
    combined = _forward([2.0 * x - 3.0 * y for x, y in zip(a, b)])
    separate = [2.0 * x - 3.0 * y for x, y in zip(_forward(a), _forward(b))]
    assert combined == pytest.approx(separate, abs=1e-9)


@pytest.mark.parametrize("n", [16, 20, 36, 50])
def test_parseval_even_length(n):
    values = _signal(n)
    r = _forward(values)
    energy = r[0] ** 2 + r[-1] ** 2 + 2.0 * sum(v * v for v in r[1:-1])
    assert energy == pytest.approx(n * sum(v * v for v in values), rel=1e-9)


@pytest.mark.parametrize(
    "n, factors_a, factors_b",
    [(4, [4], [2, 2]), (9, [9], [3, 3]), (15, [15], [3, 5]), (12, [2, 2, 3], [4, 3])],
)
def test_result_independent_of_factorisation(n, factors_a, factors_b):
    values = _signal(n)
    assert _forward(values, factors_a) == pytest.approx(_forward(values, factors_b), abs=1e-9)


def test_input_is_not_modified():
    values = _signal(12)
    original = list(values)
    _forward(values)
    assert values == original


def test_wrong_data_length_raises():
    factors = factorize(8, REAL_TRIAL_DIVISORS)
    with pytest.raises(ValueError):
        real_forward([0.0] * 7, 8, factors, real_twiddles(8, factors))


def test_factors_must_multiply_to_length():
    with pytest.raises(ValueError):
        real_forward([0.0] * 8, 8, [2, 2], real_twiddles(8, [2, 2]))


def test_non_positive_length_raises():
    with pytest.raises(ValueError):
        real_forward([], 0, [], [])


def test_short_twiddle_table_raises():
    factors = factorize(8, REAL_TRIAL_DIVISORS)
    with pytest.raises(ValueError):
        real_forward([0.0] * 8, 8, factors, [0.0] * 3)


def test_unsupported_even_factor_raises():
    with pytest.raises(ValueError):
        real_forward([0.0] * 6, 6, [6], [0.0] * 6)