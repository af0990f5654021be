import cmath
import math

import pytest

from pfdsp.cfft import ComplexFFT

SOURCE_SIZES = [120, 91, 54, 49, 32, 28, 24, 8, 4, 3, 2]
EXTRA_SIZES = [1, 5, 7, 11, 13, 26, 77, 6, 9, 15]
ALL_SIZES = SOURCE_SIZES + EXTRA_SIZES


def _signal(n):
    sqrt2 = math.sqrt(2.0)
    return [complex(math.cos(sqrt2 * i), math.sin(sqrt2 * i * i)) for i in range(1, n + 1)]


def _max_error(a, b):
    return max(abs(x - y) for x, y in zip(a, b))


@pytest.mark.parametrize("n", ALL_SIZES)
def test_forward_then_backward_scales_by_n(n):
    fft = ComplexFFT(n)
    x = _signal(n)
    y = fft.backward(fft.forward(x))
    assert len(y) == n
    assert _max_error([v / n for v in y], x) < 1e-9


@pytest.mark.parametrize("n", ALL_SIZES)
def test_backward_then_forward_scales_by_n(n):
    fft = ComplexFFT(n)
    x = _signal(n)
    y = fft.forward(fft.backward(x))
    assert _max_error([v / n for v in y], x) < 1e-9


@pytest.mark.parametrize("n", ALL_SIZES)
def test_impulse_gives_flat_spectrum(n):
    fft = ComplexFFT(n)
    x = [1.0] + [0.0] * (n - 1)
    assert _max_error(fft.forward(x), [1.0] * n) < 1e-12
    assert _max_error(fft.backward(x), [1.0] * n) < 1e-12


@pytest.mark.parametrize("n", [n for n in ALL_SIZES if n > 1])
def test_constant_input_concentrates_at_zero(n):
    fft = ComplexFFT(n)
    out = fft.forward([1.0] * n)
    assert out[0] == pytest.approx(n)
    assert max(abs(v) for v in out[1:]) < 1e-9


@pytest.mark.parametrize("n", [7, 8, 12, 13, 30, 49, 91, 120])
def test_pure_tone_lands_in_its_bin(n):
    fft = ComplexFFT(n)
    for m in (1, n // 3, n - 1):
        x = [cmath.exp(2j * math.pi * m * j / n) for j in range(n)]
        out = fft.forward(x)
        assert abs(out[m] - n) < 1e-8
        assert max(abs(v) for idx, v in enumerate(out) if idx != m) < 1e-8


@pytest.mark.parametrize("n", [7, 8, 12, 13, 30, 49])
def test_backward_tone_sign_convention(n):
    fft = ComplexFFT(n)
    x = [cmath.exp(-2j * math.pi * 2 * j / n) for j in range(n)]
    out = fft.backward(x)
    assert abs(out[2] - n) < 1e-8
    assert max(abs(v) for idx, v in enumerate(out) if idx != 2) < 1e-8


@pytest.mark.parametrize("n", SOURCE_SIZES)
def test_parseval(n):
    fft = ComplexFFT(n)
    x = _signal(n)
    energy_in = sum(abs(v) ** 2 for v in x)
    energy_out = sum(abs(v) ** 2 for v in fft.forward(x))
    assert energy_out == pytest.approx(n * energy_in, rel=1e-10)


@pytest.mark.parametrize("n", SOURCE_SIZES)
def test_real_input_has_conjugate_symmetric_spectrum(n):
    fft = ComplexFFT(n)
    x = [math.sin(j * math.sqrt(2.0)) for j in range(1, n + 1)]
    out = fft.forward(x)
    assert abs(out[0].imag) < 1e-9
    for k in range(1, n):
        assert abs(out[n - k] - out[k].conjugate()) < 1e-9


@pytest.mark.parametrize("n", SOURCE_SIZES)
def test_backward_is_conjugated_forward(n):
    fft = ComplexFFT(n)
    x = _signal(n)
    back = fft.backward(x)
    forward_conj = [v.conjugate() for v in fft.forward([v.conjugate() for v in x])]
    assert _max_error(back, forward_conj) < 1e-9


@pytest.mark.parametrize("n", [6, 13, 24, 49])
def test_linearity(n):
    fft = ComplexFFT(n)
    x = _signal(n)
    y = [complex(j % 5, -j) for j in range(n)]
    combined = fft.forward([2 * a - 3j * b for a, b in zip(x, y)])
    separate = [2 * a - 3j * b for a, b in zip(fft.forward(x), fft.forward(y))]
    assert _max_error(combined, separate) < 1e-8


def test_length_one_is_identity():
    fft = ComplexFFT(1)
    assert fft.forward([3 + 4j]) == [3 + 4j]
    assert fft.backward([2.5]) == [2.5 + 0j]


def test_length_two_matches_sum_and_difference():
    fft = ComplexFFT(2)
    assert fft.forward([1 + 2j, 3 - 1j]) == [4 + 1j, -2 + 3j]


def test_input_is_not_modified():
    fft = ComplexFFT(12)
    x = _signal(12)
    copy = list(x)
    fft.forward(x)
    fft.backward(x)
    assert x == copy


def test_wrong_length_raises():
    fft = ComplexFFT(8)
    with pytest.raises(ValueError):
        fft.forward([0j] * 7)
    with pytest.raises(ValueError):
        fft.backward([0j] * 9)


@pytest.mark.parametrize("n", [0, -4])
def test_non_positive_length_raises(n):
    with pytest.raises(ValueError):
        ComplexFFT(n)


def test_non_integer_length_raises():
    with pytest.raises(TypeError):
        ComplexFFT(8.0)


def test_factors_cover_length():
    fft = ComplexFFT(120)
    assert math.prod(fft.factors) == 120