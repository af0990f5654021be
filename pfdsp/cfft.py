"""Mixed-radix complex fast Fourier transform.

The length is split into radices 4, 2, 3 and 5, with any remaining odd
prime handled by a general butterfly. Neither direction is normalised:
a forward transform followed by a backward one multiplies the input by ``n``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .factors import COMPLEX_TRIAL_DIVISORS, complex_twiddles, factorize

_TAUR3 = -0.5
_TAUI3 = 0.866025403784439
_TR11 = 0.309016994374947
_TI11 = 0.951056516295154
_TR12 = -0.809016994374947
_TI12 = 0.587785252292473

Butterfly = Callable[[Sequence[complex], int, Sequence[complex]], list]


def _scale(factor: float, z: complex) -> complex:
    """Multiply a complex value by a real factor, component by component."""
    return complex(factor * z.real, factor * z.imag)


def _rot(z: complex) -> complex:
    """Multiply by the imaginary unit."""
    return complex(-z.imag, z.real)


def _radix2(x, sign, roots):
    a, b = x
    return [a + b, a - b]


def _radix3(x, sign, roots):
    x0, x1, x2 = x
    taui = _TAUI3 if sign > 0 else -_TAUI3
    t2 = x1 + x2
    c2 = x0 + _scale(_TAUR3, t2)
    c3 = _scale(taui, x1 - x2)
    return [x0 + t2, c2 + _rot(c3), c2 - _rot(c3)]


def _radix4(x, sign, roots):
    x0, x1, x2, x3 = x
    t1 = x0 - x2
    t2 = x0 + x2
    t3 = x1 + x3
    t4 = _rot(x1 - x3)
    if sign < 0:
        t4 = -t4
    return [t2 + t3, t1 + t4, t2 - t3, t1 - t4]


def _radix5(x, sign, roots):
    x0, x1, x2, x3, x4 = x
    ti11 = _TI11 * sign
    ti12 = _TI12 * sign
    t2 = x1 + x4
    t5 = x1 - x4
    t3 = x2 + x3
    t4 = x2 - x3
    out0 = x0 + t2 + t3
    c2 = x0 + _scale(_TR11, t2) + _scale(_TR12, t3)
    c3 = x0 + _scale(_TR12, t2) + _scale(_TR11, t3)
    c5 = _scale(ti11, t5) + _scale(ti12, t4)
    c4 = _scale(ti12, t5) - _scale(ti11, t4)
    return [out0, c2 + _rot(c5), c3 + _rot(c4), c3 - _rot(c4), c2 - _rot(c5)]


def _radix_general(x, sign, roots):
    """Butterfly for an odd prime radix, using the roots of unity ``roots[r]``."""
    ip = len(x)
    half = (ip + 1) // 2
    sums = [0j] * ip
    sums[0] = x[0]
    for j in range(1, half):
        jc = ip - j
        sums[j] = x[j] + x[jc]
        sums[jc] = x[j] - x[jc]

    mixed = [0j] * ip
    for l in range(1, half):
        root = roots[l]
        even = sums[0] + _scale(root.real, sums[1])
        odd = _scale(sign * root.imag, sums[ip - 1])
        for j in range(2, half):
            root = roots[(l * j) % ip]
            even = even + _scale(root.real, sums[j])
            odd = odd + _scale(sign * root.imag, sums[ip - j])
        mixed[l] = even
        mixed[ip - l] = odd

    out = [0j] * ip
    total = sums[0]
    for j in range(1, half):
        total = total + sums[j]
    out[0] = total
    for j in range(1, half):
        jc = ip - j
        a, b = mixed[j], mixed[jc]
        out[j] = complex(a.real - b.imag, a.imag + b.real)
        out[jc] = complex(a.real + b.imag, a.imag - b.real)
    return out


_BUTTERFLIES: dict[int, Butterfly] = {
    2: _radix2,
    3: _radix3,
    4: _radix4,
    5: _radix5,
}


def _apply_twiddle(w: complex, v: complex, sign: int) -> complex:
    swi = sign * w.imag
    return complex(w.real * v.real - swi * v.imag, w.real * v.imag + swi * v.real)


def _stage(data, ido, l1, ip, twiddles, sign):
    """Run one radix-``ip`` pass over ``l1`` groups of ``ido`` complex values."""
    butterfly = _BUTTERFLIES.get(ip, _radix_general)
    roots = [1 + 0j] + [twiddles[(r - 1) * ido] for r in range(1, ip)]
    out = [0j] * len(data)
    for k in range(l1):
        for i in range(ido):
            inputs = [data[(k * ip + j) * ido + i] for j in range(ip)]
            for j, value in enumerate(butterfly(inputs, sign, roots)):
                if j and i:
                    value = _apply_twiddle(twiddles[(j - 1) * ido + i], value, sign)
                out[(j * l1 + k) * ido + i] = value
    return out


class ComplexFFT:
    """Unnormalised complex DFT of a fixed length ``n``.

    ``forward`` computes ``sum_k c[k] * exp(-2j*pi*j*k/n)`` and ``backward``
    the same sum with a positive exponent.
    """

    def __init__(self, n):
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"transform length must be an integer, got {n!r}")
        if n < 1:
            raise ValueError(f"transform length must be positive, got {n}")
        self.n = n
        self.factors = tuple(factorize(n, COMPLEX_TRIAL_DIVISORS)) if n > 1 else ()
        flat = complex_twiddles(n, self.factors)
        self._twiddles = [complex(re, im) for re, im in zip(flat[0::2], flat[1::2])]

    def _coerce(self, values: Iterable) -> list[complex]:
        data = [complex(v) for v in values]
        if len(data) != self.n:
            raise ValueError(f"expected {self.n} values, got {len(data)}")
        return data

    def _transform(self, values, sign: int) -> list[complex]:
        data = self._coerce(values)
        n = self.n
        l1 = 1
        offset = 0
        for ip in self.factors:
            l2 = ip * l1
            ido = n // l2
            stage_twiddles = self._twiddles[offset:]
            data = _stage(data, ido, l1, ip, stage_twiddles, sign)
            l1 = l2
            offset += (ip - 1) * ido
        return data

    def forward(self, values):
        """Forward transform (Fourier analysis); returns a new list."""
        return self._transform(values, -1)

    def backward(self, values):
        """Backward transform (Fourier synthesis); returns a new list."""
        return self._transform(values, +1)