"""Real, cosine, sine and quarter-wave transforms built on the real FFT.

None of the transforms is normalised; each class documents the factor a
forward/backward pair (or a double application) multiplies the input by.
Every method returns a new list and leaves its argument untouched.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from .factors import REAL_TRIAL_DIVISORS, factorize, real_twiddles
from .rfft_backward import real_backward
from .rfft_forward import real_forward

_SQRT2 = 1.4142135623731
_TSQRT2 = 2.82842712474619
_SQRT3 = 1.73205080756888


def _check_length(n) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"transform length must be an integer, got {n!r}")
    if n < 1:
        raise ValueError(f"transform length must be positive, got {n}")


def _coerce(values: Iterable, n: int) -> list[float]:
    data = [float(v) for v in values]
    if len(data) != n:
        raise ValueError(f"expected {n} values, got {len(data)}")
    return data


class RealFFT:
    """Unnormalised DFT of a real periodic sequence of length ``n``.

    ``forward`` returns the packed spectrum
    ``[X0.re, X1.re, X1.im, ..., (X[n/2].re if n is even)]``; ``backward``
    turns such a spectrum back into a sequence. A forward transform followed
    by a backward one multiplies the input by ``n``.
    """

    def __init__(self, n):
        _check_length(n)
        self.n = n
        self.factors = tuple(factorize(n, REAL_TRIAL_DIVISORS)) if n > 1 else ()
        self._twiddles = real_twiddles(n, self.factors)

    def forward(self, values):
        """Fourier analysis of ``n`` real values."""
        data = _coerce(values, self.n)
        return real_forward(data, self.n, self.factors, self._twiddles)

    def backward(self, values):
        """Fourier synthesis from ``n`` packed coefficients."""
        data = _coerce(values, self.n)
        return real_backward(data, self.n, self.factors, self._twiddles)


class CosineTransform:
    """Discrete cosine transform of an even sequence.

    ``x[i] = x[0] + (-1)**i * x[n-1]
    + sum_{k=1}^{n-2} 2 * x[k] * cos(k*i*pi/(n-1))``.
    Applying it twice multiplies the input by ``2 * (n - 1)``.
    """

    def __init__(self, n):
        _check_length(n)
        self.n = n
        self._rfft = RealFFT(n - 1) if n > 3 else None
        dt = math.pi / (n - 1) if n > 1 else 0.0
        half = n // 2
        self._sin = [2.0 * math.sin(a * dt) for a in range(half)]
        self._cos = [2.0 * math.cos(a * dt) for a in range(half)]

    def transform(self, values):
        """Apply the cosine transform to ``n`` values."""
        x = _coerce(values, self.n)
        n = self.n
        if n == 2:
            return [x[0] + x[1], x[0] - x[1]]
        if n == 3:
            x1p3 = x[0] + x[2]
            tx2 = x[1] + x[1]
            return [x1p3 + tx2, x[0] - x[2], x1p3 - tx2]
        if n < 2:
            return x

        c1 = x[0] - x[n - 1]
        x[0] += x[n - 1]
        for a in range(1, n // 2):
            b = n - 1 - a
            t1 = x[a] + x[b]
            t2 = x[a] - x[b]
            c1 += self._cos[a] * t2
            t2 = self._sin[a] * t2
            x[a] = t1 - t2
            x[b] = t1 + t2
        odd = n % 2 == 1
        if odd:
            x[n // 2] += x[n // 2]
        x = self._rfft.forward(x[: n - 1]) + [x[n - 1]]
        xim2 = x[1]
        x[1] = c1
        for i in range(3, n, 2):
            xi = x[i]
            x[i] = x[i - 2] - x[i - 1]
            x[i - 1] = xim2
            xim2 = xi
        if odd:
            x[n - 1] = xim2
        return x


class SineTransform:
    """Discrete sine transform of an odd sequence.

    ``x[i] = sum_{k=0}^{n-1} 2 * x[k] * sin((k+1)*(i+1)*pi/(n+1))``.
    Applying it twice multiplies the input by ``2 * (n + 1)``.
    """

    def __init__(self, n):
        _check_length(n)
        self.n = n
        self._rfft = RealFFT(n + 1) if n > 2 else None
        dt = math.pi / (n + 1)
        self._sin = [2.0 * math.sin(k * dt) for k in range(n // 2 + 1)]

    def transform(self, values):
        """Apply the sine transform to ``n`` values."""
        d = _coerce(values, self.n)
        n = self.n
        if n == 1:
            return [d[0] + d[0]]
        if n == 2:
            return [_SQRT3 * (d[0] + d[1]), _SQRT3 * (d[0] - d[1])]

        half = n // 2
        work = [0.0] * (n + 1)
        for k in range(1, half + 1):
            lo, hi = d[k - 1], d[n - k]
            t1 = lo - hi
            t2 = self._sin[k] * (lo + hi)
            work[k] = t1 + t2
            work[n + 1 - k] = t2 - t1
        odd = n % 2 == 1
        if odd:
            work[half + 1] = d[half] * 4.0
        y = self._rfft.forward(work)

        out = [0.0] * n
        out[0] = y[0] * 0.5
        for i in range(2, n, 2):
            out[i - 1] = -y[i]
            out[i] = out[i - 2] + y[i - 1]
        if not odd:
            out[n - 1] = -y[n]
        return out


class QuarterCosineTransform:
    """Cosine transform of quarter-wave data with odd wave numbers.

    ``forward``: ``x[i] = x[0] + sum_{k=1}^{n-1} 2*x[k]*cos((2i+1)*k*pi/(2n))``.
    ``backward``: ``x[i] = sum_{k=0}^{n-1} 4*x[k]*cos((2k+1)*i*pi/(2n))``.
    Either order of the pair multiplies the input by ``4 * n``.
    """

    def __init__(self, n):
        _check_length(n)
        self.n = n
        dt = math.pi / 2 / n
        self._cos = [math.cos(m * dt) for m in range(n + 1)]
        self._rfft = RealFFT(n)

    def forward(self, values):
        """Coefficients of the odd-wave-number cosine series."""
        x = _coerce(values, self.n)
        n = self.n
        if n == 1:
            return x
        if n == 2:
            tsqx = _SQRT2 * x[1]
            return [x[0] + tsqx, x[0] - tsqx]

        c = self._cos
        ns2 = (n + 1) // 2
        for a in range(1, ns2):
            b = n - a
            ha = x[a] + x[b]
            hb = x[a] - x[b]
            x[a] = c[a] * hb + c[b] * ha
            x[b] = c[a] * ha - c[b] * hb
        if n % 2 == 0:
            x[ns2] = c[ns2] * (x[ns2] + x[ns2])
        x = self._rfft.forward(x)
        for i in range(2, n, 2):
            xim1 = x[i - 1] - x[i]
            x[i] = x[i - 1] + x[i]
            x[i - 1] = xim1
        return x

    def backward(self, values):
        """Sequence from its odd-wave-number cosine series."""
        x = _coerce(values, self.n)
        n = self.n
        if n == 1:
            return [x[0] * 4.0]
        if n == 2:
            return [(x[0] + x[1]) * 4.0, _TSQRT2 * (x[0] - x[1])]

        for i in range(2, n, 2):
            xim1 = x[i - 1] + x[i]
            x[i] -= x[i - 1]
            x[i - 1] = xim1
        x[0] += x[0]
        even = n % 2 == 0
        if even:
            x[n - 1] += x[n - 1]
        x = self._rfft.backward(x)

        c = self._cos
        ns2 = (n + 1) // 2
        for a in range(1, ns2):
            b = n - a
            ha = c[a] * x[b] + c[b] * x[a]
            hb = c[a] * x[a] - c[b] * x[b]
            x[a] = ha + hb
            x[b] = ha - hb
        if even:
            x[ns2] = c[ns2] * (x[ns2] + x[ns2])
        x[0] += x[0]
        return x


class QuarterSineTransform:
    """Sine transform of quarter-wave data with odd wave numbers.

    ``forward``: ``x[i] = (-1)**i * x[n-1]
    + sum_{k=0}^{n-2} 2*x[k]*sin((2i+1)*(k+1)*pi/(2n))``.
    ``backward``: ``x[i] = sum_{k=0}^{n-1} 4*x[k]*sin((2k+1)*(i+1)*pi/(2n))``.
    Either order of the pair multiplies the input by ``4 * n``.
    """

    def __init__(self, n):
        _check_length(n)
        self.n = n
        self._cosine = QuarterCosineTransform(n)

    @staticmethod
    def _negate_odd(x: list[float]) -> list[float]:
        return [-v if i % 2 else v for i, v in enumerate(x)]

    def forward(self, values):
        """Coefficients of the odd-wave-number sine series."""
        x = _coerce(values, self.n)
        if self.n == 1:
            return x
        return self._negate_odd(self._cosine.forward(x[::-1]))

    def backward(self, values):
        """Sequence from its odd-wave-number sine series."""
        x = _coerce(values, self.n)
        if self.n == 1:
            return [x[0] * 4.0]
        return self._cosine.backward(self._negate_odd(x))[::-1]