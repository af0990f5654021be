"""Backward mixed-radix transform of a packed real spectrum.

The input uses the packing produced by :func:`pfdsp.rfft_forward.real_forward`::

    [X0.re, X1.re, X1.im, X2.re, X2.im, ..., (X[n/2].re if n is even)]

and the result is the real sequence

    r[i] = X0.re + 2 * sum_m (Xm.re * cos(2*pi*m*i/n) - Xm.im * sin(2*pi*m*i/n))
           (+ (-1)**i * X[n/2].re when n is even)

The transform is unnormalised: a forward transform followed by a backward
one multiplies the input by ``n``. The factor list and twiddle table are the
ones built by :func:`pfdsp.factors.factorize` with ``REAL_TRIAL_DIVISORS``
and :func:`pfdsp.factors.real_twiddles`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

_TAUR = -0.5
_TAUI = 0.866025403784439
_SQRT2 = 1.414213562373095
_TR11 = 0.309016994374947
_TI11 = 0.951056516295154
_TR12 = -0.809016994374947
_TI12 = 0.587785252292473


def _rotate(w: Sequence[float], p: int, re: float, im: float) -> tuple[float, float]:
    """Multiply (re, im) by the twiddle stored just before index ``p``."""
    c, s = w[p - 2], w[p - 1]
    return c * re - s * im, c * im + s * re


def _radb2(cc, ido, l1, wa):
    ch = [0.0] * len(cc)

    def x(i, j, k):
        return cc[i + ido * (j + 2 * k)]

    def y(i, k, j):
        return i + ido * (k + l1 * j)

    for k in range(l1):
        ch[y(0, k, 0)] = x(0, 0, k) + x(ido - 1, 1, k)
        ch[y(0, k, 1)] = x(0, 0, k) - x(ido - 1, 1, k)
    if ido < 2:
        return ch
    if ido != 2:
        for k in range(l1):
            for p in range(2, ido, 2):
                q = ido - p
                ch[y(p - 1, k, 0)] = x(p - 1, 0, k) + x(q - 1, 1, k)
                tr2 = x(p - 1, 0, k) - x(q - 1, 1, k)
                ch[y(p, k, 0)] = x(p, 0, k) - x(q, 1, k)
                ti2 = x(p, 0, k) + x(q, 1, k)
                ch[y(p - 1, k, 1)], ch[y(p, k, 1)] = _rotate(wa[0], p, tr2, ti2)
        if ido % 2 == 1:
            return ch
    last = ido - 1
    for k in range(l1):
        ch[y(last, k, 0)] = x(last, 0, k) + x(last, 0, k)
        ch[y(last, k, 1)] = -(x(0, 1, k) + x(0, 1, k))
    return ch


def _radb3(cc, ido, l1, wa):
    ch = [0.0] * len(cc)

    def x(i, j, k):
        return cc[i + ido * (j + 3 * k)]

    def y(i, k, j):
        return i + ido * (k + l1 * j)

    for k in range(l1):
        tr2 = x(ido - 1, 1, k) + x(ido - 1, 1, k)
        cr2 = x(0, 0, k) + _TAUR * tr2
        ch[y(0, k, 0)] = x(0, 0, k) + tr2
        ci3 = _TAUI * (x(0, 2, k) + x(0, 2, k))
        ch[y(0, k, 1)] = cr2 - ci3
        ch[y(0, k, 2)] = cr2 + ci3
    if ido == 1:
        return ch
    for k in range(l1):
        for p in range(2, ido, 2):
            q = ido - p
            tr2 = x(p - 1, 2, k) + x(q - 1, 1, k)
            cr2 = x(p - 1, 0, k) + _TAUR * tr2
            ch[y(p - 1, k, 0)] = x(p - 1, 0, k) + tr2
            ti2 = x(p, 2, k) - x(q, 1, k)
            ci2 = x(p, 0, k) + _TAUR * ti2
            ch[y(p, k, 0)] = x(p, 0, k) + ti2
            cr3 = _TAUI * (x(p - 1, 2, k) - x(q - 1, 1, k))
            ci3 = _TAUI * (x(p, 2, k) + x(q, 1, k))
            dr2 = cr2 - ci3
            dr3 = cr2 + ci3
            di2 = ci2 + cr3
            di3 = ci2 - cr3
            ch[y(p - 1, k, 1)], ch[y(p, k, 1)] = _rotate(wa[0], p, dr2, di2)
            ch[y(p - 1, k, 2)], ch[y(p, k, 2)] = _rotate(wa[1], p, dr3, di3)
    return ch


def _radb4(cc, ido, l1, wa):
    ch = [0.0] * len(cc)

    def x(i, j, k):
        return cc[i + ido * (j + 4 * k)]

    def y(i, k, j):
        return i + ido * (k + l1 * j)

    last = ido - 1
    for k in range(l1):
        tr1 = x(0, 0, k) - x(last, 3, k)
        tr2 = x(0, 0, k) + x(last, 3, k)
        tr3 = x(last, 1, k) + x(last, 1, k)
        tr4 = x(0, 2, k) + x(0, 2, k)
        ch[y(0, k, 0)] = tr2 + tr3
        ch[y(0, k, 1)] = tr1 - tr4
        ch[y(0, k, 2)] = tr2 - tr3
        ch[y(0, k, 3)] = tr1 + tr4
    if ido < 2:
        return ch
    if ido != 2:
        for k in range(l1):
            for p in range(2, ido, 2):
                q = ido - p
                ti1 = x(p, 0, k) + x(q, 3, k)
                ti2 = x(p, 0, k) - x(q, 3, k)
                ti3 = x(p, 2, k) - x(q, 1, k)
                tr4 = x(p, 2, k) + x(q, 1, k)
                tr1 = x(p - 1, 0, k) - x(q - 1, 3, k)
                tr2 = x(p - 1, 0, k) + x(q - 1, 3, k)
                ti4 = x(p - 1, 2, k) - x(q - 1, 1, k)
                tr3 = x(p - 1, 2, k) + x(q - 1, 1, k)
                ch[y(p - 1, k, 0)] = tr2 + tr3
                cr3 = tr2 - tr3
                ch[y(p, k, 0)] = ti2 + ti3
                ci3 = ti2 - ti3
                cr2 = tr1 - tr4
                cr4 = tr1 + tr4
                ci2 = ti1 + ti4
                ci4 = ti1 - ti4
                ch[y(p - 1, k, 1)], ch[y(p, k, 1)] = _rotate(wa[0], p, cr2, ci2)
                ch[y(p - 1, k, 2)], ch[y(p, k, 2)] = _rotate(wa[1], p, cr3, ci3)
                ch[y(p - 1, k, 3)], ch[y(p, k, 3)] = _rotate(wa[2], p, cr4, ci4)
        if ido % 2 == 1:
            return ch
    for k in range(l1):
        ti1 = x(0, 1, k) + x(0, 3, k)
        ti2 = x(0, 3, k) - x(0, 1, k)
        tr1 = x(last, 0, k) - x(last, 2, k)
        tr2 = x(last, 0, k) + x(last, 2, k)
        ch[y(last, k, 0)] = tr2 + tr2
        ch[y(last, k, 1)] = _SQRT2 * (tr1 - ti1)
        ch[y(last, k, 2)] = ti2 + ti2
        ch[y(last, k, 3)] = -_SQRT2 * (tr1 + ti1)
    return ch


def _radb5(cc, ido, l1, wa):
    ch = [0.0] * len(cc)

    def x(i, j, k):
        return cc[i + ido * (j + 5 * k)]

    def y(i, k, j):
        return i + ido * (k + l1 * j)

    last = ido - 1
    for k in range(l1):
        ti5 = x(0, 2, k) + x(0, 2, k)
        ti4 = x(0, 4, k) + x(0, 4, k)
        tr2 = x(last, 1, k) + x(last, 1, k)
        tr3 = x(last, 3, k) + x(last, 3, k)
        x0 = x(0, 0, k)
        ch[y(0, k, 0)] = x0 + tr2 + tr3
        cr2 = x0 + _TR11 * tr2 + _TR12 * tr3
        cr3 = x0 + _TR12 * tr2 + _TR11 * tr3
        ci5 = _TI11 * ti5 + _TI12 * ti4
        ci4 = _TI12 * ti5 - _TI11 * ti4
        ch[y(0, k, 1)] = cr2 - ci5
        ch[y(0, k, 2)] = cr3 - ci4
        ch[y(0, k, 3)] = cr3 + ci4
        ch[y(0, k, 4)] = cr2 + ci5
    if ido == 1:
        return ch
    for k in range(l1):
        for p in range(2, ido, 2):
            q = ido - p
            ti5 = x(p, 2, k) + x(q, 1, k)
            ti2 = x(p, 2, k) - x(q, 1, k)
            ti4 = x(p, 4, k) + x(q, 3, k)
            ti3 = x(p, 4, k) - x(q, 3, k)
            tr5 = x(p - 1, 2, k) - x(q - 1, 1, k)
            tr2 = x(p - 1, 2, k) + x(q - 1, 1, k)
            tr4 = x(p - 1, 4, k) - x(q - 1, 3, k)
            tr3 = x(p - 1, 4, k) + x(q - 1, 3, k)
            xr = x(p - 1, 0, k)
            xi = x(p, 0, k)
            ch[y(p - 1, k, 0)] = xr + tr2 + tr3
            ch[y(p, k, 0)] = xi + ti2 + ti3
            cr2 = xr + _TR11 * tr2 + _TR12 * tr3
            ci2 = xi + _TR11 * ti2 + _TR12 * ti3
            cr3 = xr + _TR12 * tr2 + _TR11 * tr3
            ci3 = xi + _TR12 * ti2 + _TR11 * ti3
            cr5 = _TI11 * tr5 + _TI12 * tr4
            ci5 = _TI11 * ti5 + _TI12 * ti4
            cr4 = _TI12 * tr5 - _TI11 * tr4
            ci4 = _TI12 * ti5 - _TI11 * ti4
            dr3 = cr3 - ci4
            dr4 = cr3 + ci4
            di3 = ci3 + cr4
            di4 = ci3 - cr4
            dr5 = cr2 + ci5
            dr2 = cr2 - ci5
            di5 = ci2 - cr5
            di2 = ci2 + cr5
            ch[y(p - 1, k, 1)], ch[y(p, k, 1)] = _rotate(wa[0], p, dr2, di2)
            ch[y(p - 1, k, 2)], ch[y(p, k, 2)] = _rotate(wa[1], p, dr3, di3)
            ch[y(p - 1, k, 3)], ch[y(p, k, 3)] = _rotate(wa[2], p, dr4, di4)
            ch[y(p - 1, k, 4)], ch[y(p, k, 4)] = _rotate(wa[3], p, dr5, di5)
    return ch


def _radbg(data, ido, ip, l1, wa):
    """General pass for an odd radix ``ip``."""
    idl1 = ido * l1
    ipph = (ip + 1) // 2
    arg = 2.0 * math.pi / ip
    dcp = math.cos(arg)
    dsp = math.sin(arg)
    pairs = range(2, ido, 2)

    # ``work`` starts as the stage input and holds the output when ido > 1;
    # with ido == 1 the output ends up in ``scratch``.
    work = list(data)
    scratch = [0.0] * len(data)

    def at(i, k, j):
        return i + ido * (k + l1 * j)

    def src(i, j, k):
        return i + ido * (j + ip * k)

    for k in range(l1):
        for i in range(ido):
            scratch[at(i, k, 0)] = work[src(i, 0, k)]
    for j in range(1, ipph):
        jc = ip - j
        for k in range(l1):
            a = work[src(ido - 1, 2 * j - 1, k)]
            b = work[src(0, 2 * j, k)]
            scratch[at(0, k, j)] = a + a
            scratch[at(0, k, jc)] = b + b
    if ido != 1:
        for j in range(1, ipph):
            jc = ip - j
            for k in range(l1):
                for p in pairs:
                    q = ido - p
                    ar = work[src(p - 1, 2 * j, k)]
                    br = work[src(q - 1, 2 * j - 1, k)]
                    ai = work[src(p, 2 * j, k)]
                    bi = work[src(q, 2 * j - 1, k)]
                    scratch[at(p - 1, k, j)] = ar + br
                    scratch[at(p - 1, k, jc)] = ar - br
                    scratch[at(p, k, j)] = ai - bi
                    scratch[at(p, k, jc)] = ai + bi

    ar1, ai1 = 1.0, 0.0
    for l in range(1, ipph):
        lc = ip - l
        ar1, ai1 = dcp * ar1 - dsp * ai1, dcp * ai1 + dsp * ar1
        for ik in range(idl1):
            work[ik + idl1 * l] = scratch[ik] + ar1 * scratch[ik + idl1]
            work[ik + idl1 * lc] = ai1 * scratch[ik + idl1 * (ip - 1)]
        ar2, ai2 = ar1, ai1
        for j in range(2, ipph):
            jc = ip - j
            ar2, ai2 = ar1 * ar2 - ai1 * ai2, ar1 * ai2 + ai1 * ar2
            for ik in range(idl1):
                work[ik + idl1 * l] += ar2 * scratch[ik + idl1 * j]
                work[ik + idl1 * lc] += ai2 * scratch[ik + idl1 * jc]
    for j in range(1, ipph):
        for ik in range(idl1):
            scratch[ik] += scratch[ik + idl1 * j]

    for j in range(1, ipph):
        jc = ip - j
        for k in range(l1):
            a, b = work[at(0, k, j)], work[at(0, k, jc)]
            scratch[at(0, k, j)] = a - b
            scratch[at(0, k, jc)] = a + b
    if ido == 1:
        return scratch
    for j in range(1, ipph):
        jc = ip - j
        for k in range(l1):
            for p in pairs:
                rj, ij = work[at(p - 1, k, j)], work[at(p, k, j)]
                rc, ic = work[at(p - 1, k, jc)], work[at(p, k, jc)]
                scratch[at(p - 1, k, j)] = rj - ic
                scratch[at(p - 1, k, jc)] = rj + ic
                scratch[at(p, k, j)] = ij + rc
                scratch[at(p, k, jc)] = ij - rc

    work[:idl1] = scratch[:idl1]
    for j in range(1, ip):
        for k in range(l1):
            work[at(0, k, j)] = scratch[at(0, k, j)]
            for p in pairs:
                re, im = _rotate(
                    wa[j - 1], p, scratch[at(p - 1, k, j)], scratch[at(p, k, j)]
                )
                work[at(p - 1, k, j)] = re
                work[at(p, k, j)] = im
    return work


_PASSES = {2: _radb2, 3: _radb3, 4: _radb4, 5: _radb5}


def _check_factors(n: int, factors: list[int]) -> None:
    for ip in factors:
        if ip < 2:
            raise ValueError(f"factors must be at least 2, got {ip}")
        if ip not in _PASSES and ip % 2 == 0:
            raise ValueError(f"unsupported even factor {ip}")
    if math.prod(factors) != n:
        raise ValueError(f"factors {factors} do not multiply to {n}")


def real_backward(data, n, factors, twiddles):
    """Backward real transform of ``n`` packed values; returns a new list."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"transform length must be an integer, got {n!r}")
    if n < 1:
        raise ValueError(f"transform length must be positive, got {n}")
    values = [float(v) for v in data]
    if len(values) != n:
        raise ValueError(f"expected {n} values, got {len(values)}")
    if n == 1:
        return values
    factors = list(factors)
    _check_factors(n, factors)
    twiddles = list(twiddles)
    if len(twiddles) < n:
        raise ValueError(f"twiddle table needs {n} entries, got {len(twiddles)}")

    offset = 0
    l1 = 1
    for ip in factors:
        l2 = ip * l1
        ido = n // l2
        wa = [twiddles[offset + r * ido : offset + (r + 1) * ido] for r in range(ip - 1)]
        stage = _PASSES.get(ip)
        if stage is None:
            values = _radbg(values, ido, ip, l1, wa)
        else:
            values = stage(values, ido, l1, wa)
        l1 = l2
        offset += (ip - 1) * ido
    return values