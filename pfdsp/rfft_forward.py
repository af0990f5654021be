"""Forward mixed-radix transform of a real periodic sequence.

The result is the unnormalised real DFT packed as::

    [X0.re, X1.re, X1.im, X2.re, X2.im, ..., (X[n/2].re if n is even)]

where ``Xm = sum_k x[k] * exp(-2j*pi*m*k/n)``. The length is split into
radices 4, 2, 3 and 5 by the passes below; any other odd factor goes
through a general butterfly. The factor list and twiddle table are the
ones built by :func:`pfdsp.factors.factorize` with
``REAL_TRIAL_DIVISORS`` and :func:`pfdsp.factors.real_twiddles`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

_TAUR = -0.5
_TAUI = 0.866025403784439
_HSQT2 = 0.7071067811865475
_TR11 = 0.309016994374947
_TI11 = 0.951056516295154
_TR12 = -0.809016994374947
_TI12 = 0.587785252292473


def _twiddle(w: Sequence[float], p: int, re: float, im: float) -> tuple[float, float]:
    """Multiply (re, im) by the conjugate of the twiddle stored before index ``p``."""
    c, s = w[p - 2], w[p - 1]
    return c * re + s * im, c * im - s * re


def _radf2(cc, ido, l1, wa):
    ch = [0.0] * len(cc)

    def x(i, k, j):
        return cc[i + ido * (k + l1 * j)]

    def y(i, j, k):
        return i + ido * (j + 2 * k)

    for k in range(l1):
        ch[y(0, 0, k)] = x(0, k, 0) + x(0, k, 1)
        ch[y(ido - 1, 1, k)] = x(0, k, 0) - x(0, k, 1)
    if ido < 2:
        return ch
    if ido != 2:
        for k in range(l1):
            for p in range(2, ido, 2):
                q = ido - p
                tr2, ti2 = _twiddle(wa[0], p, x(p - 1, k, 1), x(p, k, 1))
                ch[y(p, 0, k)] = x(p, k, 0) + ti2
                ch[y(q, 1, k)] = ti2 - x(p, k, 0)
                ch[y(p - 1, 0, k)] = x(p - 1, k, 0) + tr2
                ch[y(q - 1, 1, k)] = x(p - 1, k, 0) - tr2
        if ido % 2 == 1:
            return ch
    for k in range(l1):
        ch[y(0, 1, k)] = -x(ido - 1, k, 1)
        ch[y(ido - 1, 0, k)] = x(ido - 1, k, 0)
    return ch


def _radf3(cc, ido, l1, wa):
    ch = [0.0] * len(cc)

    def x(i, k, j):
        return cc[i + ido * (k + l1 * j)]

    def y(i, j, k):
        return i + ido * (j + 3 * k)

    for k in range(l1):
        cr2 = x(0, k, 1) + x(0, k, 2)
        ch[y(0, 0, k)] = x(0, k, 0) + cr2
        ch[y(0, 2, k)] = _TAUI * (x(0, k, 2) - x(0, k, 1))
        ch[y(ido - 1, 1, k)] = x(0, k, 0) + _TAUR * cr2
    if ido == 1:
        return ch
    for k in range(l1):
        for p in range(2, ido, 2):
            q = ido - p
            dr2, di2 = _twiddle(wa[0], p, x(p - 1, k, 1), x(p, k, 1))
            dr3, di3 = _twiddle(wa[1], p, x(p - 1, k, 2), x(p, k, 2))
            cr2 = dr2 + dr3
            ci2 = di2 + di3
            ch[y(p - 1, 0, k)] = x(p - 1, k, 0) + cr2
            ch[y(p, 0, k)] = x(p, k, 0) + ci2
            tr2 = x(p - 1, k, 0) + _TAUR * cr2
            ti2 = x(p, k, 0) + _TAUR * ci2
            tr3 = _TAUI * (di2 - di3)
            ti3 = _TAUI * (dr3 - dr2)
            ch[y(p - 1, 2, k)] = tr2 + tr3
            ch[y(q - 1, 1, k)] = tr2 - tr3
            ch[y(p, 2, k)] = ti2 + ti3
            ch[y(q, 1, k)] = ti3 - ti2
    return ch


def _radf4(cc, ido, l1, wa):
    ch = [0.0] * len(cc)

    def x(i, k, j):
        return cc[i + ido * (k + l1 * j)]

    def y(i, j, k):
        return i + ido * (j + 4 * k)

    for k in range(l1):
        tr1 = x(0, k, 1) + x(0, k, 3)
        tr2 = x(0, k, 0) + x(0, k, 2)
        ch[y(0, 0, k)] = tr1 + tr2
        ch[y(ido - 1, 3, k)] = tr2 - tr1
        ch[y(ido - 1, 1, k)] = x(0, k, 0) - x(0, k, 2)
        ch[y(0, 2, k)] = x(0, k, 3) - x(0, k, 1)
    if ido < 2:
        return ch
    if ido != 2:
        for k in range(l1):
            for p in range(2, ido, 2):
                q = ido - p
                cr2, ci2 = _twiddle(wa[0], p, x(p - 1, k, 1), x(p, k, 1))
                cr3, ci3 = _twiddle(wa[1], p, x(p - 1, k, 2), x(p, k, 2))
                cr4, ci4 = _twiddle(wa[2], p, x(p - 1, k, 3), x(p, k, 3))
                tr1 = cr2 + cr4
                tr4 = cr4 - cr2
                ti1 = ci2 + ci4
                ti4 = ci2 - ci4
                ti2 = x(p, k, 0) + ci3
                ti3 = x(p, k, 0) - ci3
                tr2 = x(p - 1, k, 0) + cr3
                tr3 = x(p - 1, k, 0) - cr3
                ch[y(p - 1, 0, k)] = tr1 + tr2
                ch[y(q - 1, 3, k)] = tr2 - tr1
                ch[y(p, 0, k)] = ti1 + ti2
                ch[y(q, 3, k)] = ti1 - ti2
                ch[y(p - 1, 2, k)] = ti4 + tr3
                ch[y(q - 1, 1, k)] = tr3 - ti4
                ch[y(p, 2, k)] = tr4 + ti3
                ch[y(q, 1, k)] = tr4 - ti3
        if ido % 2 == 1:
            return ch
    last = ido - 1
    for k in range(l1):
        ti1 = -_HSQT2 * (x(last, k, 1) + x(last, k, 3))
        tr1 = _HSQT2 * (x(last, k, 1) - x(last, k, 3))
        ch[y(last, 0, k)] = tr1 + x(last, k, 0)
        ch[y(last, 2, k)] = x(last, k, 0) - tr1
        ch[y(0, 1, k)] = ti1 - x(last, k, 2)
        ch[y(0, 3, k)] = ti1 + x(last, k, 2)
    return ch


def _radf5(cc, ido, l1, wa):
    ch = [0.0] * len(cc)

    def x(i, k, j):
        return cc[i + ido * (k + l1 * j)]

    def y(i, j, k):
        return i + ido * (j + 5 * k)

    for k in range(l1):
        cr2 = x(0, k, 4) + x(0, k, 1)
        ci5 = x(0, k, 4) - x(0, k, 1)
        cr3 = x(0, k, 3) + x(0, k, 2)
        ci4 = x(0, k, 3) - x(0, k, 2)
        x0 = x(0, k, 0)
        ch[y(0, 0, k)] = x0 + cr2 + cr3
        ch[y(ido - 1, 1, k)] = x0 + _TR11 * cr2 + _TR12 * cr3
        ch[y(0, 2, k)] = _TI11 * ci5 + _TI12 * ci4
        ch[y(ido - 1, 3, k)] = x0 + _TR12 * cr2 + _TR11 * cr3
        ch[y(0, 4, k)] = _TI12 * ci5 - _TI11 * ci4
    if ido == 1:
        return ch
    for k in range(l1):
        for p in range(2, ido, 2):
            q = ido - p
            dr2, di2 = _twiddle(wa[0], p, x(p - 1, k, 1), x(p, k, 1))
            dr3, di3 = _twiddle(wa[1], p, x(p - 1, k, 2), x(p, k, 2))
            dr4, di4 = _twiddle(wa[2], p, x(p - 1, k, 3), x(p, k, 3))
            dr5, di5 = _twiddle(wa[3], p, x(p - 1, k, 4), x(p, k, 4))
            cr2 = dr2 + dr5
            ci5 = dr5 - dr2
            cr5 = di2 - di5
            ci2 = di2 + di5
            cr3 = dr3 + dr4
            ci4 = dr4 - dr3
            cr4 = di3 - di4
            ci3 = di3 + di4
            xr = x(p - 1, k, 0)
            xi = x(p, k, 0)
            ch[y(p - 1, 0, k)] = xr + cr2 + cr3
            ch[y(p, 0, k)] = xi + ci2 + ci3
            tr2 = xr + _TR11 * cr2 + _TR12 * cr3
            ti2 = xi + _TR11 * ci2 + _TR12 * ci3
            tr3 = xr + _TR12 * cr2 + _TR11 * cr3
            ti3 = xi + _TR12 * ci2 + _TR11 * ci3
            tr5 = _TI11 * cr5 + _TI12 * cr4
            ti5 = _TI11 * ci5 + _TI12 * ci4
            tr4 = _TI12 * cr5 - _TI11 * cr4
            ti4 = _TI12 * ci5 - _TI11 * ci4
            ch[y(p - 1, 2, k)] = tr2 + tr5
            ch[y(q - 1, 1, k)] = tr2 - tr5
            ch[y(p, 2, k)] = ti2 + ti5
            ch[y(q, 1, k)] = ti5 - ti2
            ch[y(p - 1, 4, k)] = tr3 + tr4
            ch[y(q - 1, 3, k)] = tr3 - tr4
            ch[y(p, 4, k)] = ti3 + ti4
            ch[y(q, 3, k)] = ti4 - ti3
    return ch


def _radfg(data, ido, ip, l1, wa):
    """General pass for an odd radix ``ip``."""
    idl1 = ido * l1
    ipph = (ip + 1) // 2
    arg = 2.0 * math.pi / ip
    dcp = math.cos(arg)
    dsp = math.sin(arg)
    size = len(data)
    pairs = range(2, ido, 2)

    # ``work`` holds the stage input and, at the end, its output; ``scratch``
    # is the second buffer. With ido == 1 the input starts in the scratch.
    if ido == 1:
        scratch = list(data)
        work = [0.0] * size
    else:
        work = list(data)
        scratch = [0.0] * size

    def at(i, k, j):
        return i + ido * (k + l1 * j)

    def out(i, j, k):
        return i + ido * (j + ip * k)

    if ido == 1:
        work[:idl1] = scratch[:idl1]
    else:
        scratch[:idl1] = work[:idl1]
        for j in range(1, ip):
            for k in range(l1):
                scratch[at(0, k, j)] = work[at(0, k, j)]
                for p in pairs:
                    re, im = _twiddle(wa[j - 1], p, work[at(p - 1, k, j)], work[at(p, k, j)])
                    scratch[at(p - 1, k, j)] = re
                    scratch[at(p, k, j)] = im
        for j in range(1, ipph):
            jc = ip - j
            for k in range(l1):
                for p in pairs:
                    rj, ij = at(p - 1, k, j), at(p, k, j)
                    rc, ic = at(p - 1, k, jc), at(p, k, jc)
                    work[rj] = scratch[rj] + scratch[rc]
                    work[rc] = scratch[ij] - scratch[ic]
                    work[ij] = scratch[ij] + scratch[ic]
                    work[ic] = scratch[rc] - scratch[rj]

    for j in range(1, ipph):
        jc = ip - j
        for k in range(l1):
            a, b = at(0, k, j), at(0, k, jc)
            work[a] = scratch[a] + scratch[b]
            work[b] = scratch[b] - scratch[a]

    ar1, ai1 = 1.0, 0.0
    for l in range(1, ipph):
        lc = ip - l
        ar1, ai1 = dcp * ar1 - dsp * ai1, dcp * ai1 + dsp * ar1
        for ik in range(idl1):
            scratch[ik + idl1 * l] = work[ik] + ar1 * work[ik + idl1]
            scratch[ik + idl1 * lc] = ai1 * work[ik + idl1 * (ip - 1)]
        ar2, ai2 = ar1, ai1
        for j in range(2, ipph):
            jc = ip - j
            ar2, ai2 = ar1 * ar2 - ai1 * ai2, ar1 * ai2 + ai1 * ar2
            for ik in range(idl1):
                scratch[ik + idl1 * l] += ar2 * work[ik + idl1 * j]
                scratch[ik + idl1 * lc] += ai2 * work[ik + idl1 * jc]
    for j in range(1, ipph):
        for ik in range(idl1):
            scratch[ik] += work[ik + idl1 * j]

    for k in range(l1):
        for i in range(ido):
            work[out(i, 0, k)] = scratch[at(i, k, 0)]
    for j in range(1, ipph):
        jc = ip - j
        for k in range(l1):
            work[out(ido - 1, 2 * j - 1, k)] = scratch[at(0, k, j)]
            work[out(0, 2 * j, k)] = scratch[at(0, k, jc)]
    if ido == 1:
        return work
    for j in range(1, ipph):
        jc = ip - j
        for k in range(l1):
            for p in pairs:
                q = ido - p
                rj, ij = scratch[at(p - 1, k, j)], scratch[at(p, k, j)]
                rc, ic = scratch[at(p - 1, k, jc)], scratch[at(p, k, jc)]
                work[out(p - 1, 2 * j, k)] = rj + rc
                work[out(q - 1, 2 * j - 1, k)] = rj - rc
                work[out(p, 2 * j, k)] = ij + ic
                work[out(q, 2 * j - 1, k)] = ic - ij
    return work


_PASSES = {2: _radf2, 3: _radf3, 4: _radf4, 5: _radf5}


def _check_factors(n: int, factors: list[int]) -> None:
    for ip in factors:
        if ip < 2:
            raise ValueError(f"factors must be at least 2, got {ip}")
        if ip not in _PASSES and ip % 2 == 0:
            raise ValueError(f"unsupported even factor {ip}")
    if math.prod(factors) != n:
        raise ValueError(f"factors {factors} do not multiply to {n}")


def real_forward(data, n, factors, twiddles):
    """Forward real transform of ``n`` values; returns a new packed list."""
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

    offset = n - 1
    l2 = n
    for ip in reversed(factors):
        l1 = l2 // ip
        ido = n // l2
        offset -= (ip - 1) * ido
        wa = [twiddles[offset + r * ido : offset + (r + 1) * ido] for r in range(ip - 1)]
        stage = _PASSES.get(ip)
        if stage is None:
            values = _radfg(values, ido, ip, l1, wa)
        else:
            values = stage(values, ido, l1, wa)
        l2 = l1
    return values