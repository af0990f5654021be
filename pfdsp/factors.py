"""Factorisation of transform lengths and the twiddle-factor tables built from it.

The tables use the layout the mixed-radix passes expect. ``complex_twiddles``
returns ``2 * n`` reals as interleaved (cos, sin) pairs. ``real_twiddles``
returns ``n`` reals. Positions a pass never reads are left at zero.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Sequence

COMPLEX_TRIAL_DIVISORS = (3, 4, 2, 5)
REAL_TRIAL_DIVISORS = (4, 2, 3, 5)


def _check_length(n: int) -> None:
    if n < 1:
        raise ValueError(f"transform length must be positive, got {n}")


def _candidates(trial_divisors: Sequence[int]) -> Iterable[int]:
    """Yield the trial divisors, then odd numbers after the last of them."""
    yield from trial_divisors
    yield from itertools.count(trial_divisors[-1] + 2, 2)


def factorize(n, trial_divisors):
    """Split ``n`` into the radices used by the transform passes.

    The divisors are tried in the given order and each is taken as often as
    it divides. After the list runs out, odd numbers from the last divisor
    plus two are tried. A factor of 2 found after other factors is moved to
    the front.
    """
    _check_length(n)
    divisors = tuple(trial_divisors)
    if not divisors:
        raise ValueError("at least one trial divisor is required")
    if any(d < 2 for d in divisors):
        raise ValueError(f"trial divisors must be at least 2, got {divisors}")

    factors: list[int] = []
    remaining = n
    for candidate in _candidates(divisors):
        if remaining == 1:
            break
        while remaining % candidate == 0:
            remaining //= candidate
            if candidate == 2 and factors:
                factors.insert(0, 2)
            else:
                factors.append(candidate)
            if remaining == 1:
                break
    return factors


def complex_twiddles(n, factors):
    """Build the twiddle table for complex transforms of length ``n``.

    Returns ``2 * n`` floats as (cos, sin) pairs. Each stage and sub-block
    contributes ``ido + 1`` pairs. The first of these overlaps the last pair
    of the previous block. For radices above 5 the first pair of a block is
    replaced by its last.
    """
    _check_length(n)
    base = 2.0 * math.pi / n
    pairs: list[tuple[float, float]] = []
    l1 = 1
    for ip in factors:
        l2 = l1 * ip
        ido = n // l2
        for j in range(1, ip):
            argld = j * l1 * base
            block = [(1.0, 0.0)]
            block.extend(
                (math.cos(fi * argld), math.sin(fi * argld)) for fi in range(1, ido + 1)
            )
            if ip > 5:
                block[0] = block[-1]
            pairs[-1:] = block
        l1 = l2
    flat = [value for pair in pairs for value in pair]
    flat.extend([0.0] * (2 * n - len(flat)))
    return flat


def real_twiddles(n, factors):
    """Build the twiddle table for real transforms of length ``n``.

    Returns ``n`` floats. The last factor needs no twiddles. Every other
    stage fills ``ip - 1`` blocks of ``ido`` entries with (cos, sin) pairs.
    """
    _check_length(n)
    base = 2.0 * math.pi / n
    table = [0.0] * n
    offset = 0
    l1 = 1
    for ip in list(factors)[:-1]:
        l2 = l1 * ip
        ido = n // l2
        for j in range(1, ip):
            argld = j * l1 * base
            values = [
                part
                for fi in range(1, (ido - 1) // 2 + 1)
                for part in (math.cos(fi * argld), math.sin(fi * argld))
            ]
            table[offset : offset + len(values)] = values
            offset += ido
        l1 = l2
    return table