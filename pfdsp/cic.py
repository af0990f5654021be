"""Digital down-converter built from a third-order CIC decimator."""

from __future__ import annotations

import math
import struct

SINE_SHIFT = 12
SINE_SIZE = 1 << SINE_SHIFT
_QUARTER = 1 << (SINE_SHIFT - 2)
_SINE_AMP = 32767.0
_SHRT_MAX = 32767
_U64 = 1 << 64
_CU8_OFFSET = 32614


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _wrap64(value: int) -> int:
    value &= _U64 - 1
    return value - _U64 if value >= 1 << 63 else value


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _build_sine_table() -> tuple[int, ...]:
    # 25% extra so the cosine can be read from the same table
    step = 2.0 * math.pi / SINE_SIZE
    return tuple(int(_SINE_AMP * math.cos(step * i)) for i in range(SINE_SIZE * 5 // 4))


_SINE_TABLE = _build_sine_table()


class CicDdc:
    """Mixes input with a numerically controlled oscillator and decimates.

    State is kept between calls, so a stream may be fed in pieces.
    """

    def __init__(self, factor):
        if factor < 1:
            raise ValueError(f"decimation factor must be positive, got {factor}")
        self.factor = factor
        gain = _f32(1.0 / _SHRT_MAX)
        gain = _f32(gain / _SINE_AMP)
        for _ in range(3):  # compensate for the gain of three integrators
            gain = _f32(gain / factor)
        self.gain = gain
        self.phase = 0
        self._integrators = [0, 0, 0, 0]  # ig0a, ig0b, ig1a, ig1b
        self._combs = [0, 0, 0, 0]  # comb0a, comb0b, comb1a, comb1b

    @staticmethod
    def _frequency(rate: float) -> int:
        return int(_f32(rate) * float(_U64)) % _U64

    def _run(self, mixed_pairs, outsize: int, freq: int) -> list[complex]:
        """Integrate and comb the mixer products; ``mixed_pairs`` is called per input."""
        factor = self.factor
        ig0a, ig0b, ig1a, ig1b = self._integrators
        comb0a, comb0b, comb1a, comb1b = self._combs
        phase = self.phase
        gain = self.gain
        shift = 64 - SINE_SHIFT
        output = []
        index = 0
        for _ in range(outsize):
            ig2a = ig2b = 0  # last integrator and first comb replaced by a sum
            for _ in range(factor):
                sinep = phase >> shift
                cos_v = _SINE_TABLE[sinep + _QUARTER]
                sin_v = _SINE_TABLE[sinep]
                in_a, in_b = mixed_pairs(index, cos_v, sin_v)
                index += 1
                phase = (phase + freq) % _U64
                ig2a = _wrap64(ig2a + ig1a)
                ig2b = _wrap64(ig2b + ig1b)
                ig1a = _wrap64(ig1a + ig0a)
                ig1b = _wrap64(ig1b + ig0b)
                ig0a = _wrap64(ig0a + in_a)
                ig0b = _wrap64(ig0b + in_b)
            out0a = _wrap64(ig2a - comb0a)
            out0b = _wrap64(ig2b - comb0b)
            comb0a, comb0b = ig2a, ig2b
            out1a = _wrap64(out0a - comb1a)
            out1b = _wrap64(out0b - comb1b)
            comb1a, comb1b = out0a, out0b
            output.append(
                complex(_f32(_f32(float(out1a)) * gain), _f32(_f32(float(out1b)) * gain))
            )
        self._integrators = [ig0a, ig0b, ig1a, ig1b]
        self._combs = [comb0a, comb0b, comb1a, comb1b]
        self.phase = phase
        return output

    def _check_length(self, samples, outsize: int, per_input: int) -> None:
        if outsize < 0:
            raise ValueError(f"outsize must not be negative, got {outsize}")
        needed = outsize * self.factor * per_input
        if len(samples) < needed:
            raise ValueError(f"need {needed} input values, got {len(samples)}")

    def process_s16(self, samples, outsize, rate):
        """Down-convert real 16-bit samples; returns ``outsize`` complex values."""
        self._check_length(samples, outsize, 1)

        def mix(index, cos_v, sin_v):
            x = samples[index]
            return _wrap32(x * cos_v), _wrap32(x * sin_v)

        return self._run(mix, outsize, self._frequency(rate))

    def _process_complex(self, values, outsize, rate):
        def mix(index, cos_v, sin_v):
            a = values[2 * index]
            b = values[2 * index + 1]
            return _wrap32(a * cos_v - b * sin_v), _wrap32(a * sin_v + b * cos_v)

        return self._run(mix, outsize, self._frequency(rate))

    def process_cs16(self, samples, outsize, rate):
        """Down-convert interleaved complex 16-bit samples."""
        self._check_length(samples, outsize, 2)
        return self._process_complex(samples, outsize, rate)

    def process_cu8(self, samples, outsize, rate):
        """Down-convert interleaved complex unsigned 8-bit samples."""
        self._check_length(samples, outsize, 2)
        # subtract about 127.4 to centre the unsigned samples
        centred = [(int(v) << 8) - _CU8_OFFSET for v in samples[: 2 * outsize * self.factor]]
        return self._process_complex(centred, outsize, rate)