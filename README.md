# pfdsp

A small digital signal processing toolkit in pure Python, with no
third-party dependencies.

## Contents

- `pfdsp.cfft.ComplexFFT(n)`: complex discrete Fourier transform of length
  `n`. `forward(values)` computes `sum_k c[k] * exp(-2j*pi*j*k/n)` and
  `backward(values)` computes the same sum with a positive exponent. Neither
  is normalised: forward followed by backward multiplies the input by `n`.
- `pfdsp.transforms`:
  - `RealFFT(n)`: `forward` returns the packed spectrum
    `[X0.re, X1.re, X1.im, X2.re, X2.im, ..., (X[n/2].re if n is even)]`,
    and `backward` turns such a spectrum back into a sequence. Forward then
    backward multiplies the input by `n`.
  - `CosineTransform(n).transform(values)`: cosine transform of an even
    sequence. Applying it twice multiplies the input by `2 * (n - 1)`.
  - `SineTransform(n).transform(values)`: sine transform of an odd sequence.
    Applying it twice multiplies the input by `2 * (n + 1)`.
  - `QuarterCosineTransform(n)` and `QuarterSineTransform(n)`: quarter-wave
    transforms with odd wave numbers. Each has `forward` and `backward`. The
    pair, in either order, multiplies the input by `4 * n`.
- `pfdsp.rfft_forward.real_forward(data, n, factors, twiddles)` and
  `pfdsp.rfft_backward.real_backward(data, n, factors, twiddles)`: the
  mixed-radix real transforms that `RealFFT` is built on.
- `pfdsp.factors`:
  - `factorize(n, trial_divisors)` splits a length into the radices the
    transform passes use.
  - `complex_twiddles(n, factors)` and `real_twiddles(n, factors)` build the
    twiddle tables.
  - `COMPLEX_TRIAL_DIVISORS` and `REAL_TRIAL_DIVISORS` hold the trial
    divisor orders.
- `pfdsp.cic.CicDdc(factor)`: a digital down-converter built on a
  third-order CIC decimator.
  - It mixes the input with a table-driven oscillator. The oscillator's
    frequency is `rate`, given in cycles per input sample.
  - It then decimates by `factor`. The output is scaled to compensate for the
    integrator gain.
  - `process_s16` takes real 16-bit samples. `process_cs16` takes interleaved
    complex 16-bit samples. `process_cu8` takes interleaved complex unsigned
    8-bit samples.
  - Each returns a list of `outsize` complex values.
  - Filter and oscillator state carries over between calls, so you can feed a
    stream in pieces.

All transforms accept any length `n >= 1`. They are fastest when `n` factors
into 2, 3, 4 and 5. Every method returns a new list and leaves its argument
untouched. Lengths that do not match raise `ValueError`.

## Installation

```
pip install .
```

## Usage

```python
from pfdsp.cfft import ComplexFFT
from pfdsp.transforms import RealFFT, CosineTransform

fft = ComplexFFT(8)
spectrum = fft.forward([complex(k, 0) for k in range(8)])
restored = [v / 8 for v in fft.backward(spectrum)]

rfft = RealFFT(6)
coeffs = rfft.forward([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])

dct = CosineTransform(5)
twice = dct.transform(dct.transform([1.0, 0.5, 0.25, 0.0, -1.0]))  # scaled by 2*(n-1)
```

Down-conversion:

```python
from pfdsp.cic import CicDdc

ddc = CicDdc(4)
iq = ddc.process_s16([0] * 40, outsize=10, rate=0.25)   # list of 10 complex samples
```

## What it does not do

- It is a library only. There is no command-line tool, and it does not read
  or write sample files or audio devices.
- It does not include carrier or test-tone generators.
- It is written for clarity and exact behaviour, not speed. Large transforms
  are much slower than in compiled FFT libraries.

## Tests

```
pip install .[test]
pytest
```