import pytest

from pfdsp.cic import CicDdc


def test_zero_input_gives_zero_output():
    ddc = CicDdc(4)
    out = ddc.process_s16([0] * 40, 10, 0.1)
    assert out == [0j] * 10


def test_dc_input_settles_to_unit_gain():
    factor = 8
    ddc = CicDdc(factor)
    x = 32767
    out = ddc.process_s16([x] * (factor * 6), 6, 0.0)
    for value in out[3:]:
        assert value.real == pytest.approx(0.0, abs=1e-6)
        assert value.imag == pytest.approx(1.0, rel=1e-3)


def test_output_length_matches_outsize():
    ddc = CicDdc(3)
    assert len(ddc.process_s16(list(range(30)), 7, 0.05)) == 7


def test_split_processing_matches_single_call():
    samples = [((i * 37) % 2001) - 1000 for i in range(5 * 20)]
    whole = CicDdc(5).process_s16(samples, 20, 0.123)
    split = CicDdc(5)
    first = split.process_s16(samples[:40], 8, 0.123)
    second = split.process_s16(samples[40:], 12, 0.123)
    assert first + second == whole


def test_cs16_with_zero_imaginary_matches_s16():
    samples = [((i * 91) % 3001) - 1500 for i in range(4 * 10)]
    interleaved = [v for s in samples for v in (s, 0)]
    real_out = CicDdc(4).process_s16(samples, 10, 0.2)
    cplx_out = CicDdc(4).process_cs16(interleaved, 10, 0.2)
    assert real_out == cplx_out


def test_cu8_matches_centred_cs16():
    raw = [(i * 53) % 256 for i in range(2 * 4 * 6)]
    centred = [(v << 8) - 32614 for v in raw]
    a = CicDdc(4).process_cu8(raw, 6, 0.3)
    b = CicDdc(4).process_cs16(centred, 6, 0.3)
    assert a == b


def test_phase_advances_by_rate():
    ddc = CicDdc(2)
    ddc.process_s16([0] * 8, 4, 0.25)
    # 8 input samples at a quarter turn each wrap to a whole number of turns
    assert ddc.phase == 0


def test_phase_accumulates_between_calls():
    ddc = CicDdc(1)
    ddc.process_s16([0], 1, 0.25)
    assert ddc.phase == 1 << 62


def test_too_few_samples_raises():
    ddc = CicDdc(4)
    with pytest.raises(ValueError):
        ddc.process_s16([1, 2, 3], 1, 0.1)


def test_too_few_complex_samples_raises():
    ddc = CicDdc(2)
    with pytest.raises(ValueError):
        ddc.process_cs16([1, 2, 3], 1, 0.1)


def test_invalid_factor_raises():
    with pytest.raises(ValueError):
        CicDdc(0)


def test_gain_scales_with_factor_cubed():
    g1 = CicDdc(1).gain
    g2 = CicDdc(2).gain
    assert g2 == pytest.approx(g1 / 8, rel=1e-6)