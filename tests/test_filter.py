import pytest

from polysynth.filter import FREQ_OFFSET, OUTPUT_LIMIT, BiquadFilter, FilterType

FRAMES = 512
TABLE_LEN = 1344 * 20


def flat_table():
    return [FREQ_OFFSET] * TABLE_LEN


def run(kind, samples, cutoff=1000, q=0.707, drive=1.0, table=None, env=None, env_amount=0.0):
    filt = BiquadFilter(table if table is not None else flat_table())
    frames = len(samples)
    return filt.process(
        samples,
        cutoff,
        q,
        [0.0] * frames,
        0.0,
        env if env is not None else [0.0] * frames,
        env_amount,
        drive,
        kind,
    )


def test_silence_stays_silent():
    for kind in FilterType:
        assert run(kind, [0] * FRAMES) == [0] * FRAMES


def test_lowpass_passes_dc():
    out = run(FilterType.LPF, [1000] * FRAMES)
    assert abs(out[-1] - 1000) <= 2


@pytest.mark.parametrize("kind", [FilterType.HPF, FilterType.BPF])
def test_highpass_and_bandpass_block_dc(kind):
    out = run(kind, [1000] * FRAMES)
    assert abs(out[-1]) <= 5


def test_output_saturates_symmetrically():
    high = run(FilterType.LPF, [30000] * FRAMES, drive=10.0)
    low = run(FilterType.LPF, [-30000] * FRAMES, drive=10.0)
    assert max(high) == OUTPUT_LIMIT
    assert min(low) == -OUTPUT_LIMIT


def test_drive_scales_output():
    plain = run(FilterType.LPF, [1000] * FRAMES, drive=1.0)
    doubled = run(FilterType.LPF, [1000] * FRAMES, drive=2.0)
    assert abs(doubled[-1] - 2 * plain[-1]) <= 2


def test_integer_filter_type_matches_enum():
    samples = [(i % 50) * 100 for i in range(FRAMES)]
    assert run(2, samples) == run(FilterType.HPF, samples)


def test_unknown_filter_type_rejected():
    with pytest.raises(ValueError):
        run(7, [0] * FRAMES)


def test_length_mismatch_rejected():
    filt = BiquadFilter(flat_table())
    with pytest.raises(ValueError):
        filt.process([0] * 10, 1000, 1.0, [0.0] * 9, 0.0, [0.0] * 10, 0.0, 1.0, FilterType.LPF)


def test_zero_q_rejected():
    with pytest.raises(ValueError):
        run(FilterType.LPF, [0] * 8, q=0)


def test_modulation_outside_table_rejected():
    filt = BiquadFilter([FREQ_OFFSET] * 10)
    with pytest.raises(ValueError):
        filt.process([0] * 8, 1000, 1.0, [1.0] * 8, 1.0, [0.0] * 8, 0.0, 1.0, FilterType.LPF)


def test_cutoff_beyond_table_rejected():
    with pytest.raises(ValueError):
        run(FilterType.LPF, [0] * 8, cutoff=60000)


def test_envelope_modulation_opens_lowpass():
    table = [FREQ_OFFSET + i for i in range(TABLE_LEN)]
    pattern = [1000, 0, -1000, 0] * (FRAMES // 4)
    env = [0.5] * FRAMES
    closed = run(FilterType.LPF, pattern, cutoff=200, table=table)
    opened = run(FilterType.LPF, pattern, cutoff=200, table=table, env=env, env_amount=1.0)
    assert max(abs(v) for v in closed[-100:]) < 50
    assert max(abs(v) for v in opened[-100:]) > 500