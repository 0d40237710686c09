"""Summing of the synthesiser voices with envelope and LFO amplitude modulation."""

from __future__ import annotations

from collections.abc import Sequence

INT16_MAX = 32767
INT16_MIN = -32768

CONTROL_PERIOD = 11
"""Frames between recomputations of the modulation scale factors."""


def _to_int16(value: float) -> int:
    return max(INT16_MIN, min(INT16_MAX, int(value)))


def mix_voices(
    voices: Sequence[Sequence[int]],
    envelopes: Sequence[Sequence[float]],
    envelope_amount: float,
    lfo: Sequence[float],
    lfo_amount: float,
) -> list[int]:
    """Add the voices together, each scaled by its envelope, then by the LFO.

    A voice sample of zero repeats the voice's previous scaled sample. The
    scale factors are refreshed every ``CONTROL_PERIOD`` frames, and only
    when some modulation amount is non-zero.
    """
    voices = [list(v) for v in voices]
    envelopes = [list(e) for e in envelopes]
    if len(voices) != len(envelopes):
        raise ValueError("each voice needs exactly one envelope")
    frames = len(lfo)
    if any(len(s) != frames for s in (*voices, *envelopes)):
        raise ValueError("voices, envelopes and lfo must have the same length")

    modulated = envelope_amount != 0 or lfo_amount != 0
    scales = [1.0] * len(voices)
    lfo_scale = 1.0
    held = [0] * len(voices)
    out: list[int] = []

    for frame, lfo_value in enumerate(lfo):
        if modulated and frame % CONTROL_PERIOD == 0:
            scales = [1.0 - (1.0 - env[frame]) * envelope_amount for env in envelopes]
            lfo_scale = 1.0 - (1.0 - lfo_value) * lfo_amount
        held = [
            _to_int16(voice[frame] * scale) if voice[frame] != 0 else previous
            for voice, scale, previous in zip(voices, scales, held)
        ]
        out.append(_to_int16(sum(held) * lfo_scale))
    return out