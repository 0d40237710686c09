"""Single-stage biquad filter whose cutoff the LFO and envelope can modulate."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

from .mixer import CONTROL_PERIOD

SAMPLE_RATE = 48000
"""Output sample rate in Hz."""

TRIG_TABLE_SIZE = 6283
"""Entries in the sine and cosine tables, one per milliradian of a turn."""

MOD_SCALE = 1343.0 * 20
"""Scale from a modulation value times its amount to a frequency-table index."""

FREQ_OFFSET = 20
"""Value subtracted from a frequency-table entry to get the cutoff offset."""

OUTPUT_LIMIT = 32767
"""Magnitude at which the driven output saturates."""

_TABLE_TWO_PI = 2 * 3.14159
_CUTOFF_TWO_PI = 2 * 3.14156

SIN_TABLE = tuple(math.sin(_TABLE_TWO_PI * i / TRIG_TABLE_SIZE) for i in range(TRIG_TABLE_SIZE))
COS_TABLE = tuple(math.cos(_TABLE_TWO_PI * i / TRIG_TABLE_SIZE) for i in range(TRIG_TABLE_SIZE))


class FilterType(enum.IntEnum):
    """Response of the filter."""

    LPF = 0
    BPF = 1
    HPF = 2


def _lookup(table: Sequence[float], index: int, what: str) -> float:
    if not 0 <= index < len(table):
        raise ValueError(f"{what} index {index} outside table of {len(table)} entries")
    return table[index]


def _coefficients(kind: FilterType, w: float, alpha: float) -> tuple[float, float, float, float, float]:
    """Normalised (b0, b1, b2, a1, a2) for the given angular frequency and alpha."""
    cos_w = _lookup(COS_TABLE, int(w * 1000), "cosine")
    if kind is FilterType.LPF:
        b0 = (1 - cos_w) / 2
        b1 = 1 - cos_w
        b2 = b0
    elif kind is FilterType.BPF:
        b0 = alpha
        b1 = 0.0
        b2 = -alpha
    else:
        b0 = (1 + cos_w) / 2
        b1 = -(1 + cos_w)
        b2 = b0
    a0 = 1 + alpha
    a1 = -2 * cos_w
    a2 = 1 - alpha
    return b0 / a0, b1 / a0, b2 / a0, a1 / a0, a2 / a0


class BiquadFilter:
    """A biquad filter with distortion drive and saturation.

    ``freq_table`` maps a scaled modulation value to a frequency; its entry
    minus ``FREQ_OFFSET`` is added to the cutoff. The filter keeps its
    history between calls to :meth:`process`.
    """

    def __init__(self, freq_table: Sequence[float]) -> None:
        self.freq_table = list(freq_table)
        self.reset()

    def reset(self) -> None:
        """Clear the input and output history."""
        self._x1 = 0.0
        self._x2 = 0.0
        self._y1 = 0.0
        self._y2 = 0.0

    def _offset(self, value: float, amount: float) -> int:
        entry = _lookup(self.freq_table, int(value * amount * MOD_SCALE), "frequency")
        return int(entry - FREQ_OFFSET)

    def _omega(self, cutoff: int, lfo: float, lfo_amount: float, env: float, env_amount: float) -> float:
        shift = self._offset(lfo, lfo_amount) + self._offset(env, env_amount)
        return _CUTOFF_TWO_PI * (cutoff + shift) / SAMPLE_RATE

    def process(
        self,
        samples: Sequence[int],
        cutoff: int,
        q: float,
        lfo: Sequence[float],
        lfo_amount: float,
        envelope: Sequence[float],
        envelope_amount: float,
        drive: float,
        filter_type: FilterType | int,
    ) -> list[int]:
        """Filter a block of samples and return the driven, saturated output."""
        frames = len(samples)
        if len(lfo) != frames or len(envelope) != frames:
            raise ValueError("samples, lfo and envelope must have the same length")
        if q == 0:
            raise ValueError("q must be non-zero")
        kind = FilterType(filter_type)
        if frames == 0:
            return []

        w = self._omega(cutoff, lfo[0], lfo_amount, envelope[0], envelope_amount)
        b0, b1, b2, a1, a2 = _coefficients(kind, w, math.sin(w) / (2 * q))
        modulated = lfo_amount != 0 or envelope_amount != 0

        out: list[int] = []
        for frame, x in enumerate(samples):
            if modulated and frame % CONTROL_PERIOD == 0:
                w = self._omega(cutoff, lfo[frame], lfo_amount, envelope[frame], envelope_amount)
                alpha = _lookup(SIN_TABLE, int(w / (2 * q) * 1000), "sine")
                b0, b1, b2, a1, a2 = _coefficients(kind, w, alpha)

            y = b0 * x + b1 * self._x1 + b2 * self._x2 - a1 * self._y1 - a2 * self._y2
            self._x2, self._x1 = self._x1, float(x)
            self._y2, self._y1 = self._y1, y
            driven = max(-OUTPUT_LIMIT, min(OUTPUT_LIMIT, y * drive))
            out.append(int(driven))
        return out