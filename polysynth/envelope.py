"""Per-voice ADSR amplitude envelope rendered one audio block at a time."""

from __future__ import annotations

import enum
import math

SAMPLES_PER_MS = 48
"""Samples per millisecond at the 48 kHz output rate."""

BLOCK_FRAMES = 512
"""Frames produced by one call to :meth:`Envelope.render`."""


class Stage(enum.Enum):
    """Phase of an envelope."""

    ATTACK = enum.auto()
    DECAY = enum.auto()
    SUSTAIN = enum.auto()
    RELEASE = enum.auto()


def _per_sample(amount: float, samples: int) -> float:
    """Increment that covers ``amount`` in ``samples`` steps; a zero span is instant."""
    if samples == 0:
        return math.inf if amount >= 0 else -math.inf
    return amount / samples


class Envelope:
    """An attack/decay/sustain/release envelope with values between 0 and 1.

    ``trigger`` and ``release`` only mark a request; it takes effect on the
    first frame of the next rendered block, a trigger before a release.
    """

    def __init__(self, block_frames: int = BLOCK_FRAMES) -> None:
        self.block_frames = block_frames
        self.reset()

    def reset(self) -> None:
        """Return to silence, idle in the release stage with nothing pending."""
        self.value = 0.0
        self.stage = Stage.RELEASE
        self._trigger_pending = False
        self._release_pending = False
        self._release_remaining = 0

    def trigger(self) -> None:
        """Start the attack stage on the next rendered frame."""
        self._trigger_pending = True

    def release(self) -> None:
        """Start the release stage on the next rendered frame."""
        self._release_pending = True

    def render(self, attack: int, decay: int, sustain: float, release: int) -> list[float]:
        """Produce one block of envelope values.

        ``attack``, ``decay`` and ``release`` are durations in milliseconds,
        ``sustain`` is the level held after the decay.
        """
        attack_step = _per_sample(1.0, SAMPLES_PER_MS * attack)
        decay_step = _per_sample(1.0 - sustain, SAMPLES_PER_MS * decay)
        release_total = SAMPLES_PER_MS * release

        release_step = 0.0
        if self.stage is Stage.RELEASE and self._release_remaining != 0:
            release_step = self.value / self._release_remaining

        out: list[float] = []
        for _ in range(self.block_frames):
            if self._trigger_pending:
                self.stage = Stage.ATTACK
                self._trigger_pending = False
            elif self._release_pending:
                self.stage = Stage.RELEASE
                self._release_remaining = release_total
                release_step = _per_sample(self.value, release_total)
                self._release_pending = False

            out.append(self.value)

            if self.stage is Stage.ATTACK:
                self.value += attack_step
                if self.value > 1.0:
                    self.value = 1.0
                    self.stage = Stage.DECAY
            elif self.stage is Stage.DECAY:
                self.value -= decay_step
                if self.value < sustain:
                    self.value = sustain
                    self.stage = Stage.SUSTAIN
            elif self.stage is Stage.RELEASE:
                self.value -= release_step
                if self._release_remaining > 0:
                    self._release_remaining -= 1
                if self.value < 0:
                    self.value = 0.0
        return out