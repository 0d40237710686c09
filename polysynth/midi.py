"""Byte-stream MIDI parser with running status and channel filtering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_COMMAND_LENGTH = 3


def message_length(status: int) -> int | None:
    """Number of data bytes that follow ``status``, or None if unsupported."""
    if not 0x80 <= status <= 0xFF:
        raise ValueError(f"not a MIDI status byte: {status:#x}")
    kind = status >> 4
    if kind in (0x8, 0x9, 0xA, 0xB, 0xE):
        return 2
    if kind in (0xC, 0xD):
        return 1
    if status in (0xF1, 0xF3):
        return 1
    if status == 0xF2:
        return 2
    return None


@dataclass
class MidiHandler:
    """Receiver of parsed MIDI messages; this base class counts what arrives."""

    note_ons: int = 0
    note_offs: int = 0
    control_changes: int = 0
    pitch_bends: int = 0
    system_resets: int = 0

    def note_on(self, note: int, velocity: int) -> None:
        self.note_ons += 1

    def note_off(self, note: int, velocity: int) -> None:
        self.note_offs += 1

    def control_change(self, control: int, value: int) -> None:
        self.control_changes += 1

    def pitch_bend(self, lsb: int, msb: int) -> None:
        self.pitch_bends += 1

    def system_reset(self) -> None:
        self.system_resets += 1


class MidiParser:
    """Turns incoming MIDI bytes into calls on a handler.

    ``channel`` selects a single channel (0-15); None listens to all.
    """

    def __init__(self, handler: MidiHandler, channel: int | None = None) -> None:
        if channel is not None and not 0 <= channel <= 15:
            raise ValueError(f"MIDI channel out of range: {channel}")
        self.handler = handler
        self.channel = channel
        self.reset()

    def reset(self) -> None:
        """Forget any partial message and the running status."""
        self._position = 0
        self._expected: int | None = None
        self._command = [0] * _COMMAND_LENGTH

    def feed(self, data: Iterable[int]) -> None:
        """Consume bytes, dispatching every message they complete."""
        for byte in data:
            if not 0 <= byte <= 0xFF:
                raise ValueError(f"not a byte: {byte}")
            if byte == 0xFF:
                self._position = 0
                self._expected = None
                self.handler.system_reset()
            elif byte >= 0x80:
                self._position = 0
                self._expected = message_length(byte)
            else:
                self._position += 1
            if self._position < _COMMAND_LENGTH:
                self._command[self._position] = byte
            if self._expected is not None and self._position >= self._expected:
                self._dispatch()

    def _dispatch(self) -> None:
        status, first, second = self._command
        if self.channel is not None and status & 0xF != self.channel:
            return
        kind = status >> 4
        if kind == 0x8:
            self.handler.note_off(first, second)
        elif kind == 0x9:
            if second == 0:
                self.handler.note_off(first, 0)
            else:
                self.handler.note_on(first, second)
        elif kind == 0xB:
            self.handler.control_change(first, second)
        elif kind == 0xE:
            self.handler.pitch_bend(first, second)
        else:
            return
        self._position = 0