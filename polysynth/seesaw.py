"""Register access to seesaw I2C peripherals such as rotary encoder boards."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

_T = TypeVar("_T")

ATTEMPTS = 2
"""Tries made for every transfer before a bus error is passed on."""


def _check_byte(value: int, what: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{what} must fit in one byte: {value}")
    return value


def register_address(module: int, function: int) -> int:
    """The 16-bit register address of a seesaw module base and function."""
    _check_byte(module, "module base")
    _check_byte(function, "module function")
    return (module << 8) + function


class I2CBus:
    """An I2C bus of register-addressed devices, held in memory.

    Writes store bytes under a device address and register; reads return
    what was stored, zero-padded to the requested length. Subclasses that
    reach real devices override the two register methods and raise
    ``OSError`` when a transfer fails.
    """

    def __init__(self) -> None:
        self.registers: dict[tuple[int, int], bytes] = {}

    def write_register(self, address: int, register: int, data: bytes) -> None:
        """Write ``data`` to a 16-bit register of the device at ``address``."""
        self.registers[(address, register)] = bytes(data)

    def read_register(self, address: int, register: int, length: int) -> bytes:
        """Read ``length`` bytes from a 16-bit register of the device at ``address``."""
        stored = self.registers.get((address, register), b"")
        return stored[:length].ljust(length, b"\x00")


class Seesaw:
    """One seesaw device on a bus, addressed by module base and function."""

    def __init__(self, bus: I2CBus, address: int) -> None:
        if not 0 <= address <= 0x7F:
            raise ValueError(f"I2C address must be 7-bit: {address:#x}")
        self.bus = bus
        self.address = address

    def _attempt(self, transfer: Callable[[], _T]) -> _T:
        for remaining in range(ATTEMPTS - 1, -1, -1):
            try:
                return transfer()
            except OSError:
                if remaining == 0:
                    raise
        raise AssertionError("unreachable")

    def write(self, module: int, function: int, data: Iterable[int]) -> None:
        """Write bytes to a module function, retrying once if the bus fails."""
        payload = bytes(_check_byte(b, "data byte") for b in data)
        if len(payload) > 0xFF:
            raise ValueError(f"at most 255 bytes per transfer, got {len(payload)}")
        register = register_address(module, function)
        self._attempt(lambda: self.bus.write_register(self.address, register, payload))

    def read(self, module: int, function: int, length: int) -> bytes:
        """Read bytes from a module function, retrying once if the bus fails."""
        if not 0 <= length <= 0xFF:
            raise ValueError(f"read length must be 0-255: {length}")
        register = register_address(module, function)
        return self._attempt(lambda: self.bus.read_register(self.address, register, length))