import pytest

from polysynth.seesaw import ATTEMPTS, I2CBus, Seesaw, register_address


class FlakyBus(I2CBus):
    def __init__(self, failures):
        super().__init__()
        self.failures = failures
        self.calls = 0

    def _maybe_fail(self):
        self.calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise OSError("bus busy")

    def write_register(self, address, register, data):
        self._maybe_fail()
        super().write_register(address, register, data)

    def read_register(self, address, register, length):
        self._maybe_fail()
        return super().read_register(address, register, length)


def test_register_address_puts_module_in_high_byte():
    assert register_address(0x0A, 0x00) >> 8 == 0x0A
    assert register_address(0x0A, 0x33) & 0xFF == 0x33


@pytest.mark.parametrize("module,function", [(256, 0), (0, 256), (-1, 0)])
def test_register_address_rejects_out_of_range(module, function):
    with pytest.raises(ValueError):
        register_address(module, function)


def test_write_then_read_round_trip():
    device = Seesaw(I2CBus(), 0x36)
    device.write(0x11, 0x30, [1, 2, 3, 4])
    assert device.read(0x11, 0x30, 4) == bytes([1, 2, 3, 4])


def test_write_stores_under_device_and_register():
    bus = I2CBus()
    Seesaw(bus, 0x37).write(0x0E, 0x01, [9])
    assert bus.registers == {(0x37, register_address(0x0E, 0x01)): b"\x09"}


def test_read_pads_unwritten_register():
    device = Seesaw(I2CBus(), 0x36)
    assert device.read(0x01, 0x01, 3) == bytes(3)


def test_devices_do_not_share_registers():
    bus = I2CBus()
    Seesaw(bus, 0x36).write(0x01, 0x01, [0x55])
    assert Seesaw(bus, 0x37).read(0x01, 0x01, 1) == b"\x00"


def test_single_failure_is_retried():
    bus = FlakyBus(failures=1)
    device = Seesaw(bus, 0x36)
    device.write(0x01, 0x02, [7])
    assert bus.calls == 2
    assert device.read(0x01, 0x02, 1) == b"\x07"


def test_persistent_failure_propagates_after_retries():
    bus = FlakyBus(failures=10)
    with pytest.raises(OSError):
        Seesaw(bus, 0x36).read(0x01, 0x02, 1)
    assert bus.calls == ATTEMPTS


def test_rejects_wide_address():
    with pytest.raises(ValueError):
        Seesaw(I2CBus(), 0x80)


def test_rejects_non_byte_data():
    with pytest.raises(ValueError):
        Seesaw(I2CBus(), 0x36).write(0x01, 0x01, [256])


def test_rejects_bad_read_length():
    with pytest.raises(ValueError):
        Seesaw(I2CBus(), 0x36).read(0x01, 0x01, 300)