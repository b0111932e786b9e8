import pytest

from mcuframe.analog import CHANNELS, Analog


class FakeADC:
    def __init__(self):
        self.buffer = None

    def start(self, buffer):
        self.buffer = buffer


@pytest.fixture
def adc():
    backend = FakeADC()
    Analog.init(backend)
    for channel in range(CHANNELS):
        backend.buffer[channel] = 0
    return backend


def test_init_hands_over_buffer_of_all_channels(adc):
    assert len(adc.buffer) == CHANNELS


def test_raw_reads_buffer(adc):
    adc.buffer[3] = 1234
    assert Analog(3).raw() == 1234


def test_unit_scale_without_offset_returns_raw(adc):
    adc.buffer[1] = 1000
    channel = Analog(1)
    channel.configure_channel(0, 1 << 14)
    assert channel.value() == 1000


def test_double_divider_doubles_value(adc):
    adc.buffer[2] = 700
    channel = Analog(2)
    channel.configure_channel(0, 1 << 14)
    single = channel.value()
    channel.configure_channel(0, 2 << 14)
    assert channel.value() == 2 * single


def test_offset_below_zero_wraps_to_16_bits(adc):
    adc.buffer[0] = 100
    channel = Analog(0)
    channel.configure_channel(101, 1 << 14)
    assert channel.value() == 0xFFFF


def test_unconfigured_value_raises(adc):
    with pytest.raises(RuntimeError):
        Analog(4).value()


def test_invalid_channel():
    with pytest.raises(ValueError):
        Analog(CHANNELS)