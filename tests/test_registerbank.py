import pytest

from mcuframe.interfaces import ExternalMemory
from mcuframe.memoryblock import MemoryBlock
from mcuframe.registerbank import RegisterBank


class FakeMemory(ExternalMemory):
    def __init__(self, contents=b""):
        self.cells = bytearray(contents.ljust(64, b"\x00"))
        self.writes = []

    def read_from_memory(self, address, size, callback=None):
        if callback is not None:
            callback(bytes(self.cells[address : address + size]))

    def write_to_memory(self, address, data):
        self.cells[address : address + len(data)] = data
        self.writes.append((address, bytes(data)))


@pytest.fixture(autouse=True)
def clean_registry():
    RegisterBank.forget_all()
    yield
    RegisterBank.forget_all()


def test_new_bank_is_zeroed():
    bank = RegisterBank(10, 4)
    assert bank.read_registers(10, 4) == [0, 0, 0, 0]


def test_value_and_register_round_trip():
    bank = RegisterBank(10, 4)
    bank.set_value(1, 500)
    bank.set_register(13, 77)
    assert bank.get_register(11) == 500
    assert bank.get_value(3) == 77


def test_values_truncated_to_16_bits():
    bank = RegisterBank(0, 2)
    bank.set_value(0, 0x10000 + 7)
    assert bank.get_value(0) == 7


def test_save_writes_little_endian_words():
    memory = FakeMemory()
    bank = RegisterBank(0, 2, MemoryBlock(memory, 4))
    bank.set_value(0, 0x1234)
    assert memory.cells[4:6] == b"\x34\x12"
    assert memory.writes[-1][0] == 4


def test_no_save_without_instant_save():
    memory = FakeMemory()
    bank = RegisterBank(0, 2, MemoryBlock(memory, 0))
    bank.set_value(0, 9, instant_save=False)
    assert memory.writes == []
    bank.save()
    assert len(memory.writes) == 1


def test_load_on_creation():
    memory = FakeMemory(b"\x00\x00\x01\x00\x02\x00")
    bank = RegisterBank(0, 2, MemoryBlock(memory, 2))
    assert [bank.get_value(0), bank.get_value(1)] == [1, 2]


def test_save_then_load_round_trip():
    memory = FakeMemory()
    first = RegisterBank(0, 3, MemoryBlock(memory, 8))
    for i, v in enumerate((11, 22, 33)):
        first.set_value(i, v)
    second = RegisterBank(100, 3, MemoryBlock(memory, 8))
    assert second.read_registers(100, 3) == [11, 22, 33]


def test_find_uses_inclusive_range():
    a = RegisterBank(10, 5)
    b = RegisterBank(100, 10)
    assert RegisterBank.find(12) is a
    assert RegisterBank.find(15) is a
    assert RegisterBank.find(105) is b
    assert RegisterBank.find(50) is None


def test_forget_all_empties_registry():
    RegisterBank(0, 4)
    RegisterBank.forget_all()
    assert RegisterBank.find(1) is None


def test_release_removes_bank():
    bank = RegisterBank(0, 4)
    bank.release()
    assert RegisterBank.find(1) is None
    with pytest.raises(IndexError):
        bank.get_value(0)


def test_read_registers_stops_at_bank_end():
    bank = RegisterBank(10, 3)
    assert len(bank.read_registers(11, 10)) == 2


def test_out_of_range_access_raises():
    bank = RegisterBank(10, 3)
    with pytest.raises(IndexError):
        bank.set_register(9, 1)
    with pytest.raises(IndexError):
        bank.get_value(3)
    with pytest.raises(IndexError):
        bank.read_registers(5, 1)