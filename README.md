# mcuframe

mcuframe collects building blocks for microcontroller-style applications
written in Python. Your code supplies the hardware through small backend
objects. That can be real bindings, a simulator, or a fake in tests. The
package itself never touches a device.

## What is in the package

| Module | Contents |
| --- | --- |
| `mcuframe.bits` | flag helpers (`flag_set`, `flag_clear`, `flag_is`, `flag_mask`, `xor`) and bit-array helpers (`test_bit`, `set_bit`, `clear_bit`, `toggle_bit`) over 8-, 16- or 32-bit words |
| `mcuframe.crc16` | `crc16` (Modbus CRC-16), `bcd_to_dec`, `dec_to_bcd` |
| `mcuframe.mathutil` | `random_float`, `random_num`, `duration` with `SECONDS` / `MINUTES` |
| `mcuframe.pid` | `PID` controller with `Mode`, `Direction`, `ProportionalOn` |
| `mcuframe.interfaces` | `ExternalMemory` abstract base class, `AddressSize` |
| `mcuframe.memoryblock` | `MemoryBlock`, a fixed region of an `ExternalMemory` |
| `mcuframe.registerbank` | `RegisterBank`, 16-bit registers that can be stored in a `MemoryBlock` |
| `mcuframe.modbus` | `Modbus` / `ModbusSlave` answering function 3 and 6 requests |
| `mcuframe.gpio` | `HardwareGPIO` over a `GPIOBackend`, `PinState`, `Pull`, `HIGH`, `LOW` |
| `mcuframe.tmc2209` | `TMC2209` stepper driver in step/direction mode |
| `mcuframe.analog` | `Analog` channels read from a shared conversion buffer |
| `mcuframe.encoder` | `Encoder` on a `TimerCounter` |
| `mcuframe.pwm` | `PWM` output on a timer channel |
| `mcuframe.timer` | `Timer` and its `TimerConfig` |
| `mcuframe.menu` | `SimpleMenu` tree with `ValueRef` value entries |

## Installation

```
pip install mcuframe
```

The package has no runtime dependencies.

## CRC-16 and BCD

```python
from mcuframe.crc16 import crc16, bcd_to_dec, dec_to_bcd

crc = crc16(bytes([0x01, 0x03, 0x00, 0x00, 0x00, 0x01]))
assert bcd_to_dec(0x42) == 42
assert dec_to_bcd(42) == 0x42
```

## Modbus slave

`receive` decodes a request for its slave id and calls the handler bound to
the function code. It then builds the reply and appends the CRC. The reply is
passed to the `respond` callable and is also returned. A request for another
slave, or one with an unsupported function code, gets `None`.

```python
from mcuframe.modbus import ModbusSlave, ModbusFunction

slave = ModbusSlave(1)

def read_holding(frame):
    frame.registers[: frame.size] = [0x1234] * frame.size

slave.bind_function(ModbusFunction.FUNC_3, read_holding)
reply = slave.receive(bytes([0x01, 0x03, 0x00, 0x00, 0x00, 0x02, 0x00, 0x00]))
```

If no handler is bound for the requested function, `receive` raises
`LookupError`. A frame shorter than six bytes raises `ValueError`.

## PID control

```python
import time
from mcuframe.pid import PID, Mode, Direction, ProportionalOn

def clock():
    return int(time.monotonic() * 1000)

pid = PID(2.0, 5.0, 1.0, ProportionalOn.ERROR, Direction.DIRECT, clock)
pid.input, pid.setpoint = 20.0, 25.0
pid.set_mode(Mode.AUTOMATIC)
if pid.compute():
    print(pid.output)
```

`compute` returns `True` only when the sample time has passed. The sample
time is 100 ms by default. The output is clamped to 0–255 unless you call
`set_output_limits`.

## Memory blocks and register banks

`ExternalMemory` is an abstract class. You implement `read_from_memory` and
`write_to_memory` for your device. A `RegisterBank` with a `MemoryBlock`
loads its registers when it is created. It stores them as little-endian
16-bit words.

```python
from mcuframe.interfaces import ExternalMemory
from mcuframe.memoryblock import MemoryBlock
from mcuframe.registerbank import RegisterBank

class RamMemory(ExternalMemory):
    def __init__(self):
        self.data = bytearray(64)

    def read_from_memory(self, address, size, callback=None):
        if callback is not None:
            callback(bytes(self.data[address : address + size]))

    def write_to_memory(self, address, data):
        self.data[address : address + len(data)] = data

ram = RamMemory()
bank = RegisterBank(0x100, 4, MemoryBlock(ram, 0x10))
bank.set_register(0x101, 0xBEEF)          # saved at once by default
assert ram.data[0x12:0x14] == b"\xef\xbe"
assert RegisterBank.find(0x102) is bank
```

Every bank is entered in a class-wide registry. `RegisterBank.find` searches
it, and the end address of each range counts as inside it.
`RegisterBank.forget_all()` empties the registry.

## GPIO and the stepper driver

Subclass `GPIOBackend` and implement `init_pin`, `write_pin`, `toggle_pin`,
`read_pin` and `output_register`. Pins are bit masks within a 16-bit port.

```python
from mcuframe.gpio import HardwareGPIO, HIGH
from mcuframe.tmc2209 import TMC2209

gpio = HardwareGPIO(my_backend)
motor = TMC2209(
    gpio,
    enable=("A", 1 << 0), step=("A", 1 << 1), direction=("A", 1 << 2),
    ms1=("A", 1 << 3), ms2=("A", 1 << 4), zero=("A", 1 << 5),
)
motor.limit = 2000
motor.on_limit(lambda: print("end of travel"))
motor.step(10)
```

`home()` steps until the zero switch changes state. It then resets the step
count.

## Timers, encoder, PWM and analog inputs

- `Timer(TimerConfig()).setup(period)` sets the prescaler to 9999 and the
  period to `period - 1`.
- `PWM(timer, channel)` calls `timer.start_pwm(channel)`. After that,
  `set(value)` calls `timer.set_compare(channel, value)`.
- `Encoder(TimerCounter())` reads the timer counter as a signed 16-bit value
  and clamps it to `set_limits`. After `attach_interrupt`, each
  `tim_interrupt()` moves the position by one.
- `Analog.init(backend)` hands the shared eight-channel buffer to
  `backend.start(buffer)`. `Analog(channel).raw()` reads one entry of that
  buffer. `value()` returns `raw * divider >> 14` minus the offset, kept to
  16 bits.

## Menus

`SimpleMenu` nodes hold a list of submenus, or a `ValueRef` to edit, or a
function to call, or a list probed through `list_callback(index)`. You drive
them with `up`, `down`, `select`, `back`, `home` and `index`. Drawing is left
to the display and value callbacks that you pass to `begin`.

## What the package does not do

- There is no task scheduler, main loop or tick clock. Time comes from the
  callables you pass in, such as the `clock` of `PID` and the `delay` of
  `TMC2209`.
- There are no bus drivers for I2C, SPI, serial, USB or CAN. Memory access
  goes only through your own `ExternalMemory` implementations.
- There are no concrete EEPROM, FRAM or display drivers.

## Running the tests

```
pip install mcuframe[test]
pytest
```