"""Modbus RTU slave answering read-holding and write-single requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

from mcuframe.crc16 import crc16

MAX_REGISTERS = 125
_HEADER_SIZE = 6


class ModbusFunction(IntEnum):
    """Function codes a handler can be bound to."""

    FUNC_3 = 0x03
    FUNC_4 = 0x04
    FUNC_6 = 0x06
    FUNC_10 = 0x10


@dataclass
class ModbusFrame:
    """A decoded request; handlers fill ``registers`` or act on the fields."""

    function: int
    address: int
    size: int
    registers: list[int] = field(default_factory=lambda: [0] * MAX_REGISTERS)


FrameHandler = Callable[[ModbusFrame], None]


class Modbus:
    """Decodes requests for its slave id and builds the replies."""

    def __init__(self, slave_id=None):
        self._slave_id = slave_id
        self._handlers: dict[ModbusFunction, FrameHandler] = {}

    @property
    def slave_id(self):
        return self._slave_id

    def bind_function(self, function, handler):
        """Use ``handler`` for requests with function code ``function``."""
        self._handlers[ModbusFunction(function)] = handler

    def _handler(self, function: ModbusFunction) -> FrameHandler:
        try:
            return self._handlers[function]
        except KeyError:
            raise LookupError(f"no handler bound for {function.name}") from None

    def receive(self, data, respond=None):
        """Answer a request addressed to this slave.

        The reply, CRC included, is passed to ``respond`` and returned.
        Requests for another slave or with an unsupported function get
        no reply and return ``None``.
        """
        data = bytes(data)
        if len(data) < _HEADER_SIZE:
            raise ValueError(f"frame too short: {len(data)} bytes")
        if self._slave_id is None:
            raise RuntimeError("slave id not set")
        if data[0] != self._slave_id:
            return None
        frame = ModbusFrame(
            function=data[1],
            address=(data[2] << 8) | data[3],
            size=(data[4] << 8) | data[5],
        )
        response = bytearray((self._slave_id & 0xFF, frame.function))

        if frame.function == ModbusFunction.FUNC_3:
            if frame.size > MAX_REGISTERS:
                raise ValueError(f"too many registers requested: {frame.size}")
            self._handler(ModbusFunction.FUNC_3)(frame)
            registers = frame.registers[: frame.size]
            if len(registers) < frame.size:
                raise ValueError("handler supplied too few registers")
            response.append((frame.size * 2) & 0xFF)
            for register in registers:
                response += (register & 0xFFFF).to_bytes(2, "big")
        elif frame.function == ModbusFunction.FUNC_6:
            self._handler(ModbusFunction.FUNC_6)(frame)
            response += (frame.address & 0xFFFF).to_bytes(2, "big")
            response += (frame.size & 0xFFFF).to_bytes(2, "big")
        else:
            return None

        response += crc16(bytes(response)).to_bytes(2, "little")
        reply = bytes(response)
        if respond is not None:
            respond(reply)
        return reply


class ModbusSlave(Modbus):
    """A Modbus endpoint whose slave id can be changed."""

    def set_id(self, slave_id):
        """Answer requests addressed to ``slave_id`` from now on."""
        self._slave_id = slave_id