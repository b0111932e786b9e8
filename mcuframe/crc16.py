"""CRC-16 (Modbus) and BCD conversions."""

from __future__ import annotations


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ 0xA001 if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc16(data):
    """CRC-16 with reflected polynomial 0xA001 and initial value 0xFFFF."""
    crc = 0xFFFF
    for byte in bytes(data):
        crc = (crc >> 8) ^ _TABLE[(byte ^ crc) & 0xFF]
    return crc


def _check_byte(val: int) -> None:
    if not 0 <= val <= 0xFF:
        raise ValueError(f"value does not fit in a byte: {val}")


def bcd_to_dec(val):
    """Convert a packed BCD byte to its decimal value."""
    _check_byte(val)
    return (val // 16 * 10 + val % 16) & 0xFF


def dec_to_bcd(val):
    """Convert a decimal value to a packed BCD byte."""
    _check_byte(val)
    return (val // 10 * 16 + val % 10) & 0xFF