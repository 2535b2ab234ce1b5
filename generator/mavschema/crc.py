"""
CRC_EXTRA: the per-message checksum MAVLink uses to detect definition
mismatches between endpoints.
"""
from typing import Iterable, List, Union

from .models import FieldDef
from .wire_types import WireTypes

X25_SEED = 0xFFFF


class X25CRC:
    """x25 CRC - based on checksum.h from the MAVLink C library."""

    def __init__(self, buf: Union[bytes, str] = b""):
        self.crc = X25_SEED
        self.accumulate(buf)

    def accumulate(self, buf: Union[bytes, str]) -> "X25CRC":
        """Add in some more bytes. Text is encoded as ASCII."""
        if isinstance(buf, str):
            buf = buf.encode("ascii")
        accum = self.crc
        for b in buf:
            tmp = (b ^ accum) & 0xFF
            tmp = (tmp ^ (tmp << 4)) & 0xFF
            accum = (accum >> 8) ^ (tmp << 8) ^ (tmp << 3) ^ (tmp >> 4)
            accum &= 0xFFFF
        self.crc = accum
        return self


def crc_field_order(fields: Iterable[FieldDef]) -> List[FieldDef]:
    """
    Base fields in wire order: largest element size first.

    sorted() is stable, so fields of equal size keep their declaration order.
    """
    base = [field for field in fields if not field.is_extension]
    return sorted(base, key=lambda field: field.element_size, reverse=True)


def crc_extra(source_name: str, fields: Iterable[FieldDef]) -> int:
    """
    Calculate the 8-bit CRC_EXTRA of a message.

    Args:
        source_name: Declared message name (e.g., "HEARTBEAT")
        fields: Message fields; extension fields are ignored

    Array lengths are added as a single byte, so only the low 8 bits count.

    Returns:
        Value in range 0-255
    """
    crc = X25CRC(source_name + " ")
    for field in crc_field_order(fields):
        crc.accumulate(WireTypes.crc_type_name(field.element_type) + " ")
        crc.accumulate(field.source_name + " ")
        if field.array_length is not None:
            crc.accumulate(bytes([field.array_length & 0xFF]))
    return (crc.crc & 0xFF) ^ (crc.crc >> 8)
