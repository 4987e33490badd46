"""Little-endian string packing and shared binary constants for BIFF8 and OLE2 output."""

import struct

SECTOR_SIZE = 0x0200
MIN_LIMIT = 0x1000

SID_FREE_SECTOR = -1
SID_END_OF_CHAIN = -2
SID_USED_BY_SAT = -3
SID_USED_BY_MSAT = -4

ZERO_U16 = b"\x00\x00"
ONE_U16 = b"\x01\x00"


def u16_string_pack(text):
    """Pack text as a BIFF8 unicode string: u16 unit count, flag 1, UTF-16LE data."""
    encoded = text.encode("utf-16-le", "surrogatepass")
    units = len(encoded) // 2
    return struct.pack("<HB", units & 0xFFFF, 1) + encoded


def ascii_string_pack(text):
    """Pack text as a short string: u8 byte count, flag 0, UTF-8 bytes."""
    raw = text.encode("utf-8")
    return struct.pack("<BB", len(raw) & 0xFF, 0) + raw


def ascii_string_pack2(text):
    """Pack text as a string with a u16 byte count, flag 0, UTF-8 bytes."""
    raw = text.encode("utf-8")
    return struct.pack("<HB", len(raw) & 0xFFFF, 0) + raw