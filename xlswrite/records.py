"""Workbook-global BIFF8 records and the record framing they share."""

import struct
from dataclasses import dataclass
from itertools import chain, repeat

from xlswrite.packing import ONE_U16, ZERO_U16, ascii_string_pack, ascii_string_pack2

BOF_BOOK_GLOBAL = 0x0005
BOF_VB_MODULE = 0x0006
BOF_WORKSHEET = 0x0010
BOF_CHART = 0x0020
BOF_MACROSHEET = 0x0040
BOF_WORKSPACE = 0x0100

CONTINUE_RECORD_ID = 0x003C
MAX_RECORD_DATA = 0x2020
FIRST_USER_DEFINED_NUM_FORMAT_IDX = 164
WRITE_ACCESS_LENGTH = 0x70

_WINDOW1_DATA = bytes(
    [
        0xE0, 0x01, 0x5A, 0x00, 0xCF, 0x3F, 0x4E, 0x2A, 0x38,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0x00, 0x58, 0x02,
    ]
)


@dataclass(frozen=True)
class BiffRecord:
    """A single BIFF record: an id and its payload."""

    rec_id: int
    data: bytes = b""

    def header(self):
        """Return the 4-byte record header (id, payload length)."""
        return struct.pack("<HH", self.rec_id, len(self.data) & 0xFFFF)

    def get(self):
        """Return the framed record, split into CONTINUE records when too long."""
        data = self.data
        if len(data) <= MAX_RECORD_DATA:
            return self.header() + data
        chunks = [data[pos:pos + MAX_RECORD_DATA] for pos in range(0, len(data), MAX_RECORD_DATA)]
        ids = chain([self.rec_id], repeat(CONTINUE_RECORD_ID))
        return b"".join(struct.pack("<HH", rid, len(chunk)) + chunk for rid, chunk in zip(ids, chunks))


def _record(rec_id, fmt="", *values):
    return BiffRecord(rec_id, struct.pack("<" + fmt, *values) if fmt else b"").get()


def single_h_record(rec_id, value):
    return _record(rec_id, "H", value)


def biff8_bof_record(rec_type):
    return _record(0x0809, "HHHHII", 0x0600, rec_type, 0x0DBB, 0x07CC, 0x00, 0x06)


def interface_hdr_record():
    return BiffRecord(0x00E1, b"\xB0\x04").get()


def interface_end_record():
    return BiffRecord(0x00E2).get()


def mms_record():
    return BiffRecord(0x00C1, ZERO_U16).get()


def codepage_biff8_record():
    return _record(0x0042, "H", 0x04B0)


def dsf_record():
    return BiffRecord(0x0161, ZERO_U16).get()


def tab_id_record(sheet_count):
    return BiffRecord(0x013D, b"".join(struct.pack("<H", i) for i in range(1, sheet_count + 1))).get()


def fn_group_count_record():
    return _record(0x009C, "BB", 0x0E, 0x00)


def window_protect_record(wndprotect):
    return _record(0x0019, "H", wndprotect)


def protect_record(protect):
    return _record(0x0012, "H", protect)


def object_protect_record(objprotect):
    return _record(0x0063, "H", objprotect)


def password_record(password):
    """Password protection is not supported; an empty hash is always written."""
    return BiffRecord(0x0013, ZERO_U16).get()


def prot4rev_record():
    return BiffRecord(0x01AF, ZERO_U16).get()


def prot4rev_pass_record():
    return BiffRecord(0x01BC, ZERO_U16).get()


def backup_record(backup):
    """Backup on save is not supported; the flag is always written off."""
    return BiffRecord(0x0040, ZERO_U16).get()


def hide_obj_record():
    return BiffRecord(0x008D, ZERO_U16).get()


def window1_record():
    return BiffRecord(0x003D, _WINDOW1_DATA).get()


def date_mode_record(from1904):
    return _record(0x0022, "H", 1 if from1904 else 0)


def precision_record(use_real_values):
    return _record(0x000E, "H", 1 if use_real_values else 0)


def refresh_all_record():
    return BiffRecord(0x01B7, ZERO_U16).get()


def book_bool_record():
    return BiffRecord(0x00DA, ZERO_U16).get()


def palette_record():
    """Custom palettes are not written."""
    return b""


def use_selfs_record():
    return BiffRecord(0x0160, ONE_U16).get()


def bound_sheet_record(stream_pos, visibility, sheet):
    data = struct.pack("<LBB", stream_pos, visibility, 0) + ascii_string_pack(sheet)
    return BiffRecord(0x0085, data).get()


def eof_record():
    return BiffRecord(0x000A).get()


def write_access_record(owner):
    if isinstance(owner, str):
        owner = owner.encode("utf-8")
    if len(owner) > WRITE_ACCESS_LENGTH:
        raise ValueError(f"owner name longer than {WRITE_ACCESS_LENGTH} bytes")
    return BiffRecord(0x005C, owner.ljust(WRITE_ACCESS_LENGTH, b" ")).get()


def default_font_record():
    data = struct.pack(
        "<HHHHHBBBB",
        0x00C8,  # height
        0x00,  # options
        0x7FFF,  # colour index
        0x0190,  # weight
        0x00,  # escapement
        0x00,  # underline
        0x00,  # family
        0x01,  # charset
        0x00,  # padding
    ) + ascii_string_pack("Arial")
    return BiffRecord(0x0031, data).get()


def number_format_record(idx, text):
    return BiffRecord(0x041E, struct.pack("<H", idx) + ascii_string_pack2(text)).get()


def _xf_record(font_idx, type_flags, used_attrs):
    return _record(
        0x00E0,
        "HHHBBBBLLH",
        font_idx,
        FIRST_USER_DEFINED_NUM_FORMAT_IDX,
        type_flags,
        2 << 4,  # alignment
        0,  # rotation
        0,  # text properties
        used_attrs,
        0,  # borders
        0,  # borders
        0x20C0,  # pattern
    )


def cell_xf_record(font_idx):
    return _xf_record(font_idx, 1, 0xF8)


def default_cell_xf_record():
    return cell_xf_record(6)


def default_xf_record():
    return _xf_record(6, 0xFFF5, 0xF4)


def style_record():
    return _record(0x0293, "HBB", 0x8000, 0x00, 0xFF)