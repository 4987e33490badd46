import struct

import pytest

from xlswrite import sheet_records as sr
from xlswrite.packing import ascii_string_pack2


def split(record):
    rec_id, length = struct.unpack_from("<HH", record)
    payload = record[4:]
    assert len(payload) == length
    return rec_id, payload


def test_blank_record_layout():
    rec_id, payload = split(sr.blank_record(3, 4, 15))
    assert rec_id == 0x0201
    assert struct.unpack("<HHHH", payload) == (6, 3, 4, 15)


def test_label_sst_record_round_trip():
    rec_id, payload = split(sr.label_sst_record(12, 7, 17, 70000))
    assert rec_id == 0x00FD
    assert struct.unpack("<HHHL", payload) == (12, 7, 17, 70000)


def test_calc_mode_record_is_signed():
    rec_id, payload = split(sr.calc_mode_record(-1))
    assert rec_id == sr.CALC_MODE_ID
    assert struct.unpack("<h", payload) == (-1,)


@pytest.mark.parametrize(
    "func, rec_id",
    [
        (sr.calc_count_record, sr.CALC_COUNT_ID),
        (sr.ref_mode_record, sr.REF_MODE_ID),
        (sr.iteration_record, sr.ITERATION_ID),
        (sr.save_recalc_record, sr.SAVE_RECALC_ID),
        (sr.ws_bool_record, sr.WS_BOOL_ID),
        (sr.scen_protect_record, sr.SCEN_PROTECT_ID),
        (sr.print_headers_record, sr.PRINT_HEADERS_ID),
        (sr.print_grid_lines_record, sr.PRINT_GRID_LINES_ID),
        (sr.grid_set_record, sr.GRID_SET_ID),
        (sr.hcenter_record, sr.HCENTER_ID),
        (sr.vcenter_record, sr.VCENTER_ID),
    ],
)
def test_single_value_records(func, rec_id):
    got_id, payload = split(func(100))
    assert got_id == rec_id
    assert struct.unpack("<H", payload) == (100,)


@pytest.mark.parametrize(
    "func, rec_id",
    [
        (sr.delta_record, sr.DELTA_ID),
        (sr.left_margin_record, sr.LEFT_MARGIN_ID),
        (sr.right_margin_record, sr.RIGHT_MARGIN_ID),
        (sr.top_margin_record, sr.TOP_MARGIN_ID),
        (sr.bottom_margin_record, sr.BOTTOM_MARGIN_ID),
    ],
)
def test_double_records_round_trip(func, rec_id):
    got_id, payload = split(func(0.61))
    assert got_id == rec_id
    assert struct.unpack("<d", payload) == (0.61,)


def test_guts_record_round_trip():
    rec_id, payload = split(sr.guts_record(0, 0, 1, 0))
    assert rec_id == sr.GUTS_ID
    assert struct.unpack("<HHHH", payload) == (0, 0, 1, 0)


def test_default_row_height_record_round_trip():
    rec_id, payload = split(sr.default_row_height_record(0, 0x00FF))
    assert rec_id == sr.DEFAULT_ROW_HEIGHT_ID
    assert struct.unpack("<HH", payload) == (0, 0x00FF)


def test_dimensions_record_used_range():
    rec_id, payload = split(sr.dimensions_record(0, 10, 0, 5))
    assert rec_id == 0x0200
    assert struct.unpack("<LLHHH", payload) == (0, 10, 0, 5, 0)


def test_dimensions_record_empty_sheet():
    _, payload = split(sr.dimensions_record(5, 1, 0, 3))
    assert struct.unpack("<LLHHH", payload) == (0, 0xFFFFFFFF, 0, 0xFFFF, 0)


def test_page_break_records_are_empty_lists():
    for func, rec_id in (
        (sr.horizontal_page_breaks_record, sr.HORIZONTAL_PAGE_BREAKS_ID),
        (sr.vertical_page_breaks_record, sr.VERTICAL_PAGE_BREAKS_ID),
    ):
        got_id, payload = split(func())
        assert got_id == rec_id
        assert struct.unpack("<H", payload) == (0,)


def test_header_and_footer_hold_packed_text():
    rec_id, payload = split(sr.header_record("&P"))
    assert rec_id == sr.HEADER_ID
    assert payload == ascii_string_pack2("&P")
    rec_id, payload = split(sr.footer_record("&F"))
    assert rec_id == sr.FOOTER_ID
    assert payload == ascii_string_pack2("&F")


def test_setup_page_record_values():
    rec_id, payload = split(sr.setup_page_record())
    assert rec_id == sr.SETUP_PAGE_ID
    assert struct.unpack("<HHHHHHHHddH", payload) == (
        9, 100, 1, 1, 1, 0x83, 0x012C, 0x012C, 0.1, 0.1, 1,
    )


def test_row_record_round_trip():
    rec_id, payload = split(sr.row_record(4, 1, 9, 0xFF, 0x000F0100))
    assert rec_id == 0x0208
    assert struct.unpack("<HHHHHHL", payload) == (4, 1, 9, 0xFF, 0, 0, 0x000F0100)


def test_window2_record_round_trip():
    rec_id, payload = split(sr.window2_record(6, 1, 2, 64, 60, 100))
    assert rec_id == 0x023E
    assert struct.unpack("<HHHHHHHL", payload) == (6, 1, 2, 64, 0, 60, 100, 0)


def test_default_window2_record_matches_explicit_call():
    assert sr.default_window2_record() == sr.window2_record(
        sr.DEFAULT_WINDOW2_OPTIONS, 0, 0, sr.DEFAULT_GRID_COLOUR, 0, 0
    )
    _, payload = split(sr.default_window2_record())
    options = struct.unpack_from("<H", payload)[0]
    assert options & 0x02 and options & 0x80
    assert not options & 0x01


def test_out_of_range_value_raises():
    with pytest.raises(struct.error):
        sr.row_record(70000, 0, 0, 0, 0)