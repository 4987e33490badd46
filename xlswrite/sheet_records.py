"""Worksheet-level BIFF8 records: cells, calculation, layout, printing and window settings."""

import struct

from xlswrite.packing import ascii_string_pack2
from xlswrite.records import BiffRecord, single_h_record

BLANK_ID = 0x0201
LABEL_SST_ID = 0x00FD
CALC_MODE_ID = 0x000D
CALC_COUNT_ID = 0x000C
REF_MODE_ID = 0x000F
ITERATION_ID = 0x0011
DELTA_ID = 0x0010
SAVE_RECALC_ID = 0x005F
GUTS_ID = 0x0080
DEFAULT_ROW_HEIGHT_ID = 0x0225
WS_BOOL_ID = 0x0081
DIMENSIONS_ID = 0x0200
PRINT_HEADERS_ID = 0x002A
PRINT_GRID_LINES_ID = 0x002B
GRID_SET_ID = 0x0082
HORIZONTAL_PAGE_BREAKS_ID = 0x001B
VERTICAL_PAGE_BREAKS_ID = 0x001A
HEADER_ID = 0x0014
FOOTER_ID = 0x0015
HCENTER_ID = 0x0083
VCENTER_ID = 0x0084
LEFT_MARGIN_ID = 0x0026
RIGHT_MARGIN_ID = 0x0027
TOP_MARGIN_ID = 0x0028
BOTTOM_MARGIN_ID = 0x0029
SETUP_PAGE_ID = 0x00A1
SCEN_PROTECT_ID = 0x00DD
ROW_ID = 0x0208
WINDOW2_ID = 0x023E

# show grid, show headers, show zero values, auto grid colour, show outline
DEFAULT_WINDOW2_OPTIONS = 0x02 | 0x04 | 0x10 | 0x20 | 0x80
DEFAULT_GRID_COLOUR = 0x40


def _record(rec_id, fmt, *values):
    return BiffRecord(rec_id, struct.pack("<" + fmt, *values)).get()


def blank_record(row, col, xf_idx):
    return _record(BLANK_ID, "HHHH", 6, row, col, xf_idx)


def label_sst_record(row, col, xf_idx, sst_idx):
    return _record(LABEL_SST_ID, "HHHL", row, col, xf_idx, sst_idx)


def calc_mode_record(calc_mode):
    return _record(CALC_MODE_ID, "h", calc_mode)


def calc_count_record(calc_count):
    return _record(CALC_COUNT_ID, "H", calc_count)


def ref_mode_record(ref_mode):
    return _record(REF_MODE_ID, "H", ref_mode)


def iteration_record(iterations_on):
    return _record(ITERATION_ID, "H", iterations_on)


def delta_record(delta):
    return _record(DELTA_ID, "d", delta)


def save_recalc_record(recalc):
    return _record(SAVE_RECALC_ID, "H", recalc)


def guts_record(row_gut_width, col_gut_height, row_visible_levels, col_visible_levels):
    return _record(
        GUTS_ID, "HHHH", row_gut_width, col_gut_height, row_visible_levels, col_visible_levels
    )


def default_row_height_record(options, def_height):
    return _record(DEFAULT_ROW_HEIGHT_ID, "HH", options, def_height)


def ws_bool_record(options):
    return _record(WS_BOOL_ID, "H", options)


def dimensions_record(first_used_row, last_used_row, first_used_col, last_used_col):
    """Return the used-range record; an inverted range is written as an empty sheet."""
    if first_used_row > last_used_row or first_used_col > last_used_col:
        first_used_row, first_used_col = 0, 0
        last_used_row, last_used_col = -1, -1
    return _record(
        DIMENSIONS_ID,
        "LLHHH",
        first_used_row & 0xFFFFFFFF,
        last_used_row & 0xFFFFFFFF,
        first_used_col & 0xFFFF,
        last_used_col & 0xFFFF,
        0,
    )


def print_headers_record(print_headers):
    return single_h_record(PRINT_HEADERS_ID, print_headers)


def print_grid_lines_record(value):
    return single_h_record(PRINT_GRID_LINES_ID, value)


def grid_set_record(value):
    return single_h_record(GRID_SET_ID, value)


def horizontal_page_breaks_record():
    """Page breaks are not supported; an empty break list is written."""
    return _record(HORIZONTAL_PAGE_BREAKS_ID, "H", 0)


def vertical_page_breaks_record():
    """Page breaks are not supported; an empty break list is written."""
    return _record(VERTICAL_PAGE_BREAKS_ID, "H", 0)


def header_record(text):
    return BiffRecord(HEADER_ID, ascii_string_pack2(text)).get()


def footer_record(text):
    return BiffRecord(FOOTER_ID, ascii_string_pack2(text)).get()


def hcenter_record(value):
    return single_h_record(HCENTER_ID, value)


def vcenter_record(value):
    return single_h_record(VCENTER_ID, value)


def left_margin_record(margin):
    return _record(LEFT_MARGIN_ID, "d", margin)


def right_margin_record(margin):
    return _record(RIGHT_MARGIN_ID, "d", margin)


def top_margin_record(margin):
    return _record(TOP_MARGIN_ID, "d", margin)


def bottom_margin_record(margin):
    return _record(BOTTOM_MARGIN_ID, "d", margin)


def setup_page_record():
    return _record(
        SETUP_PAGE_ID,
        "HHHHHHHHddH",
        9,  # paper size
        100,  # scaling
        1,  # start page
        1,  # fit width
        1,  # fit height
        0x83,  # options
        0x012C,  # horizontal resolution
        0x012C,  # vertical resolution
        0.1,  # header margin
        0.1,  # footer margin
        1,  # copies
    )


def scen_protect_record(value):
    return _record(SCEN_PROTECT_ID, "H", value)


def row_record(index, first_col, last_col, height_options, options):
    return _record(ROW_ID, "HHHHHHL", index, first_col, last_col, height_options, 0, 0, options)


def window2_record(options, first_visible_row, first_visible_col, grid_colour, preview_magn, normal_magn):
    return _record(
        WINDOW2_ID,
        "HHHHHHHL",
        options,
        first_visible_row,
        first_visible_col,
        grid_colour,
        0,
        preview_magn,
        normal_magn,
        0,
    )


def default_window2_record():
    return window2_record(DEFAULT_WINDOW2_OPTIONS, 0, 0, DEFAULT_GRID_COLOUR, 0, 0)