# xlswrite

Dependency-free building blocks for legacy Excel output (BIFF8, the record
format inside `.xls` files). The package builds single BIFF8 records as
`bytes` and serialises a shared string table of cell labels.

## Installation

```
pip install .
```

## Modules

- `xlswrite.packing` – string packing helpers and shared constants:
  - `u16_string_pack(text)`: u16 unit count, flag byte `1`, UTF-16LE data.
  - `ascii_string_pack(text)`: u8 byte count, flag byte `0`, UTF-8 bytes.
  - `ascii_string_pack2(text)`: u16 byte count, flag byte `0`, UTF-8 bytes.
  - Sector and sector-id constants such as `SECTOR_SIZE`,
    `SID_FREE_SECTOR` and `SID_END_OF_CHAIN`.
- `xlswrite.records` – workbook-global records and the framing they share.
  `BiffRecord(rec_id, data)` gives `header()` (id and length) and `get()`
  (the framed record). Payloads longer than 0x2020 bytes are split, the
  first chunk under the record's own id and the rest as CONTINUE records
  (id 0x003C). Builders include `biff8_bof_record`, `write_access_record`,
  `tab_id_record`, `window1_record`, `bound_sheet_record`,
  `default_font_record`, `number_format_record`, `cell_xf_record`,
  `default_xf_record`, `style_record` and `eof_record`, among others.
  `write_access_record` raises `ValueError` for an owner name longer than
  0x70 bytes; shorter names are padded with spaces.
- `xlswrite.sheet_records` – worksheet-level records: `label_sst_record`,
  `blank_record`, `row_record`, `dimensions_record`, calculation settings,
  page margins and setup, header and footer, protection and
  `window2_record` / `default_window2_record`. `dimensions_record` writes
  an inverted range as an empty sheet.
- `xlswrite.sst` – `SharedStringTable`, which deduplicates strings and
  counts every reference.

## Usage

```python
from xlswrite.sst import SharedStringTable
from xlswrite.records import biff8_bof_record, eof_record, BOF_WORKSHEET
from xlswrite.sheet_records import label_sst_record, row_record

sst = SharedStringTable()
idx = sst.add("hello")      # 0
sst.add("hello")            # 0 again; sst.total == 2, len(sst) == 1

sheet = b"".join([
    biff8_bof_record(BOF_WORKSHEET),
    row_record(0, 0, 1, 0x00FF, 0x000F0100),
    label_sst_record(0, 0, 0x11, idx),
    eof_record(),
])

sst_bytes = sst.biff_record()
```

`SharedStringTable.biff_record()` returns the SST record (id 0x00FC) and,
when the strings exceed 0x2020 bytes, CONTINUE records after it. A string
whose packed form is 0x2000 bytes or longer is left out and a warning is
logged.

## What the package does not do

It does not assemble a complete workbook or write `.xls` files: there is no
workbook or worksheet object, no default style block, and no compound
document container around the record stream. Callers who want a file must
put the records together and wrap them in a compound document themselves.
There is no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```