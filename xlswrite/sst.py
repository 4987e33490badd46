"""The shared string table that cell labels refer to by index."""

import logging
import struct

from xlswrite.packing import u16_string_pack
from xlswrite.records import CONTINUE_RECORD_ID

logger = logging.getLogger(__name__)

SST_RECORD_ID = 0x00FC
MAX_SST_LENGTH = 0x2020
MAX_SST_CELL_LENGTH = 0x2000


class SharedStringTable:
    """Deduplicated list of strings with a count of every reference made to them."""

    def __init__(self):
        self.strings = []
        self.total = 0
        self._indexes = {}

    def __len__(self):
        return len(self.strings)

    def add(self, value):
        """Record one use of value and return its index in the table."""
        self.total += 1
        idx = self._indexes.get(value)
        if idx is None:
            idx = len(self.strings)
            self.strings.append(value)
            self._indexes[value] = idx
        return idx

    def biff_record(self):
        """Return the SST record, followed by CONTINUE records when it is too long."""
        out = bytearray(struct.pack("<H", SST_RECORD_ID))
        pending = bytearray()
        first_written = False

        def flush():
            nonlocal first_written
            if first_written:
                out.extend(struct.pack("<HH", CONTINUE_RECORD_ID, len(pending)))
            else:
                first_written = True
                out.extend(struct.pack("<HII", 8 + len(pending), self.total, len(self.strings)))
            out.extend(pending)
            pending.clear()

        for text in self.strings:
            block = u16_string_pack(text)
            if len(block) >= MAX_SST_CELL_LENGTH:
                logger.warning("string exceeds maximum SST cell length: %d bytes", len(block))
                continue
            if len(pending) + len(block) > MAX_SST_LENGTH:
                flush()
            pending.extend(block)
        flush()
        return bytes(out)