#!/usr/bin/env python3
#

import logging

from .base import BaseHeader, ShortRead, le32_array
from .bitstruct import BitStruct
from .constants import CHUNK_CHANNELS

logger = logging.getLogger(__name__)


@BitStruct(size=32, gap=16, live=32)
class PhaHeader(BaseHeader):
    """Header of a PHA ".dat" file

    The live time is reported as stored. Only its upper 16 bits are filled
    by the instrument, but no masking is applied."""

    _hexdump_desc = ("{size} channels", "unused", "{live} live seconds")


class DatReader:
    """Reader for PHA ".dat" files

    The reader works on an open binary stream. read_header() decodes the
    10-byte header, counters() then yields the channel counters in chunks
    of uint32 arrays. Bytes after the last counter are never read."""

    def __init__(self, stream, name=None):
        self.stream = stream
        self.name = name if name is not None else getattr(stream, "name", "?")
        self.header = None
        self.hexdump = lambda x: None  # Default: no logging

    def read_header(self):
        self.header = PhaHeader.read(self.stream, self.name)
        self.hexdump(self.header)
        return self.header

    def counters(self, chunk_channels=CHUNK_CHANNELS):
        """Iterate over the counter values, chunk by chunk.

        If the file is truncated, the complete counters of the last chunk
        are yielded before ShortRead is raised."""

        if self.header is None:
            self.read_header()

        remaining = self.header.size
        while remaining > 0:
            n = min(remaining, chunk_channels)
            try:
                addr = self.stream.tell()
                data = self.stream.read(4*n)
            except OSError as e:
                logger.debug(f"read error: {e}")
                raise ShortRead(self.name, "counter") from e

            values = le32_array(data)
            if len(values) > 0:
                yield values

            if len(data) != 4*n:
                logger.debug(
                    f"incomplete read of {len(data)} of {4*n} bytes at 0x{addr:X}")
                raise ShortRead(self.name, "counter")

            remaining -= n
