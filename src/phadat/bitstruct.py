
from collections import namedtuple

from .base import le16toh, le32toh


class BitStruct:
    """A struct of byte-aligned little-endian integer fields

    The constructor takes the fields as keyword arguments, mapping the field
    name to its width in bits. Used as a class decorator, it teaches the
    class how to decode the raw bytes of the struct:

        @BitStruct(size=32, gap=16, live=32)
        class Header(BaseHeader):
            pass

    Fields are decoded with explicit byte composition, independent of the
    byte order of the host."""

    _fieldinfo_t = namedtuple("fieldinfo_t", ['name', 'size', 'offset', 'decode'])
    _decoder_map = {8: lambda x: x[0], 16: le16toh, 32: le32toh}

    def __init__(self, **fieldinfo):

        self._fields = list()
        offset = 0
        for name, size in fieldinfo.items():
            if size not in self._decoder_map:
                raise ValueError(f"unsupported width of field {name}: {size} bits")

            self._fields.append(self._fieldinfo_t(
                name, size // 8, offset, self._decoder_map[size]))
            offset += size // 8

        self._size = offset
        self._fmthexdesc = tuple(
            f"{f.name}=0x{{{f.name}:0{2*f.size}X}}" for f in self._fields)

    def __call__(self, klass):
        """Decorator to teach classes to parse a BitStruct"""

        klass.unpack = self.unpack
        klass.keys = self.keys
        klass.fields = self.fields
        klass.field_at = self.field_at
        klass.header_size = self._size

        if not klass.__dict__.get('_hexdump_desc'):
            klass._hexdump_desc = self._fmthexdesc

        return klass

    def unpack(self, data):
        return tuple(
            f.decode(data[f.offset:f.offset+f.size]) for f in self._fields)

    def keys(self):
        return tuple(f.name for f in self._fields)

    def fields(self):
        return tuple(self._fields)

    def field_at(self, nbytes):
        """Name of the first field that is not complete in nbytes of data"""
        for f in self._fields:
            if f.offset + f.size > nbytes:
                return f.name
        return None
