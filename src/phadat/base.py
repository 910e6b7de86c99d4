
import numpy
import logging


def le16toh(data):
    """Compose an unsigned 16-bit integer from 2 little-endian bytes."""
    return data[0] | (data[1] << 8)


def le32toh(data):
    """Compose an unsigned 32-bit integer from 4 little-endian bytes.

    The value is built with explicit shifts, so the result does not depend
    on the byte order of the host."""
    return data[0] | (data[1] << 8) | (data[2] << 16) | (data[3] << 24)


def le32_array(data):
    """Decode a buffer of little-endian 32-bit words to a uint32 array.

    This is the vectorised counterpart of le32toh(): every column of the
    (n,4) byte matrix is shifted into place and or'ed. Trailing bytes that
    do not form a complete word are ignored."""
    u8 = numpy.frombuffer(data, dtype=numpy.uint8)
    u8 = u8[:len(u8) - len(u8) % 4].reshape(-1, 4).astype(numpy.uint32)
    return u8[:, 0] | (u8[:, 1] << 8) | (u8[:, 2] << 16) | (u8[:, 3] << 24)


class ConversionError(Exception):
    """Base class for problems that abort the conversion of a single file"""

    def __init__(self, path, *args):
        super().__init__(path, *args)
        self.path = path


class PathTooLong(ConversionError):
    def __str__(self):
        return f"{self.path}: path too long"


class OpenFailure(ConversionError):
    def __init__(self, path, reason):
        super().__init__(path, reason)
        self.reason = reason

    def __str__(self):
        return f"fopen: {self.path}: {self.reason}"


class WriteFailure(ConversionError):
    def __init__(self, path, reason):
        super().__init__(path, reason)
        self.reason = reason

    def __str__(self):
        return f"fwrite: {self.path}: {self.reason}"


class ShortRead(ConversionError):
    """The file ended before a field could be read completely."""

    field_text = dict(
        size="size", gap="gap bytes", live="live time",
        counter="counter value")

    def __init__(self, path, field):
        super().__init__(path, field)
        self.field = field

    def __str__(self):
        what = self.field_text.get(self.field, self.field)
        return f"fread: {self.path}: error reading {what}"


class BaseHeader:
    """Fixed-size header decoded from a binary stream

    Subclasses are decorated with a BitStruct, which provides header_size,
    keys(), unpack() and field_at()."""

    header_size = 0
    _hexdump_desc = ("")

    def __init__(self, data, addr):
        if not isinstance(data, bytes) or len(data) != self.header_size:
            raise TypeError(
                f"Invalid header raw data format {type(data)} {len(data)}")

        self._addr = addr
        self._data = data
        for k, v in zip(self.keys(), self.unpack(data)):
            setattr(self, k, v)

    @classmethod
    def read(cls, stream, name=None):
        """Read and decode a header at the current position of the stream.

        Raises ShortRead naming the first incomplete field if the stream
        ends early or cannot be read."""
        name = name or getattr(stream, "name", "?")
        try:
            addr = stream.tell()
            data = stream.read(cls.header_size)
        except OSError as e:
            logging.getLogger("phadat.base").debug(f"read error: {e}")
            raise ShortRead(name, cls.field_at(0)) from e

        if len(data) != cls.header_size:
            logging.getLogger("phadat.base").debug(
                f"incomplete read {len(data)} of {cls.header_size} bytes")
            raise ShortRead(name, cls.field_at(len(data)))
        return cls(data, addr)

    def describe_field(self, i):
        return self._hexdump_desc[i].format(**vars(self))

    def unpack(self, data):
        pass

    def keys(self):
        pass
