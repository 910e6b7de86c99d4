import struct

import numpy
import pytest

from phadat.base import le16toh, le32toh, le32_array
from phadat.base import PathTooLong, OpenFailure, ShortRead, WriteFailure


@pytest.mark.parametrize("data", [
    b"\x00\x00\x00\x00",
    b"\x01\x00\x00\x00",
    b"\x10\x00\x00\x00",
    b"\x78\x56\x34\x12",
    b"\xff\xff\xff\xff",
    b"\x00\x00\x00\x80",
])
def test_le32toh(data):
    assert le32toh(data) == struct.unpack("<L", data)[0]


def test_le16toh():
    assert le16toh(b"\xff\xff") == 0xFFFF
    assert le16toh(b"\x34\x12") == 0x1234


def test_le32_array_matches_scalar():
    data = bytes(range(256)) * 4
    values = le32_array(data)

    assert values.dtype == numpy.uint32
    assert len(values) == len(data) // 4
    assert list(values) == [le32toh(data[i:i+4]) for i in range(0, len(data), 4)]


def test_le32_array_is_independent_of_host_order():
    data = struct.pack("<4L", 0, 1, 0xDEADBEEF, 0xFFFFFFFF)
    assert le32_array(data).tolist() == [0, 1, 0xDEADBEEF, 0xFFFFFFFF]
    assert le32_array(data).tolist() == numpy.frombuffer(data, dtype="<u4").tolist()


def test_le32_array_ignores_incomplete_word():
    assert le32_array(b"\x2a\x00\x00\x00\x01\x02").tolist() == [42]
    assert le32_array(b"").tolist() == []


def test_error_messages():
    assert str(PathTooLong("a.dat")) == "a.dat: path too long"
    assert str(OpenFailure("a.dat", "No such file or directory")) == \
        "fopen: a.dat: No such file or directory"
    assert str(ShortRead("a.dat", "size")) == "fread: a.dat: error reading size"
    assert str(ShortRead("a.dat", "gap")) == "fread: a.dat: error reading gap bytes"
    assert str(ShortRead("a.dat", "live")) == "fread: a.dat: error reading live time"
    assert str(ShortRead("a.dat", "counter")) == \
        "fread: a.dat: error reading counter value"


def test_write_failure_message():
    assert str(WriteFailure("a.dat.new.txt", "No space left on device")) == \
        "fwrite: a.dat.new.txt: No space left on device"
