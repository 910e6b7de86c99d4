import logging
import struct

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI reconfigures the root logger; undo it after every test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("phadat.progress").setLevel(logging.NOTSET)


def _make_dat(counters, live=0, gap=b"\xff\xff", size=None, trailer=b""):
    """Raw bytes of a .dat file"""
    if size is None:
        size = len(counters)
    return (struct.pack("<L", size) + gap + struct.pack("<L", live)
            + b"".join(struct.pack("<L", c) for c in counters) + trailer)


@pytest.fixture
def datfile(tmp_path):
    """Factory writing raw bytes to a .dat file in a temporary directory"""
    def write(data, name="spectrum.dat"):
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return write


@pytest.fixture
def make_dat():
    return _make_dat
