
import logging
import os

from .base import ConversionError, OpenFailure, PathTooLong, WriteFailure
from .constants import PATH_MAX, POSTFIX, TERMINATOR
from .datreader import DatReader

logger = logging.getLogger(__name__)
progress = logging.getLogger("phadat.progress")


def output_path(path, suffix=POSTFIX):
    """Name of the text file for the .dat file at path"""
    path = os.fspath(path)
    if len(os.fsencode(path)) + len(os.fsencode(suffix)) > PATH_MAX:
        raise PathTooLong(path)
    return path + suffix


def convert(path, terminator=TERMINATOR, suffix=POSTFIX, hexdump=None):
    """Convert one .dat file to text.

    Every counter is written as a decimal number followed by the terminator
    bytes. Raises a ConversionError if the file cannot be converted; output
    that was written up to that point stays on disk.

    Arguments:
      path : str        - the .dat file
      terminator : bytes - line terminator of the output file
      suffix : str      - appended to path to name the output file
      hexdump           - optional callable that receives the header"""

    path = os.fspath(path)
    outpath = output_path(path, suffix)

    try:
        fin = open(path, "rb")
    except OSError as e:
        raise OpenFailure(path, e.strerror or str(e)) from e

    with fin:
        # binary mode: the terminator is written exactly as given
        try:
            fout = open(outpath, "wb")
        except OSError as e:
            raise OpenFailure(outpath, e.strerror or str(e)) from e

        # read errors surface as ShortRead, so any OSError here comes from
        # writing or closing the output
        try:
            with fout:
                reader = DatReader(fin, path)
                if hexdump is not None:
                    reader.hexdump = hexdump

                hdr = reader.read_header()
                progress.info(f"converting: {path:<16}\t{hdr.size:4d} channels"
                              f"\t{hdr.live:4d} live seconds")

                for values in reader.counters():
                    fout.write(b"".join(
                        b"%d%s" % (v, terminator) for v in values.tolist()))
        except OSError as e:
            raise WriteFailure(outpath, e.strerror or str(e)) from e

    return hdr


def convert_file(path, **kwargs):
    """Convert one file and report failures instead of raising them.

    Returns True if the file was converted completely."""
    try:
        convert(path, **kwargs)
    except ConversionError as e:
        logger.error(str(e))
        return False
    return True
