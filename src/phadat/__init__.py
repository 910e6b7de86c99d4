"""Conversion of PHA spectrum ".dat" files to plain text.

A ".dat" file holds a 10-byte header (channel count, two unused bytes, live
time) followed by one little-endian 32-bit counter per channel. Each file is
converted to ``<file>.new.txt`` with one decimal counter value per line."""

from .base import ConversionError, PathTooLong, OpenFailure, ShortRead, WriteFailure
from .datreader import PhaHeader, DatReader
from .converter import convert, convert_file, output_path
