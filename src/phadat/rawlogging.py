
import logging
import sys


class StdoutHandler(logging.StreamHandler):
    """Handler for progress messages on stdout

    Records of level WARNING and above are left to the StderrHandler. When
    the output is piped into a pager or `head` that terminates early, the
    programme exits quietly."""

    def __init__(self):
        super().__init__(sys.stdout)
        self.setFormatter(ColorFormatter())
        self.addFilter(lambda record: record.levelno < logging.WARNING)

    def handleError(self, record):
        t, v, tb = sys.exc_info()
        if t == BrokenPipeError:
            raise SystemExit(0)

        else:
            super().handleError(record)


class StderrHandler(logging.StreamHandler):
    """Handler for diagnostics on stderr"""

    def __init__(self):
        super().__init__(sys.stderr)
        self.setLevel(logging.WARNING)
        self.setFormatter(ColorFormatter())
        if self.stream.isatty():
            self.addFilter(TermColorFilter("red"))


# https://alexandra-zaharia.github.io/posts/make-your-own-custom-color-formatter-with-python-logging/
class ColorFormatter(logging.Formatter):
    """Logging formatter with optional colors and a hexdump layout

    Records that carry `hexaddr` and `hexdata` attributes are formatted as
    hexdump lines, all others as plain messages."""

    reset = '\x1b[0m'

    def __init__(self, default_format=None, hexdump_format=None):
        super().__init__(default_format)

        if default_format is None:
            default_format = "%(color)s%(message)s%(endcolor)s"
        if hexdump_format is None:
            hexdump_format = "%(hexaddr)012x  %(hexdata)08x    %(color)s%(shortname)-8s %(message)s%(endcolor)s"

        self.formatter_hexdump = logging.Formatter(hexdump_format)
        self.formatter_default = logging.Formatter(default_format)

    def format(self, record):
        record.shortname = record.name.split(".")[-1]
        if not getattr(record, 'color', ""):
            record.color = ""
            record.endcolor = ""
        else:
            record.endcolor = self.reset

        if hasattr(record, 'hexdata'):
            return self.formatter_hexdump.format(record)
        else:
            return self.formatter_default.format(record)


class TermColorFilter(logging.Filter):

    text_styles = dict(
        red='\x1b[38;5;196m',
    )

    def __init__(self, color):
        super().__init__()
        self.color = self.text_styles.get(color, color)

    def filter(self, record):
        if not hasattr(record, 'color'):
            record.color = self.color
        return True


class HexDump:
    """Log the fields of a header with their file offsets and values"""

    def __init__(self, logger_name="phadat.hexdump"):
        self.logger = logging.getLogger(logger_name)

    def __call__(self, header):
        for i, f in enumerate(header.fields()):
            extra = dict(hexaddr=header._addr+f.offset,
                         hexdata=getattr(header, f.name))
            self.logger.getChild(f.name).info(
                header.describe_field(i), extra=extra)
