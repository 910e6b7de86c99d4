#!/usr/bin/env python3

import click
import logging

from .constants import POSTFIX, TERMINATORS
from .converter import convert_file
from .rawlogging import StdoutHandler, StderrHandler, HexDump


# On Windows, click expands wildcards in the arguments before the command
# is invoked, so `phadat *.dat` works in cmd.exe as well.
@click.command()
@click.argument('paths', nargs=-1, type=click.Path())
@click.option('-t', '--terminator', type=click.Choice(sorted(TERMINATORS)),
              default='crlf', help='Line terminator of the text files.')
@click.option('-s', '--suffix', default=POSTFIX,
              help='Appended to each input path to name its text file.')
@click.option('-o', '--loglevel', default='INFO',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                                case_sensitive=False))
@click.option('-q', '--quiet', count=True, help='Do not report progress.')
@click.option('--hexdump/--no-hexdump', default=False,
              help='Dump the header fields of each file.')
@click.pass_context
def phadat(ctx, paths, terminator, suffix, loglevel, quiet, hexdump):
    """Convert PHA .dat files to text files with one counter per line."""

    if len(paths) == 0:
        click.echo(f"usage: {ctx.info_name} <datfiles>", err=True)
        ctx.exit(1)

    # progress goes to stdout, diagnostics to stderr
    logging.basicConfig(level=loglevel.upper(), force=True,
                        handlers=[StdoutHandler(), StderrHandler()])

    if quiet > 0:
        logging.getLogger("phadat.progress").setLevel(logging.WARNING)

    for path in paths:
        convert_file(path, terminator=TERMINATORS[terminator], suffix=suffix,
                     hexdump=HexDump() if hexdump else None)
