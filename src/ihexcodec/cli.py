# Copyright (c) 2016-2026, The ihexcodec Developers
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -m ihexcodec` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``ihexcodec.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``ihexcodec.__main__`` in ``sys.modules``.

  Also see (1) from https://click.palletsprojects.com/en/stable/setuptools/#setuptools-integration
"""

from typing import List
from typing import Optional

import click

from .__init__ import __version__
from .errors import ReaderError
from .errors import WriterError
from .reader import Reader
from .reader import ReaderOptions
from .reader import read_records
from .records import Record
from .records import StartLinearAddress
from .records import record_type
from .records import to_tokens
from .utils import colorize_tokens
from .utils import hexlify
from .writer import count_end_of_file_records
from .writer import create_object_file_representation

FILE_PATH_IN = click.Path(dir_okay=False, allow_dash=True, readable=True, exists=True)
FILE_PATH_OUT = click.Path(dir_okay=False, allow_dash=True, writable=True)


# ----------------------------------------------------------------------------

def print_version(ctx, _, value):

    if not value or ctx.resilient_parsing:
        return

    click.echo(str(__version__))
    ctx.exit()


def read_text(path: str) -> str:

    with click.open_file(path, 'rt') as stream:
        return stream.read()


def describe_record(record: Record) -> str:
    r"""Human readable record description.

    Args:
        record:
            Record to describe.

    Returns:
        str: Type name followed by the record fields.

    Examples:
        >>> from ihexcodec import Data, StartSegmentAddress
        >>> from ihexcodec.cli import describe_record
        >>> describe_record(Data(0x10, b'Hi'))
        'DATA offset=0x0010 value=4869'
        >>> describe_record(StartSegmentAddress(0x1234, 0x3800))
        'START_SEGMENT_ADDRESS cs=0x1234 ip=0x3800'
    """

    width = 8 if isinstance(record, StartLinearAddress) else 4
    words = [record_type(record).name]

    for key, value in vars(record).items():
        if isinstance(value, bytes):
            words.append(f'{key}={hexlify(value)}')
        else:
            words.append(f'{key}=0x{value:0{width}X}')

    return ' '.join(words)


def load_records(infile: str, options: Optional[ReaderOptions] = None) -> List[Record]:

    try:
        return read_records(read_text(infile), options)
    except ReaderError as error:
        raise click.ClickException(f'{infile}:{error.lineno}: {error}')


# ============================================================================

@click.group()
@click.option('-v', '--version', is_flag=True, is_eager=True,
              expose_value=False, callback=print_version, help="""
    Prints the package version number.
""")
def main() -> None:
    """
    A set of command line utilities for Intel HEX object files.

    Being built with `Click <https://click.palletsprojects.com/en/stable/>`_, all the
    commands follow POSIX-like syntax rules, as well as reserving the virtual
    file path ``-`` for command chaining via standard output/input buffering.
    """


# ----------------------------------------------------------------------------

@main.command()
@click.option('--color/--no-color', default=False, show_default=True, help="""
    Prints the canonical record strings, with ANSI colored fields.
""")
@click.option('--stop-after-eof', is_flag=True, help="""
    Ignores anything after the End Of File record.
""")
@click.argument('infile', type=FILE_PATH_IN)
def dump(
    color: bool,
    stop_after_eof: bool,
    infile: str,
) -> None:
    r"""Prints the records of an object file.

    ``INFILE`` is the path of the input file.
    Set to ``-`` to read from standard input.
    """

    options = ReaderOptions(stop_after_eof=stop_after_eof)

    for record in load_records(infile, options):
        if color:
            tokens = colorize_tokens(to_tokens(record))
            click.echo(''.join(tokens.values()), color=True)
        else:
            click.echo(describe_record(record))


# ----------------------------------------------------------------------------

@main.command()
@click.option('--stop-after-eof', is_flag=True, help="""
    Ignores anything after the End Of File record.
""")
@click.argument('infile', type=FILE_PATH_IN)
@click.argument('outfile', type=FILE_PATH_OUT, required=False)
def normalize(
    stop_after_eof: bool,
    infile: str,
    outfile: Optional[str],
) -> None:
    r"""Rewrites an object file in canonical form.

    Record strings are regenerated with uppercase digits, one per line.

    ``INFILE`` is the path of the input file.
    Set to ``-`` to read from standard input.

    ``OUTFILE`` is the path of the output file.
    Set to ``-`` or leave empty to write to standard output.
    """

    options = ReaderOptions(stop_after_eof=stop_after_eof)
    records = load_records(infile, options)

    try:
        text = create_object_file_representation(records)
    except WriterError as error:
        raise click.ClickException(f'{infile}: {error}')

    with click.open_file(outfile or '-', 'wt') as stream:
        stream.write(text)


# ----------------------------------------------------------------------------

@main.command()
@click.option('--stop-after-first-error', is_flag=True, help="""
    Stops at the first malformed line.
""")
@click.option('--stop-after-eof', is_flag=True, help="""
    Ignores anything after the End Of File record.
""")
@click.argument('infile', type=FILE_PATH_IN)
def validate(
    stop_after_first_error: bool,
    stop_after_eof: bool,
    infile: str,
) -> None:
    r"""Validates an object file.

    Each malformed line is reported onto standard error, as well as a missing
    or repeated End Of File record.
    The exit code is non-zero if anything was reported.

    ``INFILE`` is the path of the input file.
    Set to ``-`` to read from standard input.
    """

    options = ReaderOptions(stop_after_first_error=stop_after_first_error,
                            stop_after_eof=stop_after_eof)
    records = []
    failures = 0

    for item in Reader(read_text(infile), options):
        if isinstance(item, ReaderError):
            click.echo(f'{infile}:{item.lineno}: {item}', err=True)
            failures += 1
        else:
            records.append(item)

    if not (failures and stop_after_first_error):
        eof_count = count_end_of_file_records(records)
        if eof_count != 1:
            click.echo(f'{infile}: expected 1 End Of File record, found {eof_count}', err=True)
            failures += 1

    if failures:
        raise click.exceptions.Exit(1)
