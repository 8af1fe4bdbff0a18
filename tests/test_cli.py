# -*- coding: utf-8 -*-
from pathlib import Path
from typing import cast as _cast

import pytest
from click.core import Command
from click.testing import CliRunner

from ihexcodec import __version__ as _version
from ihexcodec.__main__ import main as _main
from ihexcodec.cli import describe_record
from ihexcodec.cli import main
from ihexcodec.records import Data
from ihexcodec.records import EndOfFile
from ihexcodec.records import ExtendedLinearAddress
from ihexcodec.records import ExtendedSegmentAddress
from ihexcodec.records import StartLinearAddress
from ihexcodec.records import StartSegmentAddress

main = _cast(Command, main)  # suppress warnings

OBJECT_TEXT = (
    ':020000040800F2\n'
    ':0B0010006164647265737320676170A7\n'
    ':04000005000000CD2A\n'
    ':00000001FF\n'
)


@pytest.fixture
def tmppath(tmpdir):
    return Path(str(tmpdir))


def write_text(path, text):
    with open(str(path), 'wt', newline='') as file:
        file.write(text)
    return str(path)


def read_text(path):
    with open(str(path), 'rt') as file:
        return file.read()


def test_main():
    try:
        _main('__main__')
    except SystemExit:
        pass


def test_version():
    runner = CliRunner()
    result = runner.invoke(main, ['--version'])
    assert result.exit_code == 0
    assert result.output == f'{_version}\n'


def test_help():
    commands = ('dump', 'normalize', 'validate')
    runner = CliRunner()

    for command in commands:
        result = runner.invoke(main, [command, '--help'])
        assert result.exit_code == 0
        assert result.output.strip().startswith('Usage:')


def test_describe_record():
    vector = [
        ('DATA offset=0x0010 value=616263', Data(0x10, b'abc')),
        ('DATA offset=0xFFFF value=', Data(0xFFFF, b'')),
        ('END_OF_FILE', EndOfFile()),
        ('EXTENDED_SEGMENT_ADDRESS segment=0x1200', ExtendedSegmentAddress(0x1200)),
        ('START_SEGMENT_ADDRESS cs=0x0000 ip=0x3800', StartSegmentAddress(0, 0x3800)),
        ('EXTENDED_LINEAR_ADDRESS address=0x0800', ExtendedLinearAddress(0x0800)),
        ('START_LINEAR_ADDRESS address=0x000000CD', StartLinearAddress(0xCD)),
    ]
    for expected, record in vector:
        assert describe_record(record) == expected


# ----------------------------------------------------------------------------

def test_validate_ok(tmppath):
    path = write_text(tmppath / 'ok.hex', OBJECT_TEXT)
    runner = CliRunner()
    result = runner.invoke(main, ['validate', path])
    assert result.exit_code == 0
    assert result.output == ''


def test_validate_stdin():
    runner = CliRunner()
    result = runner.invoke(main, ['validate', '-'], input=OBJECT_TEXT)
    assert result.exit_code == 0


def test_validate_errors(tmppath):
    text = ':020000040800F2\nbad\n:00000001FE\n:00000001FF\n'
    path = write_text(tmppath / 'bad.hex', text)
    runner = CliRunner()
    result = runner.invoke(main, ['validate', path])
    assert result.exit_code == 1
    assert f'{path}:2: Failed to parse IHEX record: Record does not begin' in result.output
    assert f'{path}:3: Failed to parse IHEX record: The checksum' in result.output


def test_validate_stop_after_first_error(tmppath):
    text = 'bad\n:00000001FE\n'
    path = write_text(tmppath / 'bad.hex', text)
    runner = CliRunner()
    result = runner.invoke(main, ['validate', '--stop-after-first-error', path])
    assert result.exit_code == 1
    assert f'{path}:1:' in result.output
    assert f'{path}:2:' not in result.output
    assert 'End Of File' not in result.output


def test_validate_missing_eof(tmppath):
    path = write_text(tmppath / 'noeof.hex', ':020000040800F2\n')
    runner = CliRunner()
    result = runner.invoke(main, ['validate', path])
    assert result.exit_code == 1
    assert 'expected 1 End Of File record, found 0' in result.output


def test_validate_multiple_eof(tmppath):
    path = write_text(tmppath / 'eofs.hex', ':00000001FF\n:00000001FF\n')
    runner = CliRunner()
    result = runner.invoke(main, ['validate', path])
    assert result.exit_code == 1
    assert 'found 2' in result.output

    result = runner.invoke(main, ['validate', '--stop-after-eof', path])
    assert result.exit_code == 0


# ----------------------------------------------------------------------------

def test_dump(tmppath):
    path = write_text(tmppath / 'dump.hex', OBJECT_TEXT)
    runner = CliRunner()
    result = runner.invoke(main, ['dump', path])
    assert result.exit_code == 0
    assert result.output == (
        'EXTENDED_LINEAR_ADDRESS address=0x0800\n'
        'DATA offset=0x0010 value=6164647265737320676170\n'
        'START_LINEAR_ADDRESS address=0x000000CD\n'
        'END_OF_FILE\n'
    )


def test_dump_color():
    runner = CliRunner()
    result = runner.invoke(main, ['dump', '--color', '-'], input=':00000001ff\n')
    assert result.exit_code == 0
    assert result.output == '\x1b[0m\x1b[33m:\x1b[34m00\x1b[31m0000\x1b[32m01\x1b[35mFF\x1b[0m\n'


def test_dump_stop_after_eof():
    runner = CliRunner()
    result = runner.invoke(main, ['dump', '--stop-after-eof', '-'], input=':00000001FF\nbad\n')
    assert result.exit_code == 0
    assert result.output == 'END_OF_FILE\n'


def test_dump_error():
    runner = CliRunner()
    result = runner.invoke(main, ['dump', '-'], input=':00000001FF\nbad\n')
    assert result.exit_code == 1
    assert '-:2: Failed to parse IHEX record' in result.output


# ----------------------------------------------------------------------------

def test_normalize_stdout():
    runner = CliRunner()
    text = '\r\n:02000004abcd82\r\n\r\n:00000001ff\r\n'
    result = runner.invoke(main, ['normalize', '-'], input=text)
    assert result.exit_code == 0
    assert result.output == ':02000004ABCD82\n:00000001FF\n'


def test_normalize_file(tmppath):
    path_in = write_text(tmppath / 'in.hex', OBJECT_TEXT.lower())
    path_out = str(tmppath / 'out.hex')
    runner = CliRunner()
    result = runner.invoke(main, ['normalize', path_in, path_out])
    assert result.exit_code == 0
    assert result.output == ''
    assert read_text(path_out) == OBJECT_TEXT


def test_normalize_multiple_eof():
    runner = CliRunner()
    result = runner.invoke(main, ['normalize', '-'], input=':00000001FF\n:00000001FF\n')
    assert result.exit_code == 1
    assert 'multiple End Of File records (2)' in result.output

    result = runner.invoke(main, ['normalize', '--stop-after-eof', '-'],
                           input=':00000001FF\n:00000001FF\n')
    assert result.exit_code == 0
    assert result.output == ':00000001FF\n'


def test_normalize_parse_error():
    runner = CliRunner()
    result = runner.invoke(main, ['normalize', '-'], input=':00000001FE\n')
    assert result.exit_code == 1
    assert 'The checksum for the record does not match' in result.output


def test_missing_infile(tmppath):
    runner = CliRunner()
    result = runner.invoke(main, ['validate', str(tmppath / 'missing.hex')])
    assert result.exit_code == 2
