# -*- coding: utf-8 -*-
import binascii

import pytest

from ihexcodec.records import Data
from ihexcodec.records import EndOfFile
from ihexcodec.records import to_tokens
from ihexcodec.utils import colorize_tokens
from ihexcodec.utils import hexlify
from ihexcodec.utils import is_hex_string
from ihexcodec.utils import unhexlify


def test_is_hex_string():
    assert is_hex_string('') is True
    assert is_hex_string('0123456789ABCDEFabcdef') is True
    assert is_hex_string('0x12') is False
    assert is_hex_string('12 34') is False
    assert is_hex_string('+1') is False
    assert is_hex_string('1_2') is False
    assert is_hex_string('\uff11') is False


def test_hexlify():
    assert hexlify(b'') == ''
    assert hexlify(b'\xAA\xBB\xCC') == 'AABBCC'
    assert hexlify(b'\xAA\xBB\xCC', upper=False) == 'aabbcc'
    assert hexlify(b'\xAA\xBB\xCC', sep='-') == 'AA-BB-CC'
    assert hexlify(bytearray(b'\x01\x02')) == '0102'
    assert hexlify(memoryview(b'\x01\x02')) == '0102'


def test_unhexlify():
    assert unhexlify('') == b''
    assert unhexlify('AABBcc') == b'\xAA\xBB\xCC'
    with pytest.raises(binascii.Error):
        unhexlify('ABC')


def test_colorize_tokens_eof():
    tokens = to_tokens(EndOfFile())
    colorized = colorize_tokens(tokens)
    assert colorized == {
        '<': '\x1b[0m',
        'begin': '\x1b[33m:',
        'count': '\x1b[34m00',
        'address': '\x1b[31m0000',
        'tag': '\x1b[32m01',
        'checksum': '\x1b[35mFF',
        '>': '\x1b[0m',
    }


def test_colorize_tokens_altdata():
    tokens = to_tokens(Data(0x1234, b'abc'))
    colorized = colorize_tokens(tokens)
    assert colorized['data'] == '\x1b[36m61\x1b[96m62\x1b[36m63'

    colorized = colorize_tokens(tokens, altdata=False)
    assert colorized['data'] == '\x1b[36m616263'


def test_colorize_tokens_unknown_key():
    colorized = colorize_tokens({'junk': 'xyz'})
    assert colorized[''] == '\x1b[0mxyz'
