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

r"""Generic utility functions."""

import binascii
from typing import Mapping
from typing import Optional
from typing import Union

import colorama

AnyBytes = Union[bytes, bytearray, memoryview]

HEX_DIGITS: frozenset = frozenset('0123456789ABCDEFabcdef')
r"""Case-insensitive hexadecimal digit characters."""

TOKEN_COLOR_CODES: Mapping[str, str] = {
    '':         colorama.Style.RESET_ALL,
    '<':        colorama.Style.RESET_ALL,
    '>':        colorama.Style.RESET_ALL,
    'address':  colorama.Fore.RED,
    'begin':    colorama.Fore.YELLOW,
    'checksum': colorama.Fore.MAGENTA,
    'count':    colorama.Fore.BLUE,
    'data':     colorama.Fore.CYAN,
    'dataalt':  colorama.Fore.LIGHTCYAN_EX,
    'end':      colorama.Style.RESET_ALL,
    'tag':      colorama.Fore.GREEN,
}
r"""ANSI color codes for each possible token type."""


def is_hex_string(text: str) -> bool:
    r"""Tells whether a string is made of hexadecimal digits only.

    Unlike :func:`int` and :meth:`bytes.fromhex`, no whitespace, sign, or
    digit separator is tolerated.

    Args:
        text (str):
            String to check.

    Returns:
        bool: All the characters of `text` are hexadecimal digits.

    Examples:
        >>> from ihexcodec.utils import is_hex_string
        >>> is_hex_string('00FFfe')
        True
        >>> is_hex_string('0x12')
        False
        >>> is_hex_string('12 34')
        False
    """

    return all(c in HEX_DIGITS for c in text)


def hexlify(
    bytestr: AnyBytes,
    sep: Optional[str] = None,
    upper: bool = True,
) -> str:
    r"""Converts raw bytes into a hexadecimal string.

    Args:
        bytestr (bytes):
            Source byte string.

        sep (str):
            Optional byte separator.

        upper (bool):
            Uppercase hexadecimal string.

    Returns:
        str: Hexadecimal string.

    Examples:
        >>> from ihexcodec.utils import hexlify
        >>> hexlify(b'\xAA\xBB\xCC')
        'AABBCC'
        >>> hexlify(b'\xAA\xBB\xCC', sep=' ')
        'AA BB CC'
        >>> hexlify(b'\xAA\xBB\xCC', upper=False)
        'aabbcc'
    """

    if sep:
        hexstr = bytes(bytestr).hex(sep)
    else:
        hexstr = binascii.hexlify(bytestr).decode('ascii')

    if upper:
        hexstr = hexstr.upper()

    return hexstr


def unhexlify(hexstr: str) -> bytes:
    r"""Converts a hexadecimal string into raw bytes.

    Args:
        hexstr (str):
            Source hexadecimal string, with an even number of digits.

    Returns:
        bytes: Raw byte string.

    Raises:
        binascii.Error: Odd length or non-hexadecimal digits.

    Examples:
        >>> from ihexcodec.utils import unhexlify
        >>> unhexlify('AABBcc')
        b'\xaa\xbb\xcc'
    """

    return binascii.unhexlify(hexstr)


def colorize_tokens(
    tokens: Mapping[str, str],
    altdata: bool = True,
) -> Mapping[str, str]:
    r"""Prepends ANSI color codes to record field tokens.

    For each token within `tokens`, its key is used to look up the ANSI color
    code from :data:`TOKEN_COLOR_CODES`.
    The retrieved code is prepended to the token.
    All the modified tokens are then collected and returned.

    Args:
        tokens (dict):
            A mapping of each token key name to token string.

        altdata (bool):
            If true, it alternates each byte (two hex digits) between the ANSI
            color codes mapped with keys ``data`` (even byte index) and
            ``dataalt`` (odd byte index).
            If false, only the ``data`` code is prepended.

    Returns:
        dict: `tokens` with prepended ANSI color codes.

    Examples:
        >>> from ihexcodec.records import EndOfFile, to_tokens
        >>> from ihexcodec.utils import colorize_tokens
        >>> colorized = colorize_tokens(to_tokens(EndOfFile()))
        >>> ''.join(colorized.values())
        '\x1b[0m\x1b[33m:\x1b[34m00\x1b[31m0000\x1b[32m01\x1b[35mFF\x1b[0m'
    """

    codes = TOKEN_COLOR_CODES
    colorized = {}
    colorized.setdefault('<', codes['<'])

    for key, value in tokens.items():
        if key not in codes:
            key = ''
        if value:
            code = codes[key]

            if key == 'data' and altdata:
                altcode = codes['dataalt']
                parts = []

                for i in range(0, len(value), 2):
                    parts.append(altcode if i & 2 else code)
                    parts.append(value[i:(i + 2)])

                colorized[key] = ''.join(parts)
            else:
                colorized[key] = code + value

    colorized.setdefault('>', codes['>'])
    return colorized
