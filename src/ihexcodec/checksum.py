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

r"""Intel HEX checksum."""

from typing import Iterable


def checksum(data: Iterable[int]) -> int:
    r"""Computes the Intel HEX checksum.

    The checksum is the two's complement of the least significant byte of
    the sum of all the provided byte values.

    A record is consistent when the sum of all of its decoded bytes,
    checksum byte included, is a multiple of 256.

    Args:
        data (bytes):
            Byte values to checksum.

    Returns:
        int: Checksum byte value.

    Examples:
        >>> from ihexcodec import checksum
        >>> checksum(b'')
        0
        >>> checksum(b'\x00\x00\x00\x01')
        255
        >>> hex(checksum([0x02, 0x00, 0x00, 0x04, 0xFF, 0xFF]))
        '0xfc'
    """

    return (0x100 - (sum(data) & 0xFF)) & 0xFF
