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

r"""Intel HEX records.

Each record *nature* is its own immutable value class; :data:`Record` is the
union of all of them.

See Also:
    `<https://en.wikipedia.org/wiki/Intel_HEX>`_
"""

import enum
import operator
from dataclasses import dataclass
from typing import Mapping
from typing import Optional
from typing import Union

from deprecated import deprecated

from .checksum import checksum
from .errors import ReaderError
from .errors import ReaderErrorKind
from .errors import WriterError
from .errors import WriterErrorKind
from .utils import hexlify
from .utils import is_hex_string
from .utils import unhexlify

START_CODE: str = ':'
r"""Record start code."""

MAX_DATA_SIZE: int = 0xFF
r"""Maximum payload size, in bytes."""

SMALLEST_RECORD_CHAR_COUNT: int = (1 + 2 + 1 + 1) * 2
r"""Digits of the smallest record: count, address, type, and checksum."""

LARGEST_RECORD_CHAR_COUNT: int = SMALLEST_RECORD_CHAR_COUNT + (MAX_DATA_SIZE * 2)
r"""Digits of the largest record, holding a full payload."""


class RecordType(enum.IntEnum):
    r"""Intel HEX record type code."""

    DATA = 0
    r"""Binary data."""

    END_OF_FILE = 1
    r"""End Of File."""

    EXTENDED_SEGMENT_ADDRESS = 2
    r"""Extended Segment Address."""

    START_SEGMENT_ADDRESS = 3
    r"""Start Segment Address."""

    EXTENDED_LINEAR_ADDRESS = 4
    r"""Extended Linear Address."""

    START_LINEAR_ADDRESS = 5
    r"""Start Linear Address."""

    def is_data(self) -> bool:

        return self == self.DATA

    def is_eof(self) -> bool:
        r"""Tells whether this is an End Of File record type.

        Returns:
            bool: This is an End Of File record type.

        Examples:
            >>> from ihexcodec import RecordType
            >>> RecordType.END_OF_FILE.is_eof()
            True
            >>> RecordType.DATA.is_eof()
            False
        """

        return self == self.END_OF_FILE

    def is_extension(self) -> bool:
        r"""Tells whether this is an Extended Address record type.

        Returns:
            bool: This is an Extended Address record type.

        Examples:
            >>> from ihexcodec import RecordType
            >>> RecordType.EXTENDED_LINEAR_ADDRESS.is_extension()
            True
            >>> RecordType.EXTENDED_SEGMENT_ADDRESS.is_extension()
            True
            >>> RecordType.DATA.is_extension()
            False
        """

        return ((self == self.EXTENDED_SEGMENT_ADDRESS) or
                (self == self.EXTENDED_LINEAR_ADDRESS))

    def is_start(self) -> bool:
        r"""Tells whether this is a Start Address record type.

        Returns:
            bool: This is a Start Address record type.

        Examples:
            >>> from ihexcodec import RecordType
            >>> RecordType.START_LINEAR_ADDRESS.is_start()
            True
            >>> RecordType.START_SEGMENT_ADDRESS.is_start()
            True
            >>> RecordType.DATA.is_start()
            False
        """

        return ((self == self.START_SEGMENT_ADDRESS) or
                (self == self.START_LINEAR_ADDRESS))

    def payload_size(self) -> Optional[int]:
        r"""Fixed payload size.

        Returns:
            int: Payload size in bytes, or ``None`` for variable-size records.

        Examples:
            >>> from ihexcodec import RecordType
            >>> RecordType.START_LINEAR_ADDRESS.payload_size()
            4
            >>> RecordType.DATA.payload_size() is None
            True
        """

        if self.is_data():
            return None
        elif self.is_start():
            return 4
        elif self.is_extension():
            return 2
        else:  # elif self.is_eof():
            return 0


def _check_range(name: str, value: int, maximum: int) -> int:

    value = operator.index(value)
    if not 0 <= value <= maximum:
        raise ValueError(f'{name} overflow')
    return value


@dataclass(frozen=True)
class Data:
    r"""Data record.

    Specifies a 16-bit offset address and up to 255 bytes of data.
    Available in I8HEX, I16HEX, and I32HEX.

    Any amount of data is accepted here; an oversized payload is reported
    by :func:`to_hex_string`.

    Attributes:
        offset (int):
            Offset of the data within the current segment or linear base.

        value (bytes):
            Data to be written to memory.
    """

    offset: int
    value: bytes = b''

    def __post_init__(self):

        object.__setattr__(self, 'offset', _check_range('offset', self.offset, 0xFFFF))
        if isinstance(self.value, int):
            raise TypeError('value must be a byte sequence')
        object.__setattr__(self, 'value', bytes(self.value))


@dataclass(frozen=True)
class EndOfFile:
    r"""End Of File record.

    Indicates the end of the object file; it must occur exactly once per file.
    Available in I8HEX, I16HEX, and I32HEX.
    """


@dataclass(frozen=True)
class ExtendedSegmentAddress:
    r"""Extended Segment Address record.

    Specifies bits 4-19 of the Segment Base Address (SBA) to address up to
    1 MiB. Available in I16HEX.

    Attributes:
        segment (int):
            Raw 16-bit segment value.
    """

    segment: int

    def __post_init__(self):

        object.__setattr__(self, 'segment', _check_range('segment', self.segment, 0xFFFF))

    @property
    def base_address(self) -> int:
        r"""int: Segment Base Address, as ``segment * 16``."""

        return self.segment << 4


@dataclass(frozen=True)
class StartSegmentAddress:
    r"""Start Segment Address record.

    Specifies the execution start via the CS and IP registers.
    Available in I16HEX.

    Attributes:
        cs (int):
            Value of the CS register.

        ip (int):
            Value of the IP register.
    """

    cs: int
    ip: int

    def __post_init__(self):

        object.__setattr__(self, 'cs', _check_range('cs', self.cs, 0xFFFF))
        object.__setattr__(self, 'ip', _check_range('ip', self.ip, 0xFFFF))

    @property
    def linear_address(self) -> int:
        r"""int: 20-bit real mode address pointed by CS:IP."""

        return (self.cs << 4) + self.ip


@dataclass(frozen=True)
class ExtendedLinearAddress:
    r"""Extended Linear Address record.

    Specifies the upper 16 bits of a 32-bit linear address; the lower 16 bits
    come from the offset of the following data records.
    Available in I32HEX.

    Attributes:
        address (int):
            Upper 16 bits of the linear base address.
    """

    address: int

    def __post_init__(self):

        object.__setattr__(self, 'address', _check_range('address', self.address, 0xFFFF))

    @property
    def base_address(self) -> int:
        r"""int: Linear base address, as ``address << 16``."""

        return self.address << 16


@dataclass(frozen=True)
class StartLinearAddress:
    r"""Start Linear Address record.

    Specifies the execution start address, loaded into the EIP register.
    Available in I32HEX.

    Attributes:
        address (int):
            32-bit linear start address.
    """

    address: int

    def __post_init__(self):

        object.__setattr__(self, 'address', _check_range('address', self.address, 0xFFFFFFFF))


Record = Union[
    Data,
    EndOfFile,
    ExtendedSegmentAddress,
    StartSegmentAddress,
    ExtendedLinearAddress,
    StartLinearAddress,
]
r"""Any Intel HEX record."""


def record_type(record: Record) -> RecordType:
    r"""Record type code of a record.

    Args:
        record:
            Record object.

    Returns:
        :class:`RecordType`: Type code of `record`.

    Raises:
        TypeError: `record` is not a record object.

    Examples:
        >>> from ihexcodec import Data, StartLinearAddress, record_type
        >>> record_type(Data(0x1234, b'abc'))
        <RecordType.DATA: 0>
        >>> int(record_type(StartLinearAddress(0)))
        5
    """

    if isinstance(record, Data):
        return RecordType.DATA
    elif isinstance(record, EndOfFile):
        return RecordType.END_OF_FILE
    elif isinstance(record, ExtendedSegmentAddress):
        return RecordType.EXTENDED_SEGMENT_ADDRESS
    elif isinstance(record, StartSegmentAddress):
        return RecordType.START_SEGMENT_ADDRESS
    elif isinstance(record, ExtendedLinearAddress):
        return RecordType.EXTENDED_LINEAR_ADDRESS
    elif isinstance(record, StartLinearAddress):
        return RecordType.START_LINEAR_ADDRESS
    else:
        raise TypeError(f'not a record: {record!r}')


def from_record_string(line: str) -> Record:
    r"""Parses a record string.

    The `line` is processed as is; any surrounding whitespace, line
    terminator included, makes it invalid.

    Args:
        line (str):
            Intel HEX record string, as ``:LLAAAATTDD...CC``.

    Returns:
        Record object matching `line`.

    Raises:
        :class:`ReaderError`: Malformed record string; the first failed check
            determines its :attr:`ReaderError.kind`.

    Examples:
        >>> from ihexcodec import from_record_string
        >>> from_record_string(':00000001FF')
        EndOfFile()
        >>> from_record_string(':0300300002337A1E')
        Data(offset=48, value=b'\x023z')
        >>> from_record_string(':0400000512345678E3')
        StartLinearAddress(address=305419896)
        >>> from_record_string(':00000001FE')
        Traceback (most recent call last):
            ...
        ihexcodec.errors.ReaderError: Failed to parse IHEX record: The checksum for the record does not match.
    """

    if not line.startswith(START_CODE):
        raise ReaderError(ReaderErrorKind.MISSING_START_CODE)

    digits = line[len(START_CODE):]
    size = len(digits)

    if size % 2:
        raise ReaderError(ReaderErrorKind.RECORD_NOT_EVEN_LENGTH)
    elif size < SMALLEST_RECORD_CHAR_COUNT:
        raise ReaderError(ReaderErrorKind.RECORD_TOO_SHORT)
    elif size > LARGEST_RECORD_CHAR_COUNT:
        raise ReaderError(ReaderErrorKind.RECORD_TOO_LONG)

    if not is_hex_string(digits):
        raise ReaderError(ReaderErrorKind.CONTAINS_INVALID_CHARACTERS)

    bytestr = unhexlify(digits)

    if checksum(bytestr):
        raise ReaderError(ReaderErrorKind.CHECKSUM_MISMATCH)

    count = bytestr[0]
    address = int.from_bytes(bytestr[1:3], byteorder='big')
    tag = bytestr[3]
    payload = bytestr[4:-1]

    if count != len(payload):
        raise ReaderError(ReaderErrorKind.PAYLOAD_LENGTH_MISMATCH)

    try:
        tag = RecordType(tag)
    except ValueError:
        raise ReaderError(ReaderErrorKind.UNSUPPORTED_RECORD_TYPE, tag) from None

    if tag.is_data():
        return Data(address, payload)

    if len(payload) != tag.payload_size():
        raise ReaderError(ReaderErrorKind.INVALID_LENGTH_FOR_TYPE)

    if tag == RecordType.END_OF_FILE:
        return EndOfFile()

    elif tag == RecordType.EXTENDED_SEGMENT_ADDRESS:
        return ExtendedSegmentAddress(int.from_bytes(payload, byteorder='big'))

    elif tag == RecordType.START_SEGMENT_ADDRESS:
        cs = int.from_bytes(payload[0:2], byteorder='big')
        ip = int.from_bytes(payload[2:4], byteorder='big')
        return StartSegmentAddress(cs, ip)

    elif tag == RecordType.EXTENDED_LINEAR_ADDRESS:
        return ExtendedLinearAddress(int.from_bytes(payload, byteorder='big'))

    else:  # elif tag == RecordType.START_LINEAR_ADDRESS:
        return StartLinearAddress(int.from_bytes(payload, byteorder='big'))


def _split_fields(record: Record):

    tag = record_type(record)

    if tag == RecordType.DATA:
        address = record.offset
        payload = bytes(record.value)
        size = len(payload)
        if size > MAX_DATA_SIZE:
            raise WriterError(WriterErrorKind.DATA_EXCEEDS_MAXIMUM_LENGTH, size)

    elif tag == RecordType.END_OF_FILE:
        address = 0
        payload = b''

    elif tag == RecordType.EXTENDED_SEGMENT_ADDRESS:
        address = 0
        payload = record.segment.to_bytes(2, byteorder='big')

    elif tag == RecordType.START_SEGMENT_ADDRESS:
        address = 0
        payload = (record.cs.to_bytes(2, byteorder='big') +
                   record.ip.to_bytes(2, byteorder='big'))

    elif tag == RecordType.EXTENDED_LINEAR_ADDRESS:
        address = 0
        payload = record.address.to_bytes(2, byteorder='big')

    else:  # elif tag == RecordType.START_LINEAR_ADDRESS:
        address = 0
        payload = record.address.to_bytes(4, byteorder='big')

    header = bytes([len(payload)]) + address.to_bytes(2, byteorder='big') + bytes([tag])
    return header, payload


def _fields_or_fail(record: Record):

    try:
        return _split_fields(record)
    except WriterError:
        raise
    except (TypeError, ValueError, AttributeError, OverflowError) as exc:
        raise WriterError(WriterErrorKind.SYNTHESIS_FAILED) from exc


def to_hex_string(record: Record) -> str:
    r"""Serializes a record string.

    The record string is ``:`` followed by the uppercase hexadecimal digits of
    the byte count, address field, type code, payload, and checksum.
    No line terminator is appended.

    Args:
        record:
            Record to serialize.

    Returns:
        str: Intel HEX record string.

    Raises:
        :class:`WriterError`: The record cannot be represented.

    Examples:
        >>> from ihexcodec import Data, EndOfFile, to_hex_string
        >>> to_hex_string(EndOfFile())
        ':00000001FF'
        >>> to_hex_string(Data(0x1234, b'abc'))
        ':0312340061626391'
        >>> to_hex_string(Data(0, bytes(256)))
        Traceback (most recent call last):
            ...
        ihexcodec.errors.WriterError: Failed to generate IHEX object: A record contains data too large to represent (256).
    """

    header, payload = _fields_or_fail(record)
    bytestr = header + payload
    bytestr += bytes([checksum(bytestr)])
    return START_CODE + hexlify(bytestr)


@deprecated(reason='Use to_hex_string() instead')
def to_record_string(record: Record) -> str:
    r"""Serializes a record string.

    Compatibility alias of :func:`to_hex_string`, kept under the name used
    by the Rust ``ihex`` crate so that code ported from it keeps working.
    New code should call :func:`to_hex_string`.
    """

    return to_hex_string(record)


def to_tokens(record: Record, end: str = '') -> Mapping[str, str]:
    r"""Splits a serialized record into named tokens.

    Args:
        record:
            Record to serialize.

        end (str):
            Line terminator token.

    Returns:
        dict: Token name to token string, in serialization order.

    Raises:
        :class:`WriterError`: The record cannot be represented.

    Examples:
        >>> from ihexcodec import ExtendedLinearAddress
        >>> from ihexcodec.records import to_tokens
        >>> tokens = to_tokens(ExtendedLinearAddress(0xABCD))
        >>> tokens['tag'], tokens['data'], tokens['checksum']
        ('04', 'ABCD', '82')
        >>> ''.join(tokens.values())
        ':02000004ABCD82'
    """

    header, payload = _fields_or_fail(record)
    return {
        'begin': START_CODE,
        'count': '%02X' % header[0],
        'address': hexlify(header[1:3]),
        'tag': '%02X' % header[3],
        'data': hexlify(payload),
        'checksum': '%02X' % checksum(header + payload),
        'end': end,
    }
