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

r"""Reader and writer errors.

Both error taxonomies are closed enumerations, so that callers can handle
every failure kind exhaustively.
"""

import enum
from typing import Any
from typing import Optional


@enum.unique
class ReaderErrorKind(enum.Enum):
    r"""Failure kinds while parsing a record string."""

    MISSING_START_CODE = 'Record does not begin with a Start Code (\':\')'
    r"""A record string does not begin with ``:``."""

    RECORD_TOO_SHORT = 'Record string is shorter than the smallest valid record'
    r"""The record is shorter than the smallest valid one."""

    RECORD_TOO_LONG = 'Record string is longer than the longest valid record'
    r"""The record exceeds the maximum size (255 bytes of payload)."""

    RECORD_NOT_EVEN_LENGTH = 'Record does not contain a whole number of bytes'
    r"""The record is not an even number of hex digits."""

    CONTAINS_INVALID_CHARACTERS = 'Record contains invalid characters'
    r"""The record is not all hexadecimal characters."""

    CHECKSUM_MISMATCH = 'The checksum for the record does not match'
    r"""The checksum did not match."""

    PAYLOAD_LENGTH_MISMATCH = 'The length of the payload does not match the length field'
    r"""The record is not the length it claims."""

    UNSUPPORTED_RECORD_TYPE = 'The record specifies an unsupported IHEX record type'
    r"""The record type is not supported."""

    INVALID_LENGTH_FOR_TYPE = 'The payload length is invalid for the IHEX record type'
    r"""The payload length does not match the record type."""


@enum.unique
class WriterErrorKind(enum.Enum):
    r"""Failure kinds while generating records or objects."""

    DATA_EXCEEDS_MAXIMUM_LENGTH = 'A record contains data too large to represent'
    r"""A data record holds more than 255 bytes."""

    MISSING_END_OF_FILE_RECORD = 'Object does not contain an End Of File record'
    r"""The object has no End Of File record."""

    MULTIPLE_END_OF_FILE_RECORDS = 'Object contains multiple End Of File records'
    r"""The object has more than one End Of File record."""

    SYNTHESIS_FAILED = 'Unable to synthesize record string'
    r"""The record string could not be built."""


class _CodecError(ValueError):

    PREFIX: str = ''

    def __init__(self, kind: enum.Enum, value: Any = None):

        super().__init__(kind, value)
        self.kind = kind
        self.value = value

    def __eq__(self, other: object) -> bool:

        if type(other) is not type(self):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:

        return hash((type(self), self.kind, self.value))

    def __repr__(self) -> str:

        return f'{type(self).__name__}({self.kind!s}, {self.value!r})'

    def __str__(self) -> str:

        text = f'{self.PREFIX}: {self.kind.value}'
        if self.value is not None:
            text += f' ({self.value!r})'
        return text + '.'


class ReaderError(_CodecError):
    r"""Record parsing error.

    Attributes:
        kind (:class:`ReaderErrorKind`):
            Failure kind.

        value:
            Offending value, if any (e.g. the unsupported record type code).

        lineno (int):
            1-based line number within the parsed text, if known.
    """

    PREFIX = 'Failed to parse IHEX record'

    def __init__(
        self,
        kind: ReaderErrorKind,
        value: Any = None,
        lineno: Optional[int] = None,
    ):

        super().__init__(kind, value)
        self.lineno: Optional[int] = lineno


class WriterError(_CodecError):
    r"""Record or object generation error.

    Attributes:
        kind (:class:`WriterErrorKind`):
            Failure kind.

        value:
            Offending value, if any (e.g. the data length, or the number of
            End Of File records).
    """

    PREFIX = 'Failed to generate IHEX object'
