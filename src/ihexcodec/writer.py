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

r"""Intel HEX object writer."""

from typing import Iterable
from typing import Sequence

from .errors import WriterError
from .errors import WriterErrorKind
from .records import EndOfFile
from .records import Record
from .records import to_hex_string


def count_end_of_file_records(records: Iterable[Record]) -> int:
    r"""Counts End Of File records.

    Args:
        records (list):
            Sequence of records.

    Returns:
        int: Number of End Of File records within `records`.
    """

    return sum(1 for record in records if isinstance(record, EndOfFile))


def create_object_file_representation(
    records: Sequence[Record],
    end: str = '\n',
) -> str:
    r"""Generates an Intel HEX object.

    The object must hold exactly one End Of File record, wherever it is.
    It is the caller's responsibility to avoid overlapping data ranges.

    Args:
        records (list):
            Records to serialize, in order.

        end (str):
            Line terminator, appended to each record string.

    Returns:
        str: Intel HEX object text.

    Raises:
        :class:`WriterError`: Wrong number of End Of File records, or the
            first record which could not be serialized.

    Examples:
        >>> from ihexcodec import Data, EndOfFile
        >>> from ihexcodec import create_object_file_representation
        >>> records = [Data(0x0010, b'Hello'), EndOfFile()]
        >>> print(create_object_file_representation(records), end='')
        :0500100048656C6C6FF7
        :00000001FF
        >>> create_object_file_representation([])
        Traceback (most recent call last):
            ...
        ihexcodec.errors.WriterError: Failed to generate IHEX object: Object does not contain an End Of File record.
    """

    records = list(records)
    eof_count = count_end_of_file_records(records)

    if not eof_count:
        raise WriterError(WriterErrorKind.MISSING_END_OF_FILE_RECORD)
    elif eof_count > 1:
        raise WriterError(WriterErrorKind.MULTIPLE_END_OF_FILE_RECORDS, eof_count)

    lines = [to_hex_string(record) + end for record in records]
    return ''.join(lines)
