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

r"""Intel HEX object reader."""

from dataclasses import dataclass
from typing import Iterator
from typing import List
from typing import Optional
from typing import Union

from .errors import ReaderError
from .records import EndOfFile
from .records import Record
from .records import from_record_string


@dataclass(frozen=True)
class ReaderOptions:
    r"""Reader configuration.

    Attributes:
        stop_after_first_error (bool):
            Stop iterating after yielding the first error, instead of skipping
            the malformed line.

        stop_after_eof (bool):
            Stop iterating after yielding the first End Of File record,
            ignoring any lines after it.
    """

    stop_after_first_error: bool = False
    stop_after_eof: bool = False


class Reader:
    r"""Lazy Intel HEX object reader.

    It iterates through the lines of `text`, parsing each non-blank one via
    :func:`from_record_string`.
    Each item is either a record object, or the :class:`ReaderError` instance
    describing why its line could not be parsed (yielded, not raised).

    The iteration cannot be restarted; create a new reader instead.

    Args:
        text (str):
            Intel HEX object text.

        options (:class:`ReaderOptions`):
            Reader configuration; ``None`` selects the defaults.

    Examples:
        >>> from ihexcodec import Reader, ReaderOptions
        >>> text = ':0300300002337A1E\n\n:00000001FF\n:0000'
        >>> for item in Reader(text):
        ...     print(repr(item))
        Data(offset=48, value=b'\x023z')
        EndOfFile()
        ReaderError(ReaderErrorKind.RECORD_TOO_SHORT, None)
        >>> list(Reader(text, ReaderOptions(stop_after_eof=True)))[-1]
        EndOfFile()
    """

    def __init__(
        self,
        text: str,
        options: Optional[ReaderOptions] = None,
    ):

        if options is None:
            options = ReaderOptions()

        self._text: str = text
        self._options: ReaderOptions = options
        self._position: int = 0
        self._lineno: int = 0
        self._finished: bool = False

    def __iter__(self) -> Iterator[Union[Record, ReaderError]]:

        return self

    def __next__(self) -> Union[Record, ReaderError]:

        text = self._text
        size = len(text)

        while not self._finished and self._position < size:
            start = self._position
            endex = text.find('\n', start)
            if endex < 0:
                endex = size
            self._position = endex + 1
            self._lineno += 1

            line = text[start:endex].strip()
            if not line:
                continue

            try:
                record = from_record_string(line)
            except ReaderError as error:
                error.lineno = self._lineno
                if self._options.stop_after_first_error:
                    self._finished = True
                return error

            if self._options.stop_after_eof and isinstance(record, EndOfFile):
                self._finished = True
            return record

        self._finished = True
        raise StopIteration

    @property
    def lineno(self) -> int:
        r"""int: Number of the last line consumed (1-based)."""

        return self._lineno

    @property
    def options(self) -> ReaderOptions:
        r""":class:`ReaderOptions`: Reader configuration."""

        return self._options


def read_records(
    text: str,
    options: Optional[ReaderOptions] = None,
) -> List[Record]:
    r"""Reads all the records of an Intel HEX object.

    Args:
        text (str):
            Intel HEX object text.

        options (:class:`ReaderOptions`):
            Reader configuration; ``None`` selects the defaults.

    Returns:
        list: Parsed records, in order.

    Raises:
        :class:`ReaderError`: The first malformed line.

    Examples:
        >>> from ihexcodec import read_records
        >>> read_records(':020000021200EA\n:00000001FF\n')
        [ExtendedSegmentAddress(segment=4608), EndOfFile()]
        >>> read_records(':020000021200EA\n00000001FF\n')
        Traceback (most recent call last):
            ...
        ihexcodec.errors.ReaderError: Failed to parse IHEX record: Record does not begin with a Start Code (':').
    """

    records = []

    for item in Reader(text, options):
        if isinstance(item, ReaderError):
            raise item
        records.append(item)

    return records
