# -*- coding: utf-8 -*-
import pytest

from ihexcodec.errors import WriterError
from ihexcodec.errors import WriterErrorKind
from ihexcodec.reader import read_records
from ihexcodec.records import Data
from ihexcodec.records import EndOfFile
from ihexcodec.records import ExtendedLinearAddress
from ihexcodec.records import ExtendedSegmentAddress
from ihexcodec.records import StartLinearAddress
from ihexcodec.records import StartSegmentAddress
from ihexcodec.writer import count_end_of_file_records
from ihexcodec.writer import create_object_file_representation

ADDRESS_GAP = b'address gap'

ALL_TYPES = [
    Data(0x0010, ADDRESS_GAP),
    ExtendedSegmentAddress(0x1200),
    StartSegmentAddress(cs=0x0000, ip=0x3800),
    ExtendedLinearAddress(0xFFFF),
    StartLinearAddress(0x000000CD),
    EndOfFile(),
]

ALL_TYPES_TEXT = (
    ':0B0010006164647265737320676170A7\n'
    ':020000021200EA\n'
    ':0400000300003800C1\n'
    ':02000004FFFFFC\n'
    ':04000005000000CD2A\n'
    ':00000001FF\n'
)


def _assert_error(records, kind, value=None):
    with pytest.raises(WriterError) as info:
        create_object_file_representation(records)
    assert info.value.kind is kind
    assert info.value.value == value


def test_count_end_of_file_records():
    assert count_end_of_file_records([]) == 0
    assert count_end_of_file_records(ALL_TYPES) == 1
    assert count_end_of_file_records([EndOfFile(), Data(0, b''), EndOfFile()]) == 2
    assert count_end_of_file_records(iter([EndOfFile()])) == 1


def test_eof_only():
    assert create_object_file_representation([EndOfFile()]) == ':00000001FF\n'


def test_all_types():
    assert create_object_file_representation(ALL_TYPES) == ALL_TYPES_TEXT


def test_hello():
    records = [Data(0x0010, b'Hello'), EndOfFile()]
    text = create_object_file_representation(records)
    assert text == ':0500100048656C6C6FF7\n:00000001FF\n'


def test_end():
    records = [ExtendedLinearAddress(0), EndOfFile()]
    text = create_object_file_representation(records, end='\r\n')
    assert text == ':020000040000FA\r\n:00000001FF\r\n'


def test_iterable_input():
    text = create_object_file_representation(iter(ALL_TYPES))
    assert text == ALL_TYPES_TEXT


def test_eof_position_irrelevant():
    records = [EndOfFile(), ExtendedLinearAddress(0)]
    text = create_object_file_representation(records)
    assert text == ':00000001FF\n:020000040000FA\n'

    records = [Data(0, b'a'), EndOfFile(), Data(1, b'b')]
    text = create_object_file_representation(records)
    assert text.splitlines()[1] == ':00000001FF'


def test_missing_end_of_file_record():
    kind = WriterErrorKind.MISSING_END_OF_FILE_RECORD
    _assert_error([], kind)
    _assert_error([ExtendedLinearAddress(0)], kind)
    _assert_error(ALL_TYPES[:-1], kind)


def test_multiple_end_of_file_records():
    kind = WriterErrorKind.MULTIPLE_END_OF_FILE_RECORDS
    _assert_error([EndOfFile(), Data(0x0010, ADDRESS_GAP), EndOfFile()], kind, 2)
    _assert_error([EndOfFile()] * 3, kind, 3)


def test_eof_checked_before_serialization():
    records = [Data(0, bytes(256))]
    _assert_error(records, WriterErrorKind.MISSING_END_OF_FILE_RECORD)


def test_data_exceeds_maximum_length():
    records = [Data(0, b'ok'), Data(0x0010, bytes(256)), Data(0, bytes(300)), EndOfFile()]
    _assert_error(records, WriterErrorKind.DATA_EXCEEDS_MAXIMUM_LENGTH, 256)


def test_max_data_length():
    records = [Data(0, bytes(255)), EndOfFile()]
    text = create_object_file_representation(records)
    assert text.startswith(':FF000000')


def test_synthesis_failed():
    records = [EndOfFile(), object()]
    _assert_error(records, WriterErrorKind.SYNTHESIS_FAILED)


def test_round_trip():
    assert read_records(create_object_file_representation(ALL_TYPES)) == ALL_TYPES
    assert create_object_file_representation(read_records(ALL_TYPES_TEXT)) == ALL_TYPES_TEXT
