# -*- coding: utf-8 -*-
import pytest

from ihexcodec.checksum import checksum


def test_checksum_empty():
    assert checksum(b'') == 0x00
    assert checksum([]) == 0x00


def test_checksum_vectors():
    vector = [
        (0xFF, [0x00, 0x00, 0x00, 0x01]),
        (0xFC, [0x02, 0x00, 0x00, 0x04, 0xFF, 0xFF]),
        (0x2A, [0x04, 0x00, 0x00, 0x05, 0x00, 0x00, 0x00, 0xCD]),
        (0xA7, bytes.fromhex('0B0010006164647265737320676170')),
        (0x1E, bytes.fromhex('0300300002337A')),
    ]
    for expected, data in vector:
        assert checksum(data) == expected


def test_checksum_wraps_large_sums():
    assert checksum(b'\xFF' * 1000) == (0x100 - (0xFF * 1000) % 0x100) % 0x100
    assert checksum(b'\x80\x80') == 0x00


@pytest.mark.parametrize('data', [
    b'',
    b'\x00',
    b'\x01',
    b'\xFF',
    bytes(range(256)),
    b'Hello, World!',
    bytearray(b'\x12\x34\x56'),
])
def test_checksum_closes_sum(data):
    total = sum(data) + checksum(data)
    assert total % 0x100 == 0
    assert 0 <= checksum(data) <= 0xFF
