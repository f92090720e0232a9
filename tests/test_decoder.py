from typing import Tuple

import pytest

from streamquote.constants import RUNE_ERROR
from streamquote.decoder import decode_rune


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"a", (0x61, 1)),
        (b"\x00", (0x00, 1)),
        (b"\x7f", (0x7F, 1)),
        ("é".encode(), (0xE9, 2)),
        ("☺".encode(), (0x263A, 3)),
        ("\U0001f600".encode(), (0x1F600, 4)),
        (b"\xef\xbf\xbd", (0xFFFD, 3)),
        (b"\xf4\x8f\xbf\xbf", (0x10FFFF, 4)),
        (b"\xed\x9f\xbf", (0xD7FF, 3)),
        (b"\xee\x80\x80", (0xE000, 3)),
        # only the first codepoint is decoded
        ("ab".encode(), (0x61, 1)),
        ("☺☺".encode(), (0x263A, 3)),
    ],
)
def test_decode_rune__valid(data: bytes, expected: Tuple[int, int]):
    assert decode_rune(data, 0, len(data)) == expected


@pytest.mark.parametrize(
    "data",
    [
        b"\xff",
        b"\xfe",
        b"\x80",
        b"\xbf",
        # overlong forms
        b"\xc0\xaf",
        b"\xc1\xbf",
        b"\xe0\x80\xaf",
        b"\xf0\x80\x80\xaf",
        # UTF-16 surrogates
        b"\xed\xa0\x80",
        b"\xed\xbf\xbf",
        # above U+10FFFF
        b"\xf4\x90\x80\x80",
        b"\xf5\x80\x80\x80",
        # bad continuation
        b"\xe2\x28\xa1",
        b"\xe2\x82\x28",
        b"\xf0\x9f\x98\x41",
        # truncated
        b"\xc3",
        b"\xe2\x82",
        b"\xf0\x9f\x98",
    ],
)
def test_decode_rune__invalid_consumes_one_byte(data: bytes):
    assert decode_rune(data, 0, len(data)) == (RUNE_ERROR, 1)


def test_decode_rune__respects_start_offset():
    data = b"xx\xc3\xa9"
    assert decode_rune(data, 2, 4) == (0xE9, 2)


def test_decode_rune__respects_end_limit():
    data = "\U0001f600".encode()
    assert decode_rune(data, 0, 3) == (RUNE_ERROR, 1)
    assert decode_rune(data, 0, 4) == (0x1F600, 4)


def test_decode_rune__empty_range():
    assert decode_rune(b"abc", 3, 3) == (RUNE_ERROR, 1)


def test_decode_rune__accepts_bytearray():
    data = bytearray("☺".encode())
    assert decode_rune(data, 0, len(data)) == (0x263A, 3)
