import pytest


# fmt: off
@pytest.mark.parametrize(
    "a,b,expected",
    [
        (rb"\x7f", rb"\u007f", True),
        (rb"\x7f", rb"\u007fa", False),
        (rb"\x7fa", rb"\u007f", False),
        (rb"a\x7f", rb"\u007f", False),
        (rb"\x7f", rb"a\u007f", False),
        (rb"\x7fa", rb"\u007fb", False),
        (rb"a\x7f", rb"b\u007f", False),
        (rb"\x7f\u007f", rb"\u007f\x7f", True),
        (rb"\x7", rb"\u007f", False),
        (rb"abc", rb"abc", True),
        (b"", b"", True),
    ],
)
# fmt: on
def test_equal_tolerating_legacy_del__symmetric(tolerant_equal, a, b, expected):
    assert tolerant_equal(a, b) is expected
    assert tolerant_equal(b, a) is expected


def test_escaped_equal__accepts_identical_output(escaped_equal):
    assert escaped_equal(rb"abc\x7fdef", rb"abc\x7fdef")
