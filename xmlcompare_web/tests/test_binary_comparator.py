import pytest

from xmlcompare_web.services.binary_comparator import bytes_identical, first_mismatch_offset


@pytest.mark.parametrize("data", [b"", b"a", b"<a/>\n", bytes(range(256))])
def test_same_bytes_are_identical(data):
    assert bytes_identical(data, bytes(data))


def test_length_mismatch_is_not_identical():
    assert not bytes_identical(b"abc", b"abcd")


def test_same_length_different_bytes():
    assert not bytes_identical(b"abc", b"abd")


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (b"abc", b"abd", 2),
        (b"xbc", b"abc", 0),
        (b"abc", b"abcdef", 3),   # prefix -> shorter length
        (b"", b"a", 0),
        (b"same", b"same", 4),
    ],
)
def test_first_mismatch_offset(a, b, expected):
    assert first_mismatch_offset(a, b) == expected
