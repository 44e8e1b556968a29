"""Byte-for-byte equality checks used as the fast path of every comparison."""


def bytes_identical(first: bytes, second: bytes) -> bool:
    if len(first) != len(second):
        return False
    return first == second


def first_mismatch_offset(first: bytes, second: bytes) -> int:
    """Offset of the first differing byte, or the shorter length when one is a prefix of the other."""
    max_len = min(len(first), len(second))
    for index in range(max_len):
        if first[index] != second[index]:
            return index
    return max_len
