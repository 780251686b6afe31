import pytest

from minishell import memory


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memory.memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_limit():
    data = b"hello world"
    assert memory.memchr(data, ord("w"), 5) is None
    assert memory.memchr(data, ord("w"), len(data)) == data.index(b"w")


def test_memchr_uses_low_byte():
    data = bytes([1, 2, 255])
    assert memory.memchr(data, -1, 3) == 2


def test_memchr_rejects_overlong_length():
    with pytest.raises(ValueError):
        memory.memchr(b"abc", 0, 4)


def test_memcmp_equal_and_ordering():
    assert memory.memcmp(b"abc", b"abc", 3) == 0
    assert memory.memcmp(b"abc", b"abd", 3) < 0
    assert memory.memcmp(b"abd", b"abc", 3) > 0
    assert memory.memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_unsigned_and_antisymmetric():
    high, low = bytes([200]), bytes([1])
    assert memory.memcmp(high, low, 1) > 0
    assert memory.memcmp(high, low, 1) == -memory.memcmp(low, high, 1)


def test_memcpy_copies_prefix():
    dest = bytearray(b"xxxxxx")
    result = memory.memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abcxxx")


def test_memcpy_rejects_overflow():
    with pytest.raises(ValueError):
        memory.memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memory.memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memory.memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_zero_length_is_noop():
    buf = bytearray(b"abc")
    memory.memmove(buf, 1, 0, 0)
    assert buf == bytearray(b"abc")


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memory.memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memory.memmove(bytearray(4), -1, 0, 1)


def test_memset_fills_prefix():
    buf = bytearray(b"abcd")
    assert memory.memset(buf, ord("Z"), 2) is buf
    assert buf == bytearray(b"ZZcd")


def test_memset_keeps_low_byte_only():
    buf = bytearray(3)
    memory.memset(buf, 0x100 + ord("Q"), 3)
    assert buf == bytearray(b"QQQ")


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    memory.bzero(buf, 3)
    assert buf[:3] == bytearray(3)
    assert buf[3:] == bytearray(b"d")


def test_calloc_is_zeroed_with_product_size():
    buf = memory.calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        memory.calloc(-1, 4)