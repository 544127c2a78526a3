import pytest

from egoskit.cstrings import (
    atoi,
    atol,
    index,
    memchr,
    memcmp,
    rindex,
    strcmp,
    strncmp,
    strnlen,
    strstr,
)


def test_memchr_finds_first_occurrence():
    data = b"abcabc"
    assert memchr(data, "c", len(data)) == data.index(b"c")


def test_memchr_limited_to_n_bytes():
    assert memchr("abcdef", "e", 3) is None


def test_memchr_accepts_integer_byte():
    assert memchr(b"xyz", ord("z"), 3) == b"xyz".index(b"z")


def test_memchr_out_of_range_value_never_matches():
    assert memchr(b"\xff\xff", -1, 2) is None


def test_memchr_length_beyond_buffer():
    with pytest.raises(ValueError):
        memchr("ab", "a", 5)


def test_memcmp_equal_prefix():
    assert memcmp("abcx", "abcy", 3) == 0


def test_memcmp_is_antisymmetric():
    forward = memcmp("abcx", "abcy", 4)
    assert forward < 0
    assert memcmp("abcy", "abcx", 4) == -forward


def test_memcmp_does_not_stop_at_nul():
    assert memcmp(b"a\0b", b"a\0c", 3) < 0


def test_strcmp_equal():
    assert strcmp("abc", "abc") == 0


def test_strcmp_prefix_results():
    assert strcmp("ab", "abc") == -1
    assert strcmp("abc", "ab") == 1


def test_strcmp_difference_is_antisymmetric():
    forward = strcmp("abd", "abc")
    assert forward > 0
    assert strcmp("abc", "abd") == -forward


def test_strcmp_stops_at_nul():
    assert strcmp("ab\0x", "ab\0y") == 0


def test_strcmp_mixed_str_and_bytes():
    assert strcmp(b"abc", "abc") == 0


@pytest.mark.parametrize(
    "a, b, n, expected",
    [
        ("abcdef", "abcxyz", 3, 0),
        ("abc", "abd", 3, -1),
        ("abd", "abc", 3, 1),
        ("ab", "abc", 3, 1),
        ("abc", "ab", 3, -1),
        ("", "", 5, 0),
        ("abc", "xyz", 0, 0),
    ],
)
def test_strncmp(a, b, n, expected):
    assert strncmp(a, b, n) == expected


def test_strnlen_bounded():
    assert strnlen("hello", 3) == 3
    assert strnlen("hello", 10) == len("hello")


def test_strnlen_stops_at_nul():
    assert strnlen("he\0llo", 10) == len("he")


@pytest.mark.parametrize(
    "haystack, needle",
    [("hello world", "world"), ("aaa", "aa"), ("abc", "abc"), ("abc", ""), ("abcabc", "ca")],
)
def test_strstr_matches_find(haystack, needle):
    assert strstr(haystack, needle) == haystack.find(needle)


def test_strstr_missing():
    assert strstr("hello", "xyz") is None
    assert strstr("ab", "abc") is None


def test_strstr_empty_haystack_never_matches():
    assert strstr("", "") is None


def test_index_and_rindex():
    assert index("hello", "l") == "hello".find("l")
    assert rindex("hello", "l") == "hello".rfind("l")


def test_index_nul_gives_length():
    assert index("hello", 0) == len("hello")
    assert rindex("hello", 0) == len("hello")


def test_index_missing():
    assert index("hello", "z") is None
    assert rindex("hello", "z") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("\t+8x", 8),
        ("abc", 0),
        ("-", 0),
        ("+-5", 0),
        ("\n5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected
    assert atol(text) == expected


def test_atol_keeps_large_values():
    assert atol("9000000000") == 9000000000


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -(2**31)