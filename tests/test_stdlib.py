import pytest

from egoskit.stdlib import Random, strtol, strtoul


def test_strtol_plain_decimal():
    assert strtol("123", 10) == (123, len("123"))


def test_strtol_sign_and_trailing_text():
    assert strtol("  -45abc", 10) == (-45, len("  -45"))


def test_strtol_space_after_sign():
    assert strtol("- 12", 10) == (-12, len("- 12"))


def test_strtol_no_digits():
    assert strtol("xyz", 10) == (0, 0)


@pytest.mark.parametrize(
    "text, base",
    [("ff", 16), ("FF", 16), ("777", 8), ("1011", 2), ("zz", 36), ("9876543210", 10)],
)
def test_strtol_agrees_with_int(text, base):
    assert strtol(text, base) == (int(text, base), len(text))


def test_strtol_stops_at_digit_too_large_for_base():
    assert strtol("129", 2) == (1, 1)


def test_strtol_default_base_is_decimal():
    assert strtol("  +77") == (77, len("  +77"))


def test_strtol_rejects_bad_base():
    with pytest.raises(ValueError):
        strtol("10", 1)
    with pytest.raises(ValueError):
        strtol("10", 37)


def test_strtoul_wraps_negative():
    assert strtoul("-1", 10) == (2**64 - 1, len("-1"))


def test_strtoul_positive_unchanged():
    assert strtoul("300", 10) == strtol("300", 10)


def test_rand_known_sequence_for_seed_one():
    rng = Random(1)
    assert [rng.rand() for _ in range(3)] == [41, 18467, 6334]


def test_rand_reproducible_and_reset_by_srand():
    rng = Random(1234)
    first = [rng.rand() for _ in range(20)]
    rng.srand(1234)
    assert [rng.rand() for _ in range(20)] == first
    assert [Random(1234).rand() for _ in range(1)] == first[:1]


def test_rand_range():
    rng = Random(99)
    values = [rng.rand() for _ in range(2000)]
    assert all(0 <= v <= 0x7FFF for v in values)
    assert len(set(values)) > 100


def test_default_seed_is_zero():
    a, b = Random(), Random(0)
    assert [a.rand() for _ in range(5)] == [b.rand() for _ in range(5)]


def test_seed_wraps_to_32_bits():
    a, b = Random(2**32 + 7), Random(7)
    assert [a.rand() for _ in range(5)] == [b.rand() for _ in range(5)]