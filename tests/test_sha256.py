import hashlib

import pytest

from egoskit.sha256 import Sha256, sha256


def test_vector_abc():
    h = Sha256()
    h.update(b"abc")
    assert h.hexdigest() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_vector_two_blocks():
    h = Sha256()
    h.update(b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq")
    assert h.hexdigest() == (
        "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
    )


def test_vector_million_a():
    h = Sha256()
    buf = b"a" * 1000
    for _ in range(1000):
        h.update(buf)
    assert h.hexdigest() == (
        "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0"
    )


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_standard_library(length):
    data = bytes(i % 251 for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


@pytest.mark.parametrize("step", [1, 3, 17, 64, 100])
def test_chunked_updates_equal_single_update(step):
    data = bytes(range(256)) * 3
    h = Sha256()
    for start in range(0, len(data), step):
        h.update(data[start:start + step])
    assert h.digest() == sha256(data)


def test_digest_does_not_disturb_state():
    h = Sha256(b"hello ")
    first = h.digest()
    assert h.digest() == first
    h.update(b"world")
    assert h.digest() == sha256(b"hello world")


def test_hexdigest_is_hex_of_digest():
    h = Sha256(b"abc")
    assert h.hexdigest() == h.digest().hex()
    assert len(h.digest()) == 32


def test_rejects_text():
    with pytest.raises(TypeError):
        Sha256().update("abc")