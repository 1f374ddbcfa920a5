import pytest

from Crypto.Random import get_random_bytes

from evoting.crypto.elgamal import KeyPair


@pytest.fixture
def randfunc():
    return get_random_bytes


@pytest.fixture
def key_pair(randfunc):
    return KeyPair.generate(randfunc)


@pytest.fixture
def other_key_pair(randfunc):
    return KeyPair.generate(randfunc)


@pytest.fixture
def failing_randfunc():
    def read(n):
        raise OSError("entropy source unavailable")

    return read


@pytest.fixture
def short_randfunc():
    def read(n):
        return get_random_bytes(max(n - 1, 0))

    return read


def flip_bit(data: bytes, bit: int) -> bytes:
    flipped = bytearray(data)
    flipped[bit // 8] ^= 1 << (bit % 8)
    return bytes(flipped)
