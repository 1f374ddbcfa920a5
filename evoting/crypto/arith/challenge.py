"""
128-bit challenges and the Fiat-Shamir challenge generator.

12-04-2023
"""

from Crypto.Hash import keccak

from evoting.crypto.arith.params import CHALLENGE_MODULUS, CHALLENGE_SIZE
from evoting.crypto.arith.scalar import Scalar
from evoting.crypto.exceptions import FieldRangeError, MalformedEncoding
from evoting.serialization import SerializableObject


class Challenge(SerializableObject):
    """
    Element of Z_{2^128}. Arithmetic wraps modulo 2^128.
    """

    def __init__(self, value=0):
        object.__setattr__(self, "value", int(value) % CHALLENGE_MODULUS)

    def __setattr__(self, name, value):
        raise AttributeError("Challenge is immutable")

    @classmethod
    def from_int(cls, value: int):
        if not 0 <= value < CHALLENGE_MODULUS:
            raise FieldRangeError("challenge is not below 2^128")
        return cls(value)

    def __add__(self, other):
        if not isinstance(other, Challenge):
            return NotImplemented
        return Challenge(self.value + other.value)

    def __sub__(self, other):
        if not isinstance(other, Challenge):
            return NotImplemented
        return Challenge(self.value - other.value)

    def __mul__(self, other):
        if not isinstance(other, Challenge):
            return NotImplemented
        return Challenge(self.value * other.value)

    def __neg__(self):
        return Challenge(-self.value)

    def __eq__(self, other):
        if isinstance(other, Challenge):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(("Challenge", self.value))

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"Challenge({self.value})"

    def scalar(self) -> Scalar:
        """
        Lifts the challenge into Z_q, 2^128 being smaller than q.
        """
        return Scalar(self.value)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(CHALLENGE_SIZE, "big")

    @classmethod
    def from_bytes(cls, data: bytes):
        if len(data) != CHALLENGE_SIZE:
            raise MalformedEncoding(cls.__name__, f"expected {CHALLENGE_SIZE} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    def to_json(self):
        return self.value

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, int) or isinstance(data, bool):
            raise MalformedEncoding(cls.__name__, "expected an integer")
        return cls.from_int(data)


def fiatshamir_challenge_generator(*elements) -> Challenge:
    """
    Hashes the fixed-width encodings of the transcript elements, in the
    order given, with Keccak-256. The challenge is the big-endian value of
    the last 16 bytes of the digest.
    """
    hash_obj = keccak.new(digest_bits=256)
    for element in elements:
        hash_obj.update(element.to_bytes())

    return Challenge.from_bytes(hash_obj.digest()[16:])
