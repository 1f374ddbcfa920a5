"""
EC-ElGamal encryption classes for yes/no votes.

Votes are encoded in the exponent, vote -> vote·G, so that adding two
ciphertexts yields an encryption of the sum of the votes.

14-04-2023
"""

import enum
import logging

from evoting.crypto.arith import CurvePoint, Scalar, base_mul, random_curve_point
from evoting.crypto.arith.params import POINT_SIZE, SCALAR_SIZE
from evoting.crypto.exceptions import MalformedEncoding
from evoting.crypto.tally.dlogtable import discrete_log
from evoting.serialization import SerializableList, SerializableObject

logger = logging.getLogger(__name__)


class Vote(int, enum.Enum):
    NO = 0
    YES = 1


def encode_vote(vote: int) -> CurvePoint:
    """
    encode(vote) = vote·G
    """
    return base_mul(Scalar(vote))


class KeyPair(SerializableObject):
    """
    ElGamal key pair with pk = sk·G. The secret key is never logged
    and only leaves this object through the explicit encoders.
    """

    json_fields = {"pk": CurvePoint, "sk": Scalar}

    def __init__(self, pk: CurvePoint = None, sk: Scalar = None) -> None:
        self.pk = pk
        self.sk = sk

    @classmethod
    def generate(cls, randfunc):
        """
        Generate an ElGamal keypair
        """
        sk, pk = random_curve_point(randfunc)
        logger.debug("generated key pair")
        return cls(pk=pk, sk=sk)

    def __eq__(self, other):
        if not isinstance(other, KeyPair):
            return NotImplemented
        return self.pk == other.pk and self.sk == other.sk

    def __repr__(self):
        return f"KeyPair(pk={self.pk!r})"

    def validate(self):
        if self.sk.is_zero():
            raise MalformedEncoding(self.__class__.__name__, "secret key must be nonzero")
        if base_mul(self.sk) != self.pk:
            raise MalformedEncoding(self.__class__.__name__, "public key does not match the secret key")
        return self

    def to_bytes(self) -> bytes:
        return self.pk.to_bytes() + self.sk.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes):
        if len(data) != POINT_SIZE + SCALAR_SIZE:
            raise MalformedEncoding(cls.__name__, f"expected {POINT_SIZE + SCALAR_SIZE} bytes, got {len(data)}")

        pk = CurvePoint.from_bytes(data[:POINT_SIZE])
        sk = Scalar.from_bytes(data[POINT_SIZE:])
        return cls(pk=pk, sk=sk).validate()

    @classmethod
    def from_json(cls, data):
        return super(KeyPair, cls).from_json(data).validate()


class EncryptedVote(SerializableObject):
    """
    ElGamal ciphertext (A, B) = (r·G, r·pk + encode(vote)).

    It can hold a single 0/1 vote or the homomorphic sum of any
    number of them.
    """

    json_fields = {"a": CurvePoint, "b": CurvePoint}

    def __init__(self, a: CurvePoint = None, b: CurvePoint = None) -> None:
        self.a = a if a is not None else CurvePoint.identity()
        self.b = b if b is not None else CurvePoint.identity()

    def __add__(self, other):
        if not isinstance(other, EncryptedVote):
            return NotImplemented
        return EncryptedVote(a=self.a + other.a, b=self.b + other.b)

    def __eq__(self, other):
        if not isinstance(other, EncryptedVote):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __repr__(self):
        return f"EncryptedVote(a={self.a!r}, b={self.b!r})"

    def decrypt(self, sk: Scalar, n: int) -> int:
        """
        Decrypts the ciphertext, n being an upper bound on the result.
        When the ciphertext is the sum of m 0/1 votes, m is such a bound.
        """
        target = self.b - self.a * sk
        return discrete_log(target, n)

    def to_bytes(self) -> bytes:
        return self.a.to_bytes() + self.b.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes):
        if len(data) != 2 * POINT_SIZE:
            raise MalformedEncoding(cls.__name__, f"expected {2 * POINT_SIZE} bytes, got {len(data)}")

        return cls(
            a=CurvePoint.from_bytes(data[:POINT_SIZE]),
            b=CurvePoint.from_bytes(data[POINT_SIZE:]),
        )


class ListOfEncryptedVotes(SerializableList):
    item_class = EncryptedVote


def encrypt(randfunc, vote: int, pk: CurvePoint):
    """
    Encrypts a vote and returns the ciphertext together with the
    randomness used. The randomness is only needed to build the proof of
    well-formedness and must be dropped right after.
    """
    r, a = random_curve_point(randfunc)
    b = pk * r + encode_vote(vote)
    return EncryptedVote(a=a, b=b), r


def add_encrypted_votes(first: EncryptedVote, second: EncryptedVote) -> EncryptedVote:
    return first + second
