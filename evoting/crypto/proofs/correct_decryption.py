"""
Chaum-Pedersen proof of correct decryption.

Shows that log_G(pk) = log_A(B - n·G) for a tally ciphertext (A, B) and a
claimed count n, i.e. that the secret key behind pk decrypts the tally
to n.

22-04-2023
"""

import logging

from evoting.crypto.arith import (
    Challenge,
    CurvePoint,
    Scalar,
    base_mul,
    fiatshamir_challenge_generator,
    random_curve_point,
)
from evoting.crypto.arith.params import CHALLENGE_SIZE, Q, SCALAR_SIZE
from evoting.crypto.elgamal import EncryptedVote, KeyPair, encode_vote
from evoting.crypto.exceptions import MalformedEncoding, ProofInvalid
from evoting.serialization import SerializableObject

logger = logging.getLogger(__name__)


class ProofOfCorrectDecryption(SerializableObject):
    json_fields = {"s": Scalar, "c": Challenge}

    def __init__(self, s: Scalar = None, c: Challenge = None) -> None:
        self.s = s
        self.c = c

    def __eq__(self, other):
        if not isinstance(other, ProofOfCorrectDecryption):
            return NotImplemented
        return self.s == other.s and self.c == other.c

    def to_bytes(self) -> bytes:
        return self.s.to_bytes() + self.c.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes):
        if len(data) != SCALAR_SIZE + CHALLENGE_SIZE:
            raise MalformedEncoding(cls.__name__, f"expected {SCALAR_SIZE + CHALLENGE_SIZE} bytes, got {len(data)}")
        return cls(s=Scalar.from_bytes(data[:SCALAR_SIZE]), c=Challenge.from_bytes(data[SCALAR_SIZE:]))


def prove_correct_decryption(randfunc, encrypted_tally: EncryptedVote, key_pair: KeyPair) -> ProofOfCorrectDecryption:
    """
    Prover picks r and commits to U = r·A and V = r·G,
    c = H(pk, A, B, U, V) and s = r + c·sk.
    """
    r, v = random_curve_point(randfunc)
    u = encrypted_tally.a * r
    c = fiatshamir_challenge_generator(key_pair.pk, encrypted_tally.a, encrypted_tally.b, u, v)
    s = r + c.scalar() * key_pair.sk
    return ProofOfCorrectDecryption(s=s, c=c)


def verify_correct_decryption(proof: ProofOfCorrectDecryption, encrypted_tally: EncryptedVote, claimed_count: int, pk: CurvePoint):
    """
    Returns None when the proof holds, raises ProofInvalid otherwise.
    The claimed count must be a canonical scalar, otherwise n + k·q
    would verify as well.
    """
    if not isinstance(claimed_count, int) or isinstance(claimed_count, bool) or not 0 <= claimed_count < Q:
        raise ProofInvalid("ProofOfCorrectDecryption", "claimed count out of range")

    c = proof.c.scalar()
    d = encrypted_tally.b - encode_vote(claimed_count)
    u = encrypted_tally.a * proof.s - d * c
    v = base_mul(proof.s) - pk * c

    if fiatshamir_challenge_generator(pk, encrypted_tally.a, encrypted_tally.b, u, v) != proof.c:
        logger.debug("proof of correct decryption rejected for count %s", claimed_count)
        raise ProofInvalid("ProofOfCorrectDecryption")
