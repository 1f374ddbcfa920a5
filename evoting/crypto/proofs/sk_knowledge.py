"""
Schnorr proof of knowledge of an ElGamal secret key.

Prover picks r, sends V = r·G, gets c = H(pk, V) and answers
s = r + c·sk. Verifier recomputes V = s·G - c·pk and checks
that it hashes back to c.

18-04-2023
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
from evoting.crypto.arith.params import CHALLENGE_SIZE, SCALAR_SIZE
from evoting.crypto.exceptions import MalformedEncoding, ProofInvalid
from evoting.serialization import SerializableObject

logger = logging.getLogger(__name__)


class ProofOfSkKnowledge(SerializableObject):
    json_fields = {"s": Scalar, "c": Challenge}

    def __init__(self, s: Scalar = None, c: Challenge = None) -> None:
        self.s = s
        self.c = c

    def __eq__(self, other):
        if not isinstance(other, ProofOfSkKnowledge):
            return NotImplemented
        return self.s == other.s and self.c == other.c

    def to_bytes(self) -> bytes:
        return self.s.to_bytes() + self.c.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes):
        if len(data) != SCALAR_SIZE + CHALLENGE_SIZE:
            raise MalformedEncoding(cls.__name__, f"expected {SCALAR_SIZE + CHALLENGE_SIZE} bytes, got {len(data)}")
        return cls(s=Scalar.from_bytes(data[:SCALAR_SIZE]), c=Challenge.from_bytes(data[SCALAR_SIZE:]))


def prove_sk_knowledge(randfunc, pk: CurvePoint, sk: Scalar) -> ProofOfSkKnowledge:
    r, v = random_curve_point(randfunc)
    c = fiatshamir_challenge_generator(pk, v)
    s = r + c.scalar() * sk
    return ProofOfSkKnowledge(s=s, c=c)


def verify_sk_knowledge(proof: ProofOfSkKnowledge, pk: CurvePoint):
    """
    Returns None when the proof holds, raises ProofInvalid otherwise.
    """
    v = base_mul(proof.s) - pk * proof.c.scalar()
    if fiatshamir_challenge_generator(pk, v) != proof.c:
        logger.debug("proof of sk knowledge rejected")
        raise ProofInvalid("ProofOfSkKnowledge")
