"""
Disjunctive Chaum-Pedersen proof that an encrypted vote holds 0 or 1.

For each branch b in {0, 1} the statement is "(A, B - b·G) is a DH
tuple for pk". The branch of the real vote is proven honestly, the
other one is simulated with a random challenge, and both challenges
are tied together by the Fiat-Shamir challenge

    c = H(pk, A, B, A0, B0, A1, B1),   c0 + c1 = c (mod 2^128)

The commitments always enter the hash in branch order, whichever
branch is the honest one.

20-04-2023
"""

import logging

from evoting.crypto.arith import (
    Challenge,
    CurvePoint,
    Scalar,
    base_mul,
    fiatshamir_challenge_generator,
    random_challenge,
    random_curve_point,
)
from evoting.crypto.arith.params import CHALLENGE_SIZE, SCALAR_SIZE
from evoting.crypto.elgamal import EncryptedVote, Vote, encode_vote
from evoting.crypto.exceptions import MalformedEncoding, ProofInvalid, UnsupportedPlaintext
from evoting.serialization import SerializableList, SerializableObject

logger = logging.getLogger(__name__)

BRANCHES = (Vote.NO, Vote.YES)


class ProofOfVoteWellFormedness(SerializableObject):
    json_fields = {"r0": Scalar, "r1": Scalar, "c0": Challenge, "c1": Challenge}

    def __init__(self, r0: Scalar = None, r1: Scalar = None, c0: Challenge = None, c1: Challenge = None) -> None:
        self.r0 = r0
        self.r1 = r1
        self.c0 = c0
        self.c1 = c1

    @classmethod
    def from_branches(cls, responses, challenges):
        return cls(r0=responses[0], r1=responses[1], c0=challenges[0], c1=challenges[1])

    @property
    def responses(self):
        return (self.r0, self.r1)

    @property
    def challenges(self):
        return (self.c0, self.c1)

    def __eq__(self, other):
        if not isinstance(other, ProofOfVoteWellFormedness):
            return NotImplemented
        return self.responses == other.responses and self.challenges == other.challenges

    def to_bytes(self) -> bytes:
        return self.r0.to_bytes() + self.r1.to_bytes() + self.c0.to_bytes() + self.c1.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes):
        size = 2 * SCALAR_SIZE + 2 * CHALLENGE_SIZE
        if len(data) != size:
            raise MalformedEncoding(cls.__name__, f"expected {size} bytes, got {len(data)}")

        offset = 2 * SCALAR_SIZE
        return cls(
            r0=Scalar.from_bytes(data[:SCALAR_SIZE]),
            r1=Scalar.from_bytes(data[SCALAR_SIZE:offset]),
            c0=Challenge.from_bytes(data[offset:offset + CHALLENGE_SIZE]),
            c1=Challenge.from_bytes(data[offset + CHALLENGE_SIZE:]),
        )


class ListOfProofsOfVoteWellFormedness(SerializableList):
    item_class = ProofOfVoteWellFormedness


def _branch_commitments(response: Scalar, challenge: Challenge, branch: int, encrypted_vote: EncryptedVote, pk: CurvePoint):
    """
    Commitments that make (response, challenge) an accepting transcript
    for the given branch:
        A_b = response·G - challenge·A
        B_b = response·pk - challenge·(B - b·G)
    """
    c = challenge.scalar()
    a = base_mul(response) - encrypted_vote.a * c
    b = pk * response - (encrypted_vote.b - encode_vote(branch)) * c
    return a, b


def _overall_challenge(pk, encrypted_vote, commitments) -> Challenge:
    (a0, b0), (a1, b1) = commitments
    return fiatshamir_challenge_generator(pk, encrypted_vote.a, encrypted_vote.b, a0, b0, a1, b1)


def prove_vote_well_formedness(randfunc, vote: int, encrypted_vote: EncryptedVote, r: Scalar, pk: CurvePoint):
    """
    Proves that encrypted_vote, built with randomness r, encrypts vote.
    Only 0 and 1 can be proven.
    """
    if vote not in BRANCHES:
        raise UnsupportedPlaintext(vote)

    honest = int(vote)
    cheat = 1 - honest

    responses = [None, None]
    challenges = [None, None]
    commitments = [None, None]

    # simulated transcript for the branch not taken
    challenges[cheat] = random_challenge(randfunc)
    responses[cheat], _ = random_curve_point(randfunc)
    commitments[cheat] = _branch_commitments(responses[cheat], challenges[cheat], cheat, encrypted_vote, pk)

    # real commitment for the branch taken
    r_prime, a_honest = random_curve_point(randfunc)
    commitments[honest] = (a_honest, pk * r_prime)

    challenge = _overall_challenge(pk, encrypted_vote, commitments)
    challenges[honest] = challenge - challenges[cheat]
    responses[honest] = r_prime + challenges[honest].scalar() * r

    return ProofOfVoteWellFormedness.from_branches(responses, challenges)


def verify_vote_well_formedness(proof: ProofOfVoteWellFormedness, encrypted_vote: EncryptedVote, pk: CurvePoint):
    """
    Returns None when the proof holds, raises ProofInvalid otherwise.
    """
    commitments = [
        _branch_commitments(response, challenge, branch, encrypted_vote, pk)
        for branch, response, challenge in zip(BRANCHES, proof.responses, proof.challenges)
    ]

    challenge = _overall_challenge(pk, encrypted_vote, commitments)
    if proof.c0 + proof.c1 != challenge:
        logger.debug("proof of vote well-formedness rejected")
        raise ProofInvalid("ProofOfVoteWellFormedness")
