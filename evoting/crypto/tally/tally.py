"""
Homomorphic tally of encrypted yes/no votes.

27-04-2023
"""

import logging

from evoting.crypto.arith import Scalar
from evoting.crypto.elgamal import EncryptedVote
from evoting.crypto.exceptions import MalformedEncoding
from evoting.serialization import SerializableObject

logger = logging.getLogger(__name__)


class Tally(SerializableObject):
    """
    Decrypted result of an election.
    """

    def __init__(self, num_yes: int = 0, num_no: int = 0) -> None:
        self.num_yes = num_yes
        self.num_no = num_no

    @property
    def num_voters(self) -> int:
        return self.num_yes + self.num_no

    def __eq__(self, other):
        if not isinstance(other, Tally):
            return NotImplemented
        return (self.num_yes, self.num_no) == (other.num_yes, other.num_no)

    def __repr__(self):
        return f"Tally(num_yes={self.num_yes}, num_no={self.num_no})"

    def to_json(self):
        return {"num_yes": self.num_yes, "num_no": self.num_no}

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict) or set(data.keys()) != {"num_yes", "num_no"}:
            raise MalformedEncoding(cls.__name__, "expected an object with fields num_yes and num_no")
        if not all(isinstance(data[k], int) and not isinstance(data[k], bool) and data[k] >= 0 for k in ("num_yes", "num_no")):
            raise MalformedEncoding(cls.__name__, "counts must be non-negative integers")
        return cls(num_yes=data["num_yes"], num_no=data["num_no"])


class EncryptedTally(object):
    """
    Running homomorphic sum of encrypted votes, with the number of votes
    added so far. Tallies only grow; adding returns a new tally.

    A single accumulator is not meant to be shared between workers. Each
    worker keeps its own and the results are combined with ``merge``.
    """

    def __init__(self, votes: EncryptedVote = None, count: int = 0) -> None:
        if count < 0:
            raise ValueError("tally count must be non-negative")

        self.votes = votes if votes is not None else EncryptedVote()
        self.count = count

    def add(self, vote: EncryptedVote):
        return EncryptedTally(votes=self.votes + vote, count=self.count + 1)

    def merge(self, other):
        return EncryptedTally(votes=self.votes + other.votes, count=self.count + other.count)

    def decrypt(self, sk: Scalar) -> Tally:
        """
        Decrypts the tally using the number of votes as upper bound.
        """
        num_yes = self.votes.decrypt(sk, self.count)
        logger.debug("tally of %d votes decrypted", self.count)
        return Tally(num_yes=num_yes, num_no=self.count - num_yes)

    def __eq__(self, other):
        if not isinstance(other, EncryptedTally):
            return NotImplemented
        return self.votes == other.votes and self.count == other.count

    def __repr__(self):
        return f"EncryptedTally(count={self.count})"
