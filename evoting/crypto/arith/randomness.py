"""
Randomness helpers.

A randomness source is any callable ``randfunc(n) -> bytes``, the
pycryptodome convention. It is always passed in by the caller.

12-04-2023
"""

import logging

from Crypto.Util import number

from evoting.crypto.arith.challenge import Challenge
from evoting.crypto.arith.curve import CurvePoint, base_mul
from evoting.crypto.arith.params import CHALLENGE_BITS, Q
from evoting.crypto.arith.scalar import Scalar
from evoting.crypto.exceptions import RandomnessFailure

logger = logging.getLogger(__name__)


def checked_randfunc(randfunc):
    """
    Wraps a randomness source so that its failures and short reads
    surface as RandomnessFailure.
    """
    if randfunc is None or not callable(randfunc):
        raise RandomnessFailure("no randomness source supplied")

    def read(n):
        try:
            data = randfunc(n)
        except RandomnessFailure:
            raise
        except Exception as e:
            logger.debug("randomness source failed: %s", e)
            raise RandomnessFailure(f"randomness source failed: {e}") from e

        if not isinstance(data, (bytes, bytearray)) or len(data) != n:
            raise RandomnessFailure(f"randomness source returned a short read, expected {n} bytes")

        return bytes(data)

    return read


def random_scalar(randfunc) -> Scalar:
    """
    Uniform non-zero scalar.
    """
    return Scalar(number.getRandomRange(1, Q, checked_randfunc(randfunc)))


def random_curve_point(randfunc):
    """
    Returns a uniform non-zero scalar r together with r·G.
    """
    r = random_scalar(randfunc)
    return r, base_mul(r)


def random_challenge(randfunc) -> Challenge:
    return Challenge(number.getRandomInteger(CHALLENGE_BITS, checked_randfunc(randfunc)))
