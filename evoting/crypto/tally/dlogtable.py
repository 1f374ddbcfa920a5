"""
Bounded discrete logarithm in the P-256 group, baby-step giant-step.

27-04-2023
"""

import logging
import math

from evoting.crypto.arith import CurvePoint, Scalar
from evoting.crypto.exceptions import DecodeFailed

logger = logging.getLogger(__name__)


class DLogTable(object):
    """
    Recovers x from x·base, knowing 0 <= x <= bound.

    ``precompute`` stores the baby steps j·base for j in [0, m), with
    m = ceil(sqrt(bound + 1)); ``lookup`` then walks at most m giant
    steps of -m·base from the target.
    """

    def __init__(self, base: CurvePoint = None) -> None:
        self.base = base if base is not None else CurvePoint.generator()
        self.bound = None
        self.step = 0
        self.dlogs = {}

    def precompute(self, bound: int):
        if bound < 0:
            raise ValueError(f"bound must be non-negative, got {bound}")

        self.bound = bound
        self.step = math.isqrt(bound) + 1
        self.dlogs = {}

        value = CurvePoint.identity()
        for j in range(self.step):
            self.dlogs[value.to_bytes()] = j
            value = value + self.base

        logger.debug("dlog table: %d baby steps for bound %d", self.step, bound)
        return self

    def lookup(self, target: CurvePoint) -> int:
        if self.bound is None:
            raise ValueError("dlog table used before precompute")

        giant_step = -(self.base * Scalar(self.step))
        gamma = target
        for i in range(self.step):
            j = self.dlogs.get(gamma.to_bytes())
            if j is not None:
                result = i * self.step + j
                # the search space goes up to m^2 - 1, which may be past the bound
                if result > self.bound:
                    break
                return result
            gamma = gamma + giant_step

        raise DecodeFailed(self.bound)


def discrete_log(target: CurvePoint, bound: int) -> int:
    return DLogTable().precompute(bound).lookup(target)
