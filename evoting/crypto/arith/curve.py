"""
Points of the P-256 group, written additively.

11-04-2023
"""

from Crypto.PublicKey.ECC import EccPoint

from evoting.crypto.arith.params import CURVE_NAME, COORDINATE_SIZE, GX, GY, P, POINT_SIZE
from evoting.crypto.arith.scalar import Scalar
from evoting.crypto.exceptions import InvalidGroupElement, MalformedEncoding
from evoting.serialization import SerializableObject


class CurvePoint(SerializableObject):
    """
    Immutable wrapper around a pycryptodome EccPoint. The identity
    (point at infinity) is encoded as 64 zero bytes.
    """

    def __init__(self, point: EccPoint):
        object.__setattr__(self, "_point", point)

    def __setattr__(self, name, value):
        raise AttributeError("CurvePoint is immutable")

    @classmethod
    def identity(cls):
        return cls(EccPoint(0, 0, curve=CURVE_NAME))

    @classmethod
    def generator(cls):
        return cls(EccPoint(GX, GY, curve=CURVE_NAME))

    @classmethod
    def from_coordinates(cls, x: int, y: int):
        """
        Builds a point from affine coordinates, rejecting anything that
        is not on the curve. (0, 0) is the identity.
        """
        if not (0 <= x < P and 0 <= y < P):
            raise InvalidGroupElement("coordinate is not a field element")

        try:
            point = EccPoint(x, y, curve=CURVE_NAME)
        except ValueError as e:
            raise InvalidGroupElement("point is not on the curve") from e

        return cls(point)

    @property
    def x(self) -> int:
        return int(self._point.x)

    @property
    def y(self) -> int:
        return int(self._point.y)

    def is_identity(self):
        return self._point.is_point_at_infinity()

    def __add__(self, other):
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return CurvePoint(self._point + other._point)

    def __neg__(self):
        if self.is_identity():
            return self
        return CurvePoint(EccPoint(self.x, (-self.y) % P, curve=CURVE_NAME))

    def __sub__(self, other):
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self + (-other)

    def __mul__(self, k):
        if not isinstance(k, (Scalar, int)):
            return NotImplemented

        # EccPoint only multiplies by non-negative integers
        k = int(Scalar(k))
        if k == 0 or self.is_identity():
            return CurvePoint.identity()
        return CurvePoint(self._point * k)

    __rmul__ = __mul__

    def __eq__(self, other):
        if isinstance(other, CurvePoint):
            return (self.x, self.y) == (other.x, other.y)
        return NotImplemented

    def __hash__(self):
        return hash(("CurvePoint", self.x, self.y))

    def __repr__(self):
        return f"CurvePoint(x={self.x:#x}, y={self.y:#x})"

    def to_bytes(self) -> bytes:
        return self.x.to_bytes(COORDINATE_SIZE, "big") + self.y.to_bytes(COORDINATE_SIZE, "big")

    @classmethod
    def from_bytes(cls, data: bytes):
        if len(data) != POINT_SIZE:
            raise MalformedEncoding(cls.__name__, f"expected {POINT_SIZE} bytes, got {len(data)}")

        x = int.from_bytes(data[:COORDINATE_SIZE], "big")
        y = int.from_bytes(data[COORDINATE_SIZE:], "big")
        return cls.from_coordinates(x, y)

    def to_json(self):
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict) or set(data.keys()) != {"x", "y"}:
            raise MalformedEncoding(cls.__name__, "expected an object with fields x and y")

        x, y = data["x"], data["y"]
        if not all(isinstance(c, int) and not isinstance(c, bool) for c in (x, y)):
            raise MalformedEncoding(cls.__name__, "coordinates must be integers")

        return cls.from_coordinates(x, y)


def base_mul(k) -> CurvePoint:
    """
    Computes k·G.
    """
    return CurvePoint.generator() * k
