"""
Scalars of Z_q, q being the order of the P-256 group.

11-04-2023
"""

from evoting.crypto.arith.params import Q, SCALAR_SIZE
from evoting.crypto.exceptions import FieldRangeError, MalformedEncoding
from evoting.serialization import SerializableObject

import base64
import binascii


class Scalar(SerializableObject):
    """
    Immutable element of Z_q. Any integer given to the constructor is
    reduced modulo q, use ``from_bytes`` for untrusted input.
    """

    def __init__(self, value=0):
        object.__setattr__(self, "value", int(value) % Q)

    def __setattr__(self, name, value):
        raise AttributeError("Scalar is immutable")

    def __add__(self, other):
        return Scalar(self.value + Scalar._value_of(other))

    __radd__ = __add__

    def __sub__(self, other):
        return Scalar(self.value - Scalar._value_of(other))

    def __rsub__(self, other):
        return Scalar(Scalar._value_of(other) - self.value)

    def __mul__(self, other):
        if not isinstance(other, (Scalar, int)):
            return NotImplemented
        return Scalar(self.value * Scalar._value_of(other))

    __rmul__ = __mul__

    def __neg__(self):
        return Scalar(-self.value)

    def __eq__(self, other):
        if isinstance(other, Scalar):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(("Scalar", self.value))

    def __int__(self):
        return self.value

    def __repr__(self):
        # values of this type may be secrets
        return "Scalar(...)"

    def is_zero(self):
        return self.value == 0

    @staticmethod
    def _value_of(other):
        return other.value if isinstance(other, Scalar) else int(other)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(SCALAR_SIZE, "big")

    @classmethod
    def from_bytes(cls, data: bytes):
        """
        Strict decoding: exactly 32 bytes holding a big-endian value below q.
        """
        if len(data) != SCALAR_SIZE:
            raise MalformedEncoding(cls.__name__, f"expected {SCALAR_SIZE} bytes, got {len(data)}")

        value = int.from_bytes(data, "big")
        if value >= Q:
            raise FieldRangeError("scalar is not below the group order")

        return cls(value)

    def to_json(self):
        return base64.b64encode(self.to_bytes()).decode("ascii")

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, str):
            raise MalformedEncoding(cls.__name__, "expected a base64 string")
        try:
            raw = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedEncoding(cls.__name__, "invalid base64") from e
        return cls.from_bytes(raw)
