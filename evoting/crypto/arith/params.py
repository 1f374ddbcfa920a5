"""
NIST P-256 domain parameters.

The curve has cofactor 1, so every point on the curve lies in the
prime-order group generated by G.
"""

CURVE_NAME = "p256"

# field prime
P = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF

# group order
Q = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

GX = 0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296
GY = 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5

SCALAR_SIZE = 32
COORDINATE_SIZE = 32
POINT_SIZE = 2 * COORDINATE_SIZE

CHALLENGE_BITS = 128
CHALLENGE_SIZE = CHALLENGE_BITS // 8
CHALLENGE_MODULUS = 1 << CHALLENGE_BITS
