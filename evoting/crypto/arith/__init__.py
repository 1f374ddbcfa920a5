from evoting.crypto.arith.scalar import Scalar
from evoting.crypto.arith.curve import CurvePoint, base_mul
from evoting.crypto.arith.challenge import Challenge, fiatshamir_challenge_generator
from evoting.crypto.arith.randomness import random_challenge, random_curve_point, random_scalar
